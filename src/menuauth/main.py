"""Application entry point and composition root."""

import logging

from menuauth import __version__
from menuauth.application.services.menu_authorization import MenuAuthorizationService
from menuauth.application.use_cases.menu.get_user_accessible_menus import (
    GetUserAccessibleMenusUseCase,
)
from menuauth.application.use_cases.permission.list_group_permissions import (
    ListGroupPermissionsUseCase,
)
from menuauth.application.use_cases.permission.replace_group_permissions import (
    ReplaceGroupPermissionsUseCase,
)
from menuauth.config import get_settings
from menuauth.infrastructure.auth.keycloak_provider import KeycloakProvider
from menuauth.infrastructure.membership.group_membership_resolver import (
    UserGroupMembershipResolver,
)
from menuauth.infrastructure.permission.permission_checker import MenuPermissionChecker
from menuauth.infrastructure.persistence.postgres.connection import create_pool
from menuauth.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from menuauth.interfaces.api.app import create_app
from menuauth.interfaces.api.middleware.auth import AuthMiddleware
from menuauth.interfaces.api.middleware.cors import CORSMiddleware
from menuauth.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from menuauth.interfaces.api.resources.health import HealthResource
from menuauth.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point - run the API server."""
    import uvicorn

    settings = get_settings()
    app = create_menuauth_app()
    logger.info("menuauth v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())


def create_menuauth_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)
    pool = create_pool(settings.database_url, max_size=settings.database_pool_max_size)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set, bearer tokens will be rejected")

    membership_resolver = UserGroupMembershipResolver(uow_factory)
    authorization = MenuAuthorizationService(
        unit_of_work_factory=uow_factory,
        membership_resolver=membership_resolver,
    )
    permission_checker = MenuPermissionChecker(authorization)
    list_group_permissions = ListGroupPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        admin_menu_id=settings.permission_admin_menu_id,
    )
    replace_group_permissions = ReplaceGroupPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        admin_menu_id=settings.permission_admin_menu_id,
    )
    get_user_accessible_menus = GetUserAccessibleMenusUseCase(
        authorization=authorization,
        permission_checker=permission_checker,
        admin_menu_id=settings.permission_admin_menu_id,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        authorization=authorization,
        list_group_permissions=list_group_permissions,
        replace_group_permissions=replace_group_permissions,
        get_user_accessible_menus=get_user_accessible_menus,
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )
