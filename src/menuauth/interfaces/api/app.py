"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

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
from menuauth.interfaces.api.resources.group_permissions import GroupPermissionsResource
from menuauth.interfaces.api.resources.health import HealthResource
from menuauth.interfaces.api.resources.menus import (
    AccessibleMenusResource,
    ActiveMenusResource,
    MenuAccessResource,
    MenuPermissionsResource,
    MenusResource,
    MenuSearchResource,
    UserAccessibleMenusResource,
)

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    authorization: MenuAuthorizationService,
    list_group_permissions: ListGroupPermissionsUseCase,
    replace_group_permissions: ReplaceGroupPermissionsUseCase,
    get_user_accessible_menus: GetUserAccessibleMenusUseCase,
    health_resource: HealthResource | None = None,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)

    health = health_resource or HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/menus", MenusResource(authorization))
    app.add_route("/v1/menus/accessible", AccessibleMenusResource(authorization))
    app.add_route("/v1/menus/active", ActiveMenusResource(authorization))
    app.add_route("/v1/menus/search", MenuSearchResource(authorization))
    app.add_route("/v1/menus/{menu_id}/permissions", MenuPermissionsResource(authorization))
    app.add_route("/v1/menus/{menu_id}/access", MenuAccessResource(authorization))
    app.add_route(
        "/v1/users/{user_id}/menus/accessible",
        UserAccessibleMenusResource(get_user_accessible_menus),
    )
    app.add_route(
        "/v1/groups/{group_id}/permissions",
        GroupPermissionsResource(list_group_permissions, replace_group_permissions),
    )
    return app
