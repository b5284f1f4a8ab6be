"""Fixtures for API tests."""

import pytest

from menuauth.application.use_cases.menu.get_user_accessible_menus import (
    GetUserAccessibleMenusUseCase,
)
from menuauth.application.use_cases.permission.list_group_permissions import (
    ListGroupPermissionsUseCase,
)
from menuauth.application.use_cases.permission.replace_group_permissions import (
    ReplaceGroupPermissionsUseCase,
)
from menuauth.infrastructure.permission.permission_checker import MenuPermissionChecker
from menuauth.interfaces.api.app import create_app
from menuauth.interfaces.api.middleware.auth import AuthMiddleware, RequestUser
from menuauth.interfaces.api.middleware.cors import CORSMiddleware

ALLOWED_ORIGIN = "http://localhost:3000"
ADMIN_MENU = "menu-management"


class AuthBypassMiddleware:
    """Middleware that sets context.user from the X-Test-User header for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = RequestUser(user_id=user_id) if user_id else None


def _build_app(uow_factory, authorization, middleware):
    permission_checker = MenuPermissionChecker(authorization)
    return create_app(
        authorization=authorization,
        list_group_permissions=ListGroupPermissionsUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
            admin_menu_id=ADMIN_MENU,
        ),
        replace_group_permissions=ReplaceGroupPermissionsUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=permission_checker,
            admin_menu_id=ADMIN_MENU,
        ),
        get_user_accessible_menus=GetUserAccessibleMenusUseCase(
            authorization=authorization,
            permission_checker=permission_checker,
            admin_menu_id=ADMIN_MENU,
        ),
        middleware=middleware,
    )


@pytest.fixture
def app(seeded_uow, uow_factory, authorization):
    """Falcon ASGI app over the seeded in-memory menu store."""
    return _build_app(
        uow_factory,
        authorization,
        [CORSMiddleware([ALLOWED_ORIGIN]), AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


@pytest.fixture
def token_client(seeded_uow, uow_factory, authorization):
    """Test client behind the real bearer-token middleware, without Keycloak."""
    from falcon.testing import TestClient
    return TestClient(_build_app(uow_factory, authorization, [AuthMiddleware(None)]))


def as_user(user_id: str) -> dict[str, str]:
    return {"X-Test-User": user_id}
