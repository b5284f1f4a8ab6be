"""Menu API resources."""

import falcon.asgi

from menuauth.application.services.menu_authorization import MenuAuthorizationService
from menuauth.application.use_cases.menu.get_user_accessible_menus import (
    GetUserAccessibleMenusUseCase,
)
from menuauth.domain.exceptions import NotFound, PermissionDenied, Unauthenticated
from menuauth.domain.value_objects import Capability
from menuauth.interfaces.api.serializers import forest_to_dict


def _unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


class MenusResource:
    """GET /v1/menus - full menu tree annotated with the caller's permissions."""

    def __init__(self, authorization: MenuAuthorizationService) -> None:
        self._authorization = authorization

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Full tree, disabled menus included."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            forest = await self._authorization.full_tree_with_permissions(user.user_id)
        except Unauthenticated:
            _unauthorized(resp)
            return

        resp.media = forest_to_dict(forest)
        resp.status = falcon.HTTP_200


class AccessibleMenusResource:
    """GET /v1/menus/accessible - navigation tree visible to the caller."""

    def __init__(self, authorization: MenuAuthorizationService) -> None:
        self._authorization = authorization

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Pruned tree of readable menus."""
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            forest = await self._authorization.accessible_tree(user.user_id)
        except Unauthenticated:
            _unauthorized(resp)
            return

        resp.media = forest_to_dict(forest)
        resp.status = falcon.HTTP_200


class ActiveMenusResource:
    """GET /v1/menus/active - enabled menus without permission filtering."""

    def __init__(self, authorization: MenuAuthorizationService) -> None:
        self._authorization = authorization

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            forest = await self._authorization.active_tree(user.user_id)
        except Unauthenticated:
            _unauthorized(resp)
            return

        resp.media = forest_to_dict(forest)
        resp.status = falcon.HTTP_200


class MenuSearchResource:
    """GET /v1/menus/search?title=&url= - menus matching title or url."""

    def __init__(self, authorization: MenuAuthorizationService) -> None:
        self._authorization = authorization

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        title = req.get_param("title")
        target = req.get_param("url")
        try:
            forest = await self._authorization.search(user.user_id, title=title, target=target)
        except Unauthenticated:
            _unauthorized(resp)
            return

        resp.media = forest_to_dict(forest)
        resp.status = falcon.HTTP_200


class MenuPermissionsResource:
    """GET /v1/menus/{menu_id}/permissions - caller's effective permission on a menu."""

    def __init__(self, authorization: MenuAuthorizationService) -> None:
        self._authorization = authorization

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        menu_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            permission = await self._authorization.permissions_for(user.user_id, menu_id)
        except Unauthenticated:
            _unauthorized(resp)
            return

        if permission is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"Menu not found: {menu_id}"}
            return

        resp.media = {"menu_id": menu_id, **permission.to_dict()}
        resp.status = falcon.HTTP_200


class MenuAccessResource:
    """GET /v1/menus/{menu_id}/access?capability=read - single capability check."""

    def __init__(self, authorization: MenuAuthorizationService) -> None:
        self._authorization = authorization

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        menu_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        raw = req.get_param("capability") or Capability.READ.value
        try:
            capability = Capability(raw.lower())
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown capability: {raw}"}
            return

        allowed = await self._authorization.has_access(user.user_id, menu_id, capability)
        resp.media = {"menu_id": menu_id, "capability": capability.value, "allowed": allowed}
        resp.status = falcon.HTTP_200


class UserAccessibleMenusResource:
    """GET /v1/users/{user_id}/menus/accessible - another user's navigation tree (admin)."""

    def __init__(self, get_user_menus: GetUserAccessibleMenusUseCase) -> None:
        self._get_user_menus = get_user_menus

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            _unauthorized(resp)
            return

        try:
            forest = await self._get_user_menus.execute(user.user_id, user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = forest_to_dict(forest)
        resp.status = falcon.HTTP_200
