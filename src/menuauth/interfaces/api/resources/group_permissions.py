"""Group permission API resources."""

import falcon.asgi

from menuauth.application.dto.grant_dto import GrantInput
from menuauth.application.use_cases.permission.list_group_permissions import (
    ListGroupPermissionsUseCase,
)
from menuauth.application.use_cases.permission.replace_group_permissions import (
    ReplaceGroupPermissionsUseCase,
)
from menuauth.domain.exceptions import NotFound, PermissionDenied, ValidationError
from menuauth.interfaces.api.serializers import grant_to_dict


_CAPABILITY_FIELDS = ("can_read", "can_write", "can_delete", "can_admin")


def _parse_grants(body: object) -> list[GrantInput]:
    """Parse {"items": [{"menu_id": ..., "can_read": ...}, ...]}."""
    if not isinstance(body, dict) or not isinstance(body.get("items"), list):
        raise ValidationError("Body must be an object with an 'items' list")
    grants = []
    for item in body["items"]:
        if not isinstance(item, dict):
            raise ValidationError("Each item must be an object")
        menu_id = item.get("menu_id")
        if not isinstance(menu_id, str) or not menu_id:
            raise ValidationError("Each item needs a non-empty 'menu_id'")
        flags = {}
        for field in _CAPABILITY_FIELDS:
            value = item.get(field, False)
            if not isinstance(value, bool):
                raise ValidationError(f"'{field}' of menu {menu_id!r} must be true or false")
            flags[field] = value
        grants.append(GrantInput(menu_id=menu_id, **flags))
    return grants


class GroupPermissionsResource:
    """GET/PUT /v1/groups/{group_id}/permissions - list and replace group grants."""

    def __init__(
        self,
        list_permissions: ListGroupPermissionsUseCase,
        replace_permissions: ReplaceGroupPermissionsUseCase,
    ) -> None:
        self._list = list_permissions
        self._replace = replace_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        group_id: str,
    ) -> None:
        """List menu grants of group."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            grants = await self._list.execute(user.user_id, group_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": [grant_to_dict(g) for g in grants]}
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        group_id: str,
    ) -> None:
        """Replace all menu grants of group."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            grants = _parse_grants(body)
            saved = await self._replace.execute(user.user_id, group_id, grants)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": [grant_to_dict(g) for g in saved]}
        resp.status = falcon.HTTP_200
