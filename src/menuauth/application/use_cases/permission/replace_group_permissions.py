"""Replace group permissions use case."""

import logging

from menuauth.application.dto.grant_dto import GrantInput
from menuauth.application.ports import PermissionChecker
from menuauth.domain.entities import PermissionGrant
from menuauth.domain.exceptions import NotFound, PermissionDenied, ValidationError
from menuauth.domain.value_objects import Capability, EffectivePermission

logger = logging.getLogger(__name__)


class ReplaceGroupPermissionsUseCase:
    """Replace all menu grants of a group (delete all, then insert)."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        admin_menu_id: str,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._admin_menu_id = admin_menu_id

    async def execute(
        self,
        actor_id: str,
        group_id: str,
        grants: list[GrantInput],
    ) -> list[PermissionGrant]:
        """Replace grants of group. Rows for the same menu are OR-merged."""
        has_admin = await self._permission_checker.check(
            actor_id, self._admin_menu_id, Capability.ADMIN
        )
        if not has_admin:
            raise PermissionDenied("User does not have admin access to group permissions")

        merged: dict[str, EffectivePermission] = {}
        for row in grants:
            permission = EffectivePermission(
                can_read=row.can_read,
                can_write=row.can_write,
                can_delete=row.can_delete,
                can_admin=row.can_admin,
            )
            merged[row.menu_id] = merged.get(row.menu_id, EffectivePermission.none()) | permission

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound(f"Group not found: {group_id}")

            known = {menu.menu_id for menu in await uow.menus.list_all()}
            unknown = sorted(set(merged) - known)
            if unknown:
                raise ValidationError(f"Unknown menu ids: {', '.join(unknown)}")

            normalized = [
                PermissionGrant(group_id=group_id, menu_id=menu_id, **permission.to_dict())
                for menu_id, permission in merged.items()
            ]
            await uow.grants.replace_for_group(group_id, normalized)

        logger.info(
            "Replaced permissions of group %r: %d grants (actor %r)",
            group_id,
            len(normalized),
            actor_id,
        )
        return normalized
