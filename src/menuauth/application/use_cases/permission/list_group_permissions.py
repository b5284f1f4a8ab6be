"""List group permissions use case."""

from menuauth.application.ports import PermissionChecker
from menuauth.domain.entities import PermissionGrant
from menuauth.domain.exceptions import NotFound, PermissionDenied
from menuauth.domain.value_objects import Capability


class ListGroupPermissionsUseCase:
    """List menu grants of a group."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        admin_menu_id: str,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._admin_menu_id = admin_menu_id

    async def execute(self, actor_id: str, group_id: str) -> list[PermissionGrant]:
        """List grants of group. Actor must have admin on the permission admin menu."""
        has_admin = await self._permission_checker.check(
            actor_id, self._admin_menu_id, Capability.ADMIN
        )
        if not has_admin:
            raise PermissionDenied("User does not have admin access to group permissions")

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound(f"Group not found: {group_id}")
            grants = await uow.grants.list_by_group(group_id)
        return sorted(grants, key=lambda g: g.menu_id)
