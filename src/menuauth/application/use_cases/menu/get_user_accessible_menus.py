"""Get another user's accessible menus use case."""

from menuauth.application.ports import PermissionChecker
from menuauth.application.services.menu_authorization import MenuAuthorizationService
from menuauth.domain.entities import MenuTreeNode
from menuauth.domain.exceptions import NotFound, PermissionDenied, Unauthenticated
from menuauth.domain.value_objects import Capability


class GetUserAccessibleMenusUseCase:
    """Accessible menu tree of a target user, for administrators."""

    def __init__(
        self,
        authorization: MenuAuthorizationService,
        permission_checker: PermissionChecker,
        admin_menu_id: str,
    ) -> None:
        self._authorization = authorization
        self._permission_checker = permission_checker
        self._admin_menu_id = admin_menu_id

    async def execute(self, actor_id: str, target_user_id: str) -> list[MenuTreeNode]:
        """Actor must have admin on the permission admin menu."""
        has_admin = await self._permission_checker.check(
            actor_id, self._admin_menu_id, Capability.ADMIN
        )
        if not has_admin:
            raise PermissionDenied("User does not have admin access to user menus")

        try:
            return await self._authorization.accessible_tree(target_user_id)
        except Unauthenticated as e:
            raise NotFound(f"User not found or inactive: {target_user_id}") from e
