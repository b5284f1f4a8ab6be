"""Menu authorization service - menu trees and checks for one user."""

import logging

from menuauth.application.dto.menu_snapshot import MenuSnapshot
from menuauth.application.ports import GroupMembershipResolver
from menuauth.domain.entities import MenuTreeNode
from menuauth.domain.exceptions import Unauthenticated
from menuauth.domain.services import (
    build_menu_forest,
    merge_permissions,
    permission_for,
    prune_forest,
)
from menuauth.domain.value_objects import Capability, EffectivePermission, Principal

logger = logging.getLogger(__name__)


class MenuAuthorizationService:
    """Combines the tree builder and the permission merge engine.

    Each call resolves the caller's groups and loads a fresh snapshot; no
    state is kept between calls.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: GroupMembershipResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver

    async def full_tree_with_permissions(self, user_id: str) -> list[MenuTreeNode]:
        """All menus, disabled ones included, each annotated with the user's permission."""
        principal = await self._authenticate(user_id)
        snapshot = await self._load_snapshot(principal)
        forest = build_menu_forest(snapshot.menus)
        merged = merge_permissions(principal.group_ids, snapshot.grants)
        return forest.to_tree(annotate=lambda menu: permission_for(merged, menu.menu_id))

    async def accessible_tree(self, user_id: str) -> list[MenuTreeNode]:
        """Enabled menus the user can read, plus the enabled ancestors leading to them."""
        principal = await self._authenticate(user_id)
        snapshot = await self._load_snapshot(principal)
        forest = build_menu_forest(snapshot.menus)
        merged = merge_permissions(principal.group_ids, snapshot.grants)
        return prune_forest(
            forest,
            keep=lambda menu: permission_for(merged, menu.menu_id).can_read,
            gate=lambda menu: menu.enabled,
            annotate=lambda menu: permission_for(merged, menu.menu_id),
        )

    async def has_access(self, user_id: str, menu_id: str, capability: Capability) -> bool:
        """Single capability check. Unknown users and unknown menus are denied."""
        principal = await self._membership_resolver.resolve(user_id)
        if principal is None:
            logger.info("Access check for unauthenticated user %r denied", user_id)
            return False
        permission = await self._permission_for_principal(principal, menu_id)
        if permission is None:
            return False
        return permission.has(capability)

    async def permissions_for(self, user_id: str, menu_id: str) -> EffectivePermission | None:
        """Four-bit record for a menu, or None if the menu does not exist."""
        principal = await self._authenticate(user_id)
        return await self._permission_for_principal(principal, menu_id)

    async def active_tree(self, user_id: str) -> list[MenuTreeNode]:
        """Enabled menus only, without permission filtering. Caller must be authenticated."""
        await self._authenticate(user_id)
        async with self._uow_factory() as uow:
            menus = await uow.menus.list_enabled()
        return build_menu_forest(menus).to_tree()

    async def search(
        self,
        user_id: str,
        title: str | None = None,
        target: str | None = None,
    ) -> list[MenuTreeNode]:
        """Menus matching title or target; hits without a matching parent become roots."""
        await self._authenticate(user_id)
        async with self._uow_factory() as uow:
            menus = await uow.menus.search(title=title, target=target)
        return build_menu_forest(menus).to_tree()

    async def _authenticate(self, user_id: str) -> Principal:
        principal = await self._membership_resolver.resolve(user_id)
        if principal is None:
            logger.info("No valid principal for user %r", user_id)
            raise Unauthenticated(f"User {user_id!r} is not authenticated")
        return principal

    async def _load_snapshot(self, principal: Principal) -> MenuSnapshot:
        async with self._uow_factory() as uow:
            menus = await uow.menus.list_all()
            grants = []
            if principal.group_ids:
                grants = await uow.grants.list_for_groups(principal.group_ids)
        return MenuSnapshot(menus=menus, grants=grants)

    async def _permission_for_principal(
        self, principal: Principal, menu_id: str
    ) -> EffectivePermission | None:
        snapshot = await self._load_snapshot(principal)
        if not any(menu.menu_id == menu_id for menu in snapshot.menus):
            return None
        merged = merge_permissions(principal.group_ids, snapshot.grants)
        return permission_for(merged, menu_id)
