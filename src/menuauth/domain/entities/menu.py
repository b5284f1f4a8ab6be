"""Menu entities - flat menu row and materialised tree node."""

from __future__ import annotations

from dataclasses import dataclass, field

from menuauth.domain.value_objects import EffectivePermission


@dataclass(frozen=True)
class MenuNode:
    """Menu - one row of the navigation menu table."""

    menu_id: str
    title: str
    target: str | None = None
    icon: str | None = None
    sort_order: int = 0
    enabled: bool = True
    parent_id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class MenuTreeNode:
    """Menu with its ordered children and, optionally, the caller's permission."""

    menu: MenuNode
    children: tuple[MenuTreeNode, ...] = ()
    permission: EffectivePermission | None = field(default=None)

    @property
    def menu_id(self) -> str:
        return self.menu.menu_id
