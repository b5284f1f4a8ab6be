"""Menu snapshot DTO."""

from dataclasses import dataclass, field

from menuauth.domain.entities import MenuNode, PermissionGrant


@dataclass
class MenuSnapshot:
    """Point-in-time menu rows and the grants relevant to one principal."""

    menus: list[MenuNode]
    grants: list[PermissionGrant] = field(default_factory=list)
