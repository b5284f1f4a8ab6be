"""Domain entities."""

from menuauth.domain.entities.group import Group
from menuauth.domain.entities.menu import MenuNode, MenuTreeNode
from menuauth.domain.entities.permission_grant import PermissionGrant

__all__ = [
    "Group",
    "MenuNode",
    "MenuTreeNode",
    "PermissionGrant",
]
