"""Repository ports."""

from menuauth.application.ports.repositories.grant_repository import GrantRepository
from menuauth.application.ports.repositories.group_repository import GroupRepository
from menuauth.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from menuauth.application.ports.repositories.menu_repository import MenuRepository

__all__ = [
    "GrantRepository",
    "GroupRepository",
    "MembershipRepository",
    "MenuRepository",
]
