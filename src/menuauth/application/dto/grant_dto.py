"""Permission grant DTOs."""

from dataclasses import dataclass


@dataclass
class GrantInput:
    """Input row for replacing a group's menu permissions."""

    menu_id: str
    can_read: bool = False
    can_write: bool = False
    can_delete: bool = False
    can_admin: bool = False
