"""Group entity for group-based access control."""

from dataclasses import dataclass


@dataclass
class Group:
    """Group - role-like set of users sharing menu grants."""

    group_id: str
    group_name: str
    description: str | None = None
    level: int = 1
    is_active: bool = True
