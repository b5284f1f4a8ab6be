"""Menu capabilities for group-based access control."""

from enum import StrEnum


class Capability(StrEnum):
    """Actions a group can be granted on a menu."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    ADMIN = "admin"
