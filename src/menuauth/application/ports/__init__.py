"""Application ports - interfaces for external adapters."""

from menuauth.application.ports.membership_resolver import GroupMembershipResolver
from menuauth.application.ports.permission_checker import PermissionChecker
from menuauth.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "GroupMembershipResolver",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
