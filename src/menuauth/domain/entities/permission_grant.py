"""Permission grant entity - group capabilities on a menu."""

from dataclasses import dataclass

from menuauth.domain.value_objects import EffectivePermission


@dataclass(frozen=True)
class PermissionGrant:
    """Grant - group has a set of capabilities on menu."""

    group_id: str
    menu_id: str
    can_read: bool = False
    can_write: bool = False
    can_delete: bool = False
    can_admin: bool = False

    @property
    def permission(self) -> EffectivePermission:
        return EffectivePermission(
            can_read=self.can_read,
            can_write=self.can_write,
            can_delete=self.can_delete,
            can_admin=self.can_admin,
        )
