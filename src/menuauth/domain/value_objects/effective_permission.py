"""Effective permission - merged capability bits for one menu."""

from dataclasses import dataclass

from menuauth.domain.value_objects.capability import Capability


@dataclass(frozen=True)
class EffectivePermission:
    """Four independent capability bits. Join (``|``) is a bitwise OR."""

    can_read: bool = False
    can_write: bool = False
    can_delete: bool = False
    can_admin: bool = False

    @classmethod
    def none(cls) -> "EffectivePermission":
        """All capabilities denied."""
        return _NONE

    def __or__(self, other: "EffectivePermission") -> "EffectivePermission":
        if not isinstance(other, EffectivePermission):
            return NotImplemented
        return EffectivePermission(
            can_read=self.can_read or other.can_read,
            can_write=self.can_write or other.can_write,
            can_delete=self.can_delete or other.can_delete,
            can_admin=self.can_admin or other.can_admin,
        )

    def has(self, capability: Capability) -> bool:
        """Check a single capability bit."""
        match capability:
            case Capability.READ:
                return self.can_read
            case Capability.WRITE:
                return self.can_write
            case Capability.DELETE:
                return self.can_delete
            case Capability.ADMIN:
                return self.can_admin
        raise ValueError(f"Unknown capability: {capability}")

    def is_subset_of(self, other: "EffectivePermission") -> bool:
        """True when every capability granted here is also granted in other."""
        return (self | other) == other

    def to_dict(self) -> dict[str, bool]:
        return {
            "can_read": self.can_read,
            "can_write": self.can_write,
            "can_delete": self.can_delete,
            "can_admin": self.can_admin,
        }


_NONE = EffectivePermission()
