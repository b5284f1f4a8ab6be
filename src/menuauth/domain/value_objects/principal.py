"""Authenticated principal with resolved group memberships."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Principal:
    """User identity plus the groups it belongs to (possibly none)."""

    principal_id: str
    group_ids: frozenset[str] = field(default_factory=frozenset)
