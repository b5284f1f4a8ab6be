"""Permission merge engine - OR-fold of group grants per menu."""

import logging
from collections.abc import Iterable

from menuauth.domain.entities import PermissionGrant
from menuauth.domain.value_objects import AnomalyKind, DataAnomaly, EffectivePermission

logger = logging.getLogger(__name__)


def merge_permissions(
    group_ids: Iterable[str],
    grants: Iterable[PermissionGrant],
) -> dict[str, EffectivePermission]:
    """Effective permission per menu for a member of ``group_ids``.

    Only grants of the given groups contribute. Menus without any such grant
    are absent from the result and must be read as all-false. The fold is a
    join on a boolean lattice, so input order does not matter.
    """
    merged, _ = merge_permissions_with_anomalies(group_ids, grants)
    return merged


def merge_permissions_with_anomalies(
    group_ids: Iterable[str],
    grants: Iterable[PermissionGrant],
) -> tuple[dict[str, EffectivePermission], list[DataAnomaly]]:
    """Same as merge_permissions, also returning duplicate grant anomalies."""
    groups = frozenset(group_ids)
    merged: dict[str, EffectivePermission] = {}
    anomalies: list[DataAnomaly] = []
    if not groups:
        return merged, anomalies

    seen: set[tuple[str, str]] = set()
    for grant in grants:
        if grant.group_id not in groups:
            continue
        key = (grant.group_id, grant.menu_id)
        if key in seen:
            detail = f"group {grant.group_id!r} has more than one grant, merged"
            logger.warning(
                "Grant snapshot anomaly %s on %r: %s",
                AnomalyKind.DUPLICATE_GRANT.value,
                grant.menu_id,
                detail,
            )
            anomalies.append(
                DataAnomaly(kind=AnomalyKind.DUPLICATE_GRANT, menu_id=grant.menu_id, detail=detail)
            )
        seen.add(key)
        merged[grant.menu_id] = merged.get(grant.menu_id, EffectivePermission.none()) | grant.permission
    return merged, anomalies


def permission_for(
    merged: dict[str, EffectivePermission], menu_id: str
) -> EffectivePermission:
    """Lookup with the all-false default for menus without grants."""
    return merged.get(menu_id, EffectivePermission.none())
