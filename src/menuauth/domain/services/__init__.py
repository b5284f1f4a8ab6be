"""Domain services - pure menu tree and permission logic."""

from menuauth.domain.services.menu_tree import (
    MenuForest,
    build_menu_forest,
    prune_forest,
    sort_key,
)
from menuauth.domain.services.permission_merge import (
    merge_permissions,
    merge_permissions_with_anomalies,
    permission_for,
)

__all__ = [
    "MenuForest",
    "build_menu_forest",
    "merge_permissions",
    "merge_permissions_with_anomalies",
    "permission_for",
    "prune_forest",
    "sort_key",
]
