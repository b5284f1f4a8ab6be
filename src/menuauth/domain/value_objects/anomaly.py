"""Data anomalies found in menu and grant snapshots."""

from dataclasses import dataclass
from enum import StrEnum


class AnomalyKind(StrEnum):
    """Kinds of recoverable snapshot inconsistencies."""

    DUPLICATE_MENU_ID = "duplicate_menu_id"
    SELF_PARENT = "self_parent"
    ORPHAN = "orphan"
    CYCLE = "cycle"
    DUPLICATE_GRANT = "duplicate_grant"


@dataclass(frozen=True)
class DataAnomaly:
    """A recoverable inconsistency and the fallback that was applied."""

    kind: AnomalyKind
    menu_id: str
    detail: str = ""
