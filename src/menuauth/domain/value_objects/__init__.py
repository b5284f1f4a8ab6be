"""Domain value objects."""

from menuauth.domain.value_objects.anomaly import AnomalyKind, DataAnomaly
from menuauth.domain.value_objects.capability import Capability
from menuauth.domain.value_objects.effective_permission import EffectivePermission
from menuauth.domain.value_objects.principal import Principal

__all__ = [
    "AnomalyKind",
    "Capability",
    "DataAnomaly",
    "EffectivePermission",
    "Principal",
]
