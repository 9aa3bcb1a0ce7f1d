"""
Modelos de domínio e filtros do painel de ganhos.
Camada de domínio independente de infraestrutura.
"""

from .models import (
    AggregateResult,
    ChartGeometry,
    ChartPoint,
    ChartResult,
    InsufficientData,
    Trip,
)
from .filters import TimeWindow, filter_trips

__all__ = [
    "AggregateResult",
    "ChartGeometry",
    "ChartPoint",
    "ChartResult",
    "InsufficientData",
    "TimeWindow",
    "Trip",
    "filter_trips",
]
