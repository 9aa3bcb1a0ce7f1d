"""Dashboard composition: filter once, feed the same snapshot to stats and chart."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Tuple

from painel.core.config import Settings, get_settings
from painel.core.logging import engine_logger
from painel.domain.filters import TimeWindow, filter_trips
from painel.domain.models import AggregateResult, ChartResult, Trip
from painel.services.aggregate_service import aggregate
from painel.services.chart_service import project


@dataclass(frozen=True)
class DashboardSnapshot:
    """Filtro, estatísticas e gráfico calculados sobre o mesmo histórico."""

    window: TimeWindow
    now: datetime
    trips: Tuple[Trip, ...]
    stats: AggregateResult
    chart: ChartResult


class DashboardService:
    """Service for the earnings dashboard (time window, stats and chart)."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the service with the given settings (defaults to the global ones)."""
        self.settings = settings or get_settings()

    def current_time(self) -> datetime:
        """Instante atual com fuso, no calendário configurado."""
        tz = self.settings.TZINFO
        if tz is not None:
            return datetime.now(tz)
        return datetime.now().astimezone()

    def filter(
        self,
        trips: Sequence[Trip],
        window: TimeWindow,
        now: datetime,
    ) -> list[Trip]:
        """Viagens dentro da janela, na ordem recebida."""
        return filter_trips(trips, window, now, tz=self.settings.TZINFO)

    def summary(
        self,
        trips: Sequence[Trip],
        window: TimeWindow,
        now: datetime,
    ) -> AggregateResult:
        """Estatísticas da janela selecionada."""
        return aggregate(self.filter(trips, window, now))

    def chart(
        self,
        trips: Sequence[Trip],
        window: TimeWindow,
        now: datetime,
        width: Optional[float] = None,
        height: Optional[float] = None,
        padding: Optional[float] = None,
    ) -> ChartResult:
        """Geometria do gráfico da janela selecionada."""
        return self._project(self.filter(trips, window, now), width, height, padding)

    def build(
        self,
        trips: Sequence[Trip],
        window: TimeWindow,
        now: datetime,
        width: Optional[float] = None,
        height: Optional[float] = None,
        padding: Optional[float] = None,
    ) -> DashboardSnapshot:
        """Filtra uma única vez e calcula estatísticas e gráfico sobre o resultado."""
        window = TimeWindow(window)
        filtered = tuple(self.filter(trips, window, now))
        snapshot = DashboardSnapshot(
            window=window,
            now=now,
            trips=filtered,
            stats=aggregate(filtered),
            chart=self._project(filtered, width, height, padding),
        )
        engine_logger.info(
            "Dashboard built",
            window=window.value,
            received=len(trips),
            filtered=len(filtered),
        )
        return snapshot

    def _project(
        self,
        trips: Sequence[Trip],
        width: Optional[float],
        height: Optional[float],
        padding: Optional[float],
    ) -> ChartResult:
        return project(
            trips,
            self.settings.CHART_WIDTH if width is None else width,
            self.settings.CHART_HEIGHT if height is None else height,
            self.settings.CHART_PADDING if padding is None else padding,
            tz=self.settings.TZINFO,
        )
