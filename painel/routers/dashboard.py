"""Earnings dashboard endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, model_validator

from painel.core.config import get_settings
from painel.core.formatting import format_currency, format_decimal, format_duration
from painel.core.logging import api_logger
from painel.domain.filters import TimeWindow
from painel.domain.models import AggregateResult, ChartResult, InsufficientData, Trip
from painel.services.dashboard_service import DashboardService
from painel.services.dependencies import get_dashboard_service


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# -----------------------------------------------------------------------------
# Models (entrada)
# -----------------------------------------------------------------------------


class TripIn(BaseModel):
    """Viagem enviada pelo cliente, que é dono do histórico."""
    id: Union[str, int]
    timestamp: datetime
    total_price: float
    lucro_liquido: float
    custo_total_combustivel: float
    total_time_min: float
    total_distance_km: float

    def to_domain(self) -> Trip:
        return Trip(
            id=str(self.id),
            timestamp=self.timestamp,
            total_price=self.total_price,
            lucro_liquido=self.lucro_liquido,
            custo_total_combustivel=self.custo_total_combustivel,
            total_time_min=self.total_time_min,
            total_distance_km=self.total_distance_km,
        )


class DashboardIn(BaseModel):
    trips: List[TripIn] = Field(default_factory=list)
    window: TimeWindow = TimeWindow.ALL
    now: Optional[datetime] = Field(default=None, description="Instante de referência (padrão: agora)")

    def domain_trips(self) -> List[Trip]:
        return [t.to_domain() for t in self.trips]


class ChartIn(DashboardIn):
    width: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    padding: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _padding_fits_canvas(self) -> "ChartIn":
        settings = get_settings()
        width = settings.CHART_WIDTH if self.width is None else self.width
        height = settings.CHART_HEIGHT if self.height is None else self.height
        padding = settings.CHART_PADDING if self.padding is None else self.padding
        if 2 * padding >= min(width, height):
            raise ValueError("padding não deixa área desenhável no gráfico")
        return self


# -----------------------------------------------------------------------------
# Models (saída)
# -----------------------------------------------------------------------------


class WindowOut(BaseModel):
    id: str
    label: str


class SummaryOut(BaseModel):
    """Estatísticas da janela com textos já formatados para exibição."""
    total_earnings: float
    total_profit: float
    total_fuel_cost: float
    total_time: float
    total_rides: int
    total_km: float
    avg_profit_per_hour: float
    avg_profit_per_ride: float
    avg_earnings_per_km: float
    online_hours: int
    online_minutes: float
    display: Dict[str, str]


class ChartPointOut(BaseModel):
    index: int
    x: float
    y_earnings: float
    y_cost: float
    trip_id: str
    timestamp: datetime
    total_price: float
    custo_total_combustivel: float


class ChartGeometryOut(BaseModel):
    width: float
    height: float
    padding: float
    min_value: float
    max_value: float
    earnings_path: str
    cost_path: str
    points: List[ChartPointOut]


class ChartOut(BaseModel):
    status: str
    geometry: Optional[ChartGeometryOut] = None
    points: Optional[int] = None
    required: Optional[int] = None
    message: Optional[str] = None


class DashboardOut(BaseModel):
    window: str
    now: datetime
    filtered_rides: int
    stats: SummaryOut
    chart: ChartOut


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _summary_out(stats: AggregateResult) -> SummaryOut:
    return SummaryOut(
        total_earnings=stats.total_earnings,
        total_profit=stats.total_profit,
        total_fuel_cost=stats.total_fuel_cost,
        total_time=stats.total_time,
        total_rides=stats.total_rides,
        total_km=stats.total_km,
        avg_profit_per_hour=stats.avg_profit_per_hour,
        avg_profit_per_ride=stats.avg_profit_per_ride,
        avg_earnings_per_km=stats.avg_earnings_per_km,
        online_hours=stats.online_hours,
        online_minutes=stats.online_minutes,
        display={
            "total_earnings": format_currency(stats.total_earnings),
            "total_profit": format_currency(stats.total_profit),
            "total_fuel_cost": format_currency(stats.total_fuel_cost),
            "total_km": format_decimal(stats.total_km),
            "online_time": format_duration(stats.total_time),
            "avg_profit_per_hour": format_currency(stats.avg_profit_per_hour),
            "avg_profit_per_ride": format_currency(stats.avg_profit_per_ride),
            "avg_earnings_per_km": format_currency(stats.avg_earnings_per_km),
        },
    )


def _chart_out(chart: ChartResult) -> ChartOut:
    if isinstance(chart, InsufficientData):
        return ChartOut(
            status="insufficient_data",
            points=chart.points,
            required=chart.required,
            message=chart.message,
        )
    return ChartOut(
        status="ok",
        geometry=ChartGeometryOut(
            width=chart.width,
            height=chart.height,
            padding=chart.padding,
            min_value=chart.min_value,
            max_value=chart.max_value,
            earnings_path=chart.earnings_path,
            cost_path=chart.cost_path,
            points=[
                ChartPointOut(
                    index=p.index,
                    x=p.x,
                    y_earnings=p.y_earnings,
                    y_cost=p.y_cost,
                    trip_id=p.trip.id,
                    timestamp=p.trip.timestamp,
                    total_price=p.trip.total_price,
                    custo_total_combustivel=p.trip.custo_total_combustivel,
                )
                for p in chart.points
            ],
        ),
    )


def _resolve_now(body: DashboardIn, service: DashboardService) -> datetime:
    return body.now if body.now is not None else service.current_time()


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------


@router.get("/windows", response_model=list[WindowOut])
def list_windows():
    """Janelas de tempo disponíveis (abas do painel)."""
    return [WindowOut(id=w.value, label=w.label) for w in TimeWindow]


@router.post("/summary", response_model=SummaryOut)
def get_summary(
    body: DashboardIn,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Totais e médias ponderadas da janela."""
    now = _resolve_now(body, service)
    api_logger.info("Summary requested", window=body.window.value, trips=len(body.trips))
    stats = service.summary(body.domain_trips(), body.window, now)
    return _summary_out(stats)


@router.post("/chart", response_model=ChartOut)
def get_chart(
    body: ChartIn,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Geometria do gráfico de ganhos vs. custos da janela."""
    now = _resolve_now(body, service)
    api_logger.info("Chart requested", window=body.window.value, trips=len(body.trips))
    chart = service.chart(
        body.domain_trips(),
        body.window,
        now,
        width=body.width,
        height=body.height,
        padding=body.padding,
    )
    return _chart_out(chart)


@router.post("", response_model=DashboardOut)
def get_dashboard(
    body: ChartIn,
    service: DashboardService = Depends(get_dashboard_service),
):
    """Estatísticas e gráfico calculados sobre o mesmo recorte do histórico."""
    now = _resolve_now(body, service)
    api_logger.info("Dashboard requested", window=body.window.value, trips=len(body.trips))
    snapshot = service.build(
        body.domain_trips(),
        body.window,
        now,
        width=body.width,
        height=body.height,
        padding=body.padding,
    )
    return DashboardOut(
        window=snapshot.window.value,
        now=snapshot.now,
        filtered_rides=len(snapshot.trips),
        stats=_summary_out(snapshot.stats),
        chart=_chart_out(snapshot.chart),
    )
