"""
Projeção das viagens no canvas do gráfico de ganhos vs. custos.

Eixo x por posição (rank), não por tempo decorrido: viagens com um minuto
ou uma semana de intervalo ficam igualmente espaçadas. Eixo y linear,
ancorado em zero, com 10% de folga acima do maior valor das duas séries.
"""

from __future__ import annotations

from datetime import tzinfo
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Tuple

from painel.core.logging import engine_logger
from painel.domain.filters import to_instant
from painel.domain.models import (
    ChartGeometry,
    ChartPoint,
    ChartResult,
    InsufficientData,
    Trip,
)

MIN_POINTS = 2
HEADROOM = 1.1
MIN_VALUE = 0.0


def _fmt(value: float) -> str:
    """Número no formato do atributo ``d`` do SVG (sem ``.0`` para inteiros)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        # 1e-05 -> 0.00001
        text = format(Decimal(text), "f")
    return text


def build_path(coords: Iterable[Tuple[float, float]]) -> str:
    """Polyline ``M x0 y0 L x1 y1 ...`` ligando os pontos em ordem."""
    return " ".join(
        f"{'M' if i == 0 else 'L'} {_fmt(x)} {_fmt(y)}"
        for i, (x, y) in enumerate(coords)
    )


def chronological(trips: Sequence[Trip], tz: Optional[tzinfo] = None) -> list[Trip]:
    """
    Viagens da mais antiga para a mais recente (ordenação estável).

    Timestamps naive são lidos no fuso *tz*, como em ``filter_trips``.
    """
    return sorted(trips, key=lambda t: to_instant(t.timestamp, tz))


def project(
    trips: Sequence[Trip],
    width: float,
    height: float,
    padding: float,
    tz: Optional[tzinfo] = None,
) -> ChartResult:
    """
    Calcula as coordenadas das séries de ganhos (``total_price``) e custos
    (``custo_total_combustivel``) para um canvas *width* x *height*.

    Returns:
        ChartGeometry, ou InsufficientData com menos de duas viagens
    """
    if len(trips) < MIN_POINTS:
        return InsufficientData(points=len(trips), required=MIN_POINTS)

    ordered = chronological(trips, tz)
    n = len(ordered)

    max_value = max(
        max(t.total_price for t in ordered),
        max(t.custo_total_combustivel for t in ordered),
    ) * HEADROOM
    min_value = MIN_VALUE

    def get_x(index: int) -> float:
        return padding + (index / (n - 1)) * (width - padding * 2)

    def get_y(value: float) -> float:
        if max_value == 0:
            return height - padding
        return height - padding - ((value - min_value) / (max_value - min_value)) * (height - padding * 2)

    points = tuple(
        ChartPoint(
            index=i,
            x=get_x(i),
            y_earnings=get_y(trip.total_price),
            y_cost=get_y(trip.custo_total_combustivel),
            trip=trip,
        )
        for i, trip in enumerate(ordered)
    )

    geometry = ChartGeometry(
        width=width,
        height=height,
        padding=padding,
        min_value=min_value,
        max_value=max_value,
        points=points,
        earnings_path=build_path((p.x, p.y_earnings) for p in points),
        cost_path=build_path((p.x, p.y_cost) for p in points),
    )
    engine_logger.debug("Chart projected", points=n, max_value=max_value)
    return geometry
