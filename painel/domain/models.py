"""
Modelos de domínio do painel de ganhos.
Value objects imutáveis: o motor nunca altera uma viagem e recria os
resultados derivados a cada cálculo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Trip:
    """
    Viagem concluída (corrida ou entrega).

    Os campos não são validados aqui: quem monta o histórico garante que
    tempos e distâncias não são negativos e que o timestamp é válido.
    """

    id: str
    timestamp: datetime
    total_price: Number
    lucro_liquido: Number
    custo_total_combustivel: Number
    total_time_min: Number
    total_distance_km: Number


@dataclass(frozen=True)
class AggregateResult:
    """Totais e médias ponderadas de um conjunto de viagens."""

    total_earnings: float
    total_profit: float
    total_fuel_cost: float
    total_time: float
    total_rides: int
    total_km: float
    avg_profit_per_hour: float
    avg_profit_per_ride: float
    avg_earnings_per_km: float

    @classmethod
    def zero(cls) -> "AggregateResult":
        return cls(0.0, 0.0, 0.0, 0.0, 0, 0.0, 0.0, 0.0, 0.0)

    @property
    def online_hours(self) -> int:
        """Horas inteiras do tempo online estimado."""
        return int(self.total_time // 60)

    @property
    def online_minutes(self) -> float:
        """Minutos restantes após as horas inteiras (fração preservada)."""
        return self.total_time % 60


@dataclass(frozen=True)
class ChartPoint:
    """Posição de uma viagem no canvas, para as duas séries."""

    index: int
    x: float
    y_earnings: float
    y_cost: float
    trip: Trip = field(repr=False)


@dataclass(frozen=True)
class ChartGeometry:
    """Geometria completa do gráfico de ganhos vs. custos."""

    width: float
    height: float
    padding: float
    min_value: float
    max_value: float
    points: Tuple[ChartPoint, ...]
    earnings_path: str
    cost_path: str

    @property
    def earnings_series(self) -> Tuple[Tuple[float, float], ...]:
        return tuple((p.x, p.y_earnings) for p in self.points)

    @property
    def cost_series(self) -> Tuple[Tuple[float, float], ...]:
        return tuple((p.x, p.y_cost) for p in self.points)

    @property
    def baseline(self) -> float:
        """Coordenada y do valor zero."""
        return self.height - self.padding


INSUFFICIENT_DATA_MESSAGE = "Dados insuficientes para exibir o gráfico (mín. 2 viagens)"


@dataclass(frozen=True)
class InsufficientData:
    """Sinal de que não há viagens suficientes para traçar uma linha."""

    points: int
    required: int = 2
    message: str = INSUFFICIENT_DATA_MESSAGE


ChartResult = Union[ChartGeometry, InsufficientData]

