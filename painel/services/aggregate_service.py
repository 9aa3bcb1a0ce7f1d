"""Estatísticas agregadas de um conjunto de viagens."""

from __future__ import annotations

from typing import Sequence

from painel.core.logging import engine_logger
from painel.domain.models import AggregateResult, Trip


def _ratio(numerator: float, denominator: float) -> float:
    """Divisão protegida: denominador zero resulta em exatamente 0."""
    if denominator > 0:
        return numerator / denominator
    return 0.0


def aggregate(trips: Sequence[Trip]) -> AggregateResult:
    """
    Calcula totais e médias ponderadas sobre *trips*.

    As médias são razões entre somas (ex.: lucro total / tempo total), nunca a
    média das razões de cada viagem, para que viagens curtas não pesem mais.
    """
    total_rides = len(trips)
    if total_rides == 0:
        return AggregateResult.zero()

    total_earnings = float(sum(t.total_price for t in trips))
    total_profit = float(sum(t.lucro_liquido for t in trips))
    total_fuel_cost = float(sum(t.custo_total_combustivel for t in trips))
    total_time = float(sum(t.total_time_min for t in trips))
    total_km = float(sum(t.total_distance_km for t in trips))

    result = AggregateResult(
        total_earnings=total_earnings,
        total_profit=total_profit,
        total_fuel_cost=total_fuel_cost,
        total_time=total_time,
        total_rides=total_rides,
        total_km=total_km,
        avg_profit_per_hour=_ratio(total_profit, total_time) * 60,
        avg_profit_per_ride=total_profit / total_rides,
        avg_earnings_per_km=_ratio(total_earnings, total_km),
    )
    engine_logger.debug("Aggregate computed", rides=total_rides, total_time=total_time)
    return result
