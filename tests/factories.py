from __future__ import annotations

import itertools
from datetime import datetime

from painel.domain.models import Trip

_ids = itertools.count(1)


def make_trip(
    timestamp: datetime,
    price: float = 100.0,
    cost: float = 20.0,
    profit: float | None = None,
    time_min: float = 30.0,
    km: float = 10.0,
    trip_id: str | None = None,
) -> Trip:
    return Trip(
        id=trip_id or f"trip-{next(_ids)}",
        timestamp=timestamp,
        total_price=price,
        lucro_liquido=price - cost if profit is None else profit,
        custo_total_combustivel=cost,
        total_time_min=time_min,
        total_distance_km=km,
    )


def trip_payload(trip: Trip) -> dict:
    return {
        "id": trip.id,
        "timestamp": trip.timestamp.isoformat(),
        "total_price": trip.total_price,
        "lucro_liquido": trip.lucro_liquido,
        "custo_total_combustivel": trip.custo_total_combustivel,
        "total_time_min": trip.total_time_min,
        "total_distance_km": trip.total_distance_km,
    }
