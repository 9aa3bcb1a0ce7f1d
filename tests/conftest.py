from __future__ import annotations

from datetime import datetime, timezone

import pytest

from painel.domain.models import Trip

from factories import make_trip


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def two_trips() -> list[Trip]:
    return [
        make_trip(datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc), price=100, cost=20, profit=80, time_min=30, km=10),
        make_trip(datetime(2024, 5, 2, 10, 0, tzinfo=timezone.utc), price=200, cost=50, profit=150, time_min=60, km=20),
    ]
