"""
Filtros de janela de tempo sobre o histórico de viagens.
O instante de referência (``now``) é sempre explícito.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional, Sequence

from painel.domain.models import Trip

_ONE_DAY = timedelta(days=1).total_seconds()


class TimeWindow(str, Enum):
    """Janelas relativas oferecidas nas abas do painel."""

    TODAY = "today"
    LAST_7_DAYS = "week"
    CURRENT_MONTH = "month"
    ALL = "all"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    TimeWindow.TODAY: "Hoje",
    TimeWindow.LAST_7_DAYS: "7 Dias",
    TimeWindow.CURRENT_MONTH: "Mês",
    TimeWindow.ALL: "Total",
}


def to_local(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Converte *value* para o calendário local do chamador.

    Datetimes com fuso são convertidos para *tz* (ou o fuso do host quando
    *tz* é None); datetimes naive já são considerados horário local.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(tz)


def to_instant(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Datetime com fuso, lendo valores naive como horário local de *tz*."""
    if value.tzinfo is not None:
        return value
    if tz is not None:
        return value.replace(tzinfo=tz)
    return value.astimezone()


def days_apart(now: datetime, then: datetime, tz: Optional[tzinfo] = None) -> int:
    """Distância absoluta em dias, arredondada para cima."""
    delta = abs(to_instant(now, tz) - to_instant(then, tz))
    return math.ceil(delta.total_seconds() / _ONE_DAY)


def in_window(
    trip: Trip,
    window: TimeWindow,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> bool:
    """Indica se *trip* pertence à janela *window* relativa a *now*."""
    if window is TimeWindow.ALL:
        return True

    if window is TimeWindow.LAST_7_DAYS:
        # Distância absoluta: viagens até 7 dias no futuro também entram.
        return days_apart(now, trip.timestamp, tz) <= 7

    trip_day = to_local(trip.timestamp, tz)
    today = to_local(now, tz)

    if window is TimeWindow.TODAY:
        return trip_day.date() == today.date()

    if window is TimeWindow.CURRENT_MONTH:
        return (trip_day.month, trip_day.year) == (today.month, today.year)

    return True


def filter_trips(
    trips: Sequence[Trip],
    window: TimeWindow,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[Trip]:
    """
    Filtra *trips* pela janela de tempo, preservando a ordem de entrada.

    Args:
        trips: Histórico de viagens
        window: Janela selecionada
        now: Instante de referência
        tz: Fuso do calendário local (None = fuso do host)

    Returns:
        Nova lista com as viagens da janela
    """
    window = TimeWindow(window)
    if window is TimeWindow.ALL:
        return list(trips)
    return [trip for trip in trips if in_window(trip, window, now, tz)]
