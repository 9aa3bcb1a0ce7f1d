"""Formatação pt-BR para os textos exibidos no painel."""

from __future__ import annotations

from typing import Optional


def _swap_separators(text: str) -> str:
    # 1,234.56 -> 1.234,56
    return text.replace(",", "X").replace(".", ",").replace("X", ".")


def format_currency(value: Optional[float]) -> str:
    """Formata valor como moeda brasileira (ex.: ``R$ 1.234,56``)."""
    if value is None:
        return "R$ 0,00"
    sign = "-" if value < 0 else ""
    return f"{sign}R$ " + _swap_separators(f"{abs(value):,.2f}")


def format_decimal(value: Optional[float], digits: int = 1) -> str:
    """Formata número com separadores pt-BR e *digits* casas decimais."""
    if value is None:
        return "0"
    return _swap_separators(f"{value:,.{digits}f}")


def format_duration(minutes: Optional[float]) -> str:
    """
    Formata minutos como ``2h 30min`` (ou só ``45min`` abaixo de uma hora).

    O total é arredondado para o minuto mais próximo antes da divisão.
    """
    if not minutes:
        return "0min"
    total = int(round(minutes))
    hours, mins = divmod(total, 60)
    if hours:
        return f"{hours}h {mins}min"
    return f"{mins}min"
