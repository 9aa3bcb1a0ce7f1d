"""
Serviços de domínio separados das rotas.

Motor de agregação e projeção do painel de ganhos.
"""

from .aggregate_service import aggregate  # noqa: F401
from .chart_service import build_path, project  # noqa: F401
from .dashboard_service import DashboardService, DashboardSnapshot  # noqa: F401

__all__ = [
    "aggregate",
    "build_path",
    "DashboardService",
    "DashboardSnapshot",
    "project",
]
