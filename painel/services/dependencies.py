"""FastAPI dependency providers for service layer."""

from painel.core.config import get_settings
from painel.services.dashboard_service import DashboardService


def get_dashboard_service() -> DashboardService:
    return DashboardService(get_settings())
