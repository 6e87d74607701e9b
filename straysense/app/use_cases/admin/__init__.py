"""
Admin Use Cases

Admin credential exchange and dashboard counters.
"""

from .admin_login_use_case import AdminLoginUseCase
from .dashboard_stats_use_case import DashboardStatsUseCase
from .dtos import AdminTokenResponse, DashboardStatsResponse

__all__ = [
    "AdminLoginUseCase",
    "DashboardStatsUseCase",
    "AdminTokenResponse",
    "DashboardStatsResponse",
]
