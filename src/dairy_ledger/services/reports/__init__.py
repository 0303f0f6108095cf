"""Ledger reporting helpers."""

from .summary import (
    DashboardTotals,
    MonthlySummary,
    SearchHit,
    compute_dashboard,
    compute_monthly_summary,
    parse_month,
    search,
)

__all__ = [
    "DashboardTotals",
    "MonthlySummary",
    "SearchHit",
    "compute_dashboard",
    "compute_monthly_summary",
    "parse_month",
    "search",
]
