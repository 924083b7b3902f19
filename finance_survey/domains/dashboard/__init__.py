"""Admin dashboard domain: filtering, statistics, pagination and export."""

from finance_survey.domains.dashboard.aggregation import (
    AggregatedStat,
    QuestionSummary,
    aggregate,
    summarize,
)
from finance_survey.domains.dashboard.export import encode_csv, export_filename
from finance_survey.domains.dashboard.filters import FilterSpec, filter_responses
from finance_survey.domains.dashboard.pagination import Page, clamp_page, page_window, paginate
from finance_survey.domains.dashboard.service import DashboardService, build_dashboard
from finance_survey.domains.dashboard.state import DashboardState, apply_filters, go_to_page

__all__ = [
    "AggregatedStat",
    "DashboardService",
    "DashboardState",
    "FilterSpec",
    "Page",
    "QuestionSummary",
    "aggregate",
    "apply_filters",
    "build_dashboard",
    "clamp_page",
    "encode_csv",
    "export_filename",
    "filter_responses",
    "go_to_page",
    "page_window",
    "paginate",
    "summarize",
]
