"""Dashboard view state and its transitions.

The state is an immutable snapshot; every transition returns a new one.
Changing any filter field sends the view back to page 1.
"""

from pydantic import BaseModel, ConfigDict, Field

from finance_survey.domains.dashboard.filters import FilterSpec
from finance_survey.domains.dashboard.pagination import clamp_page


class DashboardState(BaseModel):
    """Current filter and page of an admin's dashboard view."""

    model_config = ConfigDict(frozen=True)

    filters: FilterSpec = Field(default_factory=FilterSpec)
    page: int = Field(1, ge=1)


def apply_filters(state: DashboardState, filters: FilterSpec) -> DashboardState:
    """Switch filters; the page resets to 1 only when something changed."""
    if filters == state.filters:
        return state
    return DashboardState(filters=filters, page=1)


def go_to_page(state: DashboardState, page: int, total_pages: int) -> DashboardState:
    """Jump to ``page``, kept within ``[1, total_pages]``."""
    return state.model_copy(update={"page": clamp_page(page, total_pages)})


def next_page(state: DashboardState, total_pages: int) -> DashboardState:
    return go_to_page(state, state.page + 1, total_pages)


def previous_page(state: DashboardState, total_pages: int) -> DashboardState:
    return go_to_page(state, state.page - 1, total_pages)
