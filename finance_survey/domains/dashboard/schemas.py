"""Dashboard schemas for API responses."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from finance_survey.domains.dashboard.aggregation import QuestionSummary


class ResponseRow(BaseModel):
    """One row of the responses table."""

    row_number: int = Field(..., description="1-based position within the filtered set")
    id: str | None
    created_at: datetime
    counter: str
    name: str
    medical_record_number: str
    phone: str
    answers: dict[str, str] = Field(..., description="Answer per question id, catalog order")
    comment: str | None = None


class ResponsePage(BaseModel):
    """Paginated responses table."""

    items: list[ResponseRow]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    window: list[int] = Field(..., description="Page buttons to display")
    has_previous: bool
    has_next: bool


class AppliedFilters(BaseModel):
    counter: str
    date_from: date | None = None
    date_to: date | None = None


class DashboardResponse(BaseModel):
    """Everything the admin dashboard renders for one state."""

    total_responses: int = Field(..., description="All responses in the store")
    filtered_responses: int = Field(..., description="Responses matching the filters")
    filters: AppliedFilters
    summaries: list[QuestionSummary]
    responses: ResponsePage
