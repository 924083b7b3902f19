"""Dashboard service - filter, aggregate, paginate and export over one snapshot."""

import logging
from collections.abc import Sequence
from datetime import date, tzinfo

from finance_survey.domains.dashboard.aggregation import QuestionSummary, summarize, summarize_question
from finance_survey.domains.dashboard.export import default_columns, encode_csv, export_filename
from finance_survey.domains.dashboard.filters import FilterSpec, filter_responses, local_timezone
from finance_survey.domains.dashboard.pagination import Page, paginate, total_pages
from finance_survey.domains.dashboard.schemas import (
    AppliedFilters,
    DashboardResponse,
    ResponsePage,
    ResponseRow,
)
from finance_survey.domains.dashboard.state import DashboardState, go_to_page
from finance_survey.domains.survey.catalog import QuestionId, get_question, questions
from finance_survey.domains.survey.models import ANSWER_GETTERS, SurveyResponse
from finance_survey.domains.survey.repository import ResponseRepositoryInterface

logger = logging.getLogger(__name__)


def _to_row(record: SurveyResponse, row_number: int) -> ResponseRow:
    return ResponseRow(
        row_number=row_number,
        id=record.id,
        created_at=record.created_at,
        counter=record.counter,
        name=record.name,
        medical_record_number=record.medical_record_number,
        phone=record.phone,
        answers={q.id.value: ANSWER_GETTERS[q.id](record) for q in questions()},
        comment=record.comment,
    )


def _to_page_schema(page: Page[SurveyResponse]) -> ResponsePage:
    return ResponsePage(
        items=[_to_row(r, page.first_row_number + i) for i, r in enumerate(page.items)],
        page=page.page,
        page_size=page.page_size,
        total_items=page.total_items,
        total_pages=page.total_pages,
        window=page.window,
        has_previous=page.has_previous,
        has_next=page.has_next,
    )


def build_dashboard(
    records: Sequence[SurveyResponse],
    state: DashboardState,
    page_size: int,
    tz: tzinfo | None = None,
) -> tuple[DashboardState, DashboardResponse]:
    """
    Compute the dashboard for ``state`` over a snapshot.

    Returns the normalized state (page clamped to the filtered set) along
    with the rendered view.
    """
    filtered = filter_responses(records, state.filters, tz)
    state = go_to_page(state, state.page, total_pages(len(filtered), page_size))
    page = paginate(filtered, page_size, state.page)

    view = DashboardResponse(
        total_responses=len(records),
        filtered_responses=len(filtered),
        filters=AppliedFilters(**state.filters.model_dump()),
        summaries=summarize(filtered),
        responses=_to_page_schema(page),
    )
    return state, view


class DashboardService:
    """Admin dashboard service."""

    def __init__(
        self,
        repository: ResponseRepositoryInterface,
        page_size: int,
        tz: tzinfo | None = None,
    ):
        self._repo = repository
        self._page_size = page_size
        self._tz = tz or local_timezone()

    async def _filtered(self, filters: FilterSpec) -> list[SurveyResponse]:
        records = await self._repo.list_responses()
        return filter_responses(records, filters, self._tz)

    async def get_dashboard(self, state: DashboardState) -> DashboardResponse:
        """Load the snapshot once and render the view for ``state``."""
        records = await self._repo.list_responses()
        normalized, view = build_dashboard(records, state, self._page_size, self._tz)
        if normalized.page != state.page:
            logger.debug("Requested page %s clamped to %s", state.page, normalized.page)
        return view

    async def get_question_summary(
        self,
        question_id: str | QuestionId,
        filters: FilterSpec,
    ) -> QuestionSummary:
        """Chart data for one question over the filtered responses."""
        get_question(question_id)
        return summarize_question(await self._filtered(filters), question_id)

    async def export_csv(self, filters: FilterSpec, today: date) -> tuple[str, str]:
        """
        Encode the filtered responses as CSV.

        Returns:
            Tuple of (filename, document)
        """
        filtered = await self._filtered(filters)
        logger.info("Exporting %s survey responses", len(filtered))
        return export_filename(today), encode_csv(filtered, default_columns(self._tz))

