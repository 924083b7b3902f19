"""Admin dashboard API routes."""

from datetime import date, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from pydantic import ValidationError as PydanticValidationError

from finance_survey.core.config import settings
from finance_survey.core.exceptions import InvalidArgumentError, ValidationError
from finance_survey.dependencies.auth import CurrentAdmin
from finance_survey.domains.dashboard.aggregation import QuestionSummary
from finance_survey.domains.dashboard.export import CSV_MEDIA_TYPE
from finance_survey.domains.dashboard.filters import FilterSpec, local_timezone
from finance_survey.domains.dashboard.schemas import DashboardResponse
from finance_survey.domains.dashboard.service import DashboardService
from finance_survey.domains.dashboard.state import DashboardState
from finance_survey.domains.survey.catalog import ALL_COUNTERS
from finance_survey.domains.survey.repository import ResponseRepositoryInterface
from finance_survey.domains.survey.router import get_response_repository

router = APIRouter(prefix="/dashboard")


def get_dashboard_service(
    repository: Annotated[ResponseRepositoryInterface, Depends(get_response_repository)],
) -> DashboardService:
    return DashboardService(repository=repository, page_size=settings.rows_per_page)


def get_filters(
    counter: Annotated[str, Query(description="Counter name, or 'all'")] = ALL_COUNTERS,
    date_from: Annotated[date | None, Query(description="First day, inclusive")] = None,
    date_to: Annotated[date | None, Query(description="Last day, inclusive")] = None,
) -> FilterSpec:
    """Filter spec from query parameters."""
    try:
        return FilterSpec(counter=counter, date_from=date_from, date_to=date_to)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid filter",
            details={
                "errors": [
                    {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                    for err in e.errors()
                ]
            },
        )


Filters = Annotated[FilterSpec, Depends(get_filters)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Get dashboard",
    description="Totals, per-question statistics and one page of responses.",
)
async def get_dashboard(
    admin: CurrentAdmin,
    filters: Filters,
    service: DashboardServiceDep,
    page: Annotated[int, Query(description="1-based page number")] = 1,
):
    """Render the dashboard for the given filters and page."""
    if page < 1:
        raise InvalidArgumentError("page must be positive", details={"page": page})
    return await service.get_dashboard(DashboardState(filters=filters, page=page))


@router.get(
    "/statistics/{question_id}",
    response_model=QuestionSummary,
    summary="Get question statistics",
    description="Answer counts and percentages for one question.",
)
async def get_question_statistics(
    question_id: str,
    admin: CurrentAdmin,
    filters: Filters,
    service: DashboardServiceDep,
):
    """Chart data for one question."""
    return await service.get_question_summary(question_id, filters)


@router.get(
    "/export",
    summary="Export CSV",
    description="Filtered responses as a CSV attachment.",
    response_class=Response,
)
async def export_responses(
    admin: CurrentAdmin,
    filters: Filters,
    service: DashboardServiceDep,
):
    """Download the filtered responses."""
    today = datetime.now(local_timezone()).date()
    filename, document = await service.export_csv(filters, today)
    return Response(
        content=document.encode("utf-8"),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
