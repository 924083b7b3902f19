"""Public survey API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from finance_survey.db.mongodb import get_responses_collection
from finance_survey.domains.survey.repository import (
    MongoResponseRepository,
    ResponseRepositoryInterface,
)
from finance_survey.domains.survey.schemas import (
    CatalogResponse,
    SurveyResponseCreate,
    SurveyResponseCreated,
)
from finance_survey.domains.survey.service import SurveyService

router = APIRouter(prefix="/survey")


def get_response_repository() -> ResponseRepositoryInterface:
    """Response store backed by MongoDB."""
    return MongoResponseRepository(collection=get_responses_collection())


def get_survey_service(
    repository: Annotated[ResponseRepositoryInterface, Depends(get_response_repository)],
) -> SurveyService:
    return SurveyService(repository=repository)


@router.get(
    "/questions",
    response_model=CatalogResponse,
    summary="Get survey form",
    description="Counters and questions, in the order the form shows them.",
)
async def get_questions(
    service: Annotated[SurveyService, Depends(get_survey_service)],
):
    """Return the question catalog."""
    return service.get_catalog()


@router.post(
    "/responses",
    response_model=SurveyResponseCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Submit survey",
    description="Submit one filled-in survey form. No authentication required.",
)
async def submit_response(
    data: SurveyResponseCreate,
    service: Annotated[SurveyService, Depends(get_survey_service)],
):
    """Store a survey submission."""
    stored = await service.submit_response(data)
    return SurveyResponseCreated(id=stored.id, created_at=stored.created_at)
