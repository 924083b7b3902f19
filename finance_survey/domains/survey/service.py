"""Survey service - submission business logic."""

import logging

from finance_survey.domains.survey.catalog import counter_options, questions
from finance_survey.domains.survey.models import SurveyResponse
from finance_survey.domains.survey.repository import ResponseRepositoryInterface
from finance_survey.domains.survey.schemas import (
    CatalogResponse,
    QuestionSchema,
    SurveyResponseCreate,
)

logger = logging.getLogger(__name__)


class SurveyService:
    """Public survey form service."""

    def __init__(self, repository: ResponseRepositoryInterface):
        self._repo = repository

    def get_catalog(self) -> CatalogResponse:
        """Counters and questions in form order."""
        return CatalogResponse(
            counters=list(counter_options()),
            questions=[
                QuestionSchema(id=q.id.value, label=q.label, options=list(q.options))
                for q in questions()
            ],
        )

    async def submit_response(self, data: SurveyResponseCreate) -> SurveyResponse:
        """
        Store a validated form submission.

        Args:
            data: Form fields, already checked against the catalog

        Returns:
            Stored response with id and timestamp

        Raises:
            FetchError: If the store rejects the write
        """
        response = SurveyResponse(**data.model_dump())
        stored = await self._repo.insert_response(response)
        logger.info("Survey response %s stored for counter %s", stored.id, stored.counter)
        return stored
