"""Survey response repository for MongoDB."""

import logging
from abc import ABC, abstractmethod

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from finance_survey.core.exceptions import FetchError
from finance_survey.domains.survey.models import SurveyResponse

logger = logging.getLogger(__name__)


class ResponseRepositoryInterface(ABC):
    """Abstract repository interface for survey responses (Port)."""

    @abstractmethod
    async def insert_response(self, response: SurveyResponse) -> SurveyResponse:
        """Store a response and return it with its id assigned."""
        pass

    @abstractmethod
    async def list_responses(self) -> list[SurveyResponse]:
        """All responses, newest first."""
        pass


class MongoResponseRepository(ResponseRepositoryInterface):
    """MongoDB implementation of the response repository (Adapter)."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def insert_response(self, response: SurveyResponse) -> SurveyResponse:
        """Insert a new survey response."""
        doc = response.model_dump(by_alias=True, exclude={"id"})
        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to insert survey response: %s", e)
            raise FetchError("Failed to save survey response") from e
        return response.model_copy(update={"id": str(result.inserted_id)})

    async def list_responses(self) -> list[SurveyResponse]:
        """Load every response, newest first."""
        try:
            docs = await self._collection.find({}).sort("created_at", -1).to_list(length=None)
        except PyMongoError as e:
            logger.error("Failed to list survey responses: %s", e)
            raise FetchError() from e

        responses = []
        for doc in docs:
            doc["_id"] = str(doc["_id"])
            responses.append(SurveyResponse.model_validate(doc))
        return responses


class InMemoryResponseRepository(ResponseRepositoryInterface):
    """Process-local repository; the test suite swaps it in for MongoDB."""

    def __init__(self, responses: list[SurveyResponse] | None = None):
        self._responses: list[SurveyResponse] = list(responses or [])
        self._next_id = len(self._responses) + 1

    async def insert_response(self, response: SurveyResponse) -> SurveyResponse:
        stored = response.model_copy(update={"id": f"resp-{self._next_id}"})
        self._next_id += 1
        self._responses.append(stored)
        return stored

    async def list_responses(self) -> list[SurveyResponse]:
        return sorted(self._responses, key=lambda r: r.created_at, reverse=True)
