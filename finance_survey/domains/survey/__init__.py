"""Survey submission domain."""

from finance_survey.domains.survey.catalog import (
    QuestionId,
    SurveyQuestion,
    counter_options,
    get_question,
    questions,
)
from finance_survey.domains.survey.models import SurveyResponse, answer_for
from finance_survey.domains.survey.service import SurveyService

__all__ = [
    "QuestionId",
    "SurveyQuestion",
    "SurveyResponse",
    "SurveyService",
    "answer_for",
    "counter_options",
    "get_question",
    "questions",
]
