"""Per-question answer counts for the dashboard charts."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel

from finance_survey.domains.survey.catalog import QuestionId, get_question, questions
from finance_survey.domains.survey.models import ANSWER_GETTERS, SurveyResponse


class AggregatedStat(BaseModel):
    """How many filtered responses picked one option."""

    option: str
    count: int = 0
    percentage: float = 0.0


class QuestionSummary(BaseModel):
    """Chart data for one question."""

    question_id: str
    label: str
    total: int
    stats: list[AggregatedStat]


def percentage(count: int, total: int) -> float:
    """
    Share of ``total`` as a percentage with one decimal; 0 when nothing to share.

    Ties round up, so 1 of 16 is 6.3.
    """
    if total == 0:
        return 0.0
    exact = Decimal(count / total * 100)
    return float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def aggregate(
    records: Sequence[SurveyResponse],
    question_id: str | QuestionId,
) -> list[AggregatedStat]:
    """
    Count the answers to one question, one entry per option in catalog order.

    Raises:
        InvalidArgumentError: If the question is not in the catalog
    """
    question = get_question(question_id)
    answer = ANSWER_GETTERS[question.id]

    counts = dict.fromkeys(question.options, 0)
    for record in records:
        value = answer(record)
        if value in counts:
            counts[value] += 1

    total = len(records)
    return [
        AggregatedStat(option=option, count=count, percentage=percentage(count, total))
        for option, count in counts.items()
    ]


def summarize_question(
    records: Sequence[SurveyResponse],
    question_id: str | QuestionId,
) -> QuestionSummary:
    question = get_question(question_id)
    return QuestionSummary(
        question_id=question.id.value,
        label=question.label,
        total=len(records),
        stats=aggregate(records, question.id),
    )


def summarize(records: Sequence[SurveyResponse]) -> list[QuestionSummary]:
    """Summaries for every catalog question, in catalog order."""
    return [summarize_question(records, q.id) for q in questions()]
