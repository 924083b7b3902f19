"""Survey response models for MongoDB.

Documents keep the field names the form has always submitted (``loket``,
``nama``, ``no_mr``, ``no_hp``, ``kritik_saran``); attributes use English
names through aliases.
"""

from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from finance_survey.domains.survey.catalog import QuestionId, get_question, questions


class SurveyResponse(BaseModel):
    """Submitted survey response document.

    Collection: settings.responses_collection
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str | None = Field(None, alias="_id")

    # Respondent
    counter: str = Field(..., alias="loket")
    name: str = Field(..., alias="nama")
    medical_record_number: str = Field(..., alias="no_mr")
    phone: str = Field(..., alias="no_hp")

    # Answers, one per catalog question
    informasi_keuangan: str
    kecepatan_pelayanan: str
    metode_pembayaran: str
    keramahan_petugas: str
    komunikasi_petugas: str

    comment: str | None = Field(None, alias="kritik_saran")

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


ANSWER_GETTERS: dict[QuestionId, Callable[[SurveyResponse], str]] = {
    QuestionId.INFORMASI_KEUANGAN: lambda r: r.informasi_keuangan,
    QuestionId.KECEPATAN_PELAYANAN: lambda r: r.kecepatan_pelayanan,
    QuestionId.METODE_PEMBAYARAN: lambda r: r.metode_pembayaran,
    QuestionId.KERAMAHAN_PETUGAS: lambda r: r.keramahan_petugas,
    QuestionId.KOMUNIKASI_PETUGAS: lambda r: r.komunikasi_petugas,
}


def answer_for(record: SurveyResponse, question_id: str | QuestionId) -> str:
    """Answer ``record`` holds for the given question."""
    question = get_question(question_id)
    return ANSWER_GETTERS[question.id](record)


def verify_answer_fields() -> None:
    """
    Check that every catalog question has exactly one answer field.

    Called at startup; a mismatch means the catalog and the document model
    drifted apart.

    Raises:
        RuntimeError: On any missing or extra mapping
    """
    catalog_ids = {q.id for q in questions()}
    mapped_ids = set(ANSWER_GETTERS)
    if catalog_ids != mapped_ids:
        raise RuntimeError(
            f"Answer mapping mismatch: missing={sorted(catalog_ids - mapped_ids)} "
            f"extra={sorted(mapped_ids - catalog_ids)}"
        )

    missing_fields = [
        q.id.value for q in questions() if q.id.value not in SurveyResponse.model_fields
    ]
    if missing_fields:
        raise RuntimeError(f"SurveyResponse lacks answer fields: {missing_fields}")
