"""Question catalog for the finance counter satisfaction survey.

The order of questions, of each question's options and of the counters is
the order used in statistics, in the CSV export columns and on the form.
"""

from dataclasses import dataclass
from enum import Enum

from finance_survey.core.exceptions import InvalidArgumentError

ALL_COUNTERS = "all"


class QuestionId(str, Enum):
    """Closed set of question identifiers."""

    INFORMASI_KEUANGAN = "informasi_keuangan"
    KECEPATAN_PELAYANAN = "kecepatan_pelayanan"
    METODE_PEMBAYARAN = "metode_pembayaran"
    KERAMAHAN_PETUGAS = "keramahan_petugas"
    KOMUNIKASI_PETUGAS = "komunikasi_petugas"


@dataclass(frozen=True)
class SurveyQuestion:
    """One survey item with its closed, ordered set of answers."""

    id: QuestionId
    label: str
    options: tuple[str, ...]


COUNTER_OPTIONS: tuple[str, ...] = (
    "Rawat Jalan Umum",
    "Rawat Jalan Eksekutif",
    "Rawat Inap",
)

SURVEY_QUESTIONS: tuple[SurveyQuestion, ...] = (
    SurveyQuestion(
        id=QuestionId.INFORMASI_KEUANGAN,
        label="Apakah Anda mendapatkan informasi keuangan secara lengkap?",
        options=("Sangat Lengkap", "Lengkap", "Kurang Lengkap", "Tidak Lengkap"),
    ),
    SurveyQuestion(
        id=QuestionId.KECEPATAN_PELAYANAN,
        label="Apakah Anda puas dengan kecepatan waktu pelayanan keuangan kami?",
        options=("Sangat Puas", "Puas", "Kurang Puas", "Tidak Puas"),
    ),
    SurveyQuestion(
        id=QuestionId.METODE_PEMBAYARAN,
        label="Bagaimana pendapat Anda tentang metode pembayaran atas pelayanan keuangan kami?",
        options=("Sangat Mudah", "Mudah", "Kurang Mudah", "Tidak Mudah"),
    ),
    SurveyQuestion(
        id=QuestionId.KERAMAHAN_PETUGAS,
        label="Bagaimana pendapat Anda tentang keramahan petugas keuangan kami?",
        options=("Sangat Ramah", "Ramah", "Kurang Ramah", "Tidak Ramah"),
    ),
    SurveyQuestion(
        id=QuestionId.KOMUNIKASI_PETUGAS,
        label="Bagaimana pendapat Anda mengenai cara komunikasi/penyampaian petugas keuangan kami?",
        options=("Sangat Baik", "Baik", "Kurang Baik", "Tidak Baik"),
    ),
)

_QUESTIONS_BY_ID = {q.id.value: q for q in SURVEY_QUESTIONS}


def questions() -> tuple[SurveyQuestion, ...]:
    """All questions in report order."""
    return SURVEY_QUESTIONS


def counter_options() -> tuple[str, ...]:
    """Service counters a respondent can pick, in display order."""
    return COUNTER_OPTIONS


def get_question(question_id: str | QuestionId) -> SurveyQuestion:
    """
    Look a question up by id.

    Raises:
        InvalidArgumentError: If the id is not in the catalog
    """
    key = question_id.value if isinstance(question_id, QuestionId) else question_id
    question = _QUESTIONS_BY_ID.get(key)
    if question is None:
        raise InvalidArgumentError(
            f"Unknown question id '{key}'",
            details={"question_id": key, "allowed": list(_QUESTIONS_BY_ID)},
        )
    return question
