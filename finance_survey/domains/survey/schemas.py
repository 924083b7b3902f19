"""Survey schemas for API requests/responses."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from finance_survey.domains.survey.catalog import counter_options, questions


class SurveyResponseCreate(BaseModel):
    """Schema for submitting the survey form."""

    counter: str = Field(..., description="Service counter visited")
    name: str = Field(..., min_length=1, max_length=100)
    medical_record_number: str = Field(..., min_length=1, max_length=50)
    phone: str = Field(..., min_length=1, max_length=20)

    informasi_keuangan: str
    kecepatan_pelayanan: str
    metode_pembayaran: str
    keramahan_petugas: str
    komunikasi_petugas: str

    comment: str | None = Field(None, max_length=1000, description="Criticism and suggestions")

    @field_validator("name", "medical_record_number", "phone", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("comment", mode="before")
    @classmethod
    def blank_comment_is_absent(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("counter")
    @classmethod
    def check_counter(cls, v: str) -> str:
        if v not in counter_options():
            raise ValueError(f"counter must be one of {list(counter_options())}")
        return v

    @model_validator(mode="after")
    def check_answers(self) -> "SurveyResponseCreate":
        for question in questions():
            answer = getattr(self, question.id.value)
            if answer not in question.options:
                raise ValueError(
                    f"{question.id.value} must be one of {list(question.options)}"
                )
        return self


class SurveyResponseCreated(BaseModel):
    """Acknowledgement returned after a successful submission."""

    id: str
    created_at: datetime
    message: str = "Survey submitted"


class QuestionSchema(BaseModel):
    """One catalog question as served to the form."""

    id: str
    label: str
    options: list[str]


class CatalogResponse(BaseModel):
    """Everything the public form needs to render."""

    counters: list[str]
    questions: list[QuestionSchema]
