"""Counter and date-range filtering over a response snapshot."""

from collections.abc import Sequence
from datetime import date, datetime, time, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, field_validator

from finance_survey.core.config import settings
from finance_survey.domains.survey.catalog import ALL_COUNTERS, counter_options
from finance_survey.domains.survey.models import SurveyResponse

END_OF_DAY = time(23, 59, 59)


@lru_cache
def local_timezone() -> ZoneInfo:
    """Timezone responses are submitted in."""
    return ZoneInfo(settings.timezone)


class FilterSpec(BaseModel):
    """Dashboard filter: one counter (or all) and an optional date range."""

    model_config = ConfigDict(frozen=True)

    counter: str = ALL_COUNTERS
    date_from: date | None = None
    date_to: date | None = None

    @field_validator("counter")
    @classmethod
    def check_counter(cls, v: str) -> str:
        if v != ALL_COUNTERS and v not in counter_options():
            raise ValueError(f"counter must be '{ALL_COUNTERS}' or one of {list(counter_options())}")
        return v


def _local(value: datetime, tz: tzinfo) -> datetime:
    # Naive timestamps are taken to be local already
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def filter_responses(
    records: Sequence[SurveyResponse],
    spec: FilterSpec,
    tz: tzinfo | None = None,
) -> list[SurveyResponse]:
    """
    Keep the records matching every constraint of ``spec``.

    The date range is inclusive on both ends: ``date_from`` starts at local
    midnight and ``date_to`` runs until 23:59:59 local time. Input order is
    preserved.
    """
    tz = tz or local_timezone()
    start = datetime.combine(spec.date_from, time.min, tzinfo=tz) if spec.date_from else None
    end = datetime.combine(spec.date_to, END_OF_DAY, tzinfo=tz) if spec.date_to else None

    matched = []
    for record in records:
        if spec.counter != ALL_COUNTERS and record.counter != spec.counter:
            continue
        if start or end:
            created = _local(record.created_at, tz)
            if start and created < start:
                continue
            if end and created > end:
                continue
        matched.append(record)
    return matched
