"""CSV export of the filtered responses.

Every field is wrapped in double quotes. Quotes inside a value are left as
they are unless ``escape_quotes`` is set, so by default a value containing
``"`` yields a malformed row.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from finance_survey.core.config import settings
from finance_survey.domains.dashboard.filters import local_timezone
from finance_survey.domains.survey.catalog import questions
from finance_survey.domains.survey.models import ANSWER_GETTERS, SurveyResponse

BOM = "\ufeff"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


@dataclass(frozen=True)
class ExportColumn:
    label: str
    render: Callable[[SurveyResponse], str]


def format_display_date(value: datetime, tz: tzinfo) -> str:
    """Short Indonesian date, e.g. ``5/1/2024`` for 5 January 2024."""
    local = value.replace(tzinfo=tz) if value.tzinfo is None else value.astimezone(tz)
    return f"{local.day}/{local.month}/{local.year}"


def default_columns(tz: tzinfo | None = None) -> list[ExportColumn]:
    """Date, counter, respondent details, one column per question, comment."""
    tz = tz or local_timezone()
    columns = [
        ExportColumn("Tanggal", lambda r: format_display_date(r.created_at, tz)),
        ExportColumn("Loket", lambda r: r.counter),
        ExportColumn("Nama", lambda r: r.name),
        ExportColumn("No MR", lambda r: r.medical_record_number),
        ExportColumn("No HP", lambda r: r.phone),
    ]
    columns.extend(ExportColumn(q.label, ANSWER_GETTERS[q.id]) for q in questions())
    columns.append(ExportColumn("Kritik & Saran", lambda r: r.comment or ""))
    return columns


def _quote(value: str, escape_quotes: bool) -> str:
    if escape_quotes:
        value = value.replace('"', '""')
    return f'"{value}"'


def encode_csv(
    records: Sequence[SurveyResponse],
    columns: Sequence[ExportColumn] | None = None,
    escape_quotes: bool | None = None,
) -> str:
    """
    Encode records as a BOM-prefixed CSV document.

    One header line plus one line per record, joined by ``\\n`` with no
    trailing newline.
    """
    if columns is None:
        columns = default_columns()
    if escape_quotes is None:
        escape_quotes = settings.csv_escape_quotes

    rows = [[c.label for c in columns]]
    rows.extend([c.render(record) for c in columns] for record in records)

    lines = [",".join(_quote(cell, escape_quotes) for cell in row) for row in rows]
    return BOM + "\n".join(lines)


def export_filename(today: date) -> str:
    """Download name, e.g. ``survey-results-2024-01-05.csv``."""
    return f"{settings.export_filename_prefix}-{today.isoformat()}.csv"
