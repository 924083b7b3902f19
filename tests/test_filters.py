"""Tests for counter and date-range filtering."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from finance_survey.domains.dashboard.filters import FilterSpec, filter_responses

JAKARTA = timezone(timedelta(hours=7))


@pytest.fixture
def records(response_factory):
    return [
        response_factory(counter="Rawat Inap", created_at=datetime(2024, 1, 6, 8, 0, tzinfo=JAKARTA), id="a"),
        response_factory(counter="Rawat Jalan Umum", created_at=datetime(2024, 1, 5, 23, 0, tzinfo=JAKARTA), id="b"),
        response_factory(counter="Rawat Inap", created_at=datetime(2024, 1, 5, 0, 0, tzinfo=JAKARTA), id="c"),
        response_factory(counter="Rawat Jalan Eksekutif", created_at=datetime(2024, 1, 4, 12, 0, tzinfo=JAKARTA), id="d"),
    ]


def ids(records):
    return [r.id for r in records]


class TestFilterSpec:
    def test_defaults(self):
        spec = FilterSpec()
        assert spec.counter == "all"
        assert spec.date_from is None
        assert spec.date_to is None

    def test_rejects_unknown_counter(self):
        with pytest.raises(ValidationError):
            FilterSpec(counter="Apotek")

    def test_is_immutable(self):
        spec = FilterSpec()
        with pytest.raises(ValidationError):
            spec.counter = "Rawat Inap"


class TestFilterResponses:
    def test_default_spec_keeps_everything(self, records):
        assert filter_responses(records, FilterSpec(), JAKARTA) == records

    def test_counter_exact_match(self, records):
        result = filter_responses(records, FilterSpec(counter="Rawat Inap"), JAKARTA)
        assert ids(result) == ["a", "c"]

    def test_date_from_starts_at_midnight(self, records):
        result = filter_responses(records, FilterSpec(date_from=date(2024, 1, 5)), JAKARTA)
        assert ids(result) == ["a", "b", "c"]

    def test_date_to_is_inclusive_end_of_day(self, response_factory):
        record = response_factory(created_at=datetime(2024, 1, 5, 23, 0))

        same_day = filter_responses([record], FilterSpec(date_to=date(2024, 1, 5)), JAKARTA)
        day_before = filter_responses([record], FilterSpec(date_to=date(2024, 1, 4)), JAKARTA)

        assert same_day == [record]
        assert day_before == []

    def test_date_to_last_second(self, response_factory):
        last = response_factory(created_at=datetime(2024, 1, 5, 23, 59, 59, tzinfo=JAKARTA))
        after = response_factory(created_at=datetime(2024, 1, 6, 0, 0, 0, tzinfo=JAKARTA))

        result = filter_responses([last, after], FilterSpec(date_to=date(2024, 1, 5)), JAKARTA)
        assert result == [last]

    def test_combined_constraints(self, records):
        spec = FilterSpec(counter="Rawat Inap", date_from=date(2024, 1, 5), date_to=date(2024, 1, 5))
        assert ids(filter_responses(records, spec, JAKARTA)) == ["c"]

    def test_utc_timestamps_are_compared_in_local_time(self, response_factory):
        # 2024-01-04 18:30 UTC is 2024-01-05 01:30 in Jakarta
        record = response_factory(created_at=datetime(2024, 1, 4, 18, 30, tzinfo=timezone.utc))

        assert filter_responses([record], FilterSpec(date_from=date(2024, 1, 5)), JAKARTA) == [record]
        assert filter_responses([record], FilterSpec(date_to=date(2024, 1, 4)), JAKARTA) == []

    def test_inverted_range_matches_nothing(self, records):
        spec = FilterSpec(date_from=date(2024, 1, 6), date_to=date(2024, 1, 4))
        assert filter_responses(records, spec, JAKARTA) == []

    def test_output_is_ordered_subsequence(self, records):
        result = filter_responses(records, FilterSpec(date_to=date(2024, 1, 5)), JAKARTA)
        positions = [records.index(r) for r in result]
        assert positions == sorted(positions)

    def test_empty_input(self):
        assert filter_responses([], FilterSpec(counter="Rawat Inap"), JAKARTA) == []

    def test_idempotent(self, records):
        spec = FilterSpec(counter="Rawat Inap", date_from=date(2024, 1, 5))
        once = filter_responses(records, spec, JAKARTA)
        assert filter_responses(once, spec, JAKARTA) == once
