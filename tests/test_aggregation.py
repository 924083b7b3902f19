"""Tests for per-question answer counts."""

import pytest

from finance_survey.core.exceptions import InvalidArgumentError
from finance_survey.domains.dashboard.aggregation import (
    aggregate,
    percentage,
    summarize,
    summarize_question,
)
from finance_survey.domains.survey.catalog import get_question, questions


class TestPercentage:
    def test_zero_total(self):
        assert percentage(0, 0) == 0.0

    def test_one_decimal(self):
        assert percentage(1, 3) == 33.3
        assert percentage(2, 3) == 66.7

    def test_whole(self):
        assert percentage(4, 4) == 100.0

    @pytest.mark.parametrize(
        "count, total, expected",
        [(1, 16, 6.3), (3, 16, 18.8), (1, 8, 12.5), (15, 16, 93.8)],
    )
    def test_ties_round_up(self, count, total, expected):
        assert percentage(count, total) == expected

    def test_aggregate_rounds_ties_up(self, response_factory):
        records = [response_factory(answer_index=0)] + [response_factory(answer_index=1)] * 15

        stats = aggregate(records, "informasi_keuangan")

        assert stats[0].percentage == 6.3
        assert stats[1].percentage == 93.8


class TestAggregate:
    def test_one_entry_per_option_in_catalog_order(self, response_factory):
        stats = aggregate([response_factory()], "kecepatan_pelayanan")
        assert [s.option for s in stats] == list(get_question("kecepatan_pelayanan").options)

    def test_counts(self, response_factory):
        records = [
            response_factory(answer_index=0),
            response_factory(answer_index=0),
            response_factory(answer_index=1),
            response_factory(answer_index=3),
        ]

        stats = aggregate(records, "informasi_keuangan")

        assert [(s.option, s.count) for s in stats] == [
            ("Sangat Lengkap", 2),
            ("Lengkap", 1),
            ("Kurang Lengkap", 0),
            ("Tidak Lengkap", 1),
        ]
        assert [s.percentage for s in stats] == [50.0, 25.0, 0.0, 25.0]

    def test_counts_sum_to_record_count(self, response_factory):
        records = [response_factory(answer_index=i % 4) for i in range(7)]
        for q in questions():
            assert sum(s.count for s in aggregate(records, q.id)) == len(records)

    def test_empty_input(self):
        stats = aggregate([], "metode_pembayaran")
        assert len(stats) == 4
        assert all(s.count == 0 and s.percentage == 0.0 for s in stats)

    def test_unknown_question(self, response_factory):
        with pytest.raises(InvalidArgumentError):
            aggregate([response_factory()], "kebersihan")


class TestSummaries:
    def test_summarize_question(self, response_factory):
        summary = summarize_question([response_factory()], "komunikasi_petugas")

        assert summary.question_id == "komunikasi_petugas"
        assert summary.label == get_question("komunikasi_petugas").label
        assert summary.total == 1
        assert summary.stats[0].count == 1

    def test_summarize_covers_every_question(self, response_factory):
        summaries = summarize([response_factory(), response_factory(answer_index=2)])

        assert [s.question_id for s in summaries] == [q.id.value for q in questions()]
        assert all(s.total == 2 for s in summaries)
