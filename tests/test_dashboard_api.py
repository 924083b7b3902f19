"""Tests for the admin dashboard endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from finance_survey.domains.dashboard.export import BOM

JAKARTA = timezone(timedelta(hours=7))


@pytest.fixture
def seeded_repo(response_repo, response_factory):
    """Twelve responses: eight at Rawat Inap, four at Rawat Jalan Umum."""
    for i in range(12):
        response_repo._responses.append(
            response_factory(
                counter="Rawat Inap" if i < 8 else "Rawat Jalan Umum",
                created_at=datetime(2024, 1, 1 + i, 9, 0, tzinfo=JAKARTA),
                answer_index=i % 2,
                id=f"seed-{i}",
            )
        )
    return response_repo


class TestAccess:
    @pytest.mark.parametrize(
        "path",
        ["/v1/dashboard", "/v1/dashboard/statistics/informasi_keuangan", "/v1/dashboard/export"],
    )
    async def test_requires_token(self, client: AsyncClient, path):
        response = await client.get(path)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_rejects_garbage_token(self, client: AsyncClient):
        response = await client.get("/v1/dashboard", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    async def test_responses_are_not_cached(self, client: AsyncClient, admin_headers):
        response = await client.get("/v1/dashboard", headers=admin_headers)
        assert response.headers["Cache-Control"] == "no-store"


class TestDashboard:
    async def test_empty_store(self, client: AsyncClient, admin_headers):
        response = await client.get("/v1/dashboard", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total_responses"] == 0
        assert body["filtered_responses"] == 0
        assert body["responses"]["items"] == []
        assert body["responses"]["total_pages"] == 1
        assert all(
            stat["percentage"] == 0.0 for summary in body["summaries"] for stat in summary["stats"]
        )

    async def test_first_page_newest_first(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get("/v1/dashboard", headers=admin_headers)

        body = response.json()
        page = body["responses"]
        assert body["total_responses"] == 12
        assert page["total_pages"] == 2
        assert len(page["items"]) == 10
        assert page["items"][0]["id"] == "seed-11"
        assert page["items"][0]["row_number"] == 1
        assert page["window"] == [1, 2]
        assert page["has_next"] is True

    async def test_second_page_row_numbers(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get("/v1/dashboard", params={"page": 2}, headers=admin_headers)

        items = response.json()["responses"]["items"]
        assert [row["row_number"] for row in items] == [11, 12]

    async def test_counter_filter(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get(
            "/v1/dashboard",
            params={"counter": "Rawat Jalan Umum"},
            headers=admin_headers,
        )

        body = response.json()
        assert body["total_responses"] == 12
        assert body["filtered_responses"] == 4
        assert body["filters"]["counter"] == "Rawat Jalan Umum"
        assert {row["counter"] for row in body["responses"]["items"]} == {"Rawat Jalan Umum"}
        assert all(summary["total"] == 4 for summary in body["summaries"])

    async def test_date_filter_is_inclusive(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get(
            "/v1/dashboard",
            params={"date_from": "2024-01-03", "date_to": "2024-01-05"},
            headers=admin_headers,
        )

        body = response.json()
        assert body["filtered_responses"] == 3
        assert [row["id"] for row in body["responses"]["items"]] == ["seed-4", "seed-3", "seed-2"]

    async def test_page_past_end_is_clamped(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get(
            "/v1/dashboard",
            params={"counter": "Rawat Inap", "page": 5},
            headers=admin_headers,
        )

        page = response.json()["responses"]
        assert page["page"] == 1
        assert len(page["items"]) == 8

    async def test_summary_counts(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get("/v1/dashboard", headers=admin_headers)

        first = response.json()["summaries"][0]
        assert first["question_id"] == "informasi_keuangan"
        assert [s["count"] for s in first["stats"]] == [6, 6, 0, 0]
        assert [s["percentage"] for s in first["stats"]] == [50.0, 50.0, 0.0, 0.0]

    async def test_invalid_counter(self, client: AsyncClient, admin_headers):
        response = await client.get(
            "/v1/dashboard",
            params={"counter": "Apotek"},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert response.json()["error"]["details"]["errors"][0]["field"] == "counter"

    async def test_page_zero_rejected(self, client: AsyncClient, admin_headers):
        response = await client.get("/v1/dashboard", params={"page": 0}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ARGUMENT"

    async def test_non_numeric_page(self, client: AsyncClient, admin_headers):
        response = await client.get("/v1/dashboard", params={"page": "dua"}, headers=admin_headers)

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestStatistics:
    async def test_single_question(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get(
            "/v1/dashboard/statistics/keramahan_petugas",
            params={"counter": "Rawat Inap"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 8
        assert [s["option"] for s in body["stats"]] == [
            "Sangat Ramah",
            "Ramah",
            "Kurang Ramah",
            "Tidak Ramah",
        ]

    async def test_unknown_question(self, client: AsyncClient, admin_headers):
        response = await client.get("/v1/dashboard/statistics/parkir", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ARGUMENT"


class TestExport:
    async def test_csv_download(self, client: AsyncClient, admin_headers, seeded_repo):
        response = await client.get(
            "/v1/dashboard/export",
            params={"counter": "Rawat Jalan Umum"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="survey-results-')
        assert disposition.endswith('.csv"')

        assert response.content.startswith(BOM.encode("utf-8"))
        lines = response.content.decode("utf-8").lstrip(BOM).split("\n")
        assert len(lines) == 5
        assert lines[0].startswith('"Tanggal","Loket"')

    async def test_empty_export(self, client: AsyncClient, admin_headers):
        response = await client.get("/v1/dashboard/export", headers=admin_headers)

        assert response.status_code == 200
        assert response.content.decode("utf-8").lstrip(BOM).count("\n") == 0
