from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestDefaults:
    def test_default_assumptions(self, client):
        body = client.get("/api/v1/defaults").json()
        assert body["totalHomes"] == 500
        assert body["holdPeriodYears"] == 7
        assert body["exitStrategy"] == "portfolio"
        assert Decimal(body["lpSplit"]) == Decimal("0.80")


class TestProject:
    def test_default_projection(self, client):
        resp = client.post("/api/v1/project", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(body["acquisitionSummary"]["totalAcquisitionCost"]) == Decimal("137923750")
        assert len(body["cashFlows"]) == 7
        assert len(body["portfolioValueChartData"]) == 8
        assert body["portfolioValueChartData"][0]["label"] == "Year 0"
        assert "totalToLPs" in body["exitSummary"]
        assert "totalCashToLPs" in body["returns"]
        assert body["returns"]["irrConverged"] is True

    def test_year_1_fields(self, client):
        y1 = client.post("/api/v1/project", json={}).json()["cashFlows"][0]
        assert Decimal(y1["noi"]) == Decimal("8882750")
        assert Decimal(y1["unpaidPreferredReturn"]) == Decimal("82293.75")
        assert Decimal(y1["dscr"]) == Decimal("1.9516")

    def test_camel_case_override(self, client):
        body = client.post("/api/v1/project", json={"holdPeriodYears": 10}).json()
        assert len(body["cashFlows"]) == 10

    def test_snake_case_override(self, client):
        body = client.post("/api/v1/project", json={"hold_period_years": 3}).json()
        assert len(body["cashFlows"]) == 3

    def test_unit_counts_set_total_homes(self, client):
        body = client.post("/api/v1/project", json={"bed3Count": 100, "bed4Count": 50}).json()
        assert body["acquisitionSummary"]["totalHomes"] == 150
        # Insurance is per home: 150 x $1,200
        assert Decimal(body["cashFlows"][0]["insurance"]) == Decimal("180000")

    def test_single_unit_count_override(self, client):
        body = client.post("/api/v1/project", json={"bed4_count": 0}).json()
        assert body["acquisitionSummary"]["totalHomes"] == 250

    def test_total_homes_must_match_counts(self, client):
        resp = client.post("/api/v1/project", json={"totalHomes": 400})
        assert resp.status_code == 422
        assert "Total homes" in resp.json()["detail"]

    def test_matching_total_homes_accepted(self, client):
        resp = client.post(
            "/api/v1/project",
            json={"totalHomes": 300, "bed3Count": 200, "bed4Count": 100},
        )
        assert resp.status_code == 200

    def test_chart_data_value_key(self, client):
        points = client.post("/api/v1/project", json={}).json()["portfolioValueChartData"]
        assert points[3]["label"] == "Year 3"
        assert points[3]["year"] == 3
        for p in points:
            assert p["value"] == p["portfolioValue"]
        assert Decimal(points[0]["value"]) == Decimal("167500000")

    def test_individual_exit(self, client):
        body = client.post("/api/v1/project", json={"exitStrategy": "individual"}).json()
        assert body["exitSummary"]["exitStrategy"] == "individual"

    def test_invalid_split_rejected(self, client):
        resp = client.post("/api/v1/project", json={"lpSplit": 0.7})
        assert resp.status_code == 422
        assert "LP/GP split" in resp.json()["detail"]

    def test_zero_hold_rejected(self, client):
        resp = client.post("/api/v1/project", json={"holdPeriodYears": 0})
        assert resp.status_code == 422


class TestReport:
    def test_report_sections(self, client):
        body = client.post("/api/v1/report", json={}).json()
        assert body["title"] == "BTR Investment Financial Analysis"
        assert Decimal(body["metrics"]["capRate"]) == Decimal("0.0530")
        assert body["metrics"]["paybackPeriod"] == 7
        assert [ex["exitStrategy"] for ex in body["exits"]] == ["portfolio", "individual"]
        assert Decimal(body["risk"]["breakEvenOccupancy"]) == Decimal("0.6292")

    def test_comparison_skipped_when_other_strategy_invalid(self, client):
        body = client.post(
            "/api/v1/report",
            json={"exitStrategy": "individual", "portfolioExitCapRate": 0},
        ).json()
        assert [ex["exitStrategy"] for ex in body["exits"]] == ["individual"]

    def test_pdf_download(self, client):
        resp = client.post("/api/v1/report/pdf", json={})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert "BTR_Financial_Report.pdf" in resp.headers["content-disposition"]
        assert resp.content.startswith(b"%PDF")


class TestCharts:
    def test_figures(self, client):
        body = client.post("/api/v1/charts", json={}).json()
        assert len(body["portfolioValue"]["data"]) == 4
        assert len(body["cashFlow"]["data"]) == 3
