"""리포트/대시보드 API 테스트.

Sales report, export and dashboard API tests.
"""

import csv
import datetime as dt
from io import BytesIO, StringIO

from httpx import AsyncClient
from openpyxl import load_workbook

REPORT_URL = "/api/v1/reports/sales"
DASHBOARD_URL = "/api/v1/dashboard"


class TestSalesReport:
    """판매 리포트."""

    async def test_full_report(self, client: AsyncClient):
        res = await client.get(REPORT_URL)
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 3
        summary = data["summary"]
        assert summary["total_sales"] == 3
        assert summary["total_revenue"] == "4124.97"
        assert summary["total_discount"] == "2075.00"
        assert summary["total_revenue_display"] == "R$ 4124.97"
        assert summary["average_discount_display"] == "28.33%"
        assert data["items"][1]["discount"] == "25%"

    async def test_summary_covers_full_collection(self, client: AsyncClient):
        """요약은 항상 전체 기준, filtered_summary는 필터 결과 기준."""
        res = await client.get(REPORT_URL, params={"seller": "ana"})
        data = res.json()
        assert [item["id"] for item in data["items"]] == ["2"]
        assert data["summary"]["total_sales"] == 3
        assert data["filtered_summary"]["total_sales"] == 1
        assert data["filtered_summary"]["total_revenue"] == "674.99"
        assert data["filtered_summary"]["total_discount"] == "225.00"

    async def test_date_range(self, client: AsyncClient):
        res = await client.get(REPORT_URL, params={"date_from": "2024-01-14", "date_to": "2024-01-14"})
        assert [item["id"] for item in res.json()["items"]] == ["2"]

    async def test_empty_filtered_result(self, client: AsyncClient):
        res = await client.get(REPORT_URL, params={"sector": "higiene"})
        data = res.json()
        assert data["items"] == []
        assert data["filtered_summary"]["total_revenue"] == "0.00"

    async def test_empty_collection(self, client: AsyncClient, sale_repo):
        for sale in await sale_repo.get_all():
            await sale_repo.delete(sale.id)
        res = await client.get(REPORT_URL)
        summary = res.json()["summary"]
        assert summary["total_sales"] == 0
        assert summary["total_revenue"] == "0.00"
        assert summary["average_discount_display"] == "0%"


class TestExport:
    """리포트 내보내기."""

    async def test_export_csv(self, client: AsyncClient):
        res = await client.get(f"{REPORT_URL}/export", params={"format": "csv", "seller": "pedro"})
        assert res.status_code == 200
        assert res.headers["content-type"].startswith("text/csv")
        assert "sales_report.csv" in res.headers["content-disposition"]
        rows = list(csv.reader(StringIO(res.content.decode("utf-8-sig"))))
        assert len(rows) == 2
        assert rows[1][-1] == "AV003"

    async def test_export_defaults_to_csv(self, client: AsyncClient):
        res = await client.get(f"{REPORT_URL}/export")
        assert res.status_code == 200
        assert "sales_report.csv" in res.headers["content-disposition"]
        rows = list(csv.reader(StringIO(res.content.decode("utf-8-sig"))))
        assert len(rows) == 4

    async def test_export_with_date_filter(self, client: AsyncClient):
        res = await client.get(f"{REPORT_URL}/export", params={
            "format": "xlsx",
            "date_from": "2024-01-14",
            "date_to": "2024-01-15",
        })
        assert res.status_code == 200
        ws = load_workbook(BytesIO(res.content))["Sales"]
        assert ws.max_row == 3

    async def test_export_xlsx(self, client: AsyncClient):
        res = await client.get(f"{REPORT_URL}/export", params={"format": "xlsx"})
        assert res.status_code == 200
        wb = load_workbook(BytesIO(res.content))
        assert wb["Sales"].max_row == 4

    async def test_export_pdf_unsupported(self, client: AsyncClient):
        res = await client.get(f"{REPORT_URL}/export", params={"format": "pdf"})
        assert res.status_code == 400


class TestDashboard:
    """대시보드 통계."""

    async def test_fixture_stats(self, client: AsyncClient):
        res = await client.get(DASHBOARD_URL)
        assert res.status_code == 200
        data = res.json()
        assert data["pending"] == 1
        if dt.date.today() != dt.date(2024, 1, 15):
            assert data["damaged_today"] == 0
            assert data["sold_today"] == 0

    async def test_registration_counts_today(self, client: AsyncClient):
        await client.post("/api/v1/damage-records", json={
            "sku": "1",
            "product_name": "Arroz 5kg",
            "damage_description": "Saco furado",
            "responsible": "Ana Costa",
        })
        data = (await client.get(DASHBOARD_URL)).json()
        assert data["damaged_today"] >= 1
        assert data["pending"] == 2


class TestHealth:

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json()["status"] == "ok"
