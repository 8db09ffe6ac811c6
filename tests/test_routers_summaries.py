"""
tests/test_routers_summaries.py -- Tests for routers/summaries.py

Covers: summary extraction endpoint, blank/oversize submissions, xlsx
export (from a thread and from a returned record), the forwarding
description, and export failure handling.

Called by: pytest
Depends on: app/routers/summaries.py, conftest.py
"""

import io
from unittest.mock import patch

from openpyxl import load_workbook

from app.services.excel_export import XLSX_MEDIA_TYPE

# ── POST /api/summaries ──────────────────────────────────────────────


def test_summary_acme(client, acme_thread):
    resp = client.post("/api/summaries", json={"thread": acme_thread})
    assert resp.status_code == 200
    data = resp.json()
    assert data["vendor_name"] == "Acme Aluminum"
    assert data["pricing"]["unit_price"] == "$24.99 per unit"
    assert data["logistics"]["lead_time"] == "3 weeks"
    assert any("ISO 9001" in b for b in data["standards"]["quality"])
    assert len(data["standards"]["safety"]) == 1


def test_summary_full_thread(client, full_thread):
    resp = client.post("/api/summaries", json={"thread": full_thread})
    assert resp.status_code == 200
    data = resp.json()
    assert data["contact_info"] == "jane.smith@northwind-metals.com | +1 216-555-0142"
    assert data["logistics"]["delivery_terms"] == "FOB Cleveland"


def test_blank_thread_rejected(client):
    resp = client.post("/api/summaries", json={"thread": "   \n\t "})
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "Validation error"
    assert data["status_code"] == 422
    assert "request_id" in data


def test_missing_thread_rejected(client):
    resp = client.post("/api/summaries", json={})
    assert resp.status_code == 422


def test_oversize_thread_rejected(client):
    with patch("app.routers.summaries.settings.max_thread_chars", 100):
        resp = client.post("/api/summaries", json={"thread": "x" * 101})
    assert resp.status_code == 413
    assert "too large" in resp.json()["error"]


def test_simulated_latency(client, acme_thread):
    with patch("app.routers.summaries.settings.simulated_latency_ms", 5):
        resp = client.post("/api/summaries", json={"thread": acme_thread})
    assert resp.status_code == 200
    assert resp.json()["vendor_name"] == "Acme Aluminum"


# ── Excel export ─────────────────────────────────────────────────────


def test_export_from_thread(client, full_thread):
    resp = client.post("/api/summaries/export/xlsx", json={"thread": full_thread})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == XLSX_MEDIA_TYPE
    assert 'filename="JaneSmithNorthwindMetals_summary.xlsx"' in resp.headers["content-disposition"]
    wb = load_workbook(io.BytesIO(resp.content))
    assert wb.sheetnames == ["Overview", "Pricing", "Standards", "Logistics"]


def test_export_from_returned_record(client, acme_thread):
    summary = client.post("/api/summaries", json={"thread": acme_thread}).json()
    summary["vendor_name"] = "Acme Aluminum, Inc."

    resp = client.post("/api/summaries/export/xlsx/record", json=summary)
    assert resp.status_code == 200
    assert 'filename="AcmeAluminumInc_summary.xlsx"' in resp.headers["content-disposition"]
    ws = load_workbook(io.BytesIO(resp.content))["Pricing"]
    values = [row[1] for row in ws.iter_rows(values_only=True)]
    assert "Acme Aluminum, Inc." in values


def test_export_record_requires_bullets(client, acme_thread):
    summary = client.post("/api/summaries", json={"thread": acme_thread}).json()
    summary["standards"]["esg"] = []
    resp = client.post("/api/summaries/export/xlsx/record", json=summary)
    assert resp.status_code == 422


@patch("app.routers.summaries.export_summary_xlsx", side_effect=RuntimeError("disk full"))
def test_export_failure_returns_500(mock_export, client, acme_thread):
    resp = client.post("/api/summaries/export/xlsx", json={"thread": acme_thread})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Excel export failed"


def test_export_blank_thread_rejected(client):
    resp = client.post("/api/summaries/export/xlsx", json={"thread": ""})
    assert resp.status_code == 422


# ── Forwarding ───────────────────────────────────────────────────────


def test_forwarding_default_address(client):
    resp = client.get("/api/summaries/forwarding")
    assert resp.status_code == 200
    data = resp.json()
    assert data["destination"] == "vendor-analysis@example.com"
    assert "vendor-analysis@example.com" in data["description"]


def test_forwarding_custom_address(client):
    resp = client.get("/api/summaries/forwarding", params={"destination": "buyers@acme.com"})
    assert resp.json()["destination"] == "buyers@acme.com"
    assert "not implemented" in resp.json()["description"]
