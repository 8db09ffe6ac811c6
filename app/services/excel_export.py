"""Excel export — four-sheet workbook for a VendorRecord.

Sheets: Overview, Pricing, Standards, Logistics. Column A holds labels,
column B values. Bullet lists get one row per bullet ("• ..."), or a single
"Not specified" row when the summarizer found nothing for that category.

The record is read, never modified.

Called by: routers/summaries.py
Depends on: openpyxl, services/vendor_summary.py (VendorRecord)
"""

import io
import logging
import re
from datetime import date

from openpyxl import Workbook
from openpyxl.styles import Font

from .keyword_catalog import Category
from .standards_summarizer import is_unspecified
from .vendor_summary import VendorRecord

log = logging.getLogger("vts.excel_export")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
BULLET = "• "
NOT_SPECIFIED_ROW = "Not specified"

_STANDARD_LABELS = (
    (Category.ESG, "ESG Standards"),
    (Category.QUALITY, "Quality Metrics"),
    (Category.SAFETY, "Safety Standards"),
)

_COLUMN_WIDTHS = {"A": 20, "B": 60}


class ExportError(ValueError):
    """Export was asked to run without a record."""


def export_filename(record: VendorRecord) -> str:
    """Vendor name with every non-alphanumeric character removed, plus _summary.xlsx."""
    stem = re.sub(r"[^A-Za-z0-9]", "", record.vendor_name or "") or "vendor"
    return f"{stem}_summary.xlsx"


def _bullet_rows(label: str, bullets, category: Category) -> list[tuple[str, str]]:
    if is_unspecified(bullets, category):
        return [(label, NOT_SPECIFIED_ROW)]
    return [(label if i == 0 else "", f"{BULLET}{b}") for i, b in enumerate(bullets)]


def _standards_rows(record: VendorRecord) -> list[tuple[str, str]]:
    rows = []
    for category, label in _STANDARD_LABELS:
        rows.extend(_bullet_rows(label, record.standards.for_category(category), category))
    return rows


def _header(title: str, generated_on: date) -> list[tuple[str, str]]:
    return [(title, ""), ("Date", generated_on.isoformat()), ("", "")]


def _overview_rows(record: VendorRecord, generated_on: date) -> list[tuple[str, str]]:
    return [
        *_header("Vendor Summary", generated_on),
        ("GENERAL INFORMATION", ""),
        ("Vendor Name", record.vendor_name),
        ("Contact", record.contact_info),
        ("", ""),
        ("PRICING", ""),
        ("Unit Price", record.pricing.unit_price),
        ("Additional Fees", record.pricing.additional_fees),
        ("Quantity Discounts", record.pricing.quantity_discounts),
        ("", ""),
        ("STANDARDS", ""),
        *_standards_rows(record),
        ("", ""),
        ("LOGISTICS", ""),
        ("Delivery Terms", record.logistics.delivery_terms),
        ("Lead Time", record.logistics.lead_time),
        ("", ""),
        ("ADDITIONAL NOTES", ""),
        ("Notes", record.additional_notes),
    ]


def _pricing_rows(record: VendorRecord, generated_on: date) -> list[tuple[str, str]]:
    return [
        *_header("PRICING DETAILS", generated_on),
        ("Vendor", record.vendor_name),
        ("", ""),
        ("Unit Price", record.pricing.unit_price),
        ("Additional Fees", record.pricing.additional_fees),
        ("Quantity Discounts", record.pricing.quantity_discounts),
    ]


def _standards_sheet_rows(record: VendorRecord, generated_on: date) -> list[tuple[str, str]]:
    return [
        *_header("STANDARDS & COMPLIANCE", generated_on),
        ("Vendor", record.vendor_name),
        ("", ""),
        *_standards_rows(record),
    ]


def _logistics_rows(record: VendorRecord, generated_on: date) -> list[tuple[str, str]]:
    return [
        *_header("LOGISTICS & DELIVERY", generated_on),
        ("Vendor", record.vendor_name),
        ("", ""),
        ("Delivery Terms", record.logistics.delivery_terms),
        ("Lead Time", record.logistics.lead_time),
    ]


SHEETS = (
    ("Overview", _overview_rows),
    ("Pricing", _pricing_rows),
    ("Standards", _standards_sheet_rows),
    ("Logistics", _logistics_rows),
)


def build_summary_workbook(record: VendorRecord | None, generated_on: date | None = None) -> Workbook:
    """Workbook with one label/value sheet per section of the record."""
    if record is None:
        raise ExportError("No vendor summary to export; run an extraction first")
    generated_on = generated_on or date.today()

    wb = Workbook()
    wb.remove(wb.active)
    for title, build_rows in SHEETS:
        ws = wb.create_sheet(title)
        for row in build_rows(record, generated_on):
            ws.append(list(row))
        ws["A1"].font = Font(bold=True)
        for col, width in _COLUMN_WIDTHS.items():
            ws.column_dimensions[col].width = width
    return wb


def export_summary_xlsx(record: VendorRecord | None, generated_on: date | None = None) -> bytes:
    """Serialized .xlsx bytes for the record."""
    wb = build_summary_workbook(record, generated_on)
    buf = io.BytesIO()
    wb.save(buf)
    data = buf.getvalue()
    log.info("Exported summary workbook for %s (%d bytes)", record.vendor_name, len(data))
    return data
