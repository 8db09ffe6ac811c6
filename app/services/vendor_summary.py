"""Vendor summary — assembles one VendorRecord from a raw email thread.

extract() is the single entry point. It runs every field extractor and the
three standards summarizers over the same text and returns a frozen record.
It never raises for string (or None) input: missing facts become sentinels.

Called by: routers/summaries.py, services/excel_export.py (record type)
Depends on: field_extractors, standards_summarizer, keyword_catalog
"""

import logging
from dataclasses import asdict, dataclass

from . import field_extractors as fx
from .keyword_catalog import Category
from .standards_summarizer import summarize_category

log = logging.getLogger("vts.vendor_summary")


@dataclass(frozen=True)
class Pricing:
    unit_price: str
    additional_fees: str
    quantity_discounts: str


@dataclass(frozen=True)
class Standards:
    esg: tuple[str, ...]
    quality: tuple[str, ...]
    safety: tuple[str, ...]

    def for_category(self, category: Category) -> tuple[str, ...]:
        return getattr(self, category.key)


@dataclass(frozen=True)
class Logistics:
    delivery_terms: str
    lead_time: str


@dataclass(frozen=True)
class VendorRecord:
    vendor_name: str
    contact_info: str
    pricing: Pricing
    standards: Standards
    logistics: Logistics
    additional_notes: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["standards"] = {k: list(v) for k, v in data["standards"].items()}
        return data


def extract(raw_text: str, notes_threshold: int = fx.NOTES_REVIEW_THRESHOLD) -> VendorRecord:
    """Build a VendorRecord from one email thread."""
    text = raw_text if isinstance(raw_text, str) else ""

    record = VendorRecord(
        vendor_name=fx.extract_vendor_name(text),
        contact_info=fx.extract_contact_info(text),
        pricing=Pricing(
            unit_price=fx.extract_unit_price(text),
            additional_fees=fx.extract_additional_fees(text),
            quantity_discounts=fx.extract_quantity_discounts(text),
        ),
        standards=Standards(
            esg=summarize_category(text, Category.ESG),
            quality=summarize_category(text, Category.QUALITY),
            safety=summarize_category(text, Category.SAFETY),
        ),
        logistics=Logistics(
            delivery_terms=fx.extract_delivery_terms(text),
            lead_time=fx.extract_lead_time(text),
        ),
        additional_notes=fx.extract_additional_notes(text, notes_threshold),
    )
    log.debug("Extracted record for %s from %d chars", record.vendor_name, len(text))
    return record
