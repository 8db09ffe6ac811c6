"""
schemas/summaries.py — Pydantic models for the vendor summary endpoints

Request/response models for submitting an email thread and getting back the
extracted vendor summary.

Business Rules:
- A thread must contain at least one non-whitespace character
- Standards lists always carry at least one bullet
- The response mirrors VendorRecord field for field so it can be posted back
  for export without re-running extraction

Called by: routers/summaries.py
Depends on: pydantic, services/vendor_summary.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..services.vendor_summary import Logistics, Pricing, Standards, VendorRecord


class ThreadSubmission(BaseModel):
    thread: str

    @field_validator("thread")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Email thread is empty")
        return v


class PricingOut(BaseModel):
    unit_price: str
    additional_fees: str
    quantity_discounts: str


class StandardsOut(BaseModel):
    esg: list[str] = Field(..., min_length=1)
    quality: list[str] = Field(..., min_length=1)
    safety: list[str] = Field(..., min_length=1)


class LogisticsOut(BaseModel):
    delivery_terms: str
    lead_time: str


class VendorSummaryResponse(BaseModel):
    vendor_name: str
    contact_info: str
    pricing: PricingOut
    standards: StandardsOut
    logistics: LogisticsOut
    additional_notes: str

    @classmethod
    def from_record(cls, record: VendorRecord) -> VendorSummaryResponse:
        return cls.model_validate(record.to_dict())

    def to_record(self) -> VendorRecord:
        return VendorRecord(
            vendor_name=self.vendor_name,
            contact_info=self.contact_info,
            pricing=Pricing(**self.pricing.model_dump()),
            standards=Standards(
                esg=tuple(self.standards.esg),
                quality=tuple(self.standards.quality),
                safety=tuple(self.standards.safety),
            ),
            logistics=Logistics(**self.logistics.model_dump()),
            additional_notes=self.additional_notes,
        )


class ForwardingResponse(BaseModel):
    destination: str
    description: str
