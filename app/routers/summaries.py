"""Summaries API — email thread in, vendor summary / spreadsheet out."""

import asyncio
from functools import partial

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response
from loguru import logger

from ..config import settings
from ..rate_limit import limiter
from ..schemas.summaries import ForwardingResponse, ThreadSubmission, VendorSummaryResponse
from ..services.excel_export import (
    XLSX_MEDIA_TYPE,
    ExportError,
    export_filename,
    export_summary_xlsx,
)
from ..services.forwarding import describe_forwarding_workflow
from ..services.vendor_summary import VendorRecord, extract

router = APIRouter(tags=["summaries"])


async def _run_extraction(thread: str) -> VendorRecord:
    if len(thread) > settings.max_thread_chars:
        raise HTTPException(413, f"Email thread too large (max {settings.max_thread_chars} characters)")

    loop = asyncio.get_running_loop()
    record = await loop.run_in_executor(
        None, partial(extract, thread, notes_threshold=settings.notes_review_threshold)
    )
    if settings.simulated_latency_ms > 0:
        await asyncio.sleep(settings.simulated_latency_ms / 1000)
    return record


def _xlsx_response(record: VendorRecord) -> Response:
    try:
        data = export_summary_xlsx(record)
    except ExportError as e:
        raise HTTPException(400, str(e))
    except Exception as e:
        logger.error("Excel export failed for {}: {}", record.vendor_name, e)
        raise HTTPException(500, "Excel export failed")

    return Response(
        content=data,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export_filename(record)}"'},
    )


@router.post("/api/summaries", response_model=VendorSummaryResponse)
@limiter.limit("30/minute")
async def create_summary(body: ThreadSubmission, request: Request):
    """Extract a structured vendor summary from a pasted email thread."""
    record = await _run_extraction(body.thread)
    logger.info("Summary extracted for {} ({} chars)", record.vendor_name, len(body.thread))
    return VendorSummaryResponse.from_record(record)


@router.post("/api/summaries/export/xlsx")
@limiter.limit("30/minute")
async def export_thread_xlsx(body: ThreadSubmission, request: Request):
    """Extract and download the summary as a four-sheet Excel workbook."""
    record = await _run_extraction(body.thread)
    return _xlsx_response(record)


@router.post("/api/summaries/export/xlsx/record")
@limiter.limit("30/minute")
async def export_record_xlsx(body: VendorSummaryResponse, request: Request):
    """Download a previously returned summary as Excel, without re-extracting."""
    return _xlsx_response(body.to_record())


@router.get("/api/summaries/forwarding", response_model=ForwardingResponse)
def forwarding_workflow(destination: str | None = Query(None, max_length=320)):
    """Describe the forward-to-inbox workflow (not wired to a mailbox)."""
    address = (destination or "").strip() or settings.forwarding_address
    return ForwardingResponse(
        destination=address,
        description=describe_forwarding_workflow(address),
    )
