"""
schemas/errors.py — JSON error body returned by every failing summarizer request

main.py renders all errors through this model:
- 400 export rejected (no record to export)
- 413 thread longer than MAX_THREAD_CHARS
- 422 blank or malformed submission; `detail` carries pydantic's error list
- 429 rate limit (slowapi's own body, not this model)
- 500 export failure or unhandled error
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable message")
    status_code: int
    request_id: str = Field("", description="Matches the X-Request-ID response header")
    detail: list[dict[str, Any]] | None = None
