"""Pydantic models for Telerivet API wire payloads.

Entities themselves are dynamic field mappings (see telerivet.models.entity);
these models only cover the envelope shapes every endpoint shares.
"""

from typing import Any

from pydantic import BaseModel

# =============================================================================
# Constants
# =============================================================================

ERROR_INVALID_PARAM = "invalid_param"
ERROR_NOT_FOUND = "not_found"

# =============================================================================
# Response Models
# =============================================================================


class ApiErrorPayload(BaseModel):
    """The `error` object returned in place of a result when a request fails."""

    code: str | None = None
    message: str = ""
    param: str | None = None

    model_config = {"extra": "allow"}


class CursorPage(BaseModel):
    """One page of a list endpoint.

    Fields:
        data: Raw item mappings for this page.
        truncated: True if more items exist after this page.
        next_marker: Opaque token to request the next page.
        count: Total number of matching items (count queries only).
    """

    data: list[dict[str, Any]] = []
    truncated: bool = False
    next_marker: str | None = None
    count: int | None = None

    model_config = {"extra": "allow"}
