from __future__ import annotations

import json
from typing import Any, NamedTuple

from .errors import ApiError

UNKNOWN_ERROR_KIND = "Unknown"


class ParsedBody(NamedTuple):
    ok: bool
    data: Any = None


def parse_error_body(content: bytes | str | None) -> ParsedBody:
    """Parse an error body as JSON; ``ok`` is False when it is not JSON."""
    if not content:
        return ParsedBody(False)
    try:
        return ParsedBody(True, json.loads(content))
    except (ValueError, UnicodeDecodeError):
        return ParsedBody(False)


def normalize_error(status_code: int, status_text: str | None, content: bytes | str | None) -> ApiError:
    fallback = f"API request failed with status {status_code}"
    parsed = parse_error_body(content)
    if not parsed.ok:
        return ApiError(status_code, status_text or fallback)

    # valid JSON that is not an object carries no fields to extract
    body = parsed.data if isinstance(parsed.data, dict) else None
    if body is None:
        return ApiError(status_code, fallback)

    message = body.get("message")
    error_kind = body.get("error")
    return ApiError(
        status_code,
        str(message) if message else fallback,
        str(error_kind) if error_kind else UNKNOWN_ERROR_KIND,
        body,
    )
