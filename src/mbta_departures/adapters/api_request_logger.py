"""Formatting and logging of outgoing MBTA API requests."""

import json
import logging
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Copy headers with credential values masked."""
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def format_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> str:
    """Render a request as it goes on the wire, query decoded for readability."""
    target = url
    if params:
        # JSON:API filter keys read better without percent-encoding
        query = urlencode(sorted(params.items()), safe="[],:")
        target = f"{url}{'&' if '?' in url else '?'}{query}"

    lines = [f"{method} {target}"]
    if headers:
        lines.append(f"Headers: {json.dumps(redact_headers(headers), indent=2, sort_keys=True)}")
    return "\n".join(lines)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing request at INFO level, sensitive headers redacted."""
    logger.info("API Request:\n" + format_api_request(method, url, params, headers))
