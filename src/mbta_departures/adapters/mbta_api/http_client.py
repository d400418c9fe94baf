"""HTTP client for MBTA v3 API requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from mbta_departures.adapters.api_request_logger import log_api_request
from mbta_departures.adapters.mbta_api.constants import (
    API_KEY_HEADER,
    DEFAULT_HEADERS,
    MBTA_BASE_URL,
)
from mbta_departures.domain.errors import TransportError
from mbta_departures.domain.models import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class MbtaHttpClient:
    """HTTP client for JSON:API requests against api-v3.mbta.com."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = MBTA_BASE_URL,
        api_key: str | None = None,
        timeout_seconds: float = 10,
        log_requests: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            base_url: API root without trailing slash.
            api_key: Optional API key sent as x-api-key.
            timeout_seconds: Total timeout per request.
            log_requests: Log each outgoing request.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._log_requests = log_requests

    def _headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key
        return headers

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        retry_after = response.headers.get("Retry-After")
        extra_info = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.error(f"MBTA API returned status {response.status} for {url}: {error_body}{extra_info}")

    async def _read_json(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        """Decode a successful response body."""
        try:
            # The API answers with application/vnd.api+json
            data = await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"MBTA API returned invalid JSON for {url}: {e}")
            raise TransportError(
                ErrorDetails(status_code=response.status, reason="Invalid JSON response"), url
            ) from e

        if not isinstance(data, dict):
            logger.warning(f"MBTA API returned {type(data).__name__} instead of an object for {url}")
            return {}
        return data

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET a path and return the decoded JSON document.

        Raises:
            TransportError: On a non-2xx status, network failure or timeout.
        """
        url = f"{self._base_url}{path}"
        headers = self._headers()
        if self._log_requests:
            log_api_request("GET", url, params=params, headers=headers)

        try:
            async with self._session.get(
                url, params=params, headers=headers, timeout=self._timeout
            ) as response:
                if not 200 <= response.status < 300:
                    await self._log_error_response(response, url)
                    raise TransportError(ErrorDetails.from_status(response.status), url)
                return await self._read_json(response, url)
        except TimeoutError as e:
            logger.error(f"MBTA API request timed out for {url}")
            raise TransportError(ErrorDetails(reason="Request timed out"), url) from e
        except aiohttp.ClientError as e:
            logger.error(f"Error requesting {url}: {e}")
            raise TransportError(ErrorDetails.from_status(None), url) from e
