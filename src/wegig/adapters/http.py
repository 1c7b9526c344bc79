"""Shared helpers for httpx-backed catalog clients."""

import logging

import httpx

from wegig.errors import TransportError, UpstreamError

_logger = logging.getLogger(__name__)


async def get_json(
    http_client: httpx.AsyncClient,
    url: str,
    *,
    service: str,
    headers: dict[str, str] | None = None,
    timeout: float | None = None,
) -> dict[str, object]:
    """GET a JSON document, translating failures into application errors."""
    try:
        response = await http_client.get(url, headers=headers, timeout=timeout)
    except httpx.HTTPError as exc:
        _logger.warning("%s request failed: %s", service, exc)
        raise TransportError(service, str(exc) or type(exc).__name__) from exc
    if response.is_error:
        body = response.text or response.reason_phrase
        _logger.warning("%s returned status %s", service, response.status_code)
        raise UpstreamError(service, response.status_code, body)
    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError(
            service, response.status_code, "Response body is not valid JSON"
        ) from exc
