"""Request helper for the Todoist REST API."""

import os
import sys
from typing import Any

import httpx

from todoist_api._internal.http import create_http_client, get_request_headers
from todoist_api._internal.models import HttpMethod, RequestDescriptor
from todoist_api._internal.redaction import redact
from todoist_api.exceptions import TodoistRequestError

DEBUG_ENV_VAR = "TODOIST_API_DEBUG"

# InvalidURL does not derive from HTTPError in httpx.
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def _log_debug(message: str) -> None:
    """Log a debug message to stderr if TODOIST_API_DEBUG is set to "1"."""
    if os.environ.get(DEBUG_ENV_VAR, "") == "1":
        print(f"[todoist-api] {message}", file=sys.stderr)


def is_success(response: httpx.Response) -> bool:
    """Check if the response carries a 2xx status code."""
    return 200 <= response.status_code < 300


def to_request_error(exc: httpx.HTTPError | httpx.InvalidURL) -> TodoistRequestError:
    """Map an httpx exception onto TodoistRequestError.

    Only HTTPStatusError carries a response; every other transport error
    (connect errors, timeouts, malformed URLs) maps to an error without
    status code or response data.
    """
    if not isinstance(exc, httpx.HTTPStatusError):
        return TodoistRequestError(str(exc))
    return TodoistRequestError(
        str(exc),
        http_status_code=exc.response.status_code,
        response_data=_read_response_data(exc.response),
    )


def _read_response_data(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


async def _send(client: httpx.AsyncClient, descriptor: RequestDescriptor) -> httpx.Response:
    """Issue the verb-specific call on the client."""
    if descriptor.method == "GET":
        return await client.get(descriptor.url, params=descriptor.payload)
    if descriptor.method == "POST":
        return await client.post(descriptor.url, json=descriptor.payload)
    return await client.delete(descriptor.url)


async def request(
    method: HttpMethod,
    base_uri: str,
    endpoint: str,
    auth_token: str | None = None,
    payload: dict[str, Any] | None = None,
) -> httpx.Response:
    """Send a request to the Todoist REST API.

    A new client is created for every call and closed before returning.

    Args:
        method: HTTP verb ('GET', 'POST' or 'DELETE').
        base_uri: API root URI.
        endpoint: Path appended to base_uri.
        auth_token: Optional API token, sent as a Bearer credential.
        payload: Query parameters for GET, JSON body for POST.
            Ignored for DELETE.

    Returns:
        The httpx.Response, unchanged.

    Raises:
        TodoistRequestError: On any transport failure or non-2xx response.
        pydantic.ValidationError: If method is not a supported verb.
    """
    descriptor = RequestDescriptor(
        method=method,
        base_uri=base_uri,
        endpoint=endpoint,
        auth_token=auth_token,
        payload=payload,
    )
    headers = get_request_headers(descriptor.auth_token)
    _log_debug(f"{descriptor.method} {descriptor.url} headers={redact(headers)}")

    try:
        async with create_http_client(headers=headers) as client:
            response = await _send(client, descriptor)
            response.raise_for_status()
    except TRANSPORT_ERRORS as exc:
        error = to_request_error(exc)
        _log_debug(f"{descriptor.method} {descriptor.url} failed: {error!r}")
        raise error from exc

    _log_debug(f"{descriptor.method} {descriptor.url} -> {response.status_code}")
    return response
