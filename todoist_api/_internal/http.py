"""HTTP client configuration for REST requests."""

import httpx

DEFAULT_TIMEOUT = 30.0
JSON_CONTENT_TYPE = "application/json"


def get_request_headers(auth_token: str | None = None) -> dict[str, str]:
    """Build the header set for a single request.

    Args:
        auth_token: Optional API token. An empty token counts as absent.

    Returns:
        Headers with Content-Type, plus a Bearer Authorization header
        when a token is given.
    """
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if auth_token:
        headers["Authorization"] = f"Bearer {auth_token}"
    return headers


def create_http_client(
    *,
    headers: dict[str, str],
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Create a transient HTTP client for one request.

    Args:
        headers: Default headers sent with every call on this client.
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.AsyncClient instance that follows redirects.
        The caller owns closing it.
    """
    return httpx.AsyncClient(timeout=timeout, headers=headers, follow_redirects=True)
