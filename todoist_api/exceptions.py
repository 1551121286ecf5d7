"""Public exceptions for the Todoist API client."""

from typing import Any

AUTHENTICATION_ERROR_STATUS_CODES: frozenset[int] = frozenset({401, 403})


class TodoistRequestError(Exception):
    """Error raised when a request to the Todoist API fails.

    Attributes:
        message: Message copied from the underlying transport error.
        http_status_code: Status of the failed response, or None when no
            response was received (connection errors, timeouts).
        response_data: Body of the failed response, or None when absent.
    """

    def __init__(
        self,
        message: str,
        http_status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status_code = http_status_code
        self.response_data = response_data

    def is_authentication_error(self) -> bool:
        """Check if the API rejected the request credentials (401 or 403)."""
        return self.http_status_code in AUTHENTICATION_ERROR_STATUS_CODES

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.message!r}, "
            f"http_status_code={self.http_status_code!r})"
        )
