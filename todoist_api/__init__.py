"""Todoist API client for Python.

Public API:
    request - Dispatch a GET/POST/DELETE call to the REST API
    is_success - Check whether a response carries a 2xx status
    TodoistRequestError - Raised for every failed request

Internal (not for direct use):
    _internal.http - HTTP client factory and header set
    _internal.models - Request descriptor model
    _internal.redaction - Credential masking for debug output
"""

from todoist_api._internal.models import HttpMethod
from todoist_api._version import __version__
from todoist_api.exceptions import TodoistRequestError
from todoist_api.rest_client import is_success, request

__all__ = [
    "__version__",
    "HttpMethod",
    "TodoistRequestError",
    "is_success",
    "request",
]
