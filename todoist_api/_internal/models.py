"""Pydantic models for REST requests."""

from typing import Any, Literal

from pydantic import BaseModel

HttpMethod = Literal["GET", "POST", "DELETE"]


class RequestDescriptor(BaseModel):
    """Everything needed to issue one REST call.

    Required fields:
        method: HTTP verb ('GET', 'POST' or 'DELETE')
        base_uri: API root, e.g. 'https://api.todoist.com/rest/v2/'
        endpoint: Path appended verbatim to base_uri

    Optional fields:
        auth_token: API token sent as a Bearer credential
        payload: Query parameters for GET, JSON body for POST
    """

    method: HttpMethod
    base_uri: str
    endpoint: str
    auth_token: str | None = None
    payload: dict[str, Any] | None = None

    model_config = {"frozen": True}

    @property
    def url(self) -> str:
        """Full request target; no slash normalization is applied."""
        return self.base_uri + self.endpoint
