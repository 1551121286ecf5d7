"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from todoist_api._internal.models import RequestDescriptor


class TestRequestDescriptor:
    """Tests for RequestDescriptor model."""

    def test_valid_descriptor(self):
        """Should create a descriptor with defaults for optional fields."""
        descriptor = RequestDescriptor(
            method="GET",
            base_uri="https://api.todoist.com/rest/v2/",
            endpoint="tasks",
        )
        assert descriptor.method == "GET"
        assert descriptor.auth_token is None
        assert descriptor.payload is None

    def test_url_concatenates_base_and_endpoint(self):
        """Should join base URI and endpoint verbatim."""
        descriptor = RequestDescriptor(
            method="DELETE",
            base_uri="https://api.todoist.com/rest/v2/",
            endpoint="tasks/2995104339",
        )
        assert descriptor.url == "https://api.todoist.com/rest/v2/tasks/2995104339"

    def test_url_does_not_normalize_slashes(self):
        """Should not add or remove slashes."""
        descriptor = RequestDescriptor(method="GET", base_uri="https://x.com", endpoint="tasks")
        assert descriptor.url == "https://x.comtasks"

    def test_with_payload(self):
        """Should keep the payload mapping."""
        descriptor = RequestDescriptor(
            method="POST",
            base_uri="https://x.com/",
            endpoint="tasks",
            auth_token="token",
            payload={"content": "Buy Milk", "due_string": "tomorrow"},
        )
        assert descriptor.payload == {"content": "Buy Milk", "due_string": "tomorrow"}

    def test_rejects_unsupported_method(self):
        """Should reject verbs other than GET/POST/DELETE."""
        with pytest.raises(ValidationError) as exc_info:
            RequestDescriptor(method="PATCH", base_uri="https://x.com/", endpoint="tasks")
        assert "method" in str(exc_info.value)

    def test_rejects_non_mapping_payload(self):
        """Should reject a payload that is not a key-value mapping."""
        with pytest.raises(ValidationError):
            RequestDescriptor(
                method="POST", base_uri="https://x.com/", endpoint="tasks", payload=["a"]
            )

    def test_is_immutable(self):
        """Should not allow fields to be reassigned."""
        descriptor = RequestDescriptor(method="GET", base_uri="https://x.com/", endpoint="tasks")
        with pytest.raises(ValidationError):
            descriptor.endpoint = "projects"
