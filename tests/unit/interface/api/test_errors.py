"""Unit tests for error translation and form parsing helpers."""

import json

import pytest

from hub.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    RateLimitExceededError,
    ValidationError,
)
from hub.interface.api.errors import error_response, status_for
from hub.interface.api.routes.papers import _parse_authors, _parse_tags


@pytest.mark.parametrize(
    "error, expected",
    [
        (ValidationError("bad"), 400),
        (BusinessRuleViolationError("rule"), 400),
        (AuthenticationError("who"), 401),
        (NotAuthorizedError("no"), 403),
        (NotFoundError("Paper", "1"), 404),
        (RateLimitExceededError("slow down", retry_after=30), 429),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_error_response_sets_retry_after():
    response = error_response(429, "Too many attempts", retry_after=12)

    assert response.status_code == 429
    assert response.headers["retry-after"] == "12"
    assert json.loads(response.body) == {
        "success": False,
        "message": "Too many attempts",
        "retry_after": 12,
    }


def test_error_response_omits_empty_errors():
    response = error_response(400, "Validation failed", errors=[])

    assert json.loads(response.body) == {
        "success": False,
        "message": "Validation failed",
    }


class TestFormParsing:
    """Multipart fields carrying JSON arrays."""

    def test_authors_accept_names_and_objects(self):
        authors = _parse_authors(
            json.dumps(["Ada Lovelace", {"name": "Alan Turing", "affiliation": "NPL"}])
        )

        assert [a.name for a in authors] == ["Ada Lovelace", "Alan Turing"]
        assert authors[1].affiliation == "NPL"

    def test_tags_lowercased_and_blanks_dropped(self):
        assert _parse_tags(json.dumps(["ML", " ", "Neuro "])) == ["ml", "neuro"]

    def test_missing_field_is_empty(self):
        assert _parse_tags(None) == []
        assert _parse_authors("") == []

    @pytest.mark.parametrize("raw", ["not json", '{"a": 1}', "[1, [2]]"])
    def test_malformed_authors(self, raw):
        with pytest.raises(ValidationError, match="Invalid authors format"):
            _parse_authors(raw)
