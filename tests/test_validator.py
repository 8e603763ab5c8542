"""
Unit Tests for the Input Validator
"""

import pytest

from x_search_mcp.exceptions import InputValidationError
from x_search_mcp.schemas.search import SearchRequest
from x_search_mcp.services.validator import (
    DATE_FORMAT_MESSAGE,
    DATE_ORDER_MESSAGE,
    EXCLUSIVE_HANDLES_MESSAGE,
    INVALID_DATE_MESSAGE,
    validate_date,
    validate_search_args,
)


def _issues(raw):
    with pytest.raises(InputValidationError) as exc_info:
        validate_search_args(raw)
    return exc_info.value


class TestValidateDate:
    """Tests for validate_date."""

    def test_valid_date(self):
        assert validate_date("2025-12-01") is None

    def test_leap_day(self):
        assert validate_date("2024-02-29") is None
        assert validate_date("2025-02-29") == INVALID_DATE_MESSAGE

    def test_impossible_day_matches_pattern_but_fails(self):
        """2025-02-30 has the right shape but is not a calendar date."""
        assert validate_date("2025-02-30") == INVALID_DATE_MESSAGE

    def test_unpadded_date_fails_pattern(self):
        assert validate_date("2025-2-5") == DATE_FORMAT_MESSAGE

    def test_month_out_of_range(self):
        assert validate_date("2025-13-01") == INVALID_DATE_MESSAGE

    def test_rejects_trailing_text(self):
        assert validate_date("2025-12-01\n") == DATE_FORMAT_MESSAGE
        assert validate_date("2025-12-01T00:00:00") == DATE_FORMAT_MESSAGE

    def test_rejects_non_ascii_digits(self):
        assert validate_date("２０２５-１２-０１") == DATE_FORMAT_MESSAGE


class TestValidateSearchArgs:
    """Tests for validate_search_args."""

    def test_minimal_query(self):
        request = validate_search_args({"query": "What is new on X?"})

        assert isinstance(request, SearchRequest)
        assert request.query == "What is new on X?"
        assert request.allowed_x_handles is None
        assert request.excluded_x_handles is None
        assert request.from_date is None
        assert request.to_date is None
        assert request.enable_image_understanding is None
        assert request.enable_video_understanding is None
        assert request.include_raw_response is False

    def test_full_valid_arguments(self):
        request = validate_search_args({
            "query": "launch news",
            "excluded_x_handles": ["spam", "bots"],
            "from_date": "2025-01-01",
            "to_date": "2025-01-31",
            "enable_image_understanding": True,
            "enable_video_understanding": False,
            "include_raw_response": True,
        })

        assert request.excluded_x_handles == ["spam", "bots"]
        assert request.from_date == "2025-01-01"
        assert request.to_date == "2025-01-31"
        assert request.enable_image_understanding is True
        assert request.enable_video_understanding is False
        assert request.include_raw_response is True

    def test_missing_query(self):
        error = _issues({})
        assert error.fields == ["query"]

    def test_empty_query(self):
        error = _issues({"query": ""})
        assert error.fields == ["query"]

    def test_query_length_bound(self):
        assert validate_search_args({"query": "q" * 2000}).query == "q" * 2000
        error = _issues({"query": "q" * 2001})
        assert error.fields == ["query"]

    def test_both_handle_lists_rejected_on_allowed(self):
        error = _issues({
            "query": "q",
            "allowed_x_handles": ["xai"],
            "excluded_x_handles": ["elonmusk"],
        })

        assert error.fields == ["allowed_x_handles"]
        assert error.issues[0].message == EXCLUSIVE_HANDLES_MESSAGE

    def test_too_many_handles(self):
        error = _issues({
            "query": "q",
            "allowed_x_handles": [f"user{i}" for i in range(11)],
        })
        assert error.fields == ["allowed_x_handles"]

    def test_ten_handles_allowed(self):
        request = validate_search_args({
            "query": "q",
            "allowed_x_handles": [f"user{i}" for i in range(10)],
        })
        assert len(request.allowed_x_handles) == 10

    def test_empty_handle_entry(self):
        error = _issues({"query": "q", "allowed_x_handles": ["xai", ""]})
        assert len(error.issues) == 1
        assert error.fields[0].startswith("allowed_x_handles")

    def test_from_after_to(self):
        error = _issues({
            "query": "q",
            "from_date": "2025-12-02",
            "to_date": "2025-12-01",
        })

        assert error.fields == ["from_date"]
        assert error.issues[0].message == DATE_ORDER_MESSAGE

    def test_same_day_range(self):
        request = validate_search_args({
            "query": "q",
            "from_date": "2025-12-01",
            "to_date": "2025-12-01",
        })
        assert request.from_date == request.to_date

    def test_invalid_date_field_scoped(self):
        error = _issues({"query": "q", "to_date": "2025-02-30"})
        assert error.fields == ["to_date"]
        assert error.issues[0].message == INVALID_DATE_MESSAGE

    def test_order_not_checked_when_a_date_is_invalid(self):
        error = _issues({
            "query": "q",
            "from_date": "2025-12-31",
            "to_date": "2025-2-5",
        })
        assert error.fields == ["to_date"]

    def test_booleans_are_not_coerced(self):
        error = _issues({
            "query": "q",
            "enable_image_understanding": "true",
            "enable_video_understanding": 1,
            "include_raw_response": "yes",
        })

        assert sorted(error.fields) == [
            "enable_image_understanding",
            "enable_video_understanding",
            "include_raw_response",
        ]

    def test_collects_every_problem(self):
        """All violations are reported in one pass."""
        error = _issues({
            "query": "",
            "allowed_x_handles": ["xai"],
            "excluded_x_handles": ["other"],
            "from_date": "2025-02-30",
            "enable_video_understanding": "false",
        })

        assert set(error.fields) == {
            "query",
            "allowed_x_handles",
            "from_date",
            "enable_video_understanding",
        }
        assert str(error).startswith("Invalid x_search arguments: ")

    def test_null_means_absent(self):
        request = validate_search_args({
            "query": "q",
            "allowed_x_handles": None,
            "excluded_x_handles": ["spam"],
            "to_date": None,
            "include_raw_response": None,
        })

        assert request.allowed_x_handles is None
        assert request.excluded_x_handles == ["spam"]
        assert request.include_raw_response is False

    def test_unknown_keys_ignored(self):
        request = validate_search_args({"query": "q", "limit": 5})
        assert request.query == "q"

    def test_non_object_arguments(self):
        error = _issues(["query"])
        assert error.fields == ["arguments"]
