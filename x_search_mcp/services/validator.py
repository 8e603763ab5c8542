"""
Services - Input Validator

Turns raw tool arguments into a SearchRequest, reporting every problem
at once instead of stopping at the first one.
"""

import logging
import re
from datetime import date
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from x_search_mcp.exceptions import InputValidationError, ValidationIssue
from x_search_mcp.schemas.search import SearchRequest

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DATE_FORMAT_MESSAGE = "Date must be in YYYY-MM-DD format"
INVALID_DATE_MESSAGE = "Invalid date"
EXCLUSIVE_HANDLES_MESSAGE = (
    "allowed_x_handles and excluded_x_handles cannot both be set"
)
DATE_ORDER_MESSAGE = "from_date must be before or equal to to_date"


def validate_date(value: str) -> Optional[str]:
    """
    Check a YYYY-MM-DD date string.

    The string must match the pattern, name a real calendar day, and
    render back to itself.

    Returns:
        None when valid, otherwise the error message
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return DATE_FORMAT_MESSAGE
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return INVALID_DATE_MESSAGE
    if parsed.isoformat() != value:
        return INVALID_DATE_MESSAGE
    return None


def validate_search_args(raw: Any) -> SearchRequest:
    """
    Validate raw x_search arguments.

    Field rules run in one strict pydantic pass (no coercion of
    booleans or strings); cross-field rules run separately over the
    raw arguments. All issues are collected before deciding.

    Args:
        raw: Argument mapping as received from the caller

    Returns:
        The validated SearchRequest

    Raises:
        InputValidationError: with one issue per violated rule
    """
    if not isinstance(raw, Mapping):
        raise InputValidationError(
            [ValidationIssue("arguments", "Expected an object")]
        )

    # Explicit null means "not provided"
    args = {key: value for key, value in raw.items() if value is not None}

    unknown = sorted(set(args) - set(SearchRequest.model_fields))
    if unknown:
        logger.debug("Ignoring unknown x_search arguments: %s", ", ".join(unknown))

    issues: List[ValidationIssue] = []
    request: Optional[SearchRequest] = None

    try:
        request = SearchRequest.model_validate(args)
    except ValidationError as exc:
        issues.extend(_issues_from_pydantic(exc))

    issues.extend(_cross_field_issues(args))

    if issues:
        raise InputValidationError(issues)
    return request


def _issues_from_pydantic(exc: ValidationError) -> List[ValidationIssue]:
    return [
        ValidationIssue(_format_loc(error["loc"]), error["msg"])
        for error in exc.errors()
    ]


def _format_loc(loc: Tuple[Union[str, int], ...]) -> str:
    if not loc:
        return "arguments"
    field = str(loc[0])
    for part in loc[1:]:
        field += f"[{part}]" if isinstance(part, int) else f".{part}"
    return field


def _cross_field_issues(args: Mapping[str, Any]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    if "allowed_x_handles" in args and "excluded_x_handles" in args:
        issues.append(ValidationIssue("allowed_x_handles", EXCLUSIVE_HANDLES_MESSAGE))

    valid_dates = {}
    for name in ("from_date", "to_date"):
        value = args.get(name)
        # Non-strings are already reported by the field pass
        if not isinstance(value, str):
            continue
        error = validate_date(value)
        if error:
            issues.append(ValidationIssue(name, error))
        else:
            valid_dates[name] = date.fromisoformat(value)

    if len(valid_dates) == 2 and valid_dates["from_date"] > valid_dates["to_date"]:
        issues.append(ValidationIssue("from_date", DATE_ORDER_MESSAGE))

    return issues
