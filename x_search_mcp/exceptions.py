"""
X Search MCP Server - Exceptions

Every failure the x_search pipeline can raise derives from XSearchError,
so the tool boundary can turn any of them into a failure result.
"""

from dataclasses import dataclass
from typing import List, Optional


class XSearchError(Exception):
    """Base exception for x_search failures."""


class ConfigurationError(XSearchError):
    """Raised when required configuration (the API key) is missing."""


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-scoped input problem."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InputValidationError(XSearchError):
    """Raised when tool arguments violate one or more input rules."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = list(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Invalid x_search arguments: {details}")

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]


class UpstreamError(XSearchError):
    """Base class for failures talking to the xAI API."""


class UpstreamTimeoutError(UpstreamError):
    """Raised when the xAI API does not answer within the configured timeout."""


class UpstreamTransportError(UpstreamError):
    """Raised on connection-level failures (DNS, refused, reset...)."""


class UpstreamStatusError(UpstreamError):
    """Raised when the xAI API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"xAI API error {status_code}: {body}")


class UpstreamResponseError(UpstreamError):
    """Raised when a 2xx response body is not valid JSON."""

    def __init__(self, message: str, body: Optional[str] = None):
        self.body = body
        super().__init__(message)
