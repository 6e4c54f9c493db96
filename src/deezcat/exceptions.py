"""Custom exceptions for deezcat.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldIssue:
    """A single validation problem found in a payload.

    Attributes:
        kind: Issue kind ("missing", "type_mismatch", "unexpected", "invalid").
        field: Dotted path of the offending field.
        expected: Expected JSON type (type mismatches only).
        actual: Actual JSON kind or value description.
        message: Human-readable description.
    """

    kind: str
    field: str
    expected: str | None = None
    actual: str | None = None
    message: str = ""


class DeezcatError(Exception):
    """Base exception for deezcat.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SchemaError(DeezcatError):
    """Payload does not match the schema of the requested entity.

    Attributes:
        field: Dotted path of the first offending field, if known.
        issues: Every issue found in the payload, in field order.
    """

    status_code: int = 422  # Unprocessable Entity

    def __init__(
        self,
        message: str,
        field: str | None = None,
        issues: tuple[FieldIssue, ...] = (),
    ) -> None:
        self.field = field
        self.issues = issues
        super().__init__(message)


class MissingField(SchemaError):
    """A required field is absent from the payload."""

    def __init__(self, name: str, issues: tuple[FieldIssue, ...] = ()) -> None:
        self.name = name
        super().__init__(f"Missing required field: {name}", name, issues)


class TypeMismatch(SchemaError):
    """A field holds a value of the wrong JSON type."""

    def __init__(
        self,
        name: str,
        expected: str,
        actual: str,
        issues: tuple[FieldIssue, ...] = (),
    ) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Field {name}: expected {expected}, got {actual}", name, issues
        )


class UnexpectedField(SchemaError):
    """Payload carries a key the schema does not declare.

    Only raised when extra keys are forbidden (see ParseConfig).
    """

    def __init__(self, name: str, issues: tuple[FieldIssue, ...] = ()) -> None:
        self.name = name
        super().__init__(f"Unexpected field: {name}", name, issues)


class InvalidValue(SchemaError):
    """Value has the right type but lies outside a closed vocabulary."""

    def __init__(
        self, name: str, value: Any, issues: tuple[FieldIssue, ...] = ()
    ) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r}", name, issues)


class DeezerUrlParseError(DeezcatError):
    """Failed to parse a Deezer URL.

    Raised when the provided URL is not a track, album, playlist
    or artist link on deezer.com.
    """

    status_code: int = 400  # Bad Request
