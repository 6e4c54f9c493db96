"""Structural validation of raw Deezer payloads.

Parsing is all-or-nothing: either a fully validated, frozen record is
returned or a SchemaError subclass is raised. Type checking is strict
(no coercion between strings, numbers and booleans).
"""

import json
import logging
from collections.abc import Mapping, Sequence
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError
from pydantic_core import ErrorDetails

from deezcat.config import ParseConfig
from deezcat.exceptions import (
    FieldIssue,
    InvalidValue,
    MissingField,
    SchemaError,
    TypeMismatch,
    UnexpectedField,
)
from deezcat.models.deezer import Album, Artist, Contributor, DeezerModel, Track
from deezcat.models.enums import LoadOutcome

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=DeezerModel)

ROOT_FIELD = "<root>"

# pydantic error type -> JSON type the field expected
_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "integer",
    "float_type": "number",
    "bool_type": "boolean",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value (null, boolean, number, ...)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    return type(value).__name__


def format_path(loc: Sequence[str | int]) -> str:
    """Format a validation location as a dotted path.

    Examples:
        >>> format_path(("contributors", 0, "share"))
        'contributors[0].share'
        >>> format_path(())
        '<root>'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or ROOT_FIELD


def _issue_from_error(error: ErrorDetails) -> FieldIssue:
    field = format_path(error["loc"])
    if error["type"] == "missing":
        return FieldIssue(
            "missing", field, message=f"Missing required field: {field}"
        )
    expected = _EXPECTED_TYPES.get(error["type"])
    if expected is not None:
        actual = json_kind(error["input"])
        return FieldIssue(
            "type_mismatch",
            field,
            expected=expected,
            actual=actual,
            message=f"Field {field}: expected {expected}, got {actual}",
        )
    return FieldIssue("other", field, message=f"Field {field}: {error['msg']}")


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _strip_optional(annotation: Any) -> Any:
    """Reduce ``X | None`` to ``X``; other annotations pass through."""
    if get_origin(annotation) in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not NoneType]
        if len(args) == 1:
            return args[0]
    return annotation


def find_unexpected_fields(
    model: type[BaseModel], raw: Any, path: tuple[str | int, ...] = ()
) -> list[FieldIssue]:
    """Collect keys in ``raw`` that ``model`` does not declare.

    Recurses into nested models and lists of models. Passthrough
    fields (typed as plain JSON values) are not inspected.
    """
    if not isinstance(raw, Mapping):
        return []

    fields = model.model_fields
    known = {info.alias or name for name, info in fields.items()}
    issues = [
        FieldIssue(
            "unexpected",
            format_path((*path, key)),
            message=f"Unexpected field: {format_path((*path, key))}",
        )
        for key in raw
        if key not in known
    ]

    for name, info in fields.items():
        key = info.alias or name
        value = raw.get(key)
        annotation = _strip_optional(info.annotation)
        if _is_model(annotation):
            issues.extend(find_unexpected_fields(annotation, value, (*path, key)))
        elif get_origin(annotation) is list and isinstance(value, list):
            item_type = get_args(annotation)[0]
            if _is_model(item_type):
                for i, item in enumerate(value):
                    issues.extend(
                        find_unexpected_fields(item_type, item, (*path, key, i))
                    )
    return issues


def _schema_error(issues: Sequence[FieldIssue]) -> SchemaError:
    """Build the exception for the first issue, carrying all of them."""
    first = issues[0]
    all_issues = tuple(issues)
    match first.kind:
        case "missing":
            return MissingField(first.field, all_issues)
        case "type_mismatch":
            return TypeMismatch(
                first.field,
                first.expected or "unknown",
                first.actual or "unknown",
                all_issues,
            )
        case "unexpected":
            return UnexpectedField(first.field, all_issues)
        case _:
            return SchemaError(first.message, first.field, all_issues)


def parse(model: type[M], raw: Any, config: ParseConfig | None = None) -> M:
    """Parse a decoded JSON payload into a record of the given model.

    Args:
        model: Entity model (Track, Album, Artist or Contributor).
        raw: Decoded JSON value, normally a dict.
        config: Optional parse configuration. Uses defaults if not provided.

    Returns:
        The validated, frozen record.

    Raises:
        MissingField: A required field is absent.
        TypeMismatch: A field holds a value of the wrong type.
        UnexpectedField: An undeclared key is present and extra keys are
            forbidden by the config.
        SchemaError: Any other validation failure.
    """
    config = config or ParseConfig()
    issues: list[FieldIssue] = []
    cause: ValidationError | None = None
    record: M | None = None

    try:
        record = model.model_validate(raw)
    except ValidationError as e:
        cause = e
        issues.extend(_issue_from_error(err) for err in e.errors())

    if config.forbid_extra:
        issues.extend(find_unexpected_fields(model, raw))

    if issues or record is None:
        error = _schema_error(issues)
        logger.debug(
            "Failed to parse %s (%d issue(s)): %s",
            model.__name__,
            len(issues),
            error.message,
        )
        raise error from cause

    return record


def parse_json(
    model: type[M], text: str | bytes, config: ParseConfig | None = None
) -> M:
    """Parse JSON text into a record of the given model.

    Raises:
        SchemaError: If the text is not valid JSON (or, for bytes, not
            valid UTF-8), or any error raised by parse().
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        issue = FieldIssue("other", ROOT_FIELD, message=f"Invalid JSON: {e}")
        raise SchemaError(issue.message, ROOT_FIELD, (issue,)) from e
    return parse(model, raw, config)


def parse_contributor(raw: Any, config: ParseConfig | None = None) -> Contributor:
    """Parse a contributor payload."""
    return parse(Contributor, raw, config)


def parse_artist(raw: Any, config: ParseConfig | None = None) -> Artist:
    """Parse an artist payload."""
    return parse(Artist, raw, config)


def parse_album(raw: Any, config: ParseConfig | None = None) -> Album:
    """Parse an album payload."""
    return parse(Album, raw, config)


def parse_track(raw: Any, config: ParseConfig | None = None) -> Track:
    """Parse a track payload."""
    return parse(Track, raw, config)


def parse_load_outcome(raw: Any, field: str = "loadType") -> LoadOutcome:
    """Parse a load outcome tag.

    Accepts exactly: track, playlist, search, empty, error.

    Raises:
        TypeMismatch: If the value is not a string.
        InvalidValue: If the string is not a known outcome.
    """
    if not isinstance(raw, str):
        actual = json_kind(raw)
        issue = FieldIssue(
            "type_mismatch",
            field,
            expected="string",
            actual=actual,
            message=f"Field {field}: expected string, got {actual}",
        )
        raise TypeMismatch(field, "string", actual, (issue,))
    try:
        return LoadOutcome(raw)
    except ValueError:
        issue = FieldIssue(
            "invalid", field, actual=raw, message=f"Invalid value for {field}: {raw!r}"
        )
        raise InvalidValue(field, raw, (issue,)) from None


def serialize(record: DeezerModel) -> dict[str, Any]:
    """Serialize a record back to its JSON payload shape."""
    return record.model_dump(mode="json", by_alias=True)
