"""Structural validation and normalization of configuration documents."""

import logging
from typing import Any

from pydantic import ValidationError

from .errors import ConfigValidationError, ValidationIssue
from .schema import ConfigDocument

logger = logging.getLogger(__name__)

ROOT = "document"

# Pydantic error types grouped by the shape they expected
_EXPECTED = {
    "model_type": "expected object",
    "model_attributes_type": "expected object",
    "dict_type": "expected object",
    "list_type": "expected array",
    "string_type": "expected string",
    "bool_type": "expected boolean",
    "bool_parsing": "expected boolean",
    "int_type": "expected integer",
    "int_parsing": "expected integer",
    "int_from_float": "expected integer",
}

# Reported order within one depth: required, then type, then extra keys
_PRECEDENCE = {"missing": 0, "extra_forbidden": 2}


def _format_path(loc: tuple) -> str:
    return "/".join([ROOT, *(str(part) for part in loc)])


def _issue_from_error(error: dict) -> tuple[int, int, ValidationIssue]:
    """Translate one pydantic error into (depth, precedence, issue)."""
    kind = error["type"]
    loc = tuple(error["loc"])
    ctx = error.get("ctx") or {}

    if kind == "missing":
        parent, key = loc[:-1], loc[-1]
        issue = ValidationIssue(_format_path(parent), f"must have required property '{key}'")
        depth = len(parent)
    elif kind == "extra_forbidden":
        parent, key = loc[:-1], loc[-1]
        issue = ValidationIssue(_format_path(parent), f"must not have additional properties ('{key}')")
        depth = len(parent)
    else:
        if kind in _EXPECTED:
            message = _EXPECTED[kind]
        elif kind in ("enum", "literal_error"):
            message = f"must be equal to one of the allowed values: {ctx.get('expected')}"
        elif kind == "greater_than_equal":
            message = f"must be >= {ctx.get('ge')}"
        elif kind == "less_than_equal":
            message = f"must be <= {ctx.get('le')}"
        else:
            message = error["msg"][0].lower() + error["msg"][1:]
        issue = ValidationIssue(_format_path(loc), message)
        depth = len(loc)

    return depth, _PRECEDENCE.get(kind, 1), issue


def issues_from_validation_error(exc: ValidationError) -> list[ValidationIssue]:
    """Order pydantic errors root-down, then by precedence, keeping declaration order."""
    ranked = [_issue_from_error(error) for error in exc.errors()]
    ranked.sort(key=lambda item: (item[0], item[1]))
    return [issue for _, _, issue in ranked]


def validate_document(document: Any) -> dict:
    """Validate *document* against the latest schema.

    Primitive mismatches are coerced (``"1"`` to ``1``, ``"true"`` to
    ``True``, numbers to strings); structural mismatches are not.

    Returns:
        The coerced document in wire form. Absent top-level sections are
        present with a ``None`` value; see ``normalize_document``.

    Raises:
        ConfigValidationError: With every violation, first one in the message.
    """
    try:
        model = ConfigDocument.model_validate(document)
    except ValidationError as exc:
        raise ConfigValidationError(issues_from_validation_error(exc)) from None
    return model.model_dump(mode="json", by_alias=True)


def normalize_document(document: dict) -> dict:
    """Drop top-level ``None`` values so absence is the only "unset" form.

    Only the root is scanned; nested values are returned untouched.
    """
    normalized = {key: value for key, value in document.items() if value is not None}
    dropped = len(document) - len(normalized)
    if dropped:
        logger.debug("Normalized %d unset section(s) to absent", dropped)
    return normalized
