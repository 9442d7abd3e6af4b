"""Typed errors raised while loading a toolbox configuration document.

Every error derives from ``ConfigError`` (itself a ``ValueError``), so callers
that only care about "the page is unusable" can catch a single class.
"""

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigVersionError",
    "ConfigValidationError",
    "ValidationIssue",
    "format_error",
]


class ConfigError(ValueError):
    """Base class for all configuration document errors."""


class ConfigParseError(ConfigError):
    """The document text is not well-formed JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        self.lineno = lineno
        self.colno = colno
        if lineno is not None:
            message = f"{message} (line {lineno}, column {colno})"
        super().__init__(message)


class ConfigVersionError(ConfigError):
    """The document version is missing or outside the known schema range."""

    def __init__(self, message: str, version: object = None, earliest: Optional[int] = None, latest: Optional[int] = None):
        self.version = version
        self.earliest = earliest
        self.latest = latest
        super().__init__(message)


@dataclass(frozen=True)
class ValidationIssue:
    """A single structural violation.

    Attributes:
        path: Slash-separated location from the root, e.g. ``document/noteTypes/0``.
        message: Description of the expected shape.
    """
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ConfigValidationError(ConfigError):
    """The document does not conform to the latest schema.

    ``issues`` holds every violation, root-down; the message (and the
    ``path``/``message`` shortcuts) describe the first one.
    """

    def __init__(self, issues: list[ValidationIssue]):
        if not issues:
            raise ValueError("ConfigValidationError requires at least one issue")
        self.issues = list(issues)
        super().__init__(str(self.issues[0]))

    @property
    def path(self) -> str:
        return self.issues[0].path

    @property
    def message(self) -> str:
        return self.issues[0].message


def format_error(e: BaseException) -> str:
    """Return a short operator-facing message like 'ConfigParseError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
