"""Document loading pipeline: parse, migrate, validate, normalize."""

import json
from typing import Any, Optional

from .errors import ConfigParseError, ConfigValidationError, ValidationIssue
from .migrations import DEFAULT_CHAIN, MigrationChain
from .validation import ROOT, normalize_document, validate_document


def parse_document(text: str | bytes) -> Any:
    """Parse raw page contents.

    Raises:
        ConfigParseError: If the text is not well-formed JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(exc.msg, exc.lineno, exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"document is not valid text: {exc.reason}") from exc
    except RecursionError as exc:
        raise ConfigParseError("document is nested too deeply") from exc


def prepare_document(data: Any, chain: Optional[MigrationChain] = None) -> dict:
    """Migrate, validate and normalize already-parsed data."""
    if not isinstance(data, dict):
        raise ConfigValidationError([ValidationIssue(ROOT, "expected object")])
    migrated = (chain or DEFAULT_CHAIN).migrate(data)
    return normalize_document(validate_document(migrated))


def load_document(text: str | bytes, chain: Optional[MigrationChain] = None) -> dict:
    """Run the full pipeline on raw page contents.

    Args:
        text: JSON text of the configuration page.
        chain: Migration chain to use; the built-in one by default.

    Returns:
        A normalized document at the chain's latest version.
    """
    return prepare_document(parse_document(text), chain=chain)
