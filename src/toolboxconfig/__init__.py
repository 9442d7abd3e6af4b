"""Toolbox configuration pages.

Reads the JSON stored on a subreddit's ``toolbox`` wiki page, upgrades it
from older schema versions, validates it against the latest schema and
exposes typed accessors for each settings section.

Usage:
    from toolboxconfig import SubredditConfig

    config = SubredditConfig(page_text)
    tags = config.get_domain_tags()
    new_page_text = config.to_string()
"""

from .errors import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    ConfigVersionError,
    ValidationIssue,
)
from .loader import load_document, parse_document
from .migrations import MigrationChain, migrate_to_latest
from .schema import EARLIEST_KNOWN_VERSION, LATEST_KNOWN_VERSION, ConfigDocument
from .settings import ToolboxSettings
from .subreddit_config import SubredditConfig
from .validation import normalize_document, validate_document

__all__ = [
    "SubredditConfig",
    "ToolboxSettings",
    "ConfigDocument",
    "MigrationChain",
    "EARLIEST_KNOWN_VERSION",
    "LATEST_KNOWN_VERSION",
    "load_document",
    "parse_document",
    "migrate_to_latest",
    "validate_document",
    "normalize_document",
    "ConfigError",
    "ConfigParseError",
    "ConfigVersionError",
    "ConfigValidationError",
    "ValidationIssue",
]
