"""Library settings for loading and writing configuration documents."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

SETTINGS_ENV_VAR = "TOOLBOX_CONFIG_SETTINGS"
DEFAULT_SETTINGS_PATH = "~/.toolbox-config/settings.yaml"

VALID_NOTE_TYPE_MODES = ("lazy", "eager")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ToolboxSettings:
    """Settings shared by ``SubredditConfig`` and the CLI.

    Attributes:
        note_types: "lazy" writes default note types into the document on
            first read; "eager" does it as soon as the document is loaded.
        indent: Default indent for ``SubredditConfig.to_string``. Leave unset
            when saving to the wiki, page space is limited.
        warn_duplicate_note_types: Log a warning when two note types share a key.
        log_level: Logging level used by the CLI.
    """
    note_types: str = "lazy"
    indent: Optional[int] = None
    warn_duplicate_note_types: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.note_types not in VALID_NOTE_TYPE_MODES:
            raise ValueError(
                f"Invalid note_types mode: {self.note_types}. "
                f"Valid options: 'lazy', 'eager'"
            )
        if self.indent is not None:
            if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
                raise ValueError(f"indent must be a non-negative integer, got {self.indent!r}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")

    @classmethod
    def from_file(cls, path: str | Path) -> "ToolboxSettings":
        """Load settings from a YAML file; a missing file yields defaults."""
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ToolboxSettings":
        """Create settings from a dictionary, rejecting unknown keys."""
        if not isinstance(data, dict):
            raise ValueError("settings must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls) -> "ToolboxSettings":
        """Load settings from the file named by TOOLBOX_CONFIG_SETTINGS."""
        return cls.from_file(os.environ.get(SETTINGS_ENV_VAR, DEFAULT_SETTINGS_PATH))
