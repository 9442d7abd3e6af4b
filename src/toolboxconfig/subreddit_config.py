"""Typed access to a subreddit's toolbox configuration page."""

import copy
import json
import logging
import threading
from collections import Counter
from typing import Any, Optional

from .defaults import DEFAULT_REMOVAL_REASON_SETTINGS, DEFAULT_USERNOTE_TYPES
from .loader import load_document, prepare_document
from .migrations import MigrationChain
from .schema import (
    BanMacro,
    DomainTag,
    ModMacro,
    RemovalReason,
    RemovalReasonSettings,
    UsernoteType,
)
from .settings import ToolboxSettings

logger = logging.getLogger(__name__)


class SubredditConfig:
    """Wraps the contents of a subreddit's ``toolbox`` wiki page.

    The page text is upgraded to the latest schema, validated and normalized
    on construction; invalid pages raise a ``ConfigError`` subclass and never
    produce an instance.

    Reads are side-effect free, with one exception: note types. Usernotes
    reference their type by key, so a page without note types gets the
    built-in defaults written into it on first read (or immediately with
    ``note_types: eager``). Saving the page afterwards persists an explicit
    list instead of relying on defaults that could change between releases.

    Example::

        config = SubredditConfig(page_text)
        note_type = config.get_note_type(note.note_type)
        save_page(config.to_string())
    """

    def __init__(
        self,
        text: str | bytes,
        settings: Optional[ToolboxSettings] = None,
        chain: Optional[MigrationChain] = None,
    ):
        self._init(load_document(text, chain=chain), settings)

    @classmethod
    def from_dict(
        cls,
        data: Any,
        settings: Optional[ToolboxSettings] = None,
        chain: Optional[MigrationChain] = None,
    ) -> "SubredditConfig":
        """Build from already-parsed page data. *data* is not mutated."""
        instance = cls.__new__(cls)
        instance._init(prepare_document(data, chain=chain), settings)
        return instance

    def _init(self, document: dict, settings: Optional[ToolboxSettings]) -> None:
        self.settings = settings or ToolboxSettings()
        self._data = document
        self._lock = threading.Lock()

        if self.settings.warn_duplicate_note_types:
            self._warn_duplicate_note_types()
        if self.settings.note_types == "eager":
            self.ensure_default_note_types()

    def _warn_duplicate_note_types(self) -> None:
        counts = Counter(t["key"] for t in self._data.get("noteTypes") or [])
        duplicates = sorted(key for key, n in counts.items() if n > 1)
        if duplicates:
            logger.warning(
                "Duplicate usernote type key(s) %s; lookups return the first match",
                ", ".join(duplicates),
            )

    # ------------------------------------------------------------------ #
    #  Usernote types                                                      #
    # ------------------------------------------------------------------ #

    def ensure_default_note_types(self) -> list[dict]:
        """Write the default note types into the document if it has none.

        Idempotent. An empty list counts as "none". Returns the live list
        stored in the document.
        """
        with self._lock:
            if not self._data.get("noteTypes"):
                self._data["noteTypes"] = copy.deepcopy(DEFAULT_USERNOTE_TYPES)
                logger.debug("Materialized %d default usernote types", len(DEFAULT_USERNOTE_TYPES))
            return self._data["noteTypes"]

    def get_all_note_types(self) -> list[UsernoteType]:
        """Return all usernote types.

        **May modify the document**: see ``ensure_default_note_types``.
        """
        return [UsernoteType.model_validate(t) for t in self.ensure_default_note_types()]

    def get_note_type(self, key: str) -> Optional[UsernoteType]:
        """Return the usernote type with *key*, or None.

        If several types share a key, the first one wins.
        """
        for note_type in self.get_all_note_types():
            if note_type.key == key:
                return note_type
        return None

    # ------------------------------------------------------------------ #
    #  Other sections                                                      #
    # ------------------------------------------------------------------ #

    def get_domain_tags(self) -> list[DomainTag]:
        """Return the configured domain tags."""
        return [DomainTag.model_validate(t) for t in self._data.get("domainTags") or []]

    def get_ban_macro(self) -> Optional[BanMacro]:
        """Return the ban macro, or None if the subreddit has not set one."""
        macro = self._data.get("banMacro")
        if macro is None:
            return None
        return BanMacro.model_validate(macro)

    def get_removal_reason_settings(self) -> RemovalReasonSettings:
        """Return removal reason settings without the reasons themselves.

        Falls back to the built-in defaults when the section is absent.
        """
        section = self._data.get("removalReasonSettings")
        if section is None:
            return RemovalReasonSettings.model_validate(DEFAULT_REMOVAL_REASON_SETTINGS)

        settings = {key: value for key, value in section.items() if key != "reasons"}
        return RemovalReasonSettings.model_validate(settings)

    def get_removal_reasons(self) -> list[RemovalReason]:
        """Return the removal reasons defined on this page."""
        section = self._data.get("removalReasonSettings")
        if section is None:
            return []
        return [RemovalReason.model_validate(r) for r in section["reasons"]]

    def get_mod_macros(self) -> list[ModMacro]:
        """Return the mod macros defined on this page."""
        return [ModMacro.model_validate(m) for m in self._data.get("modMacros") or []]

    # ------------------------------------------------------------------ #
    #  Serialization                                                       #
    # ------------------------------------------------------------------ #

    def to_json(self) -> dict:
        """Return the live document, including any materialized defaults.

        This is the object itself, not a copy; you probably want
        ``to_string`` when saving.
        """
        return self._data

    def to_string(self, indent: Optional[int] = None) -> str:
        """Serialize the document for writing back to the wiki.

        Args:
            indent: Pretty-print indent, defaulting to ``settings.indent``.
                Useful for debugging; leave unset when saving, since wiki
                space is limited.
        """
        if indent is None:
            indent = self.settings.indent
        if indent is None:
            return json.dumps(self._data, ensure_ascii=False, separators=(",", ":"))
        return json.dumps(self._data, ensure_ascii=False, indent=indent)

    def __str__(self) -> str:
        return self.to_string()
