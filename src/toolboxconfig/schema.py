"""Pydantic models describing the latest toolbox configuration schema.

These models only declare shape: field names, types, enums and optionality.
Every model forbids undeclared keys, so typos and stale fields surface as
validation errors instead of being silently dropped. Wire names are camelCase
and generated from the snake_case attribute names.

Note that the models describe the *latest* schema only. Older documents must
go through ``toolboxconfig.migrations`` before they will validate.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Inclusive range of schema versions this library understands
EARLIEST_KNOWN_VERSION = 1
LATEST_KNOWN_VERSION = 1


class RemovalOption(str, Enum):
    """How subreddit removal settings are enforced on moderators."""
    SUGGEST = "suggest"  # Subreddit settings are defaults, changeable per removal
    LEAVE = "leave"      # Each moderator's personal settings are used
    FORCE = "force"      # Subreddit settings are used and cannot be changed


class ReplyType(str, Enum):
    """How removal messages are delivered by default."""
    REPLY = "reply"
    PM = "pm"
    BOTH = "both"
    NONE = "none"


class ToolboxModel(BaseModel):
    """Base model: closed schema, camelCase aliases, primitive coercion."""
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        coerce_numbers_to_str=True,
    )


# =============================================================================
# Section records
# =============================================================================

class DomainTag(ToolboxModel):
    """A color-coded label for submissions linking to a domain."""
    name: str
    color: str


class BanMacro(ToolboxModel):
    """Default texts used when banning via the mod button."""
    note: str
    message: str


class RemovalReasonSettings(ToolboxModel):
    """Removal message templates and delivery settings.

    Attributes:
        header: Header text for removal messages (may include tokens).
        footer: Footer text for removal messages (may include tokens).
        pm_subject: Subject for removal messages sent as PM/modmail.
        log_reason: Deprecated logging-sub reason template.
        log_sub: Deprecated logging-sub target, empty for none.
        log_title: Deprecated logging-sub title template.
        ban_title: Unimplemented; kept for round-trip safety.
        get_from: Subreddit to borrow reasons from, empty for none.
        removal_option: How these settings are enforced.
        reply_type: How the message is delivered.
        sticky_reply: Sticky reply comments where possible.
        comment_as_subreddit: Reply as the subreddit's ModTeam account.
        lock_thread: Lock the submission when a reason is applied.
        lock_comment: Lock the reply comment.
        send_as_subreddit_modmail: Send PMs through modmail.
        auto_archive_modmail: Archive the modmail sent for a removal.
    """
    header: str
    footer: str
    pm_subject: str
    log_reason: str
    log_sub: str
    log_title: str
    ban_title: str
    get_from: str
    removal_option: RemovalOption
    reply_type: ReplyType
    sticky_reply: bool
    comment_as_subreddit: bool
    lock_thread: bool
    lock_comment: bool
    send_as_subreddit_modmail: bool
    auto_archive_modmail: bool


class RemovalReason(ToolboxModel):
    """A predefined removal message and flair assignment."""
    title: str
    text: str
    flair_text: str
    flair_css: str
    removes_posts: bool
    removes_comments: bool


class RemovalReasonSettingsAndReasons(RemovalReasonSettings):
    """The stored removal reason section: settings plus the reasons themselves."""
    reasons: list[RemovalReason]


class ModMacro(ToolboxModel):
    """A reply/action bundle moderators can apply to an item."""
    title: str
    text: str
    distinguish: bool
    ban: bool
    mute: bool
    remove: bool
    approve: bool
    lock_thread: bool
    sticky: bool
    archive_modmail: bool
    highlight_modmail: bool


class UsernoteType(ToolboxModel):
    """A usernote category.

    ``key`` is referenced by stored usernotes and must never change once
    notes of this type exist.
    """
    key: str
    color: str
    text: str


# =============================================================================
# Root document
# =============================================================================

class ConfigDocument(ToolboxModel):
    """The full configuration document at the latest schema version."""
    version: int = Field(ge=EARLIEST_KNOWN_VERSION, le=LATEST_KNOWN_VERSION)
    domain_tags: Optional[list[DomainTag]] = None
    ban_macro: Optional[BanMacro] = None
    removal_reason_settings: Optional[RemovalReasonSettingsAndReasons] = None
    mod_macros: Optional[list[ModMacro]] = None
    note_types: Optional[list[UsernoteType]] = None

    @field_validator(
        "domain_tags",
        "ban_macro",
        "removal_reason_settings",
        "mod_macros",
        "note_types",
        mode="before",
    )
    @classmethod
    def _falsy_scalar_is_unset(cls, value: Any) -> Any:
        # The stock toolbox page writes "" for every section it has not set up;
        # 0 and false are read as unset too
        if isinstance(value, (str, int, float)) and not value:
            return None
        return value


def config_json_schema() -> dict:
    """Export the schema declaration as a JSON Schema dict."""
    return ConfigDocument.model_json_schema(by_alias=True)
