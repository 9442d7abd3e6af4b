"""Pytest fixtures for toolbox-config tests."""

import copy
import json

import pytest

from toolboxconfig import LATEST_KNOWN_VERSION


FULL_DOCUMENT = {
    "version": LATEST_KNOWN_VERSION,
    "domainTags": [
        {"name": "example.com", "color": "#ff0000"},
        {"name": "blogspam.net", "color": "orange"},
    ],
    "banMacro": {
        "note": "see modmail",
        "message": "You have been banned from /r/{subreddit}.",
    },
    "removalReasonSettings": {
        "header": "Hi /u/{author},",
        "footer": "Questions? Message the moderators.",
        "pmSubject": "Your post was removed",
        "logReason": "",
        "logSub": "",
        "logTitle": "",
        "banTitle": "",
        "getFrom": "",
        "removalOption": "force",
        "replyType": "both",
        "stickyReply": True,
        "commentAsSubreddit": True,
        "lockThread": True,
        "lockComment": False,
        "sendAsSubredditModmail": True,
        "autoArchiveModmail": False,
        "reasons": [
            {
                "title": "Rule 1",
                "text": "No reposts.",
                "flairText": "Repost",
                "flairCss": "repost",
                "removesPosts": True,
                "removesComments": False,
            },
        ],
    },
    "modMacros": [
        {
            "title": "Locked",
            "text": "This thread has been locked.",
            "distinguish": True,
            "ban": False,
            "mute": False,
            "remove": False,
            "approve": False,
            "lockThread": True,
            "sticky": True,
            "archiveModmail": False,
            "highlightModmail": False,
        },
    ],
    "noteTypes": [
        {"key": "a", "color": "b", "text": "c"},
        {"key": "d", "color": "e", "text": "f"},
        {"key": "g", "color": "h", "text": "i"},
    ],
}


@pytest.fixture
def full_document():
    """A document using every section, at the latest version."""
    return copy.deepcopy(FULL_DOCUMENT)


@pytest.fixture
def full_text(full_document):
    """JSON text of ``full_document``."""
    return json.dumps(full_document)


@pytest.fixture
def minimal_text():
    """The smallest valid page."""
    return json.dumps({"version": LATEST_KNOWN_VERSION})
