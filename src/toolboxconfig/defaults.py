"""Built-in defaults, stored in wire (camelCase) form.

Consumers must copy these before handing them out; they are shared module
state.
"""

from .schema import LATEST_KNOWN_VERSION

# Usernote types toolbox uses when a subreddit has never configured its own
DEFAULT_USERNOTE_TYPES: list[dict] = [
    {"key": "gooduser", "color": "#008000", "text": "Good Contributor"},
    {"key": "spamwatch", "color": "#ff00ff", "text": "Spam Watch"},
    {"key": "spamwarn", "color": "#800080", "text": "Spam Warning"},
    {"key": "abusewarn", "color": "#ffa500", "text": "Abuse Warning"},
    {"key": "ban", "color": "#ff0000", "text": "Ban"},
    {"key": "permban", "color": "#8b0000", "text": "Permanent Ban"},
    {"key": "botban", "color": "#000000", "text": "Bot Ban"},
]

DEFAULT_REMOVAL_REASON_SETTINGS: dict = {
    "header": "",
    "footer": "",
    "pmSubject": "",
    "logReason": "",
    "logSub": "",
    "logTitle": "",
    "banTitle": "",
    "getFrom": "",
    "removalOption": "suggest",
    "replyType": "reply",
    "stickyReply": False,
    "commentAsSubreddit": False,
    "lockThread": False,
    "lockComment": False,
    "sendAsSubredditModmail": False,
    "autoArchiveModmail": False,
}

# Contents of a freshly created toolbox page: every section left blank
DEFAULT_CONFIG: dict = {
    "version": LATEST_KNOWN_VERSION,
    "domainTags": "",
    "removalReasonSettings": "",
    "modMacros": "",
    "noteTypes": "",
    "banMacro": "",
}
