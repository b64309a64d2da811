"""Spec title to report file name mapping, shared by sidebar links and page writers."""

import re

# Characters removed outright from a spec title.
DISALLOWED_CHARS = ("|", "\\", "/", "*", "?", ":", ";", "<", ">", ".",
                    '"', "'", "{", "}", "[", "]", "(", ")", "`", "~")

MAX_NAME_LENGTH = 35
HTML_EXT = ".html"

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_filename(title: str) -> str:
    """Map a spec title to a safe, lower-cased ``.html`` file name.

    Different titles may collapse to the same name; callers do not resolve
    collisions.
    """
    s = title or ""
    for ch in DISALLOWED_CHARS:
        s = s.replace(ch, "")
    s = s.replace("_", " ")
    s = _WHITESPACE_RE.sub(" ", s)
    s = s[:MAX_NAME_LENGTH]
    s = s.strip().replace(" ", "_")
    return s.lower() + HTML_EXT
