"""Output shaping for the online code runner."""

from __future__ import annotations

MAX_LINES = 30
MAX_CHARS = 1000
ELLIPSIS = "\n............\n............"


def cut_too_long(text: str) -> str:
    """Cut output after 30 line breaks or 1000 characters, appending an ellipsis.

    ``\\r\\n`` counts as a single line break.
    """
    count = 0
    for i, ch in enumerate(text):
        if ch == "\r" and text[i + 1 : i + 2] == "\n":
            pass
        elif ch in "\r\n":
            count += 1
        if count > MAX_LINES or i > MAX_CHARS:
            return text[: i - 1] + ELLIPSIS
    return text