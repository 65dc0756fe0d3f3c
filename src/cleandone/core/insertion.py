"""Insertion policy for new todo lines."""

from enum import Enum

from .grammar import detect_separator


class InsertPosition(Enum):
    """Where a new todo goes in the note."""

    PREPEND = "prepend"
    APPEND = "append"


def format_todo_line(body: str, sep: str = "\n") -> str:
    """Render a new unchecked todo. The body is used verbatim."""
    return f"- [ ] {body}{sep}"


def _blank_line_separator(text: str, sep: str) -> str:
    if not text or text.endswith("\n\n") or text.endswith("\r\n\r\n"):
        return ""
    if text.endswith("\n"):
        return sep
    return sep + sep


def insert_todo(
    text: str,
    body: str,
    position: InsertPosition,
    content_start: int | None = None,
) -> str:
    """
    Insert a new unchecked todo into note text.

    APPEND puts it at the very end, after a blank line. PREPEND puts it at
    content_start (just past the front matter) or at the top of the note.
    The new line ends with the note's own separator. Existing lines are
    never touched.
    """
    sep = detect_separator(text)
    line = format_todo_line(body, sep)

    if position is InsertPosition.APPEND:
        return text + _blank_line_separator(text, sep) + line

    offset = min(max(content_start or 0, 0), len(text))
    return text[:offset] + line + text[offset:]
