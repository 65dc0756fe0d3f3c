"""Checklist line grammar - pure classification, no I/O."""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

UNCHECKED_RE = re.compile(r"^- \[ \]")
CHECKED_RE = re.compile(r"^- \[[xX]\]")
# First "✅ YYYY-MM-DD" on the line wins
COMPLETION_RE = re.compile(r"✅\s*(\d{4}-\d{2}-\d{2})")
LINE_RE = re.compile(r"[^\n]*(?:\n|$)")


class LineKind(Enum):
    """What a single line of a note is."""

    OTHER = "other"
    UNCHECKED = "unchecked"
    CHECKED = "checked"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one line."""

    kind: LineKind
    completed_on: date | None = None

    @property
    def is_todo(self) -> bool:
        return self.kind is not LineKind.OTHER


def split_lines(text: str) -> list[str]:
    """
    Split text into lines, each keeping its own separator.

    "".join(split_lines(text)) == text for any input.
    """
    return [m.group(0) for m in LINE_RE.finditer(text) if m.group(0)]


def strip_separator(line: str) -> str:
    """Drop a trailing newline or CRLF, if any. A lone carriage return is line content."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def detect_separator(text: str) -> str:
    """The separator ending the first line, defaulting to "\\n"."""
    index = text.find("\n")
    if index > 0 and text[index - 1] == "\r":
        return "\r\n"
    return "\n"


def parse_completion_date(line: str) -> date | None:
    """Extract the completion date from a checked line, or None."""
    match = COMPLETION_RE.search(line)
    if not match:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


def is_unchecked(line: str) -> bool:
    return UNCHECKED_RE.match(line) is not None


def is_checked(line: str) -> bool:
    return CHECKED_RE.match(line) is not None


def classify(line: str) -> Classification:
    """Classify a line as an unchecked todo, a checked todo, or other text."""
    body = strip_separator(line)
    if is_unchecked(body):
        return Classification(LineKind.UNCHECKED)
    if is_checked(body):
        return Classification(LineKind.CHECKED, parse_completion_date(body))
    return Classification(LineKind.OTHER)
