"""Reorder pass - moves todos below other text, checked ones last."""

from .grammar import LineKind, classify, detect_separator, split_lines, strip_separator


def partition(lines: list[str]) -> tuple[list[str], list[str], list[str]]:
    """
    Split lines into (other, unchecked, checked).

    Stable: each group keeps its original relative order.
    Pure function - no I/O.
    """
    other, unchecked, checked = [], [], []
    for line in lines:
        kind = classify(line).kind
        if kind is LineKind.UNCHECKED:
            unchecked.append(line)
        elif kind is LineKind.CHECKED:
            checked.append(line)
        else:
            other.append(line)
    return other, unchecked, checked


def reorder(text: str) -> str:
    """
    Regroup lines as other text, then unchecked, then checked todos.

    Text already in that order is returned as is. Otherwise lines are
    rejoined with the first separator found in the document, so mixed
    line endings come out normalized. A separator at the very end of the
    text is kept at the end.
    """
    lines = split_lines(text)
    other, unchecked, checked = partition(lines)
    ordered = other + unchecked + checked
    if ordered == lines:
        return text

    sep = detect_separator(text)
    trailing = lines[-1] != strip_separator(lines[-1])

    result = sep.join(strip_separator(line) for line in ordered)
    if trailing:
        result += sep
    return result
