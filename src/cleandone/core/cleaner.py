"""Cleaner pass - removes expired completed todos from note text."""

from dataclasses import dataclass
from datetime import date

from .age import cutoff_for, is_expired
from .grammar import LineKind, classify, split_lines


@dataclass(frozen=True)
class CleanResult:
    """Rewritten text plus the number of lines removed."""

    text: str
    removed: int = 0

    @property
    def changed(self) -> bool:
        return self.removed > 0


def clean(text: str, threshold: int, today: date) -> CleanResult:
    """
    Remove checked lines whose completion is older than the threshold.

    Expired lines go away together with their separator. Every other line
    is kept byte for byte and in order. When nothing expires the input
    string itself is returned.

    Pure function - no I/O.
    """
    cutoff = cutoff_for(today, threshold)
    kept = []
    removed = 0

    for line in split_lines(text):
        info = classify(line)
        if info.kind is LineKind.CHECKED and is_expired(info.completed_on, threshold, cutoff):
            removed += 1
            continue
        kept.append(line)

    if not removed:
        return CleanResult(text)
    return CleanResult("".join(kept), removed)
