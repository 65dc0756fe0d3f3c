"""Age policy for completed todos."""

from datetime import date, timedelta


def cutoff_for(today: date, threshold: int) -> date:
    """Start of today minus the threshold in days."""
    return today - timedelta(days=threshold)


def is_expired(completed_on: date | None, threshold: int, cutoff: date) -> bool:
    """
    Whether a completed todo is old enough to remove.

    Dated items expire on or before the cutoff day. Dateless items only
    expire when the threshold is zero.
    """
    if completed_on is None:
        return threshold == 0
    return completed_on <= cutoff
