"""User notice interface."""

from typing import Protocol


class Notifier(Protocol):
    """Fire-and-forget channel for user-facing messages."""

    def notify(self, message: str, *, error: bool = False) -> None:
        ...
