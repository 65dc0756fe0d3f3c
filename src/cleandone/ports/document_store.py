"""Document store interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class DocumentHandle:
    """A resolved note."""

    identifier: str
    path: Path


class DocumentStore(Protocol):
    """Interface for reading and replacing whole notes."""

    def resolve(self, identifier: str) -> DocumentHandle | None:
        """Look up a note by name. Returns None if it does not exist."""
        ...

    def read(self, handle: DocumentHandle) -> str:
        """Read the full text of a note."""
        ...

    def write(self, handle: DocumentHandle, text: str) -> None:
        """Atomically replace the full text of a note."""
        ...
