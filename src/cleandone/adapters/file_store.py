"""File-based note storage adapter."""

import logging
import os
import tempfile
from pathlib import Path

from ..errors import DocumentReadError, DocumentWriteError
from ..ports.document_store import DocumentHandle

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


class FileDocumentStore:
    """
    File-based note storage.

    Implements DocumentStore protocol. Notes are markdown files inside a
    vault directory. Line endings are read and written untranslated.
    """

    def __init__(self, vault_dir: Path | str):
        self.vault_dir = Path(vault_dir).expanduser().resolve()

    def _path_for(self, identifier: str) -> Path | None:
        """Map a note name to a path inside the vault, or None if it escapes."""
        name = identifier.strip()
        if not name:
            return None
        if not Path(name).suffix:
            name += NOTE_SUFFIX
        path = (self.vault_dir / name).resolve()
        if not path.is_relative_to(self.vault_dir):
            logger.warning(f"Refusing note outside vault: {identifier}")
            return None
        return path

    def resolve(self, identifier: str) -> DocumentHandle | None:
        """Look up a note by name. Returns None if it does not exist."""
        path = self._path_for(identifier)
        if path is None or not path.is_file():
            return None
        return DocumentHandle(identifier=identifier, path=path)

    def read(self, handle: DocumentHandle) -> str:
        """Read the full text of a note."""
        try:
            with open(handle.path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(f"Could not read {handle.identifier}: {e}") from e

    def write(self, handle: DocumentHandle, text: str) -> None:
        """Atomically replace the full text of a note."""
        directory = handle.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".cleandone-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                    f.write(text)
                os.replace(tmp_name, handle.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise DocumentWriteError(f"Could not write {handle.identifier}: {e}") from e
        logger.debug(f"Wrote {len(text)} chars to {handle.path}")
