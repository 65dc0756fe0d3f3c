"""Workflow layer between the CLI and the pure passes.

Each workflow resolves a note, reads it, runs one or more passes, writes
the result back only when it changed, and reports through a Notifier.
Host failures are caught here and turned into notices.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum

from .adapters.file_store import FileDocumentStore
from .config import Config
from .core.cleaner import clean
from .core.frontmatter import metadata_header
from .core.insertion import InsertPosition, insert_todo
from .core.reorder import reorder
from .errors import DocumentError, DocumentNotFound
from .ports.document_store import DocumentHandle, DocumentStore
from .ports.notifier import Notifier

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """How a workflow ended."""

    CHANGED = "changed"
    NOTHING_TO_DO = "nothing_to_do"
    FAILED = "failed"


@dataclass(frozen=True)
class DocumentChanged:
    """A note was modified outside of cleandone."""

    identifier: str


class DocumentLocks:
    """One lock per note so read-modify-write cycles never overlap."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def for_document(self, handle: DocumentHandle) -> threading.Lock:
        key = str(handle.path)
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())


_locks = DocumentLocks()


def get_store(config: Config) -> FileDocumentStore:
    """Resolve the vault from config."""
    return FileDocumentStore(config.vault_path)


def _resolve(store: DocumentStore, identifier: str | None) -> DocumentHandle:
    if not identifier:
        raise DocumentNotFound("No note given.")
    handle = store.resolve(identifier)
    if handle is None:
        raise DocumentNotFound(f"Note not found: {identifier}")
    return handle


def _rewrite(
    store: DocumentStore,
    identifier: str | None,
    transform: Callable[[str], str],
) -> tuple[DocumentHandle, bool]:
    """
    Run one read-modify-write cycle under the note's lock.

    Returns the handle and whether anything was written.
    """
    handle = _resolve(store, identifier)
    with _locks.for_document(handle):
        original = store.read(handle)
        updated = transform(original)
        if updated == original:
            return handle, False
        store.write(handle, updated)
    return handle, True


def clean_note(
    config: Config,
    store: DocumentStore,
    notifier: Notifier,
    identifier: str | None = None,
    today: date | None = None,
) -> Outcome:
    """Remove expired completed todos from a note, then reorder if enabled."""
    config = config.snapshot()
    today = today or date.today()
    identifier = identifier or config.todo_note_filename
    removed = 0

    def transform(text: str) -> str:
        nonlocal removed
        result = clean(text, config.days_threshold, today)
        removed = result.removed
        if result.changed and config.auto_move_checked:
            return reorder(result.text)
        return result.text

    try:
        handle, _ = _rewrite(store, identifier, transform)
    except DocumentNotFound as e:
        logger.info(str(e))
        notifier.notify("No note to clean.", error=True)
        return Outcome.FAILED
    except DocumentError as e:
        logger.error(f"Clean failed for {identifier}: {e}")
        notifier.notify(str(e), error=True)
        return Outcome.FAILED

    if not removed:
        notifier.notify("Nothing to clean: no matching lines.")
        return Outcome.NOTHING_TO_DO

    logger.info(f"Removed {removed} line(s) from {handle.path}")
    notifier.notify(
        f"Removed {removed} task(s) completed more than {config.days_threshold} day(s) ago."
    )
    return Outcome.CHANGED


def add_todo(
    config: Config,
    store: DocumentStore,
    notifier: Notifier,
    body: str,
    identifier: str | None = None,
    position: InsertPosition | None = None,
) -> Outcome:
    """Insert a new unchecked todo into the target note."""
    config = config.snapshot()
    identifier = identifier or config.todo_note_filename
    position = position or config.insert_position

    if not body.strip():
        notifier.notify("Nothing to add.")
        return Outcome.NOTHING_TO_DO

    def transform(text: str) -> str:
        header = metadata_header(text)
        content_start = header.content_start if header.exists else None
        return insert_todo(text, body, position, content_start)

    try:
        handle, _ = _rewrite(store, identifier, transform)
    except DocumentNotFound as e:
        logger.info(str(e))
        notifier.notify(f"Todo note not found: {identifier}", error=True)
        return Outcome.FAILED
    except DocumentError as e:
        logger.error(f"Add failed for {identifier}: {e}")
        notifier.notify(str(e), error=True)
        return Outcome.FAILED

    logger.info(f"Added todo to {handle.path} ({position.value})")
    notifier.notify(f"Added to {identifier}.")
    return Outcome.CHANGED


def reorder_note(
    config: Config,
    store: DocumentStore,
    notifier: Notifier,
    identifier: str | None = None,
) -> Outcome:
    """Move checked todos below unchecked ones, and todos below other text."""
    identifier = identifier or config.todo_note_filename

    try:
        _, written = _rewrite(store, identifier, reorder)
    except DocumentNotFound as e:
        logger.info(str(e))
        notifier.notify("No note to reorder.", error=True)
        return Outcome.FAILED
    except DocumentError as e:
        logger.error(f"Reorder failed for {identifier}: {e}")
        notifier.notify(str(e), error=True)
        return Outcome.FAILED

    if not written:
        notifier.notify("Already in order.")
        return Outcome.NOTHING_TO_DO

    notifier.notify(f"Reordered {identifier}.")
    return Outcome.CHANGED


def handle_document_changed(
    event: DocumentChanged,
    config: Config,
    store: DocumentStore,
    notifier: Notifier,
) -> Outcome:
    """
    React to an outside edit of a note.

    With auto_move_checked on, the note is reordered. A note that is
    already in order is not written, so the write this causes does not
    trigger another round.
    """
    config = config.snapshot()
    if not config.auto_move_checked:
        logger.debug(f"Ignoring change to {event.identifier}: auto move disabled")
        return Outcome.NOTHING_TO_DO

    try:
        handle, written = _rewrite(store, event.identifier, reorder)
    except DocumentError as e:
        logger.warning(f"Auto reorder failed for {event.identifier}: {e}")
        notifier.notify(str(e), error=True)
        return Outcome.FAILED

    if not written:
        return Outcome.NOTHING_TO_DO

    logger.info(f"Moved checked todos in {handle.path}")
    return Outcome.CHANGED
