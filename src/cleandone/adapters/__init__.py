"""Adapters - I/O implementations of ports."""

from .file_store import FileDocumentStore
from .console_notifier import ConsoleNotifier

__all__ = [
    "FileDocumentStore",
    "ConsoleNotifier",
]
