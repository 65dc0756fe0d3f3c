"""Ports - interfaces/protocols for the host around the core."""

from .document_store import DocumentHandle, DocumentStore
from .notifier import Notifier

__all__ = [
    "DocumentHandle",
    "DocumentStore",
    "Notifier",
]
