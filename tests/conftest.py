"""Shared fixtures."""

import pytest

from cleandone.adapters.file_store import FileDocumentStore
from cleandone.config import Config


class RecordingNotifier:
    """Notifier that remembers what it was told."""

    def __init__(self):
        self.messages: list[tuple[str, bool]] = []

    def notify(self, message: str, *, error: bool = False) -> None:
        self.messages.append((message, error))

    @property
    def last(self) -> str:
        return self.messages[-1][0]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def vault(tmp_path):
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def store(vault):
    return FileDocumentStore(vault)


@pytest.fixture
def config(vault):
    return Config(vault_dir=str(vault))
