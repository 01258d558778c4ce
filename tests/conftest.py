import pytest

from content_editor.db import init_db
from content_editor.remote import RemoteUnavailableError


class FakeRemote:
    """In-memory stand-in for the remote document store."""

    def __init__(self, fail=False):
        self.docs = {}
        self.fail = fail
        self.puts = []

    def get(self, key):
        if self.fail:
            raise RemoteUnavailableError("offline")
        return self.docs.get(key)

    def put(self, key, record):
        if self.fail:
            raise RemoteUnavailableError("offline")
        self.puts.append((key, record))
        self.docs[key] = record


@pytest.fixture
def tmp_db(tmp_path):
    """Provide an initialized temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_content.db")
    init_db(db_path)
    return db_path


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def offline_remote():
    return FakeRemote(fail=True)
