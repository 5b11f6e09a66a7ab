import pytest
import tempfile
import shutil
import os

from notestool.config import Config


@pytest.fixture(scope="session")
def test_storage_dir():
    """Create temporary storage directory for tests."""
    tmpdir = tempfile.mkdtemp(prefix="notestool_test_")
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def clean_storage(test_storage_dir, monkeypatch):
    """Provide clean storage for each test."""
    monkeypatch.setattr(
        "notestool.data.store.get_storage_directory", lambda: test_storage_dir
    )
    # Clean between tests
    for item in os.listdir(test_storage_dir):
        path = os.path.join(test_storage_dir, item)
        if os.path.isfile(path):
            os.unlink(path)
    yield test_storage_dir


@pytest.fixture(autouse=True)
def no_screen_clear(monkeypatch):
    """Never shell out to `clear` during tests."""
    monkeypatch.setattr(Config, "ENABLE_SCREEN_CLEAR", False)


@pytest.fixture
def collection_path(clean_storage):
    """Path of a collection file that does not exist yet."""
    return os.path.join(clean_storage, "notes.txt")
