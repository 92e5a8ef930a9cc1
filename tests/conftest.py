"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from filedrop.core.config import Settings
from filedrop.core.storage import LocalFileStore
from filedrop.main import create_app

TEST_MAX_FILE_SIZE = 1024


@pytest.fixture
def upload_dir(tmp_path):
    """Empty storage directory."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(upload_dir):
    """Settings pointing at the temporary storage directory, with a small size ceiling."""
    return Settings(upload_dir=upload_dir, max_file_size=TEST_MAX_FILE_SIZE)


@pytest.fixture
def store(upload_dir):
    """Local file store over the temporary directory."""
    return LocalFileStore(upload_dir)


@pytest.fixture
def app(test_settings):
    """Full application built from the test settings."""
    return create_app(test_settings)


@pytest.fixture
async def client(app):
    """HTTP client bound to the full application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
