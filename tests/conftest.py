"""Pytest fixtures for searchmind tests."""

import logging
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from searchmind.config import reset_config
from searchmind.config.schema import SearchMindConfig
from searchmind.embeddings import EmbedderRegistry
from searchmind.stores.base import InMemoryRecordStore


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_files(temp_dir: Path) -> Path:
    """Create sample files for testing."""
    (temp_dir / "apple.txt").write_text("I like apple pie and apple juice.")
    (temp_dir / "notes.md").write_text("# Notes\n\nNothing about fruit here.\n")
    (temp_dir / "main.py").write_text("def main():\n    print('Hello')\n")
    (temp_dir / ".hidden.txt").write_text("apple")

    # Subdirectories are not descended into
    subdir = temp_dir / "src"
    subdir.mkdir()
    (subdir / "apple.py").write_text("# apple module\n")

    return temp_dir


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    """In-memory store with a small posts collection."""
    return InMemoryRecordStore(
        {
            "posts": {
                "post1": {
                    "title": "Swift Concurrency",
                    "body": "Learn structured concurrency",
                    "likes": 1,
                    "published": True,
                },
                "post2": {
                    "title": "Python asyncio",
                    "body": "Tasks and task groups",
                    "tags": ["python", "async"],
                },
                "count": 2,
            },
            "settings": ["not", "a", "collection"],
        }
    )


@pytest.fixture
def default_config() -> SearchMindConfig:
    """Get default configuration."""
    return SearchMindConfig()


@pytest.fixture(autouse=True)
def reset_config_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset config singleton and environment between tests."""
    for name in (
        "SEARCHMIND_CONFIG",
        "SEARCHMIND_LOG_LEVEL",
        "SEARCHMIND_API_KEY",
        "SEARCHMIND_EMBEDDER",
        "SEARCHMIND_DATABASE_URL",
        "SEARCHMIND_DATABASE_TOKEN",
        "OPENAI_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    EmbedderRegistry.clear_cache()
    yield
    reset_config()
    EmbedderRegistry.clear_cache()

    # setup_logging binds handlers to the streams of the run that called it
    package_logger = logging.getLogger("searchmind")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
[search]
fuzzy_matching = false
max_results = 5

[embedding]
provider = "mock"
model = "mock-embedding"

[logging]
level = "debug"
""")
    return config_path
