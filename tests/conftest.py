import logging
import tempfile
from pathlib import Path

import pytest

from shwrap.configs import parse_document
from shwrap.core import logging as shwrap_logging
from shwrap.core.environment import Environment


@pytest.fixture
def temp_dir():
    """Temporary directory for file operations."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def environment(temp_dir):
    """Environment snapshot with a fake home and a few variables."""
    return Environment(
        home=Path("/home/tester"),
        cwd=temp_dir,
        variables={
            "HOME": "/home/tester",
            "PROJECT": "/srv/project",
            "CACHE_DIR": "/var/cache/app",
        },
    )


@pytest.fixture
def load_document():
    """Parse an inline YAML policy."""

    def _load(yaml_text: str):
        return parse_document(yaml_text)

    return _load


@pytest.fixture(autouse=True)
def reset_shwrap_logging(monkeypatch):
    """Undo CLI logging setup so caplog sees shwrap records in every test."""
    for name in ("SHWRAP_CONFIG", "SHWRAP_LOG_LEVEL", "SHWRAP_SANDBOX_BINARY"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("shwrap")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    shwrap_logging._configured = False
