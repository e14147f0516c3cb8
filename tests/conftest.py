"""
pytest configuration and fixtures.
"""

import os
from datetime import datetime, timezone
from typing import List, Optional

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fileserver import FileAppConfig, StaticFileHandler
from fileserver.core import InMemoryMetadataProvider, ResourceMetadata


MTIME = datetime(2026, 1, 15, 12, 30, 45, tzinfo=timezone.utc)


class CountingProvider(InMemoryMetadataProvider):
    """In-memory provider that records every path it is asked about."""

    def __init__(self):
        super().__init__()
        self.lookups: List[str] = []

    def lookup(self, path: str) -> Optional[ResourceMetadata]:
        self.lookups.append(path)
        return super().lookup(path)


@pytest.fixture
def mtime() -> datetime:
    """Modification time shared by every test resource."""
    return MTIME


@pytest.fixture
def provider() -> CountingProvider:
    """
    Virtual document root under /srv:

        /srv/hello.txt              26 bytes
        /srv/empty.txt               0 bytes
        /srv/page.html              40 bytes
        /srv/page.html.de           50 bytes
        /srv/docs/index.html.en    120 bytes
        /srv/guide/index.html       80 bytes
        /srv/errors/404.html        30 bytes
    """
    return (CountingProvider()
        .add("/srv/hello.txt", 26, MTIME)
        .add("/srv/empty.txt", 0, MTIME)
        .add("/srv/page.html", 40, MTIME)
        .add("/srv/page.html.de", 50, MTIME)
        .add("/srv/docs/index.html.en", 120, MTIME)
        .add("/srv/guide/index.html", 80, MTIME)
        .add("/srv/errors/404.html", 30, MTIME))


@pytest.fixture
def config() -> FileAppConfig:
    """Handler configuration for the virtual document root."""
    return FileAppConfig(document_root="/srv")


@pytest.fixture
def handler(config: FileAppConfig, provider: CountingProvider) -> StaticFileHandler:
    """Static file handler over the in-memory provider."""
    return StaticFileHandler(config, provider)


@pytest.fixture
def docroot(tmp_path: Path) -> Path:
    """
    Real document root on disk, every file stamped with MTIME:

        www/alphabet.txt           26 bytes
        www/docs/index.html        13 bytes
        www/docs/index.html.fr     15 bytes
        www/empty/                 (directory, no index)
    """
    root = tmp_path / "www"
    (root / "docs").mkdir(parents=True)
    (root / "empty").mkdir()

    files = {
        root / "alphabet.txt": b"ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        root / "docs" / "index.html": b"<h1>Docs</h1>",
        root / "docs" / "index.html.fr": b"<h1>Doc FR</h1>",
    }
    stamp = MTIME.timestamp()
    for path, content in files.items():
        path.write_bytes(content)
        os.utime(path, (stamp, stamp))
    return root
