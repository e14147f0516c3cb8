"""
=============================================================================
RESOURCE METADATA
=============================================================================

Size and modification time of a physical file, and the providers that
look them up.

=============================================================================
PROVIDERS
=============================================================================

The decision engine never touches the disk itself. It asks a provider:

    provider.lookup("/var/www/docs/index.html.fr")
        → ResourceMetadata(size=5120, modified_at=...)    file exists
        → None                                            anything else

    ┌─────────────────────────────────────────────────────────────────────┐
    │ FileSystemMetadataProvider  os.stat(); regular files only;         │
    │                             any OSError reads as "does not exist"  │
    ├─────────────────────────────────────────────────────────────────────┤
    │ InMemoryMetadataProvider    dict lookup; for tests and embedding   │
    └─────────────────────────────────────────────────────────────────────┘

Nothing is cached: every variant probed is a fresh lookup, and two
lookups of the same path may disagree if the file changes in between.

=============================================================================
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Mapping, NamedTuple, Optional

from ..http.dates import to_http_precision


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceMetadata:
    """
    What the engine needs to know about a file.

    Attributes:
        size: Size in bytes (>= 0).
        modified_at: Modification time, stored as UTC at whole-second
                     precision (HTTP dates cannot carry more).
    """

    size: int
    modified_at: datetime

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Resource size must be >= 0, got {self.size}")
        object.__setattr__(self, "modified_at", to_http_precision(self.modified_at))

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "ResourceMetadata":
        """Build metadata from an os.stat() result."""
        return cls(
            size=st.st_size,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )


class ResolvedResource(NamedTuple):
    """A physical path that exists, with its metadata."""

    path: str
    metadata: ResourceMetadata


class MetadataProvider(ABC):
    """
    Looks up file metadata by path.

    Implementations must be safe to call repeatedly and from several
    threads at once. They never raise for a missing or unreadable file.
    """

    @abstractmethod
    def lookup(self, path: str) -> Optional[ResourceMetadata]:
        """
        Return metadata for `path`, or None if it is not a servable file.
        """


class FileSystemMetadataProvider(MetadataProvider):
    """Metadata straight from os.stat()."""

    def lookup(self, path: str) -> Optional[ResourceMetadata]:
        try:
            st = os.stat(path)
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL byte in the path
            logger.debug(f"stat failed for {path}: {e}")
            return None

        if not stat.S_ISREG(st.st_mode):
            return None
        return ResourceMetadata.from_stat(st)


class InMemoryMetadataProvider(MetadataProvider):
    """
    Provider backed by a dictionary of path → metadata.

    Example:
        provider = InMemoryMetadataProvider()
        provider.add("/srv/index.html.en", size=120, modified_at=mtime)
    """

    def __init__(self, resources: Optional[Mapping[str, ResourceMetadata]] = None):
        self._resources: Dict[str, ResourceMetadata] = dict(resources or {})

    def add(self, path: str, size: int, modified_at: datetime) -> "InMemoryMetadataProvider":
        """Register a file. Returns self for chaining."""
        self._resources[path] = ResourceMetadata(size=size, modified_at=modified_at)
        return self

    def lookup(self, path: str) -> Optional[ResourceMetadata]:
        return self._resources.get(path)
