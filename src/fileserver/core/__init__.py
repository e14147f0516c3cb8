"""
=============================================================================
CORE MODULE
=============================================================================

Low-level pieces the decision engine stands on: file metadata and the
providers that look it up. This is the only place where the package
touches the filesystem, and it only ever calls os.stat().

=============================================================================
"""

from .metadata import (
    ResourceMetadata,
    ResolvedResource,
    MetadataProvider,
    FileSystemMetadataProvider,
    InMemoryMetadataProvider,
)

__all__ = [
    "ResourceMetadata",             # size + mtime of one file
    "ResolvedResource",             # (path, metadata) of a file that exists
    "MetadataProvider",             # lookup(path) interface
    "FileSystemMetadataProvider",   # os.stat() backed
    "InMemoryMetadataProvider",     # dict backed
]
