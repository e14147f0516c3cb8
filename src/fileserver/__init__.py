"""
=============================================================================
FILESERVER - Static File Response Decisions
=============================================================================

Given a request for a static resource and a way to look up file
metadata, this package decides exactly how to answer: which file
variant, which status, which headers and which bytes. It never reads or
sends the bytes itself.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    fileserver/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI (python -m fileserver)
    ├── config.py            # FileAppConfig dataclass
    ├── core/
    │   └── metadata.py      # ResourceMetadata + metadata providers
    ├── http/
    │   ├── request.py       # FileRequest and header accessors
    │   ├── dates.py         # HTTP-date parse/format
    │   ├── languages.py     # Accept-Language parsing
    │   ├── ranges.py        # Range header parsing
    │   ├── conditional.py   # If-* precedence rules
    │   ├── response.py      # ResponseSpec and assembly
    │   └── status_codes.py  # HTTP status enum
    └── handlers/
        ├── variants.py      # Language variant / redirect search
        └── static.py        # StaticFileHandler

=============================================================================
QUICK START
=============================================================================

    from fileserver import FileRequest, serve_static

    static = serve_static("/var/www")

    spec = static.handle(FileRequest(
        method="GET",
        path="/movie.mp4",
        headers={"Range": "bytes=0-1048575"},
    ))

    spec.status         # HTTPStatus.PARTIAL_CONTENT
    spec.headers        # Last-Modified, Content-Length, Content-Range
    spec.body.range     # Part(skip=0, length=1048576)

=============================================================================
"""

__version__ = "1.0.0"

from .config import FileAppConfig
from .core import (
    ResourceMetadata,
    MetadataProvider,
    FileSystemMetadataProvider,
    InMemoryMetadataProvider,
)
from .http import FileRequest, HTTPStatus, ResponseSpec
from .handlers import StaticFileHandler, serve_static

__all__ = [
    "FileAppConfig",
    "ResourceMetadata",
    "MetadataProvider",
    "FileSystemMetadataProvider",
    "InMemoryMetadataProvider",
    "FileRequest",
    "HTTPStatus",
    "ResponseSpec",
    "StaticFileHandler",
    "serve_static",
    "__version__",
]
