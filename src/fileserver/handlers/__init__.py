"""
=============================================================================
HANDLERS MODULE
=============================================================================

Request handlers built on the HTTP decision pieces.

1. StaticFileHandler / serve_static()
   - Maps URL paths into a document root
   - Directory indexes (index.html) and trailing-slash redirects
   - Language variants selected from Accept-Language
   - Conditional and range requests (200/206/304/412/416)

2. variants
   - The "first existing candidate" search used for both language
     variants and redirect targets

=============================================================================
USAGE
=============================================================================

    from fileserver.handlers import serve_static
    from fileserver.http import FileRequest

    static = serve_static("/var/www/static")
    spec = static.handle(FileRequest(method="GET", path="/css/site.css"))

=============================================================================
"""

from .static import StaticFileHandler, serve_static
from .variants import (
    language_suffixes,
    candidate_paths,
    first_existing,
    resolve,
    add_index,
    redirect_path,
    find_redirect,
    is_negotiated,
)

__all__ = [
    "StaticFileHandler",
    "serve_static",
    "language_suffixes",
    "candidate_paths",
    "first_existing",
    "resolve",
    "add_index",
    "redirect_path",
    "find_redirect",
    "is_negotiated",
]
