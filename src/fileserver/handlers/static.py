"""
=============================================================================
STATIC FILE HANDLER
=============================================================================

Decides the response for a static file request: status, headers, and
which bytes of which file to send.

=============================================================================
FLOW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     GET /docs/ (Accept-Language: fr)                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  1. Method gate        not GET/HEAD → 405 (no disk access)          │
    │                                                                      │
    │  2. URL → file path    /docs/ → /srv/docs/                          │
    │                        outside prefix, "." or ".." → 404            │
    │                                                                      │
    │  3. Index              /srv/docs/ → /srv/docs/index.html            │
    │                                                                      │
    │  4. Variants           index.html.fr, index.html, index.html.en     │
    │        │                                                             │
    │        ├── found ──► conditional headers ──► 200/206/304/412/416    │
    │        │                                                             │
    │        └── none ───► redirect search (only without trailing "/")    │
    │                         │                                            │
    │                         ├── found ──► 301 Location: .../docs/       │
    │                         └── none ───► 404                           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
SECURITY: PATH TRAVERSAL
=============================================================================

    GET /../../etc/passwd HTTP/1.1

Any path with a "." or ".." segment is refused with 404 before the provider
is asked about it, so a traversal attempt cannot even probe for the
existence of a file outside the document root.

=============================================================================
"""

import logging
from typing import Optional

from ..config import FileAppConfig
from ..core.metadata import FileSystemMetadataProvider, MetadataProvider
from ..http.conditional import evaluate, evaluate_head
from ..http.request import FileRequest
from ..http.response import (
    ALLOWED_METHODS,
    ResponseSpec,
    assemble,
    materialize_status_page,
    moved_permanently,
    not_allowed,
    not_found,
)
from .variants import (
    SEPARATOR,
    add_index,
    find_redirect,
    is_negotiated,
    language_suffixes,
    resolve,
)


logger = logging.getLogger(__name__)

_DOT_SEGMENTS = frozenset({".", ".."})


class StaticFileHandler:
    """
    Handler for static file requests.

    =========================================================================
    USAGE
    =========================================================================

        handler = StaticFileHandler(FileAppConfig(document_root="/srv/www"))

        spec = handler.handle(FileRequest(
            method="GET",
            path="/docs/",
            headers={"Accept-Language": "fr", "Range": "bytes=0-99"},
        ))

        spec.status        # HTTPStatus.PARTIAL_CONTENT
        spec.body.path     # "/srv/www/docs/index.html.fr"
        spec.body.range    # Part(skip=0, length=100)

    The handler holds only its configuration and provider. It keeps no
    per-request state and can be shared between threads.

    =========================================================================
    """

    def __init__(self, config: FileAppConfig, provider: Optional[MetadataProvider] = None):
        """
        Initialize the handler.

        Args:
            config: Handler configuration. Validated here.
            provider: Metadata lookup. Defaults to the filesystem.

        Raises:
            ValueError: If the configuration is invalid.
        """
        config.validate()
        self.config = config
        self.provider = provider or FileSystemMetadataProvider()

    def handle(self, request: FileRequest) -> ResponseSpec:
        """
        Decide the response for a request.

        Args:
            request: The request.

        Returns:
            The response specification. StatusPage bodies are left for
            the caller (or render()) to fill in.
        """
        # ─────────────────────────────────────────────────────────────────
        # METHOD GATE
        # ─────────────────────────────────────────────────────────────────
        if request.method not in ALLOWED_METHODS:
            return not_allowed()

        # ─────────────────────────────────────────────────────────────────
        # MAP URL TO FILE
        # ─────────────────────────────────────────────────────────────────
        file_path = self.to_file_path(request.path)
        if file_path is None:
            return not_found()

        suffixes = language_suffixes(request.languages, self.config.default_language_suffix)

        # ─────────────────────────────────────────────────────────────────
        # RESOLVE VARIANT
        # ─────────────────────────────────────────────────────────────────
        target = add_index(file_path, self.config.index_file)
        if is_negotiated(target, self.config.negotiated_extensions):
            resolved = resolve(target, suffixes, self.provider)
        else:
            resolved = resolve(target, [None], self.provider)

        if resolved is not None:
            size = resolved.metadata.size
            modified_at = resolved.metadata.modified_at
            if request.method == "HEAD":
                outcome = evaluate_head(request, size, modified_at)
            else:
                outcome = evaluate(request, size, modified_at)
            return assemble(request.method, resolved, outcome)

        # ─────────────────────────────────────────────────────────────────
        # DIRECTORY REDIRECT
        # ─────────────────────────────────────────────────────────────────
        if find_redirect(file_path, suffixes, self.provider, self.config.index_file) is not None:
            location = self.redirect_location(request)
            logger.debug(f"Redirecting {request.path} to {location}")
            return moved_permanently(location)

        return not_found()

    def render(self, request: FileRequest) -> ResponseSpec:
        """
        Like handle(), with status pages filled in from config.status_pages.
        """
        spec = self.handle(request)
        return materialize_status_page(
            spec, request.method, self.config.status_pages, self.provider
        )

    def to_file_path(self, url_path: str) -> Optional[str]:
        """
        Map a URL path to a physical path under the document root.

        The trailing separator is preserved: it decides whether the path
        is treated as a directory.

        Returns:
            The physical path, or None if the URL is outside the prefix
            or contains a "." or ".." segment.
        """
        prefix = self.config.normalized_prefix
        if not (url_path == prefix or url_path.startswith(prefix + SEPARATOR)):
            return None

        relative = url_path[len(prefix):]
        if _DOT_SEGMENTS.intersection(relative.split(SEPARATOR)):
            logger.warning(f"Path traversal attempt: {url_path}")
            return None

        return self.config.document_root.rstrip(SEPARATOR) + relative

    def redirect_location(self, request: FileRequest) -> str:
        """Absolute URL of the directory form of the requested path."""
        return f"{request.scheme}://{request.authority}{request.path}{SEPARATOR}"


def serve_static(document_root: str, **kwargs) -> StaticFileHandler:
    """
    Create a filesystem-backed static file handler.

    Args:
        document_root: Directory to serve files from.
        **kwargs: Additional FileAppConfig fields.

    Example:
        handler = serve_static("/srv/www", negotiated_extensions=(".html",))
    """
    return StaticFileHandler(FileAppConfig(document_root=document_root, **kwargs))
