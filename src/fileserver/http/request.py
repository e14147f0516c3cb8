"""
=============================================================================
FILE REQUEST
=============================================================================

The request as seen by the file decision engine.

Parsing bytes off the wire is the transport's job. By the time a request
reaches this package it has already been split into a method, a path and
a header mapping; FileRequest wraps those and exposes typed accessors for
the handful of headers that drive a static file response.

=============================================================================
HEADERS THAT MATTER FOR STATIC FILES
=============================================================================

    ┌──────────────────────┬──────────────────────────────────────────────┐
    │ Header               │ Accessor                                     │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ If-Modified-Since    │ if_modified_since   -> Optional[datetime]   │
    │ If-Unmodified-Since  │ if_unmodified_since -> Optional[datetime]   │
    │ If-Range             │ if_range            -> Optional[datetime]   │
    │ Range                │ range               -> Optional[str] (raw)  │
    │ Accept-Language      │ languages           -> List[str] (ordered)  │
    └──────────────────────┴──────────────────────────────────────────────┘

Date accessors return None both when the header is missing and when it
cannot be parsed. An If-Range carrying an entity tag instead of a date
therefore reads as "absent".

=============================================================================
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Mapping, Optional

from .dates import parse_http_date
from .languages import parse_accept_language


@dataclass(frozen=True)
class FileRequest:
    """
    An already-parsed HTTP request for a static resource.

    =========================================================================
    ATTRIBUTES
    =========================================================================

        method:       HTTP method ("GET", "HEAD", ...). Case-sensitive.

        path:         Raw request path without query string, as the
                      client sent it ("/docs", "/docs/", "/a/b.txt").
                      Used verbatim when building a redirect Location.

        headers:      Header name → value. Names are lower-cased on
                      construction, so any casing can be passed in.

        scheme:       "http" or "https"; first part of a redirect URL.

        server_name:  Host part of a redirect URL.

        server_port:  Port part of a redirect URL.

    =========================================================================
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    scheme: str = "http"
    server_name: str = "localhost"
    server_port: int = 80

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        normalized: Dict[str, str] = {
            name.lower(): value for name, value in self.headers.items()
        }
        object.__setattr__(self, "headers", normalized)

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a header value (case-insensitive lookup).

        Args:
            name: Header name (any case)
            default: Value to return if header not found

        Returns:
            Header value or default
        """
        return self.headers.get(name.lower(), default)

    @property
    def if_modified_since(self) -> Optional[datetime]:
        """Parsed If-Modified-Since date, or None."""
        return parse_http_date(self.get_header("if-modified-since"))

    @property
    def if_unmodified_since(self) -> Optional[datetime]:
        """Parsed If-Unmodified-Since date, or None."""
        return parse_http_date(self.get_header("if-unmodified-since"))

    @property
    def if_range(self) -> Optional[datetime]:
        """Parsed If-Range date, or None (entity tags read as None)."""
        return parse_http_date(self.get_header("if-range"))

    @property
    def range(self) -> Optional[str]:
        """Raw Range header value, or None."""
        return self.get_header("range")

    @property
    def languages(self) -> List[str]:
        """Accept-Language tags in preference order."""
        return parse_accept_language(self.get_header("accept-language"))

    @property
    def authority(self) -> str:
        """server_name:server_port, as used in redirect URLs."""
        return f"{self.server_name}:{self.server_port}"
