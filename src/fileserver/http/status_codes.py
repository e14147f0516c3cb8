"""
=============================================================================
HTTP STATUS CODES FOR STATIC FILE RESPONSES
=============================================================================

The file decision engine only ever produces a handful of status codes.
They are defined here with their reason phrases (RFC 7231 / 7232 / 7233).

=============================================================================
WHICH CODE, WHEN?
=============================================================================

    ┌────────┬───────────────────────────────────────────────────────────┐
    │  200   │ OK - whole file, no usable Range header                  │
    │  206   │ Partial Content - a single satisfiable byte range        │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  301   │ Moved Permanently - "/docs" → "/docs/" (index exists)    │
    │  304   │ Not Modified - If-Modified-Since matches the file        │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  404   │ Not Found - no variant, no redirect candidate            │
    │  405   │ Method Not Allowed - anything except GET and HEAD        │
    │  412   │ Precondition Failed - If-Unmodified-Since mismatch       │
    │  416   │ Range Not Satisfiable - malformed or out-of-bounds range │
    └────────┴───────────────────────────────────────────────────────────┘

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes produced by the file decision engine.

    Extends IntEnum, so members compare equal to plain integers:

        >>> HTTPStatus.PARTIAL_CONTENT == 206
        True
        >>> HTTPStatus.PARTIAL_CONTENT.phrase
        'Partial Content'
    """

    OK = 200                        # Full body
    PARTIAL_CONTENT = 206           # Single byte range

    MOVED_PERMANENTLY = 301         # Directory redirect (trailing slash)
    NOT_MODIFIED = 304              # Client cache is still valid

    NOT_FOUND = 404                 # No variant on disk
    METHOD_NOT_ALLOWED = 405        # Only GET and HEAD are served
    PRECONDITION_FAILED = 412       # If-Unmodified-Since did not match
    RANGE_NOT_SATISFIABLE = 416     # Range header unusable for this file

    @property
    def phrase(self) -> str:
        """
        Get the reason phrase for this status code.

            HTTP/1.1 416 Range Not Satisfiable
                     ─── ─────────────────────
                      │           │
                      │           └── Reason phrase
                      └────────────── Status code
        """
        return _STATUS_PHRASES[self]

    @property
    def is_success(self) -> bool:
        """Check if this is a 2xx status code."""
        return 200 <= self < 300

    @property
    def is_redirect(self) -> bool:
        """Check if this is a 3xx status code."""
        return 300 <= self < 400

    @property
    def is_client_error(self) -> bool:
        """Check if this is a 4xx status code."""
        return 400 <= self < 500


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.PARTIAL_CONTENT: "Partial Content",
    HTTPStatus.MOVED_PERMANENTLY: "Moved Permanently",
    HTTPStatus.NOT_MODIFIED: "Not Modified",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.PRECONDITION_FAILED: "Precondition Failed",
    HTTPStatus.RANGE_NOT_SATISFIABLE: "Range Not Satisfiable",
}
