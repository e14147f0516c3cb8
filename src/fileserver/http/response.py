"""
=============================================================================
RESPONSE DECISIONS
=============================================================================

Describes the response to send for a static file request, without any
bytes in it.

=============================================================================
RESPONSE SPEC ANATOMY
=============================================================================

A ResponseSpec is a status plus a body disposition:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                       BODY DISPOSITIONS                             │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   NoBody(headers)        status line and headers only              │
    │                                                                      │
    │   StatusPage(headers)    a page describing the status (404, 405,   │
    │                          301); the transport picks its content     │
    │                                                                      │
    │   FileNoBody(headers)    file headers, no body                     │
    │                          (HEAD, 304, 412, 416)                      │
    │                                                                      │
    │   File(headers, path, range)                                        │
    │                          send `range` of the file at `path`        │
    │                          (200 with Entire, 206 with Part)          │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Length and range headers are computed here from the same metadata and
RangeSpec that decided the status:

    200 GET    Last-Modified, Content-Length: size
    206 GET    Last-Modified, Content-Length: length, Content-Range
    200 HEAD   Last-Modified, Content-Length: size
    416        Last-Modified, Content-Range: bytes */size
    304 / 412  Last-Modified
    301        Location
    405        Allow: GET, HEAD

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Union

from .conditional import ConditionalOutcome, Full, Partial
from .dates import format_http_date
from .ranges import Entire, Part, RangeSpec, content_range, unsatisfied_range
from .status_codes import HTTPStatus

if TYPE_CHECKING:
    from ..core.metadata import MetadataProvider, ResolvedResource


logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "HEAD")


@dataclass(frozen=True)
class NoBody:
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class StatusPage:
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FileNoBody:
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class File:
    headers: Dict[str, str]
    path: str
    range: RangeSpec


BodyDisposition = Union[NoBody, StatusPage, FileNoBody, File]


@dataclass(frozen=True)
class ResponseSpec:
    """
    The decision for one request: what status, and what body.

    This is the only output of the engine. The transport turns it into
    bytes: it adds Date/Server/Content-Type and, for File bodies, copies
    `range` of `path` to the socket.
    """

    status: HTTPStatus
    body: BodyDisposition

    @property
    def headers(self) -> Dict[str, str]:
        return self.body.headers

    @property
    def status_line(self) -> str:
        """Example: "HTTP/1.1 206 Partial Content"."""
        return f"HTTP/1.1 {int(self.status)} {self.status.phrase}"

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON output."""
        result: Dict[str, Any] = {
            "status": int(self.status),
            "reason": self.status.phrase,
            "body": type(self.body).__name__,
            "headers": dict(self.body.headers),
        }
        if isinstance(self.body, File):
            result["path"] = self.body.path
            result["skip"] = self.body.range.skip
            result["length"] = self.body.range.length
        return result


# =============================================================================
# ASSEMBLY
# =============================================================================

def _file_headers(resolved: "ResolvedResource") -> Dict[str, str]:
    return {"Last-Modified": format_http_date(resolved.metadata.modified_at)}


def assemble(method: str, resolved: "ResolvedResource", outcome: ConditionalOutcome) -> ResponseSpec:
    """
    Combine a resolved file and a conditional outcome into a ResponseSpec.

    Args:
        method: "GET" or "HEAD". Anything else yields 405.
        resolved: The file variant that was found.
        outcome: Result of conditional evaluation for that file.

    Returns:
        The response specification.
    """
    if method not in ALLOWED_METHODS:
        return not_allowed()

    size = resolved.metadata.size
    headers = _file_headers(resolved)

    # ─────────────────────────────────────────────────────────────────
    # HEAD: never a body
    # ─────────────────────────────────────────────────────────────────
    if method == "HEAD":
        status = outcome.status if isinstance(outcome, Full) else HTTPStatus.OK
        if status == HTTPStatus.OK:
            headers["Content-Length"] = str(size)
        elif status == HTTPStatus.RANGE_NOT_SATISFIABLE:
            headers["Content-Range"] = unsatisfied_range(size)
        return ResponseSpec(status, FileNoBody(headers))

    # ─────────────────────────────────────────────────────────────────
    # GET
    # ─────────────────────────────────────────────────────────────────
    if isinstance(outcome, Partial):
        part = Part(outcome.skip, outcome.length)
        headers["Content-Length"] = str(part.length)
        headers["Content-Range"] = content_range(part, size)
        return ResponseSpec(HTTPStatus.PARTIAL_CONTENT, File(headers, resolved.path, part))

    if outcome.status == HTTPStatus.OK:
        headers["Content-Length"] = str(size)
        return ResponseSpec(HTTPStatus.OK, File(headers, resolved.path, Entire(size)))

    if outcome.status == HTTPStatus.RANGE_NOT_SATISFIABLE:
        headers["Content-Range"] = unsatisfied_range(size)
    return ResponseSpec(outcome.status, FileNoBody(headers))


# =============================================================================
# STATUS PAGES
# =============================================================================

def not_found() -> ResponseSpec:
    """404 status page."""
    return ResponseSpec(HTTPStatus.NOT_FOUND, StatusPage())


def not_allowed() -> ResponseSpec:
    """405 status page, advertising the methods that are served."""
    return ResponseSpec(
        HTTPStatus.METHOD_NOT_ALLOWED,
        StatusPage({"Allow": ", ".join(ALLOWED_METHODS)}),
    )


def moved_permanently(location: str) -> ResponseSpec:
    """301 status page pointing at `location`."""
    return ResponseSpec(HTTPStatus.MOVED_PERMANENTLY, StatusPage({"Location": location}))


def materialize_status_page(
    spec: ResponseSpec,
    method: str,
    pages: Mapping[int, str],
    provider: "MetadataProvider",
) -> ResponseSpec:
    """
    Replace a StatusPage body with a concrete one.

    If `pages` names a file for the status and the provider finds it, the
    body becomes that file (GET) or its headers only (HEAD). Otherwise the
    body becomes NoBody. Headers already on the status page (Location,
    Allow) are kept. Non-StatusPage specs are returned unchanged.

    Args:
        spec: Decision from the engine.
        method: Request method.
        pages: Status code → path of a page file.
        provider: Where to look the page file up.

    Returns:
        A ResponseSpec without a StatusPage body.
    """
    if not isinstance(spec.body, StatusPage):
        return spec

    headers = dict(spec.body.headers)
    page = pages.get(int(spec.status))
    metadata = provider.lookup(page) if page else None
    if metadata is None:
        if page:
            logger.warning(f"Status page for {int(spec.status)} not found: {page}")
        return ResponseSpec(spec.status, NoBody(headers))

    headers["Content-Length"] = str(metadata.size)
    if method == "HEAD":
        return ResponseSpec(spec.status, FileNoBody(headers))
    return ResponseSpec(spec.status, File(headers, page, Entire(metadata.size)))
