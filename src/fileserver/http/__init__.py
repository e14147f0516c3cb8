"""
=============================================================================
HTTP MODULE
=============================================================================

The HTTP side of static file serving: request header accessors, date
handling, byte ranges, conditional evaluation and the response
specification.

    ┌─────────────────────────────────────────────────────────────────────┐
    │ request.py       FileRequest and its header accessors              │
    │ dates.py         HTTP-date parse/format, second precision          │
    │ languages.py     Accept-Language → ordered tags                    │
    │ ranges.py        Range header → (skip, length)                     │
    │ conditional.py   If-* precedence → Full(status) / Partial          │
    │ response.py      ResponseSpec, body dispositions, assembly         │
    │ status_codes.py  The eight status codes the engine produces        │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .status_codes import HTTPStatus
from .dates import format_http_date, parse_http_date
from .languages import parse_accept_language
from .request import FileRequest
from .ranges import Entire, Part, RangeSpec, parse_range
from .conditional import ConditionalOutcome, Full, Partial, evaluate, evaluate_head
from .response import (
    ResponseSpec,
    NoBody,
    StatusPage,
    FileNoBody,
    File,
    assemble,
    not_found,
    not_allowed,
    moved_permanently,
    materialize_status_page,
)

__all__ = [
    "HTTPStatus",
    "format_http_date",
    "parse_http_date",
    "parse_accept_language",
    "FileRequest",
    "Entire",
    "Part",
    "RangeSpec",
    "parse_range",
    "ConditionalOutcome",
    "Full",
    "Partial",
    "evaluate",
    "evaluate_head",
    "ResponseSpec",
    "NoBody",
    "StatusPage",
    "FileNoBody",
    "File",
    "assemble",
    "not_found",
    "not_allowed",
    "moved_permanently",
    "materialize_status_page",
]
