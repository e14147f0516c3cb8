"""
=============================================================================
HTTP DATES
=============================================================================

Formatting and parsing of HTTP-date values (RFC 7231 section 7.1.1.1).

=============================================================================
THE THREE ACCEPTED FORMATS
=============================================================================

Servers MUST send the first format, but MUST accept all three:

    Sun, 06 Nov 1994 08:49:37 GMT     ; IMF-fixdate (RFC 1123)
    Sunday, 06-Nov-94 08:49:37 GMT    ; obsolete RFC 850 format
    Sun Nov  6 08:49:37 1994          ; ANSI C asctime() format

All three have one-second resolution. That is why every timestamp in this
package is truncated to whole seconds before it is compared: a file with
an mtime of 08:49:37.412 and a client echoing "08:49:37 GMT" are the same
version of the resource.

=============================================================================
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def to_http_precision(dt: datetime) -> datetime:
    """
    Normalize a datetime to UTC with whole-second precision.

    Naive datetimes are taken to already be in UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).replace(microsecond=0)


def format_http_date(dt: datetime) -> str:
    """
    Format a datetime as an IMF-fixdate.

    Format: Day, DD Mon YYYY HH:MM:SS GMT
    Example: Wed, 01 Jan 2026 12:00:00 GMT

    Args:
        dt: Datetime to format. Converted to UTC first.

    Returns:
        Formatted date string.
    """
    dt = to_http_precision(dt)
    return (
        f"{_DAYS[dt.weekday()]}, "
        f"{dt.day:02d} {_MONTHS[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


def parse_http_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an HTTP-date header value.

    Missing and unparsable values both return None: for conditional
    headers "cannot read the date" means the same thing as "no header".

    Args:
        value: Raw header value, or None when the header is absent.

    Returns:
        Aware UTC datetime at second precision, or None.
    """
    if not value:
        return None
    try:
        dt = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if dt is None:
        return None
    return to_http_precision(dt)
