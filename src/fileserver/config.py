"""
=============================================================================
FILE APPLICATION CONFIGURATION
=============================================================================

Everything the static file handler needs to know that is not in the
request itself.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m fileserver --root ./public /docs/               │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── FILESERVER_ROOT=./public python -m fileserver /docs/      │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The config is passed explicitly into every handler; nothing in the
package reads it from a global.

=============================================================================
"""

import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class FileAppConfig:
    """
    Configuration for StaticFileHandler.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    ROUTING
    - document_root, url_prefix

    FILE SELECTION
    - index_file, default_language_suffix, negotiated_extensions

    STATUS PAGES
    - status_pages

    LOGGING
    - log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # ROUTING
    # ─────────────────────────────────────────────────────────────────────

    document_root: str = "."
    """
    Directory that URL paths under url_prefix map into.
    "/docs/a.txt" with url_prefix "/" → "<document_root>/docs/a.txt"
    """

    url_prefix: str = "/"
    """
    URL prefix served by this handler. Stripped before mapping to disk.
    Requests outside the prefix get 404.
    """

    # ─────────────────────────────────────────────────────────────────────
    # FILE SELECTION
    # ─────────────────────────────────────────────────────────────────────

    index_file: str = "index.html"
    """
    File appended to directory-shaped paths ("/docs/" → "/docs/index.html").
    """

    default_language_suffix: str = ".en"
    """
    Last candidate tried during language negotiation.
    """

    negotiated_extensions: Optional[Tuple[str, ...]] = None
    """
    Extensions that take part in language negotiation, e.g. (".html",).
    None: every file is negotiated. Other files are probed without suffix.
    """

    # ─────────────────────────────────────────────────────────────────────
    # STATUS PAGES
    # ─────────────────────────────────────────────────────────────────────

    status_pages: Mapping[int, str] = field(default_factory=dict, hash=False)
    """
    Status code → path of a page file sent as the body of that status.
    Statuses without a page are sent with no body. Stored read-only.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG logs every variant probed and every conditional decision.
    """

    def __post_init__(self):
        # Frozen dataclass: copy into a read-only view through object.__setattr__
        object.__setattr__(self, "status_pages", MappingProxyType(dict(self.status_pages)))

    @property
    def normalized_prefix(self) -> str:
        """url_prefix without trailing slash ("" for the root prefix)."""
        return self.url_prefix.rstrip("/")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls) -> "FileAppConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        FILESERVER_ROOT              Document root (default: .)
        FILESERVER_PREFIX            URL prefix (default: /)
        FILESERVER_INDEX             Index file (default: index.html)
        FILESERVER_DEFAULT_LANGUAGE  Default suffix (default: .en)
        FILESERVER_NEGOTIATE         Comma-separated extensions, e.g.
                                     ".html,.txt" (default: all files)
        FILESERVER_STATUS_PAGES      Comma-separated code=path pairs, e.g.
                                     "404=/srv/404.html,405=/srv/405.html"
        FILESERVER_LOG_LEVEL         Logging level (default: INFO)

        =====================================================================
        """
        negotiate = os.getenv("FILESERVER_NEGOTIATE")
        return cls(
            document_root=os.getenv("FILESERVER_ROOT", "."),
            url_prefix=os.getenv("FILESERVER_PREFIX", "/"),
            index_file=os.getenv("FILESERVER_INDEX", "index.html"),
            default_language_suffix=os.getenv("FILESERVER_DEFAULT_LANGUAGE", ".en"),
            negotiated_extensions=_split_list(negotiate) if negotiate else None,
            status_pages=parse_status_pages(os.getenv("FILESERVER_STATUS_PAGES", "")),
            log_level=os.getenv("FILESERVER_LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: On the first invalid setting.
        """
        if not self.url_prefix.startswith("/"):
            raise ValueError(f"url_prefix must start with '/': {self.url_prefix!r}")

        if not self.index_file or "/" in self.index_file:
            raise ValueError(f"index_file must be a plain file name: {self.index_file!r}")

        if len(self.default_language_suffix) < 2 or not self.default_language_suffix.startswith("."):
            raise ValueError(
                f"default_language_suffix must look like '.en': {self.default_language_suffix!r}"
            )

        for extension in self.negotiated_extensions or ():
            if not extension.startswith("."):
                raise ValueError(f"negotiated extension must start with '.': {extension!r}")

        for status in self.status_pages:
            if not 100 <= status <= 599:
                raise ValueError(f"Invalid status code for status page: {status}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level!r}")


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def parse_status_pages(value: str) -> Dict[int, str]:
    """
    Parse "404=/srv/404.html,405=/srv/405.html" into {404: ..., 405: ...}.

    Raises:
        ValueError: If an entry is not code=path.
    """
    pages: Dict[int, str] = {}
    for item in _split_list(value):
        code, sep, path = item.partition("=")
        if not sep or not path.strip():
            raise ValueError(f"Invalid status page entry: {item!r}")
        pages[int(code)] = path.strip()
    return pages
