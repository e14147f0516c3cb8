"""
=============================================================================
CLI ENTRY POINT
=============================================================================

Ask the decision engine what it would answer for one request against a
directory on disk. Nothing is served and no file is read; the output is
the status, headers and body disposition.

=============================================================================
USAGE
=============================================================================

    python -m fileserver /docs/ --root ./public
    python -m fileserver /video.mp4 --root ./public -H "Range: bytes=0-1023"
    python -m fileserver /docs --root ./public --host example.com --port 8080
    python -m fileserver /docs/ --root ./public -H "Accept-Language: fr" --json

Example output:

    HTTP/1.1 206 Partial Content
    Last-Modified: Thu, 15 Jan 2026 12:30:45 GMT
    Content-Length: 1024
    Content-Range: bytes 0-1023/52428800

    File: ./public/video.mp4 (skip=0, length=1024)

=============================================================================
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import Dict, List, Optional

from . import __version__
from .config import LOG_LEVELS, FileAppConfig, parse_status_pages
from .handlers import StaticFileHandler
from .http.request import FileRequest
from .http.response import File, ResponseSpec


def _parse_headers(parser: argparse.ArgumentParser, raw_headers: List[str]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for raw in raw_headers:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            parser.error(f"invalid header (expected 'Name: value'): {raw!r}")
        headers[name.strip()] = value.strip()
    return headers


def _format_text(spec: ResponseSpec) -> str:
    lines = [spec.status_line]
    for name, value in spec.headers.items():
        lines.append(f"{name}: {value}")
    lines.append("")

    body = spec.body
    if isinstance(body, File):
        lines.append(f"File: {body.path} (skip={body.range.skip}, length={body.range.length})")
    else:
        lines.append(f"{type(body).__name__}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileserver",
        description="Show how a static file request would be answered",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m fileserver /docs/ --root ./public
  python -m fileserver /a.bin --root ./public -H "Range: bytes=-100"
  python -m fileserver /a.bin --root ./public --method HEAD --json
        """
    )

    parser.add_argument("path", help="Request path, e.g. /docs/ or /img/logo.png")

    # ─────────────────────────────────────────────────────────────────────
    # REQUEST
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument("--method", "-X", default="GET", help="HTTP method (default: GET)")
    parser.add_argument(
        "--header", "-H",
        action="append",
        default=[],
        dest="headers",
        help="Request header 'Name: value' (repeatable)"
    )
    parser.add_argument("--scheme", default="http", help="Scheme for redirects (default: http)")
    parser.add_argument("--host", default="localhost", help="Host for redirects (default: localhost)")
    parser.add_argument("--port", type=int, default=80, help="Port for redirects (default: 80)")

    # ─────────────────────────────────────────────────────────────────────
    # CONFIGURATION (overrides FILESERVER_* environment variables)
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument("--root", "-r", help="Document root")
    parser.add_argument("--prefix", help="URL prefix served from the root")
    parser.add_argument("--index", help="Index file name")
    parser.add_argument("--default-language", help="Default language suffix, e.g. .en")
    parser.add_argument(
        "--negotiate",
        help="Comma-separated extensions that use language negotiation, e.g. .html"
    )
    parser.add_argument("--status-pages", help="code=path pairs, e.g. 404=./404.html")
    parser.add_argument(
        "--log-level", "-l",
        choices=list(LOG_LEVELS),
        help="Logging level"
    )

    # ─────────────────────────────────────────────────────────────────────
    # OUTPUT
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument("--json", action="store_true", help="Print the decision as JSON")
    parser.add_argument("--version", "-v", action="version", version=f"fileserver {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> FileAppConfig:
    """Environment config with command-line overrides applied."""
    overrides = {}
    if args.root is not None:
        overrides["document_root"] = args.root
    if args.prefix is not None:
        overrides["url_prefix"] = args.prefix
    if args.index is not None:
        overrides["index_file"] = args.index
    if args.default_language is not None:
        overrides["default_language_suffix"] = args.default_language
    if args.negotiate is not None:
        overrides["negotiated_extensions"] = tuple(
            ext.strip() for ext in args.negotiate.split(",") if ext.strip()
        )
    if args.status_pages is not None:
        overrides["status_pages"] = parse_status_pages(args.status_pages)
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(FileAppConfig.from_env(), **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code: 0 on success, 1 on configuration errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    headers = _parse_headers(parser, args.headers)

    try:
        config = build_config(args)
        handler = StaticFileHandler(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = FileRequest(
        method=args.method,
        path=args.path,
        headers=headers,
        scheme=args.scheme,
        server_name=args.host,
        server_port=args.port,
    )
    spec = handler.render(request)

    if args.json:
        print(json.dumps(spec.to_dict(), indent=2))
    else:
        print(_format_text(spec))
    return 0


if __name__ == "__main__":
    sys.exit(main())
