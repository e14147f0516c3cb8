"""
Unit tests for response assembly.
"""

import json

import pytest

from fileserver.core import ResolvedResource, ResourceMetadata
from fileserver.http.conditional import Full, Partial
from fileserver.http.dates import format_http_date
from fileserver.http.ranges import Entire, Part
from fileserver.http.response import (
    File,
    FileNoBody,
    NoBody,
    StatusPage,
    assemble,
    materialize_status_page,
    moved_permanently,
    not_allowed,
    not_found,
)
from fileserver.http.status_codes import HTTPStatus


@pytest.fixture
def resolved(mtime) -> ResolvedResource:
    """A 100 byte file."""
    return ResolvedResource("/srv/file.bin", ResourceMetadata(size=100, modified_at=mtime))


class TestAssembleGet:
    """GET responses."""

    def test_full_file(self, resolved, mtime):
        """Test 200 sends the entire file."""
        spec = assemble("GET", resolved, Full(HTTPStatus.OK))

        assert spec.status == HTTPStatus.OK
        assert spec.body == File(spec.headers, "/srv/file.bin", Entire(100))
        assert spec.headers["Content-Length"] == "100"
        assert spec.headers["Last-Modified"] == format_http_date(mtime)

    def test_partial(self, resolved):
        """Test 206 sends the requested slice with matching headers."""
        spec = assemble("GET", resolved, Partial(10, 20))

        assert spec.status == HTTPStatus.PARTIAL_CONTENT
        assert isinstance(spec.body, File)
        assert spec.body.range == Part(10, 20)
        assert spec.headers["Content-Length"] == "20"
        assert spec.headers["Content-Range"] == "bytes 10-29/100"

    @pytest.mark.parametrize("status", [
        HTTPStatus.NOT_MODIFIED,
        HTTPStatus.PRECONDITION_FAILED,
    ])
    def test_no_body_statuses(self, resolved, status):
        """Test 304/412 carry headers only."""
        spec = assemble("GET", resolved, Full(status))

        assert spec.status == status
        assert isinstance(spec.body, FileNoBody)
        assert "Content-Length" not in spec.headers
        assert "Last-Modified" in spec.headers

    def test_range_not_satisfiable(self, resolved):
        """Test 416 reports the resource size."""
        spec = assemble("GET", resolved, Full(HTTPStatus.RANGE_NOT_SATISFIABLE))

        assert spec.status == HTTPStatus.RANGE_NOT_SATISFIABLE
        assert isinstance(spec.body, FileNoBody)
        assert spec.headers["Content-Range"] == "bytes */100"


class TestAssembleHead:
    """HEAD responses never carry a file body."""

    def test_ok(self, resolved):
        """Test HEAD 200 has the full length and no body."""
        spec = assemble("HEAD", resolved, Full(HTTPStatus.OK))

        assert spec.status == HTTPStatus.OK
        assert isinstance(spec.body, FileNoBody)
        assert spec.headers["Content-Length"] == "100"

    def test_not_modified(self, resolved):
        """Test HEAD 304."""
        spec = assemble("HEAD", resolved, Full(HTTPStatus.NOT_MODIFIED))

        assert spec.status == HTTPStatus.NOT_MODIFIED
        assert isinstance(spec.body, FileNoBody)

    def test_partial_outcome_is_not_a_body(self, resolved):
        """Test that even a Partial outcome yields no body for HEAD."""
        spec = assemble("HEAD", resolved, Partial(0, 10))

        assert spec.status == HTTPStatus.OK
        assert isinstance(spec.body, FileNoBody)


class TestStatusPages:
    """Tests for the status page constructors."""

    def test_other_method_is_not_allowed(self, resolved):
        """Test that assemble refuses methods other than GET/HEAD."""
        spec = assemble("POST", resolved, Full(HTTPStatus.OK))
        assert spec == not_allowed()

    def test_not_allowed(self):
        """Test 405 advertises the allowed methods."""
        spec = not_allowed()

        assert spec.status == HTTPStatus.METHOD_NOT_ALLOWED
        assert isinstance(spec.body, StatusPage)
        assert spec.headers["Allow"] == "GET, HEAD"

    def test_not_found(self):
        """Test 404."""
        spec = not_found()
        assert spec.status == HTTPStatus.NOT_FOUND
        assert spec.body == StatusPage()

    def test_moved_permanently(self):
        """Test 301 with Location."""
        spec = moved_permanently("http://example.com:80/docs/")

        assert spec.status == HTTPStatus.MOVED_PERMANENTLY
        assert isinstance(spec.body, StatusPage)
        assert spec.headers["Location"] == "http://example.com:80/docs/"


class TestMaterializeStatusPage:
    """Tests for materialize_status_page()."""

    PAGES = {404: "/srv/errors/404.html", 405: "/srv/errors/405.html"}

    def test_file_bodies_pass_through(self, resolved, provider):
        """Test that non-status-page specs are untouched."""
        spec = assemble("GET", resolved, Full(HTTPStatus.OK))
        assert materialize_status_page(spec, "GET", self.PAGES, provider) is spec

    def test_configured_page_get(self, provider):
        """Test that a 404 page file becomes the body."""
        spec = materialize_status_page(not_found(), "GET", self.PAGES, provider)

        assert spec.status == HTTPStatus.NOT_FOUND
        assert spec.body == File({"Content-Length": "30"}, "/srv/errors/404.html", Entire(30))

    def test_configured_page_head(self, provider):
        """Test that HEAD only gets the page headers."""
        spec = materialize_status_page(not_found(), "HEAD", self.PAGES, provider)

        assert spec.status == HTTPStatus.NOT_FOUND
        assert spec.body == FileNoBody({"Content-Length": "30"})

    def test_missing_page_file(self, provider):
        """Test that a configured but missing page gives NoBody."""
        spec = materialize_status_page(not_allowed(), "GET", self.PAGES, provider)

        assert spec.status == HTTPStatus.METHOD_NOT_ALLOWED
        assert spec.body == NoBody({"Allow": "GET, HEAD"})

    def test_unconfigured_status_keeps_headers(self, provider):
        """Test that a redirect without page keeps its Location."""
        spec = materialize_status_page(moved_permanently("http://h:80/d/"), "GET", {}, provider)

        assert spec.body == NoBody({"Location": "http://h:80/d/"})
        assert provider.lookups == []


class TestResponseSpec:
    """Tests for ResponseSpec helpers."""

    def test_status_line(self, resolved):
        """Test status line generation."""
        spec = assemble("GET", resolved, Partial(0, 1))
        assert spec.status_line == "HTTP/1.1 206 Partial Content"

    def test_to_dict_file(self, resolved):
        """Test the JSON-ready representation of a file response."""
        data = assemble("GET", resolved, Partial(5, 10)).to_dict()

        assert data["status"] == 206
        assert data["reason"] == "Partial Content"
        assert data["body"] == "File"
        assert data["path"] == "/srv/file.bin"
        assert (data["skip"], data["length"]) == (5, 10)
        json.dumps(data)

    def test_to_dict_status_page(self):
        """Test the representation of a status page."""
        data = not_found().to_dict()
        assert data == {"status": 404, "reason": "Not Found", "body": "StatusPage", "headers": {}}


class TestHTTPStatus:
    """Tests for HTTPStatus enum."""

    def test_phrases(self):
        """Test that every status has a phrase."""
        for status in HTTPStatus:
            assert status.phrase

    def test_categories(self):
        """Test status category helpers."""
        assert HTTPStatus.PARTIAL_CONTENT.is_success
        assert HTTPStatus.NOT_MODIFIED.is_redirect
        assert HTTPStatus.RANGE_NOT_SATISFIABLE.is_client_error
        assert not HTTPStatus.OK.is_client_error
