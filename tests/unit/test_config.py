"""
Unit tests for handler configuration.
"""

import logging

import pytest

from fileserver.config import FileAppConfig, parse_status_pages


class TestValidate:
    """Tests for FileAppConfig.validate()."""

    def test_defaults_are_valid(self):
        """Test the default configuration."""
        config = FileAppConfig()
        config.validate()

        assert config.document_root == "."
        assert config.index_file == "index.html"
        assert config.default_language_suffix == ".en"
        assert config.negotiated_extensions is None
        assert config.status_pages == {}

    @pytest.mark.parametrize("overrides", [
        {"url_prefix": "static"},
        {"index_file": ""},
        {"index_file": "sub/index.html"},
        {"default_language_suffix": "en"},
        {"default_language_suffix": "."},
        {"negotiated_extensions": ("html",)},
        {"status_pages": {999: "/srv/999.html"}},
        {"log_level": "VERBOSE"},
    ])
    def test_invalid(self, overrides):
        """Test that each bad setting is rejected."""
        with pytest.raises(ValueError):
            FileAppConfig(**overrides).validate()

    def test_normalized_prefix(self):
        """Test prefix normalization."""
        assert FileAppConfig().normalized_prefix == ""
        assert FileAppConfig(url_prefix="/static/").normalized_prefix == "/static"

    def test_log_level_value(self):
        """Test conversion to a logging constant."""
        assert FileAppConfig(log_level="debug").log_level_value == logging.DEBUG

    def test_status_pages_read_only(self):
        """Test that status pages cannot be changed after construction."""
        pages = {404: "/srv/404.html"}
        config = FileAppConfig(status_pages=pages)
        pages[405] = "/srv/405.html"

        assert dict(config.status_pages) == {404: "/srv/404.html"}
        with pytest.raises(TypeError):
            config.status_pages[500] = "/srv/500.html"

    def test_hashable(self):
        """Test that a config with status pages can be hashed."""
        config = FileAppConfig(status_pages={404: "/srv/404.html"})
        assert hash(config) == hash(FileAppConfig(status_pages={404: "/srv/404.html"}))
        assert config == FileAppConfig(status_pages={404: "/srv/404.html"})


class TestFromEnv:
    """Tests for FileAppConfig.from_env()."""

    def test_defaults(self, monkeypatch):
        """Test that an empty environment gives defaults."""
        for name in ("ROOT", "PREFIX", "INDEX", "DEFAULT_LANGUAGE",
                     "NEGOTIATE", "STATUS_PAGES", "LOG_LEVEL"):
            monkeypatch.delenv(f"FILESERVER_{name}", raising=False)

        assert FileAppConfig.from_env() == FileAppConfig()

    def test_all_variables(self, monkeypatch):
        """Test every supported variable."""
        monkeypatch.setenv("FILESERVER_ROOT", "/srv/www")
        monkeypatch.setenv("FILESERVER_PREFIX", "/static")
        monkeypatch.setenv("FILESERVER_INDEX", "default.htm")
        monkeypatch.setenv("FILESERVER_DEFAULT_LANGUAGE", ".ja")
        monkeypatch.setenv("FILESERVER_NEGOTIATE", ".html, .htm")
        monkeypatch.setenv("FILESERVER_STATUS_PAGES", "404=/srv/404.html")
        monkeypatch.setenv("FILESERVER_LOG_LEVEL", "DEBUG")

        config = FileAppConfig.from_env()

        assert config == FileAppConfig(
            document_root="/srv/www",
            url_prefix="/static",
            index_file="default.htm",
            default_language_suffix=".ja",
            negotiated_extensions=(".html", ".htm"),
            status_pages={404: "/srv/404.html"},
            log_level="DEBUG",
        )


class TestParseStatusPages:
    """Tests for parse_status_pages()."""

    def test_pairs(self):
        """Test several entries."""
        pages = parse_status_pages("404=/srv/404.html, 405 = /srv/405.html")
        assert pages == {404: "/srv/404.html", 405: "/srv/405.html"}

    def test_empty(self):
        """Test that an empty value means no pages."""
        assert parse_status_pages("") == {}

    @pytest.mark.parametrize("value", ["404", "404=", "abc=/x.html"])
    def test_invalid(self, value):
        """Test malformed entries."""
        with pytest.raises(ValueError):
            parse_status_pages(value)
