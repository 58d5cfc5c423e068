"""Tests for routeview.mime."""

from __future__ import annotations

import pytest

from routeview.mime import lookup_extension, mime_match, mime_type_of


class TestMimeTypeOf:
    def test_content_extension_before_engine_extension(self):
        assert mime_type_of("views/posts/show.html.j2") == "text/html"
        assert mime_type_of("views/posts/show.json.j2") == "application/json"

    def test_rightmost_known_extension_wins(self):
        assert mime_type_of("report.html.txt") == "text/plain"

    def test_case_insensitive(self):
        assert mime_type_of("PAGE.HTML.J2") == "text/html"

    def test_unknown_extensions_fall_back_to_default(self):
        assert mime_type_of("plain.anope.j2") == "text/plain"
        assert mime_type_of("noext") == "text/plain"

    def test_custom_default(self):
        assert mime_type_of("x.j2", default="application/octet-stream") == "application/octet-stream"

    def test_overrides_consulted_first(self):
        overrides = {".anope": "text/x-anope", ".html": "application/xhtml+xml"}
        assert mime_type_of("plain.anope.j2", overrides=overrides) == "text/x-anope"
        assert mime_type_of("page.html.j2", overrides=overrides) == "application/xhtml+xml"

    def test_lookup_extension_with_or_without_dot(self):
        assert lookup_extension("json") == "application/json"
        assert lookup_extension(".json") == "application/json"
        assert lookup_extension("j2") is None


class TestMimeMatch:
    @pytest.mark.parametrize(
        "value, pattern",
        [
            ("text/html", "text/html"),
            ("text/html", "text/*"),
            ("text/html", "*/*"),
            ("text/html", "text"),
        ],
    )
    def test_matches(self, value, pattern):
        assert mime_match(value, pattern)

    @pytest.mark.parametrize(
        "value, pattern",
        [
            ("text/html", "text/plain"),
            ("text/html", "application/*"),
            ("application/json", "text/*"),
        ],
    )
    def test_does_not_match(self, value, pattern):
        assert not mime_match(value, pattern)
