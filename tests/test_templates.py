"""Tests for routeview.templates."""

from __future__ import annotations

import pytest
from jinja2 import TemplateSyntaxError

from routeview.errors import TemplateNotFoundError, UnsupportedEngineError
from routeview.templates import (
    Jinja2Template,
    TemplateLoader,
    engine_for,
    register_engine,
    registered_extensions,
)
from routeview.templates.engine import _ENGINES


class _Recorder:
    """Minimal render context for templates that call view helpers."""

    def __init__(self):
        self.captured = {}

    def partial(self, path, variables=None, block=None):
        return f"[{path}:{dict(variables or {})}:{block() if block else ''}]"

    def content_for(self, key, block=None):
        if block is not None:
            self.captured.setdefault(key, []).append(block())
            return ""
        return "".join(self.captured.pop(key, []))

    def has_content_for(self, key):
        return bool(self.captured.get(key))


def test_render_with_variables(tmp_path):
    (tmp_path / "hello.txt.j2").write_text("Hello {{ name }}!\n")

    handle = TemplateLoader().load(str(tmp_path / "hello.txt.j2"))
    assert isinstance(handle, Jinja2Template)
    assert handle.render(None, {"name": "World"}) == "Hello World!\n"


def test_caller_returns_block_content(tmp_path):
    (tmp_path / "wrap.txt.j2").write_text("<{{ caller() }}>")

    handle = TemplateLoader().load(str(tmp_path / "wrap.txt.j2"))
    assert handle.render(None, {}, lambda: "inner") == "<inner>"
    assert handle.render(None, {}) == "<>"


def test_html_templates_autoescape_variables_not_blocks(tmp_path):
    (tmp_path / "page.html.j2").write_text("{{ name }}|{{ caller() }}")

    handle = TemplateLoader().load(str(tmp_path / "page.html.j2"))
    assert handle.render(None, {"name": "<b>"}, lambda: "<p>ok</p>") == "&lt;b&gt;|<p>ok</p>"


def test_non_markup_templates_do_not_escape(tmp_path):
    (tmp_path / "data.json.j2").write_text('{"v": "{{ v }}"}')

    handle = TemplateLoader().load(str(tmp_path / "data.json.j2"))
    assert handle.render(None, {"v": "<x>"}) == '{"v": "<x>"}'


def test_include_sibling_template(tmp_path):
    (tmp_path / "_footer.txt.j2").write_text("footer")
    (tmp_path / "page.txt.j2").write_text("body {% include '_footer.txt.j2' %}")

    handle = TemplateLoader().load(str(tmp_path / "page.txt.j2"))
    assert handle.render(None) == "body footer"


def test_view_helpers_available(tmp_path):
    (tmp_path / "helpers.txt.j2").write_text(
        "{% call content_for('head') %}H{% endcall %}"
        "{{ has_content_for('head') }} {{ content_for('head') }} "
        "{{ partial('card', title='T') }}"
    )

    handle = TemplateLoader().load(str(tmp_path / "helpers.txt.j2"))
    assert handle.render(_Recorder()) == "True H [card:{'title': 'T'}:]"


def test_partial_helper_accepts_positional_variables(tmp_path):
    (tmp_path / "outer.txt.j2").write_text("{{ partial('card', {'title': 'T'}, level=2) }}")

    handle = TemplateLoader().load(str(tmp_path / "outer.txt.j2"))
    assert handle.render(_Recorder()) == "[card:{'title': 'T', 'level': 2}:]"


def test_partial_helper_accepts_call_block(tmp_path):
    (tmp_path / "outer.txt.j2").write_text("{% call partial('box') %}inside{% endcall %}")

    handle = TemplateLoader().load(str(tmp_path / "outer.txt.j2"))
    assert handle.render(_Recorder()) == "[box:{}:inside]"


class TestLoaderErrors:
    def test_none_path_raises_not_found(self):
        with pytest.raises(TemplateNotFoundError):
            TemplateLoader().load(None)

    def test_none_path_is_a_file_not_found_error(self):
        with pytest.raises(FileNotFoundError):
            TemplateLoader().load(None)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TemplateLoader().load(str(tmp_path / "notthere.txt.j2"))

    def test_unknown_extension_raises(self, tmp_path):
        (tmp_path / "legacy.html.erb").write_text("<%= 1 %>")
        with pytest.raises(UnsupportedEngineError):
            TemplateLoader().load(str(tmp_path / "legacy.html.erb"))

    def test_syntax_error_propagates(self, tmp_path):
        (tmp_path / "broken.txt.j2").write_text("{% if %}")
        with pytest.raises(TemplateSyntaxError):
            TemplateLoader().load(str(tmp_path / "broken.txt.j2"))


class TestTemplateOptions:
    def test_options_passed_to_environment(self, tmp_path):
        (tmp_path / "trim.txt.j2").write_text("{% if true %}\nyes\n{% endif %}\n")

        plain = TemplateLoader().load(str(tmp_path / "trim.txt.j2"))
        trimmed = TemplateLoader({Jinja2Template: {"trim_blocks": True}}).load(
            str(tmp_path / "trim.txt.j2")
        )
        assert plain.render(None) == "\nyes\n\n"
        assert trimmed.render(None) == "yes\n"

    def test_template_options_hook(self, tmp_path):
        (tmp_path / "page.html.j2").write_text("{{ v }}")

        class RawLoader(TemplateLoader):
            def template_options(self, engine_cls):
                return {"autoescape": False}

        handle = RawLoader().load(str(tmp_path / "page.html.j2"))
        assert handle.render(None, {"v": "<i>"}) == "<i>"

    def test_default_options_empty(self):
        assert TemplateLoader().template_options(Jinja2Template) == {}


class TestRegistry:
    def test_builtin_extensions(self):
        for ext in ("j2", "jinja", "jinja2"):
            assert ext in registered_extensions()
        assert engine_for("views/show.html.jinja") is Jinja2Template

    def test_unknown_extension(self):
        assert engine_for("views/show.html.erb") is None
        assert engine_for("views/show") is None

    def test_compound_extension_preferred(self):
        class HtmlOnly:
            def __init__(self, path, options):
                self.path = path

        register_engine(HtmlOnly, ".html.j2")
        try:
            assert engine_for("page.html.j2") is HtmlOnly
            assert engine_for("page.txt.j2") is Jinja2Template
        finally:
            # Clean up to avoid polluting other tests
            _ENGINES.pop("html.j2", None)
