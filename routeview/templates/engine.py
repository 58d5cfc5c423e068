# routeview — template rendering helpers for micro web routers
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Template engines and the loader that picks one per file.

Engines are registered by file extension.  The loader looks at a template's
extensions, longest compound extension first (``html.j2`` before ``j2``),
and hands the file to the first registered engine class.

Every engine class is constructed as ``engine_cls(path, options)`` and
returns a handle exposing::

    handle.render(context, variables, block) -> str

Jinja2 is the built-in engine, registered for ``.j2``, ``.jinja`` and
``.jinja2``.  Inside a Jinja2 template the render context is available as
``view``, alongside ``partial``, ``content_for``, ``has_content_for`` and
``caller()`` (the nested content).  ``partial`` and ``content_for`` accept
``{% call %}`` blocks::

    {% call content_for("scripts") %}<script src="/app.js"></script>{% endcall %}
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol

from jinja2 import BaseLoader, Environment, TemplateNotFound
from markupsafe import Markup

from routeview.errors import TemplateNotFoundError, UnsupportedEngineError
from routeview.mime import mime_type_of

logger = logging.getLogger(__name__)

Block = Callable[[], str]


class RenderContext(Protocol):
    """The per-request object templates are rendered against."""

    def partial(
        self, path: str, variables: Mapping[str, Any] | None = None, block: Block | None = None,
    ) -> str: ...

    def content_for(self, key: str, block: Block | None = None) -> str: ...

    def has_content_for(self, key: str) -> bool: ...


class TemplateHandle(Protocol):
    """A constructed template, ready to render any number of times."""

    def render(
        self,
        context: RenderContext | None,
        variables: Mapping[str, Any] | None = None,
        block: Block | None = None,
    ) -> str: ...


# Registry: extension (no leading dot, lower case) -> engine class
_ENGINES: dict[str, type] = {}


def register_engine(engine_cls: type, *extensions: str) -> None:
    """Register *engine_cls* for one or more file extensions.

    Later registrations for the same extension replace earlier ones.
    """
    for ext in extensions:
        _ENGINES[ext.lstrip(".").lower()] = engine_cls


def registered_extensions() -> list[str]:
    """Return all extensions that currently have an engine, sorted."""
    return sorted(_ENGINES)


def engine_for(path: str) -> type | None:
    """Return the engine class for *path*, or ``None`` if none is registered."""
    parts = os.path.basename(path).lower().split(".")[1:]
    for start in range(len(parts)):
        engine_cls = _ENGINES.get(".".join(parts[start:]))
        if engine_cls is not None:
            return engine_cls
    return None


# ---------------------------------------------------------------------------
# Jinja2
# ---------------------------------------------------------------------------


def _autoescape_markup(template_name: str | None) -> bool:
    """Escape output for HTML and XML templates only."""
    if template_name is None:
        return False
    mime = mime_type_of(template_name)
    return mime in ("text/html", "application/xhtml+xml") or mime.endswith("xml")


class _SiblingLoader(BaseLoader):
    """Jinja2 loader rooted at the directory of the template being rendered.

    Lets a template ``{% include %}`` or ``{% extends %}`` files next to it.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def get_source(
        self, environment: Environment, template: str,
    ) -> tuple[str, str, Callable[[], bool]]:
        path = self.directory / template
        if not path.is_file():
            raise TemplateNotFound(template)
        source = path.read_text(encoding="utf-8")
        mtime = path.stat().st_mtime
        return source, str(path), lambda: path.stat().st_mtime == mtime


def _helpers(context: RenderContext) -> dict[str, Any]:
    def partial(
        path: str,
        variables: Mapping[str, Any] | None = None,
        caller: Block | None = None,
        **kwargs: Any,
    ) -> Markup:
        block = caller if callable(caller) else None
        return Markup(context.partial(path, {**(variables or {}), **kwargs}, block))

    def content_for(key: str, caller: Block | None = None) -> Markup:
        return Markup(context.content_for(key, caller))

    return {
        "view": context,
        "partial": partial,
        "content_for": content_for,
        "has_content_for": context.has_content_for,
    }


class Jinja2Template:
    """A Jinja2 template loaded from a single file.

    Args:
        path: Template file path.
        options: Keyword arguments for :class:`jinja2.Environment`.  The
            defaults keep trailing newlines and autoescape HTML/XML templates.

    Raises ``FileNotFoundError`` if *path* does not exist.
    """

    default_options: Mapping[str, Any] = {
        "keep_trailing_newline": True,
        "autoescape": _autoescape_markup,
    }

    def __init__(self, path: str, options: Mapping[str, Any] | None = None) -> None:
        file = Path(path)
        if not file.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        self.path = path
        self.environment = Environment(
            loader=_SiblingLoader(file.parent),
            **{**self.default_options, **(options or {})},
        )
        self.template = self.environment.get_template(file.name)

    def render(
        self,
        context: RenderContext | None,
        variables: Mapping[str, Any] | None = None,
        block: Block | None = None,
    ) -> str:
        namespace = _helpers(context) if context is not None else {}
        namespace.update(variables or {})
        namespace["caller"] = (lambda: Markup(block())) if block else (lambda: "")
        return self.template.render(namespace)

    def __repr__(self) -> str:
        return f"Jinja2Template({self.path!r})"


register_engine(Jinja2Template, "j2", "jinja", "jinja2")


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


class TemplateLoader:
    """Construct template handles for resolved file paths.

    Args:
        options: Engine class to option bag.  Subclasses may override
            :meth:`template_options` instead.
    """

    def __init__(self, options: Mapping[type, Mapping[str, Any]] | None = None) -> None:
        self.options = dict(options or {})

    def template_options(self, engine_cls: type) -> dict[str, Any]:
        """Options passed to *engine_cls* when constructing a template."""
        return dict(self.options.get(engine_cls, {}))

    def load(self, path: str | None) -> TemplateHandle:
        """Return a template handle for *path*.

        Raises:
            TemplateNotFoundError: *path* is ``None`` (nothing resolved).
            UnsupportedEngineError: No engine for the file's extensions.
            FileNotFoundError: The file does not exist.
        """
        if path is None:
            raise TemplateNotFoundError()
        engine_cls = engine_for(path)
        if engine_cls is None:
            raise UnsupportedEngineError(path)
        logger.debug("Loading %s with %s", path, engine_cls.__name__)
        return engine_cls(path, self.template_options(engine_cls))
