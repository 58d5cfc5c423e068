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

"""Render templates from route handlers.

A :class:`View` is built once per request from the host's environ and
response, and offers the rendering operations route code needs::

    view = View(environ, response)
    view.layout("layouts/main")
    view.render("posts/show", {"post": post})

``render`` picks a template for ``posts/show`` using the request's
``Accept`` header, renders it, wraps the result in the layout if one is
set, sets ``Content-Type`` from the chosen file's name and writes the body.

``partial`` renders without touching the response; ``content_for`` and
``has_content_for`` pass named fragments from one template to another
within the same request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from routeview.config import ViewConfig
from routeview.context import CONTENT_TYPE, RenderState, Response, ResponseLike
from routeview.locator import PathResolver, TemplateLocator
from routeview.templates.engine import Block, TemplateHandle, TemplateLoader

logger = logging.getLogger(__name__)

HTTP_ACCEPT = "HTTP_ACCEPT"
FROM = "from"


class View:
    """Rendering operations bound to a single request.

    Args:
        env: WSGI-style environ; only ``HTTP_ACCEPT`` is read.
        response: Receives the ``Content-Type`` header and body written by
            :meth:`render`.  A fresh :class:`~routeview.context.Response`
            is used when omitted.
        state: Per-request layout and captured content.
        config: Shared view settings.
        locator: Resolves logical names to files; wrap it in
            :class:`~routeview.cache.CachingTemplateLocator` to memoize.
        loader: Builds template handles; wrap it in
            :class:`~routeview.cache.CachingTemplateLoader` to memoize.
    """

    def __init__(
        self,
        env: Mapping[str, Any],
        response: ResponseLike | None = None,
        state: RenderState | None = None,
        *,
        config: ViewConfig | None = None,
        locator: PathResolver | None = None,
        loader: TemplateLoader | None = None,
    ) -> None:
        self.env = env
        self.response = response if response is not None else Response()
        self.state = state if state is not None else RenderState()
        self.config = config or ViewConfig()
        self.locator = locator if locator is not None else TemplateLocator(self.config)
        self.loader = loader if loader is not None else TemplateLoader(self.config.engine_options)

    @property
    def accept(self) -> str:
        """The request's ``Accept`` header, or ``""``."""
        return str(self.env.get(HTTP_ACCEPT) or "")

    @property
    def templates_directory(self) -> str:
        return self.config.templates_directory

    # --- Lookup ---------------------------------------------------------------

    def template_path(self, path: str, from_dir: str | None = None) -> str | None:
        """Resolve a logical name like ``"posts/show"`` to a file, or ``None``."""
        return self.locator.resolve(path, from_dir or self.templates_directory, self.accept)

    def template(self, path: str | None) -> TemplateHandle:
        """Return the template handle for a resolved file path."""
        return self.loader.load(path)

    def mime_type(self, path: str) -> str:
        return self.locator.mime_type(path)

    # --- Composition --------------------------------------------------------

    def layout(self, path: str | None = None) -> str | None:
        """Set the layout used by :meth:`render` when *path* is given; return it."""
        if path:
            self.state.layout_path = path
        return self.state.layout_path

    def partial(
        self,
        path: str,
        variables: Mapping[str, Any] | None = None,
        block: Block | None = None,
    ) -> str:
        """Render a template to a string.

        A ``"from"`` entry in *variables* overrides the templates directory
        and is not passed on to the template.  *block* supplies the nested
        content the template reads with ``caller()``.
        """
        variables = dict(variables or {})
        from_dir = variables.pop(FROM, None)
        return self.template(self.template_path(path, from_dir)).render(self, variables, block)

    def render(
        self,
        path: str,
        variables: Mapping[str, Any] | None = None,
        block: Block | None = None,
    ) -> None:
        """Render a template, wrapped in the layout if set, to the response.

        ``Content-Type`` comes from the template for *path*, not the layout.
        """
        variables = dict(variables or {})
        content = self.partial(path, variables, block)
        layout = self.layout()
        if layout:
            content = self.partial(layout, variables, lambda: content)

        resolved = self.template_path(path, variables.get(FROM))
        self.response.headers[CONTENT_TYPE] = self.mime_type(resolved)
        logger.debug("Rendered %s (layout=%s)", resolved, layout)
        self.response.write(content)

    # --- Captured content ---------------------------------------------------

    def content_for(self, key: str, block: Block | None = None) -> str:
        """Capture content under *key*, or emit and forget what was captured.

        With *block*, its result is appended to *key* and ``""`` is returned
        so the call leaves nothing in surrounding template output.  Without
        it, everything captured under *key* is returned joined and removed.
        """
        captured = self.state.captured_content
        if block is not None:
            captured.setdefault(key, []).append(block() or "")
            return ""
        return "".join(captured.pop(key, []))

    def has_content_for(self, key: str) -> bool:
        """Return True if content has been captured under *key*."""
        return bool(self.state.captured_content.setdefault(key, []))
