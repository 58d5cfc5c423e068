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

"""routeview — render templates from micro web framework route handlers.

Picks a template file for a logical name using the request's ``Accept``
header, renders it with Jinja2, supports layouts and captured content
blocks, and optionally memoizes lookups for the life of the process.

Usage::

    from routeview import View, ViewConfig, cached, TemplateLocator, TemplateLoader

    config = ViewConfig(templates_directory="app/views")
    locator, loader = cached(TemplateLocator(config), TemplateLoader())

    def show_post(environ, response, post):
        view = View(environ, response, config=config, locator=locator, loader=loader)
        view.layout("layout")
        view.render("posts/show", {"post": post})
"""

from routeview.accept import AcceptEntry, parse_accept
from routeview.cache import CachingTemplateLoader, CachingTemplateLocator, MemoryStore, cached
from routeview.config import ViewConfig
from routeview.context import RenderState, Response
from routeview.errors import RouteViewError, TemplateNotFoundError, UnsupportedEngineError
from routeview.locator import TemplateLocator
from routeview.mime import mime_type_of
from routeview.templates import TemplateLoader, register_engine
from routeview.view import View

__all__ = [
    "AcceptEntry",
    "CachingTemplateLoader",
    "CachingTemplateLocator",
    "MemoryStore",
    "RenderState",
    "Response",
    "RouteViewError",
    "TemplateLoader",
    "TemplateLocator",
    "TemplateNotFoundError",
    "UnsupportedEngineError",
    "View",
    "ViewConfig",
    "cached",
    "mime_type_of",
    "parse_accept",
    "register_engine",
]
