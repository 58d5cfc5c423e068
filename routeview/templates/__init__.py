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

"""Template engine registry and loader.

Usage::

    from routeview.templates import TemplateLoader

    loader = TemplateLoader()
    handle = loader.load("views/posts/show.html.j2")
    html = handle.render(view, {"post": post})
"""

from routeview.templates.engine import (
    Jinja2Template,
    TemplateHandle,
    TemplateLoader,
    engine_for,
    register_engine,
    registered_extensions,
)

__all__ = [
    "Jinja2Template",
    "TemplateHandle",
    "TemplateLoader",
    "engine_for",
    "register_engine",
    "registered_extensions",
]
