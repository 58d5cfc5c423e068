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

"""Exceptions raised by routeview.

Filesystem and template-engine errors are not wrapped; they propagate to the
host framework unchanged.  The classes below cover the two conditions that
have no natural counterpart elsewhere.
"""

from __future__ import annotations


class RouteViewError(Exception):
    """Base class for routeview errors."""


class TemplateNotFoundError(RouteViewError, FileNotFoundError):
    """A logical template path did not resolve to a file.

    Subclasses :class:`FileNotFoundError` so callers mapping missing files
    to a 404 handle both cases with one ``except`` clause.
    """

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        if path is None:
            super().__init__("No template file resolved")
        else:
            super().__init__(f"No template file resolved for {path!r}")


class UnsupportedEngineError(RouteViewError, LookupError):
    """No template engine is registered for a file's extensions."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No template engine registered for {path!r}")
