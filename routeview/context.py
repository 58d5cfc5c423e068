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

"""Per-request render state and a minimal writable response."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Protocol

CONTENT_TYPE = "Content-Type"


@dataclass
class RenderState:
    """Mutable state for one request.

    Attributes:
        layout_path: Logical name of the layout wrapping :meth:`View.render`
            output, if any.
        captured_content: ``content_for`` key to captured fragments, in
            capture order.

    Create one per request; never share an instance between requests.
    """

    layout_path: str | None = None
    captured_content: dict[str, list[str]] = field(default_factory=dict)


class ResponseLike(Protocol):
    """What :meth:`View.render` needs from the host's response object."""

    headers: MutableMapping[str, str]

    def write(self, text: str) -> None: ...


class Response:
    """Collects headers and body chunks written by a view.

    Hosts with their own response object can pass that instead; anything with
    a mutable ``headers`` mapping and a ``write(str)`` method works.
    """

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.body: list[str] = []

    def write(self, text: str) -> None:
        self.body.append(text)

    @property
    def text(self) -> str:
        return "".join(self.body)

    @property
    def content_type(self) -> str | None:
        return self.headers.get(CONTENT_TYPE)

    def __repr__(self) -> str:
        return f"Response(content_type={self.content_type!r}, chunks={len(self.body)})"
