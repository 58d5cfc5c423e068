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

"""View configuration.

ViewConfig is a frozen dataclass, immutable after creation.  All fields have
defaults; override what you need::

    config = ViewConfig(templates_directory="app/views", mime_types={".md": "text/markdown"})
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

DEFAULT_TEMPLATES_DIRECTORY = "views"
DEFAULT_MIME_TYPE = "text/plain"


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Settings shared by every request rendered through a :class:`~routeview.View`.

    Attributes:
        templates_directory: Base directory searched for templates when a
            render call does not pass ``from``.
        default_mime_type: Content type used for templates whose extensions
            map to no known MIME type.
        mime_types: Extra extension to MIME type entries (``".anope"`` or
            ``"anope"``), consulted before the built-in table.
        engine_options: Engine class to option bag, passed to the engine when
            a template is constructed.
    """

    templates_directory: str = DEFAULT_TEMPLATES_DIRECTORY
    default_mime_type: str = DEFAULT_MIME_TYPE
    mime_types: Mapping[str, str] = field(default_factory=dict)
    engine_options: Mapping[type, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalised = {
            ("." + ext.lstrip(".")).lower(): mime for ext, mime in self.mime_types.items()
        }
        object.__setattr__(self, "mime_types", MappingProxyType(normalised))
        object.__setattr__(self, "engine_options", MappingProxyType(dict(self.engine_options)))
