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

"""Resolve logical template names to files on disk.

A logical name such as ``posts/show`` has no extension.  Every file under the
templates directory whose path continues ``posts/show`` with a dot (or ends
there) is a candidate: ``posts/show.html.j2``, ``posts/show.json.j2`` and so
on.  Candidates are sorted, then the first whose MIME type the client accepts
is chosen.  Without an acceptable candidate the first one in sort order is
used.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol

from routeview.accept import accepts, negotiable, parse_accept
from routeview.config import ViewConfig
from routeview.mime import mime_type_of

logger = logging.getLogger(__name__)


class PathResolver(Protocol):
    """Anything that can turn a logical template name into a file path."""

    def resolve(self, path: str, from_dir: str, accept: str) -> str | None: ...

    def mime_type(self, path: str) -> str: ...


def _reraise(error: OSError) -> None:
    raise error


def _continues_at_boundary(candidate: str, prefix: str) -> bool:
    """``views/show`` may continue as ``views/show.html.j2`` but not ``views/show2.j2``."""
    if not candidate.startswith(prefix):
        return False
    rest = candidate[len(prefix):]
    return not rest or rest.startswith(".")


class TemplateLocator:
    """Find template files by logical name and ``Accept`` header.

    Args:
        config: Supplies the MIME overrides and default MIME type.
    """

    def __init__(self, config: ViewConfig | None = None) -> None:
        self.config = config or ViewConfig()

    def mime_type(self, path: str) -> str:
        """Return the MIME type of a template file name."""
        return mime_type_of(
            path,
            overrides=self.config.mime_types,
            default=self.config.default_mime_type,
        )

    def candidates(self, path: str, from_dir: str) -> list[str]:
        """Return every file under *from_dir* matching *path*, sorted.

        Unreadable directories raise the underlying ``OSError``.
        """
        if not os.path.isdir(from_dir):
            return []
        prefix = os.path.join(from_dir, path.lstrip("/"))
        found = []
        for root, dirs, files in os.walk(from_dir, onerror=_reraise):
            dirs[:] = [d for d in dirs if not d.startswith(".")]
            for filename in files:
                name = os.path.join(root, filename)
                if filename.startswith(".") or not os.path.isfile(name):
                    continue
                if _continues_at_boundary(name, prefix):
                    found.append(name)
        return sorted(found)

    def resolve(self, path: str, from_dir: str, accept: str) -> str | None:
        """Return the best template file for *path*, or ``None``.

        Args:
            path: Logical template name, e.g. ``"posts/show"``.
            from_dir: Directory to search.
            accept: Raw HTTP ``Accept`` header, possibly empty.
        """
        potentials = self.candidates(path, from_dir)
        if not potentials:
            logger.debug("No template matches %r under %s", path, from_dir)
            return None

        wanted = negotiable(parse_accept(accept))
        for potential in potentials:
            if accepts(self.mime_type(potential), wanted):
                logger.debug("Resolved %r to %s via Accept %r", path, potential, accept)
                return potential

        logger.debug("Resolved %r to %s (first of %d)", path, potentials[0], len(potentials))
        return potentials[0]
