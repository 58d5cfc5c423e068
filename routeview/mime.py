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

"""MIME type lookup for template files.

A template's content type comes from its file name.  Names may carry several
extensions (``show.html.j2``): the engine extension and the content-type
extension.  Extensions are inspected from right to left and the first one
with a known MIME type wins, so ``show.html.j2`` is ``text/html``.

The lookup table is the standard library's built-in ``mimetypes`` table held
in a private :class:`mimetypes.MimeTypes` instance, which ignores the host's
``mime.types`` files and gives the same answer on every machine.
"""

from __future__ import annotations

import mimetypes
import os
from collections.abc import Mapping

from routeview.config import DEFAULT_MIME_TYPE

_TABLE = mimetypes.MimeTypes()


def lookup_extension(ext: str, overrides: Mapping[str, str] | None = None) -> str | None:
    """Return the MIME type registered for *ext* (with or without the dot)."""
    key = "." + ext.lstrip(".").lower()
    if overrides and key in overrides:
        return overrides[key]
    loose, strict = _TABLE.types_map
    return strict.get(key) or loose.get(key)


def mime_type_of(
    path: str,
    *,
    overrides: Mapping[str, str] | None = None,
    default: str = DEFAULT_MIME_TYPE,
) -> str:
    """Return the MIME type of a template file.

    >>> mime_type_of("views/posts/show.html.j2")
    'text/html'
    >>> mime_type_of("views/plain.j2")
    'text/plain'
    """
    parts = os.path.basename(path).split(".")
    for ext in reversed(parts[1:]):
        mime = lookup_extension(ext, overrides)
        if mime:
            return mime
    return default


def mime_match(value: str, pattern: str) -> bool:
    """Return True if MIME type *value* satisfies the media range *pattern*.

    ``text/html`` matches ``text/html``, ``text/*`` and ``*/*``.  A pattern
    without a subtype (``text``) matches any subtype.
    """
    v_type, _, v_sub = value.partition("/")
    p_type, slash, p_sub = pattern.partition("/")
    if p_type != "*" and p_type != v_type:
        return False
    return not slash or p_sub == "*" or p_sub == v_sub
