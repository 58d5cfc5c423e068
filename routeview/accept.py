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

"""HTTP ``Accept`` header parsing.

Entries are kept in header order.  Quality values are parsed and stored, but
template selection only asks whether a candidate matches *any* entry; ties
are broken by the candidate's position, never by ``q``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from routeview.mime import mime_match

MIME_TYPE_ANY = "*/*"

_SPLIT_MULTIPLES = re.compile(r"\s*,\s*")
_SPLIT_PARTS = re.compile(r"\s*;\s*")
_CAPTURE_QUALITY = re.compile(r"q=([\d.]+)")


@dataclass(frozen=True, slots=True)
class AcceptEntry:
    """One media range from an ``Accept`` header."""

    media_type: str
    quality: float = 1.0


def _quality(parameters: str | None) -> float:
    if not parameters:
        return 1.0
    match = _CAPTURE_QUALITY.match(parameters)
    if match is None:
        return 1.0
    try:
        return float(match.group(1))
    except ValueError:
        return 1.0


def parse_accept(header: str | None) -> list[AcceptEntry]:
    """Split an ``Accept`` header into entries, preserving order.

    Never raises: a missing or garbled header yields whatever entries can be
    read from it, possibly none.

    >>> parse_accept("text/html,application/xml;q=0.9")
    [AcceptEntry(media_type='text/html', quality=1.0), AcceptEntry(media_type='application/xml', quality=0.9)]
    """
    if not header:
        return []
    entries = []
    for part in _SPLIT_MULTIPLES.split(header.strip()):
        if not part:
            continue
        pieces = _SPLIT_PARTS.split(part, maxsplit=1)
        media_type = pieces[0]
        if not media_type:
            continue
        parameters = pieces[1] if len(pieces) > 1 else None
        entries.append(AcceptEntry(media_type, _quality(parameters)))
    return entries


def negotiable(entries: Iterable[AcceptEntry]) -> list[AcceptEntry]:
    """Drop ``*/*`` entries.

    A catch-all range matches the first candidate it is compared against,
    which would hide a more specific match further down the candidate list.
    """
    return [entry for entry in entries if entry.media_type != MIME_TYPE_ANY]


def accepts(mime_type: str, entries: Iterable[AcceptEntry]) -> bool:
    """Return True if *mime_type* matches any of *entries*."""
    return any(mime_match(mime_type, entry.media_type) for entry in entries)
