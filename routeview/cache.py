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

"""In-memory memoization for template lookups and construction.

Resolving a template walks the templates directory and constructing one
compiles it.  In production the template tree does not change while the
process runs, so both results can be kept for the life of the process.

Usage::

    from routeview.cache import cached
    from routeview.locator import TemplateLocator
    from routeview.templates import TemplateLoader

    locator, loader = cached(TemplateLocator(), TemplateLoader())

Entries never expire and are never evicted.  Do not use the caching wrappers
while editing templates.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from routeview.locator import PathResolver
from routeview.templates.engine import TemplateHandle, TemplateLoader

logger = logging.getLogger(__name__)

V = TypeVar("V")

_MISSING = object()


class MemoryStore:
    """A dict guarded by one lock.

    :meth:`fetch` holds the lock while it looks up, computes and stores, so a
    value is computed at most once even when many threads ask for it at the
    same time.  Computations for different keys are serialised too.  If the
    computation raises, nothing is stored and the exception propagates.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[Hashable, ...], Any] = {}
        self._lock = threading.Lock()

    def fetch(self, key: tuple[Hashable, ...], compute: Callable[[], V]) -> V:
        """Return the value stored under *key*, computing it on first use."""
        with self._lock:
            value = self._cache.get(key, _MISSING)
            if value is _MISSING:
                logger.debug("Cache miss for %r", key)
                value = compute()
                self._cache[key] = value
            return value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        """Drop every stored value."""
        with self._lock:
            self._cache.clear()


class CachingTemplateLocator:
    """Wrap a :class:`~routeview.locator.PathResolver` with a :class:`MemoryStore`.

    Results are keyed on ``(path, from_dir, accept)``.  ``None`` results are
    cached like any other.
    """

    def __init__(self, inner: PathResolver, store: MemoryStore | None = None) -> None:
        self.inner = inner
        self.store = store if store is not None else MemoryStore()

    def resolve(self, path: str, from_dir: str, accept: str) -> str | None:
        return self.store.fetch(
            (path, from_dir, accept),
            lambda: self.inner.resolve(path, from_dir, accept),
        )

    def mime_type(self, path: str) -> str:
        return self.inner.mime_type(path)


class CachingTemplateLoader:
    """Wrap a :class:`~routeview.templates.TemplateLoader` with a :class:`MemoryStore`.

    Handles are keyed on the file path.  Failed loads are not cached.
    """

    def __init__(self, inner: TemplateLoader, store: MemoryStore | None = None) -> None:
        self.inner = inner
        self.store = store if store is not None else MemoryStore()

    def load(self, path: str | None) -> TemplateHandle:
        return self.store.fetch((path,), lambda: self.inner.load(path))


def cached(
    locator: PathResolver, loader: TemplateLoader,
) -> tuple[CachingTemplateLocator, CachingTemplateLoader]:
    """Wrap *locator* and *loader* in caching decorators with their own stores."""
    return CachingTemplateLocator(locator), CachingTemplateLoader(loader)
