"""Thread-safe cache of route configurations served over RDS."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

ROUTE_TYPE_URL = "type.googleapis.com/envoy.api.v2.RouteConfiguration"


@dataclass
class RouteConfiguration:
    """A named route configuration holding a list of virtual hosts."""

    name: str
    virtual_hosts: list[Any] = field(default_factory=list)


class RouteCache:
    """Holds the current route configurations and notifies waiters on change.

    Each waiter is a queue-like object with a ``put_nowait`` method. Sends
    must never block, so every queue needs room for at least one item.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, RouteConfiguration] = {}
        self._waiters: list[queue.Queue] = []
        self._last = 0

    def register(self, ch: queue.Queue, last: int) -> None:
        """Register ``ch`` to receive the sequence number on the next update.

        ``last`` is the sequence number the caller last saw. If the cache has
        moved past it, the caller missed a notification and ``ch`` receives
        the current sequence number at once.
        """
        with self._lock:
            if last < self._last:
                ch.put_nowait(self._last)
                return
            self._waiters.append(ch)

    def update(self, values: Mapping[str, RouteConfiguration] | None) -> None:
        """Replace the contents of the cache and notify every waiter."""
        with self._lock:
            self._values = dict(values or {})
            self._notify()

    def _notify(self) -> None:
        self._last += 1
        for ch in self._waiters:
            ch.put_nowait(self._last)
        self._waiters.clear()

    def contents(self) -> list[RouteConfiguration]:
        """Return the cached route configurations ordered by name."""
        with self._lock:
            return sorted(self._values.values(), key=lambda rc: rc.name)

    def query(self, names: Iterable[str]) -> list[RouteConfiguration]:
        """Return the configurations for ``names`` ordered by name.

        A name with nothing registered yields a blank configuration of that
        name: it exists, but carries no routes.
        """
        with self._lock:
            found = [
                self._values.get(name) or RouteConfiguration(name=name)
                for name in names
            ]
        return sorted(found, key=lambda rc: rc.name)

    def type_url(self) -> str:
        """Return the resource type URL this cache serves."""
        return ROUTE_TYPE_URL