"""Thread-safe cache of TLS secrets served over SDS."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

SECRET_TYPE_URL = "type.googleapis.com/envoy.api.v2.auth.Secret"


@dataclass
class Secret:
    """A named TLS secret."""

    name: str
    certificate_chain: bytes | None = None
    private_key: bytes | None = None


class SecretCache:
    """Holds the current secrets and notifies waiters on change.

    Each waiter is a queue-like object with a ``put_nowait`` method. Sends
    must never block, so every queue needs room for at least one item.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Secret] = {}
        self._waiters: list[queue.Queue] = []
        self._last = 0

    def register(self, ch: queue.Queue, last: int) -> None:
        """Register ``ch`` to receive the sequence number on the next update.

        If ``last`` is behind the cache's counter, ``ch`` receives the current
        sequence number at once.
        """
        with self._lock:
            if last < self._last:
                ch.put_nowait(self._last)
                return
            self._waiters.append(ch)

    def update(self, values: Mapping[str, Secret] | None) -> None:
        """Replace the contents of the cache and notify every waiter."""
        with self._lock:
            self._values = dict(values or {})
            self._notify()

    def _notify(self) -> None:
        self._last += 1
        for ch in self._waiters:
            ch.put_nowait(self._last)
        self._waiters.clear()

    def contents(self) -> list[Secret]:
        """Return the cached secrets ordered by name."""
        with self._lock:
            return sorted(self._values.values(), key=lambda s: s.name)

    def query(self, names: Iterable[str]) -> list[Secret]:
        """Return the known secrets among ``names`` ordered by name.

        Unknown names are left out.
        """
        with self._lock:
            found = [self._values[n] for n in names if n in self._values]
        return sorted(found, key=lambda s: s.name)

    def type_url(self) -> str:
        """Return the resource type URL this cache serves."""
        return SECRET_TYPE_URL