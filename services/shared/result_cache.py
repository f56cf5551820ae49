"""In-memory result cache with time-bounded expiry.

A single daemon sweeper thread removes entries as their deadlines pass. Each
deadline is queued together with the entry it belongs to, and the sweeper only
removes that exact entry, so a deadline left over from an overwritten entry
never deletes the newer one.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


@dataclass(eq=False)
class CacheEntry:
    """One cached value together with its lifetime.

    Entries compare by identity: two entries holding equal values are still
    different entries for the purpose of expiry.
    """

    value: tuple[Any, ...]
    created_at: float
    ttl: float

    @property
    def expires_at(self) -> float:
        return self.created_at + self.ttl

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class ResultCache:
    """
    Process-scoped store mapping cache keys to result sequences.

    Thread-safe: every read, write and expiry runs under one lock. There is no
    capacity bound; entries leave the store only through expiry, ``delete``,
    ``clear`` or ``shutdown``.

    Lifecycle: ``start()`` launches the sweeper, ``shutdown()`` stops it and
    clears the store. Without ``start()`` expired entries are still never
    served; they are dropped when read or when ``purge_expired()`` runs.

    Cache operations never raise. A failure inside ``get`` is reported as a
    miss and a failure inside ``put`` is logged and ignored.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            default_ttl: Lifetime in seconds for entries stored without an explicit ttl
            clock: Monotonic time source, injectable for tests

        Raises:
            ValueError: If default_ttl is not positive
        """
        if default_ttl <= 0:
            raise ValueError(f"default_ttl must be positive, got: {default_ttl}")

        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        # (expires_at, sequence, key, entry); sequence keeps equal deadlines ordered
        self._deadlines: list[tuple[float, int, str, CacheEntry]] = []
        self._sequence = itertools.count()
        self._lock = threading.Lock()
        self._wakeup = threading.Condition(self._lock)
        self._sweeper: threading.Thread | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def running(self) -> bool:
        return self._sweeper is not None and self._sweeper.is_alive()

    def start(self) -> None:
        """Start the expiry sweeper thread. Calling it again while running is a no-op."""
        with self._lock:
            if self._closed:
                raise RuntimeError("Cannot start a result cache that has been shut down")
            if self._sweeper is not None and self._sweeper.is_alive():
                return
            self._sweeper = threading.Thread(
                target=self._sweep, name="result-cache-sweeper", daemon=True
            )
            self._sweeper.start()
        logger.info("Result cache sweeper started")

    def get(self, key: str) -> tuple[Any, ...] | None:
        """
        Return the cached value for key, or None on a miss.

        An entry whose deadline has passed is removed and reported as a miss,
        even if the sweeper has not reached it yet.
        """
        try:
            with self._lock:
                entry = self._entries.get(key)
                if entry is None:
                    return None
                if entry.is_expired(self._clock()):
                    self._remove_if_current(key, entry)
                    logger.debug(f"Cache entry expired on access: {key}")
                    return None
                return entry.value
        except Exception as e:
            logger.warning(f"Cache lookup failed for {key}, treating as miss: {e}", exc_info=True)
            return None

    def put(self, key: str, value: Sequence[Any], ttl: float | None = None) -> None:
        """
        Store value under key, replacing any existing entry for that key.

        Args:
            key: Cache key
            value: Sequence to store (kept as an immutable tuple)
            ttl: Lifetime in seconds, defaults to default_ttl
        """
        ttl = self.default_ttl if ttl is None else ttl
        if ttl <= 0:
            logger.warning(f"Ignoring cache put for {key} with non-positive ttl {ttl}")
            return

        try:
            with self._lock:
                if self._closed:
                    logger.warning(f"Cache is shut down, not storing {key}")
                    return

                entry = CacheEntry(value=tuple(value), created_at=self._clock(), ttl=ttl)
                self._entries[key] = entry
                heapq.heappush(
                    self._deadlines, (entry.expires_at, next(self._sequence), key, entry)
                )
                if self._deadlines[0][3] is entry:
                    self._wakeup.notify()

            logger.info(f"Cached {len(entry.value)} item(s) under {key} for {ttl:g}s")
        except Exception as e:
            logger.warning(f"Cache store failed for {key}: {e}", exc_info=True)

    def delete(self, key: str) -> bool:
        """Remove the entry for key. Returns True if an entry was removed."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._clear_locked()

    def purge_expired(self) -> int:
        """Remove every entry whose deadline has passed. Returns how many were removed."""
        with self._lock:
            return self._purge_due(self._clock())

    def shutdown(self, timeout: float = 1.0) -> None:
        """Stop the sweeper, clear the store and refuse further writes. Safe to call twice."""
        with self._lock:
            if self._closed:
                return
            self._clear_locked()
            self._closed = True
            sweeper = self._sweeper
            self._wakeup.notify_all()

        if sweeper is not None and sweeper is not threading.current_thread():
            sweeper.join(timeout)
        logger.info("Result cache shut down")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def _sweep(self) -> None:
        """Sweeper loop: sleep until the earliest deadline, then drop due entries."""
        with self._wakeup:
            while not self._closed:
                try:
                    self._purge_due(self._clock())
                    if self._deadlines:
                        delay = self._deadlines[0][0] - self._clock()
                        self._wakeup.wait(timeout=max(delay, 0.0))
                    else:
                        self._wakeup.wait()
                except Exception as e:
                    logger.warning(f"Cache sweep failed: {e}", exc_info=True)
                    self._wakeup.wait(timeout=1.0)

    def _purge_due(self, now: float) -> int:
        # Caller holds the lock.
        removed = 0
        while self._deadlines and self._deadlines[0][0] <= now:
            _, _, key, entry = heapq.heappop(self._deadlines)
            if self._remove_if_current(key, entry):
                removed += 1
                logger.info(f"Cache entry expired: {key}")
        return removed

    def _remove_if_current(self, key: str, entry: CacheEntry) -> bool:
        # Caller holds the lock.
        if self._entries.get(key) is not entry:
            return False
        del self._entries[key]
        return True

    def _clear_locked(self) -> None:
        self._entries.clear()
        self._deadlines.clear()
