"""Two-tier readings cache: an in-process map plus an optional JSON file.

Neither tier expires entries.  Readings for a given date do not change and a
year holds at most 366 keys, so growth stays small.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Sequence

from .models import DailyReadings

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "CathReadings"
_PROBE_KEY = "__cr_test__"


class CacheTier(Protocol):
    """One storage level of :class:`TieredCache`."""

    def get(self, key: str) -> Optional[DailyReadings]:
        """Return the cached value or ``None``."""

    def put(self, key: str, value: DailyReadings) -> None:
        """Store ``value`` under ``key``."""


class MemoryTier:
    """A dictionary of readings guarded by a lock."""

    def __init__(self) -> None:
        self._store: Dict[str, DailyReadings] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[DailyReadings]:
        with self._lock:
            return self._store.get(key)

    def put(self, key: str, value: DailyReadings) -> None:
        with self._lock:
            self._store[key] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


class JsonFileStore:
    """A string key-value store kept as one JSON object on disk.

    Writes go through a temporary file and :func:`os.replace` so a crash
    never leaves a half-written store behind.
    """

    def __init__(self, path: os.PathLike[str] | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".store-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._dump(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if data.pop(key, None) is not None:
                self._dump(data)


class DurableTier:
    """Best-effort persistent tier on top of a :class:`JsonFileStore`.

    The store is probed once, on first use; if the probe fails the tier
    turns itself off.  Read and write errors are logged and swallowed.
    """

    def __init__(self, store: Any, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.store = store
        self.namespace = namespace
        self._available: Optional[bool] = None

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    @property
    def available(self) -> bool:
        if self._available is None:
            try:
                self.store.set(_PROBE_KEY, "1")
                self.store.delete(_PROBE_KEY)
                self._available = True
            except Exception as exc:
                logger.debug("durable cache disabled: %s", exc)
                self._available = False
        return self._available

    def get(self, key: str) -> Optional[DailyReadings]:
        if not self.available:
            return None
        try:
            raw = self.store.get(self._key(key))
            return DailyReadings.from_dict(json.loads(raw)) if raw else None
        except Exception as exc:
            logger.debug("durable cache read failed for %s: %s", key, exc)
            return None

    def put(self, key: str, value: DailyReadings) -> None:
        if not self.available:
            return
        try:
            self.store.set(self._key(key), json.dumps(value.to_dict(), ensure_ascii=False))
        except Exception as exc:
            logger.debug("durable cache write failed for %s: %s", key, exc)


class TieredCache:
    """Look tiers up in order and copy a hit into every faster tier."""

    def __init__(self, tiers: Sequence[CacheTier]) -> None:
        self.tiers = list(tiers)

    def get(self, key: str) -> Optional[DailyReadings]:
        for index, tier in enumerate(self.tiers):
            value = tier.get(key)
            if value is not None:
                for faster in self.tiers[:index]:
                    faster.put(key, value)
                logger.debug("cache hit for %s in tier %d", key, index)
                return value
        logger.debug("cache miss for %s", key)
        return None

    def put(self, key: str, value: DailyReadings) -> None:
        for tier in self.tiers:
            tier.put(key, value)


class ReadingsCache(TieredCache):
    """Memory tier first, then a durable JSON file when ``path`` is given."""

    def __init__(
        self,
        path: os.PathLike[str] | str | None = None,
        *,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.memory = MemoryTier()
        self.durable = DurableTier(JsonFileStore(path), namespace) if path else None
        super().__init__([self.memory] + ([self.durable] if self.durable else []))


__all__ = [
    "CacheTier",
    "MemoryTier",
    "JsonFileStore",
    "DurableTier",
    "TieredCache",
    "ReadingsCache",
    "DEFAULT_NAMESPACE",
]
