"""JSON-collection-backed implementation of CounterRepository."""

from __future__ import annotations

import logging

from posledger.domain.repository.counter_repository import CounterRepository
from posledger.infrastructure.persistence.json_collection_store import JsonCollectionStore

logger = logging.getLogger(__name__)

DAILY_COUNTERS = "daily_counters"


class JsonCounterRepository(CounterRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    def increment(self, day_key: str) -> int:
        # The store runs the whole read-modify-write under the
        # collection lock.
        counters = self._store.update(DAILY_COUNTERS, lambda raw: _bump(raw, day_key), {})
        return counters[day_key]

    def load(self) -> dict[str, int]:
        return _clean(self._store.get(DAILY_COUNTERS, {}))

    def reset(self) -> None:
        self._store.remove(DAILY_COUNTERS)


def _bump(raw: dict, day_key: str) -> dict:
    counters = _clean(raw)
    counters[day_key] = counters.get(day_key, 0) + 1
    return counters


def _clean(raw: dict) -> dict[str, int]:
    counters: dict[str, int] = {}
    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Dropping invalid order counter %r=%r", key, value)
            continue
        counters[str(key)] = value
    return counters
