"""Domain service: Order Sequencer.

Issues order numbers of the form ``C-DD-YY-N`` where N restarts at 1
every calendar day.  The counter map lives behind a CounterRepository
whose ``increment`` is atomic, so two callers in one process can never
be handed the same number.

When the counter cannot be persisted the sale must still go through:
the sequencer falls back to a millisecond timestamp for N, which is
only probably unique.
"""

from __future__ import annotations

import logging
from datetime import date

from posledger.domain.exceptions import StorageError
from posledger.domain.model.clock import Clock, day_key, local_now
from posledger.domain.repository.counter_repository import CounterRepository

logger = logging.getLogger(__name__)


def format_order_number(day: date, counter: int) -> str:
    return f"C-{day.day:02d}-{day.year % 100:02d}-{counter}"


class OrderSequencer:

    def __init__(self, counter_repo: CounterRepository, clock: Clock = local_now) -> None:
        self._counter_repo = counter_repo
        self._clock = clock

    def next_order_number(self) -> str:
        now = self._clock()
        today = now.date()
        try:
            counter = self._counter_repo.increment(day_key(today))
        except StorageError as exc:
            counter = int(now.timestamp() * 1000)
            logger.warning(
                "Could not persist order counter (%s); using timestamp suffix %d",
                exc,
                counter,
            )
        return format_order_number(today, counter)
