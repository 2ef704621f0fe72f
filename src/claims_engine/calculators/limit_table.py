"""Redundancy weekly pay cap resolution from a time-versioned limit table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date
from decimal import Decimal
from typing import Union

from claims_engine.calculators.dates import parse_calendar_date
from claims_engine.calculators.types import StatutoryLimitEntry
from claims_engine.config import DEFAULT_RULES

logger = logging.getLogger(__name__)


class StatutoryLimitTable:
    """Read-only table of weekly caps, ordered by effective date descending.

    Cap selection:
    1. If the query date is missing or unparsable, the most recent entry
    2. Otherwise the latest entry effective on or before the query date
    3. If the query date precedes every entry, the earliest entry
    4. If the table has no usable entries, the fallback cap

    Entries whose effective date does not parse are ignored.
    """

    def __init__(self, entries: Iterable[StatutoryLimitEntry] = ()):
        dated: list[tuple[date, StatutoryLimitEntry]] = []
        for entry in entries:
            effective = parse_calendar_date(entry.effective_date)
            if effective is None:
                logger.debug("Ignoring limit entry with bad effective date: %r", entry)
                continue
            dated.append((effective, entry))

        dated.sort(key=lambda pair: pair[0], reverse=True)
        self._entries: tuple[tuple[date, StatutoryLimitEntry], ...] = tuple(dated)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StatutoryLimitEntry]:
        return (entry for _, entry in self._entries)

    def most_recent(self) -> StatutoryLimitEntry | None:
        return self._entries[0][1] if self._entries else None

    def weekly_cap_on(
        self,
        on_date: object,
        fallback: Decimal = DEFAULT_RULES.fallback_weekly_cap,
    ) -> Decimal:
        """Resolve the weekly cap in force on a date."""
        if not self._entries:
            logger.warning("No statutory weekly limits available, using %s", fallback)
            return fallback

        query = parse_calendar_date(on_date)
        if query is None:
            return self._entries[0][1].weekly_cap

        for effective, entry in self._entries:
            if effective <= query:
                return entry.weekly_cap

        # Query date precedes every stored limit
        return self._entries[-1][1].weekly_cap


LimitTableInput = Union[StatutoryLimitTable, Iterable[StatutoryLimitEntry], None]


def as_limit_table(table: LimitTableInput) -> StatutoryLimitTable:
    if isinstance(table, StatutoryLimitTable):
        return table
    return StatutoryLimitTable(table or ())


def lookup_weekly_cap(
    table: LimitTableInput,
    on_date: object,
    fallback: Decimal = DEFAULT_RULES.fallback_weekly_cap,
) -> Decimal:
    """Weekly cap in force on on_date; see StatutoryLimitTable for the rules."""
    return as_limit_table(table).weekly_cap_on(on_date, fallback=fallback)
