# src/option_service/infrastructure/ids.py
"""
Identifier generators for string-id options.

Ids look like ``TENDER_STATUS_OPT_20240517093015123_4821937``: the entity
prefix, a millisecond timestamp, and a random number in ``[1, upper_bound)``.
"""
import random
from datetime import datetime
from itertools import count
from typing import Callable

from option_service.domain.models import utcnow
from option_service.interfaces import IIdGenerator

DEFAULT_UPPER_BOUND = 10_000_000


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``yyyyMMddHHmmssSSS``."""
    return moment.strftime("%Y%m%d%H%M%S") + f"{moment.microsecond // 1000:03d}"


class PrefixedIdGenerator(IIdGenerator):
    """
    Timestamp plus random suffix generator.

    Example:
        >>> gen = PrefixedIdGenerator(
        ...     "PLAN_STATUS",
        ...     clock=lambda: datetime(2024, 5, 17, 9, 30, 15, 123000),
        ...     rng=random.Random(7),
        ... )
        >>> gen.next().startswith("PLAN_STATUS_20240517093015123_")
        True
    """

    def __init__(
        self,
        prefix: str,
        clock: Callable[[], datetime] = utcnow,
        rng: random.Random | None = None,
        upper_bound: int = DEFAULT_UPPER_BOUND,
    ):
        if not prefix:
            raise ValueError("prefix must not be empty")
        if upper_bound <= 1:
            raise ValueError("upper_bound must be greater than 1")
        self.prefix = prefix
        self._clock = clock
        self._rng = rng or random.SystemRandom()
        self._upper_bound = upper_bound

    def next(self) -> str:
        suffix = self._rng.randrange(1, self._upper_bound)
        return f"{self.prefix}_{format_timestamp(self._clock())}_{suffix}"


class SequenceIdGenerator(IIdGenerator):
    """Yields ``PREFIX_1``, ``PREFIX_2``, ... Useful for seeding and tests."""

    def __init__(self, prefix: str, start: int = 1):
        self.prefix = prefix
        self._counter = count(start)

    def next(self) -> str:
        return f"{self.prefix}_{next(self._counter)}"
