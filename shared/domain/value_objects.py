"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: Represents a range of calendar dates (check-in to check-out)
- Stay: Represents a stay between two instants, billed per started night
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

from shared.domain.base import ValueObject

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    Used for booking periods and availability ledger writes.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Note: end_date is exclusive, so adjacent ranges don't overlap.

        Examples:
            - DateRange(25, 28) overlaps with DateRange(27, 30) -> True
            - DateRange(25, 28) overlaps with DateRange(28, 31) -> False (adjacent)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")
        return (self.start_date < other.end_date and
                self.end_date > other.start_date)

    def contains(self, check_date: date) -> bool:
        return self.start_date <= check_date < self.end_date

    def days(self) -> Iterator[date]:
        """Yield every night of the range, i.e. each date in [start, end)."""
        current = self.start_date
        while current < self.end_date:
            yield current
            current += ONE_DAY

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __len__(self) -> int:
        return self.nights

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


@dataclass(frozen=True)
class Stay(ValueObject):
    """
    Stay between two aware instants

    Nights are counted per started day: a stay 26 hours long is two nights.
    """
    check_in: datetime
    check_out: datetime

    def __post_init__(self):
        if self.check_out <= self.check_in:
            raise ValueError(f"Check-out ({self.check_out}) must be after check-in ({self.check_in})")

    @property
    def nights(self) -> int:
        return math.ceil((self.check_out - self.check_in) / ONE_DAY)

    @property
    def dates(self) -> DateRange:
        """Calendar dates the stay occupies, each read in its own UTC offset.

        Raises if both fall on one day.
        """
        return DateRange(self.check_in.date(), self.check_out.date())

    def price_for(self, nightly_price: int) -> int:
        return self.nights * nightly_price
