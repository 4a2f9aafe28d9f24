#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
AIRAC (Aeronautical Information Regulation And Control) cycles.

An AIRAC cycle is a fixed 28-day period counted from the epoch 1901-01-10.
Cycles are identified by a 4-digit code "YYOO": the last two digits of the
year and the ordinal of the cycle within that year.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable

# ---------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------
AIRAC_EPOCH = datetime(1901, 1, 10, tzinfo=timezone.utc)
AIRAC_CYCLE_DAYS = 28
AIRAC_CYCLE_DURATION = timedelta(days=AIRAC_CYCLE_DAYS)

# Cycles are 16-bit unsigned. The last one starts in the year 6925.
CYCLE_MAX = 0xFFFF

DATE_FORMAT = "%Y-%m-%d"


class InvalidIdentifier(ValueError):
    """Raised when a string is not a valid "YYOO" AIRAC identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"illegal AIRAC id {identifier!r}")
        self.identifier = identifier


# ---------------------------------------------------------------------
#  Cycle
# ---------------------------------------------------------------------
@dataclass(frozen=True, order=True)
class Cycle:
    """A single AIRAC cycle, the N-th 28-day period since AIRAC_EPOCH.

    The cycle number is an unsigned 16-bit value; anything outside
    0..CYCLE_MAX wraps around. Dates before the epoch therefore map to
    meaningless cycles near CYCLE_MAX instead of raising.
    """

    number: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.number, int) or isinstance(self.number, bool):
            raise TypeError(f"cycle number must be an int, not {type(self.number).__name__}")
        object.__setattr__(self, "number", self.number & CYCLE_MAX)

    @classmethod
    def from_date(cls, value: date | datetime) -> "Cycle":
        """Return the cycle in effect at the given date or instant.

        Args:
            value (date | datetime): Naive datetimes are taken as UTC, aware
                ones are converted. A plain date means midnight UTC.

        Returns:
            Cycle: The cycle whose 28-day interval contains value
        """
        return cls((to_utc(value) - AIRAC_EPOCH) // AIRAC_CYCLE_DURATION)

    @classmethod
    def from_string(cls, yyoo: str) -> "Cycle":
        """Parse a "YYOO" identifier.

        Identifiers "6401" to "9913" are cycles of the years 1964 to 1999,
        "0001" to "6313" are cycles of the years 2000 to 2063.

        Args:
            yyoo (str): Year suffix and ordinal, both zero padded

        Returns:
            Cycle: The matching cycle

        Raises:
            InvalidIdentifier: If yyoo is malformed or its ordinal does not
                exist in that year.
        """
        year, ordinal = _parse_identifier(yyoo)

        last_of_previous_year = cls.from_date(date(year - 1, 12, 31))
        cycle = last_of_previous_year + ordinal

        if cycle.year != year:
            raise InvalidIdentifier(yyoo)
        return cycle

    @property
    def effective(self) -> datetime:
        """Start of this cycle, midnight UTC."""
        return AIRAC_EPOCH + self.number * AIRAC_CYCLE_DURATION

    @property
    def expires(self) -> date:
        """Last day of this cycle."""
        return self.effective.date() + AIRAC_CYCLE_DURATION - timedelta(days=1)

    @property
    def year(self) -> int:
        return self.effective.year

    @property
    def ordinal(self) -> int:
        # tm_yday is 1-based
        return (self.effective.timetuple().tm_yday - 1) // AIRAC_CYCLE_DAYS + 1

    def short_string(self) -> str:
        """Return the "YYOO" identifier."""
        return f"{self.year % 100:02d}{self.ordinal:02d}"

    def long_string(self) -> str:
        """Return "YYOO (effective: YYYY-MM-DD; expires: YYYY-MM-DD)"."""
        return (
            f"{self.short_string()} "
            f"(effective: {self.effective.strftime(DATE_FORMAT)}; "
            f"expires: {self.expires.strftime(DATE_FORMAT)})"
        )

    def __add__(self, other: int) -> "Cycle":
        if isinstance(other, Cycle) or not isinstance(other, int):
            return NotImplemented
        return Cycle(self.number + other)

    __radd__ = __add__

    def __sub__(self, other: "Cycle | int") -> "Cycle | int":
        if isinstance(other, Cycle):
            return self.number - other.number
        if isinstance(other, int):
            return Cycle(self.number - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return self.short_string()

    def __repr__(self) -> str:
        return f"Cycle({self.number})"


# ---------------------------------------------------------------------
#  Module level API
# ---------------------------------------------------------------------
def from_date(value: date | datetime) -> Cycle:
    """Return the cycle in effect at value. See Cycle.from_date."""
    return Cycle.from_date(value)


def from_string(yyoo: str) -> Cycle:
    """Parse a "YYOO" identifier. See Cycle.from_string."""
    return Cycle.from_string(yyoo)


def from_string_must(yyoo: str) -> Cycle:
    """Parse an identifier the caller knows to be valid.

    A bad identifier here is a programming error, so it is raised as a
    RuntimeError rather than InvalidIdentifier. Never use this on untrusted
    input.
    """
    try:
        return Cycle.from_string(yyoo)
    except InvalidIdentifier as e:
        raise RuntimeError(f"from_string_must: {e}") from e


def chrono_key(cycle: Cycle) -> int:
    return cycle.number


def by_chrono(cycles: Iterable[Cycle]) -> list[Cycle]:
    """Return the cycles as a new list in chronological order."""
    return sorted(cycles, key=chrono_key)


# ---------------------------------------------------------------------
#  Helpers
# ---------------------------------------------------------------------
def to_utc(value: date | datetime) -> datetime:
    """Return value as an aware UTC datetime (naive values are taken as UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _parse_identifier(yyoo: str) -> tuple[int, int]:
    yyoo = yyoo.strip()
    if len(yyoo) != 4:
        raise InvalidIdentifier(yyoo)

    if yyoo[0] in "+-":
        raise InvalidIdentifier(yyoo)

    # int() alone would also take "1_00" and non-ASCII digits
    if not (yyoo.isascii() and yyoo.isdigit()):
        raise InvalidIdentifier(yyoo)

    value = int(yyoo)
    year, ordinal = value // 100 + 1900, value % 100
    if year <= 1963:
        year += 100
    return year, ordinal
