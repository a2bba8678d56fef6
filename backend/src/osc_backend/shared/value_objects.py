"""Immutable value objects shared across the service layer."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, model_validator
from pydantic.config import ConfigDict

MIN_MONTH = 1
MAX_MONTH = 12
MAX_YEAR = date.max.year - 1


class MonthRange(BaseModel):
    """Half-open date interval covering one calendar month.

    ``start`` is the first day of the month and ``end`` the first day of the
    following month, so a date ``d`` belongs to the month when
    ``start <= d < end``.
    """

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> MonthRange:
        if self.end <= self.start:
            msg = f"Range end {self.end} must be after start {self.start}."
            raise ValueError(msg)
        return self

    @classmethod
    def for_month(cls, year: int, month: int) -> MonthRange:
        """Build the range for ``month`` of ``year``."""
        if not MIN_MONTH <= month <= MAX_MONTH:
            msg = f"Month must be between {MIN_MONTH} and {MAX_MONTH}, got {month}."
            raise ValueError(msg)
        if not date.min.year <= year <= MAX_YEAR:
            msg = f"Year must be between {date.min.year} and {MAX_YEAR}, got {year}."
            raise ValueError(msg)
        start = date(year, month, 1)
        if month == MAX_MONTH:
            end = date(year + 1, 1, 1)
        else:
            end = date(year, month + 1, 1)
        return cls(start=start, end=end)

    def __contains__(self, value: date) -> bool:
        return self.start <= value < self.end
