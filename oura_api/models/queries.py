"""
Query Parameters
================
Date and datetime range filters for the collection endpoints.

Only fields that are set end up in the query string. An empty query sends
no parameters at all, never ``start_date=``, ``next_token=`` or ``null``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, TypeVar

from pydantic import BaseModel, ConfigDict

Q = TypeVar("Q", bound="_RangeQuery")


class _RangeQuery(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_params(self) -> dict[str, str]:
        """URL query parameters for the set fields, ISO-8601 formatted."""
        params = self.model_dump(mode="json", exclude_none=True)
        # an empty cursor is the same as no cursor
        return {key: value for key, value in params.items() if value != ""}

    def with_next_token(self: Q, next_token: Optional[str]) -> Q:
        """Copy of this query pointing at the page after ``next_token``."""
        return self.model_copy(update={"next_token": next_token or None})


class DateQuery(_RangeQuery):
    """Inclusive calendar-day range, used by every collection except heart rate."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    next_token: Optional[str] = None


class DatetimeQuery(_RangeQuery):
    """Timestamp range for the heart rate collection."""

    start_datetime: Optional[datetime] = None
    end_datetime: Optional[datetime] = None
    next_token: Optional[str] = None
