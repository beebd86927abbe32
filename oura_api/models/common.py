"""
Shared Response Shapes
======================
Base model, time-series sample and the generic list envelope used by every
Oura v2 collection endpoint.

Key design decisions:
- Every model is frozen. Instances only ever come from decoding a response
  body and are never edited afterwards.
- Unknown keys are ignored. Oura adds fields to existing documents without
  bumping the API version, and a new field must not break decoding.
- Missing required keys, wrong types and out-of-vocabulary enum values still
  fail validation. Nothing is coerced to a default.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class OuraModel(BaseModel):
    """Base for every decoded Oura document."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class SampleModel(OuraModel):
    """Evenly spaced time series, e.g. MET or heart rate every N seconds."""

    # seconds between items
    interval: float
    # gaps in the recording come back as null
    items: list[Optional[float]]
    timestamp: datetime


class ListResponse(OuraModel, Generic[T]):
    """One page of a collection endpoint.

    ``data`` keeps the server's order. A non-empty ``next_token`` means more pages
    exist; pass it back through the query's ``with_next_token`` to fetch them.
    """

    data: list[T]
    next_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_token)
