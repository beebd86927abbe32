"""Heart rate samples from the /heartrate collection."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from oura_api.models.common import OuraModel


class HeartRateSource(str, Enum):
    AWAKE = "awake"
    REST = "rest"
    SLEEP = "sleep"
    SESSION = "session"
    LIVE = "live"
    WORKOUT = "workout"


class HeartRate(OuraModel):
    """A single beats-per-minute reading. Samples have no document id."""

    bpm: int
    source: HeartRateSource
    timestamp: datetime
