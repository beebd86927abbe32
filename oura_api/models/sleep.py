"""
Sleep Period Models
===================
Pydantic shapes for the detailed /sleep documents (one per sleep period,
naps included) and the /sleep_time bedtime guidance.

Durations are seconds. ``sleep_phase_5_min`` and ``movement_30_sec`` are
compact strings with one character per slot, passed through undecoded.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from oura_api.models.common import OuraModel, SampleModel
from oura_api.models.daily import ReadinessContributors


# ---------------------------------------------------------------------------
# Allowed values
# ---------------------------------------------------------------------------

class SleepType(str, Enum):
    DELETED = "deleted"
    SLEEP = "sleep"
    LONG_SLEEP = "long_sleep"
    LATE_NAP = "late_nap"
    REST = "rest"


class SleepTimeRecommendation(str, Enum):
    IMPROVE_EFFICIENCY = "improve_efficiency"
    EARLIER_BEDTIME = "earlier_bedtime"
    LATER_BEDTIME = "later_bedtime"
    EARLIER_WAKE_UP_TIME = "earlier_wake_up_time"
    LATER_WAKE_UP_TIME = "later_wake_up_time"
    FOLLOW_OPTIMAL_BEDTIME = "follow_optimal_bedtime"


class SleepTimeStatus(str, Enum):
    NOT_ENOUGH_NIGHTS = "not_enough_nights"
    NOT_ENOUGH_RECENT_NIGHTS = "not_enough_recent_nights"
    BAD_SLEEP_QUALITY = "bad_sleep_quality"
    ONLY_RECOMMENDED_FOUND = "only_recommended_found"
    OPTIMAL_FOUND = "optimal_found"


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------

class SleepReadiness(OuraModel):
    """Readiness computed at the end of this sleep period."""

    contributors: ReadinessContributors
    score: Optional[int] = None
    temperature_deviation: Optional[float] = None
    temperature_trend_deviation: Optional[float] = None


class Sleep(OuraModel):
    """One sleep period between lying down and getting up."""

    id: str
    average_breath: Optional[float] = None
    average_heart_rate: Optional[float] = None
    average_hrv: Optional[int] = None
    awake_time: Optional[int] = None
    bedtime_end: datetime
    bedtime_start: datetime
    day: date
    deep_sleep_duration: Optional[int] = None
    efficiency: Optional[int] = None
    heart_rate: Optional[SampleModel] = None
    hrv: Optional[SampleModel] = None
    latency: Optional[int] = None
    light_sleep_duration: Optional[int] = None
    low_battery_alert: bool
    lowest_heart_rate: Optional[int] = None
    movement_30_sec: Optional[str] = None
    # index of this period within the day
    period: int
    readiness: Optional[SleepReadiness] = None
    readiness_score_delta: Optional[float] = None
    rem_sleep_duration: Optional[int] = None
    restless_periods: Optional[int] = None
    sleep_phase_5_min: Optional[str] = None
    sleep_score_delta: Optional[float] = None
    time_in_bed: int
    total_sleep_duration: Optional[int] = None
    type: SleepType


# ---------------------------------------------------------------------------
# Sleep time
# ---------------------------------------------------------------------------

class TimeWindow(OuraModel):
    """Bedtime window as second offsets from midnight in the user's zone."""

    # timezone offset in seconds
    day_tz: int
    end_offset: int
    start_offset: int


class SleepTime(OuraModel):
    """Oura's bedtime recommendation for a day."""

    id: str
    day: date
    optimal_bedtime: Optional[TimeWindow] = None
    recommendation: Optional[SleepTimeRecommendation] = None
    status: Optional[SleepTimeStatus] = None
