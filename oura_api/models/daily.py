"""
Daily Summary Models
====================
Pydantic shapes for the once-per-day documents: daily_activity,
daily_readiness, daily_sleep and daily_spo2.

Contributor scores are 1–100 sub-scores that feed the day's overall score.
Oura withholds any of them when it lacks enough data, so every contributor
is optional.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from oura_api.models.common import OuraModel, SampleModel


# ---------------------------------------------------------------------------
# Activity
# ---------------------------------------------------------------------------

class ActivityContributors(OuraModel):
    meet_daily_targets: Optional[int] = None
    move_every_hour: Optional[int] = None
    recovery_time: Optional[int] = None
    stay_active: Optional[int] = None
    training_frequency: Optional[int] = None
    training_volume: Optional[int] = None


class DailyActivity(OuraModel):
    """One day of activity: steps, calories, MET minutes and time per intensity."""

    id: str
    # 5-minute activity classification string, one character per slot
    class_5_min: Optional[str] = None
    score: Optional[int] = None
    active_calories: int
    average_met_minutes: float
    contributors: ActivityContributors
    # metres
    equivalent_walking_distance: int
    high_activity_met_minutes: int
    # seconds
    high_activity_time: int
    inactivity_alerts: int
    low_activity_met_minutes: int
    low_activity_time: int
    medium_activity_met_minutes: int
    medium_activity_time: int
    met: SampleModel
    meters_to_target: int
    non_wear_time: int
    resting_time: int
    sedentary_met_minutes: int
    sedentary_time: int
    steps: int
    target_calories: int
    target_meters: int
    total_calories: int
    day: date
    timestamp: datetime


# ---------------------------------------------------------------------------
# Readiness
# ---------------------------------------------------------------------------

class ReadinessContributors(OuraModel):
    activity_balance: Optional[int] = None
    body_temperature: Optional[int] = None
    hrv_balance: Optional[int] = None
    previous_day_activity: Optional[int] = None
    previous_night: Optional[int] = None
    recovery_index: Optional[int] = None
    resting_heart_rate: Optional[int] = None
    sleep_balance: Optional[int] = None


class DailyReadiness(OuraModel):
    """One day of readiness: overall score plus temperature deviation."""

    id: str
    contributors: ReadinessContributors
    day: date
    score: Optional[int] = None
    # degrees Celsius relative to the user's baseline
    temperature_deviation: Optional[float] = None
    temperature_trend_deviation: Optional[float] = None
    timestamp: datetime


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------

class SleepContributors(OuraModel):
    deep_sleep: Optional[int] = None
    efficiency: Optional[int] = None
    latency: Optional[int] = None
    rem_sleep: Optional[int] = None
    restfulness: Optional[int] = None
    timing: Optional[int] = None
    total_sleep: Optional[int] = None


class DailySleep(OuraModel):
    """One day of sleep scoring. Raw durations live on the Sleep document."""

    id: str
    contributors: SleepContributors
    day: date
    score: Optional[int] = None
    timestamp: datetime


# ---------------------------------------------------------------------------
# SpO2
# ---------------------------------------------------------------------------

class SpO2AggregatedValues(OuraModel):
    average: float


class DailySpO2(OuraModel):
    """Average overnight blood oxygen saturation."""

    id: str
    day: date
    spo2_percentage: Optional[SpO2AggregatedValues] = None
    breathing_disturbance_index: Optional[int] = None
