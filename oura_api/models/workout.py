"""Workouts, whether logged by hand or auto-detected by the ring."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from oura_api.models.common import OuraModel


class WorkoutIntensity(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


class WorkoutSource(str, Enum):
    MANUAL = "manual"
    AUTODETECTED = "autodetected"
    CONFIRMED = "confirmed"
    WORKOUT_HEART_RATE = "workout_heart_rate"


class Workout(OuraModel):
    id: str
    # free-form activity name, e.g. "walking", "cycling"
    activity: str
    calories: Optional[float] = None
    day: date
    # metres
    distance: Optional[float] = None
    end_datetime: datetime
    intensity: WorkoutIntensity
    label: Optional[str] = None
    source: WorkoutSource
    start_datetime: datetime
