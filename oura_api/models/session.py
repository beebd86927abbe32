"""
Session Models
==============
Guided and unguided sessions recorded in the Oura app (breathing,
meditation, naps, relaxation and the like), with the biometrics captured
while they ran.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from oura_api.models.common import OuraModel, SampleModel


class MomentType(str, Enum):
    BREATHING = "breathing"
    MEDITATION = "meditation"
    NAP = "nap"
    RELAXATION = "relaxation"
    REST = "rest"
    BODY_STATUS = "body_status"


class MomentMood(str, Enum):
    BAD = "bad"
    WORSE = "worse"
    SAME = "same"
    GOOD = "good"
    GREAT = "great"


class Session(OuraModel):
    id: str
    day: date
    start_datetime: datetime
    end_datetime: datetime
    type: MomentType
    heart_rate: Optional[SampleModel] = None
    heart_rate_variability: Optional[SampleModel] = None
    # self-reported after the session; absent if the user skipped the prompt
    mood: Optional[MomentMood] = None
    motion_count: Optional[SampleModel] = None
