from oura_api.models.common import ListResponse, OuraModel, SampleModel
from oura_api.models.daily import (
    ActivityContributors,
    DailyActivity,
    DailyReadiness,
    DailySleep,
    DailySpO2,
    ReadinessContributors,
    SleepContributors,
    SpO2AggregatedValues,
)
from oura_api.models.heart_rate import HeartRate, HeartRateSource
from oura_api.models.personal_info import PersonalInfo
from oura_api.models.queries import DateQuery, DatetimeQuery
from oura_api.models.ring import (
    RestModeEpisode,
    RestModePeriod,
    RingColor,
    RingConfiguration,
    RingDesign,
    RingHardwareType,
)
from oura_api.models.session import MomentMood, MomentType, Session
from oura_api.models.sleep import (
    Sleep,
    SleepReadiness,
    SleepTime,
    SleepTimeRecommendation,
    SleepTimeStatus,
    SleepType,
    TimeWindow,
)
from oura_api.models.tag import Tag, TagV2
from oura_api.models.workout import Workout, WorkoutIntensity, WorkoutSource

__all__ = [
    "ActivityContributors",
    "DailyActivity",
    "DailyReadiness",
    "DailySleep",
    "DailySpO2",
    "DateQuery",
    "DatetimeQuery",
    "HeartRate",
    "HeartRateSource",
    "ListResponse",
    "MomentMood",
    "MomentType",
    "OuraModel",
    "PersonalInfo",
    "ReadinessContributors",
    "RestModeEpisode",
    "RestModePeriod",
    "RingColor",
    "RingConfiguration",
    "RingDesign",
    "RingHardwareType",
    "SampleModel",
    "Session",
    "Sleep",
    "SleepContributors",
    "SleepReadiness",
    "SleepTime",
    "SleepTimeRecommendation",
    "SleepTimeStatus",
    "SleepType",
    "SpO2AggregatedValues",
    "Tag",
    "TagV2",
    "TimeWindow",
    "Workout",
    "WorkoutIntensity",
    "WorkoutSource",
]
