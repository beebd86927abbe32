"""
Resource Registry
=================
Declarative table of every Oura v2 usercollection endpoint this package
speaks to. The client builds its request URLs, query checks and named
methods from these rows, so adding an endpoint means adding one row here
and two method lines on ``OuraClient``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from oura_api.models import (
    DailyActivity,
    DailyReadiness,
    DailySleep,
    DailySpO2,
    DateQuery,
    DatetimeQuery,
    HeartRate,
    OuraModel,
    PersonalInfo,
    RestModePeriod,
    RingConfiguration,
    Session,
    Sleep,
    SleepTime,
    Tag,
    TagV2,
    Workout,
)

QueryType = Union[type[DateQuery], type[DatetimeQuery]]


@dataclass(frozen=True)
class Resource:
    """One endpoint: its path under the base URL and what it decodes into."""

    name: str
    path: str
    model: type[OuraModel]
    query: Optional[QueryType] = DateQuery
    can_get: bool = True
    can_list: bool = True
    # False for singleton documents fetched without an id
    by_id: bool = True


DAILY_ACTIVITY = Resource("daily_activity", "daily_activity", DailyActivity)
DAILY_READINESS = Resource("daily_readiness", "daily_readiness", DailyReadiness)
DAILY_SLEEP = Resource("daily_sleep", "daily_sleep", DailySleep)
DAILY_SPO2 = Resource("daily_spo2", "daily_spo2", DailySpO2)
HEART_RATE = Resource("heart_rate", "heartrate", HeartRate, query=DatetimeQuery, can_get=False)
PERSONAL_INFO = Resource(
    "personal_info", "personal_info", PersonalInfo, query=None, can_list=False, by_id=False
)
REST_MODE_PERIOD = Resource("rest_mode_period", "rest_mode_period", RestModePeriod)
RING_CONFIGURATION = Resource("ring_configuration", "ring_configuration", RingConfiguration)
SESSION = Resource("session", "session", Session)
SLEEP = Resource("sleep", "sleep", Sleep)
SLEEP_TIME = Resource("sleep_time", "sleep_time", SleepTime)
TAG = Resource("tag", "tag", Tag)
TAG_V2 = Resource("tag_v2", "tag/v2", TagV2)
WORKOUT = Resource("workout", "workout", Workout)

RESOURCES: dict[str, Resource] = {
    resource.name: resource
    for resource in (
        DAILY_ACTIVITY,
        DAILY_READINESS,
        DAILY_SLEEP,
        DAILY_SPO2,
        HEART_RATE,
        PERSONAL_INFO,
        REST_MODE_PERIOD,
        RING_CONFIGURATION,
        SESSION,
        SLEEP,
        SLEEP_TIME,
        TAG,
        TAG_V2,
        WORKOUT,
    )
}
