"""
Tests for Oura response models and queries
==========================================
Covers:
- Closed enums: out-of-vocabulary values fail validation instead of defaulting
- Optional contributors: withheld sub-scores decode to None
- Immutability: decoded models and queries are frozen
- Forward compatibility: unknown response keys are ignored
- ListResponse: next_token defaults to None, has_more mirrors it
- DateQuery / DatetimeQuery: to_params omits unset fields, ISO formatting,
  with_next_token copies, unknown query fields rejected

Run: pytest tests/test_models.py -v
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from oura_api import (
    DailyReadiness,
    DailySleep,
    DateQuery,
    DatetimeQuery,
    HeartRate,
    ListResponse,
    RestModePeriod,
    RingColor,
    RingConfiguration,
    Session,
    SleepTime,
    SleepTimeStatus,
    TagV2,
    Workout,
)

# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_WORKOUT = {
    "id": "w1",
    "activity": "walking",
    "calories": 120.0,
    "day": "2023-08-20",
    "distance": 3000.0,
    "end_datetime": "2023-08-20T09:00:00+02:00",
    "intensity": "easy",
    "label": None,
    "source": "autodetected",
    "start_datetime": "2023-08-20T08:30:00+02:00",
}

_DAILY_SLEEP_NO_CONTRIBUTORS = {
    "id": "s1",
    "contributors": {},
    "day": "2023-08-20",
    "score": None,
    "timestamp": "2023-08-20T00:00:00+00:00",
}


# ---------------------------------------------------------------------------
# TestClosedEnums
# ---------------------------------------------------------------------------

class TestClosedEnums:

    @pytest.mark.parametrize(
        "field, value",
        [("intensity", "extreme"), ("source", "smartwatch")],
    )
    def test_workout_rejects_unknown_enum_values(self, field, value):
        with pytest.raises(ValidationError):
            Workout.model_validate({**_WORKOUT, field: value})

    def test_ring_color_rejects_unknown_value(self):
        with pytest.raises(ValidationError):
            RingConfiguration.model_validate({"id": "r1", "color": "neon_pink"})

    def test_ring_color_accepts_known_value(self):
        ring = RingConfiguration.model_validate({"id": "r1", "color": "titanium_and_gold"})
        assert ring.color is RingColor.TITANIUM_AND_GOLD

    def test_session_mood_rejects_unknown_value(self):
        with pytest.raises(ValidationError):
            Session.model_validate({
                "id": "m1",
                "day": "2023-08-20",
                "start_datetime": "2023-08-20T12:00:00+00:00",
                "end_datetime": "2023-08-20T12:10:00+00:00",
                "type": "breathing",
                "mood": "ecstatic",
            })

    def test_heart_rate_source_rejects_unknown_value(self):
        with pytest.raises(ValidationError):
            HeartRate.model_validate({"bpm": 60, "source": "manual", "timestamp": "2023-08-20T10:00:00Z"})

    def test_sleep_time_status_and_optional_window(self):
        sleep_time = SleepTime.model_validate(
            {"id": "t1", "day": "2023-08-20", "status": "not_enough_nights"}
        )
        assert sleep_time.status is SleepTimeStatus.NOT_ENOUGH_NIGHTS
        assert sleep_time.optimal_bedtime is None
        assert sleep_time.recommendation is None

        with pytest.raises(ValidationError):
            SleepTime.model_validate({"id": "t1", "day": "2023-08-20", "status": "perfect"})


# ---------------------------------------------------------------------------
# TestOptionalFields
# ---------------------------------------------------------------------------

class TestOptionalFields:

    def test_withheld_contributors_decode_to_none(self):
        sleep = DailySleep.model_validate(_DAILY_SLEEP_NO_CONTRIBUTORS)

        assert sleep.score is None
        assert sleep.contributors.deep_sleep is None
        assert sleep.contributors.total_sleep is None

    def test_readiness_temperature_deviation_optional(self):
        readiness = DailyReadiness.model_validate({
            "id": "r1",
            "contributors": {"hrv_balance": 64},
            "day": "2023-08-20",
            "timestamp": "2023-08-20T00:00:00+00:00",
        })

        assert readiness.contributors.hrv_balance == 64
        assert readiness.contributors.body_temperature is None
        assert readiness.temperature_deviation is None

    def test_open_rest_mode_period_has_no_end(self):
        period = RestModePeriod.model_validate({
            "id": "p1",
            "episodes": [],
            "start_day": "2023-08-18",
        })

        assert period.end_day is None
        assert period.end_time is None
        assert period.start_day == date(2023, 8, 18)

    def test_tag_v2_point_in_time(self):
        tag = TagV2.model_validate({
            "id": "t1",
            "start_time": "2023-08-20T16:00:00+02:00",
            "start_day": "2023-08-20",
        })

        assert tag.end_time is None
        assert tag.start_time.utcoffset() == timedelta(hours=2)

    def test_missing_required_field_fails(self):
        document = {key: value for key, value in _WORKOUT.items() if key != "activity"}
        with pytest.raises(ValidationError):
            Workout.model_validate(document)

    def test_unknown_keys_are_ignored(self):
        workout = Workout.model_validate({**_WORKOUT, "brand_new_field": 1})
        assert not hasattr(workout, "brand_new_field")


# ---------------------------------------------------------------------------
# TestImmutability
# ---------------------------------------------------------------------------

class TestImmutability:

    def test_models_are_frozen(self):
        workout = Workout.model_validate(_WORKOUT)
        with pytest.raises(ValidationError):
            workout.calories = 0.0

    def test_queries_are_frozen(self):
        query = DateQuery(start_date="2023-08-01")
        with pytest.raises(ValidationError):
            query.start_date = date(2023, 9, 1)


# ---------------------------------------------------------------------------
# TestListResponse
# ---------------------------------------------------------------------------

class TestListResponse:

    def test_missing_next_token_is_none(self):
        page = ListResponse[Workout].model_validate({"data": [_WORKOUT]})

        assert page.next_token is None
        assert page.has_more is False
        assert isinstance(page.data[0], Workout)

    def test_next_token_kept_verbatim(self):
        page = ListResponse[Workout].model_validate({"data": [], "next_token": "b64+/=="})

        assert page.next_token == "b64+/=="
        assert page.has_more is True

    def test_empty_next_token_means_last_page(self):
        page = ListResponse[Workout].model_validate({"data": [], "next_token": ""})

        assert page.has_more is False

    def test_item_failure_fails_whole_page(self):
        with pytest.raises(ValidationError):
            ListResponse[Workout].model_validate({"data": [_WORKOUT, {**_WORKOUT, "intensity": "max"}]})


# ---------------------------------------------------------------------------
# TestQueries
# ---------------------------------------------------------------------------

class TestQueries:

    def test_empty_date_query_has_no_params(self):
        assert DateQuery().to_params() == {}
        assert DatetimeQuery().to_params() == {}

    def test_date_query_accepts_strings_and_dates(self):
        from_strings = DateQuery(start_date="2022-12-01", end_date="2023-08-20")
        from_dates = DateQuery(start_date=date(2022, 12, 1), end_date=date(2023, 8, 20))

        assert from_strings == from_dates
        assert from_dates.to_params() == {"start_date": "2022-12-01", "end_date": "2023-08-20"}

    def test_datetime_query_iso_format(self):
        query = DatetimeQuery(
            start_datetime=datetime(2023, 8, 1, 6, 30),
            end_datetime=datetime(2023, 8, 1, 18, 0, tzinfo=timezone(timedelta(hours=-7))),
        )

        assert query.to_params() == {
            "start_datetime": "2023-08-01T06:30:00",
            "end_datetime": "2023-08-01T18:00:00-07:00",
        }

    def test_with_next_token_returns_new_query(self):
        query = DateQuery(start_date="2023-08-01")
        follow_up = query.with_next_token("cursor")

        assert query.next_token is None
        assert follow_up.next_token == "cursor"
        assert follow_up.start_date == date(2023, 8, 1)

    def test_with_next_token_none_clears_cursor(self):
        query = DatetimeQuery(next_token="cursor").with_next_token(None)
        assert "next_token" not in query.to_params()

    def test_empty_next_token_never_sent(self):
        follow_up = DateQuery(start_date="2023-08-01").with_next_token("")

        assert follow_up.next_token is None
        assert follow_up.to_params() == {"start_date": "2023-08-01"}
        assert DatetimeQuery(next_token="").to_params() == {}

    def test_with_next_token_keeps_query_type(self):
        assert type(DatetimeQuery().with_next_token("cursor")) is DatetimeQuery

    def test_query_kinds_do_not_mix(self):
        with pytest.raises(ValidationError):
            DateQuery(start_datetime="2023-08-01T00:00:00")
        with pytest.raises(ValidationError):
            DatetimeQuery(start_date="2023-08-01")

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError):
            DateQuery(start_date="2023-13-45")
