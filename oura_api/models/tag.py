"""
Tag Models
==========
User tags from the Oura app.

``Tag`` is the first-generation free-text tag on /tag. ``TagV2`` comes from the
versioned /tag/v2 path and carries a tag type code plus an optional time
span instead of a single timestamp.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from oura_api.models.common import OuraModel


class Tag(OuraModel):
    id: str
    day: date
    text: Optional[str] = None
    timestamp: datetime
    tags: list[str]


class TagV2(OuraModel):
    id: str
    tag_type_code: Optional[str] = None
    start_time: datetime
    # a point-in-time tag has no end
    end_time: Optional[datetime] = None
    start_day: date
    end_day: Optional[date] = None
    comment: Optional[str] = None
    # set when tag_type_code is "custom"
    custom_name: Optional[str] = None
