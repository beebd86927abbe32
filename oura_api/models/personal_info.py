"""Profile of the user the access token belongs to."""

from __future__ import annotations

from typing import Optional

from oura_api.models.common import OuraModel


class PersonalInfo(OuraModel):
    id: str
    age: Optional[int] = None
    # kilograms
    weight: Optional[float] = None
    # metres
    height: Optional[float] = None
    biological_sex: Optional[str] = None
    # only present when the token was granted the email scope
    email: Optional[str] = None
