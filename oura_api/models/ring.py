"""
Ring Models
===========
Pydantic shapes for the hardware-facing documents: ring_configuration and
rest_mode_period.

Ring colour, design and hardware type are closed vocabularies. A ring that
Oura releases after this package will fail to decode until the enum is
extended, rather than surfacing as an unknown placeholder.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from oura_api.models.common import OuraModel


# ---------------------------------------------------------------------------
# Allowed values
# ---------------------------------------------------------------------------

class RingColor(str, Enum):
    BRUSHED_SILVER = "brushed_silver"
    GLOSSY_BLACK = "glossy_black"
    GLOSSY_GOLD = "glossy_gold"
    GLOSSY_WHITE = "glossy_white"
    GUCCI = "gucci"
    MATT_GOLD = "matt_gold"
    ROSE = "rose"
    SILVER = "silver"
    STEALTH_BLACK = "stealth_black"
    TITANIUM = "titanium"
    TITANIUM_AND_GOLD = "titanium_and_gold"


class RingDesign(str, Enum):
    BALANCE = "balance"
    BALANCE_DIAMOND = "balance_diamond"
    HERITAGE = "heritage"
    HORIZON = "horizon"


class RingHardwareType(str, Enum):
    GEN1 = "gen1"
    GEN2 = "gen2"
    GEN2M = "gen2m"
    GEN3 = "gen3"
    GEN4 = "gen4"


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

class RingConfiguration(OuraModel):
    """A ring that has been paired with the user's account."""

    id: str
    color: Optional[RingColor] = None
    design: Optional[RingDesign] = None
    firmware_version: Optional[str] = None
    hardware_type: Optional[RingHardwareType] = None
    set_up_at: Optional[datetime] = None
    # US ring size
    size: Optional[int] = None


class RestModeEpisode(OuraModel):
    tags: list[str]
    timestamp: datetime


class RestModePeriod(OuraModel):
    """A stretch of time the user switched the ring into rest mode.

    ``end_day`` and ``end_time`` are absent while the period is still open.
    """

    id: str
    end_day: Optional[date] = None
    end_time: Optional[datetime] = None
    episodes: list[RestModeEpisode]
    start_day: date
    start_time: Optional[datetime] = None
