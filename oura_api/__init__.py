"""
Oura API
========
Typed client for the Oura Ring REST API v2.

    from oura_api import DateQuery, OuraClient

    client = OuraClient(token)
    page = client.list_daily_sleep(DateQuery(start_date="2023-08-01", end_date="2023-08-31"))
    while page.has_more:
        ...

The Oura API v1 is not supported.
"""

from oura_api.client import (
    OuraAPIError,
    OuraClient,
    OuraConfigError,
    OuraDecodeError,
    OuraError,
    OuraUsageError,
)
from oura_api.config import DEFAULT_BASE_URL, Settings, get_settings
from oura_api.models import *  # noqa: F401,F403
from oura_api.models import __all__ as _models_all
from oura_api.resources import RESOURCES, Resource

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "OuraAPIError",
    "OuraClient",
    "OuraConfigError",
    "OuraDecodeError",
    "OuraError",
    "OuraUsageError",
    "RESOURCES",
    "Resource",
    "Settings",
    "get_settings",
    *_models_all,
]
