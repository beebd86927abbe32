"""
Oura API Configuration
======================
Environment-driven settings for building a client without hard-coding a
token. Pydantic Settings validates types up front so a malformed timeout
fails at construction, not mid-request.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.ouraring.com/v2/usercollection"


class Settings(BaseSettings):
    """Loaded from environment variables or a .env file."""

    # --- Credentials ---
    # Personal access token from the Oura developer portal
    oura_personal_access_token: str = ""

    # --- Transport ---
    oura_base_url: str = DEFAULT_BASE_URL
    # Seconds; None keeps the httpx default
    oura_request_timeout: Optional[float] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
