"""
Oura API Client
===============
Synchronous, typed client for the Oura REST API v2 usercollection endpoints.

Responsibilities:
- get_document(): GET {base}/{path}/{id} (or {base}/{path} for singletons)
  and decode the body into the resource's model
- list_documents(): GET {base}/{path}?{query} and decode the body into a
  ListResponse of the resource's model
- get_<resource>() / list_<resource>(): named shortcuts generated from the
  resource registry

Error rules:
- Non-2xx → OuraAPIError with the status code and raw body.
- Body that doesn't match the model → OuraDecodeError, chained from the
  pydantic ValidationError. Unknown enum values land here too.
- Transport failures (DNS, connect, TLS, timeout) propagate as the
  httpx.TransportError subclass httpx raised. Nothing is retried.

The client stores only its token, base URL and timeout, and opens a fresh
httpx.Client per request, so one instance can be shared between threads.
Pagination is manual: pass ``response.next_token`` back via
``query.with_next_token()``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from oura_api.config import DEFAULT_BASE_URL, Settings, get_settings
from oura_api.models import DateQuery, DatetimeQuery, ListResponse, OuraModel
from oura_api.resources import (
    DAILY_ACTIVITY,
    DAILY_READINESS,
    DAILY_SLEEP,
    DAILY_SPO2,
    HEART_RATE,
    PERSONAL_INFO,
    RESOURCES,
    REST_MODE_PERIOD,
    RING_CONFIGURATION,
    SESSION,
    SLEEP,
    SLEEP_TIME,
    TAG,
    TAG_V2,
    WORKOUT,
    Resource,
)

logger = logging.getLogger(__name__)

Query = Union[DateQuery, DatetimeQuery]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class OuraError(Exception):
    """Base class for errors raised by this package."""


class OuraAPIError(OuraError):
    """Non-2xx response from Oura API."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Oura API error {status_code}: {body}")


class OuraDecodeError(OuraError):
    """2xx response whose body doesn't match the expected model."""

    def __init__(self, path: str, body: str) -> None:
        self.path = path
        self.body = body
        super().__init__(f"Could not decode Oura response for {path}")


class OuraUsageError(OuraError):
    """Operation not offered by the resource, e.g. get on heart rate."""


class OuraConfigError(OuraError):
    """Required setting missing when building a client from the environment."""


# ---------------------------------------------------------------------------
# Named endpoint factories
# ---------------------------------------------------------------------------


def _getter(resource: Resource) -> Callable[..., OuraModel]:
    if resource.by_id:
        def endpoint(self: OuraClient, document_id: str) -> OuraModel:
            return self.get_document(resource, document_id)
    else:
        def endpoint(self: OuraClient) -> OuraModel:
            return self.get_document(resource)

    endpoint.__name__ = endpoint.__qualname__ = f"get_{resource.name}"
    endpoint.__doc__ = f"GET /{resource.path} → {resource.model.__name__}."
    return endpoint


def _lister(resource: Resource) -> Callable[..., ListResponse]:
    def endpoint(self: OuraClient, query: Optional[Query] = None) -> ListResponse:
        return self.list_documents(resource, query)

    endpoint.__name__ = endpoint.__qualname__ = f"list_{resource.name}"
    endpoint.__doc__ = (
        f"GET /{resource.path} filtered by a {resource.query.__name__} "
        f"→ ListResponse[{resource.model.__name__}]."
    )
    return endpoint


# ---------------------------------------------------------------------------
# OuraClient
# ---------------------------------------------------------------------------


class OuraClient:
    """Makes authenticated requests to the Oura REST API v2."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
    ) -> None:
        if not token:
            raise ValueError("An Oura access token is required")
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @classmethod
    def with_base_url(cls, token: str, base_url: str) -> OuraClient:
        """Client pointed at a different host, typically a mock server."""
        return cls(token, base_url=base_url)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> OuraClient:
        """Build a client from OURA_* environment variables or .env."""
        if settings is None:
            settings = get_settings()
        if not settings.oura_personal_access_token:
            raise OuraConfigError("OURA_PERSONAL_ACCESS_TOKEN is not set")
        return cls(
            settings.oura_personal_access_token,
            base_url=settings.oura_base_url,
            timeout=settings.oura_request_timeout,
        )

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def __repr__(self) -> str:
        return f"OuraClient(base_url={self._base_url!r})"

    # ---- Generic operations ----------------------------------------------

    def get_document(
        self, resource: Union[Resource, str], document_id: Optional[str] = None
    ) -> OuraModel:
        """Fetch a single document of *resource*.

        *document_id* is required for by-id resources and must be omitted
        for personal_info.
        """
        resource = _resolve(resource)
        if not resource.can_get:
            raise OuraUsageError(f"{resource.name} has no single-document endpoint")

        if resource.by_id:
            if not document_id:
                raise ValueError(f"{resource.name} requires a non-empty document id")
            # the id is one opaque path segment; reserved characters are escaped
            path = f"{resource.path}/{quote(document_id, safe='')}"
        elif document_id is not None:
            raise OuraUsageError(f"{resource.name} is not addressed by id")
        else:
            path = resource.path

        return self._request(path, None, resource.model)

    def list_documents(
        self, resource: Union[Resource, str], query: Optional[Query] = None
    ) -> ListResponse:
        """Fetch one page of *resource*.

        *query* must match the resource's query type; ``None`` sends no
        filters and lets Oura apply its default range.
        """
        resource = _resolve(resource)
        if not resource.can_list:
            raise OuraUsageError(f"{resource.name} has no list endpoint")

        if query is None:
            query = resource.query()
        elif not isinstance(query, resource.query):
            raise TypeError(
                f"{resource.name} expects a {resource.query.__name__}, "
                f"got {type(query).__name__}"
            )

        return self._request(resource.path, query.to_params(), ListResponse[resource.model])

    # ---- Named operations ------------------------------------------------

    get_daily_activity = _getter(DAILY_ACTIVITY)
    list_daily_activity = _lister(DAILY_ACTIVITY)

    get_daily_readiness = _getter(DAILY_READINESS)
    list_daily_readiness = _lister(DAILY_READINESS)

    get_daily_sleep = _getter(DAILY_SLEEP)
    list_daily_sleep = _lister(DAILY_SLEEP)

    get_daily_spo2 = _getter(DAILY_SPO2)
    list_daily_spo2 = _lister(DAILY_SPO2)

    list_heart_rate = _lister(HEART_RATE)

    get_personal_info = _getter(PERSONAL_INFO)

    get_rest_mode_period = _getter(REST_MODE_PERIOD)
    list_rest_mode_period = _lister(REST_MODE_PERIOD)

    get_ring_configuration = _getter(RING_CONFIGURATION)
    list_ring_configuration = _lister(RING_CONFIGURATION)

    get_session = _getter(SESSION)
    list_session = _lister(SESSION)

    get_sleep = _getter(SLEEP)
    list_sleep = _lister(SLEEP)

    get_sleep_time = _getter(SLEEP_TIME)
    list_sleep_time = _lister(SLEEP_TIME)

    get_tag = _getter(TAG)
    list_tag = _lister(TAG)

    get_tag_v2 = _getter(TAG_V2)
    list_tag_v2 = _lister(TAG_V2)

    get_workout = _getter(WORKOUT)
    list_workout = _lister(WORKOUT)

    # ---- Transport ---------------------------------------------------------

    def _request(
        self,
        path: str,
        params: Optional[dict[str, str]],
        response_type: type[BaseModel],
    ) -> Any:
        """Shared GET call with Bearer auth. Raises OuraAPIError on non-2xx."""
        url = f"{self._base_url}/{path}"
        client_kwargs = {} if self._timeout is None else {"timeout": self._timeout}

        logger.debug("GET %s", url)
        with httpx.Client(**client_kwargs) as client:
            response = client.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {self._token}"},
            )
        logger.debug("GET %s returned %d", url, response.status_code)

        if not response.is_success:
            raise OuraAPIError(response.status_code, response.text)

        try:
            return response_type.model_validate_json(response.content)
        except ValidationError as exc:
            raise OuraDecodeError(path, response.text) from exc


def _resolve(resource: Union[Resource, str]) -> Resource:
    if isinstance(resource, Resource):
        return resource
    try:
        return RESOURCES[resource]
    except KeyError:
        raise OuraUsageError(f"Unknown Oura resource: {resource!r}") from None
