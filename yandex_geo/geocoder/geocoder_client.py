"""
Yandex geocoder HTTP client.

Accumulates geocoding filters, performs a single GET request against
the geocoder endpoint and turns the reply into a GeocodeResponse,
classifying every failure into one of the geocoder exceptions.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from lxml import etree, html
from pydantic import BaseModel, ConfigDict, Field

from ..config.config_module import get_geocoder_settings
from ..config.logger_module import log_debug, log_error, log_info
from .geocoder_errors import (
    ApplicationError,
    EmptyResponseError,
    ServerError,
    TransportError,
)
from .geocoder_response import GeocodeResponse


class Kind:
    """Toponym kinds accepted by the ``kind`` filter (reverse geocoding only)."""

    HOUSE = "house"
    STREET = "street"
    METRO = "metro"
    DISTRICT = "district"
    LOCALITY = "locality"


class Lang:
    """Response languages accepted by the ``lang`` filter."""

    RU = "ru-RU"
    UA = "uk-UA"
    BY = "be-BY"
    US = "en-US"
    BR = "en-BR"
    TR = "tr-TR"  # Turkey map only


class GeocodeFilters(BaseModel):
    """Query filters sent to the geocoder; unset optional filters are omitted."""

    model_config = ConfigDict(validate_assignment=True)

    geocode: Optional[str] = None
    lang: str = Lang.RU
    results: int = Field(default=10, ge=1)
    skip: int = Field(default=0, ge=0)
    kind: Optional[str] = None
    spn: Optional[str] = None
    ll: Optional[str] = None
    rspn: Optional[int] = Field(default=None, ge=0, le=1)
    apikey: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        """Query parameters in request order, ``format=json`` first."""
        params: Dict[str, Any] = {"format": "json"}
        params.update(self.model_dump(exclude_none=True))
        return params


def strip_markup(body: str) -> str:
    """Text content of an HTML error page, trimmed."""
    if not body or not body.strip():
        return ""
    try:
        return html.fromstring(body).text_content().strip()
    except ValueError:
        # lxml refuses str input carrying an XML encoding declaration
        pass
    except etree.ParserError:
        return body.strip()
    try:
        return html.fromstring(body.encode("utf-8")).text_content().strip()
    except (etree.ParserError, ValueError):
        return body.strip()


class YandexGeocoder:
    """
    Request builder for the Yandex geocoder.

    Filters persist across calls until ``clear()``; an instance is meant
    to be owned by a single caller and is not thread-safe.
    """

    BASE_URL = "https://geocode-maps.yandex.ru"

    def __init__(self,
                 api_key: str = None,
                 version: str = None,
                 request_timeout: float = None,
                 session: requests.Session = None,
                 env_path: str = None):
        """
        Initialize the geocoder client.

        Args:
            api_key: API key (loaded from config if not provided)
            version: API version path segment (default "1.x")
            request_timeout: HTTP request timeout in seconds
            session: Optional preconfigured requests session, used as is
            env_path: Optional .env file read before the environment
        """
        settings = get_geocoder_settings(env_path=env_path)

        self.api_key = api_key or settings.api_key
        self.version = version or settings.version
        self.request_timeout = request_timeout or settings.request_timeout

        if session is None:
            session = requests.Session()
            session.headers.update({
                'User-Agent': 'yandex-geo/1.0'
            })
        self._session = session

        self.clear()

        log_info(f"YandexGeocoder initialized (version={self.version})")

    @property
    def endpoint(self) -> str:
        return f"{self.BASE_URL}/{self.version}/"

    def clear(self) -> "YandexGeocoder":
        """
        Reset filters to their defaults and drop the stored response.

        Defaults are ``format=json``, ``lang=ru-RU``, ``skip=0`` and
        ``results=10``. A configured API key is kept.
        """
        self.filters = GeocodeFilters(apikey=self.api_key)
        self._response = None
        return self

    def set_point(self, longitude: float, latitude: float) -> "YandexGeocoder":
        """Reverse geocode a point given in degrees, longitude first."""
        self.filters.geocode = f"{longitude:f},{latitude:f}"
        return self

    def set_area(self,
                 length_lng: float,
                 length_lat: float,
                 longitude: float = None,
                 latitude: float = None) -> "YandexGeocoder":
        """
        Set the search area.

        Args:
            length_lng: Span between max and min longitude, degrees
            length_lat: Span between max and min latitude, degrees
            longitude: Area centre longitude
            latitude: Area centre latitude
        """
        self.filters.spn = f"{length_lng:f},{length_lat:f}"
        if longitude is not None and latitude is not None:
            self.filters.ll = f"{longitude:f},{latitude:f}"
        return self

    def use_area_limit(self, area_limit: bool) -> "YandexGeocoder":
        """Restrict results to the area given by ``set_area``."""
        self.filters.rspn = 1 if area_limit else 0
        return self

    def set_query(self, query: str) -> "YandexGeocoder":
        self.filters.geocode = query
        return self

    def set_kind(self, kind: str) -> "YandexGeocoder":
        self.filters.kind = kind
        return self

    def set_limit(self, limit: int) -> "YandexGeocoder":
        self.filters.results = limit
        return self

    def set_offset(self, offset: int) -> "YandexGeocoder":
        self.filters.skip = offset
        return self

    def set_lang(self, lang: str) -> "YandexGeocoder":
        self.filters.lang = lang
        return self

    def set_token(self, token: str) -> "YandexGeocoder":
        self.filters.apikey = token
        return self

    def build_url(self) -> str:
        """Complete request URL for the current filters."""
        return f"{self.endpoint}?{urlencode(self.filters.to_params())}"

    def _redacted_url(self) -> str:
        params = self.filters.to_params()
        if "apikey" in params:
            params["apikey"] = "***"
        return f"{self.endpoint}?{urlencode(params)}"

    def load(self, **request_kwargs: Any) -> "YandexGeocoder":
        """
        Perform the geocoding request for the current filters.

        Args:
            **request_kwargs: Extra arguments for ``requests.Session.get``;
                they override the default timeout and redirect handling

        Returns:
            self, with the parsed reply available from ``get_response()``

        Raises:
            TransportError: If the HTTP exchange fails
            ServerError: On HTTP 500/502
            EmptyResponseError: If the body is empty or not a JSON object
            ApplicationError: If the service reports an error in the body
        """
        options: Dict[str, Any] = {
            "timeout": self.request_timeout,
            "allow_redirects": True,
        }
        options.update(request_kwargs)

        log_info(f"Geocoding request: {self._redacted_url()}")

        try:
            response = self._session.get(
                self.endpoint,
                params=self.filters.to_params(),
                **options
            )
        except requests.exceptions.RequestException as e:
            log_error(f"Transport error calling geocoder: {e}")
            raise TransportError(str(e)) from e

        if response.status_code in (500, 502):
            message = strip_markup(response.text)
            log_error(f"HTTP {response.status_code} from geocoder: {message[:200]}")
            raise ServerError(message, response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not data or not isinstance(data, dict):
            log_error(f"Empty or undecodable geocoder reply (HTTP {response.status_code})")
            raise EmptyResponseError(self._redacted_url())

        if data.get("error"):
            message = str(data["error"])
            if data.get("message"):
                message = f"{message}: {data['message']}"
            status_code = data.get("statusCode") or 0
            log_error(f"Geocoder reported an error ({status_code}): {message}")
            raise ApplicationError(message, status_code)

        self._response = GeocodeResponse.from_payload(data)
        log_debug(
            f"Geocoder returned {len(self._response.results)} results "
            f"(found={self._response.found_count})"
        )
        return self

    def get_response(self) -> Optional[GeocodeResponse]:
        """Reply from the last successful ``load()``, if any."""
        return self._response
