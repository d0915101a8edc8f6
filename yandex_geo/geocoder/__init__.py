"""
Geocoder module for the Yandex geocoding web service.

This module provides functionality for:
- Building geocoding queries (address text or point, area, language, kind)
- Performing the HTTP request and classifying failures
- Parsing the reply into candidate objects
- Flattening a candidate's administrative address tree

Main classes:
- YandexGeocoder: Request builder and HTTP client
- GeocodeResponse: Parsed reply with aggregate metadata
- GeoResult: One geocoded candidate
- AddressLevel: Levels of the address hierarchy

Errors:
- TransportError: HTTP exchange failures
- ServerError: HTTP 500/502 replies
- EmptyResponseError: Empty or undecodable bodies
- ApplicationError: Errors reported by the service
"""

from .geocoder_client import GeocodeFilters, Kind, Lang, YandexGeocoder
from .geocoder_errors import (
    ApplicationError,
    EmptyResponseError,
    GeocoderError,
    ServerError,
    TransportError,
)
from .geocoder_hierarchy import ADDRESS_HIERARCHY, AddressLevel, get_full_address_parts, name_field, parse_level
from .geocoder_objects import GeoResult
from .geocoder_response import GeocodeResponse

__all__ = [
    # Main classes
    "YandexGeocoder",
    "GeocodeFilters",
    "GeocodeResponse",
    "GeoResult",
    "AddressLevel",
    "Kind",
    "Lang",

    # Address hierarchy
    "ADDRESS_HIERARCHY",
    "name_field",
    "parse_level",
    "get_full_address_parts",

    # Errors
    "GeocoderError",
    "TransportError",
    "ServerError",
    "EmptyResponseError",
    "ApplicationError",
]
