"""
Client library for the Yandex geocoding web service.
"""

from .geocoder import (
    AddressLevel,
    ApplicationError,
    EmptyResponseError,
    GeocodeResponse,
    GeocoderError,
    GeoResult,
    Kind,
    Lang,
    ServerError,
    TransportError,
    YandexGeocoder,
)

__all__ = [
    "YandexGeocoder",
    "GeocodeResponse",
    "GeoResult",
    "AddressLevel",
    "Kind",
    "Lang",
    "GeocoderError",
    "TransportError",
    "ServerError",
    "EmptyResponseError",
    "ApplicationError",
]

# Version info
__version__ = "1.0.0"
