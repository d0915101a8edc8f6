"""
Custom exceptions for the geocoder module.

These exceptions classify the ways a geocoding request can fail:
transport problems, server-side HTTP failures, unusable bodies and
errors reported by the geocoding service itself.
"""


class GeocoderError(Exception):
    """Base class for all geocoder request failures."""
    pass


class TransportError(GeocoderError):
    """Raised when the HTTP exchange itself fails (DNS, connection, TLS, timeout)."""
    pass


class ServerError(GeocoderError):
    """Raised when the geocoder answers with HTTP 500 or 502."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(GeocoderError):
    """Raised when the response body decodes to nothing usable."""

    def __init__(self, url: str):
        super().__init__(f"Can't load data by url: {url}")
        self.url = url


class ApplicationError(GeocoderError):
    """Raised when the service reports an error inside its JSON body."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code
