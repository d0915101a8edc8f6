"""
Geocoder reply wrapper.

Turns the decoded JSON payload into an ordered list of GeoResult
objects plus the reply-level metadata (echoed request, total found
count, centroid point).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .geocoder_objects import GeoResult, get_path, parse_position


_COLLECTION_PATH = ("response", "GeoObjectCollection")
_METADATA_PATH = _COLLECTION_PATH + ("metaDataProperty", "GeocoderResponseMetaData")


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0


@dataclass(frozen=True)
class GeocodeResponse:
    """The full geocoder reply."""

    results: List[GeoResult] = field(default_factory=list)
    query: Optional[str] = None
    found_count: int = 0
    centroid_longitude: Optional[float] = None
    centroid_latitude: Optional[float] = None
    raw_data: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "GeocodeResponse":
        """
        Build a GeocodeResponse from a decoded JSON payload.

        A payload without ``featureMember`` yields no results; every
        metadata field is optional on its own.

        Args:
            data: Decoded reply body

        Returns:
            GeocodeResponse with one GeoResult per feature member
        """
        if not isinstance(data, Mapping):
            data = {}

        members = get_path(data, *_COLLECTION_PATH, "featureMember")
        if not isinstance(members, list):
            members = []
        results = [GeoResult.from_raw(get_path(entry, "GeoObject") or {}) for entry in members]

        metadata = get_path(data, *_METADATA_PATH)
        query = get_path(metadata, "request")
        found = get_path(metadata, "found")
        longitude, latitude = parse_position(get_path(metadata, "Point", "pos"))

        return cls(
            results=results,
            query=None if query is None else str(query),
            found_count=0 if found is None else _to_int(found),
            centroid_longitude=longitude,
            centroid_latitude=latitude,
            raw_data=dict(data),
        )

    def get_first(self) -> Optional[GeoResult]:
        """First candidate, or None when the reply is empty."""
        return self.results[0] if self.results else None

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[GeoResult]:
        return iter(self.results)
