"""
Geocoded candidate objects.

A GeoResult projects one raw ``GeoObject`` node from the geocoder reply
into flat, optional fields. Missing or malformed parts of the payload
never raise; they surface as ``None`` (or an empty string for the
formatted address and kind).
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..config.logger_module import log_warning
from .geocoder_hierarchy import get_full_address_parts


# Source key -> GeoResult attribute for the flat name fields
NAME_FIELDS: Dict[str, str] = {
    "CountryName": "country",
    "CountryNameCode": "country_code",
    "AdministrativeAreaName": "administrative_area_name",
    "SubAdministrativeAreaName": "sub_administrative_area_name",
    "LocalityName": "locality_name",
    "DependentLocalityName": "dependent_locality_name",
    "ThoroughfareName": "thoroughfare_name",
    "PremiseNumber": "premise_number",
}


def get_path(node: Any, *keys: str) -> Any:
    """Follow ``keys`` through nested mappings, returning None on any gap."""
    for key in keys:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


def parse_position(pos: Any) -> Tuple[Optional[float], Optional[float]]:
    """
    Split a ``"lon lat"`` position string into (longitude, latitude).

    Args:
        pos: Position string as sent by the geocoder, or None

    Returns:
        (longitude, latitude); (None, None) when absent or unparseable
    """
    if pos is None:
        return None, None
    try:
        longitude, latitude = str(pos).strip().split(" ", 1)
        return float(longitude), float(latitude)
    except ValueError:
        log_warning(f"Unparseable position string: {pos!r}")
        return None, None


def _walk_scalars(node: Any) -> Iterator[Tuple[str, Any]]:
    """Yield (key, value) for every scalar leaf of a mapping, depth first."""
    if isinstance(node, Mapping):
        items = node.items()
    elif isinstance(node, list):
        items = ((None, item) for item in node)
    else:
        return
    for key, value in items:
        if isinstance(value, (Mapping, list)):
            yield from _walk_scalars(value)
        elif key is not None:
            yield key, value


def scan_name_fields(raw_node: Mapping[str, Any]) -> Dict[str, str]:
    """
    Collect the flat name fields from anywhere in a candidate node.

    When a key occurs at several depths the occurrence visited last in
    depth-first, insertion-order traversal wins. A ``null`` leaf never
    wins: it neither sets a field nor clears one set earlier.
    """
    found: Dict[str, str] = {}
    for key, value in _walk_scalars(raw_node):
        if key in NAME_FIELDS and value is not None:
            found[NAME_FIELDS[key]] = str(value)
    return found


@dataclass(frozen=True)
class GeoResult:
    """One geocoded candidate."""

    address: str = ""
    kind: str = ""
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    administrative_area_name: Optional[str] = None
    sub_administrative_area_name: Optional[str] = None
    locality_name: Optional[str] = None
    dependent_locality_name: Optional[str] = None
    thoroughfare_name: Optional[str] = None
    premise_number: Optional[str] = None
    raw_node: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_raw(cls, raw_node: Mapping[str, Any]) -> "GeoResult":
        """
        Build a GeoResult from a raw ``GeoObject`` node.

        Args:
            raw_node: Decoded ``GeoObject`` mapping

        Returns:
            GeoResult with every field the node provides
        """
        if not isinstance(raw_node, Mapping):
            raw_node = {}

        address = get_path(raw_node, "metaDataProperty", "GeocoderMetaData", "text")
        kind = get_path(raw_node, "metaDataProperty", "GeocoderMetaData", "kind")
        longitude, latitude = parse_position(get_path(raw_node, "Point", "pos"))

        return cls(
            address="" if address is None else str(address),
            kind="" if kind is None else str(kind),
            longitude=longitude,
            latitude=latitude,
            raw_node=dict(raw_node),
            **scan_name_fields(raw_node),
        )

    def get_full_address_parts(self) -> List[str]:
        """Address components from Country down to Premise, without repeats."""
        return get_full_address_parts(self.raw_node)

    def to_dict(self) -> Dict[str, Any]:
        """Processed fields as a plain dict, without the raw node."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "raw_node"
        }

    # Pickled results keep the processed fields only
    def __getstate__(self) -> Dict[str, Any]:
        return self.to_dict()

    def __setstate__(self, state: Dict[str, Any]) -> None:
        for name, value in state.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "raw_node", {})
