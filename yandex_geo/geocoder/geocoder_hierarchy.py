"""
Address hierarchy parsing for geocoder candidates.

The geocoder describes a candidate's address as a nested tree of
administrative levels. The allowed nesting is kept as a static table
and walked by a single recursive function that collects one display
name per level.
"""

from typing import Any, Dict, List, Mapping, Tuple


class AddressLevel:
    """Administrative levels of the geocoder address tree."""

    COUNTRY = "Country"
    ADMINISTRATIVE_AREA = "AdministrativeArea"
    SUB_ADMINISTRATIVE_AREA = "SubAdministrativeArea"
    LOCALITY = "Locality"
    DEPENDENT_LOCALITY = "DependentLocality"
    THOROUGHFARE = "Thoroughfare"
    PREMISE = "Premise"


# Child levels in the order they are visited
ADDRESS_HIERARCHY: Dict[str, Tuple[str, ...]] = {
    AddressLevel.COUNTRY: (AddressLevel.ADMINISTRATIVE_AREA,),
    AddressLevel.ADMINISTRATIVE_AREA: (
        AddressLevel.SUB_ADMINISTRATIVE_AREA,
        AddressLevel.LOCALITY,
    ),
    AddressLevel.SUB_ADMINISTRATIVE_AREA: (AddressLevel.LOCALITY,),
    AddressLevel.LOCALITY: (
        AddressLevel.DEPENDENT_LOCALITY,
        AddressLevel.THOROUGHFARE,
    ),
    AddressLevel.DEPENDENT_LOCALITY: (
        AddressLevel.DEPENDENT_LOCALITY,
        AddressLevel.THOROUGHFARE,
    ),
    AddressLevel.THOROUGHFARE: (AddressLevel.PREMISE,),
    AddressLevel.PREMISE: (),
}


def name_field(level: str) -> str:
    """Key holding a level's display value."""
    if level == AddressLevel.PREMISE:
        return "PremiseNumber"
    return f"{level}Name"


def parse_level(node: Mapping[str, Any],
                level: str,
                accumulator: List[str]) -> List[str]:
    """
    Collect display names from an address subtree, depth first.

    Args:
        node: Address subtree for ``level``
        level: Level of ``node``; levels missing from the table are ignored
        accumulator: List shared across the whole walk, appended in place

    Returns:
        The accumulator
    """
    if not isinstance(level, str) or level not in ADDRESS_HIERARCHY:
        return accumulator
    if not isinstance(node, Mapping):
        return accumulator

    name = node.get(name_field(level))
    if isinstance(name, (str, int, float)):
        accumulator.append(str(name))

    for child in ADDRESS_HIERARCHY[level]:
        if child in node:
            parse_level(node[child], child, accumulator)

    return accumulator


def get_address_details_country(raw_node: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the Country subtree of a candidate, or an empty mapping."""
    node: Any = raw_node
    for key in ("metaDataProperty", "GeocoderMetaData", "AddressDetails", "Country"):
        if not isinstance(node, Mapping) or key not in node:
            return {}
        node = node[key]
    return node if isinstance(node, Mapping) else {}


def get_full_address_parts(raw_node: Mapping[str, Any]) -> List[str]:
    """
    Flatten a candidate's address tree into ordered, unique parts.

    Country comes first and Premise last. A value repeated at several
    depths (nested DependentLocality) is kept at its first position.
    """
    parts = parse_level(get_address_details_country(raw_node), AddressLevel.COUNTRY, [])
    return list(dict.fromkeys(parts))
