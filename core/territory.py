# =============================================================================
# core/territory.py  —  Province / district / category browsing
# =============================================================================
#
# The territory explorer narrows the destination list with three
# independent filters: province, district and category.  Each is either
# a value or "all" (None and "" mean the same), and a destination must pass
# every filter that is set.
#
# The district picker offers only the districts of the chosen province, or
# every district when no province is chosen.
# =============================================================================

from typing import Optional

from core.models import Destination, District, Province


ALL = "all"


def _is_set(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


def filter_destinations(
    destinations: list[Destination],
    province_id: Optional[str] = None,
    district_id: Optional[str] = None,
    category: Optional[str] = None,
) -> list[Destination]:
    """Destinations matching every filter that is set, in input order."""
    return [
        dest for dest in destinations
        if (not _is_set(province_id) or dest.province_id == province_id)
        and (not _is_set(district_id) or dest.district_id == district_id)
        and (not _is_set(category) or dest.category == category)
    ]


def available_districts(
    provinces: list[Province], province_id: Optional[str] = None
) -> list[District]:
    """Districts to offer for a province choice.

    An unknown province_id has no districts.
    """
    if not _is_set(province_id):
        return [d for p in provinces for d in p.districts]
    for province in provinces:
        if province.id == province_id:
            return list(province.districts)
    return []
