# =============================================================================
# core/mapping.py  —  Marker data for the destination map
# =============================================================================
#
# The map widget itself is someone else's problem.  This module only hands
# it what it needs: a centre, a zoom level and one marker per destination,
# coloured by category.  Clicks come back as a marker id, which
# destination_for_marker() turns back into the Destination.
# =============================================================================

from typing import Optional

from core.models import Coordinates, Destination, MapView, MarkerSpec


NEPAL_CENTER = Coordinates(28.3949, 84.1240)
DEFAULT_ZOOM = 7
DEFAULT_MARKER_COLOR = "#FF5A3C"

CATEGORY_COLORS: dict[str, str] = {
    "Heritage Sites": "#8B5CF6",
    "Trekking Routes": "#10B981",
    "Wildlife": "#F59E0B",
    "Spiritual Centers": "#EC4899",
    "Adventure Sports": "#3B82F6",
    "Cultural Villages": "#F97316",
}


def marker_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, DEFAULT_MARKER_COLOR)


def build_map_view(destinations, category: str = "all") -> MapView:
    """Markers for every destination in `category` ("all" for no filter).

    Destinations without usable coordinates get no marker.
    """
    markers = []
    for dest in destinations:
        if category != "all" and dest.category != category:
            continue
        if dest.coordinates is None or not dest.coordinates.lat or not dest.coordinates.lng:
            continue
        markers.append(MarkerSpec(
            destination_id=dest.id,
            position=dest.coordinates,
            category=dest.category,
            color=marker_color(dest.category),
            label=dest.name,
        ))
    return MapView(center=NEPAL_CENTER, zoom=DEFAULT_ZOOM, markers=markers)


def destination_for_marker(destinations, marker_id: str) -> Optional[Destination]:
    for dest in destinations:
        if dest.id == marker_id:
            return dest
    return None
