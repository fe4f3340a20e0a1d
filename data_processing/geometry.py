# halmoni_project_root/data_processing/geometry.py
# HAL-MONI - GEOFENCE PREDICATES

"""
Plain geometric predicates on (latitude, longitude) pairs.

These are independent of any map library so that region membership can be
tested on its own. Coordinates are treated as planar; the pilot regions are
small enough that curvature does not matter.
"""

from typing import Sequence, Tuple

from .models import BoundingBox

LatLng = Tuple[float, float]


def point_in_rectangle(lat: float, lng: float, bounds: BoundingBox) -> bool:
    """True if the point lies inside or on the edge of `bounds`."""
    return bounds.min_lat <= lat <= bounds.max_lat and bounds.min_lng <= lng <= bounds.max_lng


def point_in_polygon(lat: float, lng: float, vertices: Sequence[LatLng]) -> bool:
    """
    Ray-casting test. `vertices` is an ordered ring of (lat, lng) pairs; the
    closing edge back to the first vertex is implied. Points exactly on an
    edge may fall either way.
    """
    n = len(vertices)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        lat_i, lng_i = vertices[i]
        lat_j, lng_j = vertices[j]
        if (lat_i > lat) != (lat_j > lat):
            crossing_lng = lng_i + (lat - lat_i) * (lng_j - lng_i) / (lat_j - lat_i)
            if lng < crossing_lng:
                inside = not inside
        j = i
    return inside
