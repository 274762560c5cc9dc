"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of mean radius 6371 km.  Check-in
distances are short enough that the spherical error is irrelevant, and
the constant is fixed so that stored distances stay comparable.

Inputs are not validated here: out-of-range degrees still produce a
defined number, and NaN or infinite inputs return NaN instead of
raising.  Callers that need sane coordinates check them at the API edge.

Rounding
--------
Results are rounded with the built-in ``round(x, 2)``, i.e. half-to-even
on the binary value of ``x``.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_KM = 6_371.0


def calculate_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **km**, rounded to 2 decimals."""
    if not all(map(math.isfinite, (lat1, lon1, lat2, lon2))):
        return math.nan

    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = lat2_r - lat1_r
    dlon = math.radians(lon2) - math.radians(lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    a = min(a, 1.0)  # near-antipodal points can overshoot by an ulp
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_KM * c, 2)
