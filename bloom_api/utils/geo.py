from dataclasses import dataclass

@dataclass(frozen=True)
class BBox:
    west: float
    south: float
    east: float
    north: float

def point_bbox(lat: float, lon: float, half_size_deg: float) -> BBox:
    # Negative half sizes are not corrected: west > east and south > north.
    return BBox(
        west=lon - half_size_deg,
        south=lat - half_size_deg,
        east=lon + half_size_deg,
        north=lat + half_size_deg
    )

def latitude_factor(lat: float) -> float:
    """1.0 at the equator, 0.0 at the poles. Only within [0, 1] for |lat| <= 90."""
    return (90 - abs(lat)) / 90
