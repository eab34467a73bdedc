# bloom_api/services/bloom.py
import logging
from datetime import date

from ..schemas.bloom_data import (
    BloomFeature,
    BloomFeatureCollection,
    BloomProperties,
    PointGeometry,
    Prediction,
    Trend,
)
from ..utils.geo import latitude_factor, point_bbox
from ..utils.rand import NumpyRandomSource, RandomSource, random_float, random_int, uniform_pick
from ..utils.time import date_from_epoch_ms, epoch_ms

logger = logging.getLogger(__name__)

MIN_POINTS = 150
MAX_POINTS = 350

_TRENDS = list(Trend)
_PREDICTIONS = list(Prediction)


def generate_bloom_data(
    lat: float,
    lon: float,
    radius: float,
    start_date: date,
    end_date: date,
    rng: RandomSource | None = None,
) -> BloomFeatureCollection:
    """
    Simulated bloom phenology points around (lat, lon).

    Points are uniform over the box lat±radius, lon±radius and dated uniformly
    between start_date and end_date (UTC days, both inclusive). Intensity is
    scaled by distance from the equator. Never raises for numeric input; a
    reversed date range is drawn from the same closed interval.
    """
    if rng is None:
        rng = NumpyRandomSource()

    n_points = random_int(rng, MIN_POINTS, MAX_POINTS)
    bbox = point_bbox(lat, lon, radius)
    t0, t1 = sorted((epoch_ms(start_date), epoch_ms(end_date)))

    features: list[BloomFeature] = []
    for _ in range(n_points):
        point_lat = random_float(rng, bbox.south, bbox.north)
        point_lon = random_float(rng, bbox.west, bbox.east)

        when = date_from_epoch_ms(random_int(rng, t0, t1))
        intensity = rng.random() * latitude_factor(point_lat)

        features.append(BloomFeature(
            geometry=PointGeometry(coordinates=(point_lon, point_lat)),
            properties=BloomProperties(
                intensity=intensity,
                trend=uniform_pick(rng, _TRENDS),
                prediction=uniform_pick(rng, _PREDICTIONS),
                date=when,
            ),
        ))

    logger.debug("Generated %d bloom points around (%.4f, %.4f)", n_points, lat, lon)
    return BloomFeatureCollection(features=features)
