# bloom_api/routers/bloom_data.py
import logging
from math import isnan

from fastapi import APIRouter, Query

from ..core.errors import InvalidDate, InvalidNumber, InvalidRadius, InvalidRange, MissingParameter
from ..schemas.bloom_data import BloomDataQuery, BloomFeatureCollection
from ..services.bloom import generate_bloom_data
from ..utils.time import parse_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["bloom"])


# -------- helpers --------
def _to_float(raw: str) -> float | None:
    try:
        val = float(raw)
    except ValueError:
        return None
    return None if isnan(val) else val

def _parse_query(lat, lon, radius, start_date, end_date) -> BloomDataQuery:
    if not all([lat, lon, radius, start_date, end_date]):
        raise MissingParameter()

    lat_num, lon_num, radius_num = _to_float(lat), _to_float(lon), _to_float(radius)
    if lat_num is None or lon_num is None or radius_num is None:
        raise InvalidNumber()

    try:
        start, end = parse_date(start_date), parse_date(end_date)
    except ValueError:
        raise InvalidDate()

    if radius_num < 0:
        raise InvalidRadius()
    if start > end:
        raise InvalidRange()

    return BloomDataQuery(lat=lat_num, lon=lon_num, radius=radius_num, start_date=start, end_date=end)


# =========================
# BLOOM DATA
# =========================
@router.get("/bloom-data", response_model=BloomFeatureCollection)
def bloom_data(
    lat: str | None = Query(None),
    lon: str | None = Query(None),
    radius: str | None = Query(None, description="Half-width of the box, in degrees"),
    start_date: str | None = Query(None, alias="startDate", description="YYYY-MM-DD"),
    end_date: str | None = Query(None, alias="endDate", description="YYYY-MM-DD"),
):
    q = _parse_query(lat, lon, radius, start_date, end_date)

    logger.info(
        "Bloom data request: center=[%.4f, %.4f] radius=%.4f deg dates=%s..%s",
        q.lat, q.lon, q.radius, q.start_date.isoformat(), q.end_date.isoformat(),
    )
    return generate_bloom_data(q.lat, q.lon, q.radius, q.start_date, q.end_date)
