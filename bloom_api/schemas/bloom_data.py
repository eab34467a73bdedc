# bloom_api/schemas/bloom_data.py
import datetime as dt
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Trend(str, Enum):
    earlier = "earlier"
    stable = "stable"
    later = "later"


class Prediction(str, Enum):
    significant = "significant"
    moderate = "moderate"
    slight = "slight"
    no_change = "no_change"


class BloomDataQuery(BaseModel):
    """Parsed query of GET /api/bloom-data."""
    lat: float
    lon: float
    radius: float
    start_date: dt.date
    end_date: dt.date


class PointGeometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float]  # (lon, lat)


class BloomProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    intensity: float
    trend: Trend
    prediction: Prediction
    date: dt.date


class BloomFeature(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Feature"] = "Feature"
    geometry: PointGeometry
    properties: BloomProperties


class BloomFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[BloomFeature] = []
