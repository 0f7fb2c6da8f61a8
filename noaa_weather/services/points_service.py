"""
Points service.

``/points/{lat},{lon}`` is the entry point for location-based lookups: it
maps a coordinate to its forecast office, grid cell, zones and the URLs of
the forecast and station endpoints for that spot.
"""

import logging

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.observations import ObservationStationCollectionGeoJson
from noaa_weather.models.points import PointGeoJson

logger = logging.getLogger(__name__)


def format_point(latitude: float, longitude: float) -> str:
    """``"lat,lon"`` rounded to the 4 decimals the API accepts without redirecting."""
    return f"{round(latitude, 4)},{round(longitude, 4)}"


async def get_point(configuration: Configuration, point: str) -> PointGeoJson:
    """Metadata for ``point`` (``"39.7456,-97.0892"``)."""
    return await fetch(configuration, f"/points/{encode_path_param(point)}", PointGeoJson)


async def get_point_stations(configuration: Configuration, point: str) -> ObservationStationCollectionGeoJson:
    return await fetch(
        configuration, f"/points/{encode_path_param(point)}/stations", ObservationStationCollectionGeoJson
    )
