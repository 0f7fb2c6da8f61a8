"""
Zones service.

UGC zones (public forecast, county, fire, marine...): metadata and geometry,
zone text forecasts, and the observations/stations inside a forecast zone.
"""

import logging
from datetime import datetime
from typing import List, Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.codes import AreaCode, NwsZoneType, RegionCode
from noaa_weather.models.observations import ObservationCollectionGeoJson, ObservationStationCollectionGeoJson
from noaa_weather.models.zones import ZoneCollectionGeoJson, ZoneForecastGeoJson, ZoneGeoJson

logger = logging.getLogger(__name__)


async def get_zone(
    configuration: Configuration,
    zone_type: NwsZoneType,
    zone_id: str,
    *,
    effective: Optional[datetime] = None,
) -> ZoneGeoJson:
    path = f"/zones/{encode_path_param(zone_type)}/{encode_path_param(zone_id)}"
    return await fetch(configuration, path, ZoneGeoJson, query={"effective": effective})


async def get_zone_forecast(configuration: Configuration, zone_type: str, zone_id: str) -> ZoneForecastGeoJson:
    path = f"/zones/{encode_path_param(zone_type)}/{encode_path_param(zone_id)}/forecast"
    return await fetch(configuration, path, ZoneForecastGeoJson)


def _zone_query(
    id: Optional[List[str]],
    area: Optional[List[AreaCode]],
    region: Optional[List[RegionCode]],
    type: Optional[List[NwsZoneType]],
    point: Optional[str],
    include_geometry: Optional[bool],
    limit: Optional[int],
    effective: Optional[datetime],
) -> dict:
    return {
        "id": id,
        "area": area,
        "region": region,
        "type": type,
        "point": point,
        "include_geometry": include_geometry,
        "limit": limit,
        "effective": effective,
    }


async def get_zones(
    configuration: Configuration,
    *,
    id: Optional[List[str]] = None,
    area: Optional[List[AreaCode]] = None,
    region: Optional[List[RegionCode]] = None,
    type: Optional[List[NwsZoneType]] = None,
    point: Optional[str] = None,
    include_geometry: Optional[bool] = None,
    limit: Optional[int] = None,
    effective: Optional[datetime] = None,
) -> ZoneCollectionGeoJson:
    query = _zone_query(id, area, region, type, point, include_geometry, limit, effective)
    return await fetch(configuration, "/zones", ZoneCollectionGeoJson, query=query)


async def get_zones_by_type(
    configuration: Configuration,
    zone_type: NwsZoneType,
    *,
    id: Optional[List[str]] = None,
    area: Optional[List[AreaCode]] = None,
    region: Optional[List[RegionCode]] = None,
    type: Optional[List[NwsZoneType]] = None,
    point: Optional[str] = None,
    include_geometry: Optional[bool] = None,
    limit: Optional[int] = None,
    effective: Optional[datetime] = None,
) -> ZoneCollectionGeoJson:
    query = _zone_query(id, area, region, type, point, include_geometry, limit, effective)
    return await fetch(configuration, f"/zones/{encode_path_param(zone_type)}", ZoneCollectionGeoJson, query=query)


async def get_zone_observations(
    configuration: Configuration,
    zone_id: str,
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> ObservationCollectionGeoJson:
    return await fetch(
        configuration,
        f"/zones/forecast/{encode_path_param(zone_id)}/observations",
        ObservationCollectionGeoJson,
        query={"start": start, "end": end, "limit": limit},
    )


async def get_zone_stations(
    configuration: Configuration,
    zone_id: str,
    *,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> ObservationStationCollectionGeoJson:
    return await fetch(
        configuration,
        f"/zones/forecast/{encode_path_param(zone_id)}/stations",
        ObservationStationCollectionGeoJson,
        query={"limit": limit, "cursor": cursor},
    )
