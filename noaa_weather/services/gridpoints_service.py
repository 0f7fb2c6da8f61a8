"""
Gridpoint service.

Raw forecast layers, textual forecasts (12 h periods and hourly) and the
observation stations usable for a 2.5 km grid cell. A grid cell is named by
its forecast office and x/y index, as returned by ``/points``.
"""

import logging
from typing import List, Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.gridpoints import GridpointForecastGeoJson, GridpointForecastUnits, GridpointGeoJson
from noaa_weather.models.observations import ObservationStationCollectionGeoJson
from noaa_weather.models.office_codes import NwsForecastOfficeId

logger = logging.getLogger(__name__)


def _gridpoint_path(office: NwsForecastOfficeId, x: int, y: int) -> str:
    return f"/gridpoints/{encode_path_param(office)}/{int(x)},{int(y)}"


async def get_gridpoint(configuration: Configuration, office: NwsForecastOfficeId, x: int, y: int) -> GridpointGeoJson:
    return await fetch(configuration, _gridpoint_path(office, x, y), GridpointGeoJson, send_api_key=True)


async def get_gridpoint_forecast(
    configuration: Configuration,
    office: NwsForecastOfficeId,
    x: int,
    y: int,
    *,
    feature_flags: Optional[List[str]] = None,
    units: Optional[GridpointForecastUnits] = None,
) -> GridpointForecastGeoJson:
    """Day/night periods for the next seven days.

    ``feature_flags`` go out in the ``Feature-Flags`` header (e.g.
    ``forecast_temperature_qv`` returns temperatures as quantitative values).
    """
    return await fetch(
        configuration,
        f"{_gridpoint_path(office, x, y)}/forecast",
        GridpointForecastGeoJson,
        query={"units": units},
        headers={"Feature-Flags": feature_flags},
        send_api_key=True,
    )


async def get_gridpoint_forecast_hourly(
    configuration: Configuration,
    office: NwsForecastOfficeId,
    x: int,
    y: int,
    *,
    feature_flags: Optional[List[str]] = None,
    units: Optional[GridpointForecastUnits] = None,
) -> GridpointForecastGeoJson:
    return await fetch(
        configuration,
        f"{_gridpoint_path(office, x, y)}/forecast/hourly",
        GridpointForecastGeoJson,
        query={"units": units},
        headers={"Feature-Flags": feature_flags},
        send_api_key=True,
    )


async def get_gridpoint_stations(
    configuration: Configuration,
    office: NwsForecastOfficeId,
    x: int,
    y: int,
    *,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> ObservationStationCollectionGeoJson:
    return await fetch(
        configuration,
        f"{_gridpoint_path(office, x, y)}/stations",
        ObservationStationCollectionGeoJson,
        query={"limit": limit, "cursor": cursor},
        send_api_key=True,
    )
