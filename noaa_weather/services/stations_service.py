"""
Observation stations service.

Station metadata, METAR-derived observations and terminal aerodrome
forecasts. ``get_city_weather`` chains the points, gridpoints and stations
endpoints to answer "what is it like at this coordinate right now".

TAF documents are IWXXM XML, not JSON; ``get_taf`` hands them to
``data_ingestion.taf_xml`` so callers still get a typed model.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.data_ingestion.taf_xml import parse_taf
from noaa_weather.errors import NwsDeserializationError
from noaa_weather.models.codes import AreaCode
from noaa_weather.models.observations import (
    ObservationCollectionGeoJson,
    ObservationGeoJson,
    ObservationStationCollectionGeoJson,
    ObservationStationGeoJson,
)
from noaa_weather.models.taf import TerminalAerodromeForecast, TerminalAerodromeForecastsResponse
from noaa_weather.services.gridpoints_service import get_gridpoint_stations
from noaa_weather.services.points_service import format_point, get_point

logger = logging.getLogger(__name__)


def _station_path(station_id: str) -> str:
    return f"/stations/{encode_path_param(station_id)}"


async def get_station(configuration: Configuration, station_id: str) -> ObservationStationGeoJson:
    return await fetch(configuration, _station_path(station_id), ObservationStationGeoJson, send_api_key=True)


async def get_stations(
    configuration: Configuration,
    *,
    station_id: Optional[List[str]] = None,
    state: Optional[List[AreaCode]] = None,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> ObservationStationCollectionGeoJson:
    query = {"id": station_id, "state": state, "limit": limit, "cursor": cursor}
    return await fetch(
        configuration, "/stations", ObservationStationCollectionGeoJson, query=query, send_api_key=True
    )


async def get_latest_observation(
    configuration: Configuration, station_id: str, *, require_qc: Optional[bool] = None
) -> ObservationGeoJson:
    return await fetch(
        configuration,
        f"{_station_path(station_id)}/observations/latest",
        ObservationGeoJson,
        query={"require_qc": require_qc},
        send_api_key=True,
    )


async def get_observations(
    configuration: Configuration,
    station_id: str,
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> ObservationCollectionGeoJson:
    return await fetch(
        configuration,
        f"{_station_path(station_id)}/observations",
        ObservationCollectionGeoJson,
        query={"start": start, "end": end, "limit": limit},
        send_api_key=True,
    )


async def get_observation(configuration: Configuration, station_id: str, time: str) -> ObservationGeoJson:
    """The observation at ``time`` (ISO 8601, as listed by ``get_observations``)."""
    return await fetch(
        configuration,
        f"{_station_path(station_id)}/observations/{encode_path_param(time)}",
        ObservationGeoJson,
        send_api_key=True,
    )


async def get_taf(configuration: Configuration, station_id: str, date: date, time: str) -> TerminalAerodromeForecast:
    """One TAF, by issue date and ``time`` (HHMM)."""
    path = f"{_station_path(station_id)}/tafs/{encode_path_param(date)}/{encode_path_param(time)}"
    return await fetch(configuration, path, TerminalAerodromeForecast, xml_decoder=parse_taf, send_api_key=True)


async def get_tafs(configuration: Configuration, station_id: str) -> TerminalAerodromeForecastsResponse:
    return await fetch(
        configuration, f"{_station_path(station_id)}/tafs", TerminalAerodromeForecastsResponse, send_api_key=True
    )


async def get_city_weather(configuration: Configuration, latitude: float, longitude: float) -> ObservationGeoJson:
    """Latest observation from the station nearest to a coordinate.

    Three requests: point metadata, the stations of the point's forecast
    grid cell (nearest first), then that station's latest observation.
    """
    point = format_point(latitude, longitude)
    props = (await get_point(configuration, point)).properties
    if props is None or props.grid_id is None or props.grid_x is None or props.grid_y is None:
        raise NwsDeserializationError(f"No forecast grid cell for {point}", target="PointGeoJson")

    stations = await get_gridpoint_stations(configuration, props.grid_id, props.grid_x, props.grid_y)

    station_id = next(
        (
            f.properties.station_identifier
            for f in stations.features
            if f.properties is not None and f.properties.station_identifier
        ),
        None,
    )
    if station_id is None:
        raise NwsDeserializationError(
            f"No observation station listed for {point}", target="ObservationStationCollectionGeoJson"
        )

    logger.debug("Nearest station to %s is %s", point, station_id)
    return await get_latest_observation(configuration, station_id)
