"""
Radar service.

NEXRAD/TDWR station metadata and health, radar data servers, LDM queues,
station alarms and wind profiler data.
"""

import logging
from typing import Any, List, Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.radar import (
    RadarQueueHost,
    RadarQueuesResponse,
    RadarServer,
    RadarServersResponse,
    RadarStationAlarmsResponse,
    RadarStationFeature,
    RadarStationsResponse,
)

logger = logging.getLogger(__name__)


async def get_radar_wind_profiler(
    configuration: Configuration,
    station_id: str,
    *,
    time: Optional[str] = None,
    interval: Optional[str] = None,
) -> Any:
    """Wind profiler data. The payload has no published schema; returned as decoded JSON."""
    return await fetch(
        configuration,
        f"/radar/profilers/{encode_path_param(station_id)}",
        None,
        query={"time": time, "interval": interval},
    )


async def get_radar_data_queue(
    configuration: Configuration,
    host: RadarQueueHost,
    *,
    limit: Optional[int] = None,
    arrived: Optional[str] = None,
    created: Optional[str] = None,
    published: Optional[str] = None,
    station: Optional[str] = None,
    type: Optional[str] = None,
    feed: Optional[str] = None,
    resolution: Optional[int] = None,
) -> RadarQueuesResponse:
    query = {
        "limit": limit,
        "arrived": arrived,
        "created": created,
        "published": published,
        "station": station,
        "type": type,
        "feed": feed,
        "resolution": resolution,
    }
    return await fetch(
        configuration, f"/radar/queues/{encode_path_param(host)}", RadarQueuesResponse, query=query
    )


async def get_radar_server(
    configuration: Configuration, server_id: str, *, reporting_host: Optional[str] = None
) -> RadarServer:
    return await fetch(
        configuration,
        f"/radar/servers/{encode_path_param(server_id)}",
        RadarServer,
        query={"reportingHost": reporting_host},
    )


async def get_radar_servers(
    configuration: Configuration, *, reporting_host: Optional[str] = None
) -> RadarServersResponse:
    return await fetch(configuration, "/radar/servers", RadarServersResponse, query={"reportingHost": reporting_host})


async def get_radar_station(
    configuration: Configuration,
    station_id: str,
    *,
    reporting_host: Optional[str] = None,
    host: Optional[str] = None,
) -> RadarStationFeature:
    return await fetch(
        configuration,
        f"/radar/stations/{encode_path_param(station_id)}",
        RadarStationFeature,
        query={"reportingHost": reporting_host, "host": host},
    )


async def get_radar_station_alarms(configuration: Configuration, station_id: str) -> RadarStationAlarmsResponse:
    return await fetch(
        configuration, f"/radar/stations/{encode_path_param(station_id)}/alarms", RadarStationAlarmsResponse
    )


async def get_radar_stations(
    configuration: Configuration,
    *,
    station_type: Optional[List[str]] = None,
    reporting_host: Optional[str] = None,
    host: Optional[str] = None,
) -> RadarStationsResponse:
    """All radar stations; ``station_type`` filters, e.g. ``["WSR-88D", "TDWR"]``."""
    query = {"stationType": station_type, "reportingHost": reporting_host, "host": host}
    return await fetch(configuration, "/radar/stations", RadarStationsResponse, query=query)
