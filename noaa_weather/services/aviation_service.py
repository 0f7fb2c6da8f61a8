"""
Aviation service.

Center Weather Advisories (CWAs) issued by the CWSUs at each ARTCC, CWSU
office metadata, and SIGMETs from api.weather.gov.
"""

import logging
from datetime import date, datetime
from typing import Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.aviation import (
    CenterWeatherAdvisoryCollectionGeoJson,
    CenterWeatherAdvisoryGeoJson,
    CenterWeatherServiceUnitOffice,
    SigmetCollectionGeoJson,
    SigmetGeoJson,
)
from noaa_weather.models.office_codes import NwsCenterWeatherServiceUnitId

logger = logging.getLogger(__name__)


def _cwsu_path(cwsu: NwsCenterWeatherServiceUnitId) -> str:
    return f"/aviation/cwsus/{encode_path_param(cwsu)}"


async def get_center_weather_advisory(
    configuration: Configuration,
    cwsu: NwsCenterWeatherServiceUnitId,
    date: date,
    sequence: int,
) -> CenterWeatherAdvisoryGeoJson:
    """One CWA, identified by issuing unit, issue date and sequence (>= 100)."""
    path = f"{_cwsu_path(cwsu)}/cwas/{encode_path_param(date)}/{encode_path_param(sequence)}"
    return await fetch(configuration, path, CenterWeatherAdvisoryGeoJson, send_api_key=True)


async def get_center_weather_advisories(
    configuration: Configuration, cwsu: NwsCenterWeatherServiceUnitId
) -> CenterWeatherAdvisoryCollectionGeoJson:
    return await fetch(
        configuration, f"{_cwsu_path(cwsu)}/cwas", CenterWeatherAdvisoryCollectionGeoJson, send_api_key=True
    )


async def get_center_weather_service_unit(
    configuration: Configuration, cwsu: NwsCenterWeatherServiceUnitId
) -> CenterWeatherServiceUnitOffice:
    return await fetch(configuration, _cwsu_path(cwsu), CenterWeatherServiceUnitOffice, send_api_key=True)


async def get_sigmet(configuration: Configuration, atsu: str, date: date, time: str) -> SigmetGeoJson:
    """A single SIGMET. ``time`` is the issuance time as HHMM."""
    path = (
        f"/aviation/sigmets/{encode_path_param(atsu)}"
        f"/{encode_path_param(date)}/{encode_path_param(time)}"
    )
    return await fetch(configuration, path, SigmetGeoJson, send_api_key=True)


async def get_sigmets(
    configuration: Configuration,
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    date: Optional[date] = None,
    atsu: Optional[str] = None,
    sequence: Optional[str] = None,
) -> SigmetCollectionGeoJson:
    query = {"start": start, "end": end, "date": date, "atsu": atsu, "sequence": sequence}
    return await fetch(configuration, "/aviation/sigmets", SigmetCollectionGeoJson, query=query, send_api_key=True)


async def get_sigmets_by_air_traffic_service_unit(
    configuration: Configuration, atsu: str
) -> SigmetCollectionGeoJson:
    return await fetch(
        configuration, f"/aviation/sigmets/{encode_path_param(atsu)}", SigmetCollectionGeoJson, send_api_key=True
    )


async def get_sigmets_by_air_traffic_service_unit_and_date(
    configuration: Configuration, atsu: str, date: date
) -> SigmetCollectionGeoJson:
    path = f"/aviation/sigmets/{encode_path_param(atsu)}/{encode_path_param(date)}"
    return await fetch(configuration, path, SigmetCollectionGeoJson, send_api_key=True)
