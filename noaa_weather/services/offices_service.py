"""Forecast office metadata and the headlines each office publishes."""

import logging

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.office_codes import NwsOfficeId
from noaa_weather.models.offices import Office, OfficeHeadline, OfficeHeadlineCollection

logger = logging.getLogger(__name__)


async def get_forecast_office(configuration: Configuration, office_id: NwsOfficeId) -> Office:
    return await fetch(configuration, f"/offices/{encode_path_param(office_id)}", Office)


async def get_forecast_office_headline(
    configuration: Configuration, office_id: NwsOfficeId, headline_id: str
) -> OfficeHeadline:
    path = f"/offices/{encode_path_param(office_id)}/headlines/{encode_path_param(headline_id)}"
    return await fetch(configuration, path, OfficeHeadline)


async def get_forecast_office_headlines(
    configuration: Configuration, office_id: NwsOfficeId
) -> OfficeHeadlineCollection:
    return await fetch(configuration, f"/offices/{encode_path_param(office_id)}/headlines", OfficeHeadlineCollection)
