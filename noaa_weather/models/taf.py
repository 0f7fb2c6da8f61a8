"""
Terminal Aerodrome Forecast models.

``/stations/{id}/tafs`` lists TAFs as JSON-LD; a single TAF comes back as
IWXXM XML and is decoded by ``data_ingestion.taf_xml`` into the tree below.
The XML wrappers (``TimeInstant``, ``AirportHeliport/timeSlice``...) are
collapsed: each model keeps the values, not the GML scaffolding.
"""

from typing import Any, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel


class TafMeasure(NwsModel):
    """Numeric element with a ``uom`` attribute, e.g. ``<meanWindSpeed uom="[kn_i]">10``."""
    value: Optional[float] = None
    uom: Optional[str] = None


class TafTimePeriod(NwsModel):
    begin: Optional[str] = None
    end: Optional[str] = None


class TafAerodrome(NwsModel):
    designator: Optional[str] = None
    interpretation: Optional[str] = Field(None, description="AIXM interpretation, usually SNAPSHOT")
    location_indicator_icao: Optional[str] = Field(None, alias="locationIndicatorICAO")
    position: Optional[List[float]] = Field(None, description="Aerodrome reference point, in axis_labels order")
    srs_name: Optional[str] = None
    srs_dimension: Optional[int] = None
    axis_labels: Optional[str] = None


class TafSurfaceWind(NwsModel):
    variable_wind_direction: Optional[bool] = None
    mean_wind_direction: Optional[TafMeasure] = None
    mean_wind_speed: Optional[TafMeasure] = None
    wind_gust_speed: Optional[TafMeasure] = None


class TafCloudLayer(NwsModel):
    amount: Optional[str] = Field(None, description="WMO code-list URI, e.g. .../CloudAmountReportedAtAerodrome/BKN")
    base: Optional[TafMeasure] = None


class TafForecast(NwsModel):
    """Base forecast, or one change group when ``change_indicator`` is set."""

    change_indicator: Optional[str] = Field(None, description="BECOMING, TEMPORARY_FLUCTUATIONS, FROM, ...")
    cloud_and_visibility_ok: Optional[bool] = None
    phenomenon_time: Optional[TafTimePeriod] = None
    prevailing_visibility: Optional[TafMeasure] = None
    prevailing_visibility_operator: Optional[str] = None
    surface_wind: Optional[TafSurfaceWind] = None
    weather: List[str] = Field(default_factory=list, description="WMO code-list URIs, in document order")
    cloud_layers: List[TafCloudLayer] = Field(default_factory=list)


class TerminalAerodromeForecast(NwsModel):
    id: Optional[str] = Field(None, description="Bulletin gml:id")
    bulletin_identifier: Optional[str] = None
    taf_id: Optional[str] = None
    report_status: Optional[str] = Field(None, description="NORMAL, AMENDMENT or CORRECTION")
    permissible_usage: Optional[str] = None
    issue_time: Optional[str] = None
    aerodrome: Optional[TafAerodrome] = None
    valid_period: Optional[TafTimePeriod] = None
    base_forecast: TafForecast
    change_forecasts: List[TafForecast] = Field(default_factory=list)


class TerminalAerodromeForecastMetadata(NwsModel):
    id: str
    issue_time: Optional[str] = None
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    geometry: Optional[str] = None


class TerminalAerodromeForecastsResponse(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    graph: Optional[List[TerminalAerodromeForecastMetadata]] = Field(None, alias="@graph")
