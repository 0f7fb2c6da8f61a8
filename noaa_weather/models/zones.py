"""Pydantic models for UGC zones and zone (text) forecasts."""

from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.codes import NwsZoneType, ZoneState
from noaa_weather.models.geojson import GeoJsonFeature, GeoJsonFeatureCollection, PaginationInfo
from noaa_weather.models.office_codes import NwsForecastOfficeId


class Zone(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry", "radar_station"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = Field(None, description="WKT geometry")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    id: Optional[str] = Field(None, description="UGC identifier, e.g. COZ039")
    type: Optional[NwsZoneType] = None
    name: Optional[str] = None
    effective_date: Optional[str] = None
    expiration_date: Optional[str] = None
    state: Optional[ZoneState] = None
    forecast_office: Optional[str] = None
    grid_identifier: Optional[str] = None
    awips_location_identifier: Optional[str] = None
    cwa: Optional[List[NwsForecastOfficeId]] = None
    forecast_offices: Optional[List[str]] = None
    time_zone: Optional[List[str]] = None
    observation_stations: Optional[List[str]] = None
    radar_station: Optional[str] = None


ZoneGeoJson = GeoJsonFeature[Zone]


class ZoneCollectionGeoJson(GeoJsonFeatureCollection[Zone]):
    pagination: Optional[PaginationInfo] = None


class ZoneForecastPeriod(NwsModel):
    number: int
    name: str = Field(..., description="e.g. Tonight")
    detailed_forecast: str


class ZoneForecast(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = None
    zone: Optional[str] = Field(None, description="Zone URL")
    updated: Optional[str] = None
    periods: Optional[List[ZoneForecastPeriod]] = None


ZoneForecastGeoJson = GeoJsonFeature[ZoneForecast]
