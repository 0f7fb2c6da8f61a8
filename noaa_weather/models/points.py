"""Pydantic models for point metadata (``/points/{lat},{lon}``)."""

from typing import Annotated, Any, ClassVar, FrozenSet, Optional, Union

from pydantic import Discriminator, Field, Tag

from noaa_weather.models.base import NwsModel
from noaa_weather.models.geojson import GeoJsonFeature
from noaa_weather.models.office_codes import NwsForecastOfficeId
from noaa_weather.models.units import QuantitativeValue


class RelativeLocation(NwsModel):
    """Nearest named place to a point."""
    city: Optional[str] = None
    state: Optional[str] = None
    distance: Optional[QuantitativeValue] = None
    bearing: Optional[QuantitativeValue] = None


RelativeLocationGeoJson = GeoJsonFeature[RelativeLocation]


class RelativeLocationJsonLd(RelativeLocation):
    geometry: Optional[str] = None


def _relative_location_form(data: Any) -> str:
    if isinstance(data, dict):
        return "feature" if "properties" in data else "flat"
    return "feature" if isinstance(data, GeoJsonFeature) else "flat"


# GeoJSON responses nest the location as a feature, JSON-LD ones inline it.
PointRelativeLocation = Annotated[
    Union[
        Annotated[RelativeLocationGeoJson, Tag("feature")],
        Annotated[RelativeLocationJsonLd, Tag("flat")],
    ],
    Discriminator(_relative_location_form),
]


class Point(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = Field(None, description="WKT geometry")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    cwa: Optional[NwsForecastOfficeId] = Field(None, description="County warning area office")
    forecast_office: Optional[str] = None
    grid_id: Optional[NwsForecastOfficeId] = Field(None, description="Office owning the forecast grid")
    grid_x: Optional[int] = None
    grid_y: Optional[int] = None
    forecast: Optional[str] = Field(None, description="Forecast URL")
    forecast_hourly: Optional[str] = Field(None, description="Hourly forecast URL")
    forecast_grid_data: Optional[str] = Field(None, description="Gridpoint URL")
    observation_stations: Optional[str] = Field(None, description="Station list URL")
    relative_location: Optional[PointRelativeLocation] = None
    forecast_zone: Optional[str] = None
    county: Optional[str] = None
    fire_weather_zone: Optional[str] = None
    time_zone: Optional[str] = None
    radar_station: Optional[str] = None


PointGeoJson = GeoJsonFeature[Point]
