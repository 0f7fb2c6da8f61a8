"""Pydantic models for observation stations and their METAR-derived observations."""

from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.codes import CodeEnum, enum_from_tokens
from noaa_weather.models.geojson import GeoJsonFeature, GeoJsonFeatureCollection, PaginationInfo
from noaa_weather.models.units import QuantitativeValue


class MetarIntensity(CodeEnum):
    LIGHT = "light"
    HEAVY = "heavy"


MetarModifier = enum_from_tokens(
    "MetarModifier",
    ("patches", "blowing", "low_drifting", "freezing", "shallow", "partial", "showers"),
)

MetarWeather = enum_from_tokens(
    "MetarWeather",
    ("fog_mist", "dust_storm", "dust", "drizzle", "funnel_cloud", "fog", "smoke",
     "hail", "snow_pellets", "haze", "ice_crystals", "ice_pellets", "dust_whirls",
     "spray", "rain", "sand", "snow_grains", "snow", "squalls", "sand_storm",
     "thunderstorms", "unknown", "volcanic_ash"),
)


class MetarSkyCoverage(CodeEnum):
    OVC = "OVC"
    BKN = "BKN"
    SCT = "SCT"
    FEW = "FEW"
    SKC = "SKC"
    CLR = "CLR"
    VV = "VV"


class MetarPhenomenon(NwsModel):
    """A present-weather group decoded from a METAR (e.g. ``-SHRA``)."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"intensity", "modifier"})

    intensity: Optional[MetarIntensity] = None
    modifier: Optional[MetarModifier] = None
    weather: MetarWeather
    raw_string: str
    in_vicinity: Optional[bool] = None


class ObservationCloudLayer(NwsModel):
    base: QuantitativeValue
    amount: MetarSkyCoverage


class Observation(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry", "icon", "cloud_layers"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = Field(None, description="WKT geometry")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    elevation: Optional[QuantitativeValue] = None
    station: Optional[str] = Field(None, description="Station URL")
    timestamp: Optional[str] = None
    raw_message: Optional[str] = Field(None, description="Raw METAR")
    text_description: Optional[str] = None
    icon: Optional[str] = None
    present_weather: Optional[List[MetarPhenomenon]] = None
    temperature: Optional[QuantitativeValue] = None
    dewpoint: Optional[QuantitativeValue] = None
    wind_direction: Optional[QuantitativeValue] = None
    wind_speed: Optional[QuantitativeValue] = None
    wind_gust: Optional[QuantitativeValue] = None
    barometric_pressure: Optional[QuantitativeValue] = None
    sea_level_pressure: Optional[QuantitativeValue] = None
    visibility: Optional[QuantitativeValue] = None
    max_temperature_last24_hours: Optional[QuantitativeValue] = None
    min_temperature_last24_hours: Optional[QuantitativeValue] = None
    precipitation_last_hour: Optional[QuantitativeValue] = None
    precipitation_last3_hours: Optional[QuantitativeValue] = None
    precipitation_last6_hours: Optional[QuantitativeValue] = None
    relative_humidity: Optional[QuantitativeValue] = None
    wind_chill: Optional[QuantitativeValue] = None
    heat_index: Optional[QuantitativeValue] = None
    cloud_layers: Optional[List[ObservationCloudLayer]] = None


ObservationGeoJson = GeoJsonFeature[Observation]


class ObservationCollectionGeoJson(GeoJsonFeatureCollection[Observation]):
    pagination: Optional[PaginationInfo] = None


class ObservationStation(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = Field(None, description="WKT geometry")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    elevation: Optional[QuantitativeValue] = None
    station_identifier: Optional[str] = Field(None, description="ICAO or local id, e.g. KDEN")
    name: Optional[str] = None
    time_zone: Optional[str] = None
    forecast: Optional[str] = Field(None, description="Forecast zone URL")
    county: Optional[str] = Field(None, description="County zone URL")
    fire_weather_zone: Optional[str] = Field(None, description="Fire weather zone URL")


ObservationStationGeoJson = GeoJsonFeature[ObservationStation]


class ObservationStationCollectionGeoJson(GeoJsonFeatureCollection[ObservationStation]):
    observation_stations: Optional[List[str]] = Field(None, description="Station URLs, in feature order")
    pagination: Optional[PaginationInfo] = None
