"""
Pydantic models for gridpoint raw data and gridpoint forecasts.

A gridpoint carries dozens of time-series layers (temperature, dewpoint,
skyCover, ...). Only ``weather`` and ``hazards`` have their own shape; every
other layer is a ``GridpointQuantitativeValueLayer`` and is kept as an extra
field, reachable through ``Gridpoint.layers()``.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Union

from pydantic import ConfigDict, Field, ValidationError

from noaa_weather.models.base import NwsModel
from noaa_weather.models.codes import CodeEnum, enum_from_tokens
from noaa_weather.models.geojson import GeoJsonFeature
from noaa_weather.models.units import QuantitativeValue


class GridpointForecastUnits(CodeEnum):
    US = "us"
    SI = "si"


class TemperatureUnit(CodeEnum):
    F = "F"
    C = "C"


class TemperatureTrend(CodeEnum):
    RISING = "rising"
    FALLING = "falling"


WindDirection = enum_from_tokens(
    "WindDirection",
    ("N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
     "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"),
    "Sixteen-point compass direction.",
)

WeatherCoverage = enum_from_tokens(
    "WeatherCoverage",
    ("areas", "brief", "chance", "definite", "few", "frequent", "intermittent",
     "isolated", "likely", "numerous", "occasional", "patchy", "periods",
     "scattered", "slight_chance", "widespread"),
)

GridpointWeatherType = enum_from_tokens(
    "GridpointWeatherType",
    ("blowing_dust", "blowing_sand", "blowing_snow", "drizzle", "fog",
     "freezing_fog", "freezing_drizzle", "freezing_rain", "freezing_spray",
     "frost", "hail", "haze", "ice_crystals", "ice_fog", "rain", "rain_showers",
     "sleet", "smoke", "snow", "snow_showers", "thunderstorms", "volcanic_ash",
     "water_spouts"),
)

WeatherIntensity = enum_from_tokens(
    "WeatherIntensity",
    ("very_light", "light", "moderate", "heavy"),
)

WeatherAttribute = enum_from_tokens(
    "WeatherAttribute",
    ("damaging_wind", "dry_thunderstorms", "flooding", "gusty_wind",
     "heavy_rain", "large_hail", "small_hail", "tornadoes"),
)


class GridpointWeatherValue(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"coverage", "weather", "intensity"})

    coverage: Optional[WeatherCoverage] = None
    weather: Optional[GridpointWeatherType] = None
    intensity: Optional[WeatherIntensity] = None
    visibility: Optional[QuantitativeValue] = None
    attributes: Optional[List[WeatherAttribute]] = None


class GridpointWeatherEntry(NwsModel):
    valid_time: str = Field(..., description="ISO 8601 interval")
    value: List[GridpointWeatherValue]


class GridpointWeather(NwsModel):
    values: List[GridpointWeatherEntry]


class GridpointHazard(NwsModel):
    phenomenon: str = Field(..., description="VTEC phenomenon code, e.g. WS")
    significance: str = Field(..., description="VTEC significance code, e.g. A")
    event_number: Optional[int] = Field(None, alias="event_number")


class GridpointHazardEntry(NwsModel):
    valid_time: str
    value: List[GridpointHazard]


class GridpointHazards(NwsModel):
    values: List[GridpointHazardEntry]


class GridpointQuantitativeValue(NwsModel):
    valid_time: str
    value: Optional[float] = None


class GridpointQuantitativeValueLayer(NwsModel):
    uom: Optional[str] = Field(None, description="Unit of measure for every value")
    values: List[GridpointQuantitativeValue]


class Gridpoint(NwsModel):
    """Raw forecast data for one grid cell."""

    model_config = ConfigDict(extra="allow")

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = Field(None, description="WKT geometry")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    update_time: Optional[str] = None
    valid_times: Optional[str] = Field(None, description="ISO 8601 interval covered")
    elevation: Optional[QuantitativeValue] = None
    forecast_office: Optional[str] = None
    grid_id: Optional[str] = None
    grid_x: Optional[int] = None
    grid_y: Optional[int] = None
    weather: Optional[GridpointWeather] = None
    hazards: Optional[GridpointHazards] = None

    def layers(self) -> Dict[str, GridpointQuantitativeValueLayer]:
        """Every extra field that has the quantitative layer shape, by wire name."""
        found = {}
        for name, raw in (self.model_extra or {}).items():
            if not isinstance(raw, dict) or "values" not in raw:
                continue
            try:
                found[name] = GridpointQuantitativeValueLayer.model_validate(raw)
            except ValidationError:
                continue
        return found

    def layer(self, name: str) -> Optional[GridpointQuantitativeValueLayer]:
        return self.layers().get(name)


GridpointGeoJson = GeoJsonFeature[Gridpoint]


class GridpointForecastPeriod(NwsModel):
    """One period (day/night or hour) of a textual forecast."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"temperature_trend", "wind_gust"})

    number: Optional[int] = None
    name: Optional[str] = Field(None, description="e.g. Tonight, Thursday")
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_daytime: Optional[bool] = None
    temperature: Optional[Union[int, QuantitativeValue]] = None
    temperature_unit: Optional[TemperatureUnit] = None
    temperature_trend: Optional[TemperatureTrend] = None
    probability_of_precipitation: Optional[QuantitativeValue] = None
    dewpoint: Optional[QuantitativeValue] = None
    relative_humidity: Optional[QuantitativeValue] = None
    wind_speed: Optional[Union[str, QuantitativeValue]] = Field(None, description="e.g. '5 to 10 mph'")
    wind_gust: Optional[Union[str, QuantitativeValue]] = None
    wind_direction: Optional[WindDirection] = None
    icon: Optional[str] = None
    short_forecast: Optional[str] = None
    detailed_forecast: Optional[str] = None


class GridpointForecast(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry"})

    context: Optional[Any] = Field(None, alias="@context")
    geometry: Optional[str] = None
    units: Optional[GridpointForecastUnits] = None
    forecast_generator: Optional[str] = None
    generated_at: Optional[str] = None
    update_time: Optional[str] = None
    valid_times: Optional[str] = None
    elevation: Optional[QuantitativeValue] = None
    periods: Optional[List[GridpointForecastPeriod]] = None


GridpointForecastGeoJson = GeoJsonFeature[GridpointForecast]
