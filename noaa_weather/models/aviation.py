"""Pydantic models for CWSU advisories and SIGMETs."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.geojson import GeoJsonFeature, GeoJsonFeatureCollection
from noaa_weather.models.office_codes import NwsCenterWeatherServiceUnitId


class CenterWeatherAdvisory(NwsModel):
    id: Optional[str] = None
    issue_time: Optional[str] = Field(None, description="Issuance time (UTC)")
    cwsu: Optional[NwsCenterWeatherServiceUnitId] = Field(None, description="Issuing CWSU")
    sequence: Optional[int] = Field(None, description="Advisory sequence number")
    start: Optional[str] = Field(None, description="Valid from (UTC)")
    end: Optional[str] = Field(None, description="Valid until (UTC)")
    observed_property: Optional[str] = Field(None, description="Hazard type")
    text: Optional[str] = Field(None, description="Raw advisory text")


CenterWeatherAdvisoryGeoJson = GeoJsonFeature[CenterWeatherAdvisory]
CenterWeatherAdvisoryCollectionGeoJson = GeoJsonFeatureCollection[CenterWeatherAdvisory]


class CenterWeatherServiceUnitOffice(NwsModel):
    """Contact metadata for a CWSU."""
    id: Optional[str] = None
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    email: Optional[str] = None
    fax: Optional[str] = None
    phone_number: Optional[str] = None
    url: Optional[str] = None
    nws_region: Optional[str] = None


class Sigmet(NwsModel):
    """SIGMET properties. ``fir``, ``sequence`` and ``phenomenon`` may be null."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"fir", "sequence", "phenomenon"})

    id: Optional[str] = None
    issue_time: Optional[str] = Field(None, description="Issuance time (UTC)")
    fir: Optional[str] = Field(None, description="Flight information region")
    atsu: Optional[str] = Field(None, description="Air traffic service unit")
    sequence: Optional[str] = Field(None, description="Series designator and number")
    phenomenon: Optional[str] = Field(None, description="Hazard, e.g. TS or TURB")
    start: Optional[str] = Field(None, description="Valid from (UTC)")
    end: Optional[str] = Field(None, description="Valid until (UTC)")


SigmetGeoJson = GeoJsonFeature[Sigmet]
SigmetCollectionGeoJson = GeoJsonFeatureCollection[Sigmet]
