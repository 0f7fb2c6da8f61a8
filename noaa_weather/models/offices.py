"""Pydantic models for forecast offices and office headlines."""

from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel


class OfficeAddress(NwsModel):
    at_type: Optional[str] = Field(None, alias="@type")
    street_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None


class Office(NwsModel):
    """A forecast office (also returned for CWSU lookups in JSON-LD form)."""
    context: Optional[Any] = Field(None, alias="@context")
    at_type: Optional[str] = Field(None, alias="@type")
    at_id: Optional[str] = Field(None, alias="@id")
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[OfficeAddress] = None
    telephone: Optional[str] = None
    fax_number: Optional[str] = None
    email: Optional[str] = None
    same_as: Optional[str] = None
    nws_region: Optional[str] = None
    parent_organization: Optional[str] = None
    responsible_counties: Optional[List[str]] = None
    responsible_forecast_zones: Optional[List[str]] = None
    responsible_fire_zones: Optional[List[str]] = None
    approved_observation_stations: Optional[List[str]] = None


class OfficeHeadline(NwsModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"summary"})

    context: Optional[Any] = Field(None, alias="@context")
    at_id: Optional[str] = Field(None, alias="@id")
    id: Optional[str] = None
    office: Optional[str] = Field(None, description="Office URL")
    important: Optional[bool] = None
    issuance_time: Optional[str] = None
    link: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    content: Optional[str] = None


class OfficeHeadlineCollection(NwsModel):
    context: Any = Field(..., alias="@context")
    graph: List[OfficeHeadline] = Field(..., alias="@graph")
