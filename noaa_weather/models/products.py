"""Pydantic models for NWS text products."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel


class TextProduct(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    at_id: Optional[str] = Field(None, alias="@id")
    id: Optional[str] = None
    wmo_collective_id: Optional[str] = Field(None, description="WMO header, e.g. FXUS63")
    issuing_office: Optional[str] = None
    issuance_time: Optional[str] = None
    product_code: Optional[str] = Field(None, description="AWIPS product code, e.g. AFD")
    product_name: Optional[str] = None
    product_text: Optional[str] = None


class TextProductCollection(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    graph: List[TextProduct] = Field(..., alias="@graph")


class TextProductLocationCollection(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    locations: Dict[str, Optional[str]] = Field(..., description="Location id to name (name may be null)")


class TextProductType(NwsModel):
    product_code: str
    product_name: str


class TextProductTypeCollection(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    graph: List[TextProductType] = Field(..., alias="@graph")
