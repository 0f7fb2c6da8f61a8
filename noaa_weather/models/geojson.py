"""GeoJSON geometry, feature and feature-collection wrappers."""

from typing import Annotated, Any, ClassVar, FrozenSet, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import Field

from noaa_weather.models.base import NwsModel

PropertiesT = TypeVar("PropertiesT")

Position = List[float]


class PointGeometry(NwsModel):
    type: Literal["Point"]
    coordinates: Position
    bbox: Optional[List[float]] = None


class LineStringGeometry(NwsModel):
    type: Literal["LineString"]
    coordinates: List[Position]
    bbox: Optional[List[float]] = None


class PolygonGeometry(NwsModel):
    type: Literal["Polygon"]
    coordinates: List[List[Position]]
    bbox: Optional[List[float]] = None


class MultiPointGeometry(NwsModel):
    type: Literal["MultiPoint"]
    coordinates: List[Position]
    bbox: Optional[List[float]] = None


class MultiLineStringGeometry(NwsModel):
    type: Literal["MultiLineString"]
    coordinates: List[List[Position]]
    bbox: Optional[List[float]] = None


class MultiPolygonGeometry(NwsModel):
    type: Literal["MultiPolygon"]
    coordinates: List[List[List[Position]]]
    bbox: Optional[List[float]] = None


GeoJsonGeometry = Annotated[
    Union[
        PointGeometry,
        LineStringGeometry,
        PolygonGeometry,
        MultiPointGeometry,
        MultiLineStringGeometry,
        MultiPolygonGeometry,
    ],
    Field(discriminator="type"),
]

# JSON-LD ``@context``: a string, an object, or a list mixing both.
JsonLdContext = Any


class PaginationInfo(NwsModel):
    next: str = Field(..., description="URL of the next page")


class GeoJsonFeature(NwsModel, Generic[PropertiesT]):
    """A single feature. ``geometry`` is null for non-spatial entities."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"geometry"})

    context: Optional[JsonLdContext] = Field(None, alias="@context")
    id: Optional[str] = None
    type: Optional[Literal["Feature"]] = None
    geometry: Optional[GeoJsonGeometry] = None
    properties: Optional[PropertiesT] = None


class GeoJsonFeatureCollection(NwsModel, Generic[PropertiesT]):
    """Feature list wrapper; ``features`` keeps the order the API sent."""

    context: Optional[JsonLdContext] = Field(None, alias="@context")
    type: Optional[Literal["FeatureCollection"]] = None
    features: List[GeoJsonFeature[PropertiesT]]
