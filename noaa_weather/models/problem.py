"""Error bodies returned with 4xx/5xx responses."""

import json
from typing import Any, Optional, Union

from pydantic import ConfigDict, Field, RootModel, ValidationError

from noaa_weather.models.base import NwsModel


class ProblemDetail(NwsModel):
    """RFC 7807 problem detail, as sent by api.weather.gov."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "correlationId": "4b4fd4c3",
                "title": "Not Found",
                "type": "https://api.weather.gov/problems/NotFound",
                "status": 404,
                "detail": "The requested resource was not found",
                "instance": "https://api.weather.gov/requests/4b4fd4c3",
            }
        },
    )

    type: Optional[str] = Field(None, description="URI identifying the problem type")
    title: Optional[str] = Field(None, description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Explanation specific to this occurrence")
    instance: Optional[str] = Field(None, description="URI identifying this occurrence")
    correlation_id: Optional[str] = Field(None, description="Request id for NWS support")


class RawErrorBody(RootModel[Any]):
    """Any other JSON error body, kept as-is."""
    pass


EndpointError = Union[ProblemDetail, RawErrorBody]


def parse_endpoint_error(content: str) -> Optional[EndpointError]:
    """Parse an error body: problem detail first, then any JSON, else ``None``."""
    try:
        payload = json.loads(content)
    except ValueError:
        return None
    try:
        return ProblemDetail.model_validate(payload)
    except ValidationError:
        return RawErrorBody(payload)
