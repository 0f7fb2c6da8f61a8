"""Pydantic models for NWS CAP alerts."""

from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.codes import CodeEnum
from noaa_weather.models.geojson import GeoJsonFeature, GeoJsonFeatureCollection, PaginationInfo


class AlertStatus(CodeEnum):
    ACTUAL = "Actual"
    EXERCISE = "Exercise"
    SYSTEM = "System"
    TEST = "Test"
    DRAFT = "Draft"


class AlertMessageType(CodeEnum):
    ALERT = "Alert"
    UPDATE = "Update"
    CANCEL = "Cancel"
    ACK = "Ack"
    ERROR = "Error"


class AlertSeverity(CodeEnum):
    EXTREME = "Extreme"
    SEVERE = "Severe"
    MODERATE = "Moderate"
    MINOR = "Minor"
    UNKNOWN = "Unknown"


class AlertUrgency(CodeEnum):
    IMMEDIATE = "Immediate"
    EXPECTED = "Expected"
    FUTURE = "Future"
    PAST = "Past"
    UNKNOWN = "Unknown"


class AlertCertainty(CodeEnum):
    OBSERVED = "Observed"
    LIKELY = "Likely"
    POSSIBLE = "Possible"
    UNLIKELY = "Unlikely"
    UNKNOWN = "Unknown"


class AlertCategory(CodeEnum):
    """CAP event category."""
    MET = "Met"
    GEO = "Geo"
    SAFETY = "Safety"
    SECURITY = "Security"
    RESCUE = "Rescue"
    FIRE = "Fire"
    HEALTH = "Health"
    ENV = "Env"
    TRANSPORT = "Transport"
    INFRA = "Infra"
    CBRNE = "CBRNE"
    OTHER = "Other"


class AlertResponse(CodeEnum):
    """CAP recommended response type."""
    SHELTER = "Shelter"
    EVACUATE = "Evacuate"
    PREPARE = "Prepare"
    EXECUTE = "Execute"
    AVOID = "Avoid"
    MONITOR = "Monitor"
    ASSESS = "Assess"
    ALL_CLEAR = "AllClear"
    NONE = "None"


class AlertGeocode(NwsModel):
    ugc: Optional[List[str]] = Field(None, alias="UGC", description="NWS public zone or county identifiers")
    same: Optional[List[str]] = Field(None, alias="SAME", description="SAME (FIPS) codes")


class AlertReference(NwsModel):
    """An earlier alert this one updates or cancels."""
    at_id: Optional[str] = Field(None, alias="@id")
    identifier: Optional[str] = None
    sender: Optional[str] = None
    sent: Optional[str] = None


class Alert(NwsModel):
    """Properties of one CAP alert.

    ``onset``, ``ends``, ``headline`` and ``instruction`` are sent as
    explicit nulls by the API; use ``field_state`` to tell that apart from
    a missing key.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"onset", "ends", "headline", "instruction"})

    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    id: Optional[str] = Field(None, description="Alert identifier (URN)")
    area_desc: Optional[str] = Field(None, description="Affected area, human readable")
    geocode: Optional[AlertGeocode] = None
    affected_zones: Optional[List[str]] = Field(None, description="Zone URLs")
    references: Optional[List[AlertReference]] = None
    sent: Optional[str] = None
    effective: Optional[str] = None
    onset: Optional[str] = None
    expires: Optional[str] = None
    ends: Optional[str] = None
    status: Optional[AlertStatus] = None
    message_type: Optional[AlertMessageType] = None
    category: Optional[AlertCategory] = None
    severity: Optional[AlertSeverity] = None
    certainty: Optional[AlertCertainty] = None
    urgency: Optional[AlertUrgency] = None
    event: Optional[str] = Field(None, description="Event name, e.g. Tornado Warning")
    sender: Optional[str] = None
    sender_name: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    instruction: Optional[str] = None
    response: Optional[AlertResponse] = None
    parameters: Optional[Dict[str, List[Any]]] = Field(None, description="System-specific extra parameters")


AlertGeoJson = GeoJsonFeature[Alert]


class AlertCollectionGeoJson(GeoJsonFeatureCollection[Alert]):
    title: Optional[str] = None
    updated: Optional[str] = None
    pagination: Optional[PaginationInfo] = None


class ActiveAlertsCountResponse(NwsModel):
    total: Optional[int] = Field(None, description="Total active alerts")
    land: Optional[int] = Field(None, description="Active alerts over land")
    marine: Optional[int] = Field(None, description="Active alerts over water")
    regions: Optional[Dict[str, int]] = Field(None, description="Counts by marine region")
    areas: Optional[Dict[str, int]] = Field(None, description="Counts by state/marine area")
    zones: Optional[Dict[str, int]] = Field(None, description="Counts by zone or county")


class AlertTypesResponse(NwsModel):
    event_types: Optional[List[str]] = Field(None, description="Every recognised alert event name")
