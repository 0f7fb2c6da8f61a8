"""
Alerts service.

CAP alerts from api.weather.gov: active alerts (optionally filtered by area,
zone, region, ...), the full alert archive, single alerts, counts and the
list of known event names.

Endpoints: /alerts, /alerts/active, /alerts/active/count,
/alerts/active/area/{area}, /alerts/active/region/{region},
/alerts/active/zone/{zoneId}, /alerts/{id}, /alerts/types
"""

import logging
from datetime import datetime
from typing import List, Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.alerts import (
    ActiveAlertsCountResponse,
    AlertCertainty,
    AlertCollectionGeoJson,
    AlertGeoJson,
    AlertMessageType,
    AlertSeverity,
    AlertStatus,
    AlertTypesResponse,
    AlertUrgency,
)
from noaa_weather.models.codes import AreaCode, MarineRegionCode, RegionCode, RegionType

logger = logging.getLogger(__name__)


async def get_active_alerts(
    configuration: Configuration,
    *,
    status: Optional[List[AlertStatus]] = None,
    message_type: Optional[List[AlertMessageType]] = None,
    event: Optional[List[str]] = None,
    code: Optional[List[str]] = None,
    area: Optional[List[AreaCode]] = None,
    point: Optional[str] = None,
    region: Optional[List[RegionCode]] = None,
    region_type: Optional[RegionType] = None,
    zone: Optional[List[str]] = None,
    urgency: Optional[List[AlertUrgency]] = None,
    severity: Optional[List[AlertSeverity]] = None,
    certainty: Optional[List[AlertCertainty]] = None,
    limit: Optional[int] = None,
) -> AlertCollectionGeoJson:
    """Alerts in effect now. ``point`` is ``"lat,lon"``."""
    query = {
        "status": status,
        "message_type": message_type,
        "event": event,
        "code": code,
        "area": area,
        "point": point,
        "region": region,
        "region_type": region_type,
        "zone": zone,
        "urgency": urgency,
        "severity": severity,
        "certainty": certainty,
        "limit": limit,
    }
    return await fetch(
        configuration, "/alerts/active", AlertCollectionGeoJson, query=query, send_api_key=True
    )


async def get_active_alerts_for_area(configuration: Configuration, area: AreaCode) -> AlertCollectionGeoJson:
    """Active alerts for a state/territory or marine area code."""
    return await fetch(
        configuration,
        f"/alerts/active/area/{encode_path_param(area)}",
        AlertCollectionGeoJson,
        send_api_key=True,
    )


async def get_active_alerts_count(configuration: Configuration) -> ActiveAlertsCountResponse:
    return await fetch(configuration, "/alerts/active/count", ActiveAlertsCountResponse, send_api_key=True)


async def get_active_alerts_for_region(
    configuration: Configuration, region: MarineRegionCode
) -> AlertCollectionGeoJson:
    return await fetch(
        configuration,
        f"/alerts/active/region/{encode_path_param(region)}",
        AlertCollectionGeoJson,
        send_api_key=True,
    )


async def get_active_alerts_for_zone(configuration: Configuration, zone_id: str) -> AlertCollectionGeoJson:
    return await fetch(
        configuration,
        f"/alerts/active/zone/{encode_path_param(zone_id)}",
        AlertCollectionGeoJson,
        send_api_key=True,
    )


async def get_alerts(
    configuration: Configuration,
    *,
    active: Optional[bool] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    status: Optional[List[AlertStatus]] = None,
    message_type: Optional[List[AlertMessageType]] = None,
    event: Optional[List[str]] = None,
    code: Optional[List[str]] = None,
    area: Optional[List[AreaCode]] = None,
    point: Optional[str] = None,
    region: Optional[List[RegionCode]] = None,
    region_type: Optional[RegionType] = None,
    zone: Optional[List[str]] = None,
    urgency: Optional[List[AlertUrgency]] = None,
    severity: Optional[List[AlertSeverity]] = None,
    certainty: Optional[List[AlertCertainty]] = None,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> AlertCollectionGeoJson:
    """Search the alert archive (last seven days).

    Follow ``pagination.next`` of the result, or pass its ``cursor``, for
    the next page.
    """
    query = {
        "active": active,
        "start": start,
        "end": end,
        "status": status,
        "message_type": message_type,
        "event": event,
        "code": code,
        "area": area,
        "point": point,
        "region": region,
        "region_type": region_type,
        "zone": zone,
        "urgency": urgency,
        "severity": severity,
        "certainty": certainty,
        "limit": limit,
        "cursor": cursor,
    }
    return await fetch(configuration, "/alerts", AlertCollectionGeoJson, query=query, send_api_key=True)


async def get_alert(configuration: Configuration, alert_id: str) -> AlertGeoJson:
    return await fetch(
        configuration, f"/alerts/{encode_path_param(alert_id)}", AlertGeoJson, send_api_key=True
    )


async def get_alert_types(configuration: Configuration) -> AlertTypesResponse:
    return await fetch(configuration, "/alerts/types", AlertTypesResponse, send_api_key=True)
