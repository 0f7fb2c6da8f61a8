"""
Decode IWXXM TAF bulletins returned by ``/stations/{id}/tafs/{date}/{time}``.

The document mixes several namespaces (WMO collect, IWXXM, GML, AIXM, xlink)
whose prefixes and versions change between feeds, so elements and attributes
are matched on their local name only.
"""

from typing import Any, Dict, Iterator, List, Optional
from xml.etree import ElementTree

from pydantic import ValidationError

from noaa_weather.errors import NwsXmlError
from noaa_weather.models.taf import TerminalAerodromeForecast

_TARGET = "TerminalAerodromeForecast"


def _local(name: str) -> str:
    return name.rsplit("}", 1)[-1]


def _children(el: ElementTree.Element, tag: str) -> Iterator[ElementTree.Element]:
    for child in el:
        if _local(child.tag) == tag:
            yield child


def _child(el: Optional[ElementTree.Element], *path: str) -> Optional[ElementTree.Element]:
    """Walk ``path`` one local name at a time; None as soon as a step is missing."""
    for tag in path:
        if el is None:
            return None
        el = next(_children(el, tag), None)
    return el


def _attr(el: Optional[ElementTree.Element], name: str) -> Optional[str]:
    if el is None:
        return None
    for key, value in el.attrib.items():
        if _local(key) == name:
            return value
    return None


def _text(el: Optional[ElementTree.Element], *path: str) -> Optional[str]:
    """Stripped text of the element at ``path``, None when missing or empty."""
    node = _child(el, *path)
    if node is None or not node.text:
        return None
    return node.text.strip() or None


def _measure(el: Optional[ElementTree.Element]) -> Optional[Dict[str, Any]]:
    if el is None:
        return None
    return {"value": _text(el), "uom": _attr(el, "uom")}


def _time_period(el: Optional[ElementTree.Element]) -> Optional[Dict[str, Any]]:
    period = _child(el, "TimePeriod")
    if period is None:
        return None
    return {"begin": _text(period, "beginPosition"), "end": _text(period, "endPosition")}


def _parse_aerodrome(el: Optional[ElementTree.Element]) -> Optional[Dict[str, Any]]:
    slice_ = _child(el, "AirportHeliport", "timeSlice", "AirportHeliportTimeSlice")
    if slice_ is None:
        return None
    point = _child(slice_, "ARP", "ElevatedPoint")
    pos = _text(point, "pos")
    return {
        "designator": _text(slice_, "designator"),
        "interpretation": _text(slice_, "interpretation"),
        "location_indicator_icao": _text(slice_, "locationIndicatorICAO"),
        "position": pos.split() if pos else None,
        "srs_name": _attr(point, "srsName"),
        "srs_dimension": _attr(point, "srsDimension"),
        "axis_labels": _attr(point, "axisLabels"),
    }


def _parse_surface_wind(el: Optional[ElementTree.Element]) -> Optional[Dict[str, Any]]:
    wind = _child(el, "AerodromeSurfaceWindForecast")
    if wind is None:
        return None
    return {
        "variable_wind_direction": _attr(wind, "variableWindDirection"),
        "mean_wind_direction": _measure(_child(wind, "meanWindDirection")),
        "mean_wind_speed": _measure(_child(wind, "meanWindSpeed")),
        "wind_gust_speed": _measure(_child(wind, "windGustSpeed")),
    }


def _parse_cloud_layers(el: Optional[ElementTree.Element]) -> List[Dict[str, Any]]:
    cloud = _child(el, "AerodromeCloudForecast")
    if cloud is None:
        return []
    layers = []
    for layer in _children(cloud, "layer"):
        cloud_layer = _child(layer, "CloudLayer")
        if cloud_layer is None:
            continue
        layers.append({
            "amount": _attr(_child(cloud_layer, "amount"), "href"),
            "base": _measure(_child(cloud_layer, "base")),
        })
    return layers


def _parse_forecast(wrapper: ElementTree.Element) -> Dict[str, Any]:
    forecast = _child(wrapper, "MeteorologicalAerodromeForecast")
    if forecast is None:
        raise NwsXmlError(
            f"<{_local(wrapper.tag)}> has no MeteorologicalAerodromeForecast", target=_TARGET
        )
    return {
        "change_indicator": _attr(forecast, "changeIndicator"),
        "cloud_and_visibility_ok": _attr(forecast, "cloudAndVisibilityOK"),
        "phenomenon_time": _time_period(_child(forecast, "phenomenonTime")),
        "prevailing_visibility": _measure(_child(forecast, "prevailingVisibility")),
        "prevailing_visibility_operator": _text(forecast, "prevailingVisibilityOperator"),
        "surface_wind": _parse_surface_wind(_child(forecast, "surfaceWind")),
        "weather": [
            href for href in (_attr(w, "href") for w in _children(forecast, "weather")) if href
        ],
        "cloud_layers": _parse_cloud_layers(_child(forecast, "cloud")),
    }


def _find_taf(root: ElementTree.Element) -> Optional[ElementTree.Element]:
    if _local(root.tag) == "TAF":
        return root
    return next((el for el in root.iter() if _local(el.tag) == "TAF"), None)


def parse_taf(content: str) -> TerminalAerodromeForecast:
    """Parse one IWXXM TAF document (bare ``TAF`` or wrapped in a bulletin).

    Raises ``NwsXmlError`` for malformed XML, a missing ``TAF`` or base
    forecast, or values that do not fit the model.
    """
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        raise NwsXmlError(str(exc), target=_TARGET) from exc

    taf = _find_taf(root)
    if taf is None:
        raise NwsXmlError("document contains no TAF element", target=_TARGET)
    base = _child(taf, "baseForecast")
    if base is None:
        raise NwsXmlError("TAF has no baseForecast", target=_TARGET)

    data = {
        "id": _attr(root, "id") if root is not taf else None,
        "bulletin_identifier": _text(root, "bulletinIdentifier"),
        "taf_id": _attr(taf, "id"),
        "report_status": _attr(taf, "reportStatus"),
        "permissible_usage": _attr(taf, "permissibleUsage"),
        "issue_time": _text(taf, "issueTime", "TimeInstant", "timePosition"),
        "aerodrome": _parse_aerodrome(_child(taf, "aerodrome")),
        "valid_period": _time_period(_child(taf, "validPeriod")),
        "base_forecast": _parse_forecast(base),
        "change_forecasts": [_parse_forecast(c) for c in _children(taf, "changeForecast")],
    }
    try:
        return TerminalAerodromeForecast.model_validate(data)
    except ValidationError as exc:
        raise NwsXmlError(str(exc), target=_TARGET) from exc
