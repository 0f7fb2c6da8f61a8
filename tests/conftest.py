"""
Shared fixtures for the NWS client tests.

No test touches the network: every ``Configuration`` built here uses an
``httpx.MockTransport`` that records the requests it receives.
"""

import json
from typing import Any, Callable, List

import httpx
import pytest

from noaa_weather.configuration import Configuration

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def nws_config(sent_requests):
    """Factory: ``nws_config(handler, **config_fields)`` -> ``Configuration``."""

    def factory(handler: Handler, **fields: Any) -> Configuration:
        def record(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(record), follow_redirects=True)
        return Configuration(client=client, **fields)

    return factory


@pytest.fixture
def json_reply() -> Callable[..., Handler]:
    """Handler answering every request with the same JSON body."""

    def make(body: Any, status_code: int = 200, content_type: str = "application/geo+json") -> Handler:
        payload = json.dumps(body).encode()
        return lambda request: httpx.Response(
            status_code, content=payload, headers={"content-type": content_type}
        )

    return make


@pytest.fixture
def text_reply() -> Callable[..., Handler]:
    def make(text: str, status_code: int = 200, content_type: str = "text/plain") -> Handler:
        return lambda request: httpx.Response(
            status_code, content=text.encode(), headers={"content-type": content_type}
        )

    return make


@pytest.fixture
def route_replies() -> Callable[..., Handler]:
    """Handler choosing a JSON body by URL path; unknown paths get a 404 problem."""

    def make(routes: dict) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            body = routes.get(request.url.path)
            if body is None:
                problem = {"title": "Not Found", "status": 404, "detail": request.url.path}
                return httpx.Response(404, json=problem, headers={"content-type": "application/problem+json"})
            return httpx.Response(200, json=body, headers={"content-type": "application/geo+json"})

        return handler

    return make


# ── Sample payloads (trimmed real responses) ────────────────────────────────

@pytest.fixture
def alert_feature() -> dict:
    return {
        "id": "https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.abc",
        "type": "Feature",
        "geometry": None,
        "properties": {
            "@id": "https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.abc",
            "@type": "wx:Alert",
            "id": "urn:oid:2.49.0.1.840.0.abc",
            "areaDesc": "Larimer; Boulder",
            "geocode": {"SAME": ["008069", "008013"], "UGC": ["COZ038", "COZ039"]},
            "affectedZones": ["https://api.weather.gov/zones/forecast/COZ038"],
            "references": [],
            "sent": "2024-01-15T04:12:00-07:00",
            "effective": "2024-01-15T04:12:00-07:00",
            "onset": None,
            "expires": "2024-01-15T18:00:00-07:00",
            "status": "Actual",
            "messageType": "Alert",
            "category": "Met",
            "severity": "Moderate",
            "certainty": "Likely",
            "urgency": "Expected",
            "event": "Winter Weather Advisory",
            "sender": "w-nws.webmaster@noaa.gov",
            "senderName": "NWS Boulder CO",
            "headline": "Winter Weather Advisory issued January 15",
            "description": "Snow expected.",
            "instruction": None,
            "response": "Execute",
            "parameters": {"NWSheadline": ["SNOW EXPECTED"], "VTEC": ["/O.NEW.KBOU.WW.Y.0003.240115T1100Z/"]},
        },
    }


@pytest.fixture
def point_feature() -> dict:
    return {
        "id": "https://api.weather.gov/points/39.7456,-97.0892",
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-97.0892, 39.7456]},
        "properties": {
            "@id": "https://api.weather.gov/points/39.7456,-97.0892",
            "@type": "wx:Point",
            "cwa": "TOP",
            "forecastOffice": "https://api.weather.gov/offices/TOP",
            "gridId": "TOP",
            "gridX": 32,
            "gridY": 81,
            "forecast": "https://api.weather.gov/gridpoints/TOP/32,81/forecast",
            "observationStations": "https://api.weather.gov/gridpoints/TOP/32,81/stations",
            "relativeLocation": {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-97.086661, 39.679376]},
                "properties": {
                    "city": "Linn",
                    "state": "KS",
                    "distance": {"unitCode": "wmoUnit:m", "value": 7366.97},
                    "bearing": {"unitCode": "wmoUnit:degree_(angle)", "value": 358},
                },
            },
            "timeZone": "America/Chicago",
            "radarStation": "KTWX",
        },
    }


@pytest.fixture
def station_collection() -> dict:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "id": "https://api.weather.gov/stations/KMYZ",
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-96.63, 39.85]},
                "properties": {
                    "@id": "https://api.weather.gov/stations/KMYZ",
                    "@type": "wx:ObservationStation",
                    "elevation": {"unitCode": "wmoUnit:m", "value": 392.88},
                    "stationIdentifier": "KMYZ",
                    "name": "Marysville Municipal Airport",
                    "timeZone": "America/Chicago",
                },
            },
            {
                "id": "https://api.weather.gov/stations/KCNK",
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [-97.65, 39.55]},
                "properties": {"stationIdentifier": "KCNK", "name": "Concordia, Blosser Municipal Airport"},
            },
        ],
        "observationStations": [
            "https://api.weather.gov/stations/KMYZ",
            "https://api.weather.gov/stations/KCNK",
        ],
    }


@pytest.fixture
def observation_feature() -> dict:
    return {
        "id": "https://api.weather.gov/stations/KMYZ/observations/2024-01-15T12:15:00+00:00",
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-96.63, 39.85]},
        "properties": {
            "@id": "https://api.weather.gov/stations/KMYZ/observations/2024-01-15T12:15:00+00:00",
            "station": "https://api.weather.gov/stations/KMYZ",
            "timestamp": "2024-01-15T12:15:00+00:00",
            "rawMessage": "KMYZ 151215Z AUTO 34012KT 10SM -SN OVC030 M14/M18 A3041",
            "textDescription": "Light Snow",
            "icon": None,
            "presentWeather": [
                {"intensity": "light", "modifier": None, "weather": "snow", "rawString": "-SN"}
            ],
            "temperature": {"unitCode": "wmoUnit:degC", "value": -14, "qualityControl": "V"},
            "windSpeed": {"unitCode": "wmoUnit:km_h-1", "value": None, "qualityControl": "Z"},
            "cloudLayers": [{"base": {"unitCode": "wmoUnit:m", "value": 910}, "amount": "OVC"}],
        },
    }
