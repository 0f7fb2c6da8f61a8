"""Tests for the shared request pipeline."""

import httpx
import pytest

from noaa_weather.configuration import ApiKey, Configuration, DEFAULT_USER_AGENT
from noaa_weather.data_ingestion.nws_http import (
    ContentType,
    build_query,
    classify_content_type,
    encode_path_param,
    fetch,
)
from noaa_weather.errors import (
    NwsDeserializationError,
    NwsResponseError,
    NwsTransportError,
    NwsUnexpectedContentTypeError,
    NwsXmlError,
)
from noaa_weather.models.alerts import ActiveAlertsCountResponse, AlertCollectionGeoJson, AlertSeverity
from noaa_weather.models.codes import StateTerritoryCode
from noaa_weather.models.points import PointGeoJson
from noaa_weather.models.problem import ProblemDetail, RawErrorBody
from noaa_weather.services.alerts_service import get_active_alerts
from noaa_weather.services.points_service import get_point


class TestContentTypeClassification:
    @pytest.mark.parametrize(
        "content_type,expected",
        [
            ("application/json", ContentType.JSON),
            ("application/geo+json", ContentType.JSON),
            ("application/ld+json; charset=utf-8", ContentType.JSON),
            ("application/problem+json", ContentType.JSON),
            ("text/plain; charset=utf-8", ContentType.TEXT),
            ("application/xml", ContentType.XML),
            ("application/vnd.wmo.iwxxm+xml", ContentType.XML),
            ("text/html", ContentType.UNSUPPORTED),
            ("text/xml", ContentType.UNSUPPORTED),
            (None, ContentType.UNSUPPORTED),
        ],
    )
    def test_classify(self, content_type, expected) -> None:
        assert classify_content_type(content_type) is expected


class TestRequestBuilding:
    def test_path_param_encodes_reserved(self) -> None:
        assert encode_path_param("39.74,-97.08") == "39.74%2C-97.08"
        assert encode_path_param("a b/c") == "a%20b%2Fc"
        assert encode_path_param(StateTerritoryCode.CO) == "CO"

    def test_query_skips_unset_and_joins_lists(self) -> None:
        query = build_query(
            {
                "area": [StateTerritoryCode.CO, StateTerritoryCode.WY],
                "zone": [],
                "limit": 10,
                "active": True,
                "point": None,
            }
        )
        assert query == [("area", "CO,WY"), ("limit", "10"), ("active", "true")]

    @pytest.mark.asyncio
    async def test_list_query_single_occurrence(self, nws_config, json_reply, sent_requests) -> None:
        config = nws_config(json_reply({"type": "FeatureCollection", "features": []}))

        await get_active_alerts(config, zone=["COZ038", "COZ039", "COZ040"])

        params = sent_requests[0].url.params
        assert params.get_list("zone") == ["COZ038,COZ039,COZ040"]

    @pytest.mark.asyncio
    async def test_point_is_percent_encoded_in_path(self, nws_config, json_reply, sent_requests, point_feature) -> None:
        config = nws_config(json_reply(point_feature))

        await get_point(config, "39.74,-97.08")

        assert sent_requests[0].url.raw_path == b"/points/39.74%2C-97.08"

    @pytest.mark.asyncio
    async def test_base_url_trailing_slash(self, nws_config, json_reply, sent_requests) -> None:
        config = nws_config(json_reply({"total": 1}), base_url="http://localhost:8080/nws/")

        await fetch(config, "/alerts/active/count", ActiveAlertsCountResponse)

        assert str(sent_requests[0].url) == "http://localhost:8080/nws/alerts/active/count"


class TestHeaders:
    @pytest.mark.asyncio
    async def test_default_user_agent(self, nws_config, json_reply, sent_requests) -> None:
        config = nws_config(json_reply({"total": 0}))

        await fetch(config, "/alerts/active/count", ActiveAlertsCountResponse)

        assert sent_requests[0].headers.get_list("user-agent") == [DEFAULT_USER_AGENT]

    @pytest.mark.asyncio
    async def test_api_key_sent_as_extra_user_agent(self, nws_config, json_reply, sent_requests) -> None:
        config = nws_config(
            json_reply({"total": 0}),
            user_agent="(myapp, ops@example.com)",
            api_key=ApiKey(key="s3cret", prefix="Token"),
        )

        await fetch(config, "/alerts/active/count", ActiveAlertsCountResponse, send_api_key=True)
        await fetch(config, "/alerts/active/count", ActiveAlertsCountResponse)

        assert sent_requests[0].headers.get_list("user-agent") == ["(myapp, ops@example.com)", "Token s3cret"]
        assert sent_requests[1].headers.get_list("user-agent") == ["(myapp, ops@example.com)"]

    def test_api_key_without_prefix(self) -> None:
        assert ApiKey(key="abc").header_value == "abc"

    @pytest.mark.asyncio
    async def test_extra_headers_joined(self, nws_config, json_reply, sent_requests) -> None:
        config = nws_config(json_reply({"total": 0}))

        await fetch(
            config,
            "/alerts/active/count",
            ActiveAlertsCountResponse,
            headers={"Feature-Flags": ["forecast_temperature_qv", "forecast_wind_speed_qv"], "X-Empty": None},
        )

        headers = sent_requests[0].headers
        assert headers["feature-flags"] == "forecast_temperature_qv,forecast_wind_speed_qv"
        assert "x-empty" not in headers


class TestResponseHandling:
    @pytest.mark.asyncio
    async def test_empty_collection_is_not_an_error(self, nws_config, json_reply) -> None:
        config = nws_config(json_reply({"type": "FeatureCollection", "features": [], "title": "none"}))

        result = await get_active_alerts(config, area=[StateTerritoryCode.CO])

        assert isinstance(result, AlertCollectionGeoJson)
        assert result.features == []

    @pytest.mark.asyncio
    async def test_problem_detail_on_404(self, nws_config, json_reply) -> None:
        body = {"title": "Not Found", "status": 404, "detail": "not found"}
        config = nws_config(json_reply(body, status_code=404, content_type="application/problem+json"))

        with pytest.raises(NwsResponseError) as exc_info:
            await fetch(config, "/alerts/nope", AlertCollectionGeoJson)

        error = exc_info.value
        assert error.status_code == 404
        assert isinstance(error.entity, ProblemDetail)
        assert error.problem.detail == "not found"
        assert "not found" in error.content

    @pytest.mark.asyncio
    async def test_unstructured_json_error(self, nws_config, json_reply) -> None:
        config = nws_config(json_reply({"message": "boom"}, status_code=500))

        with pytest.raises(NwsResponseError) as exc_info:
            await fetch(config, "/alerts", AlertCollectionGeoJson)

        assert isinstance(exc_info.value.entity, RawErrorBody)
        assert exc_info.value.problem is None

    @pytest.mark.asyncio
    async def test_non_json_error_has_no_entity(self, nws_config, text_reply) -> None:
        config = nws_config(text_reply("Service Unavailable", status_code=503, content_type="text/html"))

        with pytest.raises(NwsResponseError) as exc_info:
            await fetch(config, "/alerts", AlertCollectionGeoJson)

        assert exc_info.value.status_code == 503
        assert exc_info.value.entity is None
        assert exc_info.value.content == "Service Unavailable"

    @pytest.mark.asyncio
    async def test_text_plain_success_is_unexpected(self, nws_config, text_reply) -> None:
        config = nws_config(text_reply("hello"))

        with pytest.raises(NwsUnexpectedContentTypeError) as exc_info:
            await fetch(config, "/alerts/active", AlertCollectionGeoJson)

        assert exc_info.value.content_type == "text/plain"
        assert str(exc_info.value) == (
            "Received `text/plain` content type response that cannot be converted to `AlertCollectionGeoJson`"
        )

    @pytest.mark.asyncio
    async def test_xml_without_decoder_is_unexpected(self, nws_config, text_reply) -> None:
        config = nws_config(text_reply("<a/>", content_type="application/xml"))

        with pytest.raises(NwsUnexpectedContentTypeError):
            await fetch(config, "/alerts/active", AlertCollectionGeoJson)

    @pytest.mark.asyncio
    async def test_missing_content_type(self, nws_config) -> None:
        config = nws_config(lambda request: httpx.Response(200, content=b"\x00\x01"))

        with pytest.raises(NwsUnexpectedContentTypeError) as exc_info:
            await fetch(config, "/radar/stations", None)

        assert exc_info.value.content_type == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_redirect_status_counts_as_success(self, nws_config, json_reply) -> None:
        config = nws_config(json_reply({"total": 3}, status_code=304, content_type="application/json"))

        result = await fetch(config, "/alerts/active/count", ActiveAlertsCountResponse)

        assert result.total == 3

    @pytest.mark.asyncio
    async def test_shape_mismatch(self, nws_config, json_reply) -> None:
        config = nws_config(json_reply({"type": "FeatureCollection", "features": [{"properties": {"severity": "Apocalyptic"}}]}))

        with pytest.raises(NwsDeserializationError) as exc_info:
            await fetch(config, "/alerts", AlertCollectionGeoJson)

        assert exc_info.value.target == "AlertCollectionGeoJson"

    @pytest.mark.asyncio
    async def test_invalid_json(self, nws_config, text_reply) -> None:
        config = nws_config(text_reply("{not json", content_type="application/json"))

        with pytest.raises(NwsDeserializationError):
            await fetch(config, "/alerts", AlertCollectionGeoJson)

    @pytest.mark.asyncio
    async def test_untyped_json(self, nws_config, json_reply) -> None:
        config = nws_config(json_reply({"profiles": [1, 2]}, content_type="application/json"))

        assert await fetch(config, "/radar/profilers/XYZ", None) == {"profiles": [1, 2]}

    @pytest.mark.asyncio
    async def test_xml_decoder_used_for_xml(self, nws_config, text_reply) -> None:
        config = nws_config(text_reply("<TAF/>", content_type="application/xml"))

        result = await fetch(config, "/stations/KDEN/tafs/x/y", None, xml_decoder=lambda text: ("decoded", text))

        assert result == ("decoded", "<TAF/>")

    @pytest.mark.asyncio
    async def test_xml_decoder_errors_propagate(self, nws_config, text_reply) -> None:
        def decoder(text):
            raise NwsXmlError("bad", target="TerminalAerodromeForecast")

        config = nws_config(text_reply("<x/>", content_type="application/xml"))

        with pytest.raises(NwsXmlError):
            await fetch(config, "/stations/KDEN/tafs/x/y", None, xml_decoder=decoder)

    @pytest.mark.asyncio
    async def test_transport_failure_wrapped(self, nws_config) -> None:
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        config = nws_config(handler)

        with pytest.raises(NwsTransportError) as exc_info:
            await fetch(config, "/alerts", AlertCollectionGeoJson)

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_malformed_base_url_wrapped(self, nws_config) -> None:
        config = nws_config(lambda request: httpx.Response(200), base_url="http://local\x00host")

        with pytest.raises(NwsTransportError) as exc_info:
            await fetch(config, "/alerts", AlertCollectionGeoJson)

        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    @pytest.mark.asyncio
    async def test_enum_query_values(self, nws_config, json_reply, sent_requests) -> None:
        config = nws_config(json_reply({"type": "FeatureCollection", "features": []}))

        await get_active_alerts(config, severity=[AlertSeverity.SEVERE, AlertSeverity.EXTREME], limit=5)

        params = sent_requests[0].url.params
        assert params["severity"] == "Severe,Extreme"
        assert params["limit"] == "5"


class TestRedirects:
    def test_default_client_follows_redirects(self) -> None:
        assert Configuration().client.follow_redirects is True

    @pytest.mark.asyncio
    async def test_moved_point_is_followed(self, nws_config, sent_requests, point_feature) -> None:
        moved = {"title": "Adjusting Precision", "status": 301, "detail": "The precision is limited to 4 decimal points."}

        def handler(request):
            if request.url.path == "/points/39.74561,-97.08923":
                return httpx.Response(
                    301,
                    json=moved,
                    headers={"content-type": "application/problem+json", "location": "/points/39.7456,-97.0892"},
                )
            return httpx.Response(200, json=point_feature, headers={"content-type": "application/geo+json"})

        config = nws_config(handler)

        point = await get_point(config, "39.74561,-97.08923")

        assert isinstance(point, PointGeoJson)
        assert point.properties.grid_x == 32
        assert [r.url.path for r in sent_requests] == ["/points/39.74561,-97.08923", "/points/39.7456,-97.0892"]
