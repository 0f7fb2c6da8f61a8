"""Tests for response model decoding, three-state fields and odd payload shapes."""

import json

import pytest

from noaa_weather.models.alerts import Alert, AlertCollectionGeoJson, AlertGeoJson, AlertSeverity
from noaa_weather.models.base import FieldState
from noaa_weather.models.codes import StateTerritoryCode
from noaa_weather.models.geojson import PointGeometry, PolygonGeometry
from noaa_weather.models.gridpoints import Gridpoint, GridpointForecastPeriod, TemperatureUnit
from noaa_weather.models.observations import MetarSkyCoverage, ObservationGeoJson
from noaa_weather.models.office_codes import NwsForecastOfficeId
from noaa_weather.models.points import PointGeoJson, RelativeLocationJsonLd
from noaa_weather.models.problem import ProblemDetail, RawErrorBody, parse_endpoint_error
from noaa_weather.models.radar import RadarServer
from noaa_weather.models.units import QuantitativeValue
from noaa_weather.models.zones import Zone


class TestThreeStateFields:
    """Absent, explicit null and value stay distinguishable."""

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({}, FieldState.ABSENT),
            ({"headline": None}, FieldState.NULL),
            ({"headline": "Tornado Warning issued"}, FieldState.VALUE),
        ],
    )
    def test_decode_states(self, payload, expected) -> None:
        alert = Alert.model_validate(payload)
        assert alert.field_state("headline") is expected

    def test_states_survive_dump_and_reload(self) -> None:
        alert = Alert.model_validate({"onset": None, "headline": "Flood Watch", "event": "Flood Watch"})

        reloaded = Alert.model_validate_json(alert.to_json())

        assert reloaded.field_state("onset") is FieldState.NULL
        assert reloaded.field_state("headline") is FieldState.VALUE
        assert reloaded.field_state("ends") is FieldState.ABSENT
        assert reloaded.field_state("instruction") is FieldState.ABSENT

    def test_dump_writes_null_only_when_sent(self) -> None:
        alert = Alert.model_validate({"onset": None, "event": "Dense Fog Advisory"})
        data = alert.to_dict()

        assert data["onset"] is None
        assert "ends" not in data
        # plain optional fields are never written as null
        assert "severity" not in data

    def test_unknown_field_name(self) -> None:
        with pytest.raises(AttributeError):
            Alert().field_state("not_a_field")

    def test_feature_geometry_three_states(self) -> None:
        absent = AlertGeoJson.model_validate({"properties": {}})
        null = AlertGeoJson.model_validate({"geometry": None, "properties": {}})

        assert absent.field_state("geometry") is FieldState.ABSENT
        assert null.field_state("geometry") is FieldState.NULL
        assert "geometry" not in absent.to_dict()
        assert null.to_dict()["geometry"] is None


class TestAlertModels:
    def test_full_alert_feature(self, alert_feature) -> None:
        feature = AlertGeoJson.model_validate(alert_feature)
        props = feature.properties

        assert props.severity is AlertSeverity.MODERATE
        assert props.geocode.ugc == ["COZ038", "COZ039"]
        assert props.geocode.same == ["008069", "008013"]
        assert props.parameters["NWSheadline"] == ["SNOW EXPECTED"]
        assert props.field_state("onset") is FieldState.NULL
        assert props.field_state("ends") is FieldState.ABSENT

    def test_wire_names_on_dump(self, alert_feature) -> None:
        data = AlertGeoJson.model_validate(alert_feature).to_dict()

        assert data["properties"]["areaDesc"] == "Larimer; Boulder"
        assert data["properties"]["@id"].startswith("https://api.weather.gov/alerts/")
        assert data["properties"]["geocode"]["UGC"] == ["COZ038", "COZ039"]

    def test_collection_keeps_order(self, alert_feature) -> None:
        second = json.loads(json.dumps(alert_feature))
        second["properties"]["event"] = "Wind Advisory"
        collection = AlertCollectionGeoJson.model_validate(
            {"type": "FeatureCollection", "features": [alert_feature, second], "title": "Current watches"}
        )

        assert [f.properties.event for f in collection.features] == ["Winter Weather Advisory", "Wind Advisory"]
        assert collection.pagination is None


class TestGeometry:
    def test_discriminated_on_type(self, point_feature) -> None:
        feature = PointGeoJson.model_validate(point_feature)
        assert isinstance(feature.geometry, PointGeometry)

    def test_polygon(self) -> None:
        ring = [[-105.0, 40.0], [-104.0, 40.0], [-104.0, 39.0], [-105.0, 40.0]]
        feature = AlertGeoJson.model_validate(
            {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [ring]}, "properties": {}}
        )
        assert isinstance(feature.geometry, PolygonGeometry)
        assert feature.geometry.coordinates[0][1] == [-104.0, 40.0]


class TestPointModels:
    def test_geojson_relative_location(self, point_feature) -> None:
        props = PointGeoJson.model_validate(point_feature).properties

        assert props.grid_id is NwsForecastOfficeId.TOP
        assert (props.grid_x, props.grid_y) == (32, 81)
        assert props.relative_location.properties.city == "Linn"
        assert props.relative_location.properties.distance.value == pytest.approx(7366.97)

    def test_flat_relative_location(self) -> None:
        props = PointGeoJson.model_validate(
            {
                "properties": {
                    "cwa": "BOU",
                    "relativeLocation": {"city": "Denver", "state": "CO", "geometry": "POINT(-104.9 39.7)"},
                }
            }
        ).properties

        assert isinstance(props.relative_location, RelativeLocationJsonLd)
        assert props.relative_location.city == "Denver"


class TestGridpointModels:
    def test_quantitative_layers_are_extras(self) -> None:
        gridpoint = Gridpoint.model_validate(
            {
                "gridId": "BOU",
                "temperature": {
                    "uom": "wmoUnit:degC",
                    "values": [{"validTime": "2024-01-15T12:00:00+00:00/PT1H", "value": -3.3}],
                },
                "weather": {"values": []},
                "notALayer": "x",
            }
        )

        layers = gridpoint.layers()
        assert set(layers) == {"temperature"}
        assert gridpoint.layer("temperature").values[0].value == pytest.approx(-3.3)
        assert gridpoint.layer("skyCover") is None
        assert gridpoint.weather.values == []

    def test_period_temperature_int_or_quantity(self) -> None:
        plain = GridpointForecastPeriod.model_validate({"temperature": 41, "temperatureUnit": "F"})
        quantity = GridpointForecastPeriod.model_validate(
            {"temperature": {"unitCode": "wmoUnit:degC", "value": 5}}
        )

        assert plain.temperature == 41
        assert plain.temperature_unit is TemperatureUnit.F
        assert isinstance(quantity.temperature, QuantitativeValue)

    def test_period_nullable_trend(self) -> None:
        period = GridpointForecastPeriod.model_validate({"temperatureTrend": None, "windSpeed": "5 to 10 mph"})
        assert period.field_state("temperature_trend") is FieldState.NULL
        assert period.field_state("wind_gust") is FieldState.ABSENT
        assert period.wind_speed == "5 to 10 mph"


class TestObservationModels:
    def test_metar_fields(self, observation_feature) -> None:
        props = ObservationGeoJson.model_validate(observation_feature).properties

        assert props.temperature.value == -14
        assert props.field_state("icon") is FieldState.NULL
        assert props.wind_speed.field_state("value") is FieldState.NULL
        assert props.cloud_layers[0].amount is MetarSkyCoverage.OVC
        phenomenon = props.present_weather[0]
        assert str(phenomenon.weather) == "snow"
        assert phenomenon.field_state("modifier") is FieldState.NULL


class TestZoneModel:
    def test_state_code_or_free_text(self) -> None:
        land = Zone.model_validate({"id": "COZ039", "type": "public", "state": "CO"})
        marine = Zone.model_validate({"id": "ANZ338", "type": "marine", "state": "Coastal Waters"})

        assert land.state is StateTerritoryCode.CO
        assert marine.state == "Coastal Waters"

    def test_radar_station_nullable(self) -> None:
        zone = Zone.model_validate({"radarStation": None, "cwa": ["BOU", "GJT"]})
        assert zone.field_state("radar_station") is FieldState.NULL
        assert zone.cwa == [NwsForecastOfficeId.BOU, NwsForecastOfficeId.GJT]


class TestRadarModels:
    def test_empty_ping_targets_become_maps(self) -> None:
        server = RadarServer.model_validate(
            {
                "id": "ldm1",
                "ping": {"targets": {"client": [], "ldm": {"ldm2": True}, "misc": []}},
                "hardware": {"cpuIdle": 97.1, "disk": 12, "uptime": "up 3 days"},
            }
        )

        targets = server.ping.targets
        assert targets.client == {}
        assert targets.misc == {}
        assert targets.ldm == {"ldm2": True}
        assert targets.radar is None
        assert server.hardware.disk == 12


class TestEndpointErrorParsing:
    def test_problem_detail(self) -> None:
        entity = parse_endpoint_error(
            json.dumps({"type": "https://api.weather.gov/problems/NotFound", "status": 404, "detail": "not found",
                        "correlationId": "abc123", "parameterErrors": []})
        )

        assert isinstance(entity, ProblemDetail)
        assert entity.status == 404
        assert entity.detail == "not found"
        assert entity.correlation_id == "abc123"
        assert entity.model_extra == {"parameterErrors": []}

    def test_other_json_is_raw(self) -> None:
        entity = parse_endpoint_error('{"message": "upstream timeout"}')
        assert isinstance(entity, RawErrorBody)
        assert entity.root == {"message": "upstream timeout"}

    def test_non_json_is_none(self) -> None:
        assert parse_endpoint_error("<html>Bad Gateway</html>") is None
