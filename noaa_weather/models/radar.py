"""
Pydantic models for the radar endpoints: servers, stations, queues, alarms.

These payloads come straight from the NEXRAD monitoring backend and are less
regular than the rest of the API. Some wire names are not camelCase
(``ntp_status``, ``horizontalDeltadBZ0``) or carry upstream typos
(``ameHorzizontalTestSignalPower``); those fields spell out their alias.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from noaa_weather.models.base import NwsModel
from noaa_weather.models.codes import CodeEnum
from noaa_weather.models.geojson import GeoJsonFeature
from noaa_weather.models.units import ValueUnit


class RadarQueueHost(CodeEnum):
    RDS = "rds"
    TDS = "tds"


# ── Servers ──────────────────────────────────────────────────────────────────

class RadarServerPingTargets(NwsModel):
    client: Optional[Dict[str, bool]] = None
    ldm: Optional[Dict[str, bool]] = None
    radar: Optional[Dict[str, bool]] = None
    server: Optional[Dict[str, bool]] = None
    misc: Optional[Dict[str, bool]] = None

    @field_validator("client", "ldm", "radar", "server", "misc", mode="before")
    @classmethod
    def _empty_list_is_empty_map(cls, value: Any) -> Any:
        # PHP backend serialises an empty map as []
        if isinstance(value, list) and not value:
            return {}
        return value


class RadarServerPing(NwsModel):
    targets: Optional[RadarServerPingTargets] = None
    timestamp: Optional[str] = None


class RadarServerCommand(NwsModel):
    last_executed: Optional[str] = None
    last_executed_time: Optional[str] = None
    last_nexrad_data_time: Optional[str] = None
    last_received: Optional[str] = None
    last_received_time: Optional[str] = None
    timestamp: Optional[str] = None


class RadarServerHardware(NwsModel):
    timestamp: Optional[str] = None
    cpu_idle: Optional[float] = None
    io_utilization: Optional[float] = None
    disk: Optional[int] = None
    load1: Optional[float] = None
    load5: Optional[float] = None
    load15: Optional[float] = None
    memory: Optional[float] = None
    uptime: Optional[str] = None


class RadarServerLdm(NwsModel):
    timestamp: Optional[str] = None
    latest_product: Optional[str] = None
    oldest_product: Optional[str] = None
    storage_size: Optional[int] = None
    count: Optional[int] = None
    active: Optional[bool] = None


class RadarServerInterface(NwsModel):
    interface: Optional[str] = None
    active: Optional[bool] = None
    trans_no_error: Optional[int] = None
    trans_error: Optional[int] = None
    trans_dropped: Optional[int] = None
    trans_overrun: Optional[int] = None
    recv_no_error: Optional[int] = None
    recv_error: Optional[int] = None
    recv_dropped: Optional[int] = None
    recv_overrun: Optional[int] = None


class RadarServerNetwork(NwsModel):
    timestamp: Optional[str] = None
    eth0: Optional[RadarServerInterface] = None
    eth1: Optional[RadarServerInterface] = None


class RadarServer(NwsModel):
    """Health snapshot of one radar data server."""

    context: Optional[Any] = Field(None, alias="@context")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    id: Optional[str] = None
    type: Optional[str] = None
    active: Optional[bool] = None
    primary: Optional[bool] = None
    aggregate: Optional[bool] = None
    locked: Optional[bool] = None
    radar_network_up: Optional[bool] = None
    collection_time: Optional[str] = None
    reporting_host: Optional[str] = None
    ping: Optional[RadarServerPing] = None
    command: Optional[RadarServerCommand] = None
    hardware: Optional[RadarServerHardware] = None
    ldm: Optional[RadarServerLdm] = None
    network: Optional[RadarServerNetwork] = None


class RadarServersResponse(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    graph: List[RadarServer] = Field(..., alias="@graph")


# ── Stations ─────────────────────────────────────────────────────────────────

class RadarStationLatency(NwsModel):
    current: Optional[ValueUnit] = None
    average: Optional[ValueUnit] = None
    max: Optional[ValueUnit] = None
    level_two_last_received_time: Optional[str] = None
    max_latency_time: Optional[str] = None
    reporting_host: Optional[str] = None
    host: Optional[str] = None


class RdaProperties(NwsModel):
    resolution_version: Optional[str] = None
    nl2_path: Optional[str] = None
    volume_coverage_pattern: Optional[str] = None
    control_status: Optional[str] = None
    build_number: Optional[float] = None
    alarm_summary: Optional[str] = None
    mode: Optional[str] = None
    generator_state: Optional[str] = None
    super_resolution_status: Optional[str] = None
    operability_status: Optional[str] = None
    status: Optional[str] = None
    average_transmitter_power: Optional[ValueUnit] = None
    reflectivity_calibration_correction: Optional[ValueUnit] = None


class RadarStationRda(NwsModel):
    """Radar data acquisition status."""
    timestamp: Optional[str] = None
    reporting_host: Optional[str] = None
    properties: Optional[RdaProperties] = None


class PerformanceProperties(NwsModel):
    ntp_status: Optional[int] = Field(None, alias="ntp_status")
    command_channel: Optional[str] = None
    radome_air_temperature: Optional[ValueUnit] = None
    transitional_power_source: Optional[str] = None
    horizontal_short_pulse_noise: Optional[ValueUnit] = None
    elevation_encoder_light: Optional[str] = None
    horizontal_long_pulse_noise: Optional[ValueUnit] = None
    azimuth_encoder_light: Optional[str] = None
    horizontal_noise_temperature: Optional[ValueUnit] = None
    linearity: Optional[float] = None
    transmitter_peak_power: Optional[ValueUnit] = None
    horizontal_delta_dbz0: Optional[ValueUnit] = Field(None, alias="horizontalDeltadBZ0")
    transmitter_recycle_count: Optional[int] = None
    vertical_delta_dbz0: Optional[ValueUnit] = Field(None, alias="verticalDeltadBZ0")
    receiver_bias: Optional[ValueUnit] = None
    short_pulse_horizontal_dbz0: Optional[ValueUnit] = Field(None, alias="shortPulseHorizontaldBZ0")
    transmitter_imbalance: Optional[ValueUnit] = None
    long_pulse_horizontal_dbz0: Optional[ValueUnit] = Field(None, alias="longPulseHorizontaldBZ0")
    performance_check_time: Optional[str] = None
    transmitter_leaving_air_temperature: Optional[ValueUnit] = None
    shelter_temperature: Optional[ValueUnit] = None
    power_source: Optional[str] = None
    dynamic_range: Optional[ValueUnit] = None
    fuel_level: Optional[ValueUnit] = None


class RadarStationPerformance(NwsModel):
    timestamp: Optional[str] = None
    reporting_host: Optional[str] = None
    properties: Optional[PerformanceProperties] = None


class AdaptationProperties(NwsModel):
    transmitter_frequency: Optional[ValueUnit] = None
    path_loss_wg04_circulator: Optional[ValueUnit] = Field(None, alias="pathLossWG04Circulator")
    antenna_gain_including_radome: Optional[ValueUnit] = None
    path_loss_a6_arc_detector: Optional[ValueUnit] = Field(None, alias="pathLossA6ArcDetector")
    coho_power_at_a1j4: Optional[ValueUnit] = Field(None, alias="cohoPowerAtA1J4")
    ame_horizontal_test_signal_power: Optional[ValueUnit] = Field(None, alias="ameHorzizontalTestSignalPower")
    path_loss_transmitter_coupler_coupling: Optional[ValueUnit] = None
    stalo_power_at_a1j2: Optional[ValueUnit] = Field(None, alias="staloPowerAtA1J2")
    ame_noise_source_horizontal_excess_noise_ratio: Optional[ValueUnit] = None
    path_loss_vertical_if_heliax_to_4at16: Optional[ValueUnit] = Field(None, alias="pathLossVerticalIFHeliaxTo4AT16")
    path_loss_at4_attenuator: Optional[ValueUnit] = Field(None, alias="pathLossAT4Attenuator")
    path_loss_horizontal_if_heliax_to_4at17: Optional[ValueUnit] = Field(
        None, alias="pathLossHorzontalIFHeliaxTo4AT17"
    )
    path_loss_ifdr_if_anti_alias_filter: Optional[ValueUnit] = Field(None, alias="pathLossIFDRIFAntiAliasFilter")
    path_loss_ifd_burst_anti_alias_filter: Optional[ValueUnit] = Field(
        None, alias="pathLossIFDBurstAntiAliasFilter"
    )
    path_loss_wg02_harmonic_filter: Optional[ValueUnit] = Field(None, alias="pathLossWG02HarmonicFilter")
    transmitter_power_data_watts_factor: Optional[ValueUnit] = None
    path_loss_waveguide_klystron_to_switch: Optional[ValueUnit] = None
    pulse_width_transmitter_output_short_pulse: Optional[ValueUnit] = None
    pulse_width_transmitter_output_long_pulse: Optional[ValueUnit] = None
    path_loss_wg06_spectrum_filter: Optional[ValueUnit] = Field(None, alias="pathLossWG06SpectrumFilter")
    horizontal_receiver_noise_short_pulse: Optional[ValueUnit] = None
    horizontal_receiver_noise_long_pulse: Optional[ValueUnit] = None
    transmitter_spectrum_filter_installed: Optional[str] = None


class RadarStationAdaptation(NwsModel):
    timestamp: Optional[str] = None
    reporting_host: Optional[str] = None
    properties: Optional[AdaptationProperties] = None


class RadarStation(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    at_id: Optional[str] = Field(None, alias="@id")
    at_type: Optional[str] = Field(None, alias="@type")
    id: Optional[str] = Field(None, description="Radar identifier, e.g. KTLX")
    name: Optional[str] = None
    station_type: Optional[str] = Field(None, description="WSR-88D, TDWR, ...")
    elevation: Optional[ValueUnit] = None
    time_zone: Optional[str] = None
    latency: Optional[RadarStationLatency] = None
    rda: Optional[RadarStationRda] = None
    performance: Optional[RadarStationPerformance] = None
    adaptation: Optional[RadarStationAdaptation] = None


RadarStationFeature = GeoJsonFeature[RadarStation]


class RadarStationsResponse(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    type: Optional[str] = None
    features: List[RadarStationFeature]


# ── Queues and alarms ────────────────────────────────────────────────────────

class RadarQueue(NwsModel):
    at_type: Optional[str] = Field(None, alias="@type")
    host: Optional[str] = None
    arrival_time: Optional[str] = None
    creation_time: Optional[str] = None
    type: Optional[str] = None
    feed: Optional[str] = None
    resolution_version: Optional[int] = None
    sequence_number: Optional[str] = None
    size: Optional[int] = None


class RadarQueuesResponse(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    at_id: Optional[str] = Field(None, alias="@id")
    graph: List[RadarQueue] = Field(..., alias="@graph")


class RadarStationAlarm(NwsModel):
    at_type: Optional[str] = Field(None, alias="@type")
    station_id: Optional[str] = None
    status: Optional[str] = None
    timestamp: Optional[str] = None
    active_channel: Optional[int] = None
    message: Optional[str] = None


class RadarStationAlarmsResponse(NwsModel):
    context: Optional[Any] = Field(None, alias="@context")
    at_id: Optional[str] = Field(None, alias="@id")
    graph: List[RadarStationAlarm] = Field(..., alias="@graph")
