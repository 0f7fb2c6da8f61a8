"""NWS office identifiers: forecast offices, regional/national HQ and CWSUs."""

from typing import Annotated, Union

from pydantic import Field

from noaa_weather.models.codes import CodeEnum, enum_from_tokens, parse_first

# Weather Forecast Offices, grouped by region.
_FORECAST_OFFICE_TOKENS = (
    # Eastern
    "AKQ", "ALY", "BGM", "BOX", "BTV", "BUF", "CAE", "CAR", "CHS", "CLE",
    "CTP", "GSP", "GYX", "ILM", "ILN", "LWX", "MHX", "OKX", "PBZ", "PHI",
    "RAH", "RLX", "RNK",
    # Southern
    "ABQ", "AMA", "BMX", "BRO", "CRP", "EPZ", "EWX", "FFC", "FWD", "HGX",
    "HUN", "JAN", "JAX", "KEY", "LCH", "LIX", "LUB", "LZK", "MAF", "MEG",
    "MFL", "MLB", "MOB", "MRX", "OHX", "OUN", "SHV", "SJT", "SJU", "TAE",
    "TBW", "TSA",
    # Central
    "ABR", "APX", "ARX", "BIS", "BOU", "CYS", "DDC", "DLH", "DMX", "DTX",
    "DVN", "EAX", "FGF", "FSD", "GID", "GJT", "GLD", "GRB", "GRR", "ICT",
    "ILX", "IND", "IWX", "JKL", "LBF", "LMK", "LOT", "LSX", "MKX", "MPX",
    "MQT", "OAX", "PAH", "PUB", "RIW", "SGF", "TOP", "UNR",
    # Western
    "BOI", "BYZ", "EKA", "FGZ", "GGW", "HNX", "LKN", "LOX", "MFR", "MSO",
    "MTR", "OTX", "PDT", "PIH", "PQR", "PSR", "REV", "SEW", "SGX", "SLC",
    "STO", "TFX", "TWC", "VEF",
    # Alaska and Pacific
    "AER", "AFC", "AFG", "AJK", "ALU", "GUM", "HPA", "HFO", "PPG", "STU",
    # National centers and marine desks
    "NH1", "NH2", "ONA", "ONP", "PQE", "PQW",
)

NwsForecastOfficeId = enum_from_tokens(
    "NwsForecastOfficeId",
    _FORECAST_OFFICE_TOKENS,
    "Three-letter Weather Forecast Office identifiers.",
)

NwsCenterWeatherServiceUnitId = enum_from_tokens(
    "NwsCenterWeatherServiceUnitId",
    (
        "ZAB", "ZAN", "ZAU", "ZBW", "ZDC", "ZDV", "ZFA", "ZFW", "ZHU", "ZID", "ZJX",
        "ZKC", "ZLA", "ZLC", "ZMA", "ZME", "ZMP", "ZNY", "ZOA", "ZOB", "ZSE", "ZTL",
    ),
    "Center Weather Service Unit identifiers (one per ARTCC).",
)


class NwsRegionalHqId(CodeEnum):
    ARH = "ARH"
    CRH = "CRH"
    ERH = "ERH"
    PRH = "PRH"
    SRH = "SRH"
    WRH = "WRH"


class NwsNationalHqId(CodeEnum):
    NWS = "NWS"


_OFFICE_FAMILIES = (NwsForecastOfficeId, NwsRegionalHqId, NwsNationalHqId)

NwsOfficeId = Annotated[
    Union[NwsForecastOfficeId, NwsRegionalHqId, NwsNationalHqId],
    Field(union_mode="left_to_right"),
]


def parse_office_id(value: str) -> Union[NwsForecastOfficeId, NwsRegionalHqId, NwsNationalHqId]:
    return parse_first(value, "NwsOfficeId", _OFFICE_FAMILIES)
