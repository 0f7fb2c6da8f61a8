"""
Closed NWS code vocabularies.

Each family is a ``CodeEnum``: a ``str`` enum whose value is the canonical
wire token. Parsing is exact first, then case-insensitive, so ``"ak"`` and
``"AK"`` both give ``StateTerritoryCode.AK`` while ``str(code)`` always
returns the canonical spelling.

Large families are built from token tables with ``enum_from_tokens`` instead
of being spelled out member by member.

Composite codes (area code, region code) are plain unions of two families.
``parse_area_code`` and ``parse_region_code`` try the families in a fixed
order and return the first match.
"""

import re
from enum import Enum
from typing import Annotated, Iterable, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import Field

from noaa_weather.errors import CodeParseError

CodeT = TypeVar("CodeT", bound="CodeEnum")


class CodeEnum(str, Enum):
    """Base for every NWS token enumeration."""

    @classmethod
    def _missing_(cls, value: object) -> Optional["CodeEnum"]:
        if not isinstance(value, str):
            return None
        folded = value.casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        return None

    @classmethod
    def parse(cls: Type[CodeT], value: str) -> CodeT:
        try:
            return cls(value)
        except ValueError:
            raise CodeParseError(value, cls.__name__) from None

    def __str__(self) -> str:
        return self.value


def _member_name(token: str) -> str:
    name = re.sub(r"[^0-9A-Za-z]+", "_", token).strip("_").upper()
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


def enum_from_tokens(
    name: str,
    tokens: Iterable[Union[str, Tuple[str, str]]],
    doc: Optional[str] = None,
    module: str = __name__,
) -> Type[CodeEnum]:
    """Build a ``CodeEnum`` subclass from a token table.

    Entries are either bare tokens (member name derived from the token) or
    ``(member_name, token)`` pairs.
    """
    members = []
    for entry in tokens:
        if isinstance(entry, tuple):
            members.append(entry)
        else:
            members.append((_member_name(entry), entry))
    enum_cls = CodeEnum(name, members, module=module, qualname=name)
    if doc:
        enum_cls.__doc__ = doc
    return enum_cls


def parse_first(value: str, type_name: str, families: Sequence[Type[CodeEnum]]) -> CodeEnum:
    """Try each family in order and return the first that accepts ``value``."""
    for family in families:
        try:
            return family.parse(value)
        except CodeParseError:
            continue
    raise CodeParseError(value, type_name)


# ── Geography ────────────────────────────────────────────────────────────────

_STATE_TERRITORY_TOKENS = (
    "AL", "AK", "AS", "AR", "AZ", "CA", "CO", "CT", "DE", "DC", "FL", "GA",
    "GU", "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA",
    "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC",
    "ND", "OH", "OK", "OR", "PA", "PR", "RI", "SC", "SD", "TN", "TX", "UT",
    "VT", "VI", "VA", "WA", "WV", "WI", "WY", "MP", "PW", "FM", "MH",
)

StateTerritoryCode = enum_from_tokens(
    "StateTerritoryCode",
    _STATE_TERRITORY_TOKENS,
    "Two-letter state, district and territory codes.",
)

MarineAreaCode = enum_from_tokens(
    "MarineAreaCode",
    ("AM", "AN", "GM", "LC", "LE", "LH", "LM", "LO", "LS", "PH", "PK", "PM", "PS", "PZ", "SL"),
    "Marine forecast area codes (coastal and Great Lakes waters).",
)


class LandRegionCode(CodeEnum):
    """NWS land regions."""
    AR = "AR"  # Alaska
    CR = "CR"  # Central
    ER = "ER"  # Eastern
    PR = "PR"  # Pacific
    SR = "SR"  # Southern
    WR = "WR"  # Western


class MarineRegionCode(CodeEnum):
    """NWS marine regions."""
    AL = "AL"  # Alaska waters
    AT = "AT"  # Atlantic
    GL = "GL"  # Great Lakes
    GM = "GM"  # Gulf of Mexico
    PA = "PA"  # Eastern Pacific
    PI = "PI"  # Central/Western Pacific


class RegionType(CodeEnum):
    LAND = "land"
    MARINE = "marine"


class NwsZoneType(CodeEnum):
    """Zone categories used in ``/zones/{type}`` paths."""
    LAND = "land"
    MARINE = "marine"
    FORECAST = "forecast"
    PUBLIC = "public"
    COASTAL = "coastal"
    OFFSHORE = "offshore"
    FIRE = "fire"
    COUNTY = "county"


_AREA_FAMILIES = (StateTerritoryCode, MarineAreaCode)
_REGION_FAMILIES = (LandRegionCode, MarineRegionCode)

# State/territory is tried before marine area, land before marine region.
AreaCode = Annotated[Union[StateTerritoryCode, MarineAreaCode], Field(union_mode="left_to_right")]
RegionCode = Annotated[Union[LandRegionCode, MarineRegionCode], Field(union_mode="left_to_right")]

# Zone ``state`` holds a state code for land zones and free text otherwise.
ZoneState = Annotated[Union[StateTerritoryCode, str], Field(union_mode="left_to_right")]


def parse_area_code(value: str) -> Union[StateTerritoryCode, MarineAreaCode]:
    return parse_first(value, "AreaCode", _AREA_FAMILIES)


def parse_region_code(value: str) -> Union[LandRegionCode, MarineRegionCode]:
    return parse_first(value, "RegionCode", _REGION_FAMILIES)
