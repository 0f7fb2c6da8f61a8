"""
Unit-of-measure codes and the value types that carry them.

NWS quantities name their unit with a WMO code (``wmoUnit:degC``) or, for a
few radar fields, an NWS-local one (``nwsUnit:dBZ``). Some WMO codes differ
only by case (``wmoUnit:S`` siemens, ``wmoUnit:s`` second), so exact matches
always win over the case-insensitive fallback.
"""

from typing import Annotated, ClassVar, FrozenSet, Optional, Union

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.codes import CodeEnum, enum_from_tokens, parse_first

_WMO_UNIT_TOKENS = (
    ("MINUTE_ANGLE", "wmoUnit:'"),
    ("SECOND_ANGLE", 'wmoUnit:"'),
    ("PARTS_PER_THOUSAND", "wmoUnit:0.001"),
    ("DIMENSIONLESS", "wmoUnit:1"),
    ("AMPERE", "wmoUnit:A"),
    ("ASTRONOMIC_UNIT", "wmoUnit:AU"),
    ("BECQUEREL", "wmoUnit:Bq"),
    ("BECQUERELS_PER_LITRE", "wmoUnit:Bq_l-1"),
    ("BECQUERELS_PER_SQUARE_METRE", "wmoUnit:Bq_m-2"),
    ("BECQUERELS_PER_CUBIC_METRE", "wmoUnit:Bq_m-3"),
    ("BECQUEREL_SECONDS_PER_CUBIC_METRE", "wmoUnit:Bq_s_m-3"),
    ("COULOMB", "wmoUnit:C"),
    ("DEGREES_CELSIUS_PER_100_METRES", "wmoUnit:C_-1"),
    ("DEGREES_CELSIUS_PER_METRE", "wmoUnit:C_m-1"),
    ("DEGREE_CELSIUS", "wmoUnit:Cel"),
    ("DOBSON_UNIT", "wmoUnit:DU"),
    ("FARAD", "wmoUnit:F"),
    ("GRAY", "wmoUnit:Gy"),
    ("HENRY", "wmoUnit:H"),
    ("HERTZ", "wmoUnit:Hz"),
    ("JOULE", "wmoUnit:J"),
    ("JOULES_PER_KILOGRAM", "wmoUnit:J_kg-1"),
    ("JOULES_PER_SQUARE_METRE", "wmoUnit:J_m-2"),
    ("KELVIN", "wmoUnit:K"),
    ("KELVINS_PER_METRE", "wmoUnit:K_m-1"),
    ("KELVIN_SQUARE_METRES_PER_KILOGRAM_PER_SECOND", "wmoUnit:K_m2_kg-1_s-1"),
    ("KELVIN_METRES_PER_SECOND", "wmoUnit:K_m_s-1"),
    ("NEWTON", "wmoUnit:N"),
    ("NEWTONS_PER_SQUARE_METRE", "wmoUnit:N_m-2"),
    ("N_UNITS", "wmoUnit:N_units"),
    ("OHM", "wmoUnit:Ohm"),
    ("PASCAL", "wmoUnit:Pa"),
    ("PASCALS_PER_SECOND", "wmoUnit:Pa_s-1"),
    ("SIEMENS", "wmoUnit:S"),
    ("SIEMENS_PER_METRE", "wmoUnit:S_m-1"),
    ("SIEVERT", "wmoUnit:Sv"),
    ("TESLA", "wmoUnit:T"),
    ("VOLT", "wmoUnit:V"),
    ("WATT", "wmoUnit:W"),
    ("KILOWATT", "wmoUnit:kW"),
    ("WATTS_PER_METRE_PER_STERADIAN", "wmoUnit:W_m-1_sr-1"),
    ("WATTS_PER_SQUARE_METRE", "wmoUnit:W_m-2"),
    ("WATTS_PER_SQUARE_METRE_PER_STERADIAN", "wmoUnit:W_m-2_sr-1"),
    ("WATTS_PER_SQUARE_METRE_PER_STERADIAN_CENTIMETRE", "wmoUnit:W_m-2_sr-1_cm"),
    ("WATTS_PER_SQUARE_METRE_PER_STERADIAN_METRE", "wmoUnit:W_m-2_sr-1_m"),
    ("WATTS_PER_CUBIC_METRE_PER_STERADIAN", "wmoUnit:W_m-3_sr-1"),
    ("WEBER", "wmoUnit:Wb"),
    ("YEAR", "wmoUnit:a"),
    ("CENTIBARS_PER_12_HOURS", "wmoUnit:cb_-1"),
    ("CENTIBARS_PER_SECOND", "wmoUnit:cb_s-1"),
    ("CANDELA", "wmoUnit:cd"),
    ("CENTIMETRE", "wmoUnit:cm"),
    ("CENTIMETRES_PER_HOUR", "wmoUnit:cm_h-1"),
    ("CENTIMETRES_PER_SECOND", "wmoUnit:cm_s-1"),
    ("DAY", "wmoUnit:d"),
    ("DECIBEL", "wmoUnit:dB"),
    ("DECIBELS_PER_DEGREE", "wmoUnit:dB_deg-1"),
    ("DECIBELS_PER_METRE", "wmoUnit:dB_m-1"),
    ("DECIPASCALS_PER_SECOND_MICROBAR_PER_SECOND", "wmoUnit:dPa_s-1"),
    ("DEKAPASCAL", "wmoUnit:daPa"),
    ("SQUARE_DEGREES", "wmoUnit:deg2"),
    ("DEGREES_CELSIUS", "wmoUnit:degC"),
    ("DEGREES_PER_SECOND", "wmoUnit:deg_s-1"),
    ("DEGREE_ANGLE", "wmoUnit:degree_(angle)"),
    ("DEGREES_TRUE", "wmoUnit:degrees_true"),
    ("DECIMETRE", "wmoUnit:dm"),
    ("ELECTRON_VOLT", "wmoUnit:eV"),
    ("FOOT", "wmoUnit:ft"),
    ("ACCELERATION_DUE_TO_GRAVITY", "wmoUnit:g"),
    ("GRAMS_PER_KILOGRAM", "wmoUnit:g_kg-1"),
    ("GRAMS_PER_KILOGRAM_PER_SECOND", "wmoUnit:g_kg-1_s-1"),
    ("GEOPOTENTIAL_METRE", "wmoUnit:gpm"),
    ("HOUR", "wmoUnit:h"),
    ("HECTOPASCAL", "wmoUnit:hPa"),
    ("HECTOPASCALS_PER_3_HOURS", "wmoUnit:hPa_-1"),
    ("HECTOPASCALS_PER_HOUR", "wmoUnit:hPa_h-1"),
    ("HECTOPASCALS_PER_SECOND", "wmoUnit:hPa_s-1"),
    ("HECTARE", "wmoUnit:ha"),
    ("KILOPASCAL", "wmoUnit:kPa"),
    ("KILOGRAM", "wmoUnit:kg"),
    ("PER_SQUARE_KILOGRAM_PER_SECOND", "wmoUnit:kg-2_s-1"),
    ("KILOGRAMS_PER_KILOGRAM", "wmoUnit:kg_kg-1"),
    ("KILOGRAMS_PER_KILOGRAM_PER_SECOND", "wmoUnit:kg_kg-1_s-1"),
    ("KILOGRAMS_PER_METRE", "wmoUnit:kg_m-1"),
    ("KILOGRAMS_PER_SQUARE_METRE", "wmoUnit:kg_m-2"),
    ("KILOGRAMS_PER_SQUARE_METRE_PER_SECOND", "wmoUnit:kg_m-2_s-1"),
    ("KILOGRAMS_PER_CUBIC_METRE", "wmoUnit:kg_m-3"),
    ("KILOMETRE", "wmoUnit:km"),
    ("KILOMETRES_PER_DAY", "wmoUnit:km_d-1"),
    ("KILOMETRES_PER_HOUR", "wmoUnit:km_h-1"),
    ("KNOT", "wmoUnit:kt"),
    ("KNOTS_PER_1000_METRES", "wmoUnit:kt_km-1"),
    ("LITRE", "wmoUnit:l"),
    ("LUMEN", "wmoUnit:lm"),
    ("LOGARITHM_PER_METRE", "wmoUnit:log_(m-1)"),
    ("LOGARITHM_PER_SQUARE_METRE", "wmoUnit:log_(m-2)"),
    ("LUX", "wmoUnit:lx"),
    ("METRE", "wmoUnit:m"),
    ("PER_METRE", "wmoUnit:m-1"),
    ("SQUARE_METRES", "wmoUnit:m2"),
    ("METRES_TO_THE_TWO_THIRDS_POWER_PER_SECOND", "wmoUnit:m2_-1"),
    ("SQUARE_METRES_PER_HERTZ", "wmoUnit:m2_Hz-1"),
    ("SQUARE_METRES_PER_RADIAN_SQUARED", "wmoUnit:m2_rad-1_s"),
    ("SQUARE_METRES_SECOND", "wmoUnit:m2_s"),
    ("SQUARE_METRES_PER_SECOND", "wmoUnit:m2_s-1"),
    ("SQUARE_METRES_PER_SECOND_SQUARED", "wmoUnit:m2_s-2"),
    ("CUBIC_METRES", "wmoUnit:m3"),
    ("CUBIC_METRES_PER_CUBIC_METRE", "wmoUnit:m3_m-3"),
    ("CUBIC_METRES_PER_SECOND", "wmoUnit:m3_s-1"),
    ("METRES_TO_THE_FOURTH_POWER", "wmoUnit:m4"),
    ("MILLISIEVERT", "wmoUnit:mSv"),
    ("METRES_PER_SECOND", "wmoUnit:m_s-1"),
    ("METRES_PER_SECOND_PER_1000_METRES", "wmoUnit:m_s-1_km-1"),
    ("METRES_PER_SECOND_PER_METRE", "wmoUnit:m_s-1_m-1"),
    ("METRES_PER_SECOND_SQUARED", "wmoUnit:m_s-2"),
    ("MINUTE_TIME", "wmoUnit:min"),
    ("MILLIMETRE", "wmoUnit:mm"),
    ("MILLIMETRES_PER_THE_SIXTH_POWER_PER_CUBIC_METRE", "wmoUnit:mm6_m-3"),
    ("MILLIMETRES_PER_HOUR", "wmoUnit:mm_h-1"),
    ("MILLIMETRES_PER_SECONDS", "wmoUnit:mm_s-1"),
    ("MOLE", "wmoUnit:mol"),
    ("MOLES_PER_MOLE", "wmoUnit:mol_mol-1"),
    ("MONTH", "wmoUnit:mon"),
    ("NAUTICAL_MILE", "wmoUnit:nautical_mile"),
    ("NANOBAR", "wmoUnit:nbar"),
    ("EIGHTHS_OF_CLOUD", "wmoUnit:okta"),
    ("PH_UNIT", "wmoUnit:pH_unit"),
    ("PARSEC", "wmoUnit:pc"),
    ("PER_CENT", "wmoUnit:percent"),
    ("RADIAN", "wmoUnit:rad"),
    ("RADIANS_PER_METRE", "wmoUnit:rad_m-1"),
    ("SECOND", "wmoUnit:s"),
    ("PER_SECOND_SAME_AS_HERTZ", "wmoUnit:s-1"),
    ("PER_SECOND_SQUARED", "wmoUnit:s-2"),
    ("SECONDS_PER_METRE", "wmoUnit:s_m-1"),
    ("STERADIAN", "wmoUnit:sr"),
    ("TONNE", "wmoUnit:t"),
    ("ATOMIC_MASS_UNIT", "wmoUnit:u"),
    ("WEEK", "wmoUnit:week"),
)

WmoUnitCode = enum_from_tokens(
    "WmoUnitCode",
    _WMO_UNIT_TOKENS,
    "WMO codes registry units, as used in ``unitCode`` fields.",
)


class NwsUnitCode(CodeEnum):
    """NWS-specific units not covered by the WMO registry."""
    SECOND = "nwsUnit:s"
    NANOSECOND = "nwsUnit:ns"
    MEGAHERTZ = "nwsUnit:MHz"
    DBZ = "nwsUnit:dBZ"
    DECIBEL = "nwsUnit:dB"


class QualityControl(CodeEnum):
    """MADIS quality control flags."""
    Z = "Z"  # preliminary, no QC
    C = "C"  # coarse pass
    S = "S"  # screened
    V = "V"  # verified
    X = "X"  # rejected/erroneous
    Q = "Q"  # questioned
    G = "G"  # subjective good
    B = "B"  # subjective bad
    T = "T"  # temporally interpolated


# WMO is tried before NWS.
UnitCode = Annotated[Union[WmoUnitCode, NwsUnitCode], Field(union_mode="left_to_right")]


def parse_unit_code(value: str) -> Union[WmoUnitCode, NwsUnitCode]:
    return parse_first(value, "UnitCode", (WmoUnitCode, NwsUnitCode))


class QuantitativeValue(NwsModel):
    """A measured or forecast value with its unit.

    ``value`` is null on the wire when a sensor reports nothing, which is
    different from the key being left out. ``unit_code`` stays a plain
    string since the API emits codes outside the shipped tables; ``unit()``
    gives the typed form.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"value"})

    value: Optional[float] = Field(None, description="Measured value")
    max_value: Optional[float] = Field(None, description="Maximum of a range")
    min_value: Optional[float] = Field(None, description="Minimum of a range")
    unit_code: Optional[str] = Field(None, description="Unit of measure, e.g. wmoUnit:degC")
    quality_control: Optional[QualityControl] = Field(None, description="QC flag for the value")

    def unit(self) -> Optional[Union[WmoUnitCode, NwsUnitCode]]:
        if self.unit_code is None:
            return None
        return parse_unit_code(self.unit_code)


class ValueUnit(NwsModel):
    """Looser value/unit pair used by radar payloads (free-form QC text)."""
    unit_code: Optional[UnitCode] = None
    value: Optional[float] = None
    quality_control: Optional[str] = None
