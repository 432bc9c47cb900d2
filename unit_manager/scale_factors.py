# unit_manager/scale_factors.py
"""
Scale factors relative to each category's implicit base unit, as exact
fractions: 1 <unit> == factor <base unit>.

Base units: Area m², Data megabyte, Energy joule, Length meter, Power watt,
Time second, Volume milliliter, Weight kilogram, Speed cm/s, Angle degree,
Pressure atmosphere.

Entries marked "legacy table" use the physical value of the named unit
where older reference tables carried a mistyped constant; converted
results for those units differ from outputs produced with the old tables.
"""
from __future__ import annotations

from fractions import Fraction as F
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping

from unit_manager.ids import CategoryId, UnitId

_INCH_CM = F(254, 100)
_POUND_KG = F(45359237, 10**8)
_BTU_J = F(10550559, 10000)
_FOOT_POUND_J = F(13558179483314004, 10**16)
_KIB = 1024


_AREA = {
    UnitId.AREA_ACRE: F(40468564224, 10**7),
    UnitId.AREA_SQUARE_METER: F(1),
    UnitId.AREA_SQUARE_FOOT: F(144 * 64516, 10**8),  # legacy table: /10^4
    UnitId.AREA_SQUARE_YARD: F(1296 * 64516, 10**8),  # legacy table: /10^4
    UnitId.AREA_SQUARE_MILLIMETER: F(1, 10**6),  # legacy table: 1/10^5
    UnitId.AREA_SQUARE_CENTIMETER: F(1, 10**4),
    UnitId.AREA_SQUARE_INCH: F(64516, 10**8),
    UnitId.AREA_SQUARE_MILE: F(4014489600 * 64516, 10**8),  # legacy table: /10^4
    UnitId.AREA_SQUARE_KILOMETER: F(10**6),
    UnitId.AREA_HECTARE: F(10**4),
    UnitId.AREA_HAND: F(12516104, 10**9),
    UnitId.AREA_PAPER: F(6032246, 10**8),
    UnitId.AREA_SOCCER_FIELD: F(1086966, 100),
    UnitId.AREA_CASTLE: F(100000),
    UnitId.AREA_PYEONG: F(400, 121),
}

_DATA = {
    UnitId.DATA_BIT: F(1, 8 * 10**6),
    UnitId.DATA_BYTE: F(1, 10**6),  # legacy table: 1/10^5
    UnitId.DATA_KILOBYTE: F(1, 1000),
    UnitId.DATA_MEGABYTE: F(1),
    UnitId.DATA_GIGABYTE: F(10**3),
    UnitId.DATA_TERABYTE: F(10**6),
    UnitId.DATA_PETABYTE: F(10**9),
    UnitId.DATA_EXABYTES: F(10**12),
    UnitId.DATA_ZETABYTES: F(10**15),
    UnitId.DATA_YOTTABYTE: F(10**18),
    UnitId.DATA_KILOBIT: F(1, 8000),
    UnitId.DATA_MEGABIT: F(1, 8),
    UnitId.DATA_GIGABIT: F(125),
    UnitId.DATA_TERABIT: F(125 * 10**3),
    UnitId.DATA_PETABIT: F(125 * 10**6),
    UnitId.DATA_EXABITS: F(125 * 10**9),
    UnitId.DATA_ZETABITS: F(125 * 10**12),
    UnitId.DATA_YOTTABIT: F(125 * 10**15),
    UnitId.DATA_KIBIBITS: F(_KIB, 8 * 10**6),
    UnitId.DATA_KIBIBYTES: F(_KIB, 10**6),
    UnitId.DATA_MEBIBITS: F(_KIB**2, 8 * 10**6),
    UnitId.DATA_MEBIBYTES: F(_KIB**2, 10**6),
    UnitId.DATA_GIBIBITS: F(_KIB**3, 8 * 10**6),
    UnitId.DATA_GIBIBYTES: F(_KIB**3, 10**6),  # legacy table: 1024^3, no divisor
    UnitId.DATA_TEBIBITS: F(_KIB**4, 8 * 10**6),
    UnitId.DATA_TEBIBYTES: F(_KIB**4, 10**6),
    UnitId.DATA_PEBIBITS: F(_KIB**5, 8 * 10**6),
    UnitId.DATA_PEBIBYTES: F(_KIB**5, 10**6),
    UnitId.DATA_EXBIBITS: F(_KIB**6, 8 * 10**6),
    UnitId.DATA_EXBIBYTES: F(_KIB**6, 10**6),  # legacy table: 1024^6, no divisor
    UnitId.DATA_ZEBIBITS: F(_KIB**7, 8 * 10**6),  # legacy table: 1024^6
    UnitId.DATA_ZEBIBYTES: F(_KIB**7, 10**6),  # legacy table: 1024^6
    UnitId.DATA_YOBIBITS: F(_KIB**8, 8 * 10**6),  # legacy table: 1024^7
    UnitId.DATA_YOBIBYTES: F(_KIB**8, 10**6),  # legacy table: 1024^7
    # 1.44 MiB, 700 MiB, 4.7 GiB
    UnitId.DATA_FLOPPY_DISK: F(144 * _KIB**2, 10**8),
    UnitId.DATA_CD: F(700 * _KIB**2, 10**6),  # legacy table: no divisor
    UnitId.DATA_DVD: F(47 * _KIB**3, 10**7),
}

_ENERGY = {
    UnitId.ENERGY_CALORIE: F(4184, 1000),
    UnitId.ENERGY_KILOCALORIE: F(4184),
    UnitId.ENERGY_BRITISH_THERMAL_UNIT: _BTU_J,
    UnitId.ENERGY_KILOJOULE: F(1000),
    UnitId.ENERGY_ELECTRON_VOLT: F(1602176565, 10**28),  # legacy table: /10^20
    UnitId.ENERGY_JOULE: F(1),
    UnitId.ENERGY_FOOT_POUND: _FOOT_POUND_J,
    UnitId.ENERGY_BATTERY: F(9000),
    UnitId.ENERGY_BANANA: F(439614),
    UnitId.ENERGY_SLICE_OF_CAKE: F(1046700),
}

_LENGTH = {
    UnitId.LENGTH_INCH: _INCH_CM / 100,
    UnitId.LENGTH_FOOT: F(3048, 10000),
    UnitId.LENGTH_YARD: F(9144, 10000),
    UnitId.LENGTH_MILE: F(1609344, 1000),
    UnitId.LENGTH_MICRON: F(1, 10**6),  # legacy table: 1/10^5
    UnitId.LENGTH_MILLIMETER: F(1, 1000),
    UnitId.LENGTH_NANOMETER: F(1, 10**9),  # legacy table: 1/10^8
    UnitId.LENGTH_CENTIMETER: F(1, 100),
    UnitId.LENGTH_METER: F(1),
    UnitId.LENGTH_KILOMETER: F(1000),
    UnitId.LENGTH_NAUTICAL_MILE: F(1852),
    UnitId.LENGTH_PAPERCLIP: F(35052, 10**6),
    UnitId.LENGTH_HAND: F(18669, 10**5),
    UnitId.LENGTH_JUMBO_JET: F(76),
}

_POWER = {
    UnitId.POWER_BRITISH_THERMAL_UNIT_PER_MINUTE: _BTU_J / 60,  # legacy table left this unset
    UnitId.POWER_FOOT_POUND_PER_MINUTE: _FOOT_POUND_J / 60,
    UnitId.POWER_WATT: F(1),
    UnitId.POWER_KILOWATT: F(1000),
    UnitId.POWER_HORSEPOWER: F(74569987158227022, 10**14),
    UnitId.POWER_LIGHT_BULB: F(60),
    UnitId.POWER_HORSE: F(7457, 10),
    UnitId.POWER_TRAIN_ENGINE: F(2982799486329081, 10**9),
}

_TIME = {
    UnitId.TIME_DAY: F(24 * 60 * 60),
    UnitId.TIME_SECOND: F(1),
    UnitId.TIME_WEEK: F(7 * 24 * 60 * 60),
    UnitId.TIME_YEAR: F(1461 * 6 * 60 * 60),  # 365.25 days
    UnitId.TIME_MILLISECOND: F(1, 1000),
    UnitId.TIME_MICROSECOND: F(1, 10**6),  # legacy table: 1/10^5
    UnitId.TIME_MINUTE: F(60),
    UnitId.TIME_HOUR: F(60 * 60),
}

_VOLUME = {
    UnitId.VOLUME_CUP_US: F(236588237, 10**6),
    UnitId.VOLUME_PINT_US: F(473176473, 10**6),
    UnitId.VOLUME_PINT_UK: F(56826125, 10**5),
    UnitId.VOLUME_QUART_US: F(946352946, 10**6),
    UnitId.VOLUME_QUART_UK: F(11365225, 10**4),
    UnitId.VOLUME_GALLON_US: F(3785411784, 10**6),
    UnitId.VOLUME_GALLON_UK: F(454609, 100),
    UnitId.VOLUME_LITER: F(1000),
    UnitId.VOLUME_TEASPOON_US: _INCH_CM**3 * 231 / (6 * 128),
    UnitId.VOLUME_TABLESPOON_US: F(1478676478125, 10**11),
    UnitId.VOLUME_CUBIC_CENTIMETER: F(1),
    UnitId.VOLUME_CUBIC_YARD: _INCH_CM**3 * 12**3 * 3**3,
    UnitId.VOLUME_CUBIC_METER: F(10**6),
    UnitId.VOLUME_MILLILITER: F(1),
    UnitId.VOLUME_CUBIC_INCH: _INCH_CM**3,
    UnitId.VOLUME_CUBIC_FOOT: _INCH_CM**3 * 12**3,
    UnitId.VOLUME_FLUID_OUNCE_US: F(295735295625, 10**10),
    UnitId.VOLUME_FLUID_OUNCE_UK: F(284130625, 10**7),
    UnitId.VOLUME_TEASPOON_UK: F(1420653125, 240000000),
    UnitId.VOLUME_TABLESPOON_UK: F(177581640625, 10**10),
    UnitId.VOLUME_COFFEE_CUP: F(2365882, 10**4),
    UnitId.VOLUME_BATHTUB: F(400 * 946353, 1000),
    UnitId.VOLUME_SWIMMING_POOL: F(3750000000),
}

_WEIGHT = {
    UnitId.WEIGHT_KILOGRAM: F(1),
    UnitId.WEIGHT_HECTOGRAM: F(1, 10),
    UnitId.WEIGHT_DECAGRAM: F(1, 100),
    UnitId.WEIGHT_GRAM: F(1, 1000),
    UnitId.WEIGHT_POUND: _POUND_KG,
    UnitId.WEIGHT_OUNCE: _POUND_KG / 16,
    UnitId.WEIGHT_MILLIGRAM: F(1, 10**6),  # legacy table: 1/10^5
    UnitId.WEIGHT_CENTIGRAM: F(1, 10**5),  # legacy table: 1/10^4
    UnitId.WEIGHT_DECIGRAM: F(1, 10**4),
    UnitId.WEIGHT_LONG_TON: F(10160469088, 10**7),
    UnitId.WEIGHT_TONNE: F(1000),
    UnitId.WEIGHT_STONE: _POUND_KG * 14,
    UnitId.WEIGHT_CARAT: F(2, 10**4),
    UnitId.WEIGHT_SHORT_TON: F(90718474, 10**5),
    UnitId.WEIGHT_SNOWFLAKE: F(2, 10**6),  # legacy table: 2/10^5
    UnitId.WEIGHT_SOCCER_BALL: F(4325, 10**4),
    UnitId.WEIGHT_ELEPHANT: F(4000),
    UnitId.WEIGHT_WHALE: F(90000),
}

_SPEED = {
    UnitId.SPEED_CENTIMETERS_PER_SECOND: F(1),
    UnitId.SPEED_FEET_PER_SECOND: F(3048, 100),
    UnitId.SPEED_KILOMETERS_PER_HOUR: F(250, 9),
    UnitId.SPEED_KNOT: F(4 + 51 * 9, 9),
    UnitId.SPEED_MACH: F(34030),
    UnitId.SPEED_METERS_PER_SECOND: F(100),
    UnitId.SPEED_MILES_PER_HOUR: F(447, 10),
    UnitId.SPEED_TURTLE: F(894, 100),
    UnitId.SPEED_HORSE: F(20115, 10),
    UnitId.SPEED_JET: F(24585),
}

_ANGLE = {
    UnitId.ANGLE_DEGREE: F(1),
    UnitId.ANGLE_RADIAN: F(5729577951308233, 10**14),
    UnitId.ANGLE_GRADIAN: F(9, 10),
}

_PRESSURE = {
    UnitId.PRESSURE_ATMOSPHERE: F(1),
    UnitId.PRESSURE_BAR: F(100000, 101325),
    UnitId.PRESSURE_KILOPASCAL: F(1000, 101325),
    UnitId.PRESSURE_MILLIMETER_OF_MERCURY: F(1, 760),
    UnitId.PRESSURE_PASCAL: F(1, 101325),
    UnitId.PRESSURE_PSI: F(10000, 146956),
}


@lru_cache(maxsize=1)
def scale_factors() -> Mapping[CategoryId, Mapping[int, F]]:
    """category id -> {unit id -> factor}. Built once, read-only."""
    tables: Dict[CategoryId, Dict[UnitId, F]] = {
        CategoryId.AREA: _AREA,
        CategoryId.DATA: _DATA,
        CategoryId.ENERGY: _ENERGY,
        CategoryId.LENGTH: _LENGTH,
        CategoryId.POWER: _POWER,
        CategoryId.TIME: _TIME,
        CategoryId.VOLUME: _VOLUME,
        CategoryId.WEIGHT: _WEIGHT,
        CategoryId.SPEED: _SPEED,
        CategoryId.ANGLE: _ANGLE,
        CategoryId.PRESSURE: _PRESSURE,
    }
    return MappingProxyType({cid: MappingProxyType(dict(t)) for cid, t in tables.items()})
