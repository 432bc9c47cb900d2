# unit_manager/catalog.py
"""
Declarative unit registry.

Each category lists its units in registry (insertion) order; ``order`` is the
display position. ``source`` / ``target`` are either constants or the name of
a region trait (see unit_manager.regions). ``whimsical`` units are the
novelty units (bananas, whales, ...). ``optional`` units only exist for
regions that enable them explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from unit_manager.ids import CategoryId, UnitId
from unit_manager.regions import CELSIUS, FAHRENHEIT, KILOWATT, SI, US_CUSTOMARY, WATT

Flag = Union[bool, str]


@dataclass(frozen=True)
class CategorySpec:
    id: CategoryId
    name: str
    supports_negative: bool = False


@dataclass(frozen=True)
class UnitSpec:
    id: UnitId
    name: str
    abbreviation: str
    order: int
    source: Flag = False
    target: Flag = False
    whimsical: bool = False
    optional: bool = False


# Registry order
CATEGORIES: Tuple[CategorySpec, ...] = (
    CategorySpec(CategoryId.CURRENCY, "Currency"),
    CategorySpec(CategoryId.VOLUME, "Volume"),
    CategorySpec(CategoryId.LENGTH, "Length"),
    CategorySpec(CategoryId.WEIGHT, "Weight and Mass"),
    CategorySpec(CategoryId.TEMPERATURE, "Temperature", supports_negative=True),
    CategorySpec(CategoryId.ENERGY, "Energy"),
    CategorySpec(CategoryId.AREA, "Area"),
    CategorySpec(CategoryId.SPEED, "Speed"),
    CategorySpec(CategoryId.TIME, "Time"),
    CategorySpec(CategoryId.POWER, "Power"),
    CategorySpec(CategoryId.DATA, "Data"),
    CategorySpec(CategoryId.PRESSURE, "Pressure"),
    CategorySpec(CategoryId.ANGLE, "Angle"),
)


UNITS: Dict[CategoryId, Tuple[UnitSpec, ...]] = {
    CategoryId.AREA: (
        UnitSpec(UnitId.AREA_ACRE, "Acres", "ac", 9),
        UnitSpec(UnitId.AREA_HECTARE, "Hectares", "ha", 4),
        UnitSpec(UnitId.AREA_SQUARE_CENTIMETER, "Square centimeters", "cm²", 2),
        UnitSpec(UnitId.AREA_SQUARE_FOOT, "Square feet", "ft²", 7, source=SI, target=US_CUSTOMARY),
        UnitSpec(UnitId.AREA_SQUARE_INCH, "Square inches", "in²", 6),
        UnitSpec(UnitId.AREA_SQUARE_KILOMETER, "Square kilometers", "km²", 5),
        UnitSpec(UnitId.AREA_SQUARE_METER, "Square meters", "m²", 3, source=US_CUSTOMARY, target=SI),
        UnitSpec(UnitId.AREA_SQUARE_MILE, "Square miles", "mi²", 10),
        UnitSpec(UnitId.AREA_SQUARE_MILLIMETER, "Square millimeters", "mm²", 1),
        UnitSpec(UnitId.AREA_SQUARE_YARD, "Square yards", "yd²", 8),
        UnitSpec(UnitId.AREA_HAND, "Hands", "hands", 11, whimsical=True),
        UnitSpec(UnitId.AREA_PAPER, "Papers", "papers", 12, whimsical=True),
        UnitSpec(UnitId.AREA_SOCCER_FIELD, "Soccer fields", "soccer fields", 13, whimsical=True),
        UnitSpec(UnitId.AREA_CASTLE, "Castles", "castles", 14, whimsical=True),
        UnitSpec(UnitId.AREA_PYEONG, "Pyeong", "pyeong", 15, optional=True),
    ),
    CategoryId.DATA: (
        UnitSpec(UnitId.DATA_BIT, "Bits", "b", 1),
        UnitSpec(UnitId.DATA_BYTE, "Bytes", "B", 2),
        UnitSpec(UnitId.DATA_EXABITS, "Exabits", "Eb", 23),
        UnitSpec(UnitId.DATA_EXABYTES, "Exabytes", "EB", 25),
        UnitSpec(UnitId.DATA_EXBIBITS, "Exbibits", "Eib", 24),
        UnitSpec(UnitId.DATA_EXBIBYTES, "Exbibytes", "EiB", 26),
        UnitSpec(UnitId.DATA_GIBIBITS, "Gibibits", "Gib", 12),
        UnitSpec(UnitId.DATA_GIBIBYTES, "Gibibytes", "GiB", 14),
        UnitSpec(UnitId.DATA_GIGABIT, "Gigabits", "Gb", 11),
        UnitSpec(UnitId.DATA_GIGABYTE, "Gigabytes", "GB", 13, source=True),
        UnitSpec(UnitId.DATA_KIBIBITS, "Kibibits", "Kib", 4),
        UnitSpec(UnitId.DATA_KIBIBYTES, "Kibibytes", "KiB", 6),
        UnitSpec(UnitId.DATA_KILOBIT, "Kilobits", "Kb", 3),
        UnitSpec(UnitId.DATA_KILOBYTE, "Kilobytes", "KB", 5),
        UnitSpec(UnitId.DATA_MEBIBITS, "Mebibits", "Mib", 8),
        UnitSpec(UnitId.DATA_MEBIBYTES, "Mebibytes", "MiB", 10),
        UnitSpec(UnitId.DATA_MEGABIT, "Megabits", "Mb", 7),
        UnitSpec(UnitId.DATA_MEGABYTE, "Megabytes", "MB", 9, target=True),
        UnitSpec(UnitId.DATA_PEBIBITS, "Pebibits", "Pib", 20),
        UnitSpec(UnitId.DATA_PEBIBYTES, "Pebibytes", "PiB", 22),
        UnitSpec(UnitId.DATA_PETABIT, "Petabits", "Pb", 19),
        UnitSpec(UnitId.DATA_PETABYTE, "Petabytes", "PB", 21),
        UnitSpec(UnitId.DATA_TEBIBITS, "Tebibits", "Tib", 16),
        UnitSpec(UnitId.DATA_TEBIBYTES, "Tebibytes", "TiB", 18),
        UnitSpec(UnitId.DATA_TERABIT, "Terabits", "Tb", 15),
        UnitSpec(UnitId.DATA_TERABYTE, "Terabytes", "TB", 17),
        UnitSpec(UnitId.DATA_YOBIBITS, "Yobibits", "Yib", 32),
        UnitSpec(UnitId.DATA_YOBIBYTES, "Yobibytes", "YiB", 34),
        UnitSpec(UnitId.DATA_YOTTABIT, "Yottabits", "Yb", 31),
        UnitSpec(UnitId.DATA_YOTTABYTE, "Yottabytes", "YB", 33),
        UnitSpec(UnitId.DATA_ZEBIBITS, "Zebibits", "Zib", 28),
        UnitSpec(UnitId.DATA_ZEBIBYTES, "Zebibytes", "ZiB", 30),
        UnitSpec(UnitId.DATA_ZETABITS, "Zettabits", "Zb", 27),
        UnitSpec(UnitId.DATA_ZETABYTES, "Zettabytes", "ZB", 29),
        UnitSpec(UnitId.DATA_FLOPPY_DISK, "Floppy disks", "floppy disks", 13, whimsical=True),
        UnitSpec(UnitId.DATA_CD, "CDs", "CDs", 14, whimsical=True),
        UnitSpec(UnitId.DATA_DVD, "DVDs", "DVDs", 15, whimsical=True),
    ),
    CategoryId.ENERGY: (
        UnitSpec(UnitId.ENERGY_BRITISH_THERMAL_UNIT, "British thermal units", "BTU", 7),
        UnitSpec(UnitId.ENERGY_CALORIE, "Thermal calories", "cal", 4),
        UnitSpec(UnitId.ENERGY_ELECTRON_VOLT, "Electron volts", "eV", 1),
        UnitSpec(UnitId.ENERGY_FOOT_POUND, "Foot-pounds", "ft•lb", 6),
        UnitSpec(UnitId.ENERGY_JOULE, "Joules", "J", 2, source=True),
        UnitSpec(UnitId.ENERGY_KILOCALORIE, "Food calories", "kcal", 5, target=True),
        UnitSpec(UnitId.ENERGY_KILOJOULE, "Kilojoules", "kJ", 3),
        UnitSpec(UnitId.ENERGY_BATTERY, "AA batteries", "AA batteries", 8, whimsical=True),
        UnitSpec(UnitId.ENERGY_BANANA, "Bananas", "bananas", 9, whimsical=True),
        UnitSpec(UnitId.ENERGY_SLICE_OF_CAKE, "Slices of cake", "slices of cake", 10, whimsical=True),
    ),
    CategoryId.LENGTH: (
        UnitSpec(UnitId.LENGTH_CENTIMETER, "Centimeters", "cm", 4, source=US_CUSTOMARY, target=SI),
        UnitSpec(UnitId.LENGTH_FOOT, "Feet", "ft", 8),
        UnitSpec(UnitId.LENGTH_INCH, "Inches", "in", 7, source=SI, target=US_CUSTOMARY),
        UnitSpec(UnitId.LENGTH_KILOMETER, "Kilometers", "km", 6),
        UnitSpec(UnitId.LENGTH_METER, "Meters", "m", 5),
        UnitSpec(UnitId.LENGTH_MICRON, "Microns", "µm", 2),
        UnitSpec(UnitId.LENGTH_MILE, "Miles", "mi", 10),
        UnitSpec(UnitId.LENGTH_MILLIMETER, "Millimeters", "mm", 3),
        UnitSpec(UnitId.LENGTH_NANOMETER, "Nanometers", "nm", 1),
        UnitSpec(UnitId.LENGTH_NAUTICAL_MILE, "Nautical miles", "NM", 11),
        UnitSpec(UnitId.LENGTH_YARD, "Yards", "yd", 9),
        UnitSpec(UnitId.LENGTH_PAPERCLIP, "Paperclips", "paperclips", 12, whimsical=True),
        UnitSpec(UnitId.LENGTH_HAND, "Hands", "hands", 13, whimsical=True),
        UnitSpec(UnitId.LENGTH_JUMBO_JET, "Jumbo jets", "jumbo jets", 14, whimsical=True),
    ),
    CategoryId.POWER: (
        UnitSpec(UnitId.POWER_BRITISH_THERMAL_UNIT_PER_MINUTE, "BTUs/minute", "BTU/min", 5),
        UnitSpec(UnitId.POWER_FOOT_POUND_PER_MINUTE, "Foot-pounds/minute", "ft•lb/min", 4),
        UnitSpec(UnitId.POWER_HORSEPOWER, "Horsepower (US)", "hp", 3, target=True),
        UnitSpec(UnitId.POWER_KILOWATT, "Kilowatts", "kW", 2, source=KILOWATT),
        UnitSpec(UnitId.POWER_WATT, "Watts", "W", 1, source=WATT),
        UnitSpec(UnitId.POWER_LIGHT_BULB, "Light bulbs", "light bulbs", 6, whimsical=True),
        UnitSpec(UnitId.POWER_HORSE, "Horses", "horses", 7, whimsical=True),
        UnitSpec(UnitId.POWER_TRAIN_ENGINE, "Train engines", "train engines", 8, whimsical=True),
    ),
    CategoryId.TEMPERATURE: (
        UnitSpec(UnitId.TEMPERATURE_DEGREES_CELSIUS, "Celsius", "°C", 1, source=FAHRENHEIT, target=CELSIUS),
        UnitSpec(UnitId.TEMPERATURE_DEGREES_FAHRENHEIT, "Fahrenheit", "°F", 2, source=CELSIUS, target=FAHRENHEIT),
        UnitSpec(UnitId.TEMPERATURE_KELVIN, "Kelvin", "K", 3),
    ),
    CategoryId.TIME: (
        UnitSpec(UnitId.TIME_DAY, "Days", "d", 6),
        UnitSpec(UnitId.TIME_HOUR, "Hours", "h", 5, source=True),
        UnitSpec(UnitId.TIME_MICROSECOND, "Microseconds", "µs", 1),
        UnitSpec(UnitId.TIME_MILLISECOND, "Milliseconds", "ms", 2),
        UnitSpec(UnitId.TIME_MINUTE, "Minutes", "min", 4, target=True),
        UnitSpec(UnitId.TIME_SECOND, "Seconds", "s", 3),
        UnitSpec(UnitId.TIME_WEEK, "Weeks", "wk", 7),
        UnitSpec(UnitId.TIME_YEAR, "Years", "yr", 8),
    ),
    CategoryId.SPEED: (
        UnitSpec(UnitId.SPEED_CENTIMETERS_PER_SECOND, "Centimeters per second", "cm/s", 1),
        UnitSpec(UnitId.SPEED_FEET_PER_SECOND, "Feet per second", "ft/s", 4),
        UnitSpec(UnitId.SPEED_KILOMETERS_PER_HOUR, "Kilometers per hour", "km/h", 3, source=US_CUSTOMARY, target=SI),
        UnitSpec(UnitId.SPEED_KNOT, "Knots", "kn", 6),
        UnitSpec(UnitId.SPEED_MACH, "Mach", "M", 7),
        UnitSpec(UnitId.SPEED_METERS_PER_SECOND, "Meters per second", "m/s", 2),
        UnitSpec(UnitId.SPEED_MILES_PER_HOUR, "Miles per hour", "mph", 5, source=SI, target=US_CUSTOMARY),
        UnitSpec(UnitId.SPEED_TURTLE, "Turtles", "turtles", 8, whimsical=True),
        UnitSpec(UnitId.SPEED_HORSE, "Horses", "horses", 9, whimsical=True),
        UnitSpec(UnitId.SPEED_JET, "Jets", "jets", 10, whimsical=True),
    ),
    CategoryId.VOLUME: (
        UnitSpec(UnitId.VOLUME_CUBIC_CENTIMETER, "Cubic centimeters", "cm³", 2),
        UnitSpec(UnitId.VOLUME_CUBIC_FOOT, "Cubic feet", "ft³", 13),
        UnitSpec(UnitId.VOLUME_CUBIC_INCH, "Cubic inches", "in³", 12),
        UnitSpec(UnitId.VOLUME_CUBIC_METER, "Cubic meters", "m³", 4),
        UnitSpec(UnitId.VOLUME_CUBIC_YARD, "Cubic yards", "yd³", 14),
        UnitSpec(UnitId.VOLUME_CUP_US, "Cups (US)", "cup (US)", 8),
        UnitSpec(UnitId.VOLUME_FLUID_OUNCE_UK, "Fluid ounces (UK)", "fl oz (UK)", 17),
        UnitSpec(UnitId.VOLUME_FLUID_OUNCE_US, "Fluid ounces (US)", "fl oz (US)", 7),
        UnitSpec(UnitId.VOLUME_GALLON_UK, "Gallons (UK)", "gal (UK)", 20),
        UnitSpec(UnitId.VOLUME_GALLON_US, "Gallons (US)", "gal (US)", 11),
        UnitSpec(UnitId.VOLUME_LITER, "Liters", "L", 3),
        UnitSpec(UnitId.VOLUME_MILLILITER, "Milliliters", "mL", 1, source=US_CUSTOMARY, target=SI),
        UnitSpec(UnitId.VOLUME_PINT_UK, "Pints (UK)", "pt (UK)", 18),
        UnitSpec(UnitId.VOLUME_PINT_US, "Pints (US)", "pt (US)", 9),
        UnitSpec(UnitId.VOLUME_TABLESPOON_US, "Tablespoons (US)", "tbsp (US)", 6),
        UnitSpec(UnitId.VOLUME_TEASPOON_US, "Teaspoons (US)", "tsp (US)", 5, source=SI, target=US_CUSTOMARY),
        UnitSpec(UnitId.VOLUME_QUART_UK, "Quarts (UK)", "qt (UK)", 19),
        UnitSpec(UnitId.VOLUME_QUART_US, "Quarts (US)", "qt (US)", 10),
        UnitSpec(UnitId.VOLUME_TEASPOON_UK, "Teaspoons (UK)", "tsp (UK)", 15),
        UnitSpec(UnitId.VOLUME_TABLESPOON_UK, "Tablespoons (UK)", "tbsp (UK)", 16),
        UnitSpec(UnitId.VOLUME_COFFEE_CUP, "Coffee cups", "coffee cups", 22, whimsical=True),
        UnitSpec(UnitId.VOLUME_BATHTUB, "Bathtubs", "bathtubs", 23, whimsical=True),
        UnitSpec(UnitId.VOLUME_SWIMMING_POOL, "Swimming pools", "swimming pools", 24, whimsical=True),
    ),
    CategoryId.WEIGHT: (
        UnitSpec(UnitId.WEIGHT_CARAT, "Carats", "ct", 1),
        UnitSpec(UnitId.WEIGHT_CENTIGRAM, "Centigrams", "cg", 3),
        UnitSpec(UnitId.WEIGHT_DECIGRAM, "Decigrams", "dg", 4),
        UnitSpec(UnitId.WEIGHT_DECAGRAM, "Decagrams", "dag", 6),
        UnitSpec(UnitId.WEIGHT_GRAM, "Grams", "g", 5),
        UnitSpec(UnitId.WEIGHT_HECTOGRAM, "Hectograms", "hg", 7),
        UnitSpec(UnitId.WEIGHT_KILOGRAM, "Kilograms", "kg", 8, source=US_CUSTOMARY, target=SI),
        UnitSpec(UnitId.WEIGHT_LONG_TON, "Long tons (UK)", "ton (UK)", 14),
        UnitSpec(UnitId.WEIGHT_MILLIGRAM, "Milligrams", "mg", 2),
        UnitSpec(UnitId.WEIGHT_OUNCE, "Ounces", "oz", 10),
        UnitSpec(UnitId.WEIGHT_POUND, "Pounds", "lb", 11, source=SI, target=US_CUSTOMARY),
        UnitSpec(UnitId.WEIGHT_SHORT_TON, "Short tons (US)", "ton (US)", 13),
        UnitSpec(UnitId.WEIGHT_STONE, "Stone", "st", 12),
        UnitSpec(UnitId.WEIGHT_TONNE, "Metric tonnes", "t", 9),
        UnitSpec(UnitId.WEIGHT_SNOWFLAKE, "Snowflakes", "snowflakes", 15, whimsical=True),
        UnitSpec(UnitId.WEIGHT_SOCCER_BALL, "Soccer balls", "soccer balls", 16, whimsical=True),
        UnitSpec(UnitId.WEIGHT_ELEPHANT, "Elephants", "elephants", 17, whimsical=True),
        UnitSpec(UnitId.WEIGHT_WHALE, "Whales", "whales", 18, whimsical=True),
    ),
    CategoryId.PRESSURE: (
        UnitSpec(UnitId.PRESSURE_ATMOSPHERE, "Atmospheres", "atm", 1, source=True),
        UnitSpec(UnitId.PRESSURE_BAR, "Bars", "ba", 2, target=True),
        UnitSpec(UnitId.PRESSURE_KILOPASCAL, "Kilopascals", "kPa", 3),
        UnitSpec(UnitId.PRESSURE_MILLIMETER_OF_MERCURY, "Millimeters of mercury", "mmHg", 4),
        UnitSpec(UnitId.PRESSURE_PASCAL, "Pascals", "Pa", 5),
        UnitSpec(UnitId.PRESSURE_PSI, "Pounds per square inch", "psi", 6),
    ),
    CategoryId.ANGLE: (
        UnitSpec(UnitId.ANGLE_DEGREE, "Degrees", "deg", 1, source=True),
        UnitSpec(UnitId.ANGLE_RADIAN, "Radians", "rad", 2, target=True),
        UnitSpec(UnitId.ANGLE_GRADIAN, "Gradians", "grad", 3),
    ),
}
