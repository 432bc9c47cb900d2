# unit_manager/ids.py
from enum import IntEnum


class CategoryId(IntEnum):
    VOLUME = 4
    LENGTH = 5
    WEIGHT = 6
    TEMPERATURE = 7
    ENERGY = 8
    AREA = 9
    SPEED = 10
    TIME = 11
    POWER = 12
    DATA = 13
    PRESSURE = 14
    ANGLE = 15
    CURRENCY = 16


class UnitId(IntEnum):
    """Flat, globally unique unit ids: category id * 100 + n."""

    # ---- Volume ----
    VOLUME_CUBIC_CENTIMETER = 401
    VOLUME_CUBIC_FOOT = 402
    VOLUME_CUBIC_INCH = 403
    VOLUME_CUBIC_METER = 404
    VOLUME_CUBIC_YARD = 405
    VOLUME_CUP_US = 406
    VOLUME_FLUID_OUNCE_UK = 407
    VOLUME_FLUID_OUNCE_US = 408
    VOLUME_GALLON_UK = 409
    VOLUME_GALLON_US = 410
    VOLUME_LITER = 411
    VOLUME_MILLILITER = 412
    VOLUME_PINT_UK = 413
    VOLUME_PINT_US = 414
    VOLUME_TABLESPOON_US = 415
    VOLUME_TEASPOON_US = 416
    VOLUME_QUART_UK = 417
    VOLUME_QUART_US = 418
    VOLUME_TEASPOON_UK = 419
    VOLUME_TABLESPOON_UK = 420
    VOLUME_COFFEE_CUP = 421
    VOLUME_BATHTUB = 422
    VOLUME_SWIMMING_POOL = 423

    # ---- Length ----
    LENGTH_CENTIMETER = 501
    LENGTH_FOOT = 502
    LENGTH_INCH = 503
    LENGTH_KILOMETER = 504
    LENGTH_METER = 505
    LENGTH_MICRON = 506
    LENGTH_MILE = 507
    LENGTH_MILLIMETER = 508
    LENGTH_NANOMETER = 509
    LENGTH_NAUTICAL_MILE = 510
    LENGTH_YARD = 511
    LENGTH_PAPERCLIP = 512
    LENGTH_HAND = 513
    LENGTH_JUMBO_JET = 514

    # ---- Weight ----
    WEIGHT_CARAT = 601
    WEIGHT_CENTIGRAM = 602
    WEIGHT_DECIGRAM = 603
    WEIGHT_DECAGRAM = 604
    WEIGHT_GRAM = 605
    WEIGHT_HECTOGRAM = 606
    WEIGHT_KILOGRAM = 607
    WEIGHT_LONG_TON = 608
    WEIGHT_MILLIGRAM = 609
    WEIGHT_OUNCE = 610
    WEIGHT_POUND = 611
    WEIGHT_SHORT_TON = 612
    WEIGHT_STONE = 613
    WEIGHT_TONNE = 614
    WEIGHT_SNOWFLAKE = 615
    WEIGHT_SOCCER_BALL = 616
    WEIGHT_ELEPHANT = 617
    WEIGHT_WHALE = 618

    # ---- Temperature ----
    TEMPERATURE_DEGREES_CELSIUS = 701
    TEMPERATURE_DEGREES_FAHRENHEIT = 702
    TEMPERATURE_KELVIN = 703

    # ---- Energy ----
    ENERGY_BRITISH_THERMAL_UNIT = 801
    ENERGY_CALORIE = 802
    ENERGY_ELECTRON_VOLT = 803
    ENERGY_FOOT_POUND = 804
    ENERGY_JOULE = 805
    ENERGY_KILOCALORIE = 806
    ENERGY_KILOJOULE = 807
    ENERGY_BATTERY = 808
    ENERGY_BANANA = 809
    ENERGY_SLICE_OF_CAKE = 810

    # ---- Area ----
    AREA_ACRE = 901
    AREA_HECTARE = 902
    AREA_SQUARE_CENTIMETER = 903
    AREA_SQUARE_FOOT = 904
    AREA_SQUARE_INCH = 905
    AREA_SQUARE_KILOMETER = 906
    AREA_SQUARE_METER = 907
    AREA_SQUARE_MILE = 908
    AREA_SQUARE_MILLIMETER = 909
    AREA_SQUARE_YARD = 910
    AREA_HAND = 911
    AREA_PAPER = 912
    AREA_SOCCER_FIELD = 913
    AREA_CASTLE = 914
    AREA_PYEONG = 915

    # ---- Speed ----
    SPEED_CENTIMETERS_PER_SECOND = 1001
    SPEED_FEET_PER_SECOND = 1002
    SPEED_KILOMETERS_PER_HOUR = 1003
    SPEED_KNOT = 1004
    SPEED_MACH = 1005
    SPEED_METERS_PER_SECOND = 1006
    SPEED_MILES_PER_HOUR = 1007
    SPEED_TURTLE = 1008
    SPEED_HORSE = 1009
    SPEED_JET = 1010

    # ---- Time ----
    TIME_DAY = 1101
    TIME_HOUR = 1102
    TIME_MICROSECOND = 1103
    TIME_MILLISECOND = 1104
    TIME_MINUTE = 1105
    TIME_SECOND = 1106
    TIME_WEEK = 1107
    TIME_YEAR = 1108

    # ---- Power ----
    POWER_BRITISH_THERMAL_UNIT_PER_MINUTE = 1201
    POWER_FOOT_POUND_PER_MINUTE = 1202
    POWER_HORSEPOWER = 1203
    POWER_KILOWATT = 1204
    POWER_WATT = 1205
    POWER_LIGHT_BULB = 1206
    POWER_HORSE = 1207
    POWER_TRAIN_ENGINE = 1208

    # ---- Data ----
    DATA_BIT = 1301
    DATA_BYTE = 1302
    DATA_EXABITS = 1303
    DATA_EXABYTES = 1304
    DATA_EXBIBITS = 1305
    DATA_EXBIBYTES = 1306
    DATA_GIBIBITS = 1307
    DATA_GIBIBYTES = 1308
    DATA_GIGABIT = 1309
    DATA_GIGABYTE = 1310
    DATA_KIBIBITS = 1311
    DATA_KIBIBYTES = 1312
    DATA_KILOBIT = 1313
    DATA_KILOBYTE = 1314
    DATA_MEBIBITS = 1315
    DATA_MEBIBYTES = 1316
    DATA_MEGABIT = 1317
    DATA_MEGABYTE = 1318
    DATA_PEBIBITS = 1319
    DATA_PEBIBYTES = 1320
    DATA_PETABIT = 1321
    DATA_PETABYTE = 1322
    DATA_TEBIBITS = 1323
    DATA_TEBIBYTES = 1324
    DATA_TERABIT = 1325
    DATA_TERABYTE = 1326
    DATA_YOBIBITS = 1327
    DATA_YOBIBYTES = 1328
    DATA_YOTTABIT = 1329
    DATA_YOTTABYTE = 1330
    DATA_ZEBIBITS = 1331
    DATA_ZEBIBYTES = 1332
    DATA_ZETABITS = 1333
    DATA_ZETABYTES = 1334
    DATA_FLOPPY_DISK = 1335
    DATA_CD = 1336
    DATA_DVD = 1337

    # ---- Pressure ----
    PRESSURE_ATMOSPHERE = 1401
    PRESSURE_BAR = 1402
    PRESSURE_KILOPASCAL = 1403
    PRESSURE_MILLIMETER_OF_MERCURY = 1404
    PRESSURE_PASCAL = 1405
    PRESSURE_PSI = 1406

    # ---- Angle ----
    ANGLE_DEGREE = 1501
    ANGLE_RADIAN = 1502
    ANGLE_GRADIAN = 1503

    @property
    def category(self) -> CategoryId:
        return CategoryId(self.value // 100)
