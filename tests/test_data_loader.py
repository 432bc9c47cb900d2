# tests/test_data_loader.py

from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType

import pytest

from core.app_bus import AppBus
from core.data_loader import UnitConverterDataLoader
from core.errors import MalformedUnitDataError, UnknownCategoryError, UnknownUnitError
from core.units import Category, ConversionData, LinearScale, Unit
from unit_manager import registry
from unit_manager.catalog import UNITS
from unit_manager.ids import CategoryId, UnitId
from unit_manager.scale_factors import scale_factors


def _loader(region="US", **kwargs) -> UnitConverterDataLoader:
    loader = UnitConverterDataLoader(region, bus=AppBus(), **kwargs)
    loader.load_data()
    return loader


def _linear_categories(loader):
    return [
        c for c in loader.load_ordered_categories()
        if c.id not in (CategoryId.CURRENCY, CategoryId.TEMPERATURE)
    ]


# -----------------------------
# Categories
# -----------------------------

def test_categories_in_registry_order():
    loader = _loader()
    ids = [c.id for c in loader.load_ordered_categories()]
    assert ids == [16, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15]


def test_only_temperature_supports_negative():
    loader = _loader()
    negative = [c.id for c in loader.load_ordered_categories() if c.supports_negative]
    assert negative == [CategoryId.TEMPERATURE]


def test_supports_category_excludes_currency():
    loader = _loader()
    for category in loader.load_ordered_categories():
        expected = category.id != CategoryId.CURRENCY
        assert loader.supports_category(category) is expected
    assert loader.supports_category(Category(999)) is False


def test_supports_category_before_load():
    """Falls back to the registry when nothing has been built yet."""
    loader = UnitConverterDataLoader("US", bus=AppBus())
    assert loader.supports_category(CategoryId.LENGTH)
    assert not loader.supports_category(CategoryId.CURRENCY)


def test_currency_has_no_units_and_no_error():
    loader = _loader()
    assert loader.load_ordered_units(CategoryId.CURRENCY) == []


# -----------------------------
# Units and ordering
# -----------------------------

def test_units_sorted_by_relative_order():
    loader = _loader()
    for category in _linear_categories(loader):
        specs = {s.id: s.order for s in UNITS[CategoryId(category.id)]}
        orders = [specs[u.id] for u in loader.load_ordered_units(category)]
        assert orders == sorted(orders)


def test_equal_orders_keep_registry_order():
    """Data: Gigabyte and Floppy disk share order 13; Gigabyte is registered first."""
    loader = _loader()
    ids = [u.id for u in loader.load_ordered_units(CategoryId.DATA)]
    assert ids.index(UnitId.DATA_GIGABYTE) + 1 == ids.index(UnitId.DATA_FLOPPY_DISK)
    assert ids.index(UnitId.DATA_GIBIBYTES) + 1 == ids.index(UnitId.DATA_CD)
    assert ids.index(UnitId.DATA_TERABIT) + 1 == ids.index(UnitId.DATA_DVD)


def test_length_display_order():
    loader = _loader()
    abbreviations = [u.abbreviation for u in loader.load_ordered_units(CategoryId.LENGTH)]
    assert abbreviations[:6] == ["nm", "µm", "mm", "cm", "m", "km"]


def test_unknown_category_raises():
    loader = _loader()
    with pytest.raises(UnknownCategoryError):
        loader.load_ordered_units(Category(999))


def test_unknown_unit_raises():
    loader = _loader()
    with pytest.raises(UnknownUnitError):
        loader.load_ordered_ratios(Unit(999999))


def test_lookups_before_load_raise_not_found():
    loader = UnitConverterDataLoader("US", bus=AppBus())
    with pytest.raises(UnknownCategoryError):
        loader.load_ordered_units(CategoryId.LENGTH)


# -----------------------------
# Ratios
# -----------------------------

def test_identity_for_every_linear_unit():
    loader = _loader()
    for category in _linear_categories(loader):
        for unit in loader.load_ordered_units(category):
            assert loader.load_ordered_ratios(unit)[unit] == ConversionData(Fraction(1), Fraction(0), False)


def test_reciprocal_ratios_multiply_to_one():
    loader = _loader()
    for category in _linear_categories(loader):
        units = loader.load_ordered_units(category)
        for a in units:
            row = loader.load_ordered_ratios(a)
            for b in units:
                assert row[b].ratio * loader.load_ordered_ratios(b)[a].ratio == 1


def test_derived_ratios_match_factor_table():
    loader = _loader()
    for category in _linear_categories(loader):
        factors = scale_factors()[CategoryId(category.id)]
        units = loader.load_ordered_units(category)
        for a in units:
            row = loader.load_ordered_ratios(a)
            for b in units:
                assert row[b].ratio == factors[a.id] / factors[b.id]
                assert row[b].offset == 0
                assert row[b].offset_first is False


def test_ratio_rows_stay_inside_their_category():
    loader = _loader()
    for category in loader.load_ordered_categories():
        units = set(loader.load_ordered_units(category))
        for unit in units:
            assert set(loader.load_ordered_ratios(unit)) == units


def test_every_scaled_unit_is_positive():
    for table in scale_factors().values():
        for factor in table.values():
            assert isinstance(factor, Fraction)
            assert factor > 0


@pytest.mark.parametrize(
    "value, src, dst, expected",
    [
        (1, UnitId.LENGTH_FOOT, UnitId.LENGTH_INCH, 12),
        (1, UnitId.LENGTH_MILE, UnitId.LENGTH_FOOT, 5280),
        (1, UnitId.WEIGHT_POUND, UnitId.WEIGHT_OUNCE, 16),
        (1, UnitId.WEIGHT_STONE, UnitId.WEIGHT_POUND, 14),
        (1, UnitId.TIME_WEEK, UnitId.TIME_HOUR, 168),
        (1, UnitId.DATA_BYTE, UnitId.DATA_BIT, 8),
        (1, UnitId.DATA_KIBIBYTES, UnitId.DATA_BYTE, 1024),
        (1, UnitId.DATA_ZEBIBYTES, UnitId.DATA_EXBIBYTES, 1024),
        (1, UnitId.DATA_YOBIBITS, UnitId.DATA_ZEBIBITS, 1024),
        (1, UnitId.VOLUME_GALLON_US, UnitId.VOLUME_QUART_US, 4),
        (1, UnitId.VOLUME_LITER, UnitId.VOLUME_MILLILITER, 1000),
        (1, UnitId.AREA_SQUARE_FOOT, UnitId.AREA_SQUARE_INCH, 144),
        (1, UnitId.AREA_SQUARE_MILE, UnitId.AREA_ACRE, 640),
        (1, UnitId.LENGTH_METER, UnitId.LENGTH_NANOMETER, 10**9),
        (1, UnitId.WEIGHT_GRAM, UnitId.WEIGHT_CENTIGRAM, 100),
        (1, UnitId.SPEED_METERS_PER_SECOND, UnitId.SPEED_KILOMETERS_PER_HOUR, Fraction(18, 5)),
        (1, UnitId.POWER_KILOWATT, UnitId.POWER_WATT, 1000),
        (60, UnitId.POWER_BRITISH_THERMAL_UNIT_PER_MINUTE, UnitId.POWER_WATT, Fraction(10550559, 10000)),
        (1, UnitId.PRESSURE_ATMOSPHERE, UnitId.PRESSURE_PASCAL, 101325),
        (400, UnitId.ANGLE_GRADIAN, UnitId.ANGLE_DEGREE, 360),
    ],
)
def test_known_conversions_are_exact(value, src, dst, expected):
    loader = _loader()
    assert loader.convert(value, src, dst) == expected


def test_convert_across_categories_raises():
    loader = _loader()
    with pytest.raises(UnknownUnitError):
        loader.convert(1, UnitId.LENGTH_METER, UnitId.WEIGHT_KILOGRAM)


def test_find_unit_returns_full_unit():
    loader = _loader()
    meter = loader.find_unit(UnitId.LENGTH_METER)
    assert meter.abbreviation == "m"
    with pytest.raises(UnknownUnitError):
        loader.find_unit(1)


# -----------------------------
# Rebuild and signals
# -----------------------------

def test_load_data_replaces_graph_wholesale():
    loader = _loader()
    before = loader.graph
    before_units = loader.load_ordered_units(CategoryId.LENGTH)
    loader.load_data()
    assert loader.graph is not before
    assert loader.load_ordered_units(CategoryId.LENGTH) == before_units


def test_returned_lists_are_copies():
    loader = _loader()
    units = loader.load_ordered_units(CategoryId.LENGTH)
    units.clear()
    assert loader.load_ordered_units(CategoryId.LENGTH)


def test_signals_emitted_after_publish():
    bus = AppBus()
    loader = UnitConverterDataLoader("US", bus=bus)
    seen = []
    bus.ratiosRebuilt.connect(lambda code: seen.append(("rebuilt", code, len(loader.graph.ratios))))
    bus.regionChanged.connect(lambda code: seen.append(("region", code)))

    loader.load_data()
    assert loader.set_region("kr") is True
    assert loader.set_region("KR") is False

    assert seen[0][:2] == ("rebuilt", "US")
    assert seen[0][2] > 0
    assert ("region", "KR") in seen
    assert seen[-1][:2] == ("rebuilt", "KR")
    assert len(seen) == 3


def test_failed_region_change_keeps_previous_state(monkeypatch):
    loader = _loader("US")
    before = loader.graph

    rules = dict(registry.conversion_rules())
    area = dict(scale_factors()[CategoryId.AREA])
    area[UnitId.AREA_PYEONG] = Fraction(0)
    rules[int(CategoryId.AREA)] = LinearScale(area)
    monkeypatch.setattr(registry, "conversion_rules", lambda: MappingProxyType(rules))

    with pytest.raises(MalformedUnitDataError):
        loader.set_region("KR")
    assert loader.region == "US"
    assert loader.graph is before

    monkeypatch.undo()
    assert loader.set_region("KR") is True
    assert loader.region == "KR"
    ids = {u.id for u in loader.load_ordered_units(CategoryId.AREA)}
    assert UnitId.AREA_PYEONG in ids


def test_convert_rejects_unsupported_number_types():
    loader = _loader()
    with pytest.raises(TypeError, match="int, Fraction or float"):
        loader.convert(Decimal("1.5"), UnitId.LENGTH_FOOT, UnitId.LENGTH_INCH)
    assert loader.convert(1.5, UnitId.LENGTH_FOOT, UnitId.LENGTH_INCH) == pytest.approx(18.0)


@pytest.mark.parametrize(
    "src, dst, expected",
    [
        (UnitId.LENGTH_MILLIMETER, UnitId.LENGTH_MICRON, 1000),
        (UnitId.LENGTH_MICRON, UnitId.LENGTH_NANOMETER, 1000),
        (UnitId.WEIGHT_GRAM, UnitId.WEIGHT_MILLIGRAM, 1000),
        (UnitId.WEIGHT_SNOWFLAKE, UnitId.WEIGHT_MILLIGRAM, 2),
        (UnitId.TIME_SECOND, UnitId.TIME_MICROSECOND, 10**6),
        (UnitId.AREA_SQUARE_CENTIMETER, UnitId.AREA_SQUARE_MILLIMETER, 100),
        (UnitId.AREA_SQUARE_YARD, UnitId.AREA_SQUARE_FOOT, 9),
        (UnitId.DATA_KILOBYTE, UnitId.DATA_BYTE, 1000),
        (UnitId.DATA_GIBIBYTES, UnitId.DATA_MEBIBYTES, 1024),
        (UnitId.DATA_EXBIBYTES, UnitId.DATA_PEBIBYTES, 1024),
        (UnitId.DATA_CD, UnitId.DATA_MEBIBYTES, 700),
        (UnitId.ENERGY_ELECTRON_VOLT, UnitId.ENERGY_JOULE, Fraction(1602176565, 10**28)),
    ],
)
def test_corrected_constants_match_named_units(src, dst, expected):
    assert _loader().convert(1, src, dst) == expected
