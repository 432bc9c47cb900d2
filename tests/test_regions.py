# tests/test_regions.py

import pytest

from core.app_bus import AppBus
from core.data_loader import UnitConverterDataLoader
from unit_manager.ids import CategoryId, UnitId
from unit_manager.regions import (
    CELSIUS,
    FAHRENHEIT,
    KILOWATT,
    SI,
    US_CUSTOMARY,
    WATT,
    region_profile,
)
from unit_manager.registry import get_active_units


def _loader(region, **kwargs):
    loader = UnitConverterDataLoader(region, bus=AppBus(), **kwargs)
    loader.load_data()
    return loader


def _ids(loader, category):
    return {u.id for u in loader.load_ordered_units(category)}


@pytest.mark.parametrize("code", ["US", "FM", "MH", "PW", "LR"])
def test_us_customary_regions(code):
    profile = region_profile(code)
    assert profile.has(US_CUSTOMARY) and profile.has(FAHRENHEIT)
    assert not profile.has(SI) and not profile.has(CELSIUS)


@pytest.mark.parametrize("code", ["BS", "KY"])
def test_fahrenheit_only_regions(code):
    profile = region_profile(code)
    assert profile.has(FAHRENHEIT) and profile.has(SI)


def test_unknown_region_defaults_to_si():
    profile = region_profile("fr")
    assert profile.code == "FR"
    assert profile.traits == frozenset({SI, CELSIUS, KILOWATT})
    assert profile.optional_units == frozenset()


def test_gb_prefers_watt():
    profile = region_profile("GB")
    assert profile.has(WATT) and not profile.has(KILOWATT)


def test_pyeong_only_for_korea():
    for code in ("US", "DE", "JP"):
        assert UnitId.AREA_PYEONG not in _ids(_loader(code), CategoryId.AREA)
    for code in ("KR", "KP"):
        assert UnitId.AREA_PYEONG in _ids(_loader(code), CategoryId.AREA)


def test_hidden_unit_factor_does_not_leak_into_ratios():
    loader = _loader("US")
    for unit in loader.load_ordered_units(CategoryId.AREA):
        assert UnitId.AREA_PYEONG not in {u.id for u in loader.load_ordered_ratios(unit)}


def test_pyeong_ratio_when_enabled():
    loader = _loader("KR")
    assert loader.convert(121, UnitId.AREA_PYEONG, UnitId.AREA_SQUARE_METER) == 400


def test_whimsical_units_can_be_hidden():
    shown = _loader("US")
    hidden = _loader("US", include_whimsical=False)
    assert UnitId.WEIGHT_WHALE in _ids(shown, CategoryId.WEIGHT)
    assert UnitId.WEIGHT_WHALE not in _ids(hidden, CategoryId.WEIGHT)
    for category in hidden.load_ordered_categories():
        assert not any(u.is_whimsical for u in hidden.load_ordered_units(category))
    # the scale factor still exists, it simply produces no entries
    kg = hidden.load_ordered_ratios(UnitId.WEIGHT_KILOGRAM)
    assert UnitId.WEIGHT_WHALE not in {u.id for u in kg}


def test_default_units_follow_region():
    us = _loader("US")
    de = _loader("DE")
    inch_us = us.find_unit(UnitId.LENGTH_INCH)
    inch_de = de.find_unit(UnitId.LENGTH_INCH)
    assert inch_us.is_conversion_target and not inch_us.is_conversion_source
    assert inch_de.is_conversion_source and not inch_de.is_conversion_target

    assert us.find_unit(UnitId.TEMPERATURE_DEGREES_FAHRENHEIT).is_conversion_target
    assert de.find_unit(UnitId.TEMPERATURE_DEGREES_CELSIUS).is_conversion_target


def test_power_source_unit_by_region():
    gb = _loader("GB")
    us = _loader("US")
    assert gb.find_unit(UnitId.POWER_WATT).is_conversion_source
    assert not gb.find_unit(UnitId.POWER_KILOWATT).is_conversion_source
    assert us.find_unit(UnitId.POWER_KILOWATT).is_conversion_source


def test_exactly_one_default_pair_per_category():
    for code in ("US", "GB", "DE", "KR", "BS"):
        active = get_active_units(region_profile(code))
        for category, units in active.items():
            if category.id == CategoryId.CURRENCY:
                assert units == []
                continue
            sources = [ou for ou in units if ou.unit.is_conversion_source]
            targets = [ou for ou in units if ou.unit.is_conversion_target]
            assert len(sources) == 1, (code, category.name)
            assert len(targets) <= 1, (code, category.name)


def test_region_change_rebuilds_unit_lists():
    loader = _loader("US")
    assert UnitId.AREA_PYEONG not in _ids(loader, CategoryId.AREA)
    loader.set_region("KR")
    assert loader.region == "KR"
    assert UnitId.AREA_PYEONG in _ids(loader, CategoryId.AREA)
