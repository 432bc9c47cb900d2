# unit_manager/registry.py
from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from core.units import Category, ConversionRule, ExplicitConversions, LinearScale, OrderedUnit, Unit
from unit_manager.catalog import CATEGORIES, UNITS, UnitSpec
from unit_manager.explicit_conversions import explicit_conversions
from unit_manager.ids import CategoryId
from unit_manager.regions import RegionProfile
from unit_manager.scale_factors import scale_factors


@lru_cache(maxsize=1)
def _categories() -> Tuple[Category, ...]:
    return tuple(Category(int(c.id), c.name, c.supports_negative) for c in CATEGORIES)


def get_categories() -> List[Category]:
    """All registered categories, in registry order (currency included)."""
    return list(_categories())


def currency_category() -> Category:
    return Category(int(CategoryId.CURRENCY), "Currency")


def _is_active(spec: UnitSpec, profile: RegionProfile, include_whimsical: bool) -> bool:
    if spec.optional and not profile.enables(spec.id):
        return False
    if spec.whimsical and not include_whimsical:
        return False
    return True


def _make_unit(spec: UnitSpec, profile: RegionProfile) -> Unit:
    return Unit(
        id=int(spec.id),
        name=spec.name,
        abbreviation=spec.abbreviation,
        is_conversion_source=profile.has(spec.source),
        is_conversion_target=profile.has(spec.target),
        is_whimsical=spec.whimsical,
    )


def get_active_units(
    profile: RegionProfile,
    *,
    include_whimsical: bool = True,
) -> Dict[Category, List[OrderedUnit]]:
    """
    Units visible for ``profile``, per category, in registry order (not yet
    sorted by display order). Categories without units map to an empty list.
    """
    out: Dict[Category, List[OrderedUnit]] = {}
    for category in _categories():
        specs = UNITS.get(CategoryId(category.id), ())
        out[category] = [
            OrderedUnit(_make_unit(spec, profile), spec.order)
            for spec in specs
            if _is_active(spec, profile, include_whimsical)
        ]
    return out


@lru_cache(maxsize=1)
def conversion_rules() -> Mapping[int, ConversionRule]:
    """
    category id -> conversion rule. A category with an explicit table is
    converted by that table only; its scale factors (if any) are ignored.
    """
    rules: Dict[int, ConversionRule] = {}
    for cid, factors in scale_factors().items():
        rules[int(cid)] = LinearScale(factors)
    for cid, pairs in explicit_conversions().items():
        rules[int(cid)] = ExplicitConversions(pairs)
    return MappingProxyType(rules)
