# core/ratio_graph.py
from __future__ import annotations

import logging
from fractions import Fraction
from numbers import Rational
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Tuple

from core.errors import MalformedUnitDataError
from core.units import (
    Category,
    ConversionData,
    ConversionRule,
    ExplicitConversions,
    IDENTITY,
    LinearScale,
    OrderedUnit,
    RatioGraph,
    Unit,
)

log = logging.getLogger(__name__)

Conversions = Dict[Unit, Dict[Unit, ConversionData]]


def sort_units(ordered_units: Iterable[OrderedUnit]) -> Tuple[Unit, ...]:
    """Display order. sorted() is stable, so equal orders keep insertion order."""
    return tuple(ou.unit for ou in sorted(ordered_units, key=lambda ou: ou.order))


def _checked_factor(category: Category, unit_id: int, factor) -> Fraction:
    if isinstance(factor, bool) or not isinstance(factor, Rational):
        raise MalformedUnitDataError(
            f"Scale factor for unit {unit_id} in category {category.id} "
            f"must be an exact rational, got {factor!r}"
        )
    if factor <= 0:
        raise MalformedUnitDataError(
            f"Scale factor for unit {unit_id} in category {category.id} "
            f"must be positive, got {factor}"
        )
    return Fraction(factor)


def _index_by_id(category: Category, units: Sequence[Unit]) -> Dict[int, Unit]:
    by_id = {u.id: u for u in units}
    if len(by_id) != len(units):
        raise MalformedUnitDataError(f"Duplicate unit ids in category {category.id}")
    return by_id


# =============================================================================
# Per-rule builders
# =============================================================================

def _linear_conversions(category: Category, units: Sequence[Unit], rule: LinearScale) -> Conversions:
    # every factor is validated, including those of units not active right now
    factors = {uid: _checked_factor(category, uid, f) for uid, f in rule.factors.items()}
    active = _index_by_id(category, units)

    skipped = [uid for uid in factors if uid not in active]
    if skipped:
        log.debug("Category %s: %d inactive unit(s) skipped: %s", category.id, len(skipped), skipped)

    out: Conversions = {}
    for unit in units:
        try:
            unit_factor = factors[unit.id]
        except KeyError as e:
            raise MalformedUnitDataError(
                f"Active unit {unit.id} has no scale factor in category {category.id}"
            ) from e

        conversions: Dict[Unit, ConversionData] = {}
        for uid, factor in factors.items():
            target = active.get(uid)
            if target is None:
                continue
            conversions[target] = ConversionData(ratio=unit_factor / factor)
        out[unit] = conversions
    return out


def _explicit_conversions(category: Category, units: Sequence[Unit], rule: ExplicitConversions) -> Conversions:
    active = _index_by_id(category, units)

    out: Conversions = {}
    for unit in units:
        try:
            row = rule.pairs[unit.id]
        except KeyError as e:
            raise MalformedUnitDataError(
                f"Active unit {unit.id} has no explicit conversions in category {category.id}"
            ) from e

        conversions = {active[uid]: data for uid, data in row.items() if uid in active}
        if conversions.get(unit) != IDENTITY:
            raise MalformedUnitDataError(
                f"Explicit conversions for unit {unit.id} lack an identity entry"
            )
        out[unit] = conversions
    return out


# =============================================================================
# Public API
# =============================================================================

def build_ratio_graph(
    categories: Sequence[Category],
    active_units: Mapping[Category, Sequence[OrderedUnit]],
    rules: Mapping[int, ConversionRule],
    *,
    excluded: Iterable[int] = (),
) -> RatioGraph:
    """
    Build the category -> units and unit -> unit -> ConversionData indices.

    - ``active_units``: units visible for the current region, any order.
    - ``rules``: category id -> LinearScale or ExplicitConversions.
    - ``excluded``: category ids recorded with no units (currency, whose
      rates are filled in asynchronously elsewhere).

    Not re-entrant with respect to its callers' published state; callers
    serialize rebuilds and publish the returned graph in one assignment.
    Raises MalformedUnitDataError on any table inconsistency.
    """
    excluded_ids = set(excluded)
    category_units: Dict[Category, Tuple[Unit, ...]] = {}
    ratios: Dict[Unit, Mapping[Unit, ConversionData]] = {}

    for category in categories:
        if category.id in excluded_ids:
            category_units[category] = ()
            continue

        units = sort_units(active_units.get(category, ()))
        category_units[category] = units
        if not units:
            continue

        rule = rules.get(category.id)
        if isinstance(rule, LinearScale):
            conversions = _linear_conversions(category, units, rule)
        elif isinstance(rule, ExplicitConversions):
            conversions = _explicit_conversions(category, units, rule)
        else:
            raise MalformedUnitDataError(
                f"Category {category.id} has active units but no conversion rule"
            )

        for unit, row in conversions.items():
            if unit in ratios:
                raise MalformedUnitDataError(f"Unit id {unit.id} appears in more than one category")
            ratios[unit] = MappingProxyType(row)

        log.debug("Category %s: %d unit(s), %s", category.id, len(units), type(rule).__name__)

    return RatioGraph(
        categories=tuple(categories),
        category_units=MappingProxyType(category_units),
        ratios=MappingProxyType(ratios),
    )
