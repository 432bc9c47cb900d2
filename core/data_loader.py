# core/data_loader.py
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Union

from core.app_bus import AppBus, get_app_bus
from core.errors import UnknownCategoryError, UnknownUnitError
from core.ratio_graph import build_ratio_graph
from core.units import Category, ConversionData, RatioGraph, Unit
from unit_manager import registry
from unit_manager.ids import CategoryId
from unit_manager.regions import RegionProfile, region_profile

log = logging.getLogger(__name__)

CURRENCY_ID = int(CategoryId.CURRENCY)

CategoryLike = Union[Category, int]
UnitLike = Union[Unit, int]


def _as_category(category: CategoryLike) -> Category:
    return category if isinstance(category, Category) else Category(int(category))


def _as_unit(unit: UnitLike) -> Unit:
    return unit if isinstance(unit, Unit) else Unit(int(unit))


class UnitConverterDataLoader:
    """
    Owns the published ratio graph for one region.

    Rebuilds (load_data / set_region) are serialized by a lock and publish a
    new RatioGraph in a single assignment; readers never take the lock and
    always see either the old or the new graph in full. Currency is recorded
    with no units: its rates are filled in by a separate asynchronous loader.
    """

    def __init__(
        self,
        region: str = "US",
        *,
        include_whimsical: bool = True,
        bus: Optional[AppBus] = None,
    ):
        self._lock = threading.RLock()
        self._profile: RegionProfile = region_profile(region)
        self._include_whimsical = include_whimsical
        self._bus = bus
        self._graph = RatioGraph()

    # ---- properties ----
    @property
    def region(self) -> str:
        return self._profile.code

    @property
    def profile(self) -> RegionProfile:
        return self._profile

    @property
    def include_whimsical(self) -> bool:
        return self._include_whimsical

    @property
    def graph(self) -> RatioGraph:
        return self._graph

    @property
    def bus(self) -> AppBus:
        if self._bus is None:
            self._bus = get_app_bus()
        return self._bus

    # ---- rebuild ----
    def load_data(self) -> RatioGraph:
        """Rebuild both indices for the current region and publish them."""
        with self._lock:
            graph = self._rebuild(self._profile)
            code = self._profile.code
        self.bus.ratiosRebuilt.emit(code)
        return graph

    def set_region(self, code: str) -> bool:
        """Switch region and rebuild. Returns False when nothing changed."""
        profile = region_profile(code)
        with self._lock:
            if profile.code == self._profile.code and self._graph.categories:
                return False
            self._rebuild(profile)
        self.bus.regionChanged.emit(profile.code)
        self.bus.ratiosRebuilt.emit(profile.code)
        return True

    def _rebuild(self, profile: RegionProfile) -> RatioGraph:
        """Build for ``profile``; region and graph change together, and only on success."""
        graph = build_ratio_graph(
            registry.get_categories(),
            registry.get_active_units(profile, include_whimsical=self._include_whimsical),
            registry.conversion_rules(),
            excluded=(CURRENCY_ID,),
        )
        self._profile = profile
        self._graph = graph
        log.info(
            "Ratio graph rebuilt for region %s: %d categories, %d units",
            profile.code or "<default>", len(graph.categories), len(graph.ratios),
        )
        return graph

    # ---- lookups ----
    def load_ordered_categories(self) -> List[Category]:
        return list(self._graph.categories)

    def load_ordered_units(self, category: CategoryLike) -> List[Unit]:
        key = _as_category(category)
        try:
            return list(self._graph.category_units[key])
        except KeyError:
            raise UnknownCategoryError(f"Unknown category: {key.id}") from None

    def load_ordered_ratios(self, unit: UnitLike) -> Dict[Unit, ConversionData]:
        key = _as_unit(unit)
        try:
            return dict(self._graph.ratios[key])
        except KeyError:
            raise UnknownUnitError(f"Unknown unit: {key.id}") from None

    def supports_category(self, target: CategoryLike) -> bool:
        key = _as_category(target)
        if key.id == CURRENCY_ID:
            return False
        categories = self._graph.categories or registry.get_categories()
        return any(c.id == key.id for c in categories)

    def find_unit(self, unit_id: int) -> Unit:
        """Full Unit (names, flags) for a bare id."""
        graph = self._graph
        for units in graph.category_units.values():
            for unit in units:
                if unit.id == unit_id:
                    return unit
        raise UnknownUnitError(f"Unknown unit: {unit_id}")

    # ---- any-to-any convenience ----
    def convert(self, value, from_unit: UnitLike, to_unit: UnitLike):
        ratios = self.load_ordered_ratios(from_unit)
        target = _as_unit(to_unit)
        try:
            data = ratios[target]
        except KeyError:
            raise UnknownUnitError(
                f"Unit {target.id} is not convertible from unit {_as_unit(from_unit).id}"
            ) from None
        return data.apply(value)
