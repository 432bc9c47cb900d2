# unit_manager/explicit_conversions.py
"""
Pairwise transforms for categories whose units are related affinely rather
than by a common scale factor. Only temperature needs this.
"""
from __future__ import annotations

from fractions import Fraction as F
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping

from core.units import ConversionData, IDENTITY
from unit_manager.ids import CategoryId, UnitId

CONVERT_WITH_OFFSET_FIRST = True

_C = UnitId.TEMPERATURE_DEGREES_CELSIUS
_F = UnitId.TEMPERATURE_DEGREES_FAHRENHEIT
_K = UnitId.TEMPERATURE_KELVIN

_CELSIUS_TO_FAHRENHEIT = F(18, 10)
_FAHRENHEIT_TO_CELSIUS = F(10, 18)
_KELVIN_OFFSET = F(27315, 100)
_RANKINE_OFFSET = F(45967, 100)

# (from, to) -> ConversionData
_TEMPERATURE = {
    (_C, _C): IDENTITY,
    (_C, _F): ConversionData(_CELSIUS_TO_FAHRENHEIT, F(32)),
    (_C, _K): ConversionData(F(1), _KELVIN_OFFSET),
    (_F, _C): ConversionData(_FAHRENHEIT_TO_CELSIUS, F(-32), CONVERT_WITH_OFFSET_FIRST),
    (_F, _F): IDENTITY,
    (_F, _K): ConversionData(_FAHRENHEIT_TO_CELSIUS, _RANKINE_OFFSET, CONVERT_WITH_OFFSET_FIRST),
    (_K, _C): ConversionData(F(1), -_KELVIN_OFFSET, CONVERT_WITH_OFFSET_FIRST),
    (_K, _F): ConversionData(_CELSIUS_TO_FAHRENHEIT, -_RANKINE_OFFSET),
    (_K, _K): IDENTITY,
}


def _nest(pairs) -> Dict[int, Dict[int, ConversionData]]:
    out: Dict[int, Dict[int, ConversionData]] = {}
    for (parent, unit), data in pairs.items():
        out.setdefault(parent, {})[unit] = data
    return out


@lru_cache(maxsize=1)
def explicit_conversions() -> Mapping[CategoryId, Mapping[int, Mapping[int, ConversionData]]]:
    """category id -> from unit id -> to unit id -> ConversionData."""
    nested = _nest(_TEMPERATURE)
    return MappingProxyType({
        CategoryId.TEMPERATURE: MappingProxyType(
            {uid: MappingProxyType(row) for uid, row in nested.items()}
        ),
    })
