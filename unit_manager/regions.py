# unit_manager/regions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Union

from unit_manager.ids import UnitId

# ---- traits a unit's visibility flags may depend on ----
US_CUSTOMARY = "us_customary"
SI = "si"
FAHRENHEIT = "fahrenheit"
CELSIUS = "celsius"
WATT = "watt"
KILOWATT = "kilowatt"

# Sources: https://en.wikipedia.org/wiki/Metrication
#          https://en.wikipedia.org/wiki/Fahrenheit
REGION_TRAITS: Dict[str, FrozenSet[str]] = {
    # US + Federated States of Micronesia, Marshall Islands, Palau
    "US": frozenset({US_CUSTOMARY, FAHRENHEIT}),
    "FM": frozenset({US_CUSTOMARY, FAHRENHEIT}),
    "MH": frozenset({US_CUSTOMARY, FAHRENHEIT}),
    "PW": frozenset({US_CUSTOMARY, FAHRENHEIT}),
    "LR": frozenset({US_CUSTOMARY, FAHRENHEIT}),
    # the Bahamas, the Cayman Islands
    "BS": frozenset({FAHRENHEIT}),
    "KY": frozenset({FAHRENHEIT}),
    "GB": frozenset({WATT}),
}

# Korean floorspace unit, https://en.wikipedia.org/wiki/Korean_units_of_measurement#Area
REGION_OPTIONAL_UNITS: Dict[str, FrozenSet[int]] = {
    "KP": frozenset({UnitId.AREA_PYEONG}),
    "KR": frozenset({UnitId.AREA_PYEONG}),
}

# (positive trait, derived complement)
_COMPLEMENTS = ((US_CUSTOMARY, SI), (FAHRENHEIT, CELSIUS), (WATT, KILOWATT))


@dataclass(frozen=True)
class RegionProfile:
    code: str
    traits: FrozenSet[str]
    optional_units: FrozenSet[int]

    def has(self, flag: Union[bool, str]) -> bool:
        """A visibility flag is either a constant or the name of a trait."""
        if isinstance(flag, bool):
            return flag
        return flag in self.traits

    def enables(self, unit_id: int) -> bool:
        return unit_id in self.optional_units


def region_profile(code: str) -> RegionProfile:
    """Resolve a two-letter region code (any case) into its traits."""
    key = (code or "").strip().upper()
    traits = set(REGION_TRAITS.get(key, ()))
    for positive, complement in _COMPLEMENTS:
        if positive not in traits:
            traits.add(complement)
    return RegionProfile(
        code=key,
        traits=frozenset(traits),
        optional_units=REGION_OPTIONAL_UNITS.get(key, frozenset()),
    )
