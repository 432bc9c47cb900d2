# core/units.py
from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from numbers import Rational
from types import MappingProxyType
from typing import Mapping, Tuple, Union


@dataclass(frozen=True)
class Category:
    """One physical quantity (Length, Temperature, ...). Identity is ``id``."""
    id: int
    name: str = field(default="", compare=False)
    supports_negative: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class Unit:
    """
    A measurement unit. ``id`` is unique across all categories and is the
    only field that takes part in equality and hashing.
    """
    id: int
    name: str = field(default="", compare=False)
    abbreviation: str = field(default="", compare=False)
    is_conversion_source: bool = field(default=False, compare=False)
    is_conversion_target: bool = field(default=False, compare=False)
    is_whimsical: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class OrderedUnit:
    unit: Unit
    order: int


@dataclass(frozen=True)
class ConversionData:
    """
    Transform from unit A to unit B:

        offset_first -> ratio * (x + offset)
        otherwise    -> ratio * x + offset
    """
    ratio: Fraction = Fraction(1)
    offset: Fraction = Fraction(0)
    offset_first: bool = False

    def apply(self, value):
        """
        Convert ``value``. ints and Fractions stay exact; floats go through
        float arithmetic. Other numeric types (Decimal, complex) are rejected.
        """
        if isinstance(value, Rational):
            ratio, offset = self.ratio, self.offset
        elif isinstance(value, float):
            ratio, offset = float(self.ratio), float(self.offset)
        else:
            raise TypeError(
                f"Cannot convert {type(value).__name__} values; use int, Fraction or float"
            )
        if self.offset_first:
            return ratio * (value + offset)
        return ratio * value + offset


IDENTITY = ConversionData()


# ---- per-category conversion rules (tagged variant) ----

@dataclass(frozen=True)
class LinearScale:
    """unit id -> factor relative to the category's implicit base unit."""
    factors: Mapping[int, Fraction]


@dataclass(frozen=True)
class ExplicitConversions:
    """from unit id -> to unit id -> ConversionData, used verbatim."""
    pairs: Mapping[int, Mapping[int, ConversionData]]


ConversionRule = Union[LinearScale, ExplicitConversions]


# ---- builder output ----

@dataclass(frozen=True)
class RatioGraph:
    """
    Immutable result of one build. Replaced wholesale on rebuild, never
    mutated in place.
    """
    categories: Tuple[Category, ...] = ()
    category_units: Mapping[Category, Tuple[Unit, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    ratios: Mapping[Unit, Mapping[Unit, ConversionData]] = field(
        default_factory=lambda: MappingProxyType({})
    )
