# unit_manager/__init__.py
# The singleton lives in unit_manager.manager; it imports core.data_loader,
# which imports this package, so it is not re-exported here.

from .ids import CategoryId, UnitId
from .regions import RegionProfile, region_profile
from .registry import conversion_rules, get_active_units, get_categories

__all__ = [
    "CategoryId",
    "UnitId",
    "RegionProfile",
    "region_profile",
    "conversion_rules",
    "get_active_units",
    "get_categories",
]
