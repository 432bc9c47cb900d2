# unit_manager/manager.py
from __future__ import annotations

import threading
from typing import Optional

from core.data_loader import UnitConverterDataLoader
from services.settings import SettingsManager

# Singleton instance
__LOADER: Optional[UnitConverterDataLoader] = None
__INIT_LOCK = threading.Lock()


def get_data_loader() -> UnitConverterDataLoader:
    """Return the global loader (created and loaded from settings on first use)."""
    global __LOADER
    if __LOADER is None:
        with __INIT_LOCK:
            if __LOADER is None:
                settings = SettingsManager().load()
                loader = UnitConverterDataLoader(
                    settings.region, include_whimsical=settings.include_whimsical
                )
                loader.load_data()
                __LOADER = loader
    return __LOADER


def set_region(code: str) -> UnitConverterDataLoader:
    """Programmatic region change; rebuilds and emits regionChanged like the UI would."""
    loader = get_data_loader()
    loader.set_region(code)
    return loader


def reset_data_loader() -> None:
    """Drop the global loader so the next get_data_loader() starts fresh."""
    global __LOADER
    with __INIT_LOCK:
        __LOADER = None
