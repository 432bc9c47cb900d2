# core/app_bus.py
from PySide6.QtCore import QObject, Signal


class AppBus(QObject):
    """
    Process-wide signal hub for unit-converter data.
    Slots run after the new ratio graph has been published.
    """

    # ---- Region / locale ----
    regionChanged = Signal(str)   # two-letter region code

    # ---- Ratio graph ----
    ratiosRebuilt = Signal(str)   # region code the graph was built for


# Singleton pattern
_app_bus: AppBus | None = None

def get_app_bus() -> AppBus:
    global _app_bus
    if _app_bus is None:
        _app_bus = AppBus()
    return _app_bus
