# services/settings.py
from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

import jsonschema

log = logging.getLogger(__name__)

SETTINGS_FILE = "converter_settings.json"
SETTINGS_VERSION = 1

SETTINGS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "version": {"type": "integer", "minimum": 0},
        "region": {"type": "string", "pattern": "^[A-Za-z]{2}$"},
        "include_whimsical": {"type": "boolean"},
    },
}


def _expand(path: Union[str, Path]) -> Path:
    return Path(os.path.expanduser(str(path))).resolve()


class ConfigError(RuntimeError):
    pass


@dataclass
class ConverterSettings:
    """Region the unit lists are built for, and whether novelty units are listed."""
    region: str = "US"
    include_whimsical: bool = True

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["version"] = SETTINGS_VERSION
        return payload


class SettingsManager:
    """
    JSON settings reader with:
    - Defaults when the file is missing
    - Schema validation (jsonschema)
    - Version stamping + migration of legacy keys
    - Thread-safety across calls

    Never writes: unit-converter state is not persisted between runs.

    Typical use:
        settings = SettingsManager().load()
        loader = UnitConverterDataLoader(settings.region,
                                         include_whimsical=settings.include_whimsical)
    """

    def __init__(
        self,
        app_name: str = "unit_converter",
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self._lock = threading.RLock()
        self.app_name = app_name
        self.base_dir = _expand(base_dir or Path.home() / f".{app_name}")

    # ------------- public API -------------

    def load(self, filename: str = SETTINGS_FILE) -> ConverterSettings:
        path = self._path(filename)
        with self._lock:
            if not path.exists():
                log.warning("No settings at %s; using defaults", path)
                return ConverterSettings()

            try:
                data = self._read_json(path)
            except (OSError, ValueError) as e:
                raise ConfigError(f"Failed to read {path}: {e}") from e

            if not isinstance(data, dict):
                raise ConfigError(f"{path} must hold a JSON object")

            old_version = int(data.get("version", 0) or 0)
            if old_version != SETTINGS_VERSION:
                data = self._migrate(data, old_version, SETTINGS_VERSION)

            try:
                jsonschema.validate(instance=data, schema=SETTINGS_SCHEMA)
            except jsonschema.ValidationError as e:
                raise ConfigError(f"Invalid settings in {path}: {e.message}") from e

            defaults = ConverterSettings()
            return ConverterSettings(
                region=str(data.get("region", defaults.region)).upper(),
                include_whimsical=bool(data.get("include_whimsical", defaults.include_whimsical)),
            )

    # ------------- internal utils -------------

    def _path(self, filename: str) -> Path:
        return self.base_dir / filename

    def _read_json(self, path: Path) -> Any:
        return json.loads(path.read_text(encoding="utf-8"))

    # ------------- migrations -------------

    def _migrate(self, old: dict, old_v: int, new_v: int) -> dict:
        data = dict(old)

        # ---- v0: top-level legacy spellings
        if "region_code" in data and "region" not in data:
            data["region"] = data.pop("region_code")
        if "show_whimsical" in data and "include_whimsical" not in data:
            data["include_whimsical"] = data.pop("show_whimsical")

        if old_v > new_v:
            log.warning("Settings version %s is newer than supported %s", old_v, new_v)

        # ---- Finalize
        data["version"] = new_v
        return data
