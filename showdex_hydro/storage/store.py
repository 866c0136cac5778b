from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ..dehydrate import dehydrate_settings
from ..hydrate import hydrate_settings
from ..model import ShowdexSettings

logger = logging.getLogger(__name__)

SETTINGS_STORAGE_KEY = "showdex-settings"

# Lets tests and power-users point the store somewhere else.
# Example:
#   export SHOWDEX_HYDRO_HOME=/tmp/showdex
_ENV_HOME = "SHOWDEX_HYDRO_HOME"


def hydro_home() -> Path:
    override = os.environ.get(_ENV_HOME, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".showdex_hydro"


@dataclass
class SettingsStore:
    """Load/save the dehydrated settings string.

    The storage file is kept as a plain dict so keys written by other tools
    survive a save.
    """

    filename: str = "local_storage.json"
    home: Path = field(default_factory=hydro_home)
    key: str = SETTINGS_STORAGE_KEY

    def path(self) -> Path:
        return Path(self.home) / self.filename

    def _backup(self, path: Path) -> None:
        ts = time.strftime("%Y%m%d_%H%M%S")
        bak = path.with_name(f"{path.name}.bak.{ts}")
        try:
            bak.write_bytes(path.read_bytes())
        except OSError:
            logger.warning("Could not back up corrupt storage file %s", path, exc_info=True)
            return
        logger.warning("Storage file %s is corrupt; backed up to %s", path, bak)

    def _read_storage(self) -> Dict[str, str]:
        path = self.path()
        if not path.exists():
            return {}

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"{path.name} root is not an object")
        except (OSError, ValueError):
            self._backup(path)
            return {}
        return data

    def _write_storage(self, data: Dict[str, str]) -> None:
        Path(self.home).mkdir(parents=True, exist_ok=True)
        path = self.path()
        tmp = path.with_suffix(path.suffix + ".tmp")

        # Atomic write
        tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, path)

    def read_raw(self) -> Optional[str]:
        value = self._read_storage().get(self.key)
        return value if isinstance(value, str) else None

    def write_raw(self, value: str) -> None:
        data = self._read_storage()
        data[self.key] = str(value)
        self._write_storage(data)

    def clear(self) -> None:
        data = self._read_storage()
        if data.pop(self.key, None) is not None:
            self._write_storage(data)

    # Convenience helpers -------------------------------------------------
    def load(self, color_scheme: Optional[str] = None) -> ShowdexSettings:
        return hydrate_settings(self.read_raw(), color_scheme=color_scheme)

    def save(self, settings: ShowdexSettings) -> str:
        value = dehydrate_settings(settings)
        self.write_raw(value)
        logger.debug("Saved %d chars of settings to %s", len(value), self.path())
        return value
