import json
import logging
import os
from pathlib import Path
from typing import Any, Dict


logger = logging.getLogger(__name__)


def env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() == "true"


class JsonFileConfig:
    def __init__(self, path: str, *, debug_label: str, debug_env: str) -> None:
        self._debug_label = debug_label
        self._debug_env = debug_env
        self._path = Path(path)
        self._data = self._load_from_disk()
        self._last_mtime = self._get_mtime()
        if self._debug_enabled():
            logger.info("[%s] path=%s %s", self._debug_label, self._path, self._debug_message())

    def _debug_enabled(self) -> bool:
        return os.getenv(self._debug_env, "").lower() == "true"

    def _debug_message(self) -> str:
        return f"keys={sorted(self._data)}"

    def _load_from_disk(self) -> Dict[str, Any]:
        if not self._path.exists():
            return self._default_data()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except Exception as exc:
            logger.warning("[%s] failed to parse %s: %s", self._debug_label, self._path, exc)
            return self._default_data()
        if not isinstance(data, dict):
            logger.warning("[%s] expected a JSON object in %s", self._debug_label, self._path)
            return self._default_data()
        return data

    def _default_data(self) -> Dict[str, Any]:
        return {}

    def _get_mtime(self) -> float | None:
        try:
            return self._path.stat().st_mtime
        except FileNotFoundError:
            return None

    def _refresh_if_changed(self) -> None:
        current = self._get_mtime()
        if current is None or current == self._last_mtime:
            return
        self._data = self._load_from_disk()
        self._last_mtime = current
        if self._debug_enabled():
            logger.info("[%s] reloaded %s", self._debug_label, self._debug_message())
