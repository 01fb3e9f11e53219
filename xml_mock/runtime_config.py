import logging
import os
from typing import Any, Dict

from shared.runtime_config import JsonFileConfig, env_flag

from .core.models import DEFAULT_PROFILE_NAME, PROFILES, MockProfile


DEFAULT_XML_MOCK_CONFIG_PATH = os.getenv(
    "XML_MOCK_CONFIG_PATH", "config/xml_mock_runtime.json"
)
DEFAULT_PORT = 10000
logger = logging.getLogger(__name__)


class XmlMockRuntimeConfig(JsonFileConfig):
    def __init__(self, path: str = DEFAULT_XML_MOCK_CONFIG_PATH) -> None:
        super().__init__(
            path,
            debug_label="xml_mock_config",
            debug_env="XML_MOCK_CONFIG_DEBUG",
        )

    def _debug_message(self) -> str:
        return f"profile={self._data.get('profile')!r} strict={self._data.get('strict_content_type')!r}"

    def port(self) -> int:
        raw = os.getenv("PORT", "").strip()
        if not raw:
            return DEFAULT_PORT
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Invalid PORT=%r, using %s", raw, DEFAULT_PORT)
            return DEFAULT_PORT
        if not 0 < value < 65536:
            logger.warning("PORT out of range: %s, using %s", value, DEFAULT_PORT)
            return DEFAULT_PORT
        return value

    def profile_name(self) -> str:
        self._refresh_if_changed()
        name = (os.getenv("XML_MOCK_PROFILE") or str(self._data.get("profile") or "")).strip().lower()
        if not name:
            return DEFAULT_PROFILE_NAME
        if name not in PROFILES:
            logger.warning("Unknown mock profile %r, using %s", name, DEFAULT_PROFILE_NAME)
            return DEFAULT_PROFILE_NAME
        return name

    def profile(self) -> MockProfile:
        profile = PROFILES[self.profile_name()]
        overrides: Dict[str, Any] = {}
        three_d = self._data.get("three_d_secure_enabled")
        if isinstance(three_d, bool):
            overrides["three_d_secure_enabled"] = three_d
        balance = self._data.get("loyalty_points_balance")
        if isinstance(balance, (int, float)) and not isinstance(balance, bool):
            overrides["loyalty_points_balance"] = f"{balance:.2f}"
        elif isinstance(balance, str) and balance.strip():
            overrides["loyalty_points_balance"] = balance.strip()
        if overrides:
            return profile.model_copy(update=overrides)
        return profile

    def strict_content_type(self) -> bool:
        override = env_flag("XML_MOCK_STRICT_CONTENT_TYPE")
        if override is not None:
            return override
        self._refresh_if_changed()
        return bool(self._data.get("strict_content_type"))

    def _default_data(self) -> Dict[str, Any]:
        return {"profile": DEFAULT_PROFILE_NAME, "strict_content_type": False}


runtime_config = XmlMockRuntimeConfig()
