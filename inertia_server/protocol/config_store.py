from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Union

from ..config import config
from ..errors import InertiaConfigError


logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "app"
DEFAULT_VERSION = "1"

Version = Union[str, int, float]


@dataclass(frozen=True)
class ProtocolConfig:
    template_name: str = DEFAULT_TEMPLATE_NAME
    version: Version = DEFAULT_VERSION
    manifest: Mapping[str, Any] | None = None

    @classmethod
    def from_cfg(cls, cfg: Any) -> "ProtocolConfig":
        """Build the protocol configuration from the yacs `INERTIA` section."""
        section = cfg.INERTIA
        manifest = None
        manifest_path = str(section.MANIFEST_PATH or "").strip()
        if manifest_path:
            manifest = load_manifest(Path(manifest_path))
        return cls(
            template_name=str(section.TEMPLATE_NAME or DEFAULT_TEMPLATE_NAME),
            version=section.VERSION if section.VERSION not in (None, "") else DEFAULT_VERSION,
            manifest=manifest,
        )


def load_manifest(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise InertiaConfigError(
            f"Asset manifest not found: {path}",
            details={"path": str(path)},
        ) from exc
    except json.JSONDecodeError as exc:
        raise InertiaConfigError(
            f"Asset manifest is not valid JSON: {path}",
            details={"path": str(path), "error": str(exc)},
        ) from exc
    if not isinstance(payload, dict):
        raise InertiaConfigError(
            f"Asset manifest must be a JSON object: {path}",
            details={"path": str(path)},
        )
    return payload


_CONFIG_KEYS = frozenset(item.name for item in fields(ProtocolConfig))


class ConfigStore:
    """
    Holds the current `ProtocolConfig` snapshot.

    Updates are a shallow, last-writer-wins merge that swaps in a new
    immutable snapshot, so a request that read the snapshot once keeps a
    consistent view. Writes are meant for startup and route registration.
    """

    def __init__(self, initial: ProtocolConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._config = initial or ProtocolConfig()
        self._revision = 0

    def get_config(self) -> ProtocolConfig:
        return self._config

    @property
    def revision(self) -> int:
        return self._revision

    def set_config(self, partial: Mapping[str, Any] | None = None, **overrides: Any) -> None:
        updates = dict(partial or {})
        updates.update(overrides)
        unknown = sorted(set(updates) - _CONFIG_KEYS)
        if unknown:
            raise InertiaConfigError(
                f"Unknown protocol config keys: {', '.join(unknown)}",
                details={"unknown": unknown},
            )
        changes = {key: value for key, value in updates.items() if value is not None}
        if not changes:
            return
        with self._lock:
            self._config = replace(self._config, **changes)
            self._revision += 1
        logger.debug("Protocol config updated: keys=%s revision=%s", sorted(changes), self._revision)

    def reset(self, initial: ProtocolConfig | None = None) -> None:
        with self._lock:
            self._config = initial or ProtocolConfig()
            self._revision += 1


config_store = ConfigStore(ProtocolConfig.from_cfg(config))
