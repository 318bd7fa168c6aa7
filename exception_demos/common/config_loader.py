"""Demonstration settings loading and validation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from exception_demos.common.constants import DEMO_NAMES
from exception_demos.common.errors import ConfigError
from exception_demos.common.schema import validate_demo_settings

DEFAULT_SETTINGS: dict[str, Any] = {
    "demos": {
        "try-catch": {"enabled": True, "params": {"numerator": 10, "denominator": 0}},
        "multi-catch": {"enabled": True, "params": {"values": [1, 2, 3], "index": 10}},
        "clause-order": {"enabled": True, "params": {}},
        "nested-try": {"enabled": True, "params": {"a": 0}},
        "nested-try-call": {"enabled": True, "params": {"a": 0}},
        "rethrow": {"enabled": True, "params": {"message": "throw test"}},
        "declared-faults": {"enabled": True, "params": {"message": "demonstration"}},
        "cleanup": {"enabled": True, "params": {}},
        "propagation": {"enabled": True, "params": {"clause_kind": "any"}},
        "checked-throws": {"enabled": True, "params": {"message": "Error"}},
        "custom-fault": {"enabled": True, "params": {"threshold": 10, "inputs": [1, 20]}},
        "unhandled": {"enabled": False, "params": {}},
    }
}


@dataclass(frozen=True)
class ConfigBundle:
    demos: dict[str, dict]


def read_yaml(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def load_config(path: Path | None = None, *, overlay_path: Path | None = None) -> ConfigBundle:
    settings: Any = copy.deepcopy(DEFAULT_SETTINGS)
    for source in (path, overlay_path):
        if source is None:
            continue
        loaded = read_yaml(source)
        if loaded is None:
            continue
        settings = _deep_merge(settings, loaded)
    validated = validate_demo_settings(settings)
    return ConfigBundle(demos=validated["demos"])


def enabled_demos(bundle: ConfigBundle) -> list[str]:
    return [name for name in DEMO_NAMES if bundle.demos.get(name, {}).get("enabled", False)]


def demo_params(bundle: ConfigBundle, name: str) -> dict:
    if name not in DEMO_NAMES:
        raise ConfigError(f"Unknown demonstration: {name}")
    return dict(bundle.demos.get(name, {}).get("params", {}))
