"""Minimal strict schema for demonstration settings."""

from __future__ import annotations

from exception_demos.common.constants import DEMO_NAMES
from exception_demos.common.errors import ConfigError
from exception_demos.faults.kinds import parse_kind

ENTRY_KEYS = {"enabled", "params"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str) -> None:
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_demo_settings(cfg: dict) -> dict:
    if not isinstance(cfg, dict):
        raise ConfigError("Settings must be a mapping")
    _assert_required_keys(cfg, {"demos"}, "settings")
    _assert_no_unknown_keys(cfg, {"demos"}, "settings")

    demos = cfg["demos"]
    if not isinstance(demos, dict):
        raise ConfigError("settings.demos must be a mapping")
    _assert_no_unknown_keys(demos, set(DEMO_NAMES), "settings.demos")

    for name, entry in demos.items():
        ctx = f"demos.{name}"
        if not isinstance(entry, dict):
            raise ConfigError(f"{ctx} must be a mapping")
        _assert_required_keys(entry, ENTRY_KEYS, ctx)
        _assert_no_unknown_keys(entry, ENTRY_KEYS, ctx)
        if not isinstance(entry["enabled"], bool):
            raise ConfigError(f"{ctx}.enabled must be true or false")
        if not isinstance(entry["params"], dict):
            raise ConfigError(f"{ctx}.params must be a mapping")

    propagation = demos.get("propagation")
    if propagation is not None and "clause_kind" in propagation["params"]:
        parse_kind(propagation["params"]["clause_kind"])

    return cfg
