from pathlib import Path

import pytest

from exception_demos.common.config_loader import demo_params, enabled_demos, load_config
from exception_demos.common.constants import DEMO_NAMES
from exception_demos.common.errors import ConfigError


def test_load_config_defaults():
    bundle = load_config()
    assert set(bundle.demos) == set(DEMO_NAMES)
    assert demo_params(bundle, "custom-fault") == {"threshold": 10, "inputs": [1, 20]}


def test_repo_settings_file_matches_defaults():
    assert load_config(Path("config/demos.yml")).demos == load_config().demos


def test_enabled_demos_keeps_catalogue_order_and_skips_disabled():
    names = enabled_demos(load_config())
    assert names[0] == "try-catch"
    assert "unhandled" not in names
    assert names == [name for name in DEMO_NAMES if name != "unhandled"]


def test_load_config_applies_overlay_values(tmp_path: Path):
    base = tmp_path / "demos.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(
        """demos:
  nested-try:
    enabled: true
    params:
      a: 1
  cleanup:
    enabled: false
    params: {}
""",
        encoding="utf-8",
    )
    overlay.write_text(
        """demos:
  nested-try:
    params:
      a: 2
  unhandled:
    enabled: true
""",
        encoding="utf-8",
    )

    bundle = load_config(base, overlay_path=overlay)

    assert demo_params(bundle, "nested-try") == {"a": 2}
    assert "cleanup" not in enabled_demos(bundle)
    assert "unhandled" in enabled_demos(bundle)
    assert demo_params(bundle, "try-catch") == {"numerator": 10, "denominator": 0}


def test_load_config_ignores_empty_file(tmp_path: Path):
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty).demos == load_config().demos


def test_load_config_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yml")


def test_load_config_invalid_yaml_raises(tmp_path: Path):
    broken = tmp_path / "broken.yml"
    broken.write_text("demos: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(broken)


def test_demo_params_rejects_unknown_name():
    with pytest.raises(ConfigError):
        demo_params(load_config(), "stack-overflow")
