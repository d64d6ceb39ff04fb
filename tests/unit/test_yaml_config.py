"""
Unit tests for view_severity.core.config.yaml_config.

These tests validate:
- full and minimal YAML files parse into typed config objects with defaults
- explicit path, environment variable and missing-file resolution
- validation errors for malformed files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from view_severity.core.config.yaml_config import (
    CONFIG_ENV_VAR,
    DEFAULT_LOG_FORMAT,
    load_app_config,
    parse_app_config,
)


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "config.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_load_full_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
remote:
  base_url: https://dms.example.com/api
  alarms_path: /alarms/current
  views_path: /views/all
  auth_header: secret
  timeout_s: 2.5
  verify_tls: false
logging:
  level: debug
  format: "%(message)s"
ui:
  refresh_interval_s: 30
  poll_interval_ms: 250
""",
    )

    cfg = load_app_config(str(path))

    assert cfg.remote.base_url == "https://dms.example.com/api"
    assert cfg.remote.alarms_path == "/alarms/current"
    assert cfg.remote.views_path == "/views/all"
    assert cfg.remote.auth_header == "secret"
    assert cfg.remote.timeout_s == 2.5
    assert cfg.remote.verify_tls is False
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.format == "%(message)s"
    assert cfg.ui.refresh_interval_s == 30.0
    assert cfg.ui.poll_interval_ms == 250


def test_minimal_config_uses_defaults() -> None:
    cfg = parse_app_config({"remote": {"base_url": "http://dms/api"}})

    assert cfg.remote.alarms_path == "/alarms/active"
    assert cfg.remote.views_path == "/views"
    assert cfg.remote.auth_header is None
    assert cfg.remote.timeout_s == 10.0
    assert cfg.remote.verify_tls is True
    assert cfg.logging.level == "INFO"
    assert cfg.logging.format == DEFAULT_LOG_FORMAT
    assert cfg.ui.refresh_interval_s == 5.0


def test_missing_base_url_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse_app_config({"remote": {}})


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse_app_config({"remote": {"base_url": "http://x"}, "logging": {"level": "LOUD"}})


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(ValueError):
        load_app_config(str(path))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(str(tmp_path / "nope.yaml"))


def test_env_var_selects_config(tmp_path: Path, monkeypatch) -> None:
    path = _write(tmp_path, "remote:\n  base_url: http://from-env/api\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = load_app_config()

    assert cfg.remote.base_url == "http://from-env/api"
