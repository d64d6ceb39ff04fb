from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from view_severity.transport.client_config import ALARMS_PATH, TIMEOUT_S, VIEWS_PATH

CONFIG_ENV_VAR = "VIEW_SEVERITY_CONFIG"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class RemoteConfig:
    """Management system API settings used by the query client."""
    base_url: str
    alarms_path: str = ALARMS_PATH
    views_path: str = VIEWS_PATH
    auth_header: Optional[str] = None
    timeout_s: float = TIMEOUT_S
    verify_tls: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    """Root logger settings."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass(frozen=True)
class UiConfig:
    """Desktop viewer refresh settings."""
    refresh_interval_s: float = 5.0
    poll_interval_ms: int = 100


@dataclass(frozen=True)
class AppConfig:
    """
    Root application configuration loaded from YAML.

    This is the single source of truth for runtime-tunable values so the
    data source can be pointed at another management system without code
    changes.
    """
    remote: RemoteConfig
    logging: LoggingConfig
    ui: UiConfig


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("config.yaml must contain a YAML mapping at the root")
    return data


def _resolve_default_config_path() -> Path:
    """
    Resolve config.yaml location.

    Priority:
    1) VIEW_SEVERITY_CONFIG env var if provided
    2) config.yaml next to the executable
    3) ./config.yaml in current working directory
    """
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()

    exe_dir = Path(sys.executable).resolve().parent
    candidate = exe_dir / "config.yaml"
    if candidate.exists():
        return candidate

    return Path("config.yaml").resolve()


def parse_app_config(raw: Dict[str, Any]) -> AppConfig:
    """
    Convert a raw YAML mapping into typed config objects.

    Parameters
    ----------
    raw
        Mapping loaded from the YAML file.

    Returns
    -------
    AppConfig
        Parsed configuration.

    Raises
    ------
    ValueError
        If required fields are missing or invalid.
    """
    # ---- remote ----
    r = raw.get("remote") or {}
    if not r.get("base_url"):
        raise ValueError("remote.base_url is required")
    remote = RemoteConfig(
        base_url=str(r["base_url"]),
        alarms_path=str(r.get("alarms_path", ALARMS_PATH)),
        views_path=str(r.get("views_path", VIEWS_PATH)),
        auth_header=r.get("auth_header"),
        timeout_s=float(r.get("timeout_s", TIMEOUT_S)),
        verify_tls=bool(r.get("verify_tls", True)),
    )

    # ---- logging ----
    lg = raw.get("logging") or {}
    level = str(lg.get("level", "INFO")).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Unknown logging.level: {level}")
    log_cfg = LoggingConfig(level=level, format=str(lg.get("format", DEFAULT_LOG_FORMAT)))

    # ---- ui ----
    u = raw.get("ui") or {}
    ui = UiConfig(
        refresh_interval_s=float(u.get("refresh_interval_s", 5.0)),
        poll_interval_ms=int(u.get("poll_interval_ms", 100)),
    )

    return AppConfig(remote=remote, logging=log_cfg, ui=ui)


def load_app_config(path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration from YAML and convert into typed config objects.

    Parameters
    ----------
    path
        Explicit path to config.yaml. If None, uses default resolution.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If required fields are missing or invalid.
    """
    cfg_path = Path(path).expanduser().resolve() if path else _resolve_default_config_path()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    return parse_app_config(_read_yaml(cfg_path))
