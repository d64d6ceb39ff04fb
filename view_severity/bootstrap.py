from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from view_severity.core.config.yaml_config import AppConfig, LoggingConfig, load_app_config
from view_severity.services.data_source import HostContext, ViewSeverityDataSource
from view_severity.transport.rest_client import RestClientConfig, RestQueryClient


@dataclass(frozen=True)
class AppWiring:
    """Everything a host (UI or report) needs to run aggregation cycles."""
    config: AppConfig
    client: RestQueryClient
    data_source: ViewSeverityDataSource


def configure_logging(cfg: LoggingConfig) -> None:
    logging.basicConfig(level=getattr(logging, cfg.level), format=cfg.format)


def build_client(cfg: AppConfig) -> RestQueryClient:
    auth_header = cfg.remote.auth_header

    if auth_header and not auth_header.startswith("Bearer "):
        auth_header = f"Bearer {auth_header}"

    return RestQueryClient(
        RestClientConfig(
            base_url=cfg.remote.base_url,
            alarms_path=cfg.remote.alarms_path,
            views_path=cfg.remote.views_path,
            timeout_s=cfg.remote.timeout_s,
            verify_tls=cfg.remote.verify_tls,
            auth_header=auth_header,
        )
    )


def build_app_system(config_path: Optional[str] = None, cfg: Optional[AppConfig] = None) -> AppWiring:
    cfg = cfg or load_app_config(config_path)

    # --- LOGGING ---
    configure_logging(cfg.logging)

    # --- REMOTE ---
    client = build_client(cfg)

    # --- DATA SOURCE ---
    data_source = ViewSeverityDataSource()
    data_source.init(HostContext(client=client))

    return AppWiring(config=cfg, client=client, data_source=data_source)
