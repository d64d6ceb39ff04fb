"""
Unit tests for view_severity.bootstrap.

Validates wiring from config to an initialized data source and the
Bearer-prefix rule for bare tokens. No network I/O is performed.
"""

from __future__ import annotations

from view_severity.bootstrap import build_app_system, build_client
from view_severity.core.config.yaml_config import parse_app_config
from view_severity.services.data_source import ViewSeverityDataSource


def _cfg(auth_header=None):
    remote = {"base_url": "http://dms/api"}
    if auth_header is not None:
        remote["auth_header"] = auth_header
    return parse_app_config({"remote": remote})


def test_bare_token_gets_bearer_prefix() -> None:
    client = build_client(_cfg("abc123"))
    assert client._cfg.auth_header == "Bearer abc123"


def test_bearer_token_is_kept() -> None:
    client = build_client(_cfg("Bearer abc123"))
    assert client._cfg.auth_header == "Bearer abc123"


def test_no_token_means_no_header() -> None:
    client = build_client(_cfg())
    assert client._cfg.auth_header is None


def test_build_app_system_returns_initialized_data_source(monkeypatch) -> None:
    def fake_get(*args, **kwargs):
        raise AssertionError("no I/O at wiring time")

    monkeypatch.setattr("requests.get", fake_get)

    wiring = build_app_system(cfg=_cfg("tok"))

    assert isinstance(wiring.data_source, ViewSeverityDataSource)
    assert wiring.client._cfg.base_url == "http://dms/api"
    # init() ran, so fetching a page before prepare() is simply empty
    assert wiring.data_source.fetch_page().rows == ()
