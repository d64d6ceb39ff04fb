"""
Unit tests for view_severity.services.data_source.ViewSeverityDataSource.

These tests drive the data source the way a host grid does
(init -> declare_columns -> prepare -> fetch_page) against an in-memory
query client, and validate:
- the full result is delivered as one page with no further pages
- fetch_page() without prepare() yields an empty page, not an error
- fetch failures surface as a user-visible DataSourceError at page time
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from view_severity.domain.errors import AlarmFetchUnavailable, DataSourceError, ViewFetchUnavailable
from view_severity.domain.models import Alarm, View, ViewImpact
from view_severity.services.data_source import HostContext, ViewSeverityDataSource
from view_severity.transport.rest_client import RestClientConfig, RestQueryClient


@dataclass
class FakeClient:
    """In-memory query client; None simulates a failed query."""

    alarms: Optional[List[Alarm]] = field(default_factory=list)
    views: Optional[List[View]] = field(default_factory=list)
    gate: Optional[threading.Event] = None

    def fetch_active_alarms(self) -> Optional[List[Alarm]]:
        if self.gate is not None:
            self.gate.wait(5.0)
        return self.alarms

    def fetch_views(self) -> Optional[List[View]]:
        return self.views


def _alarm(severity: str, *view_ids: int) -> Alarm:
    return Alarm(severity=severity, view_impacts=tuple(ViewImpact(view_id=v) for v in view_ids))


def _mk_source(client: FakeClient) -> ViewSeverityDataSource:
    ds = ViewSeverityDataSource()
    ds.init(HostContext(client=client))
    return ds


def test_declares_three_columns() -> None:
    ds = _mk_source(FakeClient())
    assert [c.name for c in ds.declare_columns()] == ["View ID", "Severity", "Count"]


def test_full_cycle_returns_single_page() -> None:
    client = FakeClient(
        alarms=[_alarm("Major", 1), _alarm("Critical", 1), _alarm("minor", 5)],
        views=[View(view_id=1), View(view_id=2)],
    )
    ds = _mk_source(client)

    ds.prepare()
    page = ds.fetch_page()

    assert [r.values for r in page.rows] == [(1, "Critical", 1), (5, "Minor", 1), (2, "Normal", 0)]
    assert page.has_next_page is False


def test_fetch_page_without_prepare_is_empty() -> None:
    ds = _mk_source(FakeClient(alarms=[_alarm("Critical", 1)], views=[View(view_id=1)]))

    page = ds.fetch_page()

    assert page.rows == ()
    assert page.has_next_page is False
    assert ds.is_ready() is True


def test_empty_system_gives_empty_page() -> None:
    ds = _mk_source(FakeClient())
    ds.prepare()
    page = ds.fetch_page()
    assert page.rows == ()
    assert page.has_next_page is False


def test_alarm_fetch_failure_raises_user_visible_error() -> None:
    ds = _mk_source(FakeClient(alarms=None, views=[View(view_id=1)]))
    ds.prepare()

    with pytest.raises(DataSourceError, match="No alarms found.") as exc_info:
        ds.fetch_page()

    assert isinstance(exc_info.value.__cause__, AlarmFetchUnavailable)


def test_view_fetch_failure_raises_user_visible_error() -> None:
    ds = _mk_source(FakeClient(alarms=[_alarm("Critical", 1)], views=None))
    ds.prepare()

    with pytest.raises(DataSourceError, match="No views found.") as exc_info:
        ds.fetch_page()

    assert isinstance(exc_info.value.__cause__, ViewFetchUnavailable)


def test_prepare_before_init_raises() -> None:
    with pytest.raises(RuntimeError):
        ViewSeverityDataSource().prepare()


def test_is_ready_tracks_background_cycle() -> None:
    gate = threading.Event()
    ds = _mk_source(FakeClient(alarms=[], views=[View(view_id=9)], gate=gate))

    ds.prepare()
    assert ds.is_ready() is False

    gate.set()
    page = ds.fetch_page()

    assert ds.is_ready() is True
    assert [r.values for r in page.rows] == [(9, "Normal", 0)]


def test_each_prepare_refetches() -> None:
    client = FakeClient(alarms=[], views=[View(view_id=1)])
    ds = _mk_source(client)

    ds.prepare()
    first = ds.fetch_page()

    client.alarms = [_alarm("Warning", 1)]
    ds.prepare()
    second = ds.fetch_page()

    assert [r.values for r in first.rows] == [(1, "Normal", 0)]
    assert [r.values for r in second.rows] == [(1, "Warning", 1)]


def test_malformed_remote_impacts_never_escape_as_raw_errors(monkeypatch) -> None:
    bodies = {
        "http://dms/api/alarms/active": {"alarms": [{"severity": "Critical", "viewImpacts": 5}]},
        "http://dms/api/views": {"views": [{"id": 1}]},
    }

    def fake_get(url, **kwargs):
        r = MagicMock()
        r.raise_for_status.return_value = None
        r.json.return_value = bodies[url]
        return r

    monkeypatch.setattr("requests.get", fake_get)

    ds = ViewSeverityDataSource()
    ds.init(HostContext(client=RestQueryClient(RestClientConfig(base_url="http://dms/api"))))
    ds.prepare()
    page = ds.fetch_page()

    # the alarm has no usable impacts, so the known view is reported as Normal
    assert [r.values for r in page.rows] == [(1, "Normal", 0)]


def test_close_waits_for_in_flight_cycle() -> None:
    gate = threading.Event()
    ds = _mk_source(FakeClient(alarms=[], views=[View(view_id=1)], gate=gate))

    ds.close()
    ds.prepare()
    gate.set()
    ds.close(timeout=5.0)

    assert ds.is_ready() is True
    assert [r.values for r in ds.fetch_page().rows] == [(1, "Normal", 0)]


def test_name_matches_display_name() -> None:
    assert ViewSeverityDataSource.NAME == "Highest severity alarm count per view"
