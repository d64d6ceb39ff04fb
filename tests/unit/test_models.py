"""
Unit tests for view_severity.domain.models.

These tests validate:
- canonical severity labels and their fixed rank order
- case-insensitive severity normalization
- immutability (frozen dataclasses) of domain objects
- Row value access and Page defaults
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from view_severity.domain.models import (
    SEVERITY_RANK,
    Alarm,
    Cell,
    Page,
    Row,
    Severity,
    View,
    ViewAggregate,
    ViewImpact,
    normalize_severity,
)


def test_severity_values_are_canonical_labels() -> None:
    """
    Severity values are the labels written to output rows and should not change.
    """
    assert Severity.CRITICAL.value == "Critical"
    assert Severity.MAJOR.value == "Major"
    assert Severity.MINOR.value == "Minor"
    assert Severity.WARNING.value == "Warning"
    assert Severity.NORMAL.value == "Normal"


def test_severity_rank_is_highest_first() -> None:
    assert [s.value for s in SEVERITY_RANK] == ["Critical", "Major", "Minor", "Warning", "Normal"]


@pytest.mark.parametrize("label", ["critical", "CRITICAL", "Critical", "cRiTiCaL"])
def test_normalize_severity_is_case_insensitive(label: str) -> None:
    assert normalize_severity(label) == normalize_severity("Critical")


def test_normalize_severity_handles_none() -> None:
    assert normalize_severity(None) == ""


def test_alarm_defaults_to_no_impacts() -> None:
    alarm = Alarm(severity="Major")
    assert alarm.view_impacts == ()
    assert alarm.alarm_id is None


def test_domain_objects_are_frozen() -> None:
    """
    Domain objects cross the prefetch thread boundary and must be immutable.
    """
    alarm = Alarm(severity="Major", view_impacts=(ViewImpact(view_id=1),))
    view = View(view_id=1, name="Root")
    agg = ViewAggregate(view_id=1, severity="Major", count=1)

    with pytest.raises(FrozenInstanceError):
        alarm.severity = "Minor"  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        view.view_id = 2  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        agg.count = 5  # type: ignore[misc]


def test_row_values_follow_cell_order() -> None:
    row = Row(cells=(Cell(7), Cell("Minor"), Cell(2)))
    assert row.values == (7, "Minor", 2)


def test_page_defaults_to_empty_last_page() -> None:
    page = Page()
    assert page.rows == ()
    assert page.has_next_page is False
