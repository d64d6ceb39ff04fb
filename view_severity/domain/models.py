"""
Domain models and enums.

This module defines the core domain-level types used across the system:
- Alarm severities and their fixed rank order
- Active alarms and the view impact records they carry
- Views known to the management system
- ViewAggregate, the per-view reduced result (one output row)
- Column / Cell / Row / Page, the tabular contract handed to the host grid

These are designed as immutable (frozen) dataclasses so they can be shared
safely between the background prefetch thread and the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class Severity(str, Enum):
    """
    Canonical alarm severity labels.

    The member values are the canonical capitalisation used in output rows.
    Incoming labels are free-form strings and are matched case-insensitively
    (see :func:`normalize_severity`).

    Members
    -------
    CRITICAL : str
        Severe condition requiring immediate intervention.
    MAJOR : str
        Serious condition affecting service.
    MINOR : str
        Degraded condition not yet affecting service.
    WARNING : str
        Abnormal condition requiring attention.
    NORMAL : str
        No abnormal condition.
    """

    CRITICAL = "Critical"
    MAJOR = "Major"
    MINOR = "Minor"
    WARNING = "Warning"
    NORMAL = "Normal"


# Highest first. Used only to pick a bucket, never as a numeric weight.
SEVERITY_RANK: Tuple[Severity, ...] = (
    Severity.CRITICAL,
    Severity.MAJOR,
    Severity.MINOR,
    Severity.WARNING,
    Severity.NORMAL,
)


def normalize_severity(label: Optional[str]) -> str:
    """
    Return the histogram key for a free-form severity label.

    Parameters
    ----------
    label
        Severity label as reported by the remote system. None is treated
        as an empty label.

    Returns
    -------
    str
        Lower-cased label.
    """
    return (label or "").lower()


@dataclass(frozen=True)
class ViewImpact:
    """
    One record stating that an alarm impacts a view.

    Parameters
    ----------
    view_id
        ID of the impacted view.
    view_name
        Optional display name of the view, when the remote system provides it.
    """

    view_id: int
    view_name: Optional[str] = None


@dataclass(frozen=True)
class Alarm:
    """
    Currently active alarm as reported by the remote management system.

    Parameters
    ----------
    severity
        Free-form severity label (e.g. "Critical", "minor").
    view_impacts
        Views impacted by this alarm. May be empty.
    alarm_id
        Optional identifier of the alarm in the remote system.
    element_name
        Optional name of the element that raised the alarm.
    parameter_name
        Optional name of the parameter in alarm.
    value
        Optional display value of the parameter at alarm time.
    """

    severity: str
    view_impacts: Tuple[ViewImpact, ...] = ()
    alarm_id: Optional[str] = None
    element_name: Optional[str] = None
    parameter_name: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class View:
    """
    View known to the management system.

    Parameters
    ----------
    view_id
        Integer ID of the view.
    name
        Display name of the view.
    parent_id
        Optional ID of the parent view.
    """

    view_id: int
    name: str = ""
    parent_id: Optional[int] = None


@dataclass(frozen=True)
class ViewAggregate:
    """
    Reduced result for one view: its highest present severity and how many
    alarms impact the view at exactly that severity.

    Parameters
    ----------
    view_id
        ID of the view.
    severity
        Canonical severity label of the selected bucket.
    count
        Number of alarms in the selected bucket.
    """

    view_id: int
    severity: str
    count: int


class ColumnType(str, Enum):
    """Value type of a table column."""

    INT = "int"
    STRING = "string"


@dataclass(frozen=True)
class Column:
    """Column declaration handed to the host grid."""

    name: str
    type: ColumnType


@dataclass(frozen=True)
class Cell:
    """Single table cell."""

    value: Any


@dataclass(frozen=True)
class Row:
    """Table row; cells follow the declared column order."""

    cells: Tuple[Cell, ...]

    @property
    def values(self) -> Tuple[Any, ...]:
        return tuple(c.value for c in self.cells)


@dataclass(frozen=True)
class Page:
    """
    One page of table output.

    Parameters
    ----------
    rows
        Rows of this page.
    has_next_page
        Whether the host should request another page.
    """

    rows: Tuple[Row, ...] = field(default_factory=tuple)
    has_next_page: bool = False
