from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from view_severity.domain.models import SEVERITY_RANK, Alarm, Severity, View, normalize_severity

ViewHistograms = Dict[int, "SeverityHistogram"]


@dataclass
class SeverityHistogram:
    """
    Alarms impacting one view, bucketed by severity.

    Bucket keys are normalized (lower-cased) severity labels so that
    "critical", "CRITICAL" and "Critical" land in the same bucket.

    Notes
    -----
    - Owned by the aggregator for the duration of one run; not thread-safe.
    - A bucket created from real alarms always holds at least one alarm. Only
      :meth:`normal` produces an empty bucket.
    """

    buckets: Dict[str, List[Alarm]] = field(default_factory=dict)

    @classmethod
    def normal(cls) -> "SeverityHistogram":
        """
        Histogram for a view with no active alarms: one empty "Normal" bucket.
        """
        return cls(buckets={normalize_severity(Severity.NORMAL.value): []})

    def add(self, alarm: Alarm) -> None:
        """
        Append an alarm to the bucket named by its own severity label.

        Parameters
        ----------
        alarm
            Alarm impacting the view this histogram belongs to.
        """
        self.buckets.setdefault(normalize_severity(alarm.severity), []).append(alarm)

    def count(self, severity: str) -> Optional[int]:
        """
        Return the number of alarms in a bucket, or None if the bucket is absent.
        """
        alarms = self.buckets.get(normalize_severity(severity))
        return None if alarms is None else len(alarms)

    def highest(self) -> Optional[Severity]:
        """
        Return the highest-ranked severity with a present bucket.

        Returns
        -------
        Severity or None
            None when the histogram holds only unranked labels.
        """
        for severity in SEVERITY_RANK:
            if normalize_severity(severity.value) in self.buckets:
                return severity
        return None


def build_histograms(alarms: Iterable[Optional[Alarm]]) -> ViewHistograms:
    """
    Bucket every alarm into the histogram of each view it impacts.

    Absent alarm entries and absent impact records are skipped. Alarms without
    view impacts contribute nothing. Views are keyed in first-seen order.

    Parameters
    ----------
    alarms
        Active alarms.

    Returns
    -------
    dict
        View ID -> SeverityHistogram.
    """
    histograms: ViewHistograms = {}
    for alarm in alarms:
        if alarm is None:
            continue
        for impact in alarm.view_impacts or ():
            if impact is None:
                continue
            histograms.setdefault(impact.view_id, SeverityHistogram()).add(alarm)
    return histograms


def seed_views(histograms: ViewHistograms, views: Iterable[Optional[View]]) -> ViewHistograms:
    """
    Give every known view without alarms a default "Normal" histogram.

    Views already present (because an alarm impacts them) are left untouched.

    Parameters
    ----------
    histograms
        Histograms built from alarms; updated in place.
    views
        All known views.

    Returns
    -------
    dict
        The same mapping, for chaining.
    """
    for view in views:
        if view is None or view.view_id in histograms:
            continue
        histograms[view.view_id] = SeverityHistogram.normal()
    return histograms
