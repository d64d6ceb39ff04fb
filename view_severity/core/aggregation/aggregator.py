"""
View-severity aggregation.

Joins the active alarms and the known views into one severity histogram per
view, then reduces each histogram to its highest-ranked present bucket:

1. bucket every alarm into each view it impacts (see ``build_histograms``)
2. seed every known view without alarms with an empty "Normal" bucket
3. pick the first present bucket in rank order Critical > Major > Minor >
   Warning > Normal and report its alarm count

Fetch failures short-circuit before any histogram is built, so callers never
see a partial result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from view_severity.core.aggregation.histogram import ViewHistograms, build_histograms, seed_views
from view_severity.domain.errors import AlarmFetchUnavailable, ViewFetchUnavailable
from view_severity.domain.models import Alarm, View, ViewAggregate
from view_severity.transport.base import QueryClient

logger = logging.getLogger(__name__)


def reduce_histograms(histograms: ViewHistograms) -> List[ViewAggregate]:
    """
    Reduce each view's histogram to its highest-ranked present bucket.

    Parameters
    ----------
    histograms
        View ID -> SeverityHistogram.

    Returns
    -------
    list of ViewAggregate
        One entry per view, in histogram key order. Views whose histogram
        holds none of the ranked severities are dropped.
    """
    result: List[ViewAggregate] = []
    for view_id, histogram in histograms.items():
        severity = histogram.highest()
        if severity is None:
            logger.debug("View %s has no ranked severity bucket; dropped", view_id)
            continue
        result.append(
            ViewAggregate(
                view_id=view_id,
                severity=severity.value,
                count=histogram.count(severity.value) or 0,
            )
        )
    return result


@dataclass
class ViewSeverityAggregator:
    """
    Compute the highest-severity alarm count for every view.

    The aggregator is stateless between runs: histograms are built fresh for
    every call and discarded after reduction.

    Parameters
    ----------
    client
        Optional query client used by :meth:`run`. Not needed when calling
        :meth:`aggregate` with already-fetched collections.
    """

    client: Optional[QueryClient] = None

    def aggregate(
        self,
        alarms: Optional[Sequence[Optional[Alarm]]],
        views: Optional[Sequence[Optional[View]]],
    ) -> List[ViewAggregate]:
        """
        Aggregate fetched alarms and views into per-view results.

        Parameters
        ----------
        alarms
            Active alarms, or None if the alarms query failed.
        views
            Known views, or None if the views query failed.

        Returns
        -------
        list of ViewAggregate
            Alarm-derived views first (first-seen order), then views that
            only appear in the known-views list.

        Raises
        ------
        AlarmFetchUnavailable
            If ``alarms`` is None.
        ViewFetchUnavailable
            If ``views`` is None.
        """
        if alarms is None:
            raise AlarmFetchUnavailable()
        if views is None:
            raise ViewFetchUnavailable()

        histograms = seed_views(build_histograms(alarms), views)
        return reduce_histograms(histograms)

    def run(self) -> List[ViewAggregate]:
        """
        Fetch alarms and views from the client, then aggregate them.

        The views query is not issued when the alarms query has already
        failed.

        Returns
        -------
        list of ViewAggregate
            Aggregated per-view results.

        Raises
        ------
        RuntimeError
            If no client is configured.
        AlarmFetchUnavailable, ViewFetchUnavailable
            If the corresponding query failed.
        """
        if self.client is None:
            raise RuntimeError("No query client configured")

        alarms = self.client.fetch_active_alarms()
        if alarms is None:
            logger.warning("Active alarms query returned no usable response")
            raise AlarmFetchUnavailable()

        views = self.client.fetch_views()
        if views is None:
            logger.warning("Views query returned no usable response")
            raise ViewFetchUnavailable()

        result = self.aggregate(alarms, views)
        logger.info("Aggregated %d alarms over %d views into %d rows", len(alarms), len(views), len(result))
        return result
