from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from view_severity.core.aggregation.aggregator import ViewSeverityAggregator
from view_severity.domain.errors import AggregationError, DataSourceError
from view_severity.domain.models import Column, Page, ViewAggregate
from view_severity.runtime.prefetch import PrefetchController
from view_severity.services.materializer import columns, materialize
from view_severity.transport.base import QueryClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostContext:
    """
    Handles passed by the host grid at initialization.

    Parameters
    ----------
    client
        Query client for the remote management system.
    """

    client: QueryClient


class ViewSeverityDataSource:
    """
    Tabular data source: highest severity alarm count per view.

    The host grid drives the lifecycle:

    1) :meth:`init` once, with a :class:`HostContext`
    2) :meth:`declare_columns` to learn the schema
    3) :meth:`prepare` to start fetching in the background
    4) :meth:`fetch_page` to receive the whole table as one page

    Notes
    -----
    This class contains orchestration only. The join-and-reduce logic lives in
    :class:`ViewSeverityAggregator`; the background hand-off lives in
    :class:`PrefetchController`.
    """

    NAME = "Highest severity alarm count per view"

    def __init__(self) -> None:
        self._client: Optional[QueryClient] = None
        self._prefetch: Optional[PrefetchController[ViewAggregate]] = None

    def init(self, context: HostContext) -> None:
        """
        Store the query client handle.

        Parameters
        ----------
        context
            Host context carrying the query client.
        """
        self._client = context.client

    def declare_columns(self) -> List[Column]:
        """
        Return the fixed three-column schema.
        """
        return columns()

    def prepare(self) -> None:
        """
        Start one aggregation cycle in the background and return immediately.

        Raises
        ------
        RuntimeError
            If :meth:`init` was not called.
        """
        if self._client is None:
            raise RuntimeError("Data source not initialized")

        aggregator = ViewSeverityAggregator(client=self._client)
        self._prefetch = PrefetchController(aggregator.run, name="view-severity-prefetch")
        self._prefetch.prepare()
        logger.debug("Aggregation cycle started")

    def is_ready(self) -> bool:
        """
        Return True when :meth:`fetch_page` would not block.

        Also True when nothing was prepared (the page is then empty).
        """
        return self._prefetch is None or self._prefetch.done()

    def fetch_page(self) -> Page:
        """
        Wait for the prepared cycle and return its full result as one page.

        Returns
        -------
        Page
            All rows with ``has_next_page=False``; empty when :meth:`prepare`
            was never called or the result is empty.

        Raises
        ------
        DataSourceError
            If the cycle failed because alarms or views could not be fetched.
        """
        if self._prefetch is None:
            return Page()

        try:
            aggregates = self._prefetch.collect()
        except AggregationError as e:
            logger.error("Aggregation cycle failed: %s", e)
            raise DataSourceError(e.user_message) from e

        return materialize(aggregates)

    def close(self, timeout: float = 2.0) -> None:
        """
        Wait briefly for an in-flight cycle to finish, if one was started.

        Parameters
        ----------
        timeout
            Maximum time to wait for the prefetch thread (seconds).
        """
        if self._prefetch is not None:
            self._prefetch.join(timeout=timeout)
