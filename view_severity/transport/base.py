from __future__ import annotations

from typing import List, Optional, Protocol

from view_severity.domain.models import Alarm, View


class QueryClient(Protocol):
    """
    Protocol interface for the remote management system.

    Any client can be used if it provides the two query methods below. This
    keeps the aggregator independent of the transport and makes it easy to
    test with in-memory fakes.

    Both methods return None when the query could not be completed. An empty
    list is a successful answer meaning "nothing there".

    Methods
    -------
    fetch_active_alarms()
        Return all currently active alarms, or None on failure.
    fetch_views()
        Return all known views, or None on failure.
    """

    def fetch_active_alarms(self) -> Optional[List[Alarm]]:
        ...

    def fetch_views(self) -> Optional[List[View]]:
        ...
