"""
Error taxonomy for the aggregation cycle.

Fetch failures abort a cycle before any reduction happens. They are raised by
the aggregator on the background thread, carried across to the caller by the
prefetch controller, and surfaced to the host as a :class:`DataSourceError`
when the page is requested.

An empty result (zero views and zero alarms) is not an error.
"""

from __future__ import annotations


class AggregationError(Exception):
    """
    Base class for failures that terminate an aggregation cycle.

    Attributes
    ----------
    user_message
        Short message suitable for display in the host UI.
    """

    user_message = "Aggregation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class AlarmFetchUnavailable(AggregationError):
    """The active-alarms query did not return a usable response."""

    user_message = "No alarms found."


class ViewFetchUnavailable(AggregationError):
    """The views query did not return a usable response."""

    user_message = "No views found."


class DataSourceError(Exception):
    """User-visible error raised from the data source's page request."""
