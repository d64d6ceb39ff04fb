from __future__ import annotations

from typing import Iterable, List

from view_severity.domain.models import Cell, Column, ColumnType, Page, Row, ViewAggregate

VIEW_ID_COLUMN = Column("View ID", ColumnType.INT)
SEVERITY_COLUMN = Column("Severity", ColumnType.STRING)
COUNT_COLUMN = Column("Count", ColumnType.INT)

COLUMNS = (VIEW_ID_COLUMN, SEVERITY_COLUMN, COUNT_COLUMN)


def columns() -> List[Column]:
    """
    Return the fixed column schema: View ID (int), Severity (str), Count (int).
    """
    return list(COLUMNS)


def to_row(aggregate: ViewAggregate) -> Row:
    return Row(
        cells=(
            Cell(aggregate.view_id),
            Cell(aggregate.severity),
            Cell(aggregate.count),
        )
    )


def materialize(aggregates: Iterable[ViewAggregate]) -> Page:
    """
    Convert per-view results into a single, final page of rows.

    The aggregation already holds the full result in memory, so the page
    always reports that no further pages follow.

    Parameters
    ----------
    aggregates
        Reduced per-view results.

    Returns
    -------
    Page
        All rows, in input order, with ``has_next_page=False``.
    """
    return Page(rows=tuple(to_row(a) for a in aggregates), has_next_page=False)
