from __future__ import annotations

from typing import List, Tuple

from view_severity.domain.models import SEVERITY_RANK, Page

TextRow = Tuple[str, str, str]  # view id, severity, count


def text_rows(page: Page) -> List[TextRow]:
    """
    Format page rows as display strings, keeping the page order.
    """
    rows: List[TextRow] = []
    for row in page.rows:
        view_id, severity, count = row.values
        rows.append((str(view_id), str(severity), str(count)))
    return rows


def worst_severity(page: Page) -> str:
    """
    Returns the highest severity shown on the page, "Normal" for an empty page.
    """
    present = {row.values[1] for row in page.rows}
    for severity in SEVERITY_RANK:
        if severity.value in present:
            return severity.value
    return "Normal"
