from __future__ import annotations

import logging
import sys
from typing import List, Optional

from view_severity.bootstrap import build_app_system
from view_severity.domain.errors import DataSourceError
from view_severity.domain.models import Column, Page

logger = logging.getLogger(__name__)


def parse_config_arg(argv: List[str]) -> Optional[str]:
    """
    Return the value following ``--config`` in argv, if any.
    """
    if "--config" in argv:
        i = argv.index("--config")
        if i + 1 < len(argv):
            return argv[i + 1]
    return None


def render_table(columns: List[Column], page: Page) -> str:
    headers = [c.name for c in columns]
    body = [[str(v) for v in row.values] for row in page.rows]
    widths = [max(len(h), *(len(r[i]) for r in body)) if body else len(h) for i, h in enumerate(headers)]

    lines = ["  ".join(h.ljust(w) for h, w in zip(headers, widths))]
    lines.append("  ".join("-" * w for w in widths))
    for r in body:
        lines.append("  ".join(v.ljust(w) for v, w in zip(r, widths)))
    return "\n".join(lines)


def run_once(argv: List[str]) -> int:
    """
    Run one aggregation cycle and write the resulting table to stdout.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 if the cycle failed.
    """
    wiring = build_app_system(config_path=parse_config_arg(argv))
    ds = wiring.data_source

    ds.prepare()
    try:
        page = ds.fetch_page()
    except DataSourceError as e:
        logger.error("Report failed: %s", e)
        return 1

    logger.info("%s: %d rows", ds.NAME, len(page.rows))
    print(render_table(ds.declare_columns(), page))
    return 0


def main() -> None:
    """
    Headless one-shot report.

    Usage:
        python -m view_severity.dev.run_report --config path/to/config.yaml
    """
    sys.exit(run_once(sys.argv))


if __name__ == "__main__":
    main()
