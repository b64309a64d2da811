"""
Output location settings: where reports go and whether they replace the last run.

CLI flags win; otherwise the runner's environment variables apply.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from ._util import debug as _debug_fn

REPORTS_DIR_ENV = "gauge_reports_dir"
OVERWRITE_ENV = "overwrite_reports"
DEFAULT_REPORTS_DIR = "reports"
HTML_REPORT_DIR = "html-report"
TIMESTAMP_FORMAT = "%Y-%m-%d %H.%M.%S"


def _debug(msg: str) -> None:
    _debug_fn("config", msg)


def should_overwrite_reports(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True only when overwrite_reports is literally 'true' (any case)."""
    env = os.environ if environ is None else environ
    return env.get(OVERWRITE_ENV, "").lower() == "true"


def reports_base_dir(
    cli_value: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    if cli_value is not None:
        return Path(cli_value)
    env = os.environ if environ is None else environ
    value = env.get(REPORTS_DIR_ENV, "")
    return Path(value) if value else Path(DEFAULT_REPORTS_DIR)


def get_reports_directory(
    base_dir: Path,
    overwrite: bool,
    now: Optional[datetime] = None,
) -> Path:
    """Return (and create) the directory this run's report is written to.

    ``<base>/html-report`` when overwriting, otherwise a timestamped
    subdirectory of it.
    """
    report_dir = Path(base_dir) / HTML_REPORT_DIR
    if not overwrite:
        report_dir = report_dir / (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    report_dir.mkdir(parents=True, exist_ok=True)
    _debug(f"report directory: {report_dir}")
    return report_dir
