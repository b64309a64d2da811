"""
Pipeline orchestrator: load the execution result, transform it, run renderers.
"""

import json
from pathlib import Path
from typing import List

from pydantic import ValidationError

from .renderers import run_all
from .schema import ReportInputError, SuiteResult
from .transform import transform


def load_suite_result(path: Path) -> SuiteResult:
    """Load and validate a suite result from JSON.

    Accepts either the suite result itself or the execution message that
    wraps it under ``suiteResult``.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ReportInputError(f"{path}: not UTF-8 encoded ({e})") from e
    except json.JSONDecodeError as e:
        raise ReportInputError(f"{path}: not valid JSON ({e})") from e
    if isinstance(data, dict) and isinstance(data.get("suiteResult"), dict):
        data = data["suiteResult"]
    try:
        return SuiteResult.model_validate(data)
    except ValidationError as e:
        raise ReportInputError(f"{path}: invalid suite result ({e.error_count()} errors)\n{e}") from e


def generate_reports(suite_result: SuiteResult, report_dir: Path) -> List[Path]:
    """Transform and render the whole report into report_dir."""
    return run_all(transform(suite_result), Path(report_dir))
