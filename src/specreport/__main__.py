"""
CLI entry point. Parses args and delegates to pipeline.
"""

import sys
import traceback
from typing import Optional

from ._util import is_debug
from .cli import parse_args
from .config import get_reports_directory, reports_base_dir, should_overwrite_reports
from .pipeline import generate_reports, load_suite_result
from .schema import ReportInputError


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    overwrite = should_overwrite_reports() if args.overwrite is None else args.overwrite

    try:
        suite_result = load_suite_result(args.result)
        report_dir = get_reports_directory(reports_base_dir(args.output_dir), overwrite)
        generate_reports(suite_result, report_dir)
    except (ReportInputError, OSError) as e:
        if is_debug():
            traceback.print_exc()
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Successfully generated html-report to => {report_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
