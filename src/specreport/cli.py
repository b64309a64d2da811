"""
CLI argument parsing.
"""

import argparse
from pathlib import Path
from typing import Optional


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="specreport",
        description="Render a test-suite execution result (JSON) into an HTML report.",
    )
    parser.add_argument(
        "result",
        type=Path,
        metavar="RESULT_JSON",
        help="Suite execution result as JSON",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        type=Path,
        default=None,
        help="Base reports directory (default: $gauge_reports_dir, else ./reports). "
             "The report is written to <dir>/html-report.",
    )

    overwrite = parser.add_mutually_exclusive_group()
    overwrite.add_argument(
        "--overwrite",
        dest="overwrite",
        action="store_true",
        default=None,
        help="Replace the previous report (default when $overwrite_reports is 'true')",
    )
    overwrite.add_argument(
        "--no-overwrite",
        dest="overwrite",
        action="store_false",
        help="Write into a new timestamped directory under html-report/",
    )

    return parser.parse_args(argv)
