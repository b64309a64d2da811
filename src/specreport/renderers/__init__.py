"""
Renderers consume the report documents and a Jinja2 environment, writing to output_dir.
"""

import shutil
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from ..model import ReportDocuments, Sidebar
from .html_report import TEMPLATES_DIR, write as write_html

STATIC_DIR = TEMPLATES_DIR / "static"


def make_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def copy_static_assets(output_dir: Path) -> None:
    """Mirror templates/static (css, js) into output_dir."""
    shutil.copytree(STATIC_DIR, output_dir, dirs_exist_ok=True)


def run_all(docs: ReportDocuments, output_dir: Path) -> List[Path]:
    """Write index.html, one page per spec, and the static assets.

    When the suite setup hook failed no spec page is written and the sidebar
    is emptied. Returns the written HTML paths, index first.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    if docs.sidebar.is_pre_hook_failure:
        docs = docs._replace(sidebar=Sidebar(is_pre_hook_failure=True), specs=[])
    env = make_environment()
    written = [write_html(docs, env, output_dir)]
    for spec in docs.specs:
        written.append(write_html(docs, env, output_dir, spec=spec))
    copy_static_assets(output_dir)
    return written
