"""HTML report renderer.

Every document-model node type maps to one template under templates/.
``render`` is handed to each template so nested nodes (scenarios, steps,
concepts inside concepts) render through the same dispatch.  No HTML strings
live in this file.
"""

from functools import partial
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .._util import debug as _debug_fn
from ..model import (
    Comment,
    Concept,
    Fragment,
    HookFailure,
    Overview,
    ReportDocuments,
    Scenario,
    Sidebar,
    Spec,
    SpecHeader,
    Step,
    Table,
)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
INDEX_FILE = "index.html"

_NODE_TEMPLATES = {
    Overview: "overview.html.j2",
    Sidebar: "sidebar.html.j2",
    HookFailure: "hook_failure.html.j2",
    SpecHeader: "spec_header.html.j2",
    Spec: "spec.html.j2",
    Table: "data_table.html.j2",
    Scenario: "scenario.html.j2",
    Step: "step.html.j2",
    Concept: "concept.html.j2",
    Comment: "comment.html.j2",
    Fragment: "fragment.html.j2",
}


def _debug(msg: str) -> None:
    _debug_fn("html", msg)


def _with_loader(env: Environment) -> Environment:
    # Callers (mostly tests) may pass a bare Environment(autoescape=True).
    if env.loader is None:
        env = env.overlay(loader=FileSystemLoader(str(TEMPLATES_DIR)))
    return env


def render(node, env: Environment) -> Markup:
    """Render one document-model node (and everything under it) to markup."""
    try:
        template_name = _NODE_TEMPLATES[type(node)]
    except KeyError:
        raise TypeError(f"no template for {type(node).__name__}") from None
    env = _with_loader(env)
    template = env.get_template(template_name)
    return Markup(template.render(node=node, render=partial(render, env=env)))


def _render_page(
    docs: ReportDocuments,
    env: Environment,
    title: str,
    content: Markup,
) -> str:
    env = _with_loader(env)
    template = env.get_template("page.html.j2")
    return template.render(
        title=title,
        overview=docs.overview,
        sidebar=docs.sidebar,
        content=content,
        render=partial(render, env=env),
    )


def render_index(docs: ReportDocuments, env: Environment) -> str:
    """Overview page: suite counters, sidebar and suite-level hook failures."""
    parts = [render(f, env) for f in (docs.pre_hook_failure, docs.post_hook_failure) if f is not None]
    title = docs.overview.project_name or "Test Report"
    return _render_page(docs, env, title, Markup("\n").join(parts))


def render_spec_page(spec: Spec, docs: ReportDocuments, env: Environment) -> str:
    return _render_page(docs, env, spec.header.spec_name, render(spec, env))


def write(
    docs: ReportDocuments,
    env: Environment,
    output_dir: Path,
    spec: Optional[Spec] = None,
) -> Path:
    """Write the index page, or one spec page when ``spec`` is given."""
    output_dir = Path(output_dir)
    if spec is None:
        path = output_dir / INDEX_FILE
        html = render_index(docs, env)
    else:
        path = output_dir / spec.report_file
        html = render_spec_page(spec, docs, env)
    path.write_text(html, encoding="utf-8")
    _debug(f"wrote {path}")
    return path
