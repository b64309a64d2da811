"""
Execution result -> report document model.

Every ``to_*`` function is total: missing optional substructures degrade to
empty strings, empty lists or ``None`` hook failures. Statuses are copied from
the upstream result, never recomputed from children.
"""

from typing import List, Optional

from . import schema as pb
from ._util import debug as _debug_fn
from .filenames import sanitize_filename
from .model import (
    Comment,
    Concept,
    Fragment,
    FragmentKind,
    HookFailure,
    Item,
    Overview,
    ReportDocuments,
    Result,
    Row,
    Scenario,
    Sidebar,
    Spec,
    SpecHeader,
    SpecsMeta,
    Status,
    Step,
    Table,
)
from .status import classify, format_duration

BEFORE_SUITE = "Before Suite"
AFTER_SUITE = "After Suite"
BEFORE_SPEC = "Before Spec"
AFTER_SPEC = "After Spec"
BEFORE_SCENARIO = "Before Scenario"
AFTER_SCENARIO = "After Scenario"
BEFORE_STEP = "Before Step"
AFTER_STEP = "After Step"

_PARAMETER_KINDS = {
    pb.ParameterType.STATIC.value: FragmentKind.STATIC,
    pb.ParameterType.DYNAMIC.value: FragmentKind.DYNAMIC,
    pb.ParameterType.TABLE.value: FragmentKind.TABLE,
    pb.ParameterType.SPECIAL_TABLE.value: FragmentKind.SPECIAL_TABLE,
    pb.ParameterType.SPECIAL_STRING.value: FragmentKind.SPECIAL_STRING,
}


def _debug(msg: str) -> None:
    _debug_fn("transform", msg)


def _spec_of(res: pb.SpecResult) -> pb.ProtoSpec:
    return res.proto_spec or pb.ProtoSpec()


# ---------------------------------------------------------------------------
# Suite level
# ---------------------------------------------------------------------------

def to_overview(res: pb.SuiteResult) -> Overview:
    total = len(res.spec_results)
    failed = res.specs_failed_count
    skipped = res.specs_skipped_count
    return Overview(
        project_name=res.project_name,
        env=res.environment,
        tags=res.tags,
        success_rate=res.success_rate,
        exec_time=format_duration(res.execution_time),
        timestamp=res.timestamp,
        total_specs=total,
        failed=failed,
        passed=total - failed - skipped,
        skipped=skipped,
    )


def to_sidebar(res: pb.SuiteResult) -> Sidebar:
    specs_meta = []
    for spec_res in res.spec_results:
        spec = _spec_of(spec_res)
        specs_meta.append(SpecsMeta(
            spec_name=spec.spec_heading,
            exec_time=format_duration(spec_res.execution_time),
            failed=spec_res.failed,
            skipped=spec_res.skipped,
            tags=list(spec.tags),
            report_file=sanitize_filename(spec.spec_heading),
        ))
    return Sidebar(
        is_pre_hook_failure=res.pre_hook_failure is not None,
        specs=specs_meta,
    )


def to_hook_failure(failure: Optional[pb.ProtoHookFailure], hook_name: str) -> Optional[HookFailure]:
    if failure is None:
        return None
    return HookFailure(
        hook_name=hook_name,
        err_msg=failure.error_message,
        screenshot=failure.screen_shot,
        stack_trace=failure.stack_trace,
    )


# ---------------------------------------------------------------------------
# Spec level
# ---------------------------------------------------------------------------

def to_spec_header(res: pb.SpecResult) -> SpecHeader:
    spec = _spec_of(res)
    return SpecHeader(
        spec_name=spec.spec_heading,
        exec_time=format_duration(res.execution_time),
        file_name=spec.file_name,
        tags=list(spec.tags),
    )


def to_spec(res: pb.SpecResult) -> Spec:
    """Build one spec document.

    Comments are split around the first table seen. A second table replaces
    the first; comments keep going to the after-table list.
    """
    spec = _spec_of(res)
    before: List[str] = []
    after: List[str] = []
    scenarios: List[Scenario] = []
    table: Optional[Table] = None
    table_scanned = False
    for item in spec.items:
        if item.item_type == pb.ItemType.COMMENT:
            text = (item.comment or pb.ProtoComment()).text
            if table_scanned:
                after.append(text)
            else:
                before.append(text)
        elif item.item_type == pb.ItemType.TABLE:
            if table_scanned:
                _debug(f"{spec.spec_heading!r}: more than one table, keeping the last")
            table = to_table(item.table)
            table_scanned = True
        elif item.item_type == pb.ItemType.SCENARIO:
            scenarios.append(to_scenario(item.scenario or pb.ProtoScenario()))
    return Spec(
        header=to_spec_header(res),
        report_file=sanitize_filename(spec.spec_heading),
        comments_before_table=before,
        table=table,
        comments_after_table=after,
        scenarios=scenarios,
        pre_hook_failure=to_hook_failure(spec.pre_hook_failure, BEFORE_SPEC),
        post_hook_failure=to_hook_failure(spec.post_hook_failure, AFTER_SPEC),
    )


def to_scenario(scn: pb.ProtoScenario) -> Scenario:
    return Scenario(
        heading=scn.scenario_heading,
        exec_time=format_duration(scn.execution_time),
        tags=list(scn.tags),
        exec_status=classify(scn.failed, scn.skipped),
        contexts=get_items(scn.contexts),
        items=get_items(scn.scenario_items),
        teardown=get_items(scn.tear_down_steps),
        pre_hook_failure=to_hook_failure(scn.pre_hook_failure, BEFORE_SCENARIO),
        post_hook_failure=to_hook_failure(scn.post_hook_failure, AFTER_SCENARIO),
    )


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

def to_comment(comment: Optional[pb.ProtoComment]) -> Comment:
    return Comment(text=comment.text if comment else "")


def to_step(proto_step: pb.ProtoStep) -> Step:
    step_res = proto_step.step_execution_result or pb.StepExecutionResult()
    res = step_res.execution_result or pb.ExecutionResult()
    message = step_res.skipped_reason if step_res.skipped else res.error_message
    return Step(
        fragments=to_fragments(proto_step.fragments),
        res=Result(
            status=classify(res.failed, step_res.skipped),
            screenshot=res.screen_shot,
            stack_trace=res.stack_trace,
            message=message,
            exec_time=format_duration(res.execution_time),
        ),
        pre_hook_failure=to_hook_failure(step_res.pre_hook_failure, BEFORE_STEP),
        post_hook_failure=to_hook_failure(step_res.post_hook_failure, AFTER_STEP),
    )


def to_concept(proto_concept: pb.ProtoConcept) -> Concept:
    """The concept's own result becomes the result of its summary step."""
    concept_step = (proto_concept.concept_step or pb.ProtoStep()).model_copy(
        update={"step_execution_result": proto_concept.concept_execution_result}
    )
    return Concept(
        cpt_step=to_step(concept_step),
        items=get_items(proto_concept.steps),
    )


def get_items(proto_items: List[pb.ProtoItem]) -> List[Item]:
    items: List[Item] = []
    for i in proto_items:
        if i.item_type == pb.ItemType.STEP:
            items.append(to_step(i.step or pb.ProtoStep()))
        elif i.item_type == pb.ItemType.COMMENT:
            items.append(to_comment(i.comment))
        elif i.item_type == pb.ItemType.CONCEPT:
            items.append(to_concept(i.concept or pb.ProtoConcept()))
    return items


def to_fragments(proto_fragments: List[pb.Fragment]) -> List[Fragment]:
    """Unknown fragment or parameter types are dropped."""
    fragments: List[Fragment] = []
    for f in proto_fragments:
        if f.fragment_type == pb.FragmentType.TEXT:
            fragments.append(Fragment(kind=FragmentKind.TEXT, text=f.text))
            continue
        if f.fragment_type != pb.FragmentType.PARAMETER:
            _debug(f"dropping fragment of type {f.fragment_type!r}")
            continue
        param = f.parameter or pb.Parameter()
        kind = _PARAMETER_KINDS.get(param.parameter_type)
        if kind is None:
            _debug(f"dropping parameter of type {param.parameter_type!r}")
        elif kind == FragmentKind.TABLE:
            fragments.append(Fragment(kind=kind, table=to_table(param.table)))
        elif kind == FragmentKind.SPECIAL_TABLE:
            fragments.append(Fragment(kind=kind, name=param.name, table=to_table(param.table)))
        elif kind == FragmentKind.SPECIAL_STRING:
            fragments.append(Fragment(kind=kind, name=param.name, text=param.value))
        else:
            fragments.append(Fragment(kind=kind, text=param.value))
    return fragments


def to_table(proto_table: Optional[pb.ProtoTable]) -> Table:
    if proto_table is None:
        return Table()
    headers = proto_table.headers.cells if proto_table.headers else []
    rows = [Row(cells=list(r.cells), res=Status.PASS) for r in proto_table.rows]
    return Table(headers=list(headers), rows=rows)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def transform(res: pb.SuiteResult) -> ReportDocuments:
    """Build the full document set for one suite run."""
    docs = ReportDocuments(
        overview=to_overview(res),
        sidebar=to_sidebar(res),
        specs=[to_spec(r) for r in res.spec_results],
        pre_hook_failure=to_hook_failure(res.pre_hook_failure, BEFORE_SUITE),
        post_hook_failure=to_hook_failure(res.post_hook_failure, AFTER_SUITE),
    )
    _debug(f"{len(docs.specs)} specs, {docs.overview.failed} failed, {docs.overview.skipped} skipped")
    return docs
