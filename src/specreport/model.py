"""
Report document model.

Built once per run by the transformer from a SuiteResult and only read by the
renderers. All models are frozen; polymorphic nodes (Item, Fragment) carry an
explicit ``kind`` tag.
"""

from enum import Enum
from typing import Annotated, List, Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Status(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"

    @property
    def css_class(self) -> str:
        return _CSS_CLASSES[self]


_CSS_CLASSES = {
    Status.PASS: "passed",
    Status.FAIL: "failed",
    Status.SKIP: "skipped",
}


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Suite-level documents ---


class Overview(_Node):
    project_name: str = ""
    env: str = ""
    tags: str = ""
    success_rate: float = 0
    exec_time: str = ""
    timestamp: str = ""
    total_specs: int = 0
    failed: int = 0
    passed: int = 0
    skipped: int = 0

    @property
    def all_passed(self) -> bool:
        return self.failed == 0 and self.skipped == 0


class SpecsMeta(_Node):
    """Sidebar entry for one spec."""

    spec_name: str
    exec_time: str = ""
    failed: bool = False
    skipped: bool = False
    tags: List[str] = Field(default_factory=list)
    report_file: str = ""

    @property
    def css_class(self) -> str:
        if self.failed:
            return "failed"
        if self.skipped:
            return "skipped"
        return "passed"


class Sidebar(_Node):
    is_pre_hook_failure: bool = False
    specs: List[SpecsMeta] = Field(default_factory=list)


class HookFailure(_Node):
    hook_name: str
    err_msg: str = ""
    screenshot: Optional[str] = None
    stack_trace: str = ""


# --- Tables and fragments ---


class Row(_Node):
    cells: List[str] = Field(default_factory=list)
    res: Status = Status.PASS


class Table(_Node):
    headers: List[str] = Field(default_factory=list)
    rows: List[Row] = Field(default_factory=list)


class FragmentKind(str, Enum):
    TEXT = "text"
    STATIC = "static"
    DYNAMIC = "dynamic"
    TABLE = "table"
    SPECIAL_TABLE = "special_table"
    SPECIAL_STRING = "special_string"


class Fragment(_Node):
    kind: FragmentKind
    text: str = ""
    name: str = ""
    table: Optional[Table] = None

    @property
    def is_parameter(self) -> bool:
        return self.kind in (FragmentKind.STATIC, FragmentKind.DYNAMIC,
                             FragmentKind.SPECIAL_STRING)

    @property
    def is_table(self) -> bool:
        return self.kind in (FragmentKind.TABLE, FragmentKind.SPECIAL_TABLE)


# --- Items ---


class Result(_Node):
    status: Status = Status.PASS
    screenshot: Optional[str] = None
    stack_trace: str = ""
    message: str = ""  # error message, or skip reason for skipped steps
    exec_time: str = ""


class Comment(_Node):
    kind: Literal["comment"] = "comment"
    text: str = ""


class Step(_Node):
    kind: Literal["step"] = "step"
    fragments: List[Fragment] = Field(default_factory=list)
    res: Result = Field(default_factory=Result)
    pre_hook_failure: Optional[HookFailure] = None
    post_hook_failure: Optional[HookFailure] = None


class Concept(_Node):
    """A summary step followed by the concept's own items."""

    kind: Literal["concept"] = "concept"
    cpt_step: Step
    items: List["Item"] = Field(default_factory=list)


Item = Annotated[Union[Step, Comment, Concept], Field(discriminator="kind")]

Concept.model_rebuild()


# --- Scenario / spec ---


class Scenario(_Node):
    heading: str = ""
    exec_time: str = ""
    tags: List[str] = Field(default_factory=list)
    exec_status: Status = Status.PASS
    contexts: List[Item] = Field(default_factory=list)
    items: List[Item] = Field(default_factory=list)
    teardown: List[Item] = Field(default_factory=list)
    pre_hook_failure: Optional[HookFailure] = None
    post_hook_failure: Optional[HookFailure] = None


class SpecHeader(_Node):
    spec_name: str = ""
    exec_time: str = ""
    file_name: str = ""
    tags: List[str] = Field(default_factory=list)


class Spec(_Node):
    header: SpecHeader = Field(default_factory=SpecHeader)
    report_file: str = ""
    comments_before_table: List[str] = Field(default_factory=list)
    table: Optional[Table] = None
    comments_after_table: List[str] = Field(default_factory=list)
    scenarios: List[Scenario] = Field(default_factory=list)
    pre_hook_failure: Optional[HookFailure] = None
    post_hook_failure: Optional[HookFailure] = None


class ReportDocuments(NamedTuple):
    """Everything rendered for one suite run."""

    overview: Overview
    sidebar: Sidebar
    specs: List[Spec]
    pre_hook_failure: Optional[HookFailure] = None
    post_hook_failure: Optional[HookFailure] = None
