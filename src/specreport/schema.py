"""
Execution-result input schema.

Loosely typed contract with the upstream test runner. The suite result is
delivered as the JSON form of its protobuf messages (camelCase keys, enums as
strings, bytes as base64 text, int64 as strings). Every field is optional or
defaulted so partial trees validate; the transformer is the single place that
turns this into the fully populated report model.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReportInputError(Exception):
    """Raised when the raw execution result cannot be read or validated."""


class _ProtoModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# --- Enumerations (compared against the raw string values) ---


class ItemType(str, Enum):
    STEP = "Step"
    COMMENT = "Comment"
    CONCEPT = "Concept"
    SCENARIO = "Scenario"
    TABLE_DRIVEN_SCENARIO = "TableDrivenScenario"
    TABLE = "Table"
    TAGS = "Tags"


class FragmentType(str, Enum):
    TEXT = "Text"
    PARAMETER = "Parameter"


class ParameterType(str, Enum):
    STATIC = "Static"
    DYNAMIC = "Dynamic"
    SPECIAL_STRING = "Special_String"
    SPECIAL_TABLE = "Special_Table"
    TABLE = "Table"


# --- Leaves ---


class ProtoHookFailure(_ProtoModel):
    """Failure raised by a before/after hook."""

    stack_trace: str = ""
    error_message: str = ""
    screen_shot: Optional[str] = None  # base64 text, opaque to the report
    table_row_index: int = 0


class ProtoTableRow(_ProtoModel):
    cells: List[str] = Field(default_factory=list)


class ProtoTable(_ProtoModel):
    headers: Optional[ProtoTableRow] = None
    rows: List[ProtoTableRow] = Field(default_factory=list)


class ProtoComment(_ProtoModel):
    text: str = ""


class Parameter(_ProtoModel):
    parameter_type: Optional[str] = None
    value: str = ""
    name: str = ""
    table: Optional[ProtoTable] = None


class Fragment(_ProtoModel):
    fragment_type: Optional[str] = None
    text: str = ""
    parameter: Optional[Parameter] = None


class ExecutionResult(_ProtoModel):
    failed: bool = False
    recoverable_error: bool = False
    error_message: str = ""
    stack_trace: str = ""
    screen_shot: Optional[str] = None
    execution_time: int = 0  # milliseconds


class StepExecutionResult(_ProtoModel):
    execution_result: Optional[ExecutionResult] = None
    pre_hook_failure: Optional[ProtoHookFailure] = None
    post_hook_failure: Optional[ProtoHookFailure] = None
    skipped: bool = False
    skipped_reason: str = ""


class ProtoStep(_ProtoModel):
    actual_text: str = ""
    parsed_text: str = ""
    fragments: List[Fragment] = Field(default_factory=list)
    step_execution_result: Optional[StepExecutionResult] = None


# --- Recursive containers ---


class ProtoConcept(_ProtoModel):
    concept_step: Optional[ProtoStep] = None
    steps: List["ProtoItem"] = Field(default_factory=list)
    concept_execution_result: Optional[StepExecutionResult] = None


class ProtoScenario(_ProtoModel):
    scenario_heading: str = ""
    failed: bool = False
    skipped: bool = False
    contexts: List["ProtoItem"] = Field(default_factory=list)
    scenario_items: List["ProtoItem"] = Field(default_factory=list)
    tear_down_steps: List["ProtoItem"] = Field(default_factory=list)
    pre_hook_failure: Optional[ProtoHookFailure] = None
    post_hook_failure: Optional[ProtoHookFailure] = None
    tags: List[str] = Field(default_factory=list)
    execution_time: int = 0
    skip_errors: List[str] = Field(default_factory=list)


class ProtoItem(_ProtoModel):
    """One entry of a spec, scenario, or concept item list."""

    # Proto JSON omits zero-valued enums; an absent item type reads as Step.
    item_type: Optional[str] = ItemType.STEP.value
    step: Optional[ProtoStep] = None
    concept: Optional[ProtoConcept] = None
    scenario: Optional[ProtoScenario] = None
    comment: Optional[ProtoComment] = None
    table: Optional[ProtoTable] = None


ProtoConcept.model_rebuild()
ProtoScenario.model_rebuild()


# --- Spec / suite ---


class ProtoSpec(_ProtoModel):
    spec_heading: str = ""
    items: List[ProtoItem] = Field(default_factory=list)
    is_table_driven: bool = False
    pre_hook_failure: Optional[ProtoHookFailure] = None
    post_hook_failure: Optional[ProtoHookFailure] = None
    file_name: str = ""
    tags: List[str] = Field(default_factory=list)


class SpecResult(_ProtoModel):
    proto_spec: Optional[ProtoSpec] = None
    scenario_count: int = 0
    scenario_failed_count: int = 0
    scenario_skipped_count: int = 0
    failed: bool = False
    skipped: bool = False
    execution_time: int = 0


class SuiteResult(_ProtoModel):
    """
    Root of the raw execution result. One per suite run.
    """

    spec_results: List[SpecResult] = Field(default_factory=list)
    pre_hook_failure: Optional[ProtoHookFailure] = None
    post_hook_failure: Optional[ProtoHookFailure] = None
    failed: bool = False
    specs_failed_count: int = 0
    specs_skipped_count: int = 0
    execution_time: int = 0
    success_rate: float = 0
    environment: str = ""
    tags: str = ""
    project_name: str = ""
    timestamp: str = ""
