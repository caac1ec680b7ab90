"""Pydantic schemas for the analyze_codebase tool.

Field names are snake_case in Python and camelCase on the wire, matching
the tool's published input schema. Optional fields that do not apply to a
response (repositoryRoot when the path was already the root, completedPhases
for a single phase, ...) are left out of the serialized JSON.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PhaseName = Literal["conceptual", "structural", "analysis", "synthesis", "all"]


class AnalyzeRequest(BaseModel):
    """Arguments of an analyze_codebase call."""

    model_config = ConfigDict(populate_by_name=True)

    project_path: str = Field(
        default="",
        alias="projectPath",
        description="Absolute path to the project root directory to analyze",
    )
    # Left as a free string so an unknown phase is reported by the tool
    # itself rather than rejected by request validation
    phase: str = Field(
        default="all",
        description="Analysis phase to execute. Use 'all' (default) for complete analysis, "
        "or specify individual phase",
    )


class AnalysisResponse(BaseModel):
    """Successful analysis of one phase, or of all phases combined."""

    model_config = ConfigDict(populate_by_name=True)

    phase: str = Field(description="Executed phase, or 'comprehensive' for phase 'all'")
    project_path: str = Field(alias="projectPath", description="Effective (repository root) path")
    repository_root: str | None = Field(
        default=None,
        alias="repositoryRoot",
        description="Set when the root differs from the provided path",
    )
    provided_path: str | None = Field(
        default=None,
        alias="providedPath",
        description="Path as given by the caller, set when it differs from the root",
    )
    findings: str = Field(description="Markdown report")
    next_phase_needed: bool = Field(alias="nextPhaseNeeded")
    analysis_history_length: int = Field(
        alias="analysisHistoryLength",
        description="Phase records held by the session after this call",
    )
    suggested_next_phase: str | None = Field(
        default=None,
        alias="suggestedNextPhase",
        description="Advisory next phase, 'complete' after synthesis",
    )
    completed_phases: list[str] | None = Field(default=None, alias="completedPhases")


class AnalysisFailure(BaseModel):
    """Structured error payload returned instead of raising."""

    error: str
    status: Literal["failed"] = "failed"


# ─────────────────────────────────────────────────────────────
# Tool envelope
# ─────────────────────────────────────────────────────────────


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Text envelope wrapping every tool call result."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")


class ToolDescriptor(BaseModel):
    """Published description of a callable tool."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict = Field(alias="inputSchema")


def text_result(text: str, is_error: bool = False) -> ToolResult:
    return ToolResult(content=[TextContent(text=text)], is_error=is_error)


def to_tool_result(result: AnalysisResponse | AnalysisFailure) -> ToolResult:
    """Wrap an analysis result as pretty-printed JSON text in the tool envelope."""
    text = result.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    return text_result(text, is_error=isinstance(result, AnalysisFailure))
