import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from compass.api.deps import get_navigator
from compass.schemas.analysis import (
    AnalysisFailure,
    AnalyzeRequest,
    ToolDescriptor,
    ToolResult,
    text_result,
    to_tool_result,
)
from compass.services.navigator import CodebaseNavigator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])

ANALYZE_CODEBASE_TOOL = ToolDescriptor(
    name="analyze_codebase",
    description=(
        "A codebase analysis tool that runs a systematic 4-phase approach for understanding "
        "an unfamiliar software project.\n\n"
        "**Phase 1: Conceptual Understanding** - finds and summarizes key documentation "
        "(README, ARCHITECTURE, CONTRIBUTING, ...)\n"
        "**Phase 2: Structural Scaffolding** - maps the directory layout and conventions\n"
        "**Phase 3: In-Depth Code Analysis** - dependencies, entry points, code elements, "
        "idioms and architectural patterns\n"
        "**Phase 4: Synthesis and Reporting** - insights and recommendations for new "
        "developers\n\n"
        "By default ALL phases run and a comprehensive report is generated, with an "
        "executive summary, project health indicators and an onboarding checklist. A single "
        "phase can be requested instead."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "projectPath": {
                "type": "string",
                "description": "Absolute path to the project root directory to analyze",
            },
            "phase": {
                "type": "string",
                "enum": ["conceptual", "structural", "analysis", "synthesis", "all"],
                "description": "Analysis phase to execute. Use 'all' (default) for complete "
                "analysis, or specify individual phase",
            },
        },
        "required": ["projectPath"],
    },
)


@router.get("", response_model=list[ToolDescriptor])
async def list_tools() -> list[ToolDescriptor]:
    """List the tools this server exposes."""
    return [ANALYZE_CODEBASE_TOOL]


@router.post("/{tool_name}", response_model=ToolResult)
async def call_tool(
    tool_name: str,
    arguments: dict[str, Any] | None = Body(default=None),
    navigator: CodebaseNavigator = Depends(get_navigator),
) -> ToolResult:
    """
    Call a tool by name.

    Failures are reported inside the envelope (isError) rather than as
    HTTP errors.
    """
    if tool_name != ANALYZE_CODEBASE_TOOL.name:
        return text_result(f"Unknown tool: {tool_name}", is_error=True)

    try:
        request = AnalyzeRequest.model_validate(arguments or {})
    except ValidationError as e:
        logger.info(f"Rejected {tool_name} arguments: {e.error_count()} validation errors")
        return to_tool_result(AnalysisFailure(error=f"Invalid arguments: {e.errors()[0]['msg']}"))

    result = await navigator.analyze(request.project_path, request.phase)
    return to_tool_result(result)
