from compass.schemas.analysis import (
    AnalysisFailure,
    AnalysisResponse,
    AnalyzeRequest,
    TextContent,
    ToolDescriptor,
    ToolResult,
    text_result,
    to_tool_result,
)

__all__ = [
    "AnalyzeRequest",
    "AnalysisResponse",
    "AnalysisFailure",
    "TextContent",
    "ToolResult",
    "ToolDescriptor",
    "text_result",
    "to_tool_result",
]
