# The module is to define the common models for the UseKeen MCP server.
# Date: 2026-10-19
# Version: 0.1.0

import json
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional


def to_json_text(value: Any) -> str:
    """Serializes a value to compact JSON, the format used inside every text block."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class ToolDefinition(BaseModel):
    """
    Describes a tool as it is advertised to the host on discovery.
    Attributes:
        name (str): The unique name of the tool.
        description (str): What the tool does, read by the assistant to decide when to call it.
        input_schema (dict): JSON schema of the tool's arguments.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The unique name of the tool.")
    description: str = Field(..., description="What the tool does.")
    input_schema: Dict[str, Any] = Field(..., description="JSON schema of the tool's arguments.")


class ToolCallRequest(BaseModel):
    """
    Represents a single tool call issued by the host.
    Attributes:
        tool_name (str): The name of the tool to invoke.
        arguments (Optional[dict]): The raw, unvalidated arguments.
    """
    tool_name: str = Field(..., description="The name of the tool to invoke.")
    arguments: Optional[Dict[str, Any]] = Field(default=None, description="The raw tool-call arguments.")


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    """
    The envelope returned for every tool call, on success and on failure.
    Success carries the serialized backend result; failure carries a serialized
    {"error": message} object.
    """
    content: List[TextContent] = Field(default_factory=list)

    @classmethod
    def success(cls, result: Any) -> "ToolCallResponse":
        return cls(content=[TextContent(text=to_json_text(result))])

    @classmethod
    def failure(cls, message: str) -> "ToolCallResponse":
        return cls(content=[TextContent(text=to_json_text({"error": message}))])
