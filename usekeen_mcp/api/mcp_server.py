# The module wires the tool dispatcher to the MCP protocol over stdio.
# Date: 2026-10-19
# Version: 0.1.0

from typing import Any, Dict, List, Optional
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from usekeen_mcp.core.config import SERVER_NAME, SERVER_VERSION
from usekeen_mcp.core.dispatcher import ToolDispatcher
from usekeen_mcp.core.tool_registry import ToolRegistry
from usekeen_mcp.models.common import ToolCallRequest, ToolCallResponse
from usekeen_mcp.utils.logger import console


def build_tool_list(registry: ToolRegistry) -> List[types.Tool]:
    """Converts the registry's definitions into MCP tool descriptors."""
    return [
        types.Tool(name=definition.name, description=definition.description, inputSchema=definition.input_schema)
        for definition in registry.get_definitions()
    ]


def to_text_content(response: ToolCallResponse) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=block.text) for block in response.content]


def create_server(dispatcher: ToolDispatcher) -> Server:
    """
    Creates the MCP server and registers the list_tools and call_tool handlers.

    Input validation by the SDK is disabled: arguments are validated by the
    dispatcher so that invalid calls still receive the standard error envelope.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        console.debug("Received ListToolsRequest")
        return build_tool_list(dispatcher.registry)

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        response = await dispatcher.handle(ToolCallRequest(tool_name=name, arguments=arguments))
        return to_text_content(response)

    return server


async def serve_stdio(server: Server):
    """Runs the server on stdin/stdout until the host closes the stream."""
    console.info("Connecting server to transport...")
    async with stdio_server() as (read_stream, write_stream):
        console.success(f"{SERVER_NAME} running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
