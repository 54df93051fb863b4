# usekeen_mcp/core/dispatcher.py
# Routes tool-call requests to tools and wraps every outcome in a response envelope.
# Date: 2026-10-19
# Version: 0.1.0

from usekeen_mcp.core.exceptions import ArgumentValidationError, UnknownToolError, UseKeenError
from usekeen_mcp.core.tool_registry import ToolRegistry
from usekeen_mcp.models.common import ToolCallRequest, ToolCallResponse
from usekeen_mcp.services.usekeen_client import UseKeenClient
from usekeen_mcp.utils.logger import console

class ToolDispatcher:
    """
    Handles tool calls against a registry and a UseKeen client.

    The dispatcher holds no per-call state, so concurrent calls are safe.
    handle() never raises: unknown tools, invalid arguments and backend
    failures all come back as a failure envelope.
    """
    def __init__(self, client: UseKeenClient, registry: ToolRegistry):
        self.client = client
        self.registry = registry

    async def handle(self, request: ToolCallRequest) -> ToolCallResponse:
        console.info(f"Received tool call: {request.model_dump_json()}")

        tool = self.registry.get(request.tool_name)
        if tool is None:
            error = UnknownToolError(request.tool_name)
            console.error(str(error))
            return ToolCallResponse.failure(str(error))

        try:
            if request.arguments is None:
                raise ArgumentValidationError("No arguments provided", tool_name=tool.name)
            args = tool.validate_arguments(request.arguments)
            result = await tool.execute(self.client, args)
        except UseKeenError as e:
            console.error(f"Error executing tool '{tool.name}': {e}")
            return ToolCallResponse.failure(str(e))
        except Exception as e:
            console.exception(f"Unexpected error executing tool '{tool.name}'")
            return ToolCallResponse.failure(str(e) or type(e).__name__)

        console.success(f"Tool '{tool.name}' executed successfully.")
        return ToolCallResponse.success(result)
