# The module is to define the base class for all tools exposed by the server.
# Date: 2026-10-19
# Version: 0.1.0

from abc import ABC, abstractmethod
from pydantic import BaseModel, ValidationError
from typing import Any, Type, TYPE_CHECKING
from usekeen_mcp.core.exceptions import ArgumentValidationError
from usekeen_mcp.models.common import ToolDefinition

if TYPE_CHECKING:
    from usekeen_mcp.services.usekeen_client import UseKeenClient


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts. It drives both validation and the advertised
            JSON schema, so the two cannot drift apart.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    def validate_arguments(self, arguments: Any) -> BaseModel:
        """
        Validates raw tool-call arguments against args_schema.

        Raises:
            ArgumentValidationError: naming every offending field.
        """
        try:
            return self.args_schema.model_validate(arguments)
        except ValidationError as e:
            raise ArgumentValidationError(
                f"Invalid arguments for tool '{self.name}': {_describe_errors(e)}",
                tool_name=self.name,
            ) from e

    @abstractmethod
    async def execute(self, client: "UseKeenClient", args: BaseModel) -> Any:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            client: The UseKeen API client built at startup.
            args: The arguments, already validated against args_schema.

        Returns:
            The JSON result of the backend call, unmodified.
        """

    def get_definition(self) -> ToolDefinition:
        """
        Returns the tool's definition in the shape advertised to the MCP host.
        """
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.args_schema.model_json_schema(),
        )


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)
