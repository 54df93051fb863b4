# The module defines a tool for discovering packages by name or description
# through the UseKeen API.
# Date: 2026-10-19
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Any, Type, TYPE_CHECKING
from .base_tool import BaseTool
from usekeen_mcp.utils.logger import console

if TYPE_CHECKING:
    from usekeen_mcp.services.usekeen_client import UseKeenClient

MAX_RESULTS_LIMIT = 100
DEFAULT_MAX_RESULTS = 10

class PackageSearchInput(BaseModel):
    """
    Input model for the package search tool.
    Attributes:
        query (str): Search query to find relevant packages.
        max_results (int): Maximum number of packages to return (1-100).
    """
    query: str = Field(..., min_length=1, description="Search query to find relevant packages (e.g. 'web framework', 'authentication', 'database orm')")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, le=MAX_RESULTS_LIMIT, strict=True, description="Maximum number of packages to return (1-100, default: 10)")

class PackageSearchTool(BaseTool):
    """
    Searches for packages by name or description, typically before diving
    into their documentation with the documentation search tool.
    """
    name: str = "usekeen_package_search"
    description: str = "Search for packages by name or description to discover relevant packages before diving into their documentation"
    args_schema: Type[BaseModel] = PackageSearchInput

    async def execute(self, client: "UseKeenClient", args: PackageSearchInput) -> Any:
        console.info(f"Executing tool '{self.name}' with query: '{args.query}' (max_results={args.max_results})")
        return await client.fetch_packages(args.query, args.max_results)
