# The module defines a tool for searching the documentation of packages and
# services through the UseKeen API.
# Date: 2026-10-19
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Any, Type, TYPE_CHECKING
from .base_tool import BaseTool
from usekeen_mcp.utils.logger import console

if TYPE_CHECKING:
    from usekeen_mcp.services.usekeen_client import UseKeenClient

class PackageDocSearchInput(BaseModel):
    """
    Input model for the package documentation search tool.
    Attributes:
        package_name (str): Name of the package or service to search documentation for.
        query (str): Optional search term. A missing query is sent to the API as "".
    """
    package_name: str = Field(..., min_length=1, description="Name of the package or service to search documentation for (e.g. 'react', 'aws-s3', 'docker')")
    query: str = Field(default="", description="Search term to find specific information within the package/service documentation (e.g. 'file upload example', 'authentication methods')")

class PackageDocSearchTool(BaseTool):
    """
    Searches the documentation of a package or service for implementation
    details, examples and specifications.
    """
    name: str = "usekeen_package_doc_search"
    description: str = "Search documentation of packages and services to find implementation details, examples, and specifications"
    args_schema: Type[BaseModel] = PackageDocSearchInput

    async def execute(self, client: "UseKeenClient", args: PackageDocSearchInput) -> Any:
        console.info(f"Executing tool '{self.name}' for package '{args.package_name}' with query: '{args.query}'")
        return await client.fetch_documentation(args.package_name, args.query)
