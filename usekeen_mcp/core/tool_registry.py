# Discovers and manages all available tools.
# Date: 2026-10-19
# Version: 0.1.0

import importlib
import inspect
import pkgutil
from typing import Dict, Iterable, List, Optional
from usekeen_mcp import tools as tools_package
from usekeen_mcp.tools.base_tool import BaseTool
from usekeen_mcp.models.common import ToolDefinition
from usekeen_mcp.utils.logger import console

class ToolRegistry:
    """
    An ordered, read-only catalog of the tools the server exposes.

    When no tools are given, every BaseTool subclass found in the
    usekeen_mcp.tools package is instantiated and registered, with modules
    scanned in name order.
    """
    def __init__(self, tools: Optional[Iterable[BaseTool]] = None):
        self._tools: Dict[str, BaseTool] = {}
        for tool in (self._discover_tools() if tools is None else tools):
            self._register(tool)
        console.success(f"Tool registry ready with {len(self._tools)} tools: {self.names()}")

    def _register(self, tool: BaseTool):
        if tool.name in self._tools:
            raise ValueError(f"Duplicate tool name: '{tool.name}'")
        self._tools[tool.name] = tool
        console.debug(f"Registered tool: '{tool.name}'")

    @staticmethod
    def _discover_tools() -> List[BaseTool]:
        """
        Scans the usekeen_mcp.tools package, imports all modules, and creates an
        instance of each concrete class that inherits from BaseTool.
        """
        discovered: List[BaseTool] = []
        module_names = sorted(
            modname for _, modname, _ in pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}.")
        )
        for modname in module_names:
            if modname == f"{tools_package.__name__}.base_tool":
                continue
            module = importlib.import_module(modname)
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, BaseTool) and not inspect.isabstract(obj) and obj.__module__ == module.__name__:
                    discovered.append(obj())
        return discovered

    def get(self, name: str) -> Optional[BaseTool]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def get_definitions(self) -> List[ToolDefinition]:
        """Returns the definitions of all registered tools, in registration order."""
        return [tool.get_definition() for tool in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
