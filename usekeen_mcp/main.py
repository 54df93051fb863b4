# The module provides the entry point for the UseKeen MCP server.
# Date: 2026-10-19
# Version: 0.1.0

import asyncio
import sys
from typing import Optional
import httpx
from mcp.server.lowlevel import Server
from usekeen_mcp.api.mcp_server import create_server, serve_stdio
from usekeen_mcp.core.config import SERVER_NAME, Settings, load_settings
from usekeen_mcp.core.dispatcher import ToolDispatcher
from usekeen_mcp.core.exceptions import StartupError
from usekeen_mcp.core.tool_registry import ToolRegistry
from usekeen_mcp.services.usekeen_client import UseKeenClient
from usekeen_mcp.utils.logger import console


def mask_api_key(api_key: str) -> str:
    """Shows only the first and last four characters of a key."""
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}...{api_key[-4:]}"


def create_app(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> Server:
    """
    Builds the client, registry and dispatcher from settings and returns the
    wired MCP server.
    """
    client = UseKeenClient(
        api_key=settings.USEKEEN_API_KEY,
        base_url=settings.USEKEEN_API_BASE_URL,
        timeout=settings.USEKEEN_API_TIMEOUT,
        transport=transport,
    )
    dispatcher = ToolDispatcher(client=client, registry=ToolRegistry())
    return create_server(dispatcher)


def main():
    try:
        settings = load_settings()
    except StartupError as e:
        console.error(str(e))
        sys.exit(1)

    console.set_level(settings.LOG_LEVEL)
    console.rule(f"Starting {SERVER_NAME}")
    console.info(f"Using API Key: {mask_api_key(settings.USEKEEN_API_KEY)}")
    console.info(f"Using API base URL: {settings.USEKEEN_API_BASE_URL}")

    try:
        server = create_app(settings)
        asyncio.run(serve_stdio(server))
    except KeyboardInterrupt:
        console.warning("Interrupted, shutting down.")
    except Exception:
        console.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
