# Error taxonomy for the UseKeen MCP server.
# Date: 2026-10-19
# Version: 0.1.0
#
# Everything except StartupError is caught by the ToolDispatcher and turned
# into a failure envelope.

from typing import Optional


class UseKeenError(Exception):
    """Base class for all errors raised by this package."""


class StartupError(UseKeenError):
    """Raised when the server cannot start, e.g. the API key is not configured."""


class ArgumentValidationError(UseKeenError):
    """Raised when tool-call arguments do not match the tool's argument schema."""

    def __init__(self, message: str, *, tool_name: Optional[str] = None):
        self.tool_name = tool_name
        super().__init__(message)


class UnknownToolError(UseKeenError):
    """Raised when a tool-call request names a tool that is not registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class BackendError(UseKeenError):
    """Base class for failures talking to the UseKeen API."""


class BackendHttpError(BackendError):
    """Raised when the UseKeen API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed: {status_code} {body}")


class BackendNetworkError(BackendError):
    """Raised when the UseKeen API cannot be reached (DNS, refused connection, timeout)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"API request could not be completed: {type(cause).__name__}: {cause}")


class BackendResponseError(BackendError):
    """Raised when a successful UseKeen API response does not carry valid JSON."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"API returned invalid JSON: {detail}")
