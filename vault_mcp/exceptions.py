"""Exceptions raised while translating tool calls into vault API requests."""


class VaultMCPError(Exception):
    """Base exception for the vault MCP bridge."""


class ConfigurationError(VaultMCPError):
    """Raised when the startup configuration is invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid configuration: " + "; ".join(errors))


class UnknownToolError(VaultMCPError):
    """Raised when a call names a tool that is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class VaultAPIError(VaultMCPError):
    """Raised when the vault API answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API request failed: {status_code} {reason}")


class VaultResponseError(VaultMCPError):
    """Raised when a successful response body is not valid JSON."""
