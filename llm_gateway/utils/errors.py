"""
Custom error classes for the gateway
"""


class GatewayError(Exception):
    """Base exception for gateway errors"""
    pass


class InvalidConfiguration(GatewayError, ValueError):
    """A required configuration value is empty or missing"""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"Configuration value '{field}' must not be empty")


class ProviderCallFailed(GatewayError):
    """The remote provider call failed; the provider error is the __cause__"""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(message)
