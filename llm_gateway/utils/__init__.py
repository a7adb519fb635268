"""
Utilities - Errors and logging
"""

from llm_gateway.utils.errors import GatewayError, InvalidConfiguration, ProviderCallFailed
from llm_gateway.utils.logger import mask_secret, setup_logger

__all__ = [
    "GatewayError",
    "InvalidConfiguration",
    "ProviderCallFailed",
    "mask_secret",
    "setup_logger",
]
