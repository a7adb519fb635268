"""
Configuration layer - Settings and constants
"""

from llm_gateway.config.settings import Settings, get_settings, PROJECT_ROOT
from llm_gateway.config.constants import DEFAULT_RETRY_POLICY, RetryPolicy

__all__ = [
    "Settings",
    "get_settings",
    "PROJECT_ROOT",
    "DEFAULT_RETRY_POLICY",
    "RetryPolicy",
]
