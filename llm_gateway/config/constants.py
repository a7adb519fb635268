"""
Gateway constants

Fixed limits, sampling parameters and transport retry policy shared by the
provider client factory and the gateway service.
"""

from dataclasses import dataclass

# ============================================================================
# Token limits
# ============================================================================

# Used when a configured limit is not a valid integer
DEFAULT_MAX_CONVERSATION_TOKENS = 100
DEFAULT_MAX_COMPLETION_TOKENS = 500
DEFAULT_MAX_EMBEDDING_TOKENS = 8000


# ============================================================================
# Provider selection
# ============================================================================

# Endpoints containing this host use the public OpenAI API and model names,
# anything else is treated as an Azure OpenAI resource with deployment names
PUBLIC_OPENAI_HOST = "api.openai.com"

DEFAULT_AZURE_API_VERSION = "2024-06-01"


# ============================================================================
# Transport retry policy
# ============================================================================

@dataclass(frozen=True)
class RetryPolicy:
    """Retry settings handed to the provider SDK client.

    The SDK retries connection errors, 408, 409, 429 and 5xx responses with
    exponential backoff and honours retry-after headers.
    """
    max_retries: int = 10


DEFAULT_RETRY_POLICY = RetryPolicy()


# ============================================================================
# Sampling parameters
# ============================================================================

CHAT_TEMPERATURE = 0.3
CHAT_TOP_P = 0.95
CHAT_FREQUENCY_PENALTY = 0
CHAT_PRESENCE_PENALTY = 0

SUMMARY_TEMPERATURE = 0.0
SUMMARY_TOP_P = 1.0
SUMMARY_MAX_TOKENS = 200
SUMMARY_FREQUENCY_PENALTY = 0
SUMMARY_PRESENCE_PENALTY = 0
