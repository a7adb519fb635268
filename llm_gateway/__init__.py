"""
LLM gateway - async client for OpenAI / Azure OpenAI embeddings, chat
completions and conversation summaries.
"""

from llm_gateway.llm import CompletionResult, EmbeddingResult, OpenAIService
from llm_gateway.utils.errors import GatewayError, InvalidConfiguration, ProviderCallFailed

__version__ = "0.1.0"

__all__ = [
    "OpenAIService",
    "EmbeddingResult",
    "CompletionResult",
    "GatewayError",
    "InvalidConfiguration",
    "ProviderCallFailed",
]
