"""
LLM layer - Provider client, gateway service, prompts and response utilities
"""

from llm_gateway.llm.client import create_openai_client, is_public_openai_endpoint
from llm_gateway.llm.models import CompletionResult, EmbeddingResult
from llm_gateway.llm.response_utils import (
    extract_text_from_response,
    strip_non_alphanumeric,
)
from llm_gateway.llm.service import OpenAIService, parse_token_limit

__all__ = [
    "create_openai_client",
    "is_public_openai_endpoint",
    "CompletionResult",
    "EmbeddingResult",
    "extract_text_from_response",
    "strip_non_alphanumeric",
    "OpenAIService",
    "parse_token_limit",
]
