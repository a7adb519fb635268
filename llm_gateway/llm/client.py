"""
Provider client factory

Creates the async OpenAI SDK client for the configured endpoint. The SDK owns
transport concerns: exponential backoff retries, timeouts and cancellation.
"""

from typing import Optional, Union

from loguru import logger
from openai import AsyncAzureOpenAI, AsyncOpenAI

from llm_gateway.config.constants import (
    DEFAULT_AZURE_API_VERSION,
    DEFAULT_RETRY_POLICY,
    PUBLIC_OPENAI_HOST,
    RetryPolicy,
)
from llm_gateway.utils.logger import mask_secret

ProviderClient = Union[AsyncOpenAI, AsyncAzureOpenAI]


def is_public_openai_endpoint(endpoint: str) -> bool:
    """True when the endpoint targets the public OpenAI API rather than an Azure resource."""
    return PUBLIC_OPENAI_HOST in endpoint


def create_openai_client(
    endpoint: str,
    key: str,
    api_version: Optional[str] = None,
    retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
) -> ProviderClient:
    """
    Factory function to create the provider client for an endpoint.

    Args:
        endpoint: Endpoint URI. Use https://api.openai.com/v1 for OpenAI, the
            resource URI for Azure OpenAI
        key: API key (OpenAI) or resource key (Azure)
        api_version: Azure OpenAI API version (ignored for OpenAI)
        retry_policy: Retry settings applied to the SDK client

    Returns:
        AsyncOpenAI for the public endpoint, AsyncAzureOpenAI otherwise
    """
    if is_public_openai_endpoint(endpoint):
        logger.info(
            f"✅ LLM Provider: OpenAI | Endpoint: {endpoint} | API key loaded: {mask_secret(key)} "
            f"| Retries: {retry_policy.max_retries}"
        )
        return AsyncOpenAI(
            api_key=key,
            max_retries=retry_policy.max_retries,
        )

    logger.info(
        f"✅ LLM Provider: Azure OpenAI | Endpoint: {endpoint} | API key loaded: {mask_secret(key)} "
        f"| Retries: {retry_policy.max_retries}"
    )
    return AsyncAzureOpenAI(
        azure_endpoint=endpoint,
        api_key=key,
        api_version=api_version or DEFAULT_AZURE_API_VERSION,
        max_retries=retry_policy.max_retries,
    )
