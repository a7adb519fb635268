"""
OpenAI gateway service

Wraps a hosted OpenAI / Azure OpenAI deployment behind three async operations:
- Embedding generation for vector search
- Grounded chat completions for the retail assistant
- One or two word conversation summaries used as session labels

The service holds immutable configuration and a single SDK client, so one
instance can be shared by any number of concurrent callers.
"""

import re
from typing import Any, Optional

from loguru import logger as default_logger

from llm_gateway.config.constants import (
    CHAT_FREQUENCY_PENALTY,
    CHAT_PRESENCE_PENALTY,
    CHAT_TEMPERATURE,
    CHAT_TOP_P,
    DEFAULT_AZURE_API_VERSION,
    DEFAULT_MAX_COMPLETION_TOKENS,
    DEFAULT_MAX_CONVERSATION_TOKENS,
    DEFAULT_MAX_EMBEDDING_TOKENS,
    DEFAULT_RETRY_POLICY,
    SUMMARY_FREQUENCY_PENALTY,
    SUMMARY_MAX_TOKENS,
    SUMMARY_PRESENCE_PENALTY,
    SUMMARY_TEMPERATURE,
    SUMMARY_TOP_P,
    RetryPolicy,
)
from llm_gateway.config.settings import Settings
from llm_gateway.llm.client import create_openai_client
from llm_gateway.llm.models import CompletionResult, EmbeddingResult
from llm_gateway.llm.prompts import build_chat_messages, build_summary_messages
from llm_gateway.llm.response_utils import (
    extract_embedding,
    extract_text_from_response,
    extract_usage,
    strip_non_alphanumeric,
)
from llm_gateway.utils.errors import InvalidConfiguration, ProviderCallFailed

# Integer literal: optional surrounding whitespace and sign, decimal digits only
_INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*")
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


def parse_token_limit(value: str, default: int) -> int:
    """
    Parse a token limit, falling back to a default instead of failing.

    Args:
        value: Raw configuration string
        default: Value used when the string is not a 32-bit integer

    Returns:
        Parsed limit or the default
    """
    if not isinstance(value, str) or not _INT_PATTERN.fullmatch(value):
        return default
    parsed = int(value)
    if parsed < _INT32_MIN or parsed > _INT32_MAX:
        return default
    return parsed


def _require(field: str, value: Optional[str]) -> str:
    if not value:
        raise InvalidConfiguration(field)
    return value


class OpenAIService:
    """
    Service to access OpenAI or Azure OpenAI.

    Endpoints containing "api.openai.com" use the public OpenAI API with OpenAI
    model names; any other endpoint is treated as an Azure OpenAI resource with
    deployment names.
    """

    def __init__(
        self,
        endpoint: str,
        key: str,
        embeddings_deployment: str,
        completions_deployment: str,
        max_completion_tokens: str,
        max_conversation_tokens: str,
        max_embedding_tokens: str,
        logger: Any = None,
        *,
        api_version: str = DEFAULT_AZURE_API_VERSION,
        retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
        client: Any = None,
    ):
        """
        Validate configuration and create the provider client.

        Args:
            endpoint: Endpoint URI
            key: Account key
            embeddings_deployment: Model or deployment name for embeddings
            completions_deployment: Model or deployment name for chat completions
            max_completion_tokens: Max tokens generated per completion (default 500)
            max_conversation_tokens: Max conversation tokens sent with a prompt (default 100)
            max_embedding_tokens: Max tokens per embedding input (default 8000)
            logger: Logging sink (defaults to the loguru logger)
            api_version: Azure OpenAI API version
            retry_policy: Transport retry settings for the SDK client
            client: Prebuilt provider client, skips client creation

        Raises:
            InvalidConfiguration: Any argument above is empty or None
        """
        _require("endpoint", endpoint)
        _require("key", key)
        _require("embeddings_deployment", embeddings_deployment)
        _require("completions_deployment", completions_deployment)
        _require("max_conversation_tokens", max_conversation_tokens)
        _require("max_completion_tokens", max_completion_tokens)
        _require("max_embedding_tokens", max_embedding_tokens)

        self._embeddings_deployment = embeddings_deployment
        self._completions_deployment = completions_deployment
        self._max_conversation_tokens = parse_token_limit(
            max_conversation_tokens, DEFAULT_MAX_CONVERSATION_TOKENS
        )
        self._max_completion_tokens = parse_token_limit(
            max_completion_tokens, DEFAULT_MAX_COMPLETION_TOKENS
        )
        self._max_embedding_tokens = parse_token_limit(
            max_embedding_tokens, DEFAULT_MAX_EMBEDDING_TOKENS
        )

        self._logger = logger or default_logger

        if client is None:
            client = create_openai_client(
                endpoint, key, api_version=api_version, retry_policy=retry_policy
            )
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, logger: Any = None) -> "OpenAIService":
        """Create the service from environment-backed settings."""
        return cls(
            settings.openai_endpoint,
            settings.openai_key,
            settings.openai_embeddings_deployment,
            settings.openai_completions_deployment,
            settings.openai_max_completion_tokens,
            settings.openai_max_conversation_tokens,
            settings.openai_max_embedding_tokens,
            logger,
            api_version=settings.openai_api_version,
        )

    @property
    def max_conversation_tokens(self) -> int:
        """Max tokens from the conversation to send as part of the user prompt"""
        return self._max_conversation_tokens

    @property
    def max_completion_tokens(self) -> int:
        """Max tokens that can be used in generating the completion"""
        return self._max_completion_tokens

    @property
    def max_embedding_tokens(self) -> int:
        """Max tokens that can be used in generating embeddings"""
        return self._max_embedding_tokens

    @property
    def embeddings_deployment(self) -> str:
        return self._embeddings_deployment

    @property
    def completions_deployment(self) -> str:
        return self._completions_deployment

    async def get_embeddings(self, session_id: str, input: str) -> EmbeddingResult:
        """
        Generate an embedding vector for one input text.

        Args:
            session_id: Chat session identifier, sent as the request's user tag
            input: Text to embed

        Returns:
            EmbeddingResult(vectors, prompt_tokens)

        Raises:
            ProviderCallFailed: The provider call failed (original error chained)
        """
        try:
            response = await self._client.embeddings.create(
                model=self._embeddings_deployment,
                input=[input],
                user=session_id,
            )
            vectors, prompt_tokens = extract_embedding(response)
            return EmbeddingResult(vectors, prompt_tokens)
        except Exception as e:
            message = f"OpenAIService.get_embeddings(): {e}"
            self._logger.error(message)
            raise ProviderCallFailed("get_embeddings", message) from e

    async def get_chat_completion(
        self, session_id: str, user_prompt: str, documents: str
    ) -> CompletionResult:
        """
        Answer a user prompt grounded on the supplied documents.

        Args:
            session_id: Chat session identifier, sent as the request's user tag
            user_prompt: The user's question
            documents: Supporting document text appended to the system prompt

        Returns:
            CompletionResult(response, prompt_tokens, response_tokens)

        Raises:
            ProviderCallFailed: The provider call failed (original error chained)
        """
        try:
            completion = await self._client.chat.completions.create(
                model=self._completions_deployment,
                messages=build_chat_messages(documents, user_prompt),
                max_tokens=self._max_completion_tokens,
                user=session_id,
                temperature=CHAT_TEMPERATURE,
                top_p=CHAT_TOP_P,
                frequency_penalty=CHAT_FREQUENCY_PENALTY,
                presence_penalty=CHAT_PRESENCE_PENALTY,
            )
            prompt_tokens, response_tokens = extract_usage(completion)
            return CompletionResult(
                response=extract_text_from_response(completion),
                prompt_tokens=prompt_tokens,
                response_tokens=response_tokens,
            )
        except Exception as e:
            message = f"OpenAIService.get_chat_completion(): {e}"
            self._logger.error(message)
            raise ProviderCallFailed("get_chat_completion", message) from e

    async def summarize(self, session_id: str, user_prompt: str) -> str:
        """
        Summarize a conversation into a one or two word label.

        Provider errors are not caught here and reach the caller unchanged.

        Args:
            session_id: Chat session identifier, sent as the request's user tag
            user_prompt: First prompt and completion of the conversation

        Returns:
            Summary with non-alphanumeric characters removed
        """
        completion = await self._client.chat.completions.create(
            model=self._completions_deployment,
            messages=build_summary_messages(user_prompt),
            user=session_id,
            max_tokens=SUMMARY_MAX_TOKENS,
            temperature=SUMMARY_TEMPERATURE,
            top_p=SUMMARY_TOP_P,
            frequency_penalty=SUMMARY_FREQUENCY_PENALTY,
            presence_penalty=SUMMARY_PRESENCE_PENALTY,
        )

        # Models sometimes add quotes or punctuation around the label
        return strip_non_alphanumeric(extract_text_from_response(completion))
