"""
Shared fixtures: fake provider responses and a fake async SDK client.
"""

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from llm_gateway.llm.service import OpenAIService


def make_embedding_response(vector, total_tokens):
    return SimpleNamespace(
        data=[SimpleNamespace(embedding=list(vector), index=0)],
        usage=SimpleNamespace(prompt_tokens=total_tokens, total_tokens=total_tokens),
    )


def make_chat_response(content, prompt_tokens=0, completion_tokens=0):
    return SimpleNamespace(
        choices=[SimpleNamespace(index=0, message=SimpleNamespace(role="assistant", content=content))],
        usage=SimpleNamespace(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
    )


@pytest.fixture
def embedding_response():
    return make_embedding_response


@pytest.fixture
def chat_response():
    return make_chat_response


@pytest.fixture
def fake_client():
    """Stand-in for AsyncOpenAI exposing embeddings.create and chat.completions.create"""
    client = MagicMock()
    client.embeddings.create = AsyncMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def fake_logger():
    return MagicMock()


@pytest.fixture
def service(fake_client, fake_logger):
    return OpenAIService(
        "https://cosmic-works.openai.azure.com/",
        "0123456789abcdef0123",
        "embeddings",
        "completions",
        "500",
        "100",
        "8000",
        fake_logger,
        client=fake_client,
    )
