"""
Result types returned by the gateway operations.

Both are NamedTuples so callers can unpack them like plain tuples.
"""

from typing import List, NamedTuple


class EmbeddingResult(NamedTuple):
    """Embedding vector plus the total tokens reported by the provider"""
    vectors: List[float]
    prompt_tokens: int


class CompletionResult(NamedTuple):
    """Generated answer plus provider-reported token usage"""
    response: str
    prompt_tokens: int
    response_tokens: int
