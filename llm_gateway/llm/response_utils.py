"""
Provider response utilities.

Pulls generated text, vectors and token usage out of OpenAI SDK response
objects (ChatCompletion / CreateEmbeddingResponse).
"""

import re
from typing import Any, List, Tuple

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9\s]")


def extract_text_from_response(completion: Any) -> str:
    """
    Extract the first choice's message content from a chat completion.

    Args:
        completion: ChatCompletion (or any object of the same shape)

    Returns:
        Generated text, empty string when the first choice has no content

    Raises:
        IndexError: The completion has no choices
    """
    content = completion.choices[0].message.content
    if content is None:
        # Content filtering or tool calls leave content empty
        return ""
    return content


def extract_usage(completion: Any) -> Tuple[int, int]:
    """Return (prompt_tokens, completion_tokens) from a chat completion."""
    usage = completion.usage
    return usage.prompt_tokens, usage.completion_tokens


def extract_embedding(response: Any) -> Tuple[List[float], int]:
    """
    Extract the first embedding vector and the total token count.

    Args:
        response: CreateEmbeddingResponse for a single-item batch

    Returns:
        (vector, total_tokens)
    """
    vector = [float(x) for x in response.data[0].embedding]
    return vector, response.usage.total_tokens


def strip_non_alphanumeric(text: str) -> str:
    """Remove every character that is not an ASCII letter, digit or whitespace."""
    return _NON_ALPHANUMERIC.sub("", text)
