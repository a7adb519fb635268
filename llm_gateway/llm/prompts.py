"""
Gateway prompt templates
"""

from typing import Dict, List

# System prompt for grounded chat answers; the supporting documents are appended directly after it
RETAIL_ASSISTANT_PROMPT = """
You are an intelligent assistant for the Cosmic Works Bike Company.
You are designed to provide helpful answers to user questions about
product, product category, customer and sales order information provided in JSON format below.

Instructions:
- Only answer questions related to the information provided below,
- Don't reference any product, customer, or salesOrder data not provided below.
- If you're unsure of an answer, you can say "I don't know" or "I'm not sure" and recommend users search themselves.

Text of relevant information:"""

# System prompt for labelling a conversation
SUMMARIZE_PROMPT = (
    "\nSummarize the text below in one or two words to use as a label in a button on a web page. "
    "Output words only. Summarize the text below here:\n"
)


def build_chat_messages(documents: str, user_prompt: str) -> List[Dict[str, str]]:
    """
    Build the system/user message pair for a grounded chat completion.

    Args:
        documents: Supporting document text (typically JSON) for the system message
        user_prompt: The user's question

    Returns:
        Ordered message list for the chat completions API
    """
    return [
        {"role": "system", "content": RETAIL_ASSISTANT_PROMPT + documents},
        {"role": "user", "content": user_prompt},
    ]


def build_summary_messages(user_prompt: str) -> List[Dict[str, str]]:
    """Build the system/user message pair for a conversation label."""
    return [
        {"role": "system", "content": SUMMARIZE_PROMPT},
        {"role": "user", "content": user_prompt},
    ]
