"""
Command line entry point for the gateway.

Usage:
    python -m llm_gateway config
    python -m llm_gateway embed "red mountain bike"
    python -m llm_gateway chat "What bikes are in stock?" --documents-file products.json
    python -m llm_gateway summarize "Do you sell bike helmets?"
"""

import argparse
import asyncio
import uuid
from pathlib import Path
from typing import List, Optional

from loguru import logger
from openai import OpenAIError

from llm_gateway.config.settings import get_settings
from llm_gateway.llm.client import is_public_openai_endpoint
from llm_gateway.llm.service import OpenAIService
from llm_gateway.utils.errors import InvalidConfiguration, ProviderCallFailed
from llm_gateway.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-gateway",
        description="Call OpenAI / Azure OpenAI through the LLM gateway",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("config", help="Show resolved limits and connection mode")

    embed = subparsers.add_parser("embed", help="Generate an embedding")
    embed.add_argument("text")
    embed.add_argument("--session", default=None)

    chat = subparsers.add_parser("chat", help="Generate a grounded chat completion")
    chat.add_argument("prompt")
    documents = chat.add_mutually_exclusive_group()
    documents.add_argument("--documents", default="")
    documents.add_argument("--documents-file", type=Path, default=None)
    chat.add_argument("--session", default=None)

    summarize = subparsers.add_parser("summarize", help="Summarize text into a short label")
    summarize.add_argument("text")
    summarize.add_argument("--session", default=None)

    return parser


async def _run(service: OpenAIService, args: argparse.Namespace, documents: str = "") -> None:
    session_id = args.session or str(uuid.uuid4())

    if args.command == "embed":
        result = await service.get_embeddings(session_id, args.text)
        print(f"dimensions={len(result.vectors)} tokens={result.prompt_tokens}")
    elif args.command == "chat":
        result = await service.get_chat_completion(session_id, args.prompt, documents)
        print(result.response)
        print(f"prompt_tokens={result.prompt_tokens} response_tokens={result.response_tokens}")
    elif args.command == "summarize":
        print(await service.summarize(session_id, args.text))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logger(settings.log_level, settings.log_dir or None)

    try:
        service = OpenAIService.from_settings(settings)
    except InvalidConfiguration as e:
        logger.error(f"❌ Invalid configuration: {e}")
        return 2

    if args.command == "config":
        mode = "openai" if is_public_openai_endpoint(settings.openai_endpoint) else "azure"
        print(f"mode={mode}")
        print(f"embeddings_deployment={service.embeddings_deployment}")
        print(f"completions_deployment={service.completions_deployment}")
        print(f"max_conversation_tokens={service.max_conversation_tokens}")
        print(f"max_completion_tokens={service.max_completion_tokens}")
        print(f"max_embedding_tokens={service.max_embedding_tokens}")
        return 0

    documents = ""
    if args.command == "chat":
        documents = args.documents
        if args.documents_file is not None:
            try:
                documents = args.documents_file.read_text(encoding="utf-8")
            except OSError as e:
                logger.error(f"❌ Cannot read documents file: {e}")
                return 2

    try:
        asyncio.run(_run(service, args, documents))
    except ProviderCallFailed:
        # Already logged by the service
        return 1
    except OpenAIError as e:
        logger.error(f"❌ Provider call failed: {e}")
        return 1
    return 0
