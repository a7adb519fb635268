"""
Configuration management for the gateway.
Loads settings from environment variables and the project .env file.
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from loguru import logger

from llm_gateway.config.constants import (
    DEFAULT_AZURE_API_VERSION,
    DEFAULT_MAX_COMPLETION_TOKENS,
    DEFAULT_MAX_CONVERSATION_TOKENS,
    DEFAULT_MAX_EMBEDDING_TOKENS,
)

# This file is at llm_gateway/config/settings.py, so project root is 3 levels up
_project_root = Path(__file__).resolve().parent.parent.parent

PROJECT_ROOT = _project_root

# Load environment variables from project root
_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(dotenv_path=_env_file, override=False)
    logger.debug(f"Loaded .env from: {_env_file}")
else:
    # Fallback to default behavior (current directory)
    load_dotenv(override=False)


class Settings(BaseSettings):
    """Gateway settings from environment variables.

    Token limits are kept as raw strings; the gateway parses them and falls
    back to its defaults when a value is not an integer.
    """

    # Connection
    openai_endpoint: str = Field(default="")
    openai_key: str = Field(default="")
    openai_api_version: str = Field(default=DEFAULT_AZURE_API_VERSION)  # Azure only

    # Model names (OpenAI) or deployment names (Azure)
    openai_embeddings_deployment: str = Field(default="")
    openai_completions_deployment: str = Field(default="")

    # Token Limits
    openai_max_conversation_tokens: str = Field(default=str(DEFAULT_MAX_CONVERSATION_TOKENS))
    openai_max_completion_tokens: str = Field(default=str(DEFAULT_MAX_COMPLETION_TOKENS))
    openai_max_embedding_tokens: str = Field(default=str(DEFAULT_MAX_EMBEDDING_TOKENS))

    # Logging
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="")  # Empty disables the file sink

    class Config:
        env_file = str(_project_root / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Read a fresh Settings instance from the current environment."""
    return Settings()
