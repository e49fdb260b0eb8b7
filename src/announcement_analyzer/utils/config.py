"""Configuration module for the announcement analyzer.

This module handles loading and accessing configuration values from environment
variables and default settings, and builds the provider configuration object
that is handed to the AI layer once at process start.
"""

import os
from typing import Dict, Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

DEFAULT_CONFIG = {
    "OPENAI_API_KEY": None,  # Must be provided in environment
    "GEMINI_API_KEY": None,  # Must be provided in environment
    "GEMINI_EXTRACT_MODEL": "gemini-2.5-flash",
    "GEMINI_GUIDE_MODEL": "gemini-2.5-pro",
    "OPENAI_EXTRACT_MODEL": "gpt-4o-mini",
    "OPENAI_GUIDE_MODEL": "gpt-4o",
    "INFOGRAPHIC_MODEL": "gemini-2.5-flash",
    "EXTRACTION_TEMPERATURE": 0.1,
    "GUIDE_TEMPERATURE": 0.7,
    "INFOGRAPHIC_TEMPERATURE": 0.4,
    "MODEL_PROVIDER": "gemini",  # Default model provider (gemini or openai)
    "FEED_URL": "https://www.redhat.com/en/rss/blog",
    "MAX_ARTICLES": 10,
    "FEED_TIMEOUT": 30,  # Seconds
    "LOG_LEVEL": "INFO",
    "LOG_FILE": "announcement_analyzer.log",
    "LOG_MAX_BYTES": 10 * 1024 * 1024,  # 10 MB
    "LOG_BACKUP_COUNT": 5,
}


def _coerce(default: Any, env_value: str) -> Any:
    if isinstance(default, int) and env_value.isdigit():
        return int(env_value)
    if isinstance(default, float):
        try:
            return float(env_value)
        except ValueError:
            return default
    return env_value


def get_config() -> Dict[str, Any]:
    """Get the application configuration.

    Loads configuration from environment variables, falling back to default values
    when not specified.

    Returns:
        Dict[str, Any]: The configuration dictionary.
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(key)
        if env_value is not None:
            config[key] = _coerce(config[key], env_value)

    return config


def get_openai_api_key() -> str:
    """Get the OpenAI API key.

    Returns:
        str: The OpenAI API key.

    Raises:
        ValueError: If the OpenAI API key is not set.
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError(
            "OpenAI API key not found. Please set the OPENAI_API_KEY environment variable."
        )
    return api_key


def get_gemini_api_key() -> str:
    """Get the Gemini API key.

    Returns:
        str: The Gemini API key.

    Raises:
        ValueError: If the Gemini API key is not set.
    """
    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    if not api_key:
        raise ValueError(
            "Gemini API key not found. Please set the GEMINI_API_KEY or GOOGLE_API_KEY "
            "environment variable."
        )
    return api_key


class ProviderConfig(BaseModel):
    """Resolved credentials and model settings for both LLM providers."""

    model_config = ConfigDict(frozen=True)

    openai_api_key: str = Field(min_length=1, repr=False)
    gemini_api_key: str = Field(min_length=1, repr=False)
    gemini_extract_model: str
    gemini_guide_model: str
    openai_extract_model: str
    openai_guide_model: str
    infographic_model: str
    extraction_temperature: float = 0.1
    guide_temperature: float = 0.7
    infographic_temperature: float = 0.4


def load_provider_config(config: Optional[Dict[str, Any]] = None) -> ProviderConfig:
    """Build the provider configuration used by the AI layer.

    Both API keys are resolved here so that a missing credential fails at
    startup instead of on the first request.

    Args:
        config: Configuration mapping. If None, uses the module-level CONFIG.

    Returns:
        ProviderConfig: The immutable provider configuration.

    Raises:
        ValueError: If either API key is not set.
    """
    config = CONFIG if config is None else config

    return ProviderConfig(
        openai_api_key=config.get("OPENAI_API_KEY") or get_openai_api_key(),
        gemini_api_key=config.get("GEMINI_API_KEY") or get_gemini_api_key(),
        gemini_extract_model=config.get("GEMINI_EXTRACT_MODEL", "gemini-2.5-flash"),
        gemini_guide_model=config.get("GEMINI_GUIDE_MODEL", "gemini-2.5-pro"),
        openai_extract_model=config.get("OPENAI_EXTRACT_MODEL", "gpt-4o-mini"),
        openai_guide_model=config.get("OPENAI_GUIDE_MODEL", "gpt-4o"),
        infographic_model=config.get("INFOGRAPHIC_MODEL", "gemini-2.5-flash"),
        extraction_temperature=config.get("EXTRACTION_TEMPERATURE", 0.1),
        guide_temperature=config.get("GUIDE_TEMPERATURE", 0.7),
        infographic_temperature=config.get("INFOGRAPHIC_TEMPERATURE", 0.4),
    )


CONFIG = get_config()
