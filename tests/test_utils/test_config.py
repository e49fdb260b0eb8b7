"""Tests for the config module."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from announcement_analyzer.utils.config import (
    DEFAULT_CONFIG,
    ProviderConfig,
    get_config,
    get_gemini_api_key,
    get_openai_api_key,
    load_provider_config,
)


class TestConfig(unittest.TestCase):
    """Test cases for the config module."""

    def test_get_config_defaults(self):
        """Test that get_config returns default values when no environment variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            config = get_config()
            self.assertEqual(config, DEFAULT_CONFIG)

    def test_get_config_override(self):
        """Test that get_config overrides defaults with environment variables."""
        test_env = {
            "OPENAI_API_KEY": "test_key",
            "LOG_LEVEL": "DEBUG",
            "MAX_ARTICLES": "5",  # String that should be converted to int
            "GUIDE_TEMPERATURE": "0.2",  # String that should be converted to float
        }
        with patch.dict(os.environ, test_env, clear=True):
            config = get_config()
            self.assertEqual(config["OPENAI_API_KEY"], "test_key")
            self.assertEqual(config["LOG_LEVEL"], "DEBUG")
            self.assertEqual(config["MAX_ARTICLES"], 5)
            self.assertEqual(config["GUIDE_TEMPERATURE"], 0.2)
            self.assertEqual(config["FEED_URL"], DEFAULT_CONFIG["FEED_URL"])

    def test_get_config_invalid_float_keeps_default(self):
        """Test that a non-numeric temperature falls back to the default."""
        with patch.dict(os.environ, {"GUIDE_TEMPERATURE": "warm"}, clear=True):
            config = get_config()
            self.assertEqual(config["GUIDE_TEMPERATURE"], DEFAULT_CONFIG["GUIDE_TEMPERATURE"])

    def test_get_openai_api_key_from_env(self):
        """Test that get_openai_api_key returns the key from OPENAI_API_KEY env var."""
        with patch.dict(os.environ, {"OPENAI_API_KEY": "test_key"}, clear=True):
            self.assertEqual(get_openai_api_key(), "test_key")

    def test_get_openai_api_key_missing(self):
        """Test that get_openai_api_key raises ValueError when no key is available."""
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                get_openai_api_key()

    def test_get_gemini_api_key_from_google_api_key(self):
        """Test that get_gemini_api_key falls back to GOOGLE_API_KEY."""
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "google_key"}, clear=True):
            self.assertEqual(get_gemini_api_key(), "google_key")

    def test_get_gemini_api_key_missing(self):
        """Test that get_gemini_api_key raises ValueError when no key is available."""
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                get_gemini_api_key()


class TestProviderConfig(unittest.TestCase):
    """Test cases for the provider configuration object."""

    def _config(self, **overrides):
        config = DEFAULT_CONFIG.copy()
        config.update({"OPENAI_API_KEY": "sk-openai", "GEMINI_API_KEY": "gm-gemini"})
        config.update(overrides)
        return config

    def test_load_provider_config(self):
        """Test that the provider config is built from the configuration mapping."""
        provider_config = load_provider_config(self._config(OPENAI_GUIDE_MODEL="gpt-4.1"))

        self.assertEqual(provider_config.openai_api_key, "sk-openai")
        self.assertEqual(provider_config.gemini_api_key, "gm-gemini")
        self.assertEqual(provider_config.gemini_extract_model, "gemini-2.5-flash")
        self.assertEqual(provider_config.gemini_guide_model, "gemini-2.5-pro")
        self.assertEqual(provider_config.openai_extract_model, "gpt-4o-mini")
        self.assertEqual(provider_config.openai_guide_model, "gpt-4.1")
        self.assertEqual(provider_config.extraction_temperature, 0.1)
        self.assertEqual(provider_config.guide_temperature, 0.7)

    def test_load_provider_config_falls_back_to_environment(self):
        """Test that keys missing from the mapping are read from the environment."""
        env = {"OPENAI_API_KEY": "env-openai", "GEMINI_API_KEY": "env-gemini"}
        with patch.dict(os.environ, env, clear=True):
            provider_config = load_provider_config(
                self._config(OPENAI_API_KEY=None, GEMINI_API_KEY=None)
            )

        self.assertEqual(provider_config.openai_api_key, "env-openai")
        self.assertEqual(provider_config.gemini_api_key, "env-gemini")

    def test_load_provider_config_missing_key(self):
        """Test that a missing credential fails when the config is loaded."""
        with patch.dict(os.environ, {"GEMINI_API_KEY": "env-gemini"}, clear=True):
            with self.assertRaises(ValueError):
                load_provider_config(self._config(OPENAI_API_KEY=None, GEMINI_API_KEY=None))

    def test_provider_config_is_frozen(self):
        """Test that the provider config cannot be modified after creation."""
        provider_config = load_provider_config(self._config())

        with self.assertRaises(ValidationError):
            provider_config.openai_api_key = "other"

    def test_provider_config_repr_hides_keys(self):
        """Test that API keys are not included in the repr."""
        provider_config = load_provider_config(self._config())

        self.assertNotIn("sk-openai", repr(provider_config))
        self.assertNotIn("gm-gemini", repr(provider_config))

    def test_provider_config_rejects_empty_key(self):
        """Test that an empty API key is rejected."""
        with self.assertRaises(ValidationError):
            ProviderConfig(
                openai_api_key="",
                gemini_api_key="gm-gemini",
                gemini_extract_model="gemini-2.5-flash",
                gemini_guide_model="gemini-2.5-pro",
                openai_extract_model="gpt-4o-mini",
                openai_guide_model="gpt-4o",
                infographic_model="gemini-2.5-flash",
            )


if __name__ == "__main__":
    unittest.main()
