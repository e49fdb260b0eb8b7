"""Tests for the infographic generator module."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from announcement_analyzer.ai.errors import ProviderError
from announcement_analyzer.ai.infographic import InfographicGenerator
from announcement_analyzer.ai.schemas import FeatureRecord, ModelProvider

FEATURE = FeatureRecord(
    name="Image mode for RHEL",
    summary="Build RHEL hosts from container images.",
    use_cases=["Edge fleets", "Immutable servers", "CI test hosts"],
)


@pytest.fixture
def adapter():
    """Create a mock Gemini adapter."""
    mock_adapter = MagicMock()
    mock_adapter.provider = ModelProvider.GEMINI
    mock_adapter.generate_text = AsyncMock()
    return mock_adapter


class TestInfographicGenerator:
    """Test cases for the InfographicGenerator class."""

    @pytest.mark.asyncio
    async def test_generate_infographic(self, adapter):
        """Test that the markup is returned without code fences."""
        adapter.generate_text.return_value = "```html\n<div style=\"color:#EE0000\">Flow</div>\n```"
        generator = InfographicGenerator(adapter, temperature=0.4)

        markup = await generator.generate_infographic(FEATURE, "Edge fleets")

        assert markup == '<div style="color:#EE0000">Flow</div>'
        prompt = adapter.generate_text.call_args.args[0]
        assert "Feature: Image mode for RHEL" in prompt
        assert "Use case: Edge fleets" in prompt
        assert adapter.generate_text.call_args.kwargs["temperature"] == 0.4

    @pytest.mark.asyncio
    async def test_generate_infographic_failure(self, adapter):
        """Test that a failed request gives None."""
        adapter.generate_text.side_effect = ProviderError("gemini", "quota exceeded")
        generator = InfographicGenerator(adapter)

        assert await generator.generate_infographic(FEATURE, "Edge fleets") is None

    @pytest.mark.asyncio
    async def test_generate_infographic_only_fences(self, adapter):
        """Test that a response that is only a code fence gives None."""
        adapter.generate_text.return_value = "```html\n```"
        generator = InfographicGenerator(adapter)

        assert await generator.generate_infographic(FEATURE, "Edge fleets") is None

    @pytest.mark.asyncio
    async def test_generate_infographic_keeps_text_after_fence(self, adapter):
        """Test that only the fence markers are removed from the markup."""
        adapter.generate_text.return_value = "```html\n<div>```Savings```: 40%</div>\n```"
        generator = InfographicGenerator(adapter)

        markup = await generator.generate_infographic(FEATURE, "Edge fleets")

        assert markup == "<div>Savings: 40%</div>"
