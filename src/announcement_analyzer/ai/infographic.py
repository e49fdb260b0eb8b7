"""Infographic generation for the announcement analyzer.

The infographic is a best-effort companion to the guide: it always runs on
the Gemini adapter, and any failure is reported as ``None``.
"""

from typing import Optional

from announcement_analyzer.ai.adapters import ProviderAdapter
from announcement_analyzer.ai.prompts import get_infographic_prompt
from announcement_analyzer.ai.sanitizer import strip_code_fences
from announcement_analyzer.ai.schemas import FeatureRecord
from announcement_analyzer.utils.logging_utils import get_logger, log_provider_error

logger = get_logger("ai.infographic")


class InfographicGenerator:
    """Generates the inline-styled infographic fragment for a guide."""

    def __init__(self, adapter: ProviderAdapter, temperature: float = 0.4):
        self.adapter = adapter
        self.temperature = temperature

    async def generate_infographic(
        self, feature: FeatureRecord, use_case: str
    ) -> Optional[str]:
        """Generate the infographic markup for a feature and use case.

        Args:
            feature: The feature the guide is about.
            use_case: The selected use case.

        Returns:
            The markup fragment, or None if generation failed.
        """
        prompt = get_infographic_prompt(feature.name, feature.summary, use_case)
        try:
            raw = await self.adapter.generate_text(prompt, temperature=self.temperature)
        except Exception as e:
            log_provider_error(logger, self.adapter.provider, "Infographic Generation Error", e)
            return None

        markup = strip_code_fences(raw).strip()
        if not markup:
            logger.warning(f"Infographic for '{feature.name}' was empty after removing code fences")
            return None

        logger.info(f"Generated infographic of {len(markup)} characters for '{feature.name}'")
        return markup
