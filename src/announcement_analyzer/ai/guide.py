"""Guide generation for the announcement analyzer.

A guide request issues two independent model calls at the same time: the
guide text on the selected provider and the infographic on Gemini. Both are
awaited to completion. The guide text is required; the infographic is
optional and a failure there only leaves its slot empty.
"""

import asyncio
from typing import Dict, Optional, Union

from announcement_analyzer.ai.adapters import ProviderAdapter
from announcement_analyzer.ai.errors import provider_tag
from announcement_analyzer.ai.infographic import InfographicGenerator
from announcement_analyzer.ai.prompts import get_guide_prompt
from announcement_analyzer.ai.sanitizer import sanitize
from announcement_analyzer.ai.schemas import FeatureRecord, GuideResult, ModelProvider
from announcement_analyzer.utils.logging_utils import get_logger, log_provider_error

logger = get_logger("ai.guide")

GUIDE_ERROR_HTML = (
    "<h3>Error Generating Guide</h3>"
    "<p>Could not generate the technical guide using the selected AI provider.</p>"
)


class GuideGenerator:
    """Generates a sanitized guide and its infographic for one use case.

    Args:
        adapters: One adapter per supported provider, used for the guide text.
        infographic_generator: The generator for the infographic fragment.
        temperature: Sampling temperature for the guide text.
    """

    def __init__(
        self,
        adapters: Dict[ModelProvider, ProviderAdapter],
        infographic_generator: InfographicGenerator,
        temperature: float = 0.7,
    ):
        self.adapters = adapters
        self.infographic_generator = infographic_generator
        self.temperature = temperature

    async def _generate_text(
        self, feature: FeatureRecord, use_case: str, provider: ModelProvider
    ) -> str:
        prompt = get_guide_prompt(feature.name, feature.summary, use_case)
        return await self.adapters[provider].generate_text(prompt, temperature=self.temperature)

    async def generate_guide(
        self,
        feature: FeatureRecord,
        use_case: str,
        provider: Union[ModelProvider, str] = ModelProvider.GEMINI,
    ) -> GuideResult:
        """Generate the guide for a feature and one of its use cases.

        Args:
            feature: The feature to write about.
            use_case: The selected use case. Callers validate that it belongs
                to the feature.
            provider: The provider for the guide text (gemini or openai).

        Returns:
            The guide result. If the guide text fails, ``html`` is the fixed
            error fragment and ``infographic_html`` is None.
        """
        try:
            provider = ModelProvider(provider)
        except ValueError as e:
            log_provider_error(logger, provider, "API Guide Generation Error", e)
            return GuideResult(html=GUIDE_ERROR_HTML, infographic_html=None)

        logger.info(
            f"Generating guide with {provider_tag(provider)} for feature "
            f"'{feature.name}' and use case '{use_case}'"
        )

        # gather with return_exceptions waits for both calls even if one fails.
        text_outcome, infographic_outcome = await asyncio.gather(
            self._generate_text(feature, use_case, provider),
            self.infographic_generator.generate_infographic(feature, use_case),
            return_exceptions=True,
        )

        infographic_html: Optional[str] = None
        if isinstance(infographic_outcome, BaseException):
            log_provider_error(
                logger, ModelProvider.GEMINI, "Infographic Generation Error", infographic_outcome
            )
        else:
            infographic_html = infographic_outcome

        if isinstance(text_outcome, BaseException):
            log_provider_error(logger, provider, "API Guide Generation Error", text_outcome)
            return GuideResult(html=GUIDE_ERROR_HTML, infographic_html=None)

        html = sanitize(text_outcome)
        if not html:
            logger.error(f"[{provider_tag(provider)}] Guide for '{feature.name}' was empty after sanitizing")
            return GuideResult(html=GUIDE_ERROR_HTML, infographic_html=None)

        logger.info(
            f"[{provider_tag(provider)}] Generated guide of {len(html)} characters "
            f"(infographic: {'yes' if infographic_html else 'no'})"
        )
        return GuideResult(html=html, infographic_html=infographic_html)
