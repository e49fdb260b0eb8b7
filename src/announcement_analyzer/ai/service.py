"""AI service for the announcement analyzer.

This module wires the provider models, adapters and orchestrators together
from a single ProviderConfig and exposes the two operations used by callers:
feature extraction and guide generation.
"""

from typing import Dict, List, Optional, Union

from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.openai import OpenAIProvider

from announcement_analyzer.ai.adapters import (
    FunctionCallAdapter,
    ProviderAdapter,
    SchemaConstrainedAdapter,
)
from announcement_analyzer.ai.extraction import FeatureExtractor
from announcement_analyzer.ai.guide import GuideGenerator
from announcement_analyzer.ai.infographic import InfographicGenerator
from announcement_analyzer.ai.schemas import FeatureRecord, GuideResult, ModelProvider
from announcement_analyzer.utils.config import ProviderConfig, load_provider_config
from announcement_analyzer.utils.logging_utils import configure_logfire, get_logger

configure_logfire()

logger = get_logger("ai.service")


class AnnouncementAnalyzer:
    """Extracts features from articles and generates guides for them.

    Args:
        extractor: The feature extractor.
        guide_generator: The guide generator.
    """

    def __init__(self, extractor: FeatureExtractor, guide_generator: GuideGenerator):
        self.extractor = extractor
        self.guide_generator = guide_generator

    async def extract_features(
        self,
        article_text: str,
        provider: Union[ModelProvider, str] = ModelProvider.GEMINI,
    ) -> List[FeatureRecord]:
        """Extract feature records from an article. Returns [] on any failure."""
        return await self.extractor.extract_features(article_text, provider)

    async def generate_guide(
        self,
        feature: FeatureRecord,
        use_case: str,
        provider: Union[ModelProvider, str] = ModelProvider.GEMINI,
    ) -> GuideResult:
        """Generate the guide and infographic for a feature's use case. Never raises."""
        return await self.guide_generator.generate_guide(feature, use_case, provider)


def build_adapters(
    config: ProviderConfig, google: GoogleProvider, openai: OpenAIProvider
) -> Dict[ModelProvider, ProviderAdapter]:
    """Create one adapter per provider from the configuration.

    Args:
        config: The resolved provider configuration.
        google: The Gemini API provider shared by all Gemini models.
        openai: The OpenAI API provider shared by all OpenAI models.

    Returns:
        A mapping of provider to adapter.
    """
    return {
        ModelProvider.GEMINI: SchemaConstrainedAdapter(
            GoogleModel(config.gemini_extract_model, provider=google),
            GoogleModel(config.gemini_guide_model, provider=google),
            extraction_temperature=config.extraction_temperature,
        ),
        ModelProvider.OPENAI: FunctionCallAdapter(
            OpenAIChatModel(config.openai_extract_model, provider=openai),
            OpenAIChatModel(config.openai_guide_model, provider=openai),
            extraction_temperature=config.extraction_temperature,
        ),
    }


def create_analyzer(config: Optional[ProviderConfig] = None) -> AnnouncementAnalyzer:
    """Build the analyzer once at process start.

    Args:
        config: The provider configuration. If None, it is loaded from the
            environment, which raises if either API key is missing.

    Returns:
        The configured AnnouncementAnalyzer.
    """
    config = config or load_provider_config()
    google = GoogleProvider(api_key=config.gemini_api_key)
    adapters = build_adapters(config, google, OpenAIProvider(api_key=config.openai_api_key))

    # The infographic always runs on Gemini, with its own text model.
    gemini = adapters[ModelProvider.GEMINI]
    infographic_adapter = SchemaConstrainedAdapter(
        gemini.extraction_model,
        GoogleModel(config.infographic_model, provider=google),
        extraction_temperature=config.extraction_temperature,
    )

    analyzer = AnnouncementAnalyzer(
        extractor=FeatureExtractor(adapters),
        guide_generator=GuideGenerator(
            adapters,
            InfographicGenerator(infographic_adapter, temperature=config.infographic_temperature),
            temperature=config.guide_temperature,
        ),
    )

    logger.info(
        f"Initialised analyzer (extraction: {config.gemini_extract_model} / "
        f"{config.openai_extract_model}, guides: {config.gemini_guide_model} / "
        f"{config.openai_guide_model}, infographic: {config.infographic_model})"
    )
    return analyzer
