"""Feature extraction for the announcement analyzer.

This module turns one article into a list of feature records using the
selected provider. Extraction never raises: any failure is logged and
reported as an empty list, the same result as an article with no
technical content.
"""

from typing import Dict, List, Union

from announcement_analyzer.ai.adapters import ProviderAdapter
from announcement_analyzer.ai.errors import provider_tag
from announcement_analyzer.ai.prompts import get_extraction_prompt
from announcement_analyzer.ai.schemas import (
    PROVIDER_WRAPPINGS,
    FeatureRecord,
    ModelProvider,
)
from announcement_analyzer.utils.logging_utils import get_logger, log_provider_error

logger = get_logger("ai.extraction")


class FeatureExtractor:
    """Extracts feature records from article text.

    Args:
        adapters: One adapter per supported provider.
    """

    def __init__(self, adapters: Dict[ModelProvider, ProviderAdapter]):
        self.adapters = adapters

    async def extract_features(
        self,
        article_text: str,
        provider: Union[ModelProvider, str] = ModelProvider.GEMINI,
    ) -> List[FeatureRecord]:
        """Extract the technical features described in an article.

        Args:
            article_text: The raw article content, embedded verbatim in the prompt.
            provider: The provider to use (gemini or openai).

        Returns:
            The extracted feature records, or an empty list on any failure.
        """
        try:
            provider = ModelProvider(provider)
            adapter = self.adapters[provider]
            shape = PROVIDER_WRAPPINGS[provider]

            logger.info(
                f"Extracting features with {provider_tag(provider)} "
                f"from {len(article_text or '')} characters of article text"
            )
            features = await adapter.extract(get_extraction_prompt(article_text), shape)

            logger.info(f"[{provider_tag(provider)}] Extracted {len(features)} features")
            return features
        except Exception as e:
            log_provider_error(logger, provider, "API Extraction Error", e)
            return []
