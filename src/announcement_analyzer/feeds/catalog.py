"""In-memory announcement catalog.

The catalog owns the process-lifetime cache of analyzed articles. It is
filled by running feature extraction over the feed, one article at a time,
and it validates the article, feature and use case indices before a guide is
requested from the AI layer.
"""

from typing import Awaitable, Callable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from announcement_analyzer.ai.schemas import FeatureRecord, GuideResult, ModelProvider
from announcement_analyzer.feeds.errors import CatalogLookupError
from announcement_analyzer.feeds.reader import Article, fetch_articles
from announcement_analyzer.utils.logging_utils import get_logger

logger = get_logger("feeds.catalog")

ArticleFetcher = Callable[..., Awaitable[List[Article]]]


def resolve_provider(value: Optional[Union[str, ModelProvider]]) -> ModelProvider:
    """Map a user-supplied provider name to a provider, defaulting to Gemini."""
    if isinstance(value, ModelProvider):
        return value
    if value and value.strip().lower() == ModelProvider.OPENAI.value:
        return ModelProvider.OPENAI
    return ModelProvider.GEMINI


class AnalyzedArticle(BaseModel):
    """A feed article with the features extracted from it."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    pub_date: str = ""
    features: List[FeatureRecord]
    extraction_provider: ModelProvider


class GuidePage(BaseModel):
    """Everything a caller needs to present a generated guide."""

    model_config = ConfigDict(frozen=True)

    article: AnalyzedArticle
    feature: FeatureRecord
    use_case: str
    provider: ModelProvider
    result: GuideResult


class AnnouncementCatalog:
    """Caches analyzed articles and serves guide requests by index.

    Args:
        analyzer: Object providing ``extract_features`` and ``generate_guide``,
            normally an AnnouncementAnalyzer.
        feed_url: The feed to analyze.
        max_articles: How many feed entries to run extraction on.
        timeout: Feed download timeout in seconds.
        fetcher: Coroutine function returning the feed's articles.
    """

    def __init__(
        self,
        analyzer,
        feed_url: str,
        max_articles: int = 10,
        timeout: float = 30,
        fetcher: ArticleFetcher = fetch_articles,
    ):
        self.analyzer = analyzer
        self.feed_url = feed_url
        self.max_articles = max_articles
        self.timeout = timeout
        self.fetcher = fetcher
        self.articles: List[AnalyzedArticle] = []

    async def load(
        self,
        provider: Union[ModelProvider, str] = ModelProvider.GEMINI,
        refresh: bool = False,
    ) -> List[AnalyzedArticle]:
        """Return the cached articles, running extraction if needed.

        The feed is fetched and analyzed when the cache is empty or ``refresh``
        is set. Articles without features are not cached.

        Args:
            provider: The provider used for extraction on a cache miss.
            refresh: If True, discard the cache and analyze the feed again.

        Returns:
            The analyzed articles.

        Raises:
            FeedFetchError: If the feed cannot be fetched.
        """
        provider = resolve_provider(provider)

        if self.articles and not refresh:
            logger.info(f"[Cache Hit] Serving {len(self.articles)} articles from memory")
            return self.articles

        logger.info(
            f"[Cache Miss] Fetching feed and running {provider.value.upper()} extraction"
        )
        articles = await self.fetcher(self.feed_url, limit=self.max_articles, timeout=self.timeout)

        analyzed = []
        for article in articles:
            features = await self.analyzer.extract_features(article.content, provider)
            if not features:
                logger.debug(f"No features extracted from '{article.title}'")
                continue

            analyzed.append(
                AnalyzedArticle(
                    title=article.title,
                    link=article.link,
                    pub_date=article.pub_date,
                    features=features,
                    extraction_provider=provider,
                )
            )

        self.articles = analyzed
        logger.info(f"[Cache Hit] Stored {len(self.articles)} articles")
        return self.articles

    def lookup(
        self, article_index: int, feature_index: int, use_case_index: int
    ) -> Tuple[AnalyzedArticle, FeatureRecord, str]:
        """Find a cached article, feature and use case by index.

        Raises:
            CatalogLookupError: If the cache is empty (status 503) or any
                index is out of range (status 404).
        """
        if not self.articles:
            raise CatalogLookupError(
                "Cache empty. Load the feed first to analyze announcements.", status=503
            )

        if not 0 <= article_index < len(self.articles):
            raise CatalogLookupError("Feature or Article not found in cache.")
        article = self.articles[article_index]

        if not 0 <= feature_index < len(article.features):
            raise CatalogLookupError("Feature or Article not found in cache.")
        feature = article.features[feature_index]

        if not 0 <= use_case_index < len(feature.use_cases):
            raise CatalogLookupError("Use Case not found in cache.")

        return article, feature, feature.use_cases[use_case_index]

    async def generate_guide(
        self,
        article_index: int,
        feature_index: int,
        use_case_index: int,
    ) -> GuidePage:
        """Generate the guide for a cached use case.

        The guide uses the same provider that extracted the article.

        Raises:
            CatalogLookupError: If the indices do not resolve.
        """
        article, feature, use_case = self.lookup(article_index, feature_index, use_case_index)
        generation_provider = article.extraction_provider

        logger.info(
            f"Generating guide using {generation_provider.value.upper()} "
            f"for cached feature: {feature.name}"
        )
        result = await self.analyzer.generate_guide(feature, use_case, generation_provider)

        return GuidePage(
            article=article,
            feature=feature,
            use_case=use_case,
            provider=generation_provider,
            result=result,
        )
