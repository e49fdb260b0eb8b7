#!/usr/bin/env python
"""
Command-line interface for the announcement analyzer.
"""

import argparse
import asyncio
import sys

from announcement_analyzer.ai.service import create_analyzer
from announcement_analyzer.feeds.catalog import AnnouncementCatalog, resolve_provider
from announcement_analyzer.utils.config import CONFIG

GUIDE_DESCRIPTION = (
    "Generate a guide for one use case. The feed is fetched and analyzed again "
    "in this run, so indices from an earlier 'list' run may point at different "
    "features if the feed or the model output has changed. The selected feature "
    "and use case are printed to stderr before the guide is generated."
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description="Extract technical features from a news feed and generate usage guides."
    )
    parser.add_argument(
        "--provider",
        type=str,
        choices=["gemini", "openai"],
        default=CONFIG.get("MODEL_PROVIDER", "gemini"),
        help="LLM provider to use for feature extraction (default: gemini)",
    )
    parser.add_argument(
        "--feed-url",
        type=str,
        default=CONFIG.get("FEED_URL"),
        help="RSS/Atom feed to analyze",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=CONFIG.get("MAX_ARTICLES", 10),
        help="Number of feed entries to analyze (default: 10)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List extracted features and their use cases")

    guide = subparsers.add_parser(
        "guide",
        help="Generate a guide for one use case",
        description=GUIDE_DESCRIPTION,
    )
    guide.add_argument("article", type=int, help="Article index from the list command")
    guide.add_argument("feature", type=int, help="Feature index within the article")
    guide.add_argument("use_case", type=int, help="Use case index within the feature")
    guide.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the infographic and guide HTML to this file instead of stdout",
    )

    return parser


def print_catalog(articles) -> None:
    """Print analyzed articles with the indices used by the guide command."""
    if not articles:
        print("No technical announcements found.")
        return

    for article_index, article in enumerate(articles):
        print(f"[{article_index}] {article.title} ({article.pub_date})")
        print(f"    {article.link}")
        for feature_index, feature in enumerate(article.features):
            print(f"    [{feature_index}] {feature.name}")
            print(f"        {feature.summary}")
            for use_case_index, use_case in enumerate(feature.use_cases):
                print(f"        [{use_case_index}] {use_case}")


def format_guide(page) -> str:
    """Combine the infographic and guide fragments into one HTML fragment."""
    parts = [f"<!-- {page.feature.name} | {page.use_case} | {page.provider.value} -->"]
    if page.result.infographic_html:
        parts.append(page.result.infographic_html)
    parts.append(page.result.html)
    return "\n\n".join(parts)


async def run(args) -> int:
    """Run the selected command."""
    catalog = AnnouncementCatalog(
        create_analyzer(),
        feed_url=args.feed_url,
        max_articles=args.limit,
        timeout=CONFIG.get("FEED_TIMEOUT", 30),
    )
    articles = await catalog.load(resolve_provider(args.provider))

    if args.command == "list":
        print_catalog(articles)
        return 0

    article, feature, use_case = catalog.lookup(args.article, args.feature, args.use_case)
    print(
        f"Selected: {article.title} / {feature.name} / {use_case}",
        file=sys.stderr,
    )

    page = await catalog.generate_guide(args.article, args.feature, args.use_case)
    output = format_guide(page)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Guide written to {args.output}")
    else:
        print(output)
    return 0


def main(argv=None) -> int:
    """Main entry point for the announcement analyzer CLI."""
    args = build_parser().parse_args(argv)

    try:
        return asyncio.run(run(args))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
