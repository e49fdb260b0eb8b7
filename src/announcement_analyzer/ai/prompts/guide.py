"""Guide generation prompt for the announcement analyzer.

The guide is embedded in a page that already renders the feature name as its
title and shows the infographic separately, so the prompt rules out top-level
headings, images and any infographic section.
"""

ALLOWED_TAGS = "<h2>, <h3>, <p>, <ul>, <ol>, <li>, <strong>, <em>, <pre> and <code>"


def get_prompt(feature_name, feature_summary, use_case):
    """Build the guide prompt for one feature and use case.

    Args:
        feature_name: The feature's short title.
        feature_summary: The feature's technical summary.
        use_case: The use case the guide must be written around.

    Returns:
        The prompt string.
    """
    return f"""
    You are a technical writer. Write a comprehensive, step-by-step technical guide for a user.
    The guide should focus on the new Red Hat feature: **{feature_name}** (Summary: {feature_summary}).
    The entire guide must be contextualized around the following real-world scenario/use case: **{use_case}**.

    The guide must be returned as an HTML snippet only. Do not include <html>, <head> or <body> tags.
    Use only these tags: {ALLOWED_TAGS}.
    Do not use <h1>; the page already shows the title. Start section headings at <h2>.
    Do not include images, and do not include an infographic or visualization section;
    that is generated separately.

    It should be professional, instructive, and include:
    1. An introduction relating the feature to the use case.
    2. Prerequisites (e.g., 'RHEL 9', 'OpenShift Cluster access').
    3. A section of 3-10 actionable, technical steps/commands with brief explanations.
    4. A conclusion on the value proposition.
    """
