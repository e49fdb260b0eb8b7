"""Infographic prompt for the announcement analyzer.

The infographic is a self-contained HTML fragment with inline styles, shown
above the guide text.
"""

BRAND_COLORS = "#EE0000 (Red Hat red), #151515 (black), #FFFFFF (white) and #F0F0F0 (light gray)"


def get_prompt(feature_name, feature_summary, use_case):
    """Build the infographic prompt for one feature and use case.

    Args:
        feature_name: The feature's short title.
        feature_summary: The feature's technical summary.
        use_case: The use case the visual should illustrate.

    Returns:
        The prompt string.
    """
    return f"""
    You are a visual designer producing a business value visualization as HTML.

    Feature: {feature_name}
    Summary: {feature_summary}
    Use case: {use_case}

    Create ONE self-contained HTML fragment that visualizes how this feature delivers value for the use case.
    Choose the style that fits best: a process flow (before/after steps), a comparison (old way vs. new way),
    or a small set of key metrics cards.

    Constraints:
    - Use a single root <div> and inline style attributes only. No <style>, <script>, <img> or external assets.
    - Use only these colors: {BRAND_COLORS}.
    - The layout must be responsive: width 100%, max-width 800px, flexbox that wraps on narrow screens,
      and relative font sizes.
    - Keep text short: labels and numbers, no paragraphs.
    - Return only the markup. No explanations, no markdown, no code fences.
    """
