"""Feature extraction prompt for the announcement analyzer."""


def get_prompt(article_text):
    """Build the extraction prompt with the article embedded verbatim.

    Args:
        article_text: The raw article content from the feed.

    Returns:
        The prompt string.
    """
    return f"""
    Analyze the following Red Hat news article. Your task is to extract all new product updates,
    technical features, or significant value-added stories.
    If the article is primarily corporate news, opinion, or non-technical, return an empty array
    (or a wrapper object with an empty array).
    Otherwise, for each significant technical update, provide a descriptive name, a technical summary,
    and exactly three distinct, real-world use cases.
    Return ONLY the JSON that strictly adheres to the provided schema.

    ARTICLE CONTENT:
    ---
    {article_text}
    ---
    """
