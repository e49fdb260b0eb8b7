"""Prompts for the announcement analyzer AI.

Each prompt is a fixed string with a single builder function:

    from announcement_analyzer.ai.prompts import get_extraction_prompt
    prompt = get_extraction_prompt(article_text)
"""

from announcement_analyzer.ai.prompts.extraction import (  # noqa: F401
    get_prompt as get_extraction_prompt,
)
from announcement_analyzer.ai.prompts.guide import (  # noqa: F401
    get_prompt as get_guide_prompt,
)
from announcement_analyzer.ai.prompts.infographic import (  # noqa: F401
    get_prompt as get_infographic_prompt,
)
