"""Post-processing for generated guide markup.

LLM output does not always honour "do not include X" instructions, so guide
text runs through an ordered pipeline of small string transformations before
it is returned. Each step is a pure function and can be used on its own.
"""

import re
from typing import Callable, Tuple

# A word after a fence is a language tag only when it ends the line.
_LANGUAGE_TAG = r"(?:[\w+-]+(?=[ \t]*(?:\n|\Z)))?"
_CODE_FENCE = re.compile(r"```" + _LANGUAGE_TAG)
_WRAPPING_FENCE = re.compile(
    r"\A\s*```" + _LANGUAGE_TAG + r"[ \t]*\n?(.*?)\n?[ \t]*```\s*\Z", re.DOTALL
)

_TOP_LEVEL_HEADING = re.compile(r"<(/?)h1\b", re.IGNORECASE)

_HEADING = re.compile(r"<h([1-6])\b[^>]*>(.*?)</h\1\s*>", re.IGNORECASE | re.DOTALL)
_HEADING_START = re.compile(r"<h[1-6]\b", re.IGNORECASE)
_INFOGRAPHIC_TITLE = re.compile(
    r"infographic|business\s+value\s+visualization", re.IGNORECASE
)

_IMAGE = re.compile(r"<img\b[^>]*>|</img\s*>", re.IGNORECASE)

_LINE_BREAK_RUN = re.compile(r"<br\s*/?>(?:\s*<br\s*/?>){2,}", re.IGNORECASE)

_CONTAINER_TAGS = (
    "p|div|section|article|aside|header|footer|span|ul|ol|li|blockquote|pre|code"
    "|strong|em|b|i|table|thead|tbody|tr|td|th|h[1-6]"
)
_EMPTY_CONTAINER = re.compile(
    rf"<({_CONTAINER_TAGS})\b[^>]*>\s*</\1\s*>", re.IGNORECASE
)


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers, with or without a language tag."""
    return _CODE_FENCE.sub("", text)


def demote_top_level_headings(text: str) -> str:
    """Turn <h1> elements into <h2>; the page around the guide owns the title."""
    return _TOP_LEVEL_HEADING.sub(r"<\1h2", text)


def unwrap_code_fence(text: str) -> str:
    """Return the body of a single fenced block wrapping the whole text.

    Text that is not wrapped in a fence is returned stripped but otherwise unchanged.
    """
    text = text.strip()
    match = _WRAPPING_FENCE.match(text)
    if match:
        return match.group(1).strip()
    return text


def remove_infographic_sections(text: str) -> str:
    """Remove headed sections whose heading mentions an infographic.

    A section runs from its heading to the next heading of any level, or to
    the end of the text.
    """
    pieces = []
    cursor = 0
    search_from = 0

    while True:
        heading = _HEADING.search(text, search_from)
        if heading is None:
            break
        if not _INFOGRAPHIC_TITLE.search(heading.group(2)):
            search_from = heading.end()
            continue

        pieces.append(text[cursor:heading.start()])
        following = _HEADING_START.search(text, heading.end())
        cursor = following.start() if following else len(text)
        search_from = cursor

    pieces.append(text[cursor:])
    return "".join(pieces)


def remove_images(text: str) -> str:
    """Remove all <img> elements."""
    return _IMAGE.sub("", text)


def collapse_line_breaks(text: str) -> str:
    """Collapse three or more consecutive <br> elements into exactly two."""
    return _LINE_BREAK_RUN.sub("<br><br>", text)


def remove_empty_containers(text: str) -> str:
    """Remove container elements with nothing but whitespace between their tags.

    Nested empty containers are removed from the inside out.
    """
    while True:
        text, count = _EMPTY_CONTAINER.subn("", text)
        if count == 0:
            return text


SANITIZE_STEPS: Tuple[Callable[[str], str], ...] = (
    strip_code_fences,
    demote_top_level_headings,
    remove_infographic_sections,
    remove_images,
    collapse_line_breaks,
    remove_empty_containers,
    str.strip,
)


def _apply_steps(text: str) -> str:
    for step in SANITIZE_STEPS:
        text = step(text)
    return text


def sanitize(raw_text: str) -> str:
    """Clean raw guide text into the HTML fragment shown to users.

    Removing one construct can expose another (an image between backticks
    leaves a new fence), so the pipeline is repeated until the text is stable.
    Every step either shortens the text or demotes an <h1> without changing
    its length, which bounds the loop.

    Args:
        raw_text: The text returned by the guide model.

    Returns:
        The sanitized HTML fragment.
    """
    text = raw_text or ""
    while True:
        cleaned = _apply_steps(text)
        if cleaned == text:
            return cleaned
        text = cleaned
