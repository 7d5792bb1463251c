"""Highlighting of search terms inside bookmark text."""
import html
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence


@dataclass(frozen=True)
class TextSegment:
    """A contiguous run of the original text."""
    text: str
    is_match: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "is_match": self.is_match}


def build_term_pattern(terms: Sequence[str]) -> Optional[Pattern[str]]:
    """Compile a case-insensitive alternation of the given terms.

    Terms are escaped so they always match literally. Their order is kept,
    so when two terms match at the same position the earlier one wins.

    Args:
        terms: Terms to match, empty strings are ignored

    Returns:
        Compiled pattern, or None if there is no non-empty term
    """
    alternatives = [re.escape(term) for term in terms if term]
    if not alternatives:
        return None
    return re.compile("|".join(alternatives), re.IGNORECASE)


def highlight_segments(text: str, terms: Sequence[str]) -> List[TextSegment]:
    """Split text into matching and non-matching segments.

    Joining the ``text`` of the returned segments always gives back the
    input unchanged.

    Args:
        text: Text to highlight (title, URL, folder, ...)
        terms: Search terms, usually from extract_search_terms()

    Returns:
        Ordered list of segments
    """
    pattern = build_term_pattern(terms) if text else None
    if pattern is None:
        return [TextSegment(text, False)]

    segments: List[TextSegment] = []
    cursor = 0

    for match in pattern.finditer(text):
        if match.start() > cursor:
            segments.append(TextSegment(text[cursor:match.start()], False))
        segments.append(TextSegment(match.group(0), True))
        cursor = match.end()

    if cursor < len(text):
        segments.append(TextSegment(text[cursor:], False))

    return segments


def has_match(segments: Sequence[TextSegment]) -> bool:
    """Check whether any segment is a match."""
    return any(segment.is_match for segment in segments)


def render_marked(
    segments: Sequence[TextSegment],
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
    escape: bool = True,
) -> str:
    """Render segments as a string with matches wrapped in markers.

    Args:
        segments: Segments from highlight_segments()
        open_tag: Marker inserted before each match
        close_tag: Marker inserted after each match
        escape: HTML-escape the segment text (markers are left untouched)

    Returns:
        Rendered string
    """
    parts = []
    for segment in segments:
        content = html.escape(segment.text) if escape else segment.text
        if segment.is_match:
            parts.append(f"{open_tag}{content}{close_tag}")
        else:
            parts.append(content)
    return "".join(parts)
