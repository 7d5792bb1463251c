"""Search term extraction for bookmark queries.

A query mixes plain keywords with ``field:value`` constraints, e.g.
``folder:Work tag:"needs review" react``. For highlighting we only care
about the literal text the user is looking for, so field names are dropped
and their values are kept alongside the plain keywords.
"""
import re
from typing import Dict, List, Tuple


# field:"quoted value" or field:value
FIELD_PATTERN = re.compile(r'(\w+):(?:"([^"]+)"|(\S+))')

# Field prefixes shown in the help text, one per highlighted bookmark field.
# Informational only: the extractor accepts any word before a colon.
SEARCH_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("title", "Look for the value in bookmark titles"),
    ("url", "Look for the value in URLs"),
    ("folder", "Look for the value in folder paths"),
)

SEARCH_EXAMPLES: Tuple[str, ...] = (
    "folder:Work react",
    'title:"API Documentation"',
    "url:docs.github",
)


def _split_words(text: str) -> List[str]:
    """Split free text on whitespace runs, dropping empty pieces."""
    return text.split()


def extract_search_terms(query: str) -> List[str]:
    """Extract the literal terms to highlight from a search query.

    Plain words are kept as-is, ``field:value`` tokens contribute only their
    value. Terms keep the order in which they appear in the query and are
    neither deduplicated nor lowercased.

    Args:
        query: Raw search query (may be empty)

    Returns:
        Ordered list of non-empty terms
    """
    if not query:
        return []

    terms: List[str] = []
    cursor = 0

    for match in FIELD_PATTERN.finditer(query):
        # Free text between the previous token and this one
        terms.extend(_split_words(query[cursor:match.start()]))
        cursor = match.end()

        value = match.group(2) or match.group(3)
        if value:
            terms.append(value)

    terms.extend(_split_words(query[cursor:]))

    return terms


def search_fields() -> Dict[str, str]:
    """Return the documented field prefixes mapped to their descriptions."""
    return dict(SEARCH_FIELDS)


def format_search_help() -> str:
    """Render the search syntax help as plain text.

    Returns:
        Multi-line help text listing field prefixes and example queries
    """
    lines = ["Use special prefixes to search within specific fields:", ""]
    width = max(len(name) for name, _ in SEARCH_FIELDS) + len(":value")
    for name, description in SEARCH_FIELDS:
        lines.append(f"  {(name + ':value').ljust(width)}  {description}")

    lines.extend(["", "Examples:"])
    lines.extend(f"  {example}" for example in SEARCH_EXAMPLES)
    lines.extend(["", 'Use quotes for multi-word values: folder:"My Projects"'])
    lines.append("Any other field:value token is treated as its plain value.")

    return "\n".join(lines)
