"""
Text utilities for documentation search.

Handles snippet windows around search matches.
"""
from typing import Optional, Tuple

from core.constants import SNIPPET_CHARS_BEFORE, SNIPPET_CHARS_AFTER


def adjust_range(start: int, end: int, length: int) -> Tuple[int, int]:
    """
    Widen a match range into a snippet window.
    
    Args:
        start: Index of the first matched character
        end: Index just past the last matched character
        length: Length of the whole text
    
    Returns:
        Tuple of (start, end) clamped to [0, length]
    """
    start = max(0, start - SNIPPET_CHARS_BEFORE)
    end = min(length, end + SNIPPET_CHARS_AFTER)
    return start, end


def extract_snippet(text: str, query: str) -> Optional[str]:
    """
    Find the first occurrence of query in text and cut a snippet around it.
    
    Both arguments are expected to be lowercased already.
    
    Args:
        text: Plain text to search
        query: Substring to find
    
    Returns:
        Snippet text, or None when query does not occur
    """
    if not query:
        return None

    idx = text.find(query)
    if idx == -1:
        return None

    start, end = adjust_range(idx, idx + len(query), len(text))
    return text[start:end]
