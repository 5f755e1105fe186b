"""
Core domain models for documentation lookups.

These are pure data structures without business logic.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DocResult:
    """A resolved document: title, rendered content and fallback flag."""
    title: str
    content: Optional[str]
    is_fallback: bool = False


@dataclass(frozen=True)
class SearchResult:
    """A single search hit with the snippet around the first match."""
    title: str
    path: str
    match: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'title': self.title,
            'path': self.path,
            'match': self.match
        }
