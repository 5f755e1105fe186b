"""Core package - Domain models, errors and constants."""

from .models import DocResult, SearchResult
from .errors import (
    DocsError,
    DocReadError,
    TocIndexError,
    SourceSyncError,
    SourceMissingError
)
from .constants import (
    FRONT_MATTER_MARKER,
    DOC_EXTENSION,
    DEFAULT_INDEX_FILE,
    PAGES_SECTION,
    SNIPPET_CHARS_BEFORE,
    SNIPPET_CHARS_AFTER
)

__all__ = [
    'DocResult',
    'SearchResult',
    'DocsError',
    'DocReadError',
    'TocIndexError',
    'SourceSyncError',
    'SourceMissingError',
    'FRONT_MATTER_MARKER',
    'DOC_EXTENSION',
    'DEFAULT_INDEX_FILE',
    'PAGES_SECTION',
    'SNIPPET_CHARS_BEFORE',
    'SNIPPET_CHARS_AFTER'
]
