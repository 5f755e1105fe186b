"""
DocToc - Multi-language documentation table of contents.

Builds per-language tables of contents over a directory of Markdown documents,
renders documents on demand and provides substring search with snippets.
"""

from .core import Node, Toc, TocLoader, IndexReader, TocIndex, parse_front_matter
from .registry import TocRegistry, TocSnapshot, get_registry, reload_docs

__all__ = [
    'Node',
    'Toc',
    'TocLoader',
    'IndexReader',
    'TocIndex',
    'parse_front_matter',
    'TocRegistry',
    'TocSnapshot',
    'get_registry',
    'reload_docs',
]
