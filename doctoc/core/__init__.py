"""
Core components of the documentation TOC.

Contains the node model with front matter parsing, the per-language table of
contents with lookup and search, and the index reader and loader that build
tables of contents from disk.
"""

from .node import Node, parse_front_matter
from .toc import Toc
from .index_reader import IndexReader, TocIndex
from .toc_loader import TocLoader

__all__ = [
    'Node',
    'parse_front_matter',
    'Toc',
    'IndexReader',
    'TocIndex',
    'TocLoader',
]
