"""
Renderer abstraction layer for document content.

Nodes depend on BaseRenderer only, so tests can inject a deterministic stub.
"""

from .renderer_base import BaseRenderer
from .markdown_renderer import MarkdownRenderer

__all__ = [
    'BaseRenderer',
    'MarkdownRenderer',
]
