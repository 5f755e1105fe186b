"""
Markdown renderer implementation.

Uses Python-Markdown for HTML output and BeautifulSoup to project the HTML
down to plain text for search.
"""

from typing import List, Optional, Tuple

import markdown
from bs4 import BeautifulSoup

from .renderer_base import BaseRenderer


DEFAULT_EXTENSIONS = ['extra', 'sane_lists', 'toc']


class MarkdownRenderer(BaseRenderer):
    """
    Markdown renderer backed by Python-Markdown.
    """
    
    def __init__(self, extensions: Optional[List[str]] = None):
        """
        Initialize Markdown renderer.
        
        Args:
            extensions: Python-Markdown extension names (default: extra, sane_lists, toc)
        """
        self.extensions = list(extensions) if extensions is not None else list(DEFAULT_EXTENSIONS)
    
    def render_body(self, body: str) -> str:
        # Markdown instances keep state between convert() calls
        md = markdown.Markdown(extensions=self.extensions)
        return md.convert(body)
    
    def render_plain_text(self, body: str) -> str:
        return self.html_to_text(self.render_body(body))
    
    def render(self, body: str) -> Tuple[str, str]:
        html = self.render_body(body)
        return html, self.html_to_text(html)
    
    @staticmethod
    def html_to_text(html: str) -> str:
        """Strip markup from rendered HTML."""
        soup = BeautifulSoup(html, features='html.parser')
        return soup.get_text()
