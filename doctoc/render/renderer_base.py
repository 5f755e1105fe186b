"""
Base abstract class for document renderers.

This defines the interface that every Markdown renderer implementation must follow.
"""

from abc import ABC, abstractmethod
from typing import Tuple


class BaseRenderer(ABC):
    """
    Abstract base class for document renderers.
    
    Nodes call both methods on the document body (front matter already
    stripped). Implementations must be pure functions of their input so that
    concurrent renders of the same document converge to the same result.
    """
    
    @abstractmethod
    def render_body(self, body: str) -> str:
        """
        Render a document body for display.
        
        Args:
            body: Markdown source without front matter
            
        Returns:
            Rendered output (HTML for the Markdown renderer)
        """
        pass
    
    @abstractmethod
    def render_plain_text(self, body: str) -> str:
        """
        Render a document body to plain text without formatting.
        
        Args:
            body: Markdown source without front matter
            
        Returns:
            Plain text used for search
        """
        pass

    def render(self, body: str) -> Tuple[str, str]:
        """
        Render a document body once for display and search.

        Args:
            body: Markdown source without front matter

        Returns:
            Tuple of (rendered output, plain text)
        """
        return self.render_body(body), self.render_plain_text(body)
