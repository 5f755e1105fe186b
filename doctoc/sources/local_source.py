"""
Local directory source.
"""

from .source_base import BaseSourceProvider


class LocalSourceProvider(BaseSourceProvider):
    """Documentation that already lives in a directory on disk."""
    
    def __init__(self, target: str):
        """
        Args:
            target: Path of the documentation root
        """
        self.target = target
    
    def ensure_local(self) -> str:
        return self.target
