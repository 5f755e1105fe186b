"""
Base abstract class for documentation sources.

A source provider makes the documentation available as a local directory.
"""

from abc import ABC, abstractmethod


class BaseSourceProvider(ABC):
    """
    Abstract base class for documentation source providers.
    """
    
    @abstractmethod
    def ensure_local(self) -> str:
        """
        Make sure the documentation exists locally.
        
        Returns:
            Path of the local documentation root. The caller checks that it
            is a directory.
            
        Raises:
            SourceSyncError: If fetching the documentation fails
        """
        pass
