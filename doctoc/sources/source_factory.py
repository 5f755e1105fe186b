"""
Factory for creating documentation source providers.

This provides a centralized way to instantiate the correct provider
based on the source type configuration.
"""

from core.constants import DEFAULT_CACHE_DIR, SOURCE_TYPES
from .source_base import BaseSourceProvider
from .local_source import LocalSourceProvider
from .git_source import GitSourceProvider


class SourceProviderFactory:
    """
    Factory class for creating source providers.
    """
    
    @staticmethod
    def create_provider(
        source_type: str,
        target: str,
        **kwargs
    ) -> BaseSourceProvider:
        """
        Create a source provider based on the source type.
        
        Args:
            source_type: Source type ('local' or 'remote')
            target: Local directory or remote git URL
            **kwargs: Provider-specific configuration
                For remote:
                    - cache_dir: Local checkout directory (default: data/docs)
                    - git_binary: git executable (default: git)
        
        Returns:
            Configured source provider instance
            
        Raises:
            ValueError: If source type is not supported
        """
        source_type = source_type.lower().strip()
        
        if source_type == 'local':
            return LocalSourceProvider(target)
        elif source_type == 'remote':
            return GitSourceProvider(
                remote_url=target,
                cache_dir=kwargs.get('cache_dir', DEFAULT_CACHE_DIR),
                git_binary=kwargs.get('git_binary', 'git')
            )
        else:
            raise ValueError(
                f"Unsupported source type: '{source_type}'. "
                f"Supported types: {', '.join(SourceProviderFactory.get_supported_types())}"
            )
    
    @staticmethod
    def get_supported_types():
        """
        Get list of supported source types.
        
        Returns:
            List of source type names
        """
        return list(SOURCE_TYPES)
