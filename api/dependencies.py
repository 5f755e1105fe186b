"""
API Dependencies - Dependency providers for the query surface.

Provides reusable accessors for settings, the TOC registry and the docs service.
"""
from config.settings import Settings, settings
from doctoc.registry import TocRegistry, get_registry
from serving.docs_service import DocsService


def get_settings() -> Settings:
    """
    Dependency for application settings.
    
    Returns:
        Global Settings instance
    """
    return settings


def get_toc_registry() -> TocRegistry:
    """
    Dependency for the TOC registry.
    
    Returns:
        Global TocRegistry configured from settings
    """
    return get_registry(get_settings())


def get_docs_service(registry: TocRegistry = None) -> DocsService:
    """
    Dependency for the docs service.
    
    Args:
        registry: TocRegistry (optional, will use the global one if not provided)
    
    Returns:
        DocsService instance
    """
    if registry is None:
        registry = get_toc_registry()
    
    return DocsService(registry=registry)
