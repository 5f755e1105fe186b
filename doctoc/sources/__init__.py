"""
Documentation source abstraction layer.

Providers turn a configured source (local directory or git remote) into a
local documentation root.
"""

from .source_base import BaseSourceProvider
from .local_source import LocalSourceProvider
from .git_source import GitSourceProvider
from .source_factory import SourceProviderFactory

__all__ = [
    'BaseSourceProvider',
    'LocalSourceProvider',
    'GitSourceProvider',
    'SourceProviderFactory',
]
