"""Utilities package - Helper functions for text processing."""

from .text_utils import (
    adjust_range,
    extract_snippet
)

__all__ = [
    'adjust_range',
    'extract_snippet'
]
