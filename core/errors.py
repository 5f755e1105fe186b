"""
Error hierarchy for documentation loading.

Lookup misses are not errors; they are reported as None or an empty list.
"""


class DocsError(Exception):
    """Base class for every documentation loading failure."""


class DocReadError(DocsError):
    """A backing document could not be read or decoded."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Fail to read document {file_name}: {reason}")


class TocIndexError(DocsError):
    """The TOC index file is missing or cannot be parsed."""


class SourceSyncError(DocsError):
    """Updating or cloning the remote documentation source failed."""

    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        if stderr:
            message = f"{message} - {stderr.strip()}"
        super().__init__(message)


class SourceMissingError(DocsError):
    """The local documentation root is absent after the sync step."""
