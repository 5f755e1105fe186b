"""
TOC Registry and reload orchestration.

The registry maps language codes to tables of contents. A reload builds a
complete new snapshot and swaps the reference in one assignment, so readers
see either the previous snapshot or the next one. Writers are serialized by a
single lock held for the whole sync, load and swap sequence; readers never
take it.
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from core.errors import SourceMissingError
from core.models import DocResult, SearchResult
from .core import Toc, TocLoader
from .render import BaseRenderer, MarkdownRenderer
from .sources import BaseSourceProvider, SourceProviderFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TocSnapshot:
    """Immutable set of tables of contents, one per language."""
    langs: Tuple[str, ...] = ()
    tocs: Mapping[str, Toc] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def default_lang(self) -> Optional[str]:
        """First configured language."""
        return self.langs[0] if self.langs else None

    def get(self, lang: str) -> Optional[Toc]:
        return self.tocs.get(lang)

    def default_toc(self) -> Optional[Toc]:
        if self.default_lang is None:
            return None
        return self.tocs.get(self.default_lang)


class TocRegistry:
    """
    Process-wide holder of the current TocSnapshot.
    """

    def __init__(
        self,
        source: BaseSourceProvider,
        loader: TocLoader,
        langs: List[str]
    ):
        """
        Initialize registry with an empty snapshot.

        Args:
            source: Provider that makes the documentation available locally
            loader: Loader building tables of contents from the local root
            langs: Language codes; the first one is the default language
        """
        if not langs:
            raise ValueError("At least one language is required")

        self.source = source
        self.loader = loader
        self.langs = list(langs)

        self._lock = threading.Lock()
        self._snapshot = TocSnapshot()

    @classmethod
    def from_settings(cls, settings, renderer: Optional[BaseRenderer] = None) -> "TocRegistry":
        """
        Build a registry from application settings.

        Args:
            settings: config.settings.Settings instance
            renderer: Renderer override (default: MarkdownRenderer)

        Returns:
            TocRegistry (not loaded yet)
        """
        config = settings.get_docs_config()
        source = SourceProviderFactory.create_provider(
            source_type=config["source_type"],
            target=config["target"],
            cache_dir=config["cache_dir"],
            git_binary=config["git_binary"]
        )
        loader = TocLoader(
            renderer=renderer or MarkdownRenderer(),
            cache_rendered_content=config["cache_rendered_content"],
            index_file=config["index_file"]
        )
        return cls(source=source, loader=loader, langs=config["langs"])

    @property
    def snapshot(self) -> TocSnapshot:
        """Current snapshot; hold on to it for consistent multi-step reads."""
        return self._snapshot

    def get_toc(self, lang: str) -> Optional[Toc]:
        return self._snapshot.get(lang)

    def get_doc(self, lang: str, path: str) -> Optional[DocResult]:
        """
        Resolve a document path in a language.

        Args:
            lang: Language code
            path: Path such as '', 'dir' or 'dir/file'

        Returns:
            DocResult (is_fallback set when the default language was served),
            or None when not found
        """
        snapshot = self._snapshot
        toc = snapshot.get(lang)
        if toc is None:
            return None
        return toc.get_doc(path, fallback=snapshot.default_toc())

    def get_page(self, lang: str, name: str) -> Optional[DocResult]:
        toc = self._snapshot.get(lang)
        if toc is None:
            return None
        return toc.get_page(name)

    def search(self, lang: str, query: str) -> List[SearchResult]:
        """
        Search the table of contents of a language.

        Args:
            lang: Language code
            query: Text to look for

        Returns:
            Ordered list of SearchResult, empty for unknown languages
        """
        toc = self._snapshot.get(lang)
        if toc is None:
            return []
        return toc.search(query)

    def reload_docs(self) -> TocSnapshot:
        """
        Sync the source, rebuild every table of contents and install them.

        On any failure the previous snapshot stays in place.

        Returns:
            The newly installed snapshot

        Raises:
            SourceSyncError: If the remote source cannot be updated or cloned
            SourceMissingError: If the local root is not a directory
            TocIndexError: If the index file is missing or malformed
            DocReadError: If a document cannot be read
        """
        with self._lock:
            local_root = self.source.ensure_local()

            if not os.path.isdir(local_root):
                raise SourceMissingError(f"Documentation not found: {local_root}")

            tocs = self.loader.load(local_root, self.langs)
            snapshot = TocSnapshot(
                langs=tuple(self.langs),
                tocs=MappingProxyType(dict(tocs))
            )
            self._snapshot = snapshot

        logger.info(f"Documentation reloaded from {local_root}: {', '.join(self.langs)}")
        return snapshot


# Global registry instance
_registry = None


def get_registry(settings=None) -> TocRegistry:
    """
    Get or create global registry instance.

    Args:
        settings: Optional Settings. Only used on first call.

    Returns:
        TocRegistry instance
    """
    global _registry
    if _registry is None:
        if settings is None:
            from config.settings import settings
        _registry = TocRegistry.from_settings(settings)
    return _registry


def reload_docs() -> TocSnapshot:
    """
    Reload the global registry.

    Returns:
        The newly installed snapshot
    """
    return get_registry().reload_docs()
