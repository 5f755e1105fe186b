"""
TOC Loader Component.

Builds one Toc per configured language from a documentation root and its
index file.
"""

import logging
import os
from typing import Dict, Iterable, List

from core.constants import DEFAULT_INDEX_FILE, DOC_EXTENSION
from ..render import BaseRenderer
from .index_reader import IndexReader, TocIndex
from .node import Node
from .toc import Toc

logger = logging.getLogger(__name__)


class TocLoader:
    """
    Constructs per-language tables of contents.

    Layout on disk is <root>/<lang>/<dir>/<file>.md for directory members and
    <root>/<lang>/<page>.md for standalone pages. The first file of a
    directory is the directory's own document.
    """

    def __init__(
        self,
        renderer: BaseRenderer,
        cache_rendered_content: bool = True,
        index_file: str = DEFAULT_INDEX_FILE
    ):
        """
        Initialize loader.

        Args:
            renderer: Renderer handed to every node
            cache_rendered_content: Production mode; keep content rendered at load
            index_file: Index file name relative to the documentation root
        """
        self.renderer = renderer
        self.cache_rendered_content = cache_rendered_content
        self.index_file = index_file

    def _new_node(self, name: str, file_name: str) -> Node:
        return Node(
            name=name,
            file_name=file_name,
            renderer=self.renderer,
            cache_rendered_content=self.cache_rendered_content
        )

    def build_toc(self, root_path: str, lang: str, index: TocIndex) -> Toc:
        """
        Build the table of contents of one language.

        Args:
            root_path: Documentation root
            lang: Language code
            index: Parsed index

        Returns:
            Toc with nodes and pages in declaration order (content not loaded)
        """
        toc = Toc(lang=lang, root_path=root_path)

        for dir_name in index.dirs:
            files = index.files_of(dir_name)

            # Skip empty directory
            if not files:
                logger.debug(f"Skip directory without files: {dir_name}")
                continue

            dir_node = self._new_node(
                dir_name,
                os.path.join(root_path, lang, dir_name, files[0]) + DOC_EXTENSION
            )
            toc.nodes.append(dir_node)
            logger.debug(f"{dir_name}/")

            for file_name in files[1:]:
                dir_node.nodes.append(self._new_node(
                    file_name,
                    os.path.join(root_path, lang, dir_name, file_name) + DOC_EXTENSION
                ))
                logger.debug(f"{' ' * len(dir_name)}|__ {file_name}")

        # Single pages
        for page_name in index.pages:
            toc.pages.append(self._new_node(
                page_name,
                os.path.join(root_path, lang, page_name) + DOC_EXTENSION
            ))
            logger.debug(page_name)

        return toc

    @staticmethod
    def _iter_nodes(toc: Toc) -> Iterable[Node]:
        for dir_node in toc.nodes:
            yield dir_node
            yield from dir_node.nodes
        yield from toc.pages

    def load_content(self, toc: Toc) -> int:
        """
        Render every node whose backing document exists.

        Missing documents are left empty; lookups fall back to the default
        language for them.

        Args:
            toc: Table of contents to warm

        Returns:
            Number of documents loaded

        Raises:
            DocReadError: If an existing document cannot be read
        """
        loaded = 0
        for node in self._iter_nodes(toc):
            if not node.exists():
                continue
            node.reload_content()
            loaded += 1
        return loaded

    def load(self, root_path: str, langs: List[str]) -> Dict[str, Toc]:
        """
        Build tables of contents for all languages.

        Args:
            root_path: Documentation root containing the index file
            langs: Language codes in configuration order

        Returns:
            Mapping of language code to Toc

        Raises:
            TocIndexError: If the index is missing or malformed
            DocReadError: If a document cannot be read while warming content
        """
        index = IndexReader.read(os.path.join(root_path, self.index_file))

        tocs: Dict[str, Toc] = {}
        for lang in langs:
            toc = self.build_toc(root_path, lang, index)
            loaded = self.load_content(toc)
            logger.debug(f"Loaded {loaded} documents for {lang}")
            tocs[lang] = toc
        return tocs
