"""
Table of Contents Component.

A Toc is the two-level document hierarchy of one language: directory nodes
holding file nodes, plus a flat list of standalone pages.
"""

import posixpath
from typing import List, Optional

from core.models import DocResult, SearchResult
from utils.text_utils import extract_snippet
from .node import Node


class Toc:
    """
    Table of contents in a specific language.

    Supports lookup by path, standalone page lookup and substring search.
    """

    def __init__(
        self,
        lang: str,
        root_path: str,
        nodes: Optional[List[Node]] = None,
        pages: Optional[List[Node]] = None
    ):
        """
        Initialize table of contents.

        Args:
            lang: Language code of this translation
            root_path: Documentation root all node paths are resolved under
            nodes: Directory nodes in index order
            pages: Standalone page nodes in index order
        """
        self.lang = lang
        self.root_path = root_path
        self.nodes: List[Node] = nodes if nodes is not None else []
        self.pages: List[Node] = pages if pages is not None else []

    def __repr__(self) -> str:
        return f"Toc(lang={self.lang!r}, nodes={len(self.nodes)}, pages={len(self.pages)})"

    def find_dir(self, name: str) -> Optional[Node]:
        """Return the directory node with the given name."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def get_doc(self, name: str, fallback: Optional["Toc"] = None) -> Optional[DocResult]:
        """
        Resolve a slash-separated path to a document.

        Args:
            name: Path such as '', 'dir' or 'dir/file'
            fallback: Default-language Toc used when the file is missing here

        Returns:
            DocResult, or None when nothing matches
        """
        if name.startswith("/"):
            name = name[1:]

        # First node is the default document
        if not name:
            if not self.nodes or self.nodes[0].plain:
                return None
            first = self.nodes[0]
            return DocResult(first.title, first.content())

        infos = name.split("/")

        # Dir node
        if len(infos) == 1:
            node = self.find_dir(infos[0])
            if node is None:
                return None
            return DocResult(node.title, node.content())

        # File node
        dir_node = self.find_dir(infos[0])
        if dir_node is None:
            return None

        for node in dir_node.nodes:
            if node.name != infos[1]:
                continue

            if node.exists():
                return DocResult(node.title, node.content())

            # Translation missing, serve the default language once
            if fallback is None or fallback is self:
                return None
            result = fallback.get_doc(name)
            if result is None:
                return None
            return DocResult(result.title, result.content, is_fallback=True)

        return None

    def get_page(self, name: str) -> Optional[DocResult]:
        """
        Resolve a standalone page by name.

        Args:
            name: Page name, optionally with a leading slash

        Returns:
            DocResult, or None when the page is unknown, missing or has no content
        """
        if name.startswith("/"):
            name = name[1:]

        for page in self.pages:
            if page.name == name:
                if not page.exists() or page.plain:
                    return None
                return DocResult(page.title, page.content())
        return None

    def search(self, query: str) -> List[SearchResult]:
        """
        Case-insensitive substring search over directory and file nodes.

        Directory matches are listed before file matches.

        Args:
            query: Text to look for

        Returns:
            Ordered list of SearchResult
        """
        if not query:
            return []
        query = query.lower()

        results: List[SearchResult] = []

        # Dir node
        for node in self.nodes:
            match = extract_snippet(node.text, query)
            if match is not None:
                results.append(SearchResult(
                    title=node.title,
                    path=node.name,
                    match=match
                ))

        # File node
        for dir_node in self.nodes:
            for node in dir_node.nodes:
                match = extract_snippet(node.text, query)
                if match is not None:
                    results.append(SearchResult(
                        title=node.title,
                        path=posixpath.join(dir_node.name, node.name),
                        match=match
                    ))

        return results
