"""
Documentation Service

Query surface over the TOC registry: document and page lookup, search,
navigation listing and reload. Returns API schemas ready for serialization.
"""
from typing import Optional

from api.schemas import (
    DocResponse,
    ReloadResponse,
    SearchResponse,
    SearchResultResponse,
    TocDirResponse,
    TocFileResponse,
    TocResponse,
)
from doctoc.registry import TocRegistry


class DocsService:
    """Service for looking up and searching documentation."""

    def __init__(self, registry: TocRegistry):
        """
        Initialize docs service.

        Args:
            registry: TOC registry holding the current snapshot
        """
        self.registry = registry

    def get_doc(self, lang: str, path: str) -> Optional[DocResponse]:
        """
        Resolve a document.

        Args:
            lang: Language code
            path: Path such as '', 'dir' or 'dir/file'

        Returns:
            DocResponse or None when not found
        """
        result = self.registry.get_doc(lang, path)
        if result is None:
            return None

        return DocResponse(
            lang=lang,
            path=path.lstrip("/"),
            title=result.title,
            content=result.content,
            is_fallback=result.is_fallback
        )

    def get_page(self, lang: str, name: str) -> Optional[DocResponse]:
        """
        Resolve a standalone page.

        Args:
            lang: Language code
            name: Page name

        Returns:
            DocResponse or None when not found
        """
        result = self.registry.get_page(lang, name)
        if result is None:
            return None

        return DocResponse(
            lang=lang,
            path=name.lstrip("/"),
            title=result.title,
            content=result.content
        )

    def search(self, lang: str, query: str) -> SearchResponse:
        """
        Search documentation of a language.

        Args:
            lang: Language code
            query: Text to look for

        Returns:
            SearchResponse with directory hits before file hits
        """
        results = self.registry.search(lang, query)
        return SearchResponse(
            lang=lang,
            query=query,
            results=[SearchResultResponse(**r.to_dict()) for r in results]
        )

    def list_toc(self, lang: str) -> Optional[TocResponse]:
        """
        Navigation listing of a language.

        Args:
            lang: Language code

        Returns:
            TocResponse or None for unknown languages
        """
        toc = self.registry.get_toc(lang)
        if toc is None:
            return None

        dirs = []
        for dir_node in toc.nodes:
            dirs.append(TocDirResponse(
                name=dir_node.name,
                title=dir_node.title,
                plain=dir_node.plain,
                files=[
                    TocFileResponse(
                        name=node.name,
                        title=node.title,
                        path=f"{dir_node.name}/{node.name}"
                    )
                    for node in dir_node.nodes
                ]
            ))

        pages = [
            TocFileResponse(name=page.name, title=page.title, path=page.name)
            for page in toc.pages
        ]
        return TocResponse(lang=lang, dirs=dirs, pages=pages)

    def reload_docs(self) -> ReloadResponse:
        """
        Reload documentation from the configured source.

        Returns:
            ReloadResponse summarizing the default language

        Raises:
            DocsError: If syncing or loading fails; the previous docs stay in place
        """
        snapshot = self.registry.reload_docs()
        toc = snapshot.default_toc()

        dir_count = len(toc.nodes) if toc else 0
        file_count = sum(len(node.nodes) for node in toc.nodes) if toc else 0
        page_count = len(toc.pages) if toc else 0

        return ReloadResponse(
            langs=list(snapshot.langs),
            dir_count=dir_count,
            file_count=file_count,
            page_count=page_count
        )
