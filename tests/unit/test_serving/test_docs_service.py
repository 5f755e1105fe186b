"""
Unit tests for serving.docs_service module.
"""
import pytest
from core.errors import SourceMissingError
from doctoc.core import TocLoader
from doctoc.registry import TocRegistry
from doctoc.sources import LocalSourceProvider
from serving.docs_service import DocsService


@pytest.fixture
def service(docs_root, langs, stub_renderer):
    """Docs service over the sample docs, loaded."""
    registry = TocRegistry(
        source=LocalSourceProvider(str(docs_root)),
        loader=TocLoader(renderer=stub_renderer),
        langs=langs
    )
    service = DocsService(registry=registry)
    service.reload_docs()
    return service


class TestDocsService:
    """Tests for DocsService."""
    
    def test_reload_summary(self, service):
        """Test reload reports counts of the default language."""
        summary = service.reload_docs()
        
        assert summary.langs == ["en-US", "zh-CN"]
        assert summary.dir_count == 2
        assert summary.file_count == 3
        assert summary.page_count == 1
    
    def test_get_doc(self, service):
        """Test document response fields."""
        doc = service.get_doc("en-US", "/guide/setup")
        
        assert doc.lang == "en-US"
        assert doc.path == "guide/setup"
        assert doc.title == "Setup"
        assert doc.content == "<p>Run the installer and configure the server.</p>"
        assert doc.is_fallback is False
    
    def test_get_doc_fallback(self, service):
        """Test fallback flag is exposed."""
        doc = service.get_doc("zh-CN", "guide/upgrade")
        
        assert doc.is_fallback is True
        assert doc.lang == "zh-CN"
    
    def test_get_doc_not_found(self, service):
        """Test misses return None."""
        assert service.get_doc("en-US", "guide/missing") is None
    
    def test_get_page(self, service):
        """Test page response."""
        page = service.get_page("zh-CN", "faq")
        
        assert page.title == "常见问题"
        assert page.is_fallback is False
        assert service.get_page("zh-CN", "donate") is None
    
    def test_search(self, service):
        """Test search response keeps ordering."""
        response = service.search("en-US", "Configure")
        
        assert response.query == "Configure"
        assert [r.path for r in response.results] == ["guide/setup", "guide/upgrade"]
        assert response.results[0].match == "n the installer and configure the server."
    
    def test_search_empty_query(self, service):
        """Test empty query yields no results."""
        assert service.search("en-US", "").results == []
    
    def test_list_toc(self, service):
        """Test navigation listing."""
        toc = service.list_toc("en-US")
        
        assert [d.name for d in toc.dirs] == ["guide", "advanced"]
        assert toc.dirs[0].title == "Getting Started"
        assert [f.path for f in toc.dirs[0].files] == ["guide/setup", "guide/upgrade"]
        assert toc.dirs[1].plain is True
        assert [p.name for p in toc.pages] == ["faq"]
    
    def test_list_toc_unknown_language(self, service):
        """Test unknown language listing returns None."""
        assert service.list_toc("fr-FR") is None
    
    def test_reload_failure_propagates(self, service, docs_root):
        """Test reload errors reach the caller and keep old docs."""
        service.registry.source = LocalSourceProvider(str(docs_root / "gone"))
        
        with pytest.raises(SourceMissingError):
            service.reload_docs()
        
        assert service.get_doc("en-US", "guide/setup").title == "Setup"
    
    def test_response_serialization(self, service):
        """Test responses serialize to plain dictionaries."""
        data = service.get_doc("en-US", "guide").model_dump()
        
        assert data == {
            'lang': "en-US",
            'path': "guide",
            'title': "Getting Started",
            'content': "<p>Welcome to the guide. Install first.</p>",
            'is_fallback': False
        }
