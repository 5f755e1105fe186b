"""
Unit tests for config.settings module.
"""
import pytest
from pydantic import ValidationError
from config.settings import Settings


class TestSettings:
    """Tests for Settings."""
    
    def test_defaults(self, monkeypatch, temp_dir):
        """Test default values."""
        monkeypatch.chdir(temp_dir)
        settings = Settings()
        
        assert settings.source_type == "local"
        assert settings.target == "docs"
        assert settings.langs == ["en-US"]
        assert settings.cache_dir == "data/docs"
        assert settings.index_file == "TOC.ini"
        assert settings.cache_rendered_content is True
    
    def test_environment(self, monkeypatch, temp_dir):
        """Test values are read from DOCS_ environment variables."""
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("DOCS_SOURCE_TYPE", "remote")
        monkeypatch.setenv("DOCS_TARGET", "https://example.com/docs.git")
        monkeypatch.setenv("DOCS_LANGUAGES", "zh-CN,en-US")
        monkeypatch.setenv("DOCS_CACHE_RENDERED_CONTENT", "false")
        
        settings = Settings()
        
        assert settings.source_type == "remote"
        assert settings.target == "https://example.com/docs.git"
        assert settings.langs == ["zh-CN", "en-US"]
        assert settings.cache_rendered_content is False
    
    def test_languages_trimmed(self):
        """Test language codes are trimmed and empties dropped."""
        settings = Settings(languages=" en-US , ,zh-CN ")
        
        assert settings.langs == ["en-US", "zh-CN"]
    
    def test_languages_required(self):
        """Test at least one language is required."""
        with pytest.raises(ValidationError):
            Settings(languages=" , ")
    
    def test_invalid_source_type(self):
        """Test unknown source types are rejected."""
        with pytest.raises(ValidationError):
            Settings(source_type="ftp")
    
    def test_get_docs_config(self):
        """Test configuration dictionary."""
        config = Settings(target="site", languages="en").get_docs_config()
        
        assert config['target'] == "site"
        assert config['langs'] == ["en"]
        assert config['source_type'] == "local"
