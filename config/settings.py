"""
Configuration management using Pydantic Settings.

Environment variables:
- DOCS_SOURCE_TYPE: 'local' for a directory on disk, 'remote' for a git repository
- DOCS_TARGET: Local directory or git URL of the documentation source
- DOCS_LANGUAGES: Comma-separated language codes, the first one is the default
- DOCS_CACHE_DIR: Local checkout used when the source is remote
- DOCS_INDEX_FILE: Name of the TOC index file at the source root
- DOCS_CACHE_RENDERED_CONTENT: Render once at load (prod) or on every access (dev)
- DOCS_GIT_BINARY: git executable used for remote sources
- DOCS_LOG_LEVEL: Logging level for the CLI
"""
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Documentation source
    source_type: Literal["local", "remote"] = Field(default="local")
    target: str = Field(default="docs")
    languages: str = Field(default="en-US")
    cache_dir: str = Field(default="data/docs")
    index_file: str = Field(default="TOC.ini")

    # Rendering
    cache_rendered_content: bool = Field(default=True)

    # Tooling
    git_binary: str = Field(default="git")
    log_level: str = Field(default="INFO")

    @field_validator("languages")
    @classmethod
    def _check_languages(cls, value: str) -> str:
        if not [lang for lang in value.split(",") if lang.strip()]:
            raise ValueError("DOCS_LANGUAGES must name at least one language")
        return value

    @property
    def langs(self) -> List[str]:
        """Configured languages in order; the first one is the default."""
        return [lang.strip() for lang in self.languages.split(",") if lang.strip()]

    def get_docs_config(self) -> dict:
        """Get documentation source configuration as dictionary."""
        return {
            'source_type': self.source_type,
            'target': self.target,
            'langs': self.langs,
            'cache_dir': self.cache_dir,
            'index_file': self.index_file,
            'cache_rendered_content': self.cache_rendered_content,
            'git_binary': self.git_binary,
        }


# Global settings instance
settings = Settings()
