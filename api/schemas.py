"""
Pydantic schemas for documentation query responses.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class DocResponse(BaseModel):
    """Response for a resolved document or page."""
    lang: str
    path: str
    title: str
    content: Optional[str] = None
    is_fallback: bool = False


class SearchResultResponse(BaseModel):
    """Response for a single search hit."""
    title: str
    path: str
    match: str


class SearchResponse(BaseModel):
    """Response for a search query."""
    lang: str
    query: str
    results: List[SearchResultResponse] = Field(default_factory=list)


class TocFileResponse(BaseModel):
    """File entry of a directory in the navigation listing."""
    name: str
    title: str
    path: str


class TocDirResponse(BaseModel):
    """Directory entry in the navigation listing."""
    name: str
    title: str
    plain: bool = False
    files: List[TocFileResponse] = Field(default_factory=list)


class TocResponse(BaseModel):
    """Navigation listing of one language."""
    lang: str
    dirs: List[TocDirResponse] = Field(default_factory=list)
    pages: List[TocFileResponse] = Field(default_factory=list)


class ReloadResponse(BaseModel):
    """Response for a successful reload."""
    langs: List[str]
    dir_count: int
    file_count: int
    page_count: int
