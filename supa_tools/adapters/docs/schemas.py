"""Docs adapter Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class DocsSearchResult(BaseModel):
    """Documentation search hit."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    content: str
    section: str | None = None


class SearchDocsInput(BaseModel):
    """Input schema for search_docs."""

    query: str = Field(..., description="Search query for documentation")
