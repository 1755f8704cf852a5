"""Docs capability interface."""

from typing import Protocol

from .schemas import DocsSearchResult


class DocsOperations(Protocol):
    """Documentation search. Not project-scoped."""

    async def search_docs(self, query: str) -> list[DocsSearchResult]: ...
