"""Docs adapter: documentation search."""

from .operations import DocsOperations
from .schemas import DocsSearchResult
from .tools import get_docs_tools

__all__ = ["DocsOperations", "DocsSearchResult", "get_docs_tools"]
