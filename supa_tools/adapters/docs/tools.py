"""Docs tools."""

from supa_tools.base import Tool, ToolAnnotations, injectable_tool, tool_map

from .operations import DocsOperations
from .schemas import DocsSearchResult, SearchDocsInput

SEARCH_DOCS_DESCRIPTION = """Searches Supabase official documentation for relevant information.
Use this tool to find documentation about:
- Supabase features and APIs
- Best practices and guides
- Configuration options
- SDK usage examples"""


def get_docs_tools(docs: DocsOperations) -> dict[str, Tool]:
    """Build the docs tool set."""

    async def search_docs(params: SearchDocsInput) -> list[DocsSearchResult]:
        return await docs.search_docs(params.query)

    return tool_map(
        injectable_tool(
            name="search_docs",
            description=SEARCH_DOCS_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Search Docs",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=True,
            ),
            parameters=SearchDocsInput,
            execute=search_docs,
        ),
    )
