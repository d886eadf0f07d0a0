"""
Shareholder Letter Search Tool for LLM Agent

Lets the agent search shareholder letters by meaning, optionally
restricted to a single letter year.
"""

from typing import Dict, Any, Optional
import logging

from ..rag.config import RAGConfig, get_rag_config
from ..rag.vector_store import VectorStore, get_vector_store

logger = logging.getLogger(__name__)

MAX_RESULTS = 10


class LetterSearchTool:
    """
    Tool for semantic search over shareholder letter passages.

    Used by LLM agent via function calling.
    """

    def __init__(
        self,
        vector_store: Optional[VectorStore] = None,
        config: Optional[RAGConfig] = None
    ):
        """
        Initialize letter search tool.

        Args:
            vector_store: Vector store instance (optional, built from config)
            config: RAG configuration (optional, loads from env if not provided)
        """
        self.config = config or get_rag_config()
        self.vector_store = vector_store or get_vector_store(self.config)

        logger.info("Letter search tool initialized")

    def get_tool_definition(self) -> Dict[str, Any]:
        """
        Get tool definition for LLM function calling.

        Returns:
            OpenAI-compatible tool definition dict
        """
        return {
            "type": "function",
            "function": {
                "name": "search_shareholder_letters",
                "description": (
                    "Search through Berkshire Hathaway shareholder letters using semantic "
                    "similarity. Use it for questions about investment philosophy, management, "
                    "acquisitions, market views and other themes discussed in the letters. "
                    "Returns the most relevant passages with their letter year."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Natural language search query"
                        },
                        "limit": {
                            "type": "integer",
                            "description": f"Number of results to return (1-{MAX_RESULTS}, default: {self.config.top_k})",
                            "minimum": 1,
                            "maximum": MAX_RESULTS,
                            "default": self.config.top_k
                        },
                        "year_filter": {
                            "type": "string",
                            "description": "Optional: only search the letter for this year (e.g., '2023')"
                        }
                    },
                    "required": ["query"]
                }
            }
        }

    def execute(
        self,
        query: str,
        limit: Optional[int] = None,
        year_filter: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Execute semantic search query.

        Args:
            query: Natural language search query
            limit: Number of results to return (clamped to 1-10)
            year_filter: Letter year to restrict the search to

        Returns:
            Dictionary with results, summary and success flag
        """
        if not query or not query.strip():
            return {
                "success": False,
                "error": "Query cannot be empty",
                "results": [],
                "summary": "No query provided."
            }

        limit = limit or self.config.top_k
        limit = max(1, min(MAX_RESULTS, limit))

        logger.info(f"Letter search query: '{query}' (limit={limit}, year={year_filter})")

        outcome = self.vector_store.search(query, limit=limit, year_filter=year_filter)

        formatted_results = []
        for result in outcome.results:
            chunk_index = result.chunk_index
            formatted_results.append({
                "content": result.content,
                "metadata": {
                    "year": result.year,
                    "document": result.filename,
                    "page": chunk_index + 1 if chunk_index is not None else None
                },
                "similarity_score": round(result.similarity_score, 3)
            })

        year_text = f" from {year_filter}" if year_filter else ""
        if outcome.ok:
            summary = (
                f"Found {len(formatted_results)} relevant passages about \"{query}\" "
                f"in Berkshire Hathaway shareholder letters{year_text}."
            )
        else:
            summary = (
                f"Error searching for \"{query}\". "
                "Please make sure documents are loaded in the database."
            )

        response = {
            "success": outcome.ok,
            "query": query,
            "results_count": len(formatted_results),
            "results": formatted_results,
            "summary": summary,
            "filters_applied": {"year": year_filter} if year_filter else None
        }
        if not outcome.ok:
            response["error"] = outcome.error
        return response


def create_search_tool(
    config: Optional[RAGConfig] = None
) -> LetterSearchTool:
    """
    Factory function to create letter search tool instance.

    Args:
        config: Optional RAG configuration

    Returns:
        LetterSearchTool instance
    """
    return LetterSearchTool(config=config)
