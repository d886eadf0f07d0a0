"""
Tools module for the shareholder letter agent.

Provides the semantic search tool the agent calls through function calling.
"""

from .rag_tool import LetterSearchTool, create_search_tool

__all__ = [
    "LetterSearchTool",
    "create_search_tool",
]
