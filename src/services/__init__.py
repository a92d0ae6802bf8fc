"""
Services module.

Contains external service integrations: web search and AI summarization.
"""

from src.services.search import SearchError, TavilySearchClient
from src.services.summarizer import (
    GeminiSummarizer,
    SummaryResult,
    build_prompt,
    clean_model_output,
    format_related,
    parse_summary_response,
)

__all__ = [
    "SearchError",
    "TavilySearchClient",
    "GeminiSummarizer",
    "SummaryResult",
    "build_prompt",
    "clean_model_output",
    "format_related",
    "parse_summary_response",
]
