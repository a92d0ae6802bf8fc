"""
Idea Capture Pipeline - Core execution logic.

This module orchestrates the complete pipeline:

    Search → Summarize → Persist → Report

Steps:
1. Search the web for pages related to the idea (Tavily)
2. Ask Gemini for a short summary and tags
3. Save the summary, tags and related pages as one document
4. Return the new document id with the summary and tags

Design principles:
- Strictly sequential: each step waits for the previous one
- All-or-nothing: a failure in any step aborts the run before anything is saved
- The only recovered failure is an unparseable model reply (fallback summary)
- Dry-run support: save to memory instead of MongoDB (`--dry-run`)
"""

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.config import Settings
from src.models.idea_record import IdeaRecord, RelatedItem
from src.services.search import TavilySearchClient
from src.services.summarizer import GeminiSummarizer
from src.storage.base import IdeaStore
from src.storage.mongo import MemoryIdeaStore, MongoIdeaStore


# =============================================================================
# Pipeline Result Data Structures
# =============================================================================

@dataclass
class PipelineResult:
    """Complete result of a successful pipeline execution."""
    idea: str
    started_at: datetime
    finished_at: Optional[datetime] = None

    id: Optional[str] = None
    summary: Optional[str] = None
    tags: Optional[List[str]] = None
    related: List[RelatedItem] = field(default_factory=list)

    # True when the model reply was unusable and the idea text was saved as summary
    fallback_used: bool = False
    dry_run: bool = False

    @property
    def duration_seconds(self) -> float:
        """Total pipeline duration in seconds."""
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_report(self) -> Dict[str, Any]:
        """The {id, summary, tags} report printed on success."""
        return {"id": self.id, "summary": self.summary, "tags": self.tags}


# =============================================================================
# Pipeline Class
# =============================================================================

class IdeaPipeline:
    """
    Pipeline that enriches, summarizes and saves a single idea.

    Usage:
        pipeline = IdeaPipeline(Settings.from_env())
        result = pipeline.run("New mobile app for dog walkers")
        print(result.to_report())

    Collaborators default to the live clients built from settings and can be
    replaced for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        search_client: Optional[TavilySearchClient] = None,
        summarizer: Optional[GeminiSummarizer] = None,
        store: Optional[IdeaStore] = None,
        dry_run: bool = False,
        verbose: bool = False,
    ):
        self.settings = settings or Settings.from_env()
        self.dry_run = dry_run
        self.verbose = verbose
        self.search_client = search_client or TavilySearchClient(self.settings, verbose=verbose)
        self.summarizer = summarizer or GeminiSummarizer(self.settings, verbose=verbose)
        self.store = store or self._get_storage()

    def _get_storage(self) -> IdeaStore:
        """Get the configured storage backend."""
        if self.dry_run:
            return MemoryIdeaStore()
        return MongoIdeaStore(self.settings, verbose=self.verbose)

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)

    def run(self, idea: str) -> PipelineResult:
        """
        Execute the full pipeline for one idea.

        Errors from search, the model call, or storage propagate to the
        caller; nothing is saved unless every earlier step succeeded.

        Args:
            idea: Non-empty free-text idea.

        Returns:
            PipelineResult with the saved document id, summary and tags.
        """
        result = PipelineResult(idea=idea, started_at=datetime.now(), dry_run=self.dry_run)

        # Step 1: Search
        self._log(f"Searching for pages related to: {idea}")
        related = self.search_client.search(idea)
        result.related = related

        # Step 2: Summarize
        summary_result = self.summarizer.summarize(idea, related)
        result.summary = summary_result.summary
        result.tags = summary_result.tags
        result.fallback_used = summary_result.fallback

        # Step 3: Persist
        record = IdeaRecord(
            summary=summary_result.summary,
            tags=summary_result.tags,
            related=related,
        )
        self._log(f"Saving idea to {self.store.name}...")
        result.id = self.store.save(record)

        result.finished_at = datetime.now()
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def run_pipeline(
    idea: str,
    dry_run: bool = False,
    verbose: bool = False,
    settings: Optional[Settings] = None,
) -> PipelineResult:
    """
    Run the pipeline for one idea.

    Convenience function for programmatic use.

    Args:
        idea: Free-text idea.
        dry_run: If True, save to memory instead of MongoDB.
        verbose: If True, print progress to stderr.
        settings: Configuration (default: loaded from environment).

    Returns:
        PipelineResult with execution details.
    """
    pipeline = IdeaPipeline(settings, dry_run=dry_run, verbose=verbose)
    return pipeline.run(idea)
