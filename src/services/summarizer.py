"""
AI Summarization Service using Gemini.

Turns a raw idea plus its related web results into a short summary and a
handful of tags. The model is asked for bare JSON but often wraps it in a
markdown code fence, so the reply is cleaned before parsing. A reply that
still is not JSON never stops the run: the idea text itself becomes the
summary and the tags fall back to ["unclassified"].
"""

import json
import re
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from google import genai

from src.config import Settings
from src.models.idea_record import RelatedItem


FALLBACK_TAGS = ["unclassified"]

# Opening fence with an optional language tag, e.g. ```json
_FENCE_OPEN_RE = re.compile(r"```(json|javascript)?\n")
_FENCE = "```"


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


@dataclass
class SummaryResult:
    """
    Outcome of a summarization request.

    fallback is True when the model reply could not be parsed and the
    summary/tags were substituted. raw_text keeps the cleaned reply.
    """
    summary: Optional[str]
    tags: Optional[List[str]] = field(default_factory=list)
    fallback: bool = False
    raw_text: str = ""


def format_related(related: Sequence[RelatedItem]) -> str:
    """Render related items as a numbered, blank-line separated listing."""
    return "\n\n".join(
        f"{i}. {item.title}\n{item.url}\n{item.summary}"
        for i, item in enumerate(related, start=1)
    )


def build_prompt(idea: str, related: Sequence[RelatedItem]) -> str:
    """Build the single instruction prompt sent to the model."""
    return f"""
You extract a short summary and 3-5 simple tags.
Return ONLY JSON like: {{"summary":"...", "tags":["tag1","tag2"]}}
Do not use markdown formatting in your response.

Idea:
{idea}

Related info:
{format_related(related)}
""".strip()


def clean_model_output(text: str) -> str:
    """
    Strip markdown code fences from a model reply.

    Safe to apply repeatedly; text without fences is only trimmed.
    """
    text = text.strip()
    if _FENCE in text:
        text = _FENCE_OPEN_RE.sub("", text)
        text = text.replace(_FENCE, "")
    return text.strip()


def parse_summary_response(text: str, idea: str) -> SummaryResult:
    """
    Parse a model reply into a SummaryResult.

    The parsed object is not validated: a JSON object missing "summary" or
    "tags" comes back with those fields set to None.

    Args:
        text: Raw model reply.
        idea: Original idea text, used as the fallback summary.

    Returns:
        Parsed SummaryResult, or the fallback result if the reply is not JSON.
    """
    cleaned = clean_model_output(text)

    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError:
        print(f"Failed to parse JSON response: {cleaned}", file=sys.stderr)
        return SummaryResult(
            summary=idea,
            tags=list(FALLBACK_TAGS),
            fallback=True,
            raw_text=cleaned,
        )

    if not isinstance(parsed, dict):
        return SummaryResult(summary=None, tags=None, raw_text=cleaned)

    return SummaryResult(
        summary=parsed.get("summary"),
        tags=parsed.get("tags"),
        raw_text=cleaned,
    )


class GeminiSummarizer:
    """Summarizes ideas with a Gemini model through the google-genai SDK."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Any = None,
        verbose: bool = False,
    ):
        self.settings = settings or Settings.from_env()
        self.model = self.settings.gemini_model
        self.verbose = verbose
        self._client = client

    @property
    def name(self) -> str:
        return "summarize"

    def is_available(self) -> bool:
        """Check if summarization is available (API key configured or client injected)."""
        return self._client is not None or bool(self.settings.gemini_api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.settings.gemini_api_key:
                raise ValueError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.settings.gemini_api_key)
        return self._client

    def generate(self, prompt: str) -> str:
        """Send one prompt to the model and return its text reply."""
        client = self._get_client()
        response = client.models.generate_content(model=self.model, contents=prompt)
        return response.text or ""

    def summarize(self, idea: str, related: Sequence[RelatedItem]) -> SummaryResult:
        """
        Produce a summary and tags for an idea.

        Model call failures propagate; unparseable replies do not.

        Args:
            idea: The idea text.
            related: Related web results to give the model context.

        Returns:
            SummaryResult (fallback=True if the reply was not valid JSON).
        """
        prompt = build_prompt(idea, related)
        if self.verbose:
            print(f"[{self.name}] Asking {self.model} for summary and tags", file=sys.stderr)

        text = self.generate(prompt)
        return parse_summary_response(text, idea)
