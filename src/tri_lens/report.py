"""Intelligence report parsing and grounding metadata."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from pydantic import ValidationError

from tri_lens.errors import ExtractionError, InvalidReportFormat, JsonSyntaxInvalid
from tri_lens.json_utils import extract_first_json_object
from tri_lens.models.analysis_result import AnalysisResult, GroundingSource


logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL_NAME = "web_search"
# Keys under which web search results appear when the tool return content is a dict.
GROUNDING_CONTENT_KEYS = ("sources", "grounding_chunks", "groundingChunks")


def load_report_json(text: str) -> dict[str, Any]:
    extracted = extract_first_json_object(text)
    try:
        value = json.loads(extracted)
    except json.JSONDecodeError as exc:
        raise JsonSyntaxInvalid(f"Extracted object is not valid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise JsonSyntaxInvalid("Extracted JSON is not an object.")
    return value


def parse_report(text: str) -> AnalysisResult:
    """
    Turn raw model output into an AnalysisResult.
    Extraction, JSON syntax and schema failures all surface as InvalidReportFormat;
    the raw text is logged so operators can see what the model actually sent.
    """
    try:
        return AnalysisResult.model_validate(load_report_json(text))
    except (ExtractionError, ValidationError) as exc:
        logger.error("Report extraction failed (%s: %s). Raw model output: %r", type(exc).__name__, exc, text)
        raise InvalidReportFormat() from exc


def grounding_sources_from_chunks(chunks: Iterable[Any]) -> list[GroundingSource]:
    """
    Map web search results to GroundingSources.
    Accepts flat web entries ({"uri", "title", "domain"}, as pydantic-ai's Google model
    returns them) and raw Gemini chunks wrapping the entry under "web".
    """
    sources: list[GroundingSource] = []
    for chunk in chunks:
        if not isinstance(chunk, dict):
            continue
        web = chunk.get("web", chunk)
        if not isinstance(web, dict) or not web.get("uri"):
            continue
        sources.append(GroundingSource(title=web.get("title") or "External Intelligence Source", uri=web["uri"]))
    return sources


def collect_grounding_chunks(messages: Iterable[Any]) -> list[dict[str, Any]]:
    """Gather grounding chunks from web search tool returns in a run's message history."""
    chunks: list[dict[str, Any]] = []
    for message in messages:
        for part in getattr(message, "parts", []):
            if getattr(part, "part_kind", None) != "builtin-tool-return":
                continue
            if getattr(part, "tool_name", None) != WEB_SEARCH_TOOL_NAME:
                continue
            content = part.content
            if isinstance(content, dict):
                content = next(
                    (content[key] for key in GROUNDING_CONTENT_KEYS if isinstance(content.get(key), list)),
                    [],
                )
            if isinstance(content, list):
                chunks.extend(item for item in content if isinstance(item, dict))
    return chunks
