"""Pydantic models for the intelligence report."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GroundingSource(BaseModel):
    title: str = "External Intelligence Source"
    uri: str


class AnalysisResult(BaseModel):
    # Models add their own keys to the report; keep them.
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    verdict: str = ""
    summary: str = ""
    confidence: Optional[float] = None
    # Lens findings and sources arrive as strings or objects depending on the model.
    lenses: list[str | dict[str, Any]] | dict[str, Any] = Field(default_factory=list)
    sources: list[str | dict[str, Any]] = Field(default_factory=list)
    grounding_sources: list[GroundingSource] = Field(
        default_factory=list,
        validation_alias=AliasChoices("grounding_sources", "groundingSources"),
        serialization_alias="groundingSources",
    )
