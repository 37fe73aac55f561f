"""Pydantic model for narrative input."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class NarrativeInput(BaseModel):
    source_path: str
    kind: str  # "json" or "text"
    text: str
    data: Optional[dict[str, Any]] = None
