"""Input/output helpers."""

from __future__ import annotations

import json
from pathlib import Path

from tri_lens.models.message import Message
from tri_lens.models.narrative_input import NarrativeInput


def load_input(path: Path) -> NarrativeInput:
    if not path.exists():
        raise FileNotFoundError(path)

    if path.suffix.lower() == ".json":
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"JSON input {path} must contain an object.")
        return NarrativeInput(source_path=str(path), kind="json", text=json.dumps(raw, indent=2), data=raw)
    txt = path.read_text(encoding="utf-8")
    return NarrativeInput(source_path=str(path), kind="text", text=txt, data=None)


def load_history(path: Path) -> list[Message]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"History file {path} must contain a JSON list of messages.")
    return [Message.model_validate(item) for item in raw]


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
