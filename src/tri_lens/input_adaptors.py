"""Input adaptors for narratives."""

from __future__ import annotations

from pathlib import Path

from tri_lens.io_utils import load_input
from tri_lens.models.narrative_input import NarrativeInput


class InputAdaptor:
    def load(self) -> NarrativeInput:
        raise NotImplementedError("InputAdaptor.load must be implemented by subclasses.")


class FileInput(InputAdaptor):
    def __init__(self, path: Path) -> None:
        self._narrative = load_input(path)

    def load(self) -> NarrativeInput:
        return self._narrative


class TextInput(InputAdaptor):
    def __init__(self, text: str) -> None:
        self._text = text

    def load(self) -> NarrativeInput:
        return NarrativeInput(source_path="inline_input.txt", kind="text", text=self._text, data=None)
