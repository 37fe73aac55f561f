"""Loaded profile markdown plus parsed metadata."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import frontmatter

from tri_lens.models.profile_spec import ProfileSpec


logger = logging.getLogger(__name__)

SECTION_HEADER_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*$", re.MULTILINE)


@dataclass
class LoadedProfile:
    spec: ProfileSpec
    system_prompt: str
    instructions: str

    def __init__(self, profile: Path | str) -> None:
        post, source_label = load_profile_frontmatter(profile)
        spec = ProfileSpec.model_validate(post.metadata)
        sections = parse_profile_sections(post.content)
        if sections.first_section_start is None:
            # No recognized headers: the whole body is the system prompt.
            if not post.content.strip():
                raise ValueError(f"Profile {source_label} has an empty body.")
            self.spec = spec
            self.system_prompt = post.content.strip()
            self.instructions = ""
            return
        preamble = post.content[: sections.first_section_start]
        if preamble.strip():
            logger.warning("Ignored text before system prompt or instructions in %s", source_label)
        self.spec = spec
        self.system_prompt = sections.system_prompt
        self.instructions = sections.instructions

    @classmethod
    def from_parts(
        cls,
        *,
        spec: ProfileSpec,
        system_prompt: str,
        instructions: str = "",
    ) -> "LoadedProfile":
        obj = cls.__new__(cls)
        obj.spec = spec
        obj.system_prompt = system_prompt
        obj.instructions = instructions
        return obj


@dataclass(frozen=True)
class ParsedProfileSections:
    system_prompt: str
    instructions: str
    first_section_start: int | None


def load_profile_frontmatter(profile: Path | str) -> tuple[frontmatter.Post, str]:
    if isinstance(profile, Path):
        return frontmatter.load(str(profile)), str(profile)
    if "\n" not in profile and Path(profile).exists():
        return frontmatter.load(profile), profile
    return frontmatter.loads(profile), "<inline>"


def normalize_header_text(header_text: str) -> str:
    normalized = header_text.strip().lower().replace("_", " ")
    return re.sub(r"\s+", " ", normalized)


def classify_section_header(header_text: str) -> str | None:
    normalized = normalize_header_text(header_text)
    if normalized == "system prompt":
        return "system_prompt"
    if normalized == "instructions":
        return "instructions"
    return None


def parse_profile_sections(markdown_body: str) -> ParsedProfileSections:
    recognized: list[tuple[str, int, int]] = []
    for match in SECTION_HEADER_RE.finditer(markdown_body):
        kind = classify_section_header(match.group(2))
        if kind is not None:
            recognized.append((kind, match.start(), match.end()))

    contents: dict[str, str] = {}
    for index, (kind, _start, end) in enumerate(recognized):
        next_index = index + 1
        section_end = recognized[next_index][1] if next_index < len(recognized) else len(markdown_body)
        # First occurrence wins.
        contents.setdefault(kind, markdown_body[end:section_end].strip())

    return ParsedProfileSections(
        system_prompt=contents.get("system_prompt", ""),
        instructions=contents.get("instructions", ""),
        first_section_start=recognized[0][1] if recognized else None,
    )
