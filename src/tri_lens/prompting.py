"""Prompt composition helpers."""

from __future__ import annotations

import yaml

from tri_lens.models.narrative_input import NarrativeInput


def make_user_prompt(narrative: NarrativeInput) -> str:
    """
    Creates a consistent user prompt payload. Consistency helps prefix-caching backends.
    """
    if narrative.source_path == "inline_input.txt":
        return narrative.text.rstrip() + "\n"

    lines: list[str] = [
        "# Narrative Input",
        f"source_path: {narrative.source_path}",
        f"kind: {narrative.kind}",
        "",
    ]
    if narrative.data is not None:
        # Structured case files read better to the model as YAML than as JSON.
        data_yaml = yaml.safe_dump(
            narrative.data,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=True,
        ).rstrip()
        lines.extend(["## Case File (YAML)", data_yaml])
    else:
        lines.extend(["## Narrative", narrative.text])

    return "\n".join(lines).rstrip() + "\n"
