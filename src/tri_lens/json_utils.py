"""Locating the report object inside free-form model responses."""

from __future__ import annotations

from tri_lens.errors import NoJsonFound, UnbalancedBraces


def extract_first_json_object(text: str) -> str:
    """
    Return the intelligence report object embedded in a model response.

    Models answer with prose, markdown fences or citations around the report,
    and report values quote the narrative, so they may contain braces of their own.
    The scan starts at the first "{" and stops at the "}" that closes it, counting
    braces only outside string literals. The slice is brace-balanced, not
    validated: json.loads decides whether it is actually JSON.
    """
    start = text.find("{")
    if start == -1:
        raise NoJsonFound("Model response contains no '{'; there is no report object to extract.")

    depth = 0
    in_string = False
    escape = False
    for offset, ch in enumerate(text[start:], start):
        if escape:
            escape = False
        elif in_string:
            if ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : offset + 1]

    raise UnbalancedBraces(
        f"Report object opened at offset {start} is never closed ({depth} brace(s) still open); "
        "the model response looks truncated."
    )
