"""Best-effort JSON extraction from LLM output."""

from __future__ import annotations

import json
import re

_FENCE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?```", re.DOTALL)


def parse_json_response(text: str):
    """Parse *text* as JSON.

    Handles plain JSON, JSON wrapped in markdown ```json ... ``` fences, and
    JSON surrounded by prose (first ``{``/``[`` to the matching last
    ``}``/``]``).  Raises :class:`json.JSONDecodeError` when nothing parses.
    """
    text = text.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _FENCE.search(text)
    if match:
        try:
            return json.loads(match.group(1).strip())
        except json.JSONDecodeError:
            pass

    for opener, closer in (("{", "}"), ("[", "]")):
        start = text.find(opener)
        end = text.rfind(closer)
        if start != -1 and end > start:
            try:
                return json.loads(text[start : end + 1])
            except json.JSONDecodeError:
                continue

    raise json.JSONDecodeError("No JSON value found in response", text, 0)
