"""Pull the JSON object out of an LLM response."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator

from hiresight.errors import ResponseParseFailure

_FENCE_RE = re.compile(r"```[\w-]*\s*\n?(.*?)\n?\s*```", re.DOTALL)


def extract_json(text: str | None) -> dict:
    """Return the JSON object in ``text``.

    Accepts the raw object, the object inside a ```json fence, or the
    outermost ``{...}`` span of surrounding prose. Truncated output is not
    repaired; a partial object is a parse failure.
    """
    if not text or not text.strip():
        raise ResponseParseFailure("Provider returned an empty response")

    parsed = None
    for candidate in _candidates(text.strip()):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        break
    else:
        raise ResponseParseFailure(f"Could not extract JSON from text: {text.strip()[:200]}...")

    if not isinstance(parsed, dict):
        raise ResponseParseFailure(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def _candidates(text: str) -> Iterator[str]:
    yield text
    fenced = _FENCE_RE.search(text)
    if fenced:
        yield fenced.group(1).strip()
        yield from _object_span(fenced.group(1))
    elif text.startswith("```"):
        # opening fence without a closing one
        yield text.split("\n", 1)[-1].strip()
    yield from _object_span(text)


def _object_span(text: str) -> Iterator[str]:
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        yield text[start : end + 1]
