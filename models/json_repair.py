"""Best-effort recovery of JSON values from free-form model output.

Models asked for JSON frequently wrap it in prose or markdown fences, leave
keys unquoted, or use single quotes. ``extract_json`` tries a strict parse
first and only then falls back to pattern search plus light syntactic
repair. It is a heuristic, not a parser.
"""

import json
import logging
import re
from typing import Any

from debate_engine.types import ResponseShape

from .exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)
SHAPE_PATTERNS = {
    ResponseShape.OBJECT: re.compile(r"\{.*\}", re.DOTALL),
    ResponseShape.ARRAY: re.compile(r"\[.*\]", re.DOTALL),
}
SHAPE_TYPES = {
    ResponseShape.OBJECT: dict,
    ResponseShape.ARRAY: list,
}

# String literals come first so repairs never reach inside them
JSON_TOKEN = re.compile(
    r'"(?:\\.|[^"\\])*"'
    r"|'(?:\\.|[^'\\])*'"
    r"|[^\"']+"
    r"|[\"']",
    re.DOTALL,
)
TRAILING_COMMA = re.compile(r",(\s*[}\]])")
BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)(\s*:)")
UNESCAPED_DOUBLE_QUOTE = re.compile(r'(?<!\\)"')


def _requote(single_quoted: str) -> str:
    inner = single_quoted[1:-1].replace("\\'", "'")
    return '"' + UNESCAPED_DOUBLE_QUOTE.sub(r'\\"', inner) + '"'


def repair_json(json_text: str) -> str:
    """Apply light fixes for the JSON mistakes models commonly make.

    Trailing commas and bare keys are only fixed outside string literals.
    Single-quoted strings are rewritten with double quotes.
    """
    parts = []
    for token in JSON_TOKEN.findall(json_text.strip()):
        if len(token) > 1 and token[0] == token[-1] == '"':
            parts.append(token)
        elif len(token) > 1 and token[0] == token[-1] == "'":
            parts.append(_requote(token))
        else:
            token = TRAILING_COMMA.sub(r"\1", token)
            parts.append(BARE_KEY.sub(r'\1"\2"\3', token))
    repaired = "".join(parts)

    if repaired != json_text:
        logger.debug(f"Repaired JSON text for parsing: {repaired[:300]}")

    return repaired


def _loads_as(text: str, shape: ResponseShape) -> Any:
    """Parse text and require the top-level value to match shape."""
    value = json.loads(text)
    if not isinstance(value, SHAPE_TYPES[shape]):
        raise ValueError(f"Expected a JSON {shape.value}, got {type(value).__name__}")
    return value


def extract_json(text: str, shape: ResponseShape) -> Any:
    """Recover a JSON object or array of the requested shape from model output.

    Raises:
        MalformedResponseError: when no candidate parses, even after repair.
    """
    try:
        return _loads_as(text, shape)
    except ValueError:
        pass

    candidate = text
    fence_match = FENCE_PATTERN.search(text)
    if fence_match:
        candidate = fence_match.group(1)

    match = SHAPE_PATTERNS[shape].search(candidate)
    if not match and candidate is not text:
        match = SHAPE_PATTERNS[shape].search(text)
    if not match:
        raise MalformedResponseError(
            f"No JSON {shape.value} found in model response", content=text
        )

    json_text = match.group()
    try:
        return _loads_as(json_text, shape)
    except ValueError:
        pass

    try:
        return _loads_as(repair_json(json_text), shape)
    except ValueError as e:
        raise MalformedResponseError(
            f"Failed to parse JSON {shape.value} from model response: {e}", content=text
        ) from e
