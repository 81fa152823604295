"""Best-effort JSON object extraction from model reply text.

Extraction strategy:
    The generation service is free text by nature and may wrap structured output
    in prose or markdown fencing despite the requested schema. Two sequential
    attempts are made:

    1. The first fenced block delimited by triple backticks, with or without a
       `json` language tag. Its inner content (trimmed) is the candidate.
    2. Otherwise the span from the first `{` to the last `}` inclusive.

    This is a heuristic, not a grammar: braces inside string literals or prose
    are not accounted for.

Failure handling:
    `extract_json_text` never raises and returns `""` when no candidate exists.
    `parse_model_reply` raises `ValueError` for a missing candidate and lets
    `json.JSONDecodeError` (a `ValueError` subclass) propagate for malformed JSON.
    The non-standard `NaN`/`Infinity` tokens are rejected as malformed.
"""

import json
import re


FENCED_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def reject_constant(token):
    """Reject `NaN`, `Infinity` and `-Infinity`, which are not JSON."""
    raise ValueError(f"Invalid JSON constant: {token}")


def extract_json_text(text: str) -> str:
    """Locate the JSON candidate substring inside reply text.

    Args:
        text: Raw reply text.

    Returns:
        Candidate substring, or `""` when neither strategy finds one.
    """
    if not text:
        return ""

    match = FENCED_BLOCK_PATTERN.search(text)
    if match:
        return match.group(1)

    first_open = text.find("{")
    last_close = text.rfind("}")
    if first_open != -1 and last_close > first_open:
        return text[first_open:last_close + 1]

    return ""


def parse_model_reply(text: str):
    """Extract and decode the JSON payload of a model reply.

    Args:
        text: Raw reply text.

    Returns:
        Decoded JSON value (normally a dict).

    Raises:
        ValueError: When no JSON candidate is found, or the candidate is not valid JSON.
    """
    candidate = extract_json_text(text)
    if not candidate:
        raise ValueError("No JSON object found in model reply")
    return json.loads(candidate, parse_constant=reject_constant)
