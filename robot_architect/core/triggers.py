"""Static exact-match prompt table that bypasses generation.

Matching model:
    - Keys and responses are stored base64-encoded (UTF-8 payloads).
    - A trimmed prompt matches only when it equals a decoded key exactly.
    - The first matching entry wins; there is no partial or fuzzy matching.

Failure handling:
    Malformed entries decode to `""` with a logged warning. A key that decodes
    to `""` never matches, so an empty prompt cannot hit a broken entry.

Determinism:
    Read-only process-wide table; decoding happens per lookup.
"""

import base64
import logging


logger = logging.getLogger(__name__)

TRIGGER_TABLE = {
    "6L6+5aaZ56eR5oqA": "5Y+R5p2l6LS655S1",
    "54G16Laz5pe25Luj": "56Wd5L2g5oiQ5Yqf",
    "5Zug5YWL5pav5pm66IO9": "56Wd6ICB5p2/5aW95biF77yB",
    "6auY5pOO5py655S1": "5oiR54ix5bCP5rS+77yB",
    "5Zyw55Oc5py65LmZ5Lq6": "5Y+R5p2l54Oo5Zyw55Oc",
}


def decode_text(encoded: str) -> str:
    """Decode a base64 UTF-8 string, returning `""` on malformed input."""
    try:
        return base64.b64decode(encoded, validate=True).decode("utf-8")
    except (ValueError, TypeError) as exc:
        logger.warning("Failed to decode trigger table entry %r: %s", encoded, exc)
        return ""


def match_trigger(prompt: str, table=None):
    """Return the decoded response for a prompt that exactly matches a key.

    Args:
        prompt: Raw user prompt; surrounding whitespace is ignored.
        table: Encoded key/response mapping, defaults to `TRIGGER_TABLE`.

    Returns:
        Decoded response text, or `None` when no key matches.
    """
    trimmed = (prompt or "").strip()
    if not trimmed:
        return None

    for key, value in (TRIGGER_TABLE if table is None else table).items():
        decoded_key = decode_text(key)
        if decoded_key and trimmed == decoded_key:
            return decode_text(value)

    return None
