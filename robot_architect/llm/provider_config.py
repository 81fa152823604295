"""Provider/runtime configuration for the LLM layer.

Architectural role:
    Centralizes model selection, endpoint construction, transport timeout, and
    credential lookup for `robot_architect.llm.service` and `robot_architect.llm.client`.

Model call flow integration:
    - `service.generate_structured` consumes `MODEL_NAME`.
    - `client.send_request` consumes `GEMINI_URL_TEMPLATE` and `REQUEST_TIMEOUT`.
    - `core.engine` calls `get_api_key` once per request before any network work.

Determinism:
    Module constants are resolved at import time. The credential is resolved at
    call time so a key exported after startup is still picked up.

Failure behavior:
    Missing key material is represented as `None`; the engine turns it into a
    normal advice response (`MISSING_KEY_MESSAGE`) instead of raising.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Primary model routing controls.
MODEL_NAME = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

# Transport timeout in seconds handed to `requests`; the adapter adds none of its own.
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "120"))

# Environment variables checked in order before falling back to the key file.
KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")
KEY_FILE = os.getenv("GEMINI_KEY_FILE", "config/gemini.key")

MISSING_KEY_MESSAGE = "API Key is missing. Please configure the environment."

# Sensitive request/response debug output is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


def load_key(path):
    """Load an API key from a key file.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Stripped key string, or `None` when the path is unset, the file is
        missing, or the file is empty.
    """
    if not path:
        return None
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        key = f.read().strip()
    return key or None


def get_api_key():
    """Resolve the Gemini credential for the current process.

    Resolution order:
        1. `API_KEY` environment variable.
        2. `GEMINI_API_KEY` environment variable.
        3. Raw contents of `KEY_FILE`.

    Returns:
        Key string or `None` when no credential is configured.
    """
    for name in KEY_ENV_VARS:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return load_key(KEY_FILE)
