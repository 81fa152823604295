"""HTTP transport client for Gemini `generateContent` requests.

Architectural role:
    Executes one HTTP request against the Gemini REST endpoint and materializes the
    reply text from the candidate parts.

Model invocation flow:
    `service.generate_structured` -> `send_request(payload, api_key, model)` ->
    `requests.post` -> concatenated candidate text.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with the
    configured `REQUEST_TIMEOUT`.

Failure handling model:
    Transport and HTTP status errors are raised (`requests.exceptions.RequestException`)
    so the engine can collapse every failure into its `None` sentinel. Only the
    "no text in the reply" case is reported as a return value (`None`).
"""

import logging

import requests

from robot_architect.llm.provider_config import (
    GEMINI_URL_TEMPLATE,
    MODEL_NAME,
    REQUEST_TIMEOUT,
)


logger = logging.getLogger(__name__)


def extract_text(data):
    """Join the text parts of the first candidate in a Gemini reply.

    Args:
        data: Decoded JSON body returned by `generateContent`.

    Returns:
        Reply text, or `None` when the reply carries no candidate text (for
        example a safety block or an empty candidate list).
    """
    if not isinstance(data, dict):
        return None

    candidates = data.get("candidates") or []
    if not candidates:
        return None

    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []

    texts = [
        part["text"]
        for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    if not texts:
        return None

    return "".join(texts)


def send_request(payload: dict, api_key: str, model: str = MODEL_NAME):
    """Send one `generateContent` request and return the reply text.

    Args:
        payload: Gemini request body (`contents`, `systemInstruction`,
            `generationConfig`) built by `service.generate_structured`.
        api_key: Credential sent as the `x-goog-api-key` header.
        model: Model identifier interpolated into the endpoint URL.

    Returns:
        Reply text or `None` when the service returned no text.

    Raises:
        requests.exceptions.RequestException: On connection failures, timeouts,
            and non-2xx status codes.
        ValueError: When the response body is not valid JSON.
    """
    url = GEMINI_URL_TEMPLATE.format(model=model)

    headers = {
        "x-goog-api-key": api_key,
        "Content-Type": "application/json",
    }

    response = requests.post(
        url,
        headers=headers,
        json=payload,
        timeout=REQUEST_TIMEOUT,
    )

    response.raise_for_status()
    data = response.json()

    text = extract_text(data)
    if text is None:
        logger.warning("Gemini reply contained no candidate text (model=%s)", model)
    return text
