"""Prompt-to-payload adapter for structured LLM invocation.

Architectural role:
    Provides the canonical text-generation entrypoint used by `core.engine`. This
    module bridges prompt construction (`robot_architect.prompting`) to transport
    (`robot_architect.llm.client`).

Model call flow:
    prompt + system instruction + schema -> payload construction ->
    `client.send_request(...)`.

Determinism:
    Payload construction is deterministic for fixed inputs and configuration.
    Generated output remains non-deterministic because inference runs remotely.
"""

from robot_architect.llm.provider_config import MODEL_NAME
from robot_architect.llm.client import send_request


def build_payload(prompt: str, system_instruction: str, response_schema: dict) -> dict:
    """Build a Gemini `generateContent` body requesting JSON output.

    Args:
        prompt: Raw user prompt, sent unmodified as the single user turn.
        system_instruction: Instruction text from `prompt_builder`.
        response_schema: Requested output schema; forwarded without interpretation.

    Returns:
        Request body dict.
    """
    return {
        "contents": [
            {"role": "user", "parts": [{"text": prompt}]},
        ],
        "systemInstruction": {
            "parts": [{"text": system_instruction}],
        },
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": response_schema,
        },
    }


def generate_structured(prompt: str, system_instruction: str, response_schema: dict, api_key: str):
    """Invoke the configured model once with a requested output schema.

    Args:
        prompt: User prompt text.
        system_instruction: System instruction text.
        response_schema: Requested structured-output schema.
        api_key: Resolved credential.

    Returns:
        Reply text or `None` when the service returned none.

    Failure scenarios:
        Transport errors propagate from `client.send_request`. The service is
        expected, but not guaranteed, to honor the schema; callers must still
        extract and parse the text defensively.
    """
    payload = build_payload(prompt, system_instruction, response_schema)
    return send_request(payload, api_key, MODEL_NAME)
