"""Prompt-to-robot request orchestration.

Architectural role:
    Provides the single adapter used by API/CLI layers to turn one free-text
    prompt plus the current robot and motor catalog into an explanation, an
    action label, and optionally a mapped robot.

Control-flow model:
    1. Exact-match trigger table lookup (no network on hit).
    2. Credential check (missing key -> advice result, no network).
    3. Context snapshots and system instruction assembly.
    4. One structured-output generation request, run in a worker thread.
    5. JSON extraction from the reply text and robot record mapping.

Error handling strategy:
    Configuration absence degrades to a normal advice result. Every failure
    after that point (transport, HTTP status, missing text, malformed JSON,
    mapping errors) is logged and collapsed into a `None` return, which callers
    treat as "no actionable result". No retries, no partial results.

Concurrency:
    Each call builds its own snapshots and request; the only shared state is the
    read-only trigger table and configuration, so concurrent calls are independent.
"""

import asyncio
import logging
from collections.abc import Mapping

from robot_architect.context.context_builder import build_motor_context, build_robot_context
from robot_architect.core.response_types import advice, make_result
from robot_architect.core.triggers import match_trigger
from robot_architect.llm.provider_config import MISSING_KEY_MESSAGE, get_api_key
from robot_architect.llm.service import generate_structured
from robot_architect.parsing.json_extractor import parse_model_reply
from robot_architect.parsing.robot_mapper import map_robot_data
from robot_architect.prompting.prompt_builder import build_system_prompt
from robot_architect.prompting.response_schema import RESPONSE_SCHEMA


logger = logging.getLogger(__name__)


def interpret_reply(text):
    """Convert raw reply text into an adapter result.

    Args:
        text: Reply text from the generation service, possibly `None`.

    Returns:
        Result dict, or `None` when the reply carries no text.

    Raises:
        ValueError: When no JSON object can be extracted or decoded, or the
            decoded JSON is not an object.
    """
    if not text:
        return None

    parsed = parse_model_reply(text)
    if not isinstance(parsed, Mapping):
        raise ValueError(f"Model reply decoded to {type(parsed).__name__}, expected an object")

    robot_data = map_robot_data(parsed.get("robotData"))

    return make_result(parsed.get("explanation"), parsed.get("actionType"), robot_data)


async def generate_robot_from_prompt(prompt: str, current_robot, motor_library):
    """Run one prompt through the robot design assistant.

    Args:
        prompt: User text; trimmed only for trigger matching, sent unmodified.
        current_robot: Application robot state (read-only).
        motor_library: Mapping of brand name to motor spec lists (read-only).

    Returns:
        `{"explanation", "actionType", "robotData"?}` or `None` when the request
        produced no actionable result.

    Side effects:
        At most one HTTP request to the generation service.
    """
    trigger_response = match_trigger(prompt)
    if trigger_response is not None:
        return advice(trigger_response)

    api_key = get_api_key()
    if not api_key:
        logger.error("API key missing; skipping generation request")
        return advice(MISSING_KEY_MESSAGE)

    try:
        context_robot = build_robot_context(current_robot)
        context_library = build_motor_context(motor_library)
        system_prompt = build_system_prompt(context_robot, context_library)

        text = await asyncio.to_thread(
            generate_structured,
            prompt,
            system_prompt,
            RESPONSE_SCHEMA,
            api_key,
        )

        return interpret_reply(text)
    except Exception:
        logger.exception("Robot generation failed")
        return None
