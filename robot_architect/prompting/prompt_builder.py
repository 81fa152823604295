"""System instruction assembly for the robot design assistant.

This module is intentionally narrow: it only builds the instruction string from
already-reduced context snapshots. Snapshot construction happens in
`robot_architect.context`, and model invocation happens in `robot_architect.llm`.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed ordering of instruction components.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - Safety is instruction-led, not parser-enforced.
    - Context snapshots are interpolated as compact JSON without escaping.
"""

import json


# =========================================================
# SYSTEM IDENTITY
# =========================================================

SYSTEM_IDENTITY = "You are an expert Robotics Engineer and URDF Architect.\n\n"


# =========================================================
# CAPABILITIES
# =========================================================
# One entry per supported action type, in the order the model should consider them.

CAPABILITIES = (
    "Your capabilities:\n"
    "1. **Generate**: Create new robot structures from scratch.\n"
    "2. **Modify**: specific parts of the existing robot (e.g., \"Add a lidar to the base\", "
    "\"Make the legs longer\", \"Change joint 1 to use a Unitree motor\").\n"
    "3. **Advice**: Analyze the robot and suggest improvements or hardware selection "
    "(e.g., \"Is this motor strong enough?\", \"Calculate estimated torque\").\n\n"
)


# =========================================================
# OUTPUT RULES
# =========================================================

INSTRUCTIONS = (
    "**Instructions:**\n"
    "- If the user asks for a *new* robot, generate a complete new structure.\n"
    "- If the user asks to *modify*, return the FULL robot structure with the requested "
    "changes applied. Preserve existing IDs where possible.\n"
    "- If the user asks for *advice* or *hardware selection*, provide a text explanation. "
    "You can still return a modified robot if you want to apply the suggested hardware "
    "automatically (e.g. updating motorType and limits).\n"
    "- Use \"cylinder\" or \"box\" primitives for links.\n"
    "- Ensure parent/child relationships form a valid tree.\n"
    "- For hardware changes, use the exact 'motorType' names from the library.\n"
)


def to_compact_json(value) -> str:
    """Serialize context data without whitespace, keeping non-ASCII names readable."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def build_system_prompt(context_robot: dict, context_library: list) -> str:
    """Build the system instruction for one adapter request.

    Args:
        context_robot: Robot Context Snapshot from `build_robot_context`.
        context_library: Motor Catalog Snapshot from `build_motor_context`.

    Returns:
        Fully assembled instruction string.

    Prompt component order:
        1) `SYSTEM_IDENTITY`
        2) `CAPABILITIES`
        3) Context data block (robot, motor library)
        4) `INSTRUCTIONS`
    """
    context_block = (
        "**Context Data:**\n"
        f"- Current Robot Structure: {to_compact_json(context_robot)}\n"
        f"- Available Motor Library: {to_compact_json(context_library)}\n\n"
    )

    return SYSTEM_IDENTITY + CAPABILITIES + context_block + INSTRUCTIONS
