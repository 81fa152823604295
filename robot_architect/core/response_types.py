"""Result contracts for `robot_architect.core.engine`.

Architectural role:
    Defines the action labels and the result record shape returned to API/CLI
    callers. Results stay plain dicts so they serialize directly to JSON for the
    frontend.

Result shape:
    `{"explanation": str, "actionType": str, "robotData"?: dict}`. `robotData`
    is omitted entirely (not set to `None`) when the reply carried no robot.
"""

ACTION_MODIFICATION = "modification"
ACTION_GENERATION = "generation"
ACTION_ADVICE = "advice"

ACTION_TYPES = (ACTION_MODIFICATION, ACTION_GENERATION, ACTION_ADVICE)


def make_result(explanation, action_type, robot_data=None):
    """Build an adapter result record.

    Args:
        explanation: Text shown to the user.
        action_type: One of `ACTION_TYPES` (not enforced for model replies).
        robot_data: Mapped robot, or `None` to omit the key.

    Returns:
        Result dict.
    """
    result = {
        "explanation": explanation,
        "actionType": action_type,
    }
    if robot_data is not None:
        result["robotData"] = robot_data
    return result


def advice(explanation):
    """Build an advice-only result without robot data."""
    return make_result(explanation, ACTION_ADVICE)
