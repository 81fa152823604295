"""Structured-output schema requested from the generation service.

The schema uses the Gemini OpenAPI subset (`OBJECT`, `ARRAY`, `STRING`,
`NUMBER`, `nullable`, `enum`). It is forwarded verbatim in
`generationConfig.responseSchema`; nothing in this package validates replies
against it.

Wire shape notes:
    - Vectors (`dimensions`, `originXYZ`, `originRPY`, `axis`) are flat number
      arrays ordered `[x, y, z]` / `[roll, pitch, yaw]`.
    - Joint hardware and limit fields are nullable so the model can leave them
      out and let `parsing.robot_mapper` apply defaults.
"""

from robot_architect.core.response_types import ACTION_TYPES

GEOMETRY_TYPES = ["box", "cylinder", "sphere"]
JOINT_TYPES = ["revolute", "fixed", "prismatic", "continuous"]


def _number_array():
    return {"type": "ARRAY", "items": {"type": "NUMBER"}}


LINK_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "STRING"},
        "name": {"type": "STRING"},
        "visualType": {"type": "STRING", "enum": GEOMETRY_TYPES},
        "dimensions": _number_array(),
        "color": {"type": "STRING"},
        "mass": {"type": "NUMBER"},
    },
}

JOINT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "STRING"},
        "name": {"type": "STRING"},
        "type": {"type": "STRING", "enum": JOINT_TYPES},
        "parentLinkId": {"type": "STRING"},
        "childLinkId": {"type": "STRING"},
        "originXYZ": _number_array(),
        "originRPY": _number_array(),
        "axis": _number_array(),
        "motorType": {"type": "STRING", "nullable": True},
        "lowerLimit": {"type": "NUMBER", "nullable": True},
        "upperLimit": {"type": "NUMBER", "nullable": True},
        "effortLimit": {"type": "NUMBER", "nullable": True},
        "velocityLimit": {"type": "NUMBER", "nullable": True},
    },
}

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "explanation": {
            "type": "STRING",
            "description": "A brief explanation of what was done or advice given.",
        },
        "actionType": {"type": "STRING", "enum": list(ACTION_TYPES)},
        # Only populated for modification/generation replies.
        "robotData": {
            "type": "OBJECT",
            "nullable": True,
            "properties": {
                "name": {"type": "STRING"},
                "links": {"type": "ARRAY", "items": LINK_SCHEMA},
                "joints": {"type": "ARRAY", "items": JOINT_SCHEMA},
                "rootLinkId": {"type": "STRING"},
            },
        },
    },
}
