"""Wire robot payload -> internal link/joint records.

Architectural role:
    Converts the flat `robotData` shape returned by the model (number arrays for
    vectors, nullable hardware/limit fields) into the record shape consumed by
    the application's robot model.

Defaulting policy:
    Every optional numeric field uses presence semantics: a value is replaced
    only when it is missing or `None`. Explicit zeros (a joint at the origin, a
    lower limit of 0) are kept. String fields (`color`, `motorType`, `name`)
    fall back to their defaults when missing or empty.

Non-responsibilities:
    `parentLinkId`, `childLinkId` and `rootLinkId` are not checked against the
    returned link ids; tree validation belongs to the consuming robot model.

Determinism:
    Pure. Every call builds fresh dicts, so mapping the same payload twice gives
    equal but independent records.
"""

import logging
from collections.abc import Mapping


logger = logging.getLogger(__name__)

DEFAULT_DIMENSION = 0.1
DEFAULT_MASS = 1.0
DEFAULT_VISUAL_COLOR = "#3b82f6"
COLLISION_COLOR = "#ef4444"

DEFAULT_LOWER_LIMIT = -1.57
DEFAULT_UPPER_LIMIT = 1.57
DEFAULT_EFFORT_LIMIT = 100
DEFAULT_VELOCITY_LIMIT = 10

DEFAULT_MOTOR_TYPE = "None"
DEFAULT_ROBOT_NAME = "modified_robot"


def value_or(value, default):
    """Return `value` unless it is `None`."""
    return default if value is None else value


def component(values, index, default):
    """Return `values[index]` when present and not `None`, else `default`."""
    if not isinstance(values, (list, tuple)) or index >= len(values):
        return default
    return value_or(values[index], default)


def identity_origin() -> dict:
    return {
        "xyz": {"x": 0, "y": 0, "z": 0},
        "rpy": {"r": 0, "p": 0, "y": 0},
    }


def default_inertia() -> dict:
    return {"ixx": 0.1, "ixy": 0, "ixz": 0, "iyy": 0.1, "iyz": 0, "izz": 0.1}


def _record_id(descriptor):
    record_id = descriptor.get("id")
    if record_id is None or record_id == "":
        return None
    return str(record_id)


def map_link(descriptor: Mapping) -> dict:
    """Map one wire link descriptor to an Internal Link Record."""
    visual_type = descriptor.get("visualType")
    raw_dimensions = descriptor.get("dimensions")

    def dimensions():
        return {
            "x": component(raw_dimensions, 0, DEFAULT_DIMENSION),
            "y": component(raw_dimensions, 1, DEFAULT_DIMENSION),
            "z": component(raw_dimensions, 2, DEFAULT_DIMENSION),
        }

    return {
        "id": _record_id(descriptor),
        "name": descriptor.get("name"),
        "inertial": {
            "mass": value_or(descriptor.get("mass"), DEFAULT_MASS),
            "inertia": default_inertia(),
        },
        "visual": {
            "type": visual_type,
            "dimensions": dimensions(),
            "color": descriptor.get("color") or DEFAULT_VISUAL_COLOR,
            "origin": identity_origin(),
        },
        "collision": {
            "type": visual_type,
            "dimensions": dimensions(),
            "color": COLLISION_COLOR,
            "origin": identity_origin(),
        },
    }


def map_joint(descriptor: Mapping) -> dict:
    """Map one wire joint descriptor to an Internal Joint Record."""
    xyz = descriptor.get("originXYZ")
    rpy = descriptor.get("originRPY")
    axis = descriptor.get("axis")

    return {
        "id": _record_id(descriptor),
        "name": descriptor.get("name"),
        "type": descriptor.get("type"),
        "parentLinkId": descriptor.get("parentLinkId"),
        "childLinkId": descriptor.get("childLinkId"),
        "origin": {
            "xyz": {
                "x": component(xyz, 0, 0),
                "y": component(xyz, 1, 0),
                "z": component(xyz, 2, 0),
            },
            "rpy": {
                "r": component(rpy, 0, 0),
                "p": component(rpy, 1, 0),
                "y": component(rpy, 2, 0),
            },
        },
        "axis": {
            "x": component(axis, 0, 0),
            "y": component(axis, 1, 0),
            "z": component(axis, 2, 1),
        },
        "limit": {
            "lower": value_or(descriptor.get("lowerLimit"), DEFAULT_LOWER_LIMIT),
            "upper": value_or(descriptor.get("upperLimit"), DEFAULT_UPPER_LIMIT),
            "effort": value_or(descriptor.get("effortLimit"), DEFAULT_EFFORT_LIMIT),
            "velocity": value_or(descriptor.get("velocityLimit"), DEFAULT_VELOCITY_LIMIT),
        },
        "dynamics": {"damping": 0, "friction": 0},
        "hardware": {
            "armature": 0,
            "motorType": descriptor.get("motorType") or DEFAULT_MOTOR_TYPE,
            "motorId": "",
            "motorDirection": 1,
        },
    }


def _map_collection(items, mapper, kind):
    """Map a list of descriptors into an id-keyed dict, skipping unusable entries."""
    records = {}
    if not isinstance(items, list):
        return records

    for index, descriptor in enumerate(items):
        if not isinstance(descriptor, Mapping):
            logger.warning("Skipping %s descriptor #%d: not an object", kind, index)
            continue
        record = mapper(descriptor)
        if record["id"] is None:
            logger.warning("Skipping %s descriptor #%d: missing id", kind, index)
            continue
        records[record["id"]] = record

    return records


def map_robot_data(data):
    """Map the reply's `robotData` payload into the application's robot shape.

    Args:
        data: Decoded `robotData` value, possibly `None`.

    Returns:
        `{name, links, joints, rootLinkId}` with id-keyed link/joint records, or
        `None` when `data` is absent or not an object. An empty object still
        yields a (empty) robot.

    Edge cases:
        - Later descriptors with a duplicate id replace earlier ones.
        - Descriptors that are not objects or carry no id are skipped.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        logger.warning("Ignoring robotData of type %s", type(data).__name__)
        return None

    return {
        "name": data.get("name") or DEFAULT_ROBOT_NAME,
        "links": _map_collection(data.get("links"), map_link, "link"),
        "joints": _map_collection(data.get("joints"), map_joint, "joint"),
        "rootLinkId": data.get("rootLinkId"),
    }
