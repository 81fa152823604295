"""Context snapshot assembly for the prompt adapter.

Architectural role:
    Converts the caller's live robot state and motor catalog into the reduced
    projections embedded in the system instruction. Only the whitelisted fields
    below are copied; UI-only or heavy fields on the live objects are dropped.

Snapshot shapes:
    - Robot: `{name, links: [{id, name, visual, inertial}], joints: [{id, name,
      type, parent, child, origin, axis, limit, hardware}], rootId}`.
    - Motor catalog: `[{brand, motors: [{name, effort, velocity, weight}]}]`,
      where `weight` carries the motor spec's `armature` value.

Determinism and side effects:
    Pure functions. Output order follows the iteration order of the inputs.
    Inputs are read, never mutated.
"""

from collections.abc import Mapping


def _records(collection):
    """Return the records of an id-keyed mapping or a plain list."""
    if collection is None:
        return []
    if isinstance(collection, Mapping):
        return list(collection.values())
    return list(collection)


def build_link_context(link: Mapping) -> dict:
    return {
        "id": link.get("id"),
        "name": link.get("name"),
        "visual": link.get("visual"),
        "inertial": link.get("inertial"),
    }


def build_joint_context(joint: Mapping) -> dict:
    return {
        "id": joint.get("id"),
        "name": joint.get("name"),
        "type": joint.get("type"),
        "parent": joint.get("parentLinkId"),
        "child": joint.get("childLinkId"),
        "origin": joint.get("origin"),
        "axis": joint.get("axis"),
        "limit": joint.get("limit"),
        "hardware": joint.get("hardware"),
    }


def build_robot_context(current_robot: Mapping) -> dict:
    """Build the Robot Context Snapshot.

    Args:
        current_robot: Application robot state with `name`, `links` and `joints`
            (id-keyed mappings or lists of records) and `rootLinkId`.

    Returns:
        Snapshot dict. Missing collections become empty lists.
    """
    current_robot = current_robot or {}

    return {
        "name": current_robot.get("name"),
        "links": [build_link_context(link) for link in _records(current_robot.get("links"))],
        "joints": [build_joint_context(joint) for joint in _records(current_robot.get("joints"))],
        "rootId": current_robot.get("rootLinkId"),
    }


def build_motor_context(motor_library: Mapping) -> list:
    """Build the Motor Catalog Snapshot.

    Args:
        motor_library: Mapping of brand name to a list of motor specs.

    Returns:
        List of `{brand, motors}` entries in catalog order.
    """
    return [
        {
            "brand": brand,
            "motors": [
                {
                    "name": motor.get("name"),
                    "effort": motor.get("effort"),
                    "velocity": motor.get("velocity"),
                    "weight": motor.get("armature"),
                }
                for motor in motors or []
            ],
        }
        for brand, motors in (motor_library or {}).items()
    ]
