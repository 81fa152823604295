"""Tests for robot and motor catalog context snapshots."""

import copy

from robot_architect.context.context_builder import build_motor_context, build_robot_context
from robot_architect.prompting.prompt_builder import build_system_prompt, to_compact_json


def test_robot_context_keeps_only_whitelisted_fields(robot):
    context = build_robot_context(robot)

    assert set(context) == {"name", "links", "joints", "rootId"}
    assert context["name"] == "arm"
    assert context["rootId"] == "base"

    base = context["links"][0]
    assert set(base) == {"id", "name", "visual", "inertial"}
    assert base["visual"] == robot["links"]["base"]["visual"]

    joint = context["joints"][0]
    assert set(joint) == {"id", "name", "type", "parent", "child", "origin", "axis", "limit", "hardware"}
    assert joint["parent"] == "base"
    assert joint["child"] == "upper"
    assert joint["hardware"] == {"motorType": "DM4310", "armature": 0.01}


def test_robot_context_accepts_lists():
    context = build_robot_context({"name": "r", "links": [{"id": "a", "name": "A"}], "joints": []})
    assert context["links"] == [{"id": "a", "name": "A", "visual": None, "inertial": None}]
    assert context["joints"] == []
    assert context["rootId"] is None


def test_robot_context_empty_robot():
    assert build_robot_context({}) == {"name": None, "links": [], "joints": [], "rootId": None}


def test_context_does_not_mutate_inputs(robot, motor_library):
    robot_before = copy.deepcopy(robot)
    library_before = copy.deepcopy(motor_library)

    build_robot_context(robot)
    build_motor_context(motor_library)

    assert robot == robot_before
    assert motor_library == library_before


def test_motor_context_maps_armature_to_weight(motor_library):
    context = build_motor_context(motor_library)

    assert [entry["brand"] for entry in context] == ["Damiao", "Unitree"]
    assert context[0]["motors"][0] == {"name": "DM4310", "effort": 7, "velocity": 20, "weight": 0.3}
    assert context[1]["motors"] == [{"name": "GO-M8010-6", "effort": 23.7, "velocity": 30, "weight": 0.53}]


def test_motor_context_empty_catalog():
    assert build_motor_context({}) == []
    assert build_motor_context({"Empty": []}) == [{"brand": "Empty", "motors": []}]


def test_system_prompt_embeds_compact_context(robot, motor_library):
    context_robot = build_robot_context(robot)
    context_library = build_motor_context(motor_library)

    prompt = build_system_prompt(context_robot, context_library)

    assert prompt.startswith("You are an expert Robotics Engineer and URDF Architect.")
    assert f"- Current Robot Structure: {to_compact_json(context_robot)}" in prompt
    assert f"- Available Motor Library: {to_compact_json(context_library)}" in prompt
    assert "mesh" not in prompt
    assert "Preserve existing IDs where possible." in prompt


def test_compact_json_keeps_unicode():
    assert to_compact_json({"name": "机器人", "n": [1, 2]}) == '{"name":"机器人","n":[1,2]}'
