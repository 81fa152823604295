"""End-to-end tests for the prompt adapter with a fake Gemini transport."""

import asyncio
import json

import pytest
import requests

from robot_architect.core.engine import generate_robot_from_prompt, interpret_reply
from robot_architect.core.triggers import TRIGGER_TABLE, decode_text
from robot_architect.llm.provider_config import MISSING_KEY_MESSAGE

from conftest import FakeResponse


FENCED_REPLY = (
    '```json\n{"explanation":"ok","actionType":"generation","robotData":{"name":"r1",'
    '"links":[{"id":"l1","name":"base","visualType":"box","dimensions":[1,2,3],"color":"#fff","mass":2}],'
    '"joints":[],"rootLinkId":"l1"}}\n```'
)


def run(prompt, robot=None, motor_library=None):
    return asyncio.run(generate_robot_from_prompt(prompt, robot or {}, motor_library or {}))


@pytest.mark.parametrize("key,value", list(TRIGGER_TABLE.items()))
def test_trigger_bypasses_network(key, value, api_key, transport):
    result = run(f"  {decode_text(key)}  ")

    assert result == {"explanation": decode_text(value), "actionType": "advice"}
    assert "robotData" not in result
    assert transport.calls == []


def test_trigger_works_without_credentials(transport):
    assert run("达妙科技")["explanation"] == "发来贺电"
    assert transport.calls == []


def test_missing_credential_returns_advice(transport):
    result = run("build me a hexapod")

    assert result == {"explanation": MISSING_KEY_MESSAGE, "actionType": "advice"}
    assert transport.calls == []


def test_fenced_generation_reply(api_key, reply):
    transport = reply(FENCED_REPLY)

    result = run("make a box robot")

    assert result["explanation"] == "ok"
    assert result["actionType"] == "generation"

    robot = result["robotData"]
    assert robot["name"] == "r1"
    assert robot["rootLinkId"] == "l1"
    assert robot["joints"] == {}

    link = robot["links"]["l1"]
    assert link["id"] == "l1"
    assert link["visual"]["dimensions"] == {"x": 1, "y": 2, "z": 3}
    assert link["inertial"]["mass"] == 2
    assert link["visual"]["color"] == "#fff"
    assert link["collision"]["color"] == "#ef4444"

    assert len(transport.calls) == 1


def test_prose_wrapped_reply_without_robot(api_key, reply):
    reply('Sure, here is my answer: {"explanation":"x","actionType":"advice"} hope it helps')

    result = run("is this motor strong enough?")

    assert result == {"explanation": "x", "actionType": "advice"}


def test_null_robot_data_is_omitted(api_key, reply):
    reply('{"explanation":"x","actionType":"advice","robotData":null}')
    assert "robotData" not in run("advice please")


def test_empty_robot_data_is_kept(api_key, reply):
    reply('{"explanation":"x","actionType":"modification","robotData":{}}')

    result = run("clear it")

    assert result["robotData"] == {"name": "modified_robot", "links": {}, "joints": {}, "rootLinkId": None}


def test_zero_lower_limit_survives(api_key, reply):
    reply(json.dumps({
        "explanation": "limited",
        "actionType": "modification",
        "robotData": {
            "name": "arm",
            "links": [{"id": "a"}, {"id": "b"}],
            "joints": [{"id": "j", "type": "revolute", "parentLinkId": "a", "childLinkId": "b", "lowerLimit": 0}],
            "rootLinkId": "a",
        },
    }))

    limit = run("only positive rotation")["robotData"]["joints"]["j"]["limit"]

    assert limit["lower"] == 0
    assert limit["upper"] == 1.57


def test_reply_without_json_returns_none(api_key, reply):
    reply("I could not produce a robot for that request.")
    assert run("???") is None


def test_malformed_json_returns_none(api_key, reply):
    reply("```json\n{\"explanation\": \n```")
    assert run("broken") is None


def test_non_object_json_returns_none(api_key, reply):
    reply("```json\n[1, 2, 3]\n```")
    assert run("list") is None


def test_missing_text_returns_none(api_key, transport):
    transport.response = FakeResponse({"candidates": []})
    assert run("blocked") is None


def test_http_error_returns_none(api_key, transport, caplog):
    transport.response = FakeResponse({"error": "quota"}, status_code=429)

    assert run("make a robot") is None
    assert "Robot generation failed" in caplog.text


def test_network_error_returns_none(api_key, transport):
    transport.error = requests.exceptions.Timeout("slow")
    assert run("make a robot") is None


def test_request_carries_prompt_and_context(api_key, reply, robot, motor_library):
    transport = reply('{"explanation":"x","actionType":"advice"}')

    run("  add a lidar  ", robot, motor_library)

    sent = transport.calls[0]["json"]
    assert sent["contents"][0]["parts"][0]["text"] == "  add a lidar  "

    system_text = sent["systemInstruction"]["parts"][0]["text"]
    assert '"rootId":"base"' in system_text
    assert '"weight":0.3' in system_text
    assert "large-binary-blob" not in system_text
    assert "price" not in system_text
    assert transport.calls[0]["headers"]["x-goog-api-key"] == api_key


def test_interpret_reply_empty_text():
    assert interpret_reply(None) is None
    assert interpret_reply("") is None


def test_nan_and_infinity_reply_returns_none(api_key, reply):
    reply(
        '{"explanation":"x","actionType":"generation","robotData":{"links":'
        '[{"id":"a","mass":NaN,"dimensions":[Infinity,1,1]}],"joints":[]}}'
    )
    assert run("make a robot") is None
