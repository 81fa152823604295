"""Shared fixtures: sample robot state, motor catalog, and a fake Gemini transport."""

import pytest
import requests

from robot_architect.llm import client, provider_config


class FakeResponse:
    """Minimal stand-in for `requests.Response`."""

    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self._body


def gemini_body(text):
    """Wrap reply text the way `generateContent` returns it."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


class FakeTransport:
    """Records `requests.post` calls and replays a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch, tmp_path):
    """Start every test without any configured key."""
    for name in provider_config.KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(provider_config, "KEY_FILE", str(tmp_path / "missing.key"))


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def transport(monkeypatch):
    """Install a fake transport; set `.response` / `.error` inside the test."""
    fake = FakeTransport()
    monkeypatch.setattr(client.requests, "post", fake)
    return fake


@pytest.fixture
def reply(transport):
    """Configure the fake transport to return the given reply text."""

    def _reply(text):
        transport.response = FakeResponse(gemini_body(text))
        return transport

    return _reply


@pytest.fixture
def robot():
    return {
        "name": "arm",
        "rootLinkId": "base",
        "selectedId": "j1",
        "links": {
            "base": {
                "id": "base",
                "name": "base_link",
                "visual": {"type": "box", "dimensions": {"x": 0.2, "y": 0.2, "z": 0.1}},
                "collision": {"type": "box"},
                "inertial": {"mass": 2.0},
                "mesh": "large-binary-blob",
            },
            "upper": {
                "id": "upper",
                "name": "upper_arm",
                "visual": {"type": "cylinder"},
                "inertial": {"mass": 0.5},
            },
        },
        "joints": {
            "j1": {
                "id": "j1",
                "name": "shoulder",
                "type": "revolute",
                "parentLinkId": "base",
                "childLinkId": "upper",
                "origin": {"xyz": {"x": 0, "y": 0, "z": 0.1}, "rpy": {"r": 0, "p": 0, "y": 0}},
                "axis": {"x": 0, "y": 0, "z": 1},
                "limit": {"lower": -1, "upper": 1, "effort": 20, "velocity": 3},
                "dynamics": {"damping": 0.1, "friction": 0.1},
                "hardware": {"motorType": "DM4310", "armature": 0.01},
            },
        },
    }


@pytest.fixture
def motor_library():
    return {
        "Damiao": [
            {"name": "DM4310", "effort": 7, "velocity": 20, "armature": 0.3, "price": 100},
            {"name": "DM8009", "effort": 40, "velocity": 10, "armature": 0.8},
        ],
        "Unitree": [
            {"name": "GO-M8010-6", "effort": 23.7, "velocity": 30, "armature": 0.53},
        ],
    }
