"""Tests for modechat/api/http_api.py."""

import json

import pytest
from fastapi.testclient import TestClient

import modechat.api.http_api as http_api
from modechat.core.modes import MODE_IDS
from modechat.prompting.templates import FALLBACK_APOLOGY, TEMPLATE_BANK


@pytest.fixture
def client():
    return TestClient(http_api.app)


def _chat(client, messages, model="general", **extra):
    return client.post(
        "/v1/chat/completions",
        json={"model": model, "messages": messages, **extra},
    )


def test_list_modes(client):
    response = client.get("/v1/modes")
    assert response.status_code == 200
    data = response.json()["data"]
    assert [m["id"] for m in data] == list(MODE_IDS)
    assert data[1]["title"] == "Study Helper"


def test_list_models(client):
    body = client.get("/v1/models").json()
    assert body["object"] == "list"
    assert [m["id"] for m in body["data"]] == list(MODE_IDS)
    assert all(m["object"] == "model" for m in body["data"])


def test_chat_completion_greeting(client):
    response = _chat(client, [{"role": "user", "content": "hi"}])
    assert response.status_code == 200
    body = response.json()
    assert body["object"] == "chat.completion"
    assert body["model"] == "general"
    assert body["choices"][0]["message"]["content"] == TEMPLATE_BANK[("general", "greeting")]
    assert "trace" not in body


def test_chat_completion_uses_earlier_messages_as_history(client, user_history):
    messages = user_history + [{"role": "user", "content": "tell me more"}]
    body = _chat(client, messages).json()
    assert body["choices"][0]["message"]["content"] == TEMPLATE_BANK[("general", "clarify")]


def test_system_messages_are_not_history(client):
    messages = [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "tell me more"},
    ]
    body = _chat(client, messages).json()
    assert body["choices"][0]["message"]["content"] == TEMPLATE_BANK[("general", "default")]


def test_mode_selected_by_model_field(client):
    body = _chat(client, [{"role": "user", "content": "I feel sad today"}], model="mental").json()
    assert body["model"] == "mental"
    assert body["choices"][0]["message"]["content"] == TEMPLATE_BANK[("mental", "negative")]


def test_model_field_is_case_insensitive(client):
    body = _chat(client, [{"role": "user", "content": "I need help with fractions"}], model=" Study ").json()
    assert body["model"] == "study"
    assert body["choices"][0]["message"]["content"] == TEMPLATE_BANK[("study", "help")]


def test_trace_included_on_request(client):
    body = _chat(client, [{"role": "user", "content": "hi"}], trace=True).json()
    trace = body["trace"]
    assert trace["mode"] == "general"
    assert trace["strategy"] == "conversational_adaptive"
    assert trace["classification"]["intent"] == "greeting"
    assert trace["classification"]["domains"] == ["general"]


def test_stream_response(client):
    response = _chat(client, [{"role": "user", "content": "hi"}], stream=True)
    assert response.status_code == 200

    frames = [line[len("data: "):] for line in response.text.splitlines() if line.startswith("data: ")]
    assert frames[-1] == "[DONE]"

    first = json.loads(frames[0])
    assert first["object"] == "chat.completion.chunk"
    assert first["choices"][0]["delta"]["content"] == TEMPLATE_BANK[("general", "greeting")]

    last = json.loads(frames[-2])
    assert last["choices"][0]["finish_reason"] == "stop"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"model": "general"}, "No messages provided"),
        ({"model": "general", "messages": []}, "No messages provided"),
        ({"messages": [{"role": "user", "content": "hi"}]}, "No model provided"),
        ({"model": "pirate", "messages": [{"role": "user", "content": "hi"}]}, "Unknown model requested"),
    ],
)
def test_validation_errors(client, payload, message):
    response = client.post("/v1/chat/completions", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": message}


def test_invalid_json(client):
    response = client.post(
        "/v1/chat/completions",
        content="not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_pipeline_fault_returns_apology(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(http_api, "respond_with_trace", boom)

    body = _chat(client, [{"role": "user", "content": "hi"}], trace=True).json()
    assert body["choices"][0]["message"]["content"] == FALLBACK_APOLOGY
    assert "trace" not in body


def test_split_messages_ignores_trailing_assistant_turns():
    messages = [
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "reply"},
        {"role": "user", "content": "second"},
        {"role": "assistant", "content": "dangling"},
    ]
    utterance, history = http_api.split_messages(messages)
    assert utterance == "second"
    assert history == [
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "reply"},
    ]


def test_split_messages_without_user_message():
    assert http_api.split_messages([{"role": "assistant", "content": "hey"}]) == ("", [])
