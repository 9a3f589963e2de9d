"""
HTTP API adapter for the ModeChat pipeline.

Architectural role:
- Expose OpenAI-compatible HTTP interfaces where the `model` field selects
  the assistant mode.
- Enforce adapter-level input validation and mode selection.
- Delegate response synthesis to `modechat.core.engine.respond_with_trace`.
- Normalize output to response transport contracts (JSON or SSE).

Endpoint responsibilities:
- `GET /v1/modes`: the mode registry with titles, descriptions and examples.
- `GET /v1/models`: the same modes as OpenAI-style model metadata.
- `POST /v1/chat/completions`: validate input, split the message list into
  history and current utterance, invoke core, and format completion output.

API request lifecycle (`POST /v1/chat/completions`):
1. Parse request JSON (`messages`, `model`, optional `stream`, `trace`).
2. Validate required fields and the requested mode.
3. Take the latest user message as the utterance; every earlier user or
   assistant message becomes history.
4. Run the pipeline; unexpected faults are logged and answered with
   `FALLBACK_APOLOGY`.
5. Return a `chat.completion` envelope, or a single-chunk SSE stream.

Input validation behavior:
- Unparseable JSON -> HTTP 400.
- Missing `messages` -> HTTP 400.
- Missing `model` -> HTTP 400.
- Unknown mode -> HTTP 400. Mode ids are matched after strip and lower-case,
  as `resolve_mode` and the CLI `/mode` command do.

Determinism considerations:
- Response text is deterministic for a given message list and mode.
- IDs and timestamps are generated per request (`uuid`, `time.time()`).
"""

import dataclasses
import json
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from modechat.core.config import DEBUG_PIPELINE
from modechat.core.engine import respond_with_trace
from modechat.core.modes import get_mode, list_modes
from modechat.core.types import ROLES
from modechat.prompting.templates import FALLBACK_APOLOGY


logger = logging.getLogger(__name__)

app = FastAPI(title="ModeChat")


# ============================================================
# Schemas
# ============================================================

class ModeRecord(BaseModel):
    """Public shape of one mode registry entry."""

    id: str
    title: str
    description: str
    examples: list[str]


class ModeList(BaseModel):
    object: str = "list"
    data: list[ModeRecord]


# ============================================================
# Helpers
# ============================================================

def split_messages(messages: list) -> tuple[str, list[dict]]:
    """
    Split an OpenAI-style message list into `(utterance, history)`.

    The utterance is the content of the last `user` message. History is every
    earlier message whose role is `user` or `assistant`; system prompts and
    anything after the last user message are ignored.
    """
    last_user_index = None
    for index in range(len(messages) - 1, -1, -1):
        msg = messages[index]
        if isinstance(msg, dict) and msg.get("role") == "user":
            last_user_index = index
            break

    if last_user_index is None:
        return "", []

    utterance = str(messages[last_user_index].get("content") or "")
    history = [
        {"role": msg.get("role"), "content": str(msg.get("content") or "")}
        for msg in messages[:last_user_index]
        if isinstance(msg, dict) and msg.get("role") in ROLES
    ]
    return utterance, history


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def _run_pipeline(utterance: str, history: list[dict], mode: str):
    """Invoke core; returns `(text, trace_or_None)` and never raises."""
    try:
        return respond_with_trace(utterance, history, mode)
    except Exception:
        logger.exception("Response pipeline failed for mode=%s", mode)
        return FALLBACK_APOLOGY, None


# ============================================================
# Mode Listing
# ============================================================

@app.get("/v1/modes", response_model=ModeList)
def list_mode_records():
    """Return the mode registry in declaration order."""
    return ModeList(data=[ModeRecord(**mode.as_dict()) for mode in list_modes()])


@app.get("/v1/models")
def list_models():
    """
    Return modes as OpenAI-style model metadata.

    Response formatting:
    - `object: "list"`
    - `data[]` entries with `id`, `object`, `created`, `owned_by`
    """
    created = int(time.time())
    return {
        "object": "list",
        "data": [
            {
                "id": mode.id,
                "object": "model",
                "created": created,
                "owned_by": "local"
            }
            for mode in list_modes()
        ]
    }


# ============================================================
# OpenAI-Compatible Chat Completions
# ============================================================

@app.post("/v1/chat/completions")
async def chat_completions(request: Request):
    """
    OpenAI-compatible chat completions endpoint.

    Error handling strategy:
    - Validation failures return structured 400 JSON errors.
    - Pipeline faults are logged and answered with the apology text.
    - `"trace": true` adds the serialized pipeline trace to the envelope;
      it is omitted when the pipeline failed.
    """
    try:
        body = await request.json()
    except ValueError:
        return _error("Invalid JSON body")

    if not isinstance(body, dict):
        return _error("Invalid JSON body")

    messages = body.get("messages") or []
    model_name = body.get("model")
    stream = bool(body.get("stream", False))
    include_trace = bool(body.get("trace", False))

    if not messages or not isinstance(messages, list):
        return _error("No messages provided")

    if not model_name:
        return _error("No model provided")

    try:
        mode = get_mode(str(model_name).strip().lower()).id
    except KeyError:
        return _error("Unknown model requested")

    utterance, history = split_messages(messages)

    if DEBUG_PIPELINE:
        logger.info(
            "api_debug mode=%s history=%d stream=%s", mode, len(history), stream
        )

    text, trace = _run_pipeline(utterance, history, mode)

    completion_id = f"chatcmpl-{uuid.uuid4().hex}"
    created = int(time.time())

    if stream:

        async def event_generator():
            """
            Yield SSE frames matching OpenAI chunk semantics.

            The full response is sent as one content chunk, followed by the
            terminal `finish_reason: "stop"` chunk and the `[DONE]` sentinel.
            """
            content_chunk = {
                "id": completion_id,
                "object": "chat.completion.chunk",
                "created": created,
                "model": mode,
                "choices": [
                    {
                        "index": 0,
                        "delta": {"role": "assistant", "content": text},
                        "finish_reason": None
                    }
                ]
            }
            yield f"data: {json.dumps(content_chunk)}\n\n"

            end_chunk = {
                "id": completion_id,
                "object": "chat.completion.chunk",
                "created": created,
                "model": mode,
                "choices": [
                    {
                        "index": 0,
                        "delta": {},
                        "finish_reason": "stop"
                    }
                ]
            }
            yield f"data: {json.dumps(end_chunk)}\n\n"
            yield "data: [DONE]\n\n"

        return StreamingResponse(event_generator(), media_type="text/event-stream")

    envelope = {
        "id": completion_id,
        "object": "chat.completion",
        "created": created,
        "model": mode,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop"
            }
        ]
    }

    if include_trace and trace is not None:
        envelope["trace"] = dataclasses.asdict(trace)

    return envelope
