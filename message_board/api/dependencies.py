from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request
from pydantic import ValidationError

from message_board.api.schemas import SaveMessageRequest
from message_board.services.message_log import MessageLog
from message_board.services.request_counter import RequestCounter

JSON_CONTENT_TYPE = "application/json"


def get_message_log(request: Request) -> MessageLog:
    return request.app.state.message_log


def get_request_counter(request: Request) -> RequestCounter:
    return request.app.state.request_counter


async def resolve_message_text(request: Request) -> Optional[str]:
    """Pull the ``message`` field from a JSON body or a submitted form."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(JSON_CONTENT_TYPE):
        raw = await request.body()
        if not raw.strip():
            return None
        try:
            payload = SaveMessageRequest.model_validate_json(raw)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail="message must be a string") from exc
        return payload.message

    form = await request.form()
    value = form.get("message")
    if value is None or isinstance(value, str):
        return value
    # file uploads are not messages
    raise HTTPException(status_code=400, detail="message must be a string")


__all__ = ["get_message_log", "get_request_counter", "resolve_message_text"]
