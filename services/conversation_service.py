# services/conversation_service.py
import json
import logging
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError


class Message(BaseModel):
    """One turn of a conversation."""

    model_config = ConfigDict(extra="forbid")

    role: Literal["assistant", "user", "system"]
    content: str


Conversation = TypeAdapter(Annotated[list[Message], Field(min_length=1)])


class ConversationError(Exception):
    status_code = 400

    def __init__(self, detail):
        super().__init__(detail if isinstance(detail, str) else "Invalid conversation")
        self.detail = detail


class MalformedBodyError(ConversationError):
    status_code = 400


class InvalidConversationError(ConversationError):
    status_code = 422


def decode_conversation(body: bytes | str) -> list[Message]:
    """
    Parses a request body into a non-empty list of messages.

    The body is a JSON array of {role, content} objects. Web clients that post
    JSON.stringify(messages) as a text body send the array wrapped in a JSON
    string, so a decoded string is decoded one more time.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedBodyError("Request body is not valid UTF-8") from e

    try:
        data = json.loads(body)
        if isinstance(data, str):
            data = json.loads(data)
    except json.JSONDecodeError as e:
        logging.warning(f"[decode_conversation] malformed body: {e}")
        raise MalformedBodyError(f"Request body is not valid JSON: {e.msg}") from e
    except RecursionError as e:
        logging.warning("[decode_conversation] body nested too deeply")
        raise MalformedBodyError("Request body is nested too deeply") from e

    try:
        messages = Conversation.validate_python(data)
    except ValidationError as e:
        logging.warning(f"[decode_conversation] rejected conversation: {e.error_count()} error(s)")
        raise InvalidConversationError(
            e.errors(include_url=False, include_context=False, include_input=False)
        ) from e

    return messages


def split_conversation(messages: list[Message]) -> tuple[list[Message], Message]:
    """Returns (history, current): every message but the last, and the last one."""
    if not messages:
        raise InvalidConversationError("Conversation must contain at least one message")
    return list(messages[:-1]), messages[-1]
