# services/gemini_service.py
import logging
from functools import lru_cache

from google import genai
from google.genai import types

from config import GEMINI_KEY_VARS, get_settings
from services.conversation_service import Message, split_conversation

GEMINI_MODEL = "gemini-3-pro-preview"


def to_gemini_role(role: str) -> str:
    # Gemini only knows two parties; system prompts are sent as user turns
    return "model" if role == "assistant" else "user"


def to_gemini_contents(messages: list[Message]) -> list[types.Content]:
    return [
        types.Content(
            role=to_gemini_role(m.role),
            parts=[types.Part(text=m.content)],
        )
        for m in messages
    ]


@lru_cache(maxsize=1)
def get_gemini_client() -> genai.Client:
    settings = get_settings()
    return genai.Client(api_key=settings.require("gemini_api_key", GEMINI_KEY_VARS))


async def generate_reply(client: genai.Client, messages: list[Message]) -> str:
    """
    Seeds a chat session with every message but the last, then sends the
    last message's content as the new turn.

    The session lives only for this call; nothing is kept between requests.
    """
    history, current = split_conversation(messages)
    logging.info(
        f"[gemini.generate_reply] history={len(history)} messages, model={GEMINI_MODEL}"
    )

    chat = client.aio.chats.create(
        model=GEMINI_MODEL,
        history=to_gemini_contents(history),
    )
    response = await chat.send_message(current.content)

    text = response.text or ""
    logging.info(f"[gemini.generate_reply] received {len(text)} chars")
    return text
