# services/openai_service.py
import logging
from functools import lru_cache

from openai import AsyncOpenAI

from config import get_settings
from services.conversation_service import Message

OPENAI_MODEL = "gpt-5.2-pro"


@lru_cache(maxsize=1)
def get_openai_client() -> AsyncOpenAI:
    """
    Builds the shared OpenAI client.

    The key and (optional) gateway base URL come from the environment the host
    platform provides, never from the request.
    """
    settings = get_settings()
    return AsyncOpenAI(
        api_key=settings.require("openai_api_key"),
        base_url=settings.openai_base_url,
    )


async def generate_reply(client: AsyncOpenAI, messages: list[Message]) -> str:
    logging.info(f"[openai.generate_reply] sending {len(messages)} messages to {OPENAI_MODEL}")

    response = await client.responses.create(
        model=OPENAI_MODEL,
        input=[m.model_dump() for m in messages],
    )

    text = response.output_text or ""
    logging.info(f"[openai.generate_reply] received {len(text)} chars")
    return text
