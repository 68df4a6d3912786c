# routes/chat_routes.py
from fastapi import APIRouter, Depends, Request
from google import genai
from openai import AsyncOpenAI
from pydantic import BaseModel

from services import gemini_service, openai_service
from services.conversation_service import Message, decode_conversation
from services.gemini_service import get_gemini_client
from services.openai_service import get_openai_client

chat_router = APIRouter(prefix="/api")


class ChatReply(BaseModel):
    message: str


async def read_conversation(request: Request) -> list[Message]:
    # Raw body: the array may arrive as JSON or as a JSON-encoded string
    body = await request.body()
    return decode_conversation(body)


# Dependencies resolve in order, so a bad body is rejected before a client is built
@chat_router.post("/openai", response_model=ChatReply)
async def openai_chat(
    messages: list[Message] = Depends(read_conversation),
    client: AsyncOpenAI = Depends(get_openai_client),
):
    text = await openai_service.generate_reply(client, messages)
    return ChatReply(message=text)


@chat_router.post("/gemini", response_model=ChatReply)
async def gemini_chat(
    messages: list[Message] = Depends(read_conversation),
    client: genai.Client = Depends(get_gemini_client),
):
    text = await gemini_service.generate_reply(client, messages)
    return ChatReply(message=text)
