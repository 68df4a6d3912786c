# app.py
import logging
import time

import httpx
import openai
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from google.genai import errors as genai_errors

from config import ConfigurationError, get_settings
from routes.chat_routes import chat_router
from services.conversation_service import ConversationError
from services.gemini_service import GEMINI_MODEL
from services.openai_service import OPENAI_MODEL

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(title="Chat Relay (OpenAI + Gemini)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router)


@app.exception_handler(ConversationError)
async def conversation_error(request: Request, exc: ConversationError):
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder({"detail": exc.detail}),
    )


@app.exception_handler(openai.APIError)
async def openai_error(request: Request, exc: openai.APIError):
    logging.error(f"[openai_error] {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc), "provider": "openai"})


@app.exception_handler(genai_errors.APIError)
async def gemini_error(request: Request, exc: genai_errors.APIError):
    logging.error(f"[gemini_error] {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc), "provider": "gemini"})


# google-genai lets httpx transport failures through unwrapped; openai wraps its own
@app.exception_handler(httpx.TransportError)
async def gemini_transport_error(request: Request, exc: httpx.TransportError):
    logging.error(f"[gemini_transport_error] {request.url.path}: {exc!r}")
    detail = str(exc) or type(exc).__name__
    return JSONResponse(status_code=502, content={"detail": detail, "provider": "gemini"})


@app.exception_handler(ConfigurationError)
async def configuration_error(request: Request, exc: ConfigurationError):
    logging.error(f"[configuration_error] {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok", "time": time.time()}


@app.get("/model-info")
def model_info():
    return {"openai": OPENAI_MODEL, "gemini": GEMINI_MODEL}
