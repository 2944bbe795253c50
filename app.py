# app.py - FastAPI entrypoint for the Police Help Desk Chatbot
import os
import time
import uuid
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, HTTPException, Depends, status, BackgroundTasks
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, Field, field_validator
from starlette.concurrency import run_in_threadpool
import sentry_sdk
from prometheus_fastapi_instrumentator import Instrumentator

from police_chatbot import PoliceChatbot, Config, configure_logging
from police_kb import find_provision
from response_formatter import format_emergency_response, format_legal_provision_response

# -------------------- Environment & Logging --------------------
ENV = os.getenv("ENVIRONMENT", "production")
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "*").split(",") if h.strip()]
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
SENTRY_DSN = os.getenv("SENTRY_DSN", "").strip()
METRICS_ENABLED = os.getenv("METRICS_ENABLED", "false").lower() in {"1", "true", "yes"}

configure_logging()
logger = logging.getLogger("PoliceChatbotAPI")

# -------------------- Security --------------------
API_KEY_NAME = "X-API-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)

# -------------------- Pydantic models --------------------
class ChatMessage(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000, description="User message")
    session_id: Optional[str] = Field(None, description="Session ID for conversation history")
    language: Optional[str] = Field(None, description="Reply language: english, ta or hindi")

    @field_validator("message")
    @classmethod
    def message_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("Message cannot be empty")
        return v.strip()

    @field_validator("language")
    @classmethod
    def language_must_be_supported(cls, v):
        if v is not None and v not in Config.SUPPORTED_LANGUAGES:
            raise ValueError(f"Language must be one of {', '.join(Config.SUPPORTED_LANGUAGES)}")
        return v

class ChatResponse(BaseModel):
    response: str
    session_id: str
    intent: str
    language: str
    section: Optional[str] = None
    category: Optional[str] = None
    timestamp: str
    processing_time_ms: float

class HealthCheckResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime: float

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    request_id: str

class EmergencyContactsResponse(BaseModel):
    contacts: Dict[str, str]
    formatted: str

class LegalTranslationModel(BaseModel):
    description: Optional[str] = None
    punishment: Optional[str] = None

class LegalProvisionModel(BaseModel):
    section: str
    description: str
    punishment: str
    translation: Optional[LegalTranslationModel] = None
    formatted: str

class KnowledgeEntryModel(BaseModel):
    category: str
    question: str
    answer: str
    keywords: List[str]

class TurnModel(BaseModel):
    user_input: str
    response: str
    intent: str
    language: str
    timestamp: datetime

class TranscriptResponse(BaseModel):
    session_id: str
    language: str
    created_at: str
    last_activity: str
    message_count: int
    history: List[TurnModel]

# -------------------- Lifespan / startup / shutdown --------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup:
      - initialize Sentry if configured
      - build the chatbot (loads the knowledge base once) and attach it to app.state
    Shutdown:
      - drop in-memory sessions
    """
    if SENTRY_DSN:
        sentry_sdk.init(dsn=SENTRY_DSN, traces_sample_rate=float(os.getenv("SENTRY_TRACES", "0.05")))
        logger.info("Sentry initialized.")

    logger.info("Starting Police Help Desk API...")
    try:
        app.state.chatbot = PoliceChatbot()
    except Exception as e:
        logger.exception("Failed to initialize PoliceChatbot: %s", e)
        raise

    app.state.start_time = time.time()
    try:
        yield
    finally:
        logger.info("Shutting down Police Help Desk API...")
        app.state.chatbot.sessions.clear()

# -------------------- Application --------------------
app = FastAPI(
    title="Police Help Desk Chatbot API",
    description="Police procedures, IPC sections and emergency contacts in English, Tamil and Hindi",
    version=Config.VERSION,
    lifespan=lifespan,
)

app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS or ["*"])
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

if METRICS_ENABLED:
    Instrumentator().instrument(app).expose(app)
    logger.info("Prometheus metrics exposed at /metrics")

@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Permissions-Policy"] = "geolocation=()"
    return response

@app.middleware("http")
async def add_telemetry(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    start_time = time.time()
    response = await call_next(request)
    response.headers["X-Process-Time"] = f"{time.time() - start_time:.4f}"
    response.headers["X-Request-ID"] = request_id
    return response

# -------------------- Utilities & dependencies --------------------
def get_request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    return request_id

async def get_api_key(api_key: Optional[str] = Depends(api_key_header)):
    """
    Validate API key if API_KEYS are configured.
    If API_KEYS env var is empty, skip validation (developer mode).
    """
    configured = os.getenv("API_KEYS", "").strip()
    if not configured:
        return None

    valid_keys = [k.strip() for k in configured.split(",") if k.strip()]
    if not api_key or api_key not in valid_keys:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API key")
    return api_key

def get_chatbot(request: Request) -> PoliceChatbot:
    """
    Return the chatbot instance created during lifespan startup.
    If not present for any reason, create one and attach it.
    """
    chatbot = getattr(request.app.state, "chatbot", None)
    if chatbot is None:
        logger.warning("Chatbot not found in app.state – creating a new instance on demand")
        chatbot = PoliceChatbot()
        request.app.state.chatbot = chatbot
    return chatbot

def resolve_language(language: Optional[str]) -> str:
    language = language or Config.DEFAULT_LANGUAGE
    if language not in Config.SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported language '{language}'",
        )
    return language

# -------------------- Exception handlers --------------------
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    request_id = get_request_id(request)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(ErrorResponse(error=str(exc.detail), request_id=request_id)),
    )

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    request_id = get_request_id(request)
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    if SENTRY_DSN:
        sentry_sdk.capture_exception(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=jsonable_encoder(ErrorResponse(
            error="Internal server error",
            details=str(exc) if ENV == "development" else None,
            request_id=request_id,
        )),
    )

# -------------------- Background logger --------------------
async def log_conversation(session_id: str, message: str, intent: str, processing_time_ms: float):
    short = (message[:200] + "...") if len(message) > 200 else message
    logger.info("Conversation logged - session=%s intent=%s processing_ms=%.2f message=%s",
                session_id, intent, processing_time_ms, short)

# -------------------- Chat endpoint --------------------
@app.post("/chat", response_model=ChatResponse, summary="Process user message")
async def chat(
    chat_message: ChatMessage,
    background_tasks: BackgroundTasks,
    _api_key: Optional[str] = Depends(get_api_key),
    chatbot: PoliceChatbot = Depends(get_chatbot),
):
    """Resolve a user message and return the reply with its classification."""
    start_time = time.time()
    session_id = chat_message.session_id or str(uuid.uuid4())

    result = await run_in_threadpool(
        chatbot.process_message, session_id, chat_message.message, chat_message.language
    )
    processing_time_ms = (time.time() - start_time) * 1000.0

    background_tasks.add_task(log_conversation, session_id, chat_message.message, result["intent"], processing_time_ms)
    return ChatResponse(**result, processing_time_ms=round(processing_time_ms, 2))

# -------------------- Knowledge base endpoints --------------------
@app.get("/emergency-contacts", response_model=EmergencyContactsResponse, summary="Emergency contact numbers")
async def emergency_contacts(language: Optional[str] = None, chatbot: PoliceChatbot = Depends(get_chatbot)):
    language = resolve_language(language)
    contacts = chatbot.knowledge_base.emergency_contacts
    return EmergencyContactsResponse(
        contacts=dict(contacts),
        formatted=format_emergency_response(contacts, language),
    )

@app.get("/legal/{section}", response_model=LegalProvisionModel, summary="Look up an IPC section")
async def legal_provision(section: str, language: Optional[str] = None, chatbot: PoliceChatbot = Depends(get_chatbot)):
    """
    Direct lookup by section key (case-insensitive), including alphanumeric
    sections such as 498A that chat messages cannot reach.
    """
    language = resolve_language(language)
    provisions = chatbot.knowledge_base.legal_provisions
    provision = find_provision(provisions, section)
    if provision is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Section {section} not found")

    translation = provision.translations.get(language)
    return LegalProvisionModel(
        section=provision.section,
        description=provision.description,
        punishment=provision.punishment,
        translation=LegalTranslationModel(**vars(translation)) if translation else None,
        formatted=format_legal_provision_response(provision.section, provisions, language),
    )

@app.get("/entries", response_model=List[KnowledgeEntryModel], summary="List knowledge base entries")
async def list_entries(language: Optional[str] = None, chatbot: PoliceChatbot = Depends(get_chatbot)):
    language = resolve_language(language)
    entries = []
    for entry in chatbot.knowledge_base.entries:
        question, answer = entry.localized(language)
        entries.append(KnowledgeEntryModel(
            category=entry.category, question=question, answer=answer, keywords=list(entry.keywords)
        ))
    return entries

# -------------------- Health & session endpoints --------------------
@app.get("/health", response_model=HealthCheckResponse, summary="Health check")
async def health_check(request: Request):
    """Lightweight health check that does not touch the knowledge base."""
    uptime = time.time() - getattr(request.app.state, "start_time", time.time())
    return HealthCheckResponse(
        status="healthy",
        version=app.version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=uptime,
    )

@app.get("/ready", summary="Readiness probe")
async def ready(request: Request):
    if getattr(request.app.state, "chatbot", None) is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Knowledge base not loaded")
    return {"status": "ready"}

@app.get("/sessions/{session_id}", response_model=TranscriptResponse, summary="Get session transcript")
async def get_session(session_id: str, _api_key: Optional[str] = Depends(get_api_key),
                      chatbot: PoliceChatbot = Depends(get_chatbot)):
    session = chatbot.sessions.get(session_id)
    if session is None or session.is_expired():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    history = chatbot.get_transcript(session_id)
    return TranscriptResponse(
        session_id=session_id,
        language=session.language,
        created_at=session.created_at.isoformat(),
        last_activity=session.last_active.isoformat(),
        message_count=len(history),
        history=[TurnModel(**turn) for turn in history],
    )

@app.delete("/sessions/{session_id}/history", summary="Clear session transcript")
async def clear_session(session_id: str, _api_key: Optional[str] = Depends(get_api_key),
                        chatbot: PoliceChatbot = Depends(get_chatbot)):
    if not chatbot.clear_session(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return {"status": "cleared", "session_id": session_id}

@app.delete("/sessions/{session_id}", summary="Delete session")
async def delete_session(session_id: str, _api_key: Optional[str] = Depends(get_api_key),
                         chatbot: PoliceChatbot = Depends(get_chatbot)):
    if not chatbot.delete_session(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return {"status": "deleted", "session_id": session_id}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host=Config.HOST, port=Config.PORT, log_level=Config.LOG_LEVEL.lower())
