"""
police_chatbot.py

Police Help Desk Chatbot: procedures, IPC sections and emergency contacts,
answered in English, Tamil or Hindi.

Wraps the rule-based QueryResolver with configuration, per-session language
preference and conversation transcript, plus a command line interface.

Run:
    python police_chatbot.py                 # CLI
    python police_chatbot.py --mode api      # FastAPI server (see app.py)
"""

import argparse
import logging
import os
import sys
import threading
import uuid
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional

from dotenv import load_dotenv

from police_kb import KnowledgeBase, load_knowledge_base, load_sample_data
from query_resolver import QueryResolver
from response_formatter import fallback_response

logger = logging.getLogger("PoliceChatbot")

load_dotenv()


# ==================== CONFIGURATION ====================
class Config:
    """Central configuration for the chatbot"""

    # Knowledge base (bundled sample data when unset)
    KB_PATH = os.getenv("POLICE_KB_PATH", "").strip()

    # Languages
    DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "english")
    SUPPORTED_LANGUAGES = ("english", "ta", "hindi")

    # Conversation settings
    MAX_HISTORY = int(os.getenv("MAX_HISTORY", "50"))
    SESSION_TIMEOUT = int(os.getenv("SESSION_TIMEOUT", "1800"))  # seconds

    # API settings
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8000"))
    VERSION = "1.0.0"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "").strip()


def configure_logging(level: str = Config.LOG_LEVEL, log_file: Optional[str] = Config.LOG_FILE):
    """Console logging plus an optional UTF-8 log file."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ==================== DATA CLASSES ====================
@dataclass
class ConversationTurn:
    user_input: str
    response: str
    intent: str
    language: str
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass
class Session:
    session_id: str
    language: str = Config.DEFAULT_LANGUAGE
    history: Deque[ConversationTurn] = field(default_factory=lambda: deque(maxlen=Config.MAX_HISTORY))
    created_at: datetime = field(default_factory=_utcnow)
    last_active: datetime = field(default_factory=_utcnow)

    def is_expired(self) -> bool:
        return (_utcnow() - self.last_active).total_seconds() > Config.SESSION_TIMEOUT

    def update_activity(self):
        self.last_active = _utcnow()

    def clear(self):
        self.history.clear()
        self.update_activity()


# ==================== CHATBOT ====================
class PoliceChatbot:
    """
    Session-aware front for the QueryResolver.

    The knowledge base is loaded once here and shared read-only by every session.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None, resolver: Optional[QueryResolver] = None):
        if knowledge_base is None:
            knowledge_base = load_knowledge_base(Config.KB_PATH) if Config.KB_PATH else load_sample_data()
        self.knowledge_base = knowledge_base
        self.resolver = resolver or QueryResolver()
        self.sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()
        logger.info("PoliceChatbot initialized with %d knowledge entries", len(knowledge_base.entries))

    # ---------- sessions ----------
    @staticmethod
    def validate_language(language: str) -> str:
        if language not in Config.SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language '{language}'. Choose one of: {', '.join(Config.SUPPORTED_LANGUAGES)}"
            )
        return language

    def get_session(self, session_id: str, language: Optional[str] = None) -> Session:
        """Get or create a session; expired sessions start over."""
        with self._lock:
            session = self.sessions.get(session_id)
            if session is not None and session.is_expired():
                logger.info(f"Session expired for {session_id}, creating new session")
                session = None
            if session is None:
                self._drop_expired()
                session = Session(session_id, language=language or Config.DEFAULT_LANGUAGE)
                self.sessions[session_id] = session
                logger.info(f"Created new session {session_id}")
            else:
                session.update_activity()
            return session

    def set_language(self, session_id: str, language: str) -> Session:
        self.validate_language(language)
        session = self.get_session(session_id, language)
        session.language = language
        return session

    def get_transcript(self, session_id: str) -> List[Dict[str, Any]]:
        session = self.sessions.get(session_id)
        if session is None:
            return []
        return [asdict(turn) for turn in session.history]

    def clear_session(self, session_id: str) -> bool:
        session = self.sessions.get(session_id)
        if session is None:
            return False
        session.clear()
        return True

    def delete_session(self, session_id: str) -> bool:
        with self._lock:
            return self.sessions.pop(session_id, None) is not None

    def purge_expired(self) -> int:
        with self._lock:
            return self._drop_expired()

    def _drop_expired(self) -> int:
        # caller holds self._lock
        expired = [sid for sid, session in self.sessions.items() if session.is_expired()]
        for sid in expired:
            del self.sessions[sid]
        if expired:
            logger.info("Purged %d expired session(s)", len(expired))
        return len(expired)

    # ---------- pipeline ----------
    def process_message(self, session_id: str, text: str, language: Optional[str] = None) -> Dict[str, Any]:
        """
        Resolve one user message and record it in the session transcript.

        Returns a dict with the reply text and how it was classified.
        """
        if language is not None:
            session = self.set_language(session_id, language)
        else:
            session = self.get_session(session_id)

        timestamp = _utcnow().isoformat()
        if not text or not text.strip():
            return {
                "response": fallback_response(session.language),
                "session_id": session_id,
                "intent": "fallback",
                "language": session.language,
                "section": None,
                "category": None,
                "timestamp": timestamp,
            }

        try:
            resolution = self.resolver.resolve_detailed(text, self.knowledge_base, session.language)
        except Exception:
            logger.exception(f"Failed to resolve message for session {session_id}")
            raise

        session.history.append(ConversationTurn(
            user_input=text,
            response=resolution.text,
            intent=resolution.intent.value,
            language=session.language,
        ))

        logger.info(
            f"Processed session={session_id} | lang={session.language} "
            f"| intent={resolution.intent.value} | matches={resolution.match_count}"
        )

        return {
            "response": resolution.text,
            "session_id": session_id,
            "intent": resolution.intent.value,
            "language": session.language,
            "section": resolution.section,
            "category": resolution.entry.category if resolution.entry else None,
            "timestamp": timestamp,
        }


# ==================== COMMAND LINE INTERFACE ====================
def run_cli(bot: Optional[PoliceChatbot] = None, language: str = Config.DEFAULT_LANGUAGE):
    """Run the chatbot in command line mode"""
    bot = bot or PoliceChatbot()
    session_id = str(uuid.uuid4())[:8]
    bot.set_language(session_id, language)

    print("\n" + "=" * 50)
    print(" Police Help Desk - Command Line Mode")
    print("=" * 50)
    print("Type 'quit', 'exit', or 'bye' to end the conversation")
    print("Type 'clear' to clear the conversation history")
    print(f"Type 'lang <code>' to switch language ({', '.join(Config.SUPPORTED_LANGUAGES)})")
    print("Type 'history' to show the transcript")
    print("=" * 50)

    while True:
        try:
            user_input = input("\n👤 You: ").strip()

            if user_input.lower() in {"quit", "exit", "bye"}:
                print("👋 Goodbye! Stay safe!")
                break

            if user_input.lower() == "clear":
                bot.clear_session(session_id)
                print("🧹 Conversation history cleared")
                continue

            if user_input.lower().startswith("lang "):
                try:
                    session = bot.set_language(session_id, user_input[5:].strip())
                    print(f"🌐 Language set to {session.language}")
                except ValueError as e:
                    print(f"❌ {e}")
                continue

            if user_input.lower() == "history":
                for turn in bot.get_transcript(session_id):
                    print(f"👤 {turn['user_input']}\n🤖 {turn['response']}\n")
                continue

            if not user_input:
                continue

            result = bot.process_message(session_id, user_input)
            print(f"🤖 Bot: {result['response']}")

        except KeyboardInterrupt:
            print("\n👋 Goodbye!")
            break
        except Exception as e:
            print(f"❌ Error: {e}")
            logger.error(f"CLI error: {e}", exc_info=True)


# ==================== MAIN EXECUTION ====================
def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Police Help Desk Chatbot")
    parser.add_argument("--mode", choices=["cli", "api"], default="cli",
                        help="Run mode: CLI interface or API server")
    parser.add_argument("--host", default=Config.HOST, help="API host address")
    parser.add_argument("--port", type=int, default=Config.PORT, help="API port")
    parser.add_argument("--language", choices=Config.SUPPORTED_LANGUAGES, default=Config.DEFAULT_LANGUAGE,
                        help="Reply language for the CLI session")
    parser.add_argument("--kb-path", default=None, help="JSON knowledge base file (defaults to sample data)")

    args = parser.parse_args(argv)
    configure_logging()

    if args.kb_path:
        Config.KB_PATH = args.kb_path
        os.environ["POLICE_KB_PATH"] = args.kb_path

    if args.mode == "cli":
        run_cli(language=args.language)
    else:
        import uvicorn
        logger.info(f"Starting API server on {args.host}:{args.port}")
        uvicorn.run("app:app", host=args.host, port=args.port, log_level=Config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
