import os
from dotenv import load_dotenv

# Load .env from the backend directory
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.abspath(os.path.join(BASE_DIR, "..", ".."))

APP_TITLE: str = "IELTS Writing Practice API"
APP_VERSION: str = "1.0.0"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))

# Scoring oracle (any OpenAI-compatible chat completions endpoint)
OPENROUTER_API_KEY: str = os.getenv("OPENROUTER_API_KEY", "").strip()
OPENROUTER_API_URL: str = os.getenv("OPENROUTER_API_URL", "https://openrouter.ai/api/v1").strip().rstrip("/")
OPENROUTER_MODEL: str = os.getenv("OPENROUTER_MODEL", "openai/gpt-4o").strip()
OPENROUTER_REFERER: str = os.getenv("OPENROUTER_HTTP_REFERER", "http://localhost")
OPENROUTER_TITLE: str = os.getenv("OPENROUTER_TITLE", "IELTS Writing Practice")
SCORING_TEMPERATURE: float = float(os.getenv("SCORING_TEMPERATURE", "0.3"))
SCORING_TIMEOUT_SECONDS: float = float(os.getenv("SCORING_TIMEOUT_SECONDS", "60"))

# Terminal editor
API_BASE_URL: str = os.getenv("API_BASE_URL", f"http://localhost:{PORT}").rstrip("/")
DRAFT_DIR: str = os.getenv("DRAFT_DIR", os.path.join(BACKEND_DIR, "data", "drafts"))
AUTOSAVE_DELAY_SECONDS: float = float(os.getenv("AUTOSAVE_DELAY_SECONDS", "2"))
TIMER_SECONDS: int = int(os.getenv("TIMER_SECONDS", "1200"))  # 20 min
