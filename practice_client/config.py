import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Remote API
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000").rstrip("/")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "30"))

# Token storage: "memory", "file" or "redis"
TOKEN_STORAGE_BACKEND = os.getenv("TOKEN_STORAGE_BACKEND", "file").lower()
TOKEN_STORAGE_PATH = Path(
    os.getenv("TOKEN_STORAGE_PATH", str(Path.home() / ".practice_client" / "session.json"))
)
TOKEN_STORAGE_PREFIX = os.getenv("TOKEN_STORAGE_PREFIX", "practice_client:")

# Optional Fernet key for tokens at rest
# Generate with: python -c "from cryptography.fernet import Fernet; print(Fernet.generate_key().decode())"
TOKEN_ENCRYPTION_KEY = os.getenv("TOKEN_ENCRYPTION_KEY")

# Redis (only used when TOKEN_STORAGE_BACKEND=redis)
REDIS_URL = os.getenv("REDIS_URL")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for scripts embedding the client"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Reduce verbosity of third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
