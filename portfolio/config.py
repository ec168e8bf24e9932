from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parent.parent

# Load .env file if it exists (before reading os.getenv)
_env_path = ROOT_DIR / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                # Env vars take precedence
                if key not in os.environ:
                    os.environ[key] = value


def _sanitize_ascii(val: str) -> str:
    """Strip non-ASCII characters from config values (prevents encoding errors)"""
    return val.encode('ascii', errors='ignore').decode('ascii').strip()


class Settings(BaseModel):
    # Network
    http_host: str = os.getenv("PORTFOLIO_HTTP_HOST", "0.0.0.0")
    http_port: int = int(os.getenv("PORTFOLIO_HTTP_PORT", "8000"))

    # Content store
    database_url: str = os.getenv(
        "PORTFOLIO_DATABASE_URL", f"sqlite+aiosqlite:///{ROOT_DIR / 'data' / 'portfolio.db'}"
    )
    seed_path: str = os.getenv("PORTFOLIO_SEED_PATH", str(ROOT_DIR / "data" / "tools.json"))

    # Delegated capabilities (edge functions)
    functions_url: str = _sanitize_ascii(os.getenv("PORTFOLIO_FUNCTIONS_URL", "http://localhost:54321/functions/v1"))
    functions_api_key: str = _sanitize_ascii(os.getenv("PORTFOLIO_FUNCTIONS_API_KEY", ""))
    capability_timeout_s: float = float(os.getenv("PORTFOLIO_CAPABILITY_TIMEOUT", "30"))

    log_level: str = os.getenv("PORTFOLIO_LOG_LEVEL", "INFO")


settings = Settings()

_fn_key = '***' + settings.functions_api_key[-4:] if len(settings.functions_api_key) > 4 else 'EMPTY'
logger.info(f"Config: capabilities → {settings.functions_url} (key={_fn_key})")
logger.info(f"Config: content store → {settings.database_url}")
