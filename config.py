import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get(
    "STRAYSENSE_CONFIG", os.path.join(ROOT_PATH, "env.yaml")
)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    """Environment variables win over env.yaml, which wins over the default."""
    raw = os.environ.get(key)
    if raw is None:
        return data.get(key, default)
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, list):
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./straysense.db")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = _get("API_PORT", 5000)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_get("ENABLE_LOGGING_MIDDLEWARE", True))
    CREATE_TABLES_ON_STARTUP = bool(_get("CREATE_TABLES_ON_STARTUP", True))
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = _get("JWT_ALGORITHM", "HS256")
    SESSION_TTL_HOURS = _get("SESSION_TTL_HOURS", 24)
    ADMIN_TOKEN_TTL_HOURS = _get("ADMIN_TOKEN_TTL_HOURS", 24)
    ADMIN_PASSWORD = _get("ADMIN_PASSWORD", "dev-admin-password")
    REVERT_ANIMAL_ON_REJECTION = bool(_get("REVERT_ANIMAL_ON_REJECTION", False))
