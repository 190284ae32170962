# app/core/config.py
import os
import logging
import secrets
from urllib.parse import quote_plus
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _as_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    PROJECT_NAME: str = "Food Order API"

    # Database host, credentials, schema name and port; DATABASE_URL overrides them
    DB_HOST: str = os.getenv("DB_HOST")
    DB_USER: str = os.getenv("DB_USER")
    DB_PASS: str = os.getenv("DB_PASS", "")
    DB_NAME: str = os.getenv("DB_NAME")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DATABASE_URL: str = os.getenv("DATABASE_URL")

    # Pool
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    DB_POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "1800"))
    AUTO_CREATE_TABLES: bool = _as_bool(os.getenv("AUTO_CREATE_TABLES"), default=False)

    # Auth
    JWT_SECRET: str = os.getenv("JWT_SECRET")
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_MINUTES: int = int(os.getenv("TOKEN_EXPIRE_MINUTES", "60"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "3000"))

    def database_url(self) -> str:
        """DATABASE_URL wins; otherwise the DB_* parts are assembled into a MySQL URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST and self.DB_NAME:
            return "mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}".format(
                user=quote_plus(self.DB_USER or ""),
                password=quote_plus(self.DB_PASS or ""),
                host=self.DB_HOST,
                port=self.DB_PORT,
                name=self.DB_NAME,
            )
        return None


settings = Settings()

# Validation Check
if not settings.database_url():
    # Fallback for local testing if .env is missing (Use SQLite)
    logger.warning("DATABASE_URL / DB_HOST not found. Using SQLite for local testing.")
    settings.DATABASE_URL = "sqlite:///./local_test.db"
    settings.AUTO_CREATE_TABLES = True

if not settings.JWT_SECRET:
    # Tokens issued with this key stop verifying after a restart.
    logger.warning("JWT_SECRET not set. Generating a throwaway signing key for this process.")
    settings.JWT_SECRET = secrets.token_urlsafe(32)
