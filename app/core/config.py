
import os
import logging
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = "secret-dev"


class Config(BaseModel):
    app_name: str = "Jobly"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = os.getenv("API_PREFIX", "")
    port: int = int(os.getenv("PORT", "3001"))

    # Auth
    secret_key: str = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))  # 24 hours
    login_rate_limit: str = os.getenv("LOGIN_RATE_LIMIT", "10/minute")

    # Bootstrap admin, only created when both are set
    admin_username: str = os.getenv("ADMIN_USERNAME", "")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "")

    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv("CORS_ORIGINS", "*").split(",")
            if o.strip()
        ]
    )

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    @property
    def bcrypt_work_factor(self) -> int:
        # 4 is the lowest round count bcrypt accepts
        return 4 if self.is_testing else 12

    def database_uri(self) -> str:
        """
        Resolve the database URL from the environment at call time.
        The testing environment always gets its own database.
        """
        if os.getenv("APP_ENV", self.environment) == "testing":
            return os.getenv("TEST_DATABASE_URL", "sqlite:///./jobly_test.db")
        return os.getenv("DATABASE_URL", "sqlite:///./jobly.db")


settings = Config()

# --- Startup Validation for Production ---
_logger = logging.getLogger(__name__)
if settings.environment not in ("development", "testing"):
    if settings.secret_key == DEFAULT_SECRET_KEY:
        raise RuntimeError(
            "FATAL: SECRET_KEY must be set for non-development environments. "
            "Set it as an environment variable."
        )
elif settings.secret_key == DEFAULT_SECRET_KEY:
    _logger.warning("⚠ Using insecure default SECRET_KEY; only acceptable in development.")


def describe_settings(config: Config = settings) -> dict:
    """Effective configuration for the startup log, with the secret masked."""
    return {
        "environment": config.environment,
        "port": config.port,
        "secret_key": config.secret_key[:2] + "***",
        "bcrypt_work_factor": config.bcrypt_work_factor,
        "database": config.database_uri(),
    }
