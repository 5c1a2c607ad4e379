"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Key-value store (Vercel KV / Upstash REST), falls back to plain Redis
    kv_rest_api_url: Optional[str] = None
    kv_rest_api_token: Optional[str] = None
    redis_url: str = "redis://localhost:6379/0"
    store_timeout_seconds: float = 10.0

    # JWT Configuration
    jwt_secret: str = "change_me_secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7

    # Password hashing
    bcrypt_rounds: int = 10

    # SMTP
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    smtp_timeout_seconds: float = 30.0
    mail_from: str = "PhongNews <no-reply@phongnews.local>"
    admin_email: Optional[str] = None
    # Local development: log outgoing mail instead of requiring a relay
    mail_console: bool = False

    # HTTP edge
    public_base_url: Optional[str] = None
    allowed_origin: str = "https://wingovn.netlify.app"

    # Process role: set by the managed host, the app is then imported, not served
    vercel: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"

    @property
    def uses_rest_store(self) -> bool:
        """True when the Upstash REST credentials are configured."""
        return bool(self.kv_rest_api_url and self.kv_rest_api_token)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
