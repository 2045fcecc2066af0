"""
ActivityHive Backend — Application Configuration
=================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a `.env`
       key-value file), validates types/ranges, and provides a singleton
       `settings` object.
Who:   Imported by the app factory, the store connector and the entry point.
When:  Loaded once at module import time.

Connection string assembly:
    <prefix><user>:<password>@<host>/?<params>

    The username and password are percent-encoded with quote_plus so that
    characters like '@', ':' or '/' in a password cannot break the URI.
    Credentials are omitted entirely when no username is configured
    (typical for a local mongod), and the query string is omitted when
    there are no extra params.
"""

from typing import List
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for a local MongoDB instance.
    Attributes are grouped by concern for readability.
    """

    # ── MongoDB ───────────────────────────────────────────────────────────
    # What: Scheme portion of the URI, e.g. "mongodb://" or "mongodb+srv://"
    mongo_prefix: str = Field(default="mongodb://")

    mongo_username: str = Field(default="")
    mongo_password: str = Field(default="")

    # What: Host (and optional port) or cluster address after the '@'
    mongo_host: str = Field(default="localhost:27017")

    # What: Extra connection options, without the leading '?'
    # Example: "retryWrites=true&w=majority"
    mongo_params: str = Field(default="")

    mongo_db_name: str = Field(default="activityhive")

    # What: How long the startup ping waits for a reachable server
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=100, le=120_000)

    @property
    def connection_string(self) -> str:
        """Assembled MongoDB URI with percent-encoded credentials."""
        return self._build_connection_string(redact=False)

    @property
    def redacted_connection_string(self) -> str:
        """Same URI with the password masked, safe to write to logs."""
        return self._build_connection_string(redact=True)

    def _build_connection_string(self, redact: bool) -> str:
        credentials = ""
        if self.mongo_username:
            credentials = quote_plus(self.mongo_username)
            if self.mongo_password:
                password = "****" if redact else quote_plus(self.mongo_password)
                credentials = f"{credentials}:{password}"
            credentials += "@"

        uri = f"{self.mongo_prefix}{credentials}{self.mongo_host}/"
        params = self.mongo_params.lstrip("?")
        if params:
            uri = f"{uri}?{params}"
        return uri

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_enabled: bool = Field(default=True)

    # Format: Comma-separated origins, "*" for any
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGO_HOST and mongo_host both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
