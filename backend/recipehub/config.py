"""
RecipeHub Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the database bootstrap, main, and logging setup.

The MongoDB connection string is either given whole (MONGODB_URI) or
assembled from DB_USER / DB_PASS and the Atlas cluster host.
"""

from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults except the database credentials,
    which must come from the environment when MONGODB_URI is not set.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Full connection string; overrides the credential-based Atlas URI below
    mongodb_uri: Optional[str] = Field(default=None)

    db_user: str = Field(default="")
    db_pass: str = Field(default="")
    db_cluster_host: str = Field(default="cluster0.bbgsyar.mongodb.net")
    db_app_name: str = Field(default="Cluster0")

    mongo_db_name: str = Field(default="recipeDB")
    recipes_collection: str = Field(default="recipes")
    users_collection: str = Field(default="users")

    # How long the driver waits for a reachable server before failing an operation
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=100, le=60_000)

    # Startup ping: the server does not begin serving until one succeeds
    mongo_connect_attempts: int = Field(default=5, ge=1, le=50)
    mongo_connect_wait: float = Field(default=1.0, ge=0, le=30)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" accepts any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

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
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def database_uri(self) -> str:
        """
        What:  The URI handed to the Motor client.
        How:   MONGODB_URI wins; otherwise the Atlas SRV URI is built from the
               credentials, percent-escaping user and password.
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.db_cluster_host}/?retryWrites=true&w=majority&appName={self.db_app_name}"
        )

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that the database is reachable in principle.
        When:  Called during app startup (lifespan), before connecting.
        """
        errors = []
        if not self.mongodb_uri:
            if not self.db_user:
                errors.append("DB_USER is not set (or provide MONGODB_URI).")
            if not self.db_pass:
                errors.append("DB_PASS is not set (or provide MONGODB_URI).")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
