"""Environment-driven settings for the storefront service."""

import os
from typing import Optional

from pydantic import BaseModel, Field

BRAZILIAN_PROVIDER_URL = "http://616d6bdb6dacbb001794ca17.mockapi.io/devnology/brazilian_provider"
EUROPEAN_PROVIDER_URL = "http://616d6bdb6dacbb001794ca17.mockapi.io/devnology/european_provider"


class ProviderSettings(BaseModel):
    """Name and endpoint of one upstream product catalog."""

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


def default_providers() -> list[ProviderSettings]:
    """Return the two default catalogs, in aggregation order."""
    return [
        ProviderSettings(name="brazilian", url=BRAZILIAN_PROVIDER_URL),
        ProviderSettings(name="european", url=EUROPEAN_PROVIDER_URL),
    ]


class Settings(BaseModel):
    """Runtime configuration of the service.

    Attributes:
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        database_path: SQLite file holding the purchases table.
        providers: Upstream catalogs; their order is the aggregation order.
        provider_timeout: Seconds before an upstream fetch is abandoned, None for no timeout.
        cors_allow_origins: Origins allowed by the CORS middleware.
        log_level: Minimum level written to the log sinks.
        log_file: Optional rotating log file.
    """

    host: str = "0.0.0.0"
    port: int = Field(3000, gt=0, le=65535)
    database_path: str = "./database.db"
    providers: list[ProviderSettings] = Field(default_factory=default_providers, min_length=1)
    provider_timeout: Optional[float] = Field(None, gt=0)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        timeout = os.getenv("PROVIDER_TIMEOUT")
        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            database_path=os.getenv("DATABASE_PATH", "./database.db"),
            providers=[
                ProviderSettings(
                    name="brazilian", url=os.getenv("BRAZILIAN_PROVIDER_URL", BRAZILIAN_PROVIDER_URL)
                ),
                ProviderSettings(
                    name="european", url=os.getenv("EUROPEAN_PROVIDER_URL", EUROPEAN_PROVIDER_URL)
                ),
            ],
            provider_timeout=float(timeout) if timeout else None,
            cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
        )
