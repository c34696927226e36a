"""
Runtime configuration for the Motopass SEO tool server.
Values are read from the environment, with optional `.env` file support.
"""
import os
from dataclasses import dataclass
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _as_list(value: Optional[str], default: List[str]) -> List[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    facade_port: int = 5000
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: tuple = ("*",)

    @property
    def is_production(self) -> bool:
        """True when an external runtime serves the app and no local listener is bound."""
        return self.environment == "production"


def load_settings() -> Settings:
    """Build a Settings instance from the current environment."""
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        facade_port=int(os.getenv("FACADE_PORT", "5000")),
        environment=os.getenv("ENVIRONMENT", "development").strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(_as_list(os.getenv("CORS_ORIGINS"), ["*"])),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
