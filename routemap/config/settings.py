import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    routes_file: Optional[str] = None
    admin_prefix: str = "/__"


def load_settings() -> Settings:
    # Load environment variables from .env file
    load_dotenv()

    return Settings(
        host=os.getenv("ROUTEMAP_HOST", Settings.host),
        port=int(os.getenv("ROUTEMAP_PORT", Settings.port)),
        log_level=os.getenv("ROUTEMAP_LOG_LEVEL", Settings.log_level),
        routes_file=os.getenv("ROUTEMAP_ROUTES_FILE") or None,
        admin_prefix=os.getenv("ROUTEMAP_ADMIN_PREFIX", Settings.admin_prefix),
    )
