import sys
from enum import Enum
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class NavigationPolicy(str, Enum):
    STRICT = "strict"
    LOOSE = "loose"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    ROSTER_SOURCE: Literal["cosmos", "http"] = "cosmos"

    COSMOS_DB_ENDPOINT: str = ""
    COSMOS_DB_KEY: str = ""
    COSMOS_DB_DATABASE: str = "directory-db"
    COSMOS_DB_EMPLOYEES_CONTAINER: str = "employee"

    ROSTER_API_URL: str = ""
    ROSTER_API_KEY: str = ""
    ROSTER_API_TIMEOUT: float = 30.0

    NAVIGATION_POLICY: NavigationPolicy = NavigationPolicy.STRICT
    AUTO_NAVIGATE_ON_SINGLE_MATCH: bool = False
    SUGGESTION_LIMIT: int = 10
    MATCH_THRESHOLD: float = Field(default=0.3, ge=0.0, le=1.0)

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
