"""
Service settings, taken from the process environment.

``settings`` is built once at import; set variables before importing.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    project_name: str
    api_version: str
    debug: bool
    log_level: str
    log_file: Optional[str]
    # Relative paths are resolved against the project root; ``:memory:``
    # keeps everything in process memory.
    database_url: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Developer Social Groups API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            debug=_env_flag("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            database_url=os.getenv("DATABASE_URL", "devgroups.db"),
        )


settings = Settings.from_env()
