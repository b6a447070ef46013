"""Settings read from the environment."""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    database_url: str
    pool_min: int = 1
    pool_max: int = 10
    server_addr: str = "127.0.0.1:8080"
    log_level: str = "INFO"
    log_dir: str = "logs"

    @classmethod
    def from_env(cls):
        """Build settings from DATABASE_URL, DB_POOL_MIN/MAX, SERVER_ADDR, LOG_LEVEL, LOG_DIR."""
        database_url = os.environ.get("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL must be set")
        return cls(
            database_url=database_url,
            pool_min=int(os.environ.get("DB_POOL_MIN", "1")),
            pool_max=int(os.environ.get("DB_POOL_MAX", "10")),
            server_addr=os.environ.get("SERVER_ADDR", "127.0.0.1:8080"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            log_dir=os.environ.get("LOG_DIR", "logs"),
        )

    @property
    def host(self) -> str:
        return self.server_addr.rsplit(":", 1)[0]

    @property
    def port(self) -> int:
        return int(self.server_addr.rsplit(":", 1)[1])
