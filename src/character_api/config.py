"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

HOST = "0.0.0.0"
PORT = 8080


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = "INFO"
    log_dir: str = "logs"
    # Optional overrides for the bundled datasets
    names_path: Optional[str] = None
    personality_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("LOG_DIR", "logs"),
            names_path=os.getenv("CHARACTER_NAMES_PATH") or None,
            personality_path=os.getenv("CHARACTER_PERSONALITY_PATH") or None,
        )
