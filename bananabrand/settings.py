"""
Runtime settings, read from the environment (and .env via python-dotenv,
loaded by the CLI entry point).

Env vars:
  GEMINI_API_KEY          required for any API call (API_KEY also accepted)
  BANANABRAND_MODEL       image model id, default gemini-2.5-flash-image
  BANANABRAND_OUTPUT_DIR  where saved images go, default ./outputs
  LOG_LEVEL               default INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_OUTPUT_DIR = Path("outputs")


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    output_dir: Path = DEFAULT_OUTPUT_DIR
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("GEMINI_API_KEY") or env.get("API_KEY") or None,
            model=env.get("BANANABRAND_MODEL") or DEFAULT_MODEL,
            output_dir=Path(env.get("BANANABRAND_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY not set in environment / .env")
        return self.api_key
