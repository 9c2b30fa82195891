from __future__ import annotations
import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from .errors import ConfigError

TOKENIZERS: Tuple[str, ...] = ("simple", "unicode")

ENV_TOKENIZER = "WCOUNT_TOKENIZER"
ENV_LOG_LEVEL = "WCOUNT_LOG_LEVEL"


@dataclass(frozen=True)
class Config:
    case_sensitive: bool = False
    by_frequency: bool = False
    tokenizer: str = "simple"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.tokenizer not in TOKENIZERS:
            raise ConfigError(
                f"Unknown tokenizer {self.tokenizer!r} (expected one of: {', '.join(TOKENIZERS)})"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level {self.log_level!r}")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Build a Config from WCOUNT_* environment variables.

        Args:
            environ: mapping to read instead of ``os.environ`` (tests pass a dict).
            **overrides: field values that win over the environment (CLI flags).
        """
        env = os.environ if environ is None else environ
        base = cls(
            tokenizer=env.get(ENV_TOKENIZER, "simple").strip().lower() or "simple",
            log_level=env.get(ENV_LOG_LEVEL, "WARNING").strip() or "WARNING",
        )
        return replace(base, **overrides) if overrides else base
