from __future__ import annotations

import os
from dotenv import load_dotenv
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

load_dotenv()

ENV_PREFIX = "FLIPBOT_"


class TieBreak(str, Enum):
    # Keep the first move with the best score, in move enumeration order.
    FIRST = "first"

    # Flip a coin whenever a later move scores exactly as well as the best so far.
    RANDOM = "random"


class ExecutorKind(str, Enum):
    PROCESS = "process"
    THREAD = "thread"


class SearchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    depth: int = Field(default=3, ge=0)
    corner_bonus: float = 2500
    depth_exponent: float = Field(default=0, ge=0)
    zero_disc_bonus: float = 0
    tie_break: TieBreak = TieBreak.FIRST
    seed: Optional[int] = None
    corner_shortcut: bool = True
    executor: ExecutorKind = ExecutorKind.PROCESS
    max_workers: Optional[int] = Field(default=None, ge=1)


# Maps environment variable suffixes to SearchConfig fields.
SEARCH_CONFIG_ENV = {
    "SEARCH_DEPTH": "depth",
    "CORNER_BONUS": "corner_bonus",
    "DEPTH_EXPONENT": "depth_exponent",
    "ZERO_DISC_BONUS": "zero_disc_bonus",
    "TIE_BREAK": "tie_break",
    "SEED": "seed",
    "CORNER_SHORTCUT": "corner_shortcut",
    "EXECUTOR": "executor",
    "MAX_WORKERS": "max_workers",
}


def get_search_config(**overrides: Any) -> SearchConfig:
    values: dict[str, Any] = {}

    for suffix, field in SEARCH_CONFIG_ENV.items():
        raw = os.getenv(ENV_PREFIX + suffix)
        if raw is not None and raw != "":
            values[field] = raw

    for field, value in overrides.items():
        if value is not None:
            values[field] = value

    return SearchConfig(**values)


def get_verbose() -> bool:
    return os.getenv("FLIPBOT_VERBOSE", "0") != "0"
