from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class FictiveSettings:
    # под тестами все задержки принудительно 0
    testing: bool = False

    @classmethod
    def from_env(cls) -> "FictiveSettings":
        load_dotenv()
        return cls(testing=_env_flag("FICTIVE_TESTING"))


@lru_cache
def get_settings() -> FictiveSettings:
    return FictiveSettings.from_env()
