from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Self


class OracleBackend(enum.Enum):
    GEMINI = "gemini"
    STUB = "stub"


@dataclass(frozen=True)
class OracleConfig:
    backend: OracleBackend = OracleBackend.GEMINI
    model: str = "gemini-2.5-flash"
    api_key: str | None = None
    temperature: float = 0.0

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            backend=OracleBackend(os.environ.get("VOLTMIND_ORACLE", "gemini")),
            model=os.environ.get("VOLTMIND_ORACLE_MODEL", cls.model),
            api_key=os.environ.get("GOOGLE_API_KEY"),
        )
