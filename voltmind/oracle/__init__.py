from __future__ import annotations

__all__ = [
    "GeminiOracle",
    "GroundedResponse",
    "Oracle",
    "OracleBackend",
    "OracleConfig",
    "OracleError",
    "StubOracle",
    "create_oracle",
]

from typing import Any

from voltmind.oracle.config import OracleBackend, OracleConfig
from voltmind.oracle.gemini import GeminiOracle
from voltmind.oracle.interface import GroundedResponse, Oracle, OracleError
from voltmind.oracle.stub import StubOracle


def create_oracle(config: OracleConfig) -> Oracle:
    """Create the oracle adapter selected by ``config``."""
    if config.backend is OracleBackend.STUB:
        return StubOracle()

    from langchain_google_genai import ChatGoogleGenerativeAI

    options: dict[str, Any] = {"model": config.model, "temperature": config.temperature}
    if config.api_key:
        options["google_api_key"] = config.api_key
    return GeminiOracle(ChatGoogleGenerativeAI(**options))
