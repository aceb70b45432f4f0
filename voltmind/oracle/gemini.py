from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from google.genai import types
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage

from voltmind.oracle.interface import GroundedResponse, Oracle, OracleError

logger = logging.getLogger(__name__)


class GeminiOracle(Oracle):
    """Oracle backed by Google Gemini through LangChain."""

    def __init__(self, llm: BaseChatModel) -> None:
        self._llm = llm

    async def estimate(self, prompt: str, response_schema: Mapping[str, Any]) -> str:
        structured_llm = self._llm.bind(
            response_mime_type="application/json",
            response_schema=dict(response_schema),
        )

        start = time.monotonic()
        message = await structured_llm.ainvoke(prompt)
        logger.debug("Estimate call took %.2fs", time.monotonic() - start)

        text = _message_text(message)
        if not text:
            raise OracleError("No data returned from Gemini")
        return text

    async def find_stations(
        self, prompt: str, latitude: float, longitude: float
    ) -> GroundedResponse:
        # Maps grounding, seeded with the caller's position
        grounded_llm = self._llm.bind(
            tools=[types.Tool(google_maps=types.GoogleMaps())],
            tool_config=types.ToolConfig(
                retrieval_config=types.RetrievalConfig(
                    lat_lng=types.LatLng(latitude=latitude, longitude=longitude),
                ),
            ),
        )

        start = time.monotonic()
        message = await grounded_llm.ainvoke(prompt)
        logger.debug("Station call took %.2fs", time.monotonic() - start)

        return GroundedResponse(
            text=_message_text(message) or None,
            grounding_chunks=_grounding_chunks(message),
        )


def _message_text(message: BaseMessage) -> str:
    content = message.content
    if isinstance(content, str):
        return content
    # Multi-part content: keep only the text blocks
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif block.get("type") == "text":
            parts.append(str(block.get("text", "")))
    return "".join(parts)


def _grounding_chunks(message: BaseMessage) -> tuple[Mapping[str, Any], ...]:
    metadata = _as_mapping(message.response_metadata.get("grounding_metadata"))
    chunks = metadata.get("grounding_chunks") or metadata.get("groundingChunks") or []
    return tuple(_as_mapping(chunk) for chunk in chunks)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    if hasattr(value, "model_dump"):
        dumped: Mapping[str, Any] = value.model_dump(exclude_none=True)
        return dumped
    return {}
