from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class OracleError(Exception):
    """Raised by an adapter when the remote model gives nothing usable."""


@dataclass(frozen=True)
class GroundedResponse:
    """Free-text answer plus the raw grounding chunks that came with it."""

    text: str | None
    grounding_chunks: tuple[Mapping[str, Any], ...] = ()


class Oracle(ABC):
    """Narrow boundary to the generative model.

    Adapters only move text in and out; parsing and fallback live in the
    estimation and station pipelines.
    """

    @abstractmethod
    async def estimate(self, prompt: str, response_schema: Mapping[str, Any]) -> str:
        """Return the raw JSON text of an answer constrained to ``response_schema``."""

    @abstractmethod
    async def find_stations(
        self, prompt: str, latitude: float, longitude: float
    ) -> GroundedResponse:
        """Return a location-grounded answer for ``prompt``."""
