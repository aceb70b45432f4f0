from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from voltmind.stations.models import GroundingRecord, StationCandidate, StationStatus

_FIELD_SEPARATOR = "|"
_MIN_FIELDS = 3

DEFAULT_NAME = "Unknown Station"
DEFAULT_ADDRESS = "Address unavailable"

# Leading decimal number, e.g. "4.5", "4.5 stars", ".5", "4e0"
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_candidates(text: str) -> list[StationCandidate]:
    """Parse every ``Name|Address|Rating|Status`` line out of ``text``.

    Lines with fewer than three fields are skipped; everything else (prose,
    markdown, blank lines) is ignored.
    """
    candidates: list[StationCandidate] = []
    for line in text.split("\n"):
        candidate = parse_candidate_line(line)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def parse_candidate_line(line: str) -> StationCandidate | None:
    if _FIELD_SEPARATOR not in line:
        return None

    parts = [part.strip() for part in line.split(_FIELD_SEPARATOR)]
    if len(parts) < _MIN_FIELDS:
        return None

    return StationCandidate(
        name=parts[0] or DEFAULT_NAME,
        address=parts[1] or DEFAULT_ADDRESS,
        rating=parse_rating(parts[2]),
        status=parse_status(parts[3] if len(parts) > 3 else ""),
    )


def parse_rating(raw: str) -> float | None:
    match = _NUMBER_PATTERN.match(raw.strip())
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_status(raw: str) -> StationStatus:
    lowered = raw.lower()
    if "open" in lowered:
        return StationStatus.OPEN
    if "closed" in lowered:
        return StationStatus.CLOSED
    return StationStatus.UNKNOWN


def parse_grounding_records(
    chunks: Iterable[Mapping[str, Any]],
) -> list[GroundingRecord]:
    """Pull the map references out of raw grounding chunks.

    Only the ``maps`` entry of a chunk is used (web chunks are ignored), and
    references carrying neither a title nor a uri are dropped.
    """
    records: list[GroundingRecord] = []
    for chunk in chunks:
        place = chunk.get("maps")
        if not isinstance(place, Mapping):
            continue
        title = place.get("title") or None
        uri = place.get("uri") or None
        if title is None and uri is None:
            continue
        records.append(GroundingRecord(title=title, uri=uri))
    return records
