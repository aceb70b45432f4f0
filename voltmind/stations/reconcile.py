from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import quote

from voltmind.stations.models import GroundingRecord, Station, StationCandidate

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="
MAP_ONLY_NAME = "EV Station"
MAP_ONLY_ADDRESS = "View on Map for details"

# Same set encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def merge_stations(
    candidates: Sequence[StationCandidate],
    records: Sequence[GroundingRecord],
) -> list[Station]:
    """
    Combine parsed candidates with grounding records into final stations.

    Strategy:
    1. With candidates: each keeps its own name/address/rating/status and only
       borrows a link. The record is picked by name (first record whose title
       is contained in the candidate name, case-insensitively), else by
       position. Without a usable link a maps search URL is built.
    2. Without candidates: one station per record, name from its title.

    Output order follows the candidates, or the records in case 2.
    """
    if not candidates:
        return [_station_from_record(record) for record in records]

    return [
        _station_from_candidate(candidate, _match_record(candidate, index, records))
        for index, candidate in enumerate(candidates)
    ]


def build_search_uri(name: str, address: str) -> str:
    return MAPS_SEARCH_URL + quote(f"{name} {address}", safe=_URI_SAFE)


def _match_record(
    candidate: StationCandidate,
    index: int,
    records: Sequence[GroundingRecord],
) -> GroundingRecord | None:
    name = candidate.name.lower()
    for record in records:
        if record.title and record.title.lower() in name:
            return record

    if index < len(records):
        return records[index]
    return None


def _station_from_candidate(
    candidate: StationCandidate, record: GroundingRecord | None
) -> Station:
    uri = record.uri if record is not None else None
    return Station(
        name=candidate.name,
        address=candidate.address,
        rating=candidate.rating,
        open_now=candidate.open_now,
        status=candidate.status,
        uri=uri or build_search_uri(candidate.name, candidate.address),
    )


def _station_from_record(record: GroundingRecord) -> Station:
    return Station(
        name=record.title or MAP_ONLY_NAME,
        address=MAP_ONLY_ADDRESS,
        uri=record.uri,
    )
