from __future__ import annotations

STATIONS_PROMPT_TEMPLATE = """Find the 3 nearest EV charging stations to my location ({latitude}, {longitude}).

For each station, strictly output a single line with this format:
Name|Address|Rating|Status

- Name: Name of the station
- Address: Full address
- Rating: Number (e.g., 4.5), or "N/A" if not available
- Status: "Open" if currently open, "Closed" if closed, or "Unknown"

Do not add introductory text or markdown styling like bolding. Just the list of pipe-separated values."""


def build_stations_prompt(latitude: float, longitude: float) -> str:
    return STATIONS_PROMPT_TEMPLATE.format(latitude=latitude, longitude=longitude)
