from __future__ import annotations

from typing import Any

ESTIMATE_PROMPT_TEMPLATE = """I have an Electric Vehicle (Generic Sedan).
Current Battery: {battery_percentage}%.
Current Time: {timestamp_label}.

Please estimate:
1. Remaining Range in KM (assume avg efficiency).
2. Remaining Time in Hours (assuming highway driving at 90km/h).
3. A short, 1-sentence note about efficiency based on time of day or typical conditions."""

ESTIMATE_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "rangeKm": {"type": "number"},
        "timeLeftHours": {"type": "number"},
        "efficiencyNote": {"type": "string"},
    },
    "required": ["rangeKm", "timeLeftHours", "efficiencyNote"],
}


def build_estimate_prompt(battery_percentage: int, timestamp_label: str) -> str:
    return ESTIMATE_PROMPT_TEMPLATE.format(
        battery_percentage=battery_percentage,
        timestamp_label=timestamp_label,
    )
