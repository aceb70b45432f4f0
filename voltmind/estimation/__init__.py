from __future__ import annotations

__all__ = ["Estimate", "EstimateSource", "EstimationEngine", "fallback_estimate"]

from voltmind.estimation.engine import EstimationEngine, fallback_estimate
from voltmind.estimation.models import Estimate, EstimateSource
