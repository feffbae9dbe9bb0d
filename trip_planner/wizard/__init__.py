"""
Client-side booking wizard: step state, pricing rules and API submission.
"""

from .pricing import AdditionalServices, HeightBand, PriceBreakdown
from .state import (
    AttractionSelection,
    ServiceChoices,
    Stay,
    TripDay,
    TripDraft,
    TripWizard,
)
from .client import TripPlannerClient

__all__ = [
    "AdditionalServices",
    "HeightBand",
    "PriceBreakdown",
    "AttractionSelection",
    "ServiceChoices",
    "Stay",
    "TripDay",
    "TripDraft",
    "TripWizard",
    "TripPlannerClient",
]
