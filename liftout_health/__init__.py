"""Culture-fit assessment and integration health tracking for team liftouts."""

from .culture_profile import CultureProfile
from .integration_tracker import IntegrationTracker

__all__ = [
    "CultureProfile",
    "IntegrationTracker",
]
