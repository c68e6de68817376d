"""rosterfilter - composable typed filters for selecting people from a roster."""

__version__ = "0.1.0"

from rosterfilter.presentation.api.session import FilterSession

__all__ = ["FilterSession", "__version__"]
