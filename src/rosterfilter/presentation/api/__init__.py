"""Stateful API over the pure filter engine.

Public exports:
    FilterSession: Filter collection holder bound to one roster
"""

from rosterfilter.presentation.api.session import FilterSession

__all__ = ["FilterSession"]
