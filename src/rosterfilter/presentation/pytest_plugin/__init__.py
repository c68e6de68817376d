"""pytest plugin for rosterfilter.

Provides fixtures for filter testing:
    filter_roster: Roster under test (override in conftest.py)
    filter_catalogs: Options generated from filter_roster
    filter_session: Fresh FilterSession over filter_roster
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterfilter.presentation.pytest_plugin.fixtures import (
    filter_catalogs,
    filter_roster,
    filter_session,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "filter_catalogs",
    "filter_roster",
    "filter_session",
]


def pytest_configure(config: pytest.Config) -> None:
    """Register rosterfilter markers."""
    config.addinivalue_line(
        "markers",
        "roster: mark test as evaluating filters against a roster",
    )
