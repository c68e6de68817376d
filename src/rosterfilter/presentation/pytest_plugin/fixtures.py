"""pytest fixtures for filter testing.

User overrides filter_roster in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rosterfilter.application.catalog.generator import generate_options
from rosterfilter.domain.model.roster import Roster
from rosterfilter.presentation.api.session import FilterSession

if TYPE_CHECKING:
    from rosterfilter.domain.model.options import OptionCatalogs


@pytest.fixture
def filter_roster() -> Roster:
    """Roster under test.

    User overrides this fixture in their conftest.py.

    Returns:
        Empty Roster
    """
    return Roster.empty()


@pytest.fixture
def filter_catalogs(filter_roster: Roster) -> OptionCatalogs:
    """Options generated from filter_roster."""
    return generate_options(filter_roster)


@pytest.fixture
def filter_session(filter_roster: Roster) -> FilterSession:
    """Fresh session over filter_roster with an empty collection."""
    return FilterSession(filter_roster)
