"""Shared fixtures.

The rosterfilter plugin is loaded through its pytest11 entry point when
the package is installed; a source checkout registers it here.
"""

import pytest

from rosterfilter.domain.model.roster import Roster
from tests.factories import sample_roster


def pytest_configure(config: pytest.Config) -> None:
    if not config.pluginmanager.has_plugin("rosterfilter"):
        config.pluginmanager.import_plugin("rosterfilter.presentation.pytest_plugin")


@pytest.fixture
def roster() -> Roster:
    """Sample organization, see tests.factories.sample_roster."""
    return sample_roster()
