"""Reporters for filter collections and evaluation results."""

from rosterfilter.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
