"""Engine configuration.

Immutable, validated at construction. Every engine entry point accepts
an optional EngineConfig; None means defaults.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Engine configuration DTO.

    Attributes:
        max_selections: Max filters in one collection. Creating a new
            filter beyond it is ignored; extending an existing attribute
            filter is not limited.
        candidate_value_limit: Max candidate values listed for string
            and date attributes.
        fail_open_on_unknown_operator: Evaluate an unrecognized operator
            as satisfied. Default False: unrecognized operators fail closed.
    """

    max_selections: int = 50
    candidate_value_limit: int = 20
    fail_open_on_unknown_operator: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_selections < 1:
            raise ValueError(f"max_selections must be >= 1, got {self.max_selections}")
        if self.candidate_value_limit < 1:
            raise ValueError(f"candidate_value_limit must be >= 1, got {self.candidate_value_limit}")


DEFAULT_CONFIG = EngineConfig()
