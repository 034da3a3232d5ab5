# coxeter_core/config.py
"""
Engine configuration.

A single immutable EngineConfig is injected into group realisations and
into CoxeterSystem. There is no global mutable state: a different config
means a different system object.
"""

from dataclasses import dataclass

from .constants import (
    ROUND_DECIMALS,
    ROOT_TOLERANCE,
    MAX_LENGTH,
    RELATION_CHECK_LIMIT,
)


@dataclass(frozen=True)
class EngineConfig:
    """Numeric and validation parameters."""
    round_decimals: int = ROUND_DECIMALS
    root_tolerance: float = ROOT_TOLERANCE
    max_length: int = MAX_LENGTH
    relation_check_limit: int = RELATION_CHECK_LIMIT
    validate_relations: bool = True

    def __post_init__(self):
        if self.round_decimals <= 0:
            raise ValueError("round_decimals must be positive")
        if self.root_tolerance <= 0:
            raise ValueError("root_tolerance must be positive")
        if self.max_length <= 0:
            raise ValueError("max_length must be positive")
        if self.relation_check_limit < 2:
            raise ValueError("relation_check_limit must be at least 2")


DEFAULT_CONFIG = EngineConfig()
