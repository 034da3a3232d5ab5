"""
Coxeter Core Module

This module provides the primitives the inversion engine is built on:
- constants / config: bond-order sentinel, numeric tolerances, EngineConfig
- errors: the error taxonomy (MalformedCoxeterMatrix, InvalidGenerator, ...)
- coxeter_matrix: validated table of bond orders and named families
- groups: the group interface with its length oracle, and two realisations
- words: word manipulation and WordEvaluator

================================================================================
LAYERS
================================================================================

LAYER 1: Configuration
- CoxeterMatrix: symmetric, diagonal 1, validated once at construction
- EngineConfig: immutable numeric/validation parameters

LAYER 2: Group (external collaborator)
- CoxeterGroup: one, mul, inv, simple(i), length(w)
- GeometricCoxeterGroup: any Coxeter matrix, Tits representation
- PermutationGroup: symmetric group as type A, exact

LAYER 3: Words
- Word: tuple of generator labels, never mutated
- WordEvaluator: eval(word) = s_{i₁} * … * s_{i_k}
"""

from .constants import INFINITY, IDENTITY_BOND
from .config import EngineConfig, DEFAULT_CONFIG
from .errors import (
    CoxeterError,
    MalformedCoxeterMatrix,
    InvalidGenerator,
    IndexOutOfRange,
    PreconditionViolated,
    GroupContractViolated,
)
from .logging_config import setup_logging, JSONFormatter
from .coxeter_matrix import CoxeterMatrix, bond_order
from .groups import (
    CoxeterGroup,
    GeometricElement,
    GeometricCoxeterGroup,
    PermutationGroup,
)
from .words import (
    Word,
    WordEvaluator,
    as_word,
    erase_at,
    take,
    drop,
    reverse,
    alternating_word,
    braid_word,
)

__version__ = "0.1.0"

__all__ = [
    "INFINITY",
    "IDENTITY_BOND",
    "EngineConfig",
    "DEFAULT_CONFIG",
    "CoxeterError",
    "MalformedCoxeterMatrix",
    "InvalidGenerator",
    "IndexOutOfRange",
    "PreconditionViolated",
    "GroupContractViolated",
    "setup_logging",
    "JSONFormatter",
    "CoxeterMatrix",
    "bond_order",
    "CoxeterGroup",
    "GeometricElement",
    "GeometricCoxeterGroup",
    "PermutationGroup",
    "Word",
    "WordEvaluator",
    "as_word",
    "erase_at",
    "take",
    "drop",
    "reverse",
    "alternating_word",
    "braid_word",
]
