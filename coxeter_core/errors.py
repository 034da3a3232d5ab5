# coxeter_core/errors.py
"""
Error taxonomy for the Coxeter engine.

Every failure is a caller contract violation detected at (or before) the
call that receives the bad input:

- MalformedCoxeterMatrix: configuration-time, raised once by CoxeterMatrix
- InvalidGenerator: a word names a letter outside the index set
- IndexOutOfRange: indexed access past the end of a word or sequence
- PreconditionViolated: a guarantee that needs a reduced word got a
  non-reduced one
- GroupContractViolated: a group realisation breaks s_i^2 = 1 or a braid
  relation of its matrix
"""

from typing import Any, Optional


class CoxeterError(Exception):
    """Base class for all engine errors."""


class MalformedCoxeterMatrix(CoxeterError, ValueError):
    """Matrix is not square, not symmetric, or has a bad entry."""


class InvalidGenerator(CoxeterError, ValueError):
    """A word references an index that is not a generator."""

    def __init__(self, generator: Any, message: Optional[str] = None):
        self.generator = generator
        super().__init__(message or f"{generator!r} is not a generator of this system")


class IndexOutOfRange(CoxeterError, IndexError):
    """Indexed access beyond the end of a word or inversion sequence."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for length {length}")


class PreconditionViolated(CoxeterError):
    """Operation requires a reduced word."""

    def __init__(self, word: Any, length: int, message: Optional[str] = None):
        self.word = word
        self.length = length
        super().__init__(
            message or f"word {tuple(word)!r} is not reduced: "
                       f"ℓ = {length} < {len(word)} letters"
        )


class GroupContractViolated(CoxeterError):
    """Group realisation does not satisfy the relations of its matrix."""
