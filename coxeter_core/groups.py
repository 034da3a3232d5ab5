# coxeter_core/groups.py
"""
Group Realisations: the GroupInterface and the Length Oracle

The inversion engine treats the group W as opaque: it needs one, mul, inv,
the simple generators s : B → W and the length function ℓ : W → ℕ. This
module fixes that contract as an abstract base class and provides two
realisations the engine can run against.

================================================================================
CONTRACT
================================================================================

Group:
- one()                 identity element
- mul(a, b)             associative product
- inv(a)                inv(inv(a)) = a,  a * inv(a) = one
- simple(i)             s_i, with s_i * s_i = one and the braid relations
- elements are hashable value objects with decidable equality

Length oracle:
- length(one) = 0
- length(a * b) <= length(a) + length(b)
- length(w * t) ≢ length(w)  (mod 2)  for every reflection t
- i is a right descent of w  iff  length(w * s_i) < length(w)

================================================================================
REALISATIONS
================================================================================

GeometricCoxeterGroup
    Any Coxeter matrix. Elements are matrices of the Tits geometric
    representation σ_i(v) = v - 2 B(α_i, v) α_i. Column i of w is w(α_i),
    and i is a right descent of w iff w(α_i) is a negative root. The length
    is the number of descents stripped before reaching the identity.

PermutationGroup
    Symmetric group S_n as type A_{n-1}, exact integer arithmetic.
    Elements are permutations in word notation (x(0), ..., x(n-1)) and
    the length is the number of inversions.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Tuple
import logging

import numpy as np

from .config import EngineConfig, DEFAULT_CONFIG
from .coxeter_matrix import CoxeterMatrix
from .errors import CoxeterError, InvalidGenerator

logger = logging.getLogger(__name__)


# =============================================================================
# SECTION 1: Abstract Interface
# =============================================================================

class CoxeterGroup(ABC):
    """
    Abstract group W generated by the involutions s_i of a Coxeter matrix,
    bundled with its length oracle.
    """

    def __init__(self, matrix: CoxeterMatrix, config: EngineConfig = DEFAULT_CONFIG):
        self.matrix = matrix
        self.config = config

    @property
    def generators(self) -> Tuple[Hashable, ...]:
        return self.matrix.generators

    @abstractmethod
    def one(self) -> Any:
        """Identity element."""
        pass

    @abstractmethod
    def mul(self, a: Any, b: Any) -> Any:
        """Product a * b."""
        pass

    @abstractmethod
    def inv(self, a: Any) -> Any:
        """Inverse a⁻¹."""
        pass

    @abstractmethod
    def simple(self, generator: Hashable) -> Any:
        """Simple generator s_i; InvalidGenerator for unknown labels."""
        pass

    @abstractmethod
    def length(self, w: Any) -> int:
        """Length oracle ℓ(w)."""
        pass

    def is_one(self, w: Any) -> bool:
        return w == self.one()

    def conjugate(self, w: Any, t: Any) -> Any:
        """w * t * w⁻¹"""
        return self.mul(self.mul(w, t), self.inv(w))

    def power(self, w: Any, k: int) -> Any:
        """w^k for any integer k, by repeated squaring."""
        if k < 0:
            w, k = self.inv(w), -k
        result = self.one()
        base = w
        while k:
            if k & 1:
                result = self.mul(result, base)
            base = self.mul(base, base)
            k >>= 1
        return result

    def is_right_descent(self, w: Any, generator: Hashable) -> bool:
        return self.length(self.mul(w, self.simple(generator))) < self.length(w)

    def is_left_descent(self, w: Any, generator: Hashable) -> bool:
        return self.length(self.mul(self.simple(generator), w)) < self.length(w)


# =============================================================================
# SECTION 2: Geometric Representation (any Coxeter matrix)
# =============================================================================

class GeometricElement:
    """
    Element of the geometric representation.

    Equality and hashing use the matrix rounded to a fixed number of
    decimals, so products that agree up to floating-point noise compare
    equal.
    """

    __slots__ = ("matrix", "_key")

    def __init__(self, matrix: np.ndarray, decimals: int):
        matrix = np.array(matrix, dtype=float)
        matrix.setflags(write=False)
        self.matrix = matrix
        # + 0.0 folds -0.0 into 0.0
        key = np.round(matrix, decimals) + 0.0
        self._key = (matrix.shape, key.tobytes())

    def __eq__(self, other):
        if not isinstance(other, GeometricElement):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self) -> str:
        return f"GeometricElement({np.round(self.matrix, 4).tolist()})"


class GeometricCoxeterGroup(CoxeterGroup):
    """
    Coxeter group realised by the Tits geometric representation.

    Works for every Coxeter matrix, finite or infinite. Simple roots are the
    standard basis vectors; a root is negative iff all its coordinates are
    non-positive, which is read off its coordinate sum.
    """

    def __init__(self, matrix: CoxeterMatrix, config: EngineConfig = DEFAULT_CONFIG):
        super().__init__(matrix, config)
        self.form = matrix.bilinear_form()
        n = matrix.rank
        self._identity = GeometricElement(np.eye(n), config.round_decimals)
        self._reflections: Dict[Hashable, np.ndarray] = {}
        for k, g in enumerate(matrix.generators):
            s = np.eye(n)
            s[k, :] -= 2.0 * self.form[k, :]
            s.setflags(write=False)
            self._reflections[g] = s
        self._simples = {
            g: GeometricElement(s, config.round_decimals)
            for g, s in self._reflections.items()
        }

    def _wrap(self, matrix: np.ndarray) -> GeometricElement:
        return GeometricElement(matrix, self.config.round_decimals)

    def one(self) -> GeometricElement:
        return self._identity

    def mul(self, a: GeometricElement, b: GeometricElement) -> GeometricElement:
        return self._wrap(a.matrix @ b.matrix)

    def inv(self, a: GeometricElement) -> GeometricElement:
        return self._wrap(np.linalg.inv(a.matrix))

    def simple(self, generator: Hashable) -> GeometricElement:
        try:
            return self._simples[generator]
        except (KeyError, TypeError):
            raise InvalidGenerator(generator) from None

    def _descent_positions(self, matrix: np.ndarray) -> np.ndarray:
        return np.flatnonzero(matrix.sum(axis=0) < -self.config.root_tolerance)

    def is_right_descent(self, w: GeometricElement, generator: Hashable) -> bool:
        k = self.matrix.position(generator)
        return bool(w.matrix[:, k].sum() < -self.config.root_tolerance)

    def length(self, w: GeometricElement) -> int:
        """
        Strip right descents until none are left.

        Each step w ↦ w s_i with i a right descent lowers the length by one,
        and only the identity has no right descent.
        """
        current = np.array(w.matrix)
        gens = self.matrix.generators
        count = 0
        while True:
            descents = self._descent_positions(current)
            if descents.size == 0:
                break
            current = current @ self._reflections[gens[descents[0]]]
            count += 1
            if count > self.config.max_length:
                raise CoxeterError(
                    f"length computation exceeded max_length={self.config.max_length}"
                )
        return count

    def __repr__(self) -> str:
        return f"GeometricCoxeterGroup(rank={self.matrix.rank})"


# =============================================================================
# SECTION 3: Permutation Representation (type A)
# =============================================================================

class PermutationGroup(CoxeterGroup):
    """
    Symmetric group S_degree with simple generators s_i = (i i+1).

    Permutations are tuples in word notation. The product a * b is the
    composition "apply b, then a": (a * b)[k] = a[b[k]].
    """

    def __init__(self, degree: int, config: EngineConfig = DEFAULT_CONFIG):
        if degree < 1:
            raise ValueError(f"degree must be positive, got {degree}")
        super().__init__(CoxeterMatrix.A(degree - 1), config)
        self.degree = degree
        self._identity = tuple(range(degree))
        self._simples: Dict[Hashable, Tuple[int, ...]] = {}
        for i in range(degree - 1):
            perm = list(range(degree))
            perm[i], perm[i + 1] = perm[i + 1], perm[i]
            self._simples[i] = tuple(perm)

    def one(self) -> Tuple[int, ...]:
        return self._identity

    def mul(self, a: Tuple[int, ...], b: Tuple[int, ...]) -> Tuple[int, ...]:
        return tuple(np.asarray(a)[np.asarray(b)].tolist())

    def inv(self, a: Tuple[int, ...]) -> Tuple[int, ...]:
        return tuple(np.argsort(np.asarray(a)).tolist())

    def simple(self, generator: Hashable) -> Tuple[int, ...]:
        try:
            return self._simples[generator]
        except (KeyError, TypeError):
            raise InvalidGenerator(generator) from None

    def length(self, w: Tuple[int, ...]) -> int:
        """Number of inversions: pairs p < q with w[p] > w[q]."""
        arr = np.asarray(w)
        if arr.size < 2:
            return 0
        return int(np.triu(arr[:, None] > arr[None, :], k=1).sum())

    def is_right_descent(self, w: Tuple[int, ...], generator: Hashable) -> bool:
        self.simple(generator)
        return w[generator] > w[generator + 1]

    def transposition(self, i: int, j: int) -> Tuple[int, ...]:
        """The transposition (i j), a reflection of S_degree."""
        if not (0 <= i < self.degree and 0 <= j < self.degree) or i == j:
            raise ValueError(f"({i} {j}) is not a transposition of S_{self.degree}")
        perm = list(range(self.degree))
        perm[i], perm[j] = perm[j], perm[i]
        return tuple(perm)

    def __repr__(self) -> str:
        return f"PermutationGroup(degree={self.degree})"
