# coxeter_core/coxeter_matrix.py
"""
Coxeter Matrix: Configuration Table of Bond Orders

A Coxeter matrix M over an index set B assigns a bond order to every pair
of generators and encodes the relations (s_i s_j)^{M(i,j)} = 1.

================================================================================
INVARIANTS (checked once, at construction)
================================================================================

- Square:        one row and one column per generator
- Diagonal:      M(i, i) = 1                (s_i is an involution)
- Symmetric:     M(i, j) = M(j, i)
- Off-diagonal:  M(i, j) ≠ 1 for i ≠ j       (else s_i = s_j)
- Entries:       non-negative integers; INFINITY (0) means no relation

Everything downstream assumes a validated matrix and never re-validates.

================================================================================
GENERATOR LABELS
================================================================================

The index set B is arbitrary: generators carry hashable labels (default
0..n-1). Words are sequences of labels; positions are an internal detail
used to address rows of the numpy table.

================================================================================
NAMED FAMILIES
================================================================================

    A(n)  ●─●─●─ … ─●                     symmetric group S_{n+1}
    B(n)  ●─●─ … ─●═●   (last bond 4)     hyperoctahedral group
    D(n)  ●─●─ … ─●<                      fork on the last two nodes
    E6, E7, E8, F4, G2, H3, H4            exceptional types
    I2(m) ●─m─●                           dihedral group of order 2m
"""

from __future__ import annotations
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple
import logging
import math

import numpy as np

from .constants import INFINITY, IDENTITY_BOND
from .errors import InvalidGenerator, MalformedCoxeterMatrix

logger = logging.getLogger(__name__)


class CoxeterMatrix:
    """
    Immutable, validated table of bond orders.

    Attributes:
        generators: Tuple of generator labels (the index set B)
        rank: Number of generators
    """

    __slots__ = ("_table", "_generators", "_positions")

    def __init__(self, table: Any, generators: Optional[Sequence[Hashable]] = None):
        array = np.asarray(table)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise MalformedCoxeterMatrix(f"Coxeter matrix must be square, got shape {array.shape}")
        if array.size and not np.issubdtype(array.dtype, np.integer):
            rounded = np.rint(array)
            if not np.array_equal(rounded, array):
                raise MalformedCoxeterMatrix("Coxeter matrix entries must be integers")
            array = rounded
        array = array.astype(np.int64)

        n = array.shape[0]
        if generators is None:
            generators = tuple(range(n))
        generators = tuple(generators)
        if len(generators) != n:
            raise MalformedCoxeterMatrix(
                f"{len(generators)} generator labels for a {n}x{n} matrix"
            )
        if len(set(generators)) != n:
            raise MalformedCoxeterMatrix("Generator labels must be distinct")

        self._validate(array, generators)

        array.setflags(write=False)
        self._table = array
        self._generators: Tuple[Hashable, ...] = generators
        self._positions: Dict[Hashable, int] = {g: k for k, g in enumerate(generators)}
        logger.debug("validated %dx%d Coxeter matrix", n, n)

    @staticmethod
    def _validate(array: np.ndarray, generators: Tuple[Hashable, ...]) -> None:
        if np.any(array < 0):
            raise MalformedCoxeterMatrix("Coxeter matrix entries must be non-negative")
        bad_diag = np.flatnonzero(np.diag(array) != IDENTITY_BOND)
        if bad_diag.size:
            g = generators[bad_diag[0]]
            raise MalformedCoxeterMatrix(f"Diagonal entry M({g!r}, {g!r}) must be 1")
        asym = np.argwhere(array != array.T)
        if asym.size:
            i, j = asym[0]
            raise MalformedCoxeterMatrix(
                f"Coxeter matrix is not symmetric: M({generators[i]!r}, {generators[j]!r}) = "
                f"{array[i, j]} but M({generators[j]!r}, {generators[i]!r}) = {array[j, i]}"
            )
        off = array.copy()
        np.fill_diagonal(off, INFINITY)
        ones = np.argwhere(off == IDENTITY_BOND)
        if ones.size:
            i, j = ones[0]
            raise MalformedCoxeterMatrix(
                f"Off-diagonal entry M({generators[i]!r}, {generators[j]!r}) must not be 1"
            )

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def generators(self) -> Tuple[Hashable, ...]:
        return self._generators

    @property
    def rank(self) -> int:
        return len(self._generators)

    @property
    def table(self) -> np.ndarray:
        """Read-only integer table indexed by generator positions."""
        return self._table

    def position(self, generator: Hashable) -> int:
        """Row/column of a generator label; InvalidGenerator if unknown."""
        try:
            return self._positions[generator]
        except (KeyError, TypeError):
            raise InvalidGenerator(generator) from None

    def __contains__(self, generator: Hashable) -> bool:
        try:
            return generator in self._positions
        except TypeError:
            return False

    def bond(self, i: Hashable, j: Hashable) -> int:
        """Raw bond order M(i, j); INFINITY (0) for no relation."""
        return int(self._table[self.position(i), self.position(j)])

    def __getitem__(self, pair: Tuple[Hashable, Hashable]) -> int:
        i, j = pair
        return self.bond(i, j)

    def is_finite_bond(self, i: Hashable, j: Hashable) -> bool:
        return self.bond(i, j) != INFINITY

    def relations(self) -> List[Tuple[Hashable, Hashable, int]]:
        """All pairs i < j (by position) with their bond orders."""
        gens = self._generators
        return [
            (gens[a], gens[b], int(self._table[a, b]))
            for a in range(self.rank)
            for b in range(a + 1, self.rank)
        ]

    def bilinear_form(self) -> np.ndarray:
        """
        Symmetric form of the geometric representation.

        B(i, j) = -cos(π / M(i, j)), with B(i, j) = -1 for infinite bonds.
        The diagonal is 1.
        """
        m = self._table.astype(float)
        form = -np.cos(np.pi / np.where(m == INFINITY, 1.0, m))
        form[self._table == INFINITY] = -1.0
        np.fill_diagonal(form, 1.0)
        # cos(π/2) is 6e-17, not 0
        form[self._table == 2] = 0.0
        return form

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, CoxeterMatrix):
            return NotImplemented
        return (self._generators == other._generators and
                np.array_equal(self._table, other._table))

    def __hash__(self):
        return hash((self._generators, self._table.tobytes()))

    def __repr__(self) -> str:
        rows = ", ".join(str(list(map(int, row))) for row in self._table)
        return f"CoxeterMatrix([{rows}], generators={self._generators!r})"

    # -------------------------------------------------------------------------
    # Named families
    # -------------------------------------------------------------------------

    @classmethod
    def from_bonds(cls, rank: int, bonds: Dict[Tuple[int, int], int],
                   generators: Optional[Sequence[Hashable]] = None) -> "CoxeterMatrix":
        """
        Build from a rank and the non-commuting bonds.

        Unlisted off-diagonal pairs commute (bond order 2).
        """
        table = np.full((rank, rank), 2, dtype=np.int64)
        np.fill_diagonal(table, IDENTITY_BOND)
        for (i, j), m in bonds.items():
            table[i, j] = m
            table[j, i] = m
        return cls(table, generators)

    @classmethod
    def A(cls, n: int) -> "CoxeterMatrix":
        """Type A_n: n generators, a path with bonds 3."""
        return cls.from_bonds(n, {(i, i + 1): 3 for i in range(n - 1)})

    @classmethod
    def B(cls, n: int) -> "CoxeterMatrix":
        """Type B_n: path whose last bond is 4."""
        if n < 2:
            raise MalformedCoxeterMatrix("B_n needs n >= 2")
        bonds = {(i, i + 1): 3 for i in range(n - 2)}
        bonds[(n - 2, n - 1)] = 4
        return cls.from_bonds(n, bonds)

    @classmethod
    def D(cls, n: int) -> "CoxeterMatrix":
        """Type D_n: path 0..n-2 with node n-1 attached to n-3."""
        if n < 4:
            raise MalformedCoxeterMatrix("D_n needs n >= 4")
        bonds = {(i, i + 1): 3 for i in range(n - 2)}
        bonds[(n - 3, n - 1)] = 3
        return cls.from_bonds(n, bonds)

    @classmethod
    def E(cls, n: int) -> "CoxeterMatrix":
        """Types E_6, E_7, E_8 (Bourbaki labelling shifted to start at 0)."""
        if n not in (6, 7, 8):
            raise MalformedCoxeterMatrix("E_n is defined for n in 6, 7, 8")
        bonds = {(0, 2): 3, (1, 3): 3, (2, 3): 3}
        bonds.update({(i, i + 1): 3 for i in range(3, n - 1)})
        return cls.from_bonds(n, bonds)

    @classmethod
    def F4(cls) -> "CoxeterMatrix":
        return cls.from_bonds(4, {(0, 1): 3, (1, 2): 4, (2, 3): 3})

    @classmethod
    def G2(cls) -> "CoxeterMatrix":
        return cls.from_bonds(2, {(0, 1): 6})

    @classmethod
    def H3(cls) -> "CoxeterMatrix":
        return cls.from_bonds(3, {(0, 1): 5, (1, 2): 3})

    @classmethod
    def H4(cls) -> "CoxeterMatrix":
        return cls.from_bonds(4, {(0, 1): 5, (1, 2): 3, (2, 3): 3})

    @classmethod
    def I2(cls, m: int) -> "CoxeterMatrix":
        """Dihedral type I_2(m); I2(INFINITY) is the infinite dihedral group."""
        if m == IDENTITY_BOND or m < 0:
            raise MalformedCoxeterMatrix(f"I_2(m) needs m >= 2 or m = INFINITY, got {m}")
        return cls.from_bonds(2, {(0, 1): m})


def bond_order(m: int) -> float:
    """Bond order as a number, with INFINITY mapped to math.inf."""
    return math.inf if m == INFINITY else float(m)
