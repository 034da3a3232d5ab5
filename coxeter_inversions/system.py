"""
Coxeter System Module

Bundles a Coxeter matrix, a group realisation, its length oracle and the
engine configuration into one context object that is passed explicitly to
every engine component.
"""

from typing import Any, Hashable, Iterable, List, Optional
import logging

from coxeter_core import (
    CoxeterMatrix,
    CoxeterGroup,
    GeometricCoxeterGroup,
    PermutationGroup,
    WordEvaluator,
    EngineConfig,
    DEFAULT_CONFIG,
    GroupContractViolated,
    INFINITY,
)

logger = logging.getLogger(__name__)


class CoxeterSystem:
    """
    A group together with its simple generators and length function.

    Read-only once constructed; safe to share between threads.

    Attributes:
        matrix: The validated Coxeter matrix
        group: Realisation of W (one, mul, inv, simple, length)
        evaluator: WordEvaluator over the group
        config: EngineConfig in force
    """

    def __init__(self, group: CoxeterGroup, config: Optional[EngineConfig] = None):
        self.group = group
        self.matrix: CoxeterMatrix = group.matrix
        self.config = config if config is not None else group.config
        self.evaluator = WordEvaluator(group)
        if self.config.validate_relations:
            self.verify_relations()

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of_matrix(cls, matrix: CoxeterMatrix,
                  config: EngineConfig = DEFAULT_CONFIG) -> "CoxeterSystem":
        """System realised by the geometric representation of the matrix."""
        return cls(GeometricCoxeterGroup(matrix, config), config)

    @classmethod
    def dihedral(cls, m: int, config: EngineConfig = DEFAULT_CONFIG) -> "CoxeterSystem":
        """Dihedral group of order 2m (infinite for m = INFINITY)."""
        return cls.of_matrix(CoxeterMatrix.I2(m), config)

    @classmethod
    def symmetric(cls, degree: int, config: EngineConfig = DEFAULT_CONFIG) -> "CoxeterSystem":
        """Symmetric group S_degree on permutations."""
        return cls(PermutationGroup(degree, config), config)

    # -------------------------------------------------------------------------
    # Group access
    # -------------------------------------------------------------------------

    @property
    def generators(self):
        return self.matrix.generators

    def one(self) -> Any:
        return self.group.one()

    def simple(self, generator: Hashable) -> Any:
        return self.group.simple(generator)

    def length(self, w: Any) -> int:
        return self.group.length(w)

    def evaluate(self, word: Iterable[Hashable]) -> Any:
        return self.evaluator.evaluate(word)

    # -------------------------------------------------------------------------
    # Descents
    # -------------------------------------------------------------------------

    def is_right_descent(self, w: Any, generator: Hashable) -> bool:
        """ℓ(w s_i) < ℓ(w)"""
        return self.group.is_right_descent(w, generator)

    def is_left_descent(self, w: Any, generator: Hashable) -> bool:
        """ℓ(s_i w) < ℓ(w)"""
        return self.group.is_left_descent(w, generator)

    def right_descents(self, w: Any) -> List[Hashable]:
        return [g for g in self.generators if self.is_right_descent(w, g)]

    def left_descents(self, w: Any) -> List[Hashable]:
        return [g for g in self.generators if self.is_left_descent(w, g)]

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def verify_relations(self) -> None:
        """
        Check the group against its matrix.

        - s_i * s_i = one
        - s_i s_j has order exactly M(i, j) for finite bonds
        - s_i s_j does not close below relation_check_limit for infinite bonds

        Raises:
            GroupContractViolated: on the first relation that fails
        """
        g = self.group
        one = g.one()
        for i in self.generators:
            s = g.simple(i)
            if g.mul(s, s) != one:
                logger.warning("s_%r is not an involution", i)
                raise GroupContractViolated(f"s_{i!r} * s_{i!r} != one")

        for i, j, m in self.matrix.relations():
            product = g.mul(g.simple(i), g.simple(j))
            limit = self.config.relation_check_limit if m == INFINITY else m
            power = one
            for k in range(1, limit + 1):
                power = g.mul(power, product)
                if power == one and k < limit:
                    logger.warning("(s_%r s_%r) closes at %d, bond is %s", i, j, k, m or "∞")
                    raise GroupContractViolated(
                        f"(s_{i!r} s_{j!r})^{k} = one but the bond order is {m or '∞'}"
                    )
            if m != INFINITY and power != one:
                logger.warning("(s_%r s_%r)^%d != one", i, j, m)
                raise GroupContractViolated(f"(s_{i!r} s_{j!r})^{m} != one")
            if m == INFINITY and power == one:
                logger.warning("(s_%r s_%r) closes at %d, bond is ∞", i, j, limit)
                raise GroupContractViolated(
                    f"(s_{i!r} s_{j!r})^{limit} = one but the bond is infinite"
                )
        logger.debug("verified relations of %r", self.group)

    def __repr__(self) -> str:
        return f"CoxeterSystem({self.group!r})"
