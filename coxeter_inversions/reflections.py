"""
Reflection Algebra Module

Reflections are the conjugates t = w s_i w⁻¹ of simple generators. Rather
than re-deriving "t is some conjugate of some generator" at every use site,
reflections are carried as a tagged record (generator, conjugator, value);
closure under conjugation and the involution property hold by construction
and are checked once, not per use.

================================================================================
FACTS USED
================================================================================

- s_i is a reflection (identity conjugator)
- w t w⁻¹ is a reflection whenever t is
- t * t = one, so t⁻¹ = t
- ℓ(w t) ≢ ℓ(w)  (mod 2), hence ℓ(t) is odd
- t is a right inversion of w   iff  ℓ(w t) < ℓ(w)
  t is a left inversion of w    iff  ℓ(t w) < ℓ(w)
- t is a right inversion of w⁻¹ iff  t is a left inversion of w
- if t is a reflection, s a left descent of t and t ≠ s,
  then ℓ(s t s) = ℓ(t) - 2
"""

from typing import Any, Hashable, List, Optional, Union
import logging

from coxeter_core import CoxeterError

from .system import CoxeterSystem

logger = logging.getLogger(__name__)


class Reflection:
    """
    A reflection t = conjugator * s_generator * conjugator⁻¹.

    Two records are equal when their values are equal, whatever witness
    produced them.
    """

    __slots__ = ("generator", "conjugator", "value")

    def __init__(self, generator: Hashable, conjugator: Any, value: Any):
        self.generator = generator
        self.conjugator = conjugator
        self.value = value

    def __eq__(self, other):
        if isinstance(other, Reflection):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Reflection(generator={self.generator!r}, value={self.value!r})"


ReflectionLike = Union[Reflection, Any]


class ReflectionAlgebra:
    """
    Reflections of a Coxeter system and the inversion predicates.

    All operations are pure queries against the group and its length
    oracle.
    """

    def __init__(self, system: CoxeterSystem):
        self.system = system
        self.group = system.group

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def simple_reflection(self, generator: Hashable) -> Reflection:
        """s_i as a reflection with identity conjugator."""
        g = self.group
        return Reflection(generator, g.one(), g.simple(generator))

    def make(self, conjugator: Any, generator: Hashable) -> Reflection:
        """conjugator * s_i * conjugator⁻¹"""
        g = self.group
        return Reflection(generator, conjugator, g.conjugate(conjugator, g.simple(generator)))

    def conjugate(self, w: Any, t: Reflection) -> Reflection:
        """w t w⁻¹, again a reflection (conjugator w * t.conjugator)."""
        g = self.group
        return Reflection(
            t.generator,
            g.mul(w, t.conjugator),
            g.conjugate(w, t.value),
        )

    # -------------------------------------------------------------------------
    # Deciding membership
    # -------------------------------------------------------------------------

    def find_witness(self, t: Any) -> Optional[Reflection]:
        """
        Decide whether t is a reflection and return a witness if it is.

        Conjugates t by a left descent while that shortens it by two. A
        reflection reaches a simple generator this way; anything else stalls
        or reaches the identity.

        A Reflection record is returned as is when its witness reproduces
        its value; otherwise only the value is examined.
        """
        if isinstance(t, Reflection):
            if self._witness_holds(t):
                return t
            t = t.value
        g = self.group
        system = self.system
        current = t
        current_length = g.length(current)
        path: List[Hashable] = []

        while current_length > 1:
            descents = system.left_descents(current)
            if not descents:
                return None
            s = descents[0]
            s_el = g.simple(s)
            shorter = g.mul(g.mul(s_el, current), s_el)
            shorter_length = g.length(shorter)
            if shorter_length != current_length - 2:
                return None
            path.append(s)
            current, current_length = shorter, shorter_length

        if current_length != 1:
            return None
        generator = next((i for i in system.generators if g.simple(i) == current), None)
        if generator is None:
            return None
        conjugator = system.evaluate(path)
        logger.debug("reflection witness: generator %r, conjugating word %r", generator, path)
        return Reflection(generator, conjugator, t)

    def _witness_holds(self, t: Reflection) -> bool:
        if t.generator not in self.system.matrix:
            return False
        return self.make(t.conjugator, t.generator).value == t.value

    def is_reflection(self, t: ReflectionLike) -> bool:
        return self.find_witness(t) is not None

    def _require(self, t: ReflectionLike) -> Reflection:
        witness = self.find_witness(t)
        if witness is None:
            raise CoxeterError(f"{t!r} is not a reflection")
        return witness

    # -------------------------------------------------------------------------
    # Involution and parity
    # -------------------------------------------------------------------------

    def is_involution(self, t: ReflectionLike) -> bool:
        """t * t = one"""
        value = t.value if isinstance(t, Reflection) else t
        g = self.group
        return g.mul(value, value) == g.one()

    def inverse(self, t: ReflectionLike) -> Any:
        """t⁻¹, which is t itself."""
        return self._require(t).value

    def has_odd_length(self, t: ReflectionLike) -> bool:
        return self.group.length(self._require(t).value) % 2 == 1

    def length_changes_parity(self, w: Any, t: ReflectionLike) -> bool:
        """ℓ(w t) ≢ ℓ(w) (mod 2)"""
        value = self._require(t).value
        g = self.group
        return (g.length(g.mul(w, value)) - g.length(w)) % 2 == 1

    # -------------------------------------------------------------------------
    # Inversions
    # -------------------------------------------------------------------------

    def is_right_inversion(self, w: Any, t: ReflectionLike) -> bool:
        """t is a reflection and ℓ(w t) < ℓ(w)."""
        witness = self.find_witness(t)
        if witness is None:
            return False
        g = self.group
        return g.length(g.mul(w, witness.value)) < g.length(w)

    def is_left_inversion(self, w: Any, t: ReflectionLike) -> bool:
        """t is a reflection and ℓ(t w) < ℓ(w)."""
        witness = self.find_witness(t)
        if witness is None:
            return False
        g = self.group
        return g.length(g.mul(witness.value, w)) < g.length(w)

    def is_right_inversion_of_inverse(self, w: Any, t: ReflectionLike) -> bool:
        """Right inversion of w⁻¹; agrees with is_left_inversion(w, t)."""
        return self.is_right_inversion(self.group.inv(w), t)
