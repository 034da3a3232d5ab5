"""
Inversion Sequence Engine

Computes the right and left inversion sequences of a word
ω = [i₀, …, i_{n-1}] and exposes the identities relating them.

================================================================================
DEFINITIONS
================================================================================

Right inversion sequence (recursion on the tail):

    ris([])          = []
    ris([i] ++ rest) = [eval(rest)⁻¹ s_i eval(rest)] ++ ris(rest)
    ris(ω ++ [i])    = map(t ↦ s_i t s_i, ris(ω)) ++ [s_i]

Left inversion sequence (recursion on the head):

    lis([])          = []
    lis([i] ++ rest) = [s_i] ++ map(t ↦ s_i t s_i, lis(rest))
    lis(ω ++ [i])    = lis(ω) ++ [eval(ω) s_i eval(ω)⁻¹]

Indexed access, without materialising the sequence:

    ris(ω)[j] = eval(drop(ω, j+1))⁻¹ s_{ω[j]} eval(drop(ω, j+1))
    lis(ω)[j] = eval(take(ω, j)) s_{ω[j]} eval(take(ω, j))⁻¹

================================================================================
IDENTITIES
================================================================================

- length:       |ris(ω)| = |lis(ω)| = |ω|
- reversal:     ris(reverse ω) = reverse(lis ω),  lis(reverse ω) = reverse(ris ω)
- telescoping:  product(ris ω) = product(lis ω) = eval(ω)⁻¹
- deletion:     eval(ω) ris(ω)[j] = eval(eraseAt(ω, j)) = lis(ω)[j] eval(ω)
- drop/take:    ris(drop(ω, j)) = drop(ris ω, j),  lis(take(ω, j)) = take(lis ω, j)
- involution:   every entry squares to one

The primary implementation is a single pass with a running partial product
(suffix for ris, prefix for lis). The cons/append recursions are exposed
separately and must agree with it value for value.
"""

from functools import reduce
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple
import logging

from coxeter_core import IndexOutOfRange, Word, erase_at, take, drop, reverse

from .reflections import Reflection, ReflectionAlgebra
from .system import CoxeterSystem

logger = logging.getLogger(__name__)

RIGHT = "right"
LEFT = "left"


class InversionSequence:
    """
    Read-only inversion sequence of a word.

    Entry j corresponds to position j of the source word. Recompute rather
    than patch when the word changes.
    """

    __slots__ = ("word", "side", "_reflections")

    def __init__(self, word: Word, side: str, reflections: Iterable[Reflection]):
        self.word = tuple(word)
        self.side = side
        self._reflections: Tuple[Reflection, ...] = tuple(reflections)

    @property
    def reflections(self) -> Tuple[Reflection, ...]:
        return self._reflections

    @property
    def elements(self) -> Tuple[Any, ...]:
        """Group elements of the entries, in order."""
        return tuple(t.value for t in self._reflections)

    def __len__(self) -> int:
        return len(self._reflections)

    def __iter__(self) -> Iterator[Reflection]:
        return iter(self._reflections)

    def __getitem__(self, j: int) -> Reflection:
        if not 0 <= j < len(self._reflections):
            raise IndexOutOfRange(j, len(self._reflections))
        return self._reflections[j]

    def __contains__(self, t: Any) -> bool:
        value = t.value if isinstance(t, Reflection) else t
        return any(r.value == value for r in self._reflections)

    def __eq__(self, other):
        if not isinstance(other, InversionSequence):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self):
        return hash(self.elements)

    def reversed(self) -> "InversionSequence":
        """Entries in reverse order, attached to the reversed word."""
        side = LEFT if self.side == RIGHT else RIGHT
        return InversionSequence(reverse(self.word), side, reversed(self._reflections))

    def first_duplicate(self) -> Optional[Tuple[int, int]]:
        """
        Earliest pair (j, j') with j < j' and equal entries, ordered by j'.

        Returns None if the sequence is duplicate-free.
        """
        seen: Dict[Any, int] = {}
        for k, t in enumerate(self._reflections):
            if t.value in seen:
                return seen[t.value], k
            seen[t.value] = k
        return None

    def has_duplicates(self) -> bool:
        return self.first_duplicate() is not None

    def __repr__(self) -> str:
        return f"InversionSequence(side={self.side!r}, word={self.word!r}, n={len(self)})"


class InversionSequenceEngine:
    """
    Builds inversion sequences and checks the identities between them.

    Stateless apart from the injected system; no caching across words.
    """

    def __init__(self, system: CoxeterSystem, algebra: Optional[ReflectionAlgebra] = None):
        self.system = system
        self.group = system.group
        self.evaluator = system.evaluator
        self.algebra = algebra if algebra is not None else ReflectionAlgebra(system)

    # -------------------------------------------------------------------------
    # Sequences (single pass, running product)
    # -------------------------------------------------------------------------

    def right_inversion_seq(self, word: Iterable[Hashable]) -> InversionSequence:
        """ris(ω), built from the end with the suffix product eval(drop(ω, j+1))."""
        word = self.evaluator.check(word)
        g = self.group
        suffix = g.one()
        entries: List[Reflection] = []
        for letter in reversed(word):
            entries.append(self.algebra.make(g.inv(suffix), letter))
            suffix = g.mul(g.simple(letter), suffix)
        entries.reverse()
        logger.debug("ris of %d-letter word", len(word))
        return InversionSequence(word, RIGHT, entries)

    def left_inversion_seq(self, word: Iterable[Hashable]) -> InversionSequence:
        """lis(ω), built from the start with the prefix product eval(take(ω, j))."""
        word = self.evaluator.check(word)
        g = self.group
        prefix = g.one()
        entries: List[Reflection] = []
        for letter in word:
            entries.append(self.algebra.make(prefix, letter))
            prefix = g.mul(prefix, g.simple(letter))
        logger.debug("lis of %d-letter word", len(word))
        return InversionSequence(word, LEFT, entries)

    # -------------------------------------------------------------------------
    # Sequences (structural recursions)
    # -------------------------------------------------------------------------

    def right_inversion_seq_by_append(self, word: Iterable[Hashable]) -> InversionSequence:
        """ris(ω ++ [i]) = map(conj s_i, ris(ω)) ++ [s_i]"""
        word = self.evaluator.check(word)
        algebra = self.algebra
        entries: List[Reflection] = []
        for letter in word:
            s = self.group.simple(letter)
            entries = [algebra.conjugate(s, t) for t in entries]
            entries.append(algebra.simple_reflection(letter))
        return InversionSequence(word, RIGHT, entries)

    def right_inversion_seq_by_cons(self, word: Iterable[Hashable]) -> InversionSequence:
        """ris([i] ++ rest) = [eval(rest)⁻¹ s_i eval(rest)] ++ ris(rest)"""
        word = self.evaluator.check(word)
        if not word:
            return InversionSequence(word, RIGHT, [])
        rest = word[1:]
        head = self.algebra.make(self.group.inv(self.evaluator.evaluate(rest)), word[0])
        tail = self.right_inversion_seq_by_cons(rest)
        return InversionSequence(word, RIGHT, (head,) + tail.reflections)

    def left_inversion_seq_by_cons(self, word: Iterable[Hashable]) -> InversionSequence:
        """lis([i] ++ rest) = [s_i] ++ map(conj s_i, lis(rest))"""
        word = self.evaluator.check(word)
        algebra = self.algebra
        entries: List[Reflection] = []
        for letter in reversed(word):
            s = self.group.simple(letter)
            entries = [algebra.simple_reflection(letter)] + [algebra.conjugate(s, t) for t in entries]
        return InversionSequence(word, LEFT, entries)

    def left_inversion_seq_by_append(self, word: Iterable[Hashable]) -> InversionSequence:
        """lis(ω ++ [i]) = lis(ω) ++ [eval(ω) s_i eval(ω)⁻¹]"""
        word = self.evaluator.check(word)
        if not word:
            return InversionSequence(word, LEFT, [])
        init = word[:-1]
        last = self.algebra.make(self.evaluator.evaluate(init), word[-1])
        return InversionSequence(word, LEFT, self.left_inversion_seq_by_append(init).reflections + (last,))

    # -------------------------------------------------------------------------
    # Indexed access
    # -------------------------------------------------------------------------

    def right_inversion_at(self, word: Sequence[Hashable], j: int) -> Reflection:
        """ris(ω)[j] = eval(drop(ω, j+1))⁻¹ s_{ω[j]} eval(drop(ω, j+1))"""
        word = self.evaluator.check(word)
        if not 0 <= j < len(word):
            raise IndexOutOfRange(j, len(word))
        suffix = self.evaluator.evaluate(drop(word, j + 1))
        return self.algebra.make(self.group.inv(suffix), word[j])

    def left_inversion_at(self, word: Sequence[Hashable], j: int) -> Reflection:
        """lis(ω)[j] = eval(take(ω, j)) s_{ω[j]} eval(take(ω, j))⁻¹"""
        word = self.evaluator.check(word)
        if not 0 <= j < len(word):
            raise IndexOutOfRange(j, len(word))
        return self.algebra.make(self.evaluator.evaluate(take(word, j)), word[j])

    # -------------------------------------------------------------------------
    # Products and identities
    # -------------------------------------------------------------------------

    def product(self, sequence: Iterable[Any]) -> Any:
        """Left-to-right product of the entries (Reflections or elements)."""
        g = self.group
        values = (t.value if isinstance(t, Reflection) else t for t in sequence)
        return reduce(g.mul, values, g.one())

    def telescopes(self, word: Iterable[Hashable]) -> bool:
        """product(ris ω) = product(lis ω) = eval(ω)⁻¹"""
        word = self.evaluator.check(word)
        expected = self.group.inv(self.evaluator.evaluate(word))
        return (self.product(self.right_inversion_seq(word)) == expected and
                self.product(self.left_inversion_seq(word)) == expected)

    def reversal_holds(self, word: Iterable[Hashable]) -> bool:
        """ris(reverse ω) = reverse(lis ω) and lis(reverse ω) = reverse(ris ω)"""
        word = self.evaluator.check(word)
        rev = reverse(word)
        return (self.right_inversion_seq(rev).elements ==
                self.left_inversion_seq(word).reversed().elements and
                self.left_inversion_seq(rev).elements ==
                self.right_inversion_seq(word).reversed().elements)

    def deletion_holds(self, word: Sequence[Hashable], j: int) -> bool:
        """eval(ω) ris(ω)[j] = eval(eraseAt(ω, j)) = lis(ω)[j] eval(ω)"""
        word = self.evaluator.check(word)
        g = self.group
        w = self.evaluator.evaluate(word)
        erased = self.evaluator.evaluate(erase_at(word, j))
        right = g.mul(w, self.right_inversion_at(word, j).value)
        left = g.mul(self.left_inversion_at(word, j).value, w)
        return right == erased and left == erased

    def drop_holds(self, word: Sequence[Hashable], j: int) -> bool:
        """ris(drop(ω, j)) = drop(ris ω, j)"""
        word = self.evaluator.check(word)
        return (self.right_inversion_seq(drop(word, j)).elements ==
                drop(self.right_inversion_seq(word).elements, j))

    def take_holds(self, word: Sequence[Hashable], j: int) -> bool:
        """lis(take(ω, j)) = take(lis ω, j)"""
        word = self.evaluator.check(word)
        return (self.left_inversion_seq(take(word, j)).elements ==
                take(self.left_inversion_seq(word).elements, j))

    def all_involutions(self, sequence: InversionSequence) -> bool:
        return all(self.algebra.is_involution(t) for t in sequence)
