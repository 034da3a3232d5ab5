"""
Reduced Word Verifier

A word ω is reduced when ℓ(eval(ω)) = |ω|. Reducedness is decided by the
length oracle; the inversion sequences are used in the other direction:

- every entry of ris(ω) / lis(ω) is a reflection (any word)
- for reduced ω, every entry of ris(ω) is a right inversion of eval(ω),
  every entry of lis(ω) a left inversion
- for reduced ω, ris(ω) and lis(ω) have no repeated entries

Guarantee-bearing operations take a ReducedWord, which the verifier hands
out only after a successful length check. Passing a plain word certifies
it first and raises PreconditionViolated if it is not reduced.

Conversely, when ris(ω) repeats an entry at positions j < j', erasing both
letters leaves the element unchanged:

    eval(ω) = eval(eraseAt(eraseAt(ω, j'), j))

which is the RedundancyWitness returned by find_redundancy().
"""

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Optional, Set, Union
import logging

from coxeter_core import PreconditionViolated, Word, erase_at, take, drop, reverse

from .inversions import InversionSequence, InversionSequenceEngine
from .reflections import ReflectionAlgebra
from .system import CoxeterSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReducedWord:
    """
    A word certified reduced by ReducedWordVerifier.certify.

    Prefixes, suffixes and the reversal of a reduced word are reduced, so
    take/drop/reverse return ReducedWords without another check. The
    certificate is only trusted by a verifier over the same system.
    """
    word: Word
    system: Any = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.word)

    def __iter__(self):
        return iter(self.word)

    def reverse(self) -> "ReducedWord":
        return ReducedWord(reverse(self.word), self.system)

    def take(self, k: int) -> "ReducedWord":
        return ReducedWord(take(self.word, k), self.system)

    def drop(self, k: int) -> "ReducedWord":
        return ReducedWord(drop(self.word, k), self.system)


@dataclass(frozen=True)
class RedundancyWitness:
    """Positions first < second whose letters cancel, and the shorter word."""
    first: int
    second: int
    shorter_word: Word


WordLike = Union[ReducedWord, Iterable[Hashable]]


class ReducedWordVerifier:
    """
    Certifies reduced words and checks the inversion-sequence guarantees.
    """

    def __init__(self, system: CoxeterSystem,
                 engine: Optional[InversionSequenceEngine] = None):
        self.system = system
        self.engine = engine if engine is not None else InversionSequenceEngine(system)
        self.algebra: ReflectionAlgebra = self.engine.algebra

    # -------------------------------------------------------------------------
    # Reducedness
    # -------------------------------------------------------------------------

    def is_reduced(self, word: WordLike) -> bool:
        """ℓ(eval(ω)) = |ω|"""
        word = self.system.evaluator.check(word)
        return self.system.length(self.system.evaluate(word)) == len(word)

    def certify(self, word: WordLike) -> ReducedWord:
        """
        Wrap a word as a ReducedWord.

        A ReducedWord certified by another system, or built by hand, is
        checked again.

        Raises:
            PreconditionViolated: if ℓ(eval(ω)) < |ω|
        """
        if isinstance(word, ReducedWord):
            if word.system is self.system:
                return word
            word = word.word
        word = self.system.evaluator.check(word)
        length = self.system.length(self.system.evaluate(word))
        if length != len(word):
            raise PreconditionViolated(word, length)
        return ReducedWord(word, self.system)

    # -------------------------------------------------------------------------
    # Guarantees
    # -------------------------------------------------------------------------

    def all_reflections(self, word: WordLike) -> bool:
        """Every entry of ris(ω) and lis(ω) is a reflection (no precondition)."""
        word = tuple(word)
        algebra = self.algebra
        for sequence in (self.engine.right_inversion_seq(word),
                         self.engine.left_inversion_seq(word)):
            for t in sequence:
                if not algebra.is_reflection(t.value):
                    return False
        return True

    def is_right_inversion_member(self, word: WordLike, t: Any) -> bool:
        """
        t ∈ ris(ω) and t is a right inversion of eval(ω).

        For reduced ω the second condition follows from the first.
        """
        reduced = self.certify(word)
        if t not in self.engine.right_inversion_seq(reduced.word):
            return False
        return self.algebra.is_right_inversion(self.system.evaluate(reduced.word), t)

    def is_left_inversion_member(self, word: WordLike, t: Any) -> bool:
        """t ∈ lis(ω) and t is a left inversion of eval(ω)."""
        reduced = self.certify(word)
        if t not in self.engine.left_inversion_seq(reduced.word):
            return False
        return self.algebra.is_left_inversion(self.system.evaluate(reduced.word), t)

    def right_inversions_hold(self, word: WordLike) -> bool:
        """Every entry of ris(ω) is a right inversion of eval(ω)."""
        reduced = self.certify(word)
        w = self.system.evaluate(reduced.word)
        return all(self.algebra.is_right_inversion(w, t)
                   for t in self.engine.right_inversion_seq(reduced.word))

    def left_inversions_hold(self, word: WordLike) -> bool:
        """Every entry of lis(ω) is a left inversion of eval(ω)."""
        reduced = self.certify(word)
        w = self.system.evaluate(reduced.word)
        return all(self.algebra.is_left_inversion(w, t)
                   for t in self.engine.left_inversion_seq(reduced.word))

    def no_duplicates(self, word: WordLike) -> bool:
        """ris(ω) and lis(ω) are both duplicate-free."""
        reduced = self.certify(word)
        return not (self.engine.right_inversion_seq(reduced.word).has_duplicates() or
                    self.engine.left_inversion_seq(reduced.word).has_duplicates())

    def right_inversion_set(self, word: WordLike) -> Set[Any]:
        """
        Right inversions of eval(ω), read off a reduced word.

        The set has exactly ℓ(eval(ω)) elements.
        """
        reduced = self.certify(word)
        return set(self.engine.right_inversion_seq(reduced.word).elements)

    # -------------------------------------------------------------------------
    # Redundancy
    # -------------------------------------------------------------------------

    def find_redundancy(self, word: Iterable[Hashable]) -> Optional[RedundancyWitness]:
        """
        Locate two cancelling letters of a word whose ris repeats.

        With ris(ω)[j] = ris(ω)[j'] for j < j':
            eval(eraseAt(ω, j')) = eval(ω) t
            ris(eraseAt(ω, j'))[j] = t
            eval(eraseAt(eraseAt(ω, j'), j)) = eval(ω) t t = eval(ω)

        Returns:
            RedundancyWitness, or None when ris(ω) is duplicate-free
        """
        sequence: InversionSequence = self.engine.right_inversion_seq(word)
        pair = sequence.first_duplicate()
        if pair is None:
            return None
        first, second = pair
        shorter = erase_at(erase_at(sequence.word, second), first)
        logger.debug("word %r: letters %d and %d cancel", sequence.word, first, second)
        return RedundancyWitness(first, second, shorter)
