# coxeter_core/words.py
"""
Words over the generators and their evaluation.

A word is a finite, possibly empty, sequence of generator labels. Words are
owned by the caller and never mutated: every helper here returns a new
tuple. WordEvaluator folds a word into a group element,

    eval([i₁, …, i_k]) = s_{i₁} * … * s_{i_k},      eval([]) = one.
"""

from __future__ import annotations
from functools import reduce
from typing import Any, Hashable, Iterable, Iterator, Sequence, Tuple
import logging

from .coxeter_matrix import CoxeterMatrix
from .errors import IndexOutOfRange, InvalidGenerator
from .groups import CoxeterGroup

logger = logging.getLogger(__name__)

Word = Tuple[Hashable, ...]


# =============================================================================
# Word manipulation
# =============================================================================

def as_word(letters: Iterable[Hashable]) -> Word:
    return tuple(letters)


def erase_at(word: Sequence[Hashable], j: int) -> Word:
    """Word with the letter at position j removed."""
    if not 0 <= j < len(word):
        raise IndexOutOfRange(j, len(word))
    return tuple(word[:j]) + tuple(word[j + 1:])


def take(word: Sequence[Hashable], k: int) -> Word:
    """First k letters (the whole word if k >= len)."""
    return tuple(word[:max(k, 0)])


def drop(word: Sequence[Hashable], k: int) -> Word:
    """Word without its first k letters."""
    return tuple(word[max(k, 0):])


def reverse(word: Sequence[Hashable]) -> Word:
    return tuple(reversed(word))


def alternating_word(i: Hashable, j: Hashable, m: int) -> Word:
    """
    Alternating word of length m ending in j.

    >>> alternating_word(0, 1, 3)
    (1, 0, 1)
    >>> alternating_word(0, 1, 4)
    (0, 1, 0, 1)
    """
    return tuple(i if (m - k) % 2 == 0 else j for k in range(m))


def braid_word(matrix: CoxeterMatrix, i: Hashable, j: Hashable) -> Word:
    """alternating_word(i, j, M(i, j)); both sides of a braid relation."""
    m = matrix.bond(i, j)
    if m == 0:
        raise ValueError(f"no braid relation between {i!r} and {j!r} (infinite bond)")
    return alternating_word(i, j, m)


# =============================================================================
# Evaluation
# =============================================================================

class WordEvaluator:
    """
    Left-to-right product of simple generators.

    Pure and deterministic: the result depends only on the word and the
    fixed generator table of the group.
    """

    def __init__(self, group: CoxeterGroup):
        self.group = group

    def check(self, word: Iterable[Hashable]) -> Word:
        """Return the word as a tuple; InvalidGenerator on the first bad letter."""
        word = tuple(word)
        matrix = self.group.matrix
        for letter in word:
            if letter not in matrix:
                logger.debug("rejecting word %r: bad letter %r", word, letter)
                raise InvalidGenerator(letter)
        return word

    def evaluate(self, word: Iterable[Hashable]) -> Any:
        g = self.group
        return reduce(g.mul, (g.simple(i) for i in self.check(word)), g.one())

    __call__ = evaluate

    def prefix_products(self, word: Sequence[Hashable]) -> Iterator[Any]:
        """
        Yield eval(take(word, j)) for j = 0, …, len(word).

        Running product, one multiplication per letter.
        """
        g = self.group
        current = g.one()
        yield current
        for letter in self.check(word):
            current = g.mul(current, g.simple(letter))
            yield current

    def suffix_products(self, word: Sequence[Hashable]) -> Iterator[Any]:
        """
        Yield eval(drop(word, j)) for j = len(word), …, 0 (shortest first).
        """
        g = self.group
        current = g.one()
        yield current
        for letter in reversed(self.check(word)):
            current = g.mul(g.simple(letter), current)
            yield current
