"""
Coxeter Inversions - Reflection and Inversion-Sequence Engine

Computes, from a word in a Coxeter system, the ordered sequences of
reflections obtained by successively conjugating through its letters, and
uses them to certify reduced words or locate cancelling letters.

Control flow:
    CoxeterMatrix + word → WordEvaluator → element
                         → InversionSequenceEngine → ris(ω), lis(ω)
                         → ReducedWordVerifier → ReducedWord | RedundancyWitness
"""

__version__ = "0.1.0"

from .system import CoxeterSystem
from .reflections import Reflection, ReflectionAlgebra
from .inversions import InversionSequence, InversionSequenceEngine, RIGHT, LEFT
from .reduced import ReducedWord, RedundancyWitness, ReducedWordVerifier

__all__ = [
    "CoxeterSystem",
    "Reflection",
    "ReflectionAlgebra",
    "InversionSequence",
    "InversionSequenceEngine",
    "RIGHT",
    "LEFT",
    "ReducedWord",
    "RedundancyWitness",
    "ReducedWordVerifier",
]
