"""
Demonstration of the Coxeter Inversion Engine

This script walks through the control flow of the engine:
1. Build a Coxeter system from a matrix
2. Evaluate words and read off their inversion sequences
3. Certify reduced words, or locate letters that cancel
"""

import logging

from coxeter_core import CoxeterMatrix, PreconditionViolated, setup_logging
from coxeter_inversions import (
    CoxeterSystem,
    InversionSequenceEngine,
    ReducedWordVerifier,
)


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_dihedral():
    """Dihedral group of order 6 on permutations."""
    print_section("Dihedral group of order 6 (S_3)")

    system = CoxeterSystem.symmetric(3)
    engine = InversionSequenceEngine(system)
    verifier = ReducedWordVerifier(system, engine)

    for word in [(0, 1, 0), (0, 1, 0, 1, 0, 1), ()]:
        w = system.evaluate(word)
        ris = engine.right_inversion_seq(word)
        lis = engine.left_inversion_seq(word)
        print(f"\nWord {word}")
        print("-" * 70)
        print(f"  eval      = {w}   ℓ = {system.length(w)}")
        print(f"  ris       = {list(ris.elements)}")
        print(f"  lis       = {list(lis.elements)}")
        print(f"  reduced   : {verifier.is_reduced(word)}")
        print(f"  telescope : {engine.telescopes(word)}")
        print(f"  duplicate : {ris.first_duplicate()}")


def demonstrate_reduction():
    """Strip cancelling letters from a word in H_3."""
    print_section("Cancelling letters in H_3")

    system = CoxeterSystem.of_matrix(CoxeterMatrix.H3())
    verifier = ReducedWordVerifier(system)

    word = (0, 1, 0, 2, 1, 1, 0, 1, 0, 1, 2)
    print(f"\nStart: {word}  (ℓ = {system.length(system.evaluate(word))})")
    witness = verifier.find_redundancy(word)
    while witness is not None:
        print(f"  letters {witness.first} and {witness.second} cancel → {witness.shorter_word}")
        word = witness.shorter_word
        witness = verifier.find_redundancy(word)

    reduced = verifier.certify(word)
    print(f"Reduced: {reduced.word}")
    print(f"  right inversions: {len(verifier.right_inversion_set(reduced))}")


def demonstrate_precondition():
    """Guarantees need a reduced word."""
    print_section("Precondition handling")

    system = CoxeterSystem.dihedral(3)
    verifier = ReducedWordVerifier(system)
    try:
        verifier.no_duplicates((1, 1))
    except PreconditionViolated as exc:
        print(f"\n  rejected: {exc}")


if __name__ == "__main__":
    setup_logging(logging.WARNING)
    demonstrate_dihedral()
    demonstrate_reduction()
    demonstrate_precondition()
