"""
Shared systems and word generators for the test suite.
"""

import numpy as np
import pytest

from coxeter_core import CoxeterMatrix, INFINITY
from coxeter_inversions import CoxeterSystem


def random_word(system, rng, length):
    gens = system.generators
    return tuple(gens[int(k)] for k in rng.integers(0, len(gens), size=length))


def random_reduced_word(system, rng, length):
    """Grow a word one letter at a time, only through non-descents."""
    word = []
    w = system.one()
    for _ in range(length):
        candidates = [g for g in system.generators if not system.is_right_descent(w, g)]
        if not candidates:
            break
        letter = candidates[int(rng.integers(0, len(candidates)))]
        word.append(letter)
        w = system.group.mul(w, system.simple(letter))
    return tuple(word)


SYSTEM_BUILDERS = {
    "A2": lambda: CoxeterSystem.dihedral(3),
    "S3": lambda: CoxeterSystem.symmetric(3),
    "S4": lambda: CoxeterSystem.symmetric(4),
    "B3": lambda: CoxeterSystem.of_matrix(CoxeterMatrix.B(3)),
    "H3": lambda: CoxeterSystem.of_matrix(CoxeterMatrix.H3()),
    "I2_inf": lambda: CoxeterSystem.dihedral(INFINITY),
}


@pytest.fixture(params=sorted(SYSTEM_BUILDERS))
def any_system(request):
    return SYSTEM_BUILDERS[request.param]()


@pytest.fixture
def a2():
    """Dihedral group of order 6 in its geometric representation."""
    return CoxeterSystem.dihedral(3)


@pytest.fixture
def s3():
    return CoxeterSystem.symmetric(3)


@pytest.fixture
def b3():
    return CoxeterSystem.of_matrix(CoxeterMatrix.B(3))


@pytest.fixture
def rng():
    return np.random.default_rng(20261019)

