"""
Tests for the Reflection Algebra
"""

import numpy as np
import pytest

from coxeter_core import CoxeterError, GeometricElement
from coxeter_inversions import CoxeterSystem, Reflection, ReflectionAlgebra

from conftest import random_word


class TestReflectionRecord:
    def test_simple_reflection(self, a2):
        algebra = ReflectionAlgebra(a2)
        t = algebra.simple_reflection(1)
        assert t.generator == 1
        assert t.conjugator == a2.one()
        assert t.value == a2.simple(1)

    def test_make(self, s3):
        algebra = ReflectionAlgebra(s3)
        t = algebra.make(s3.simple(0), 1)
        assert t.value == (2, 1, 0)

    def test_equality_by_value(self, s3):
        algebra = ReflectionAlgebra(s3)
        # s0 s1 s0 = s1 s0 s1
        a = algebra.make(s3.simple(0), 1)
        b = algebra.make(s3.simple(1), 0)
        assert a.generator != b.generator
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_conjugate_is_closed(self, b3, rng):
        algebra = ReflectionAlgebra(b3)
        for _ in range(10):
            w = b3.evaluate(random_word(b3, rng, 5))
            t = algebra.make(b3.evaluate(random_word(b3, rng, 3)), 2)
            conj = algebra.conjugate(w, t)
            assert conj.value == b3.group.conjugate(w, t.value)
            assert algebra.is_reflection(conj.value)
            assert conj.value == algebra.make(conj.conjugator, conj.generator).value


class TestIsReflection:
    def test_generators_are_reflections(self, any_system):
        algebra = ReflectionAlgebra(any_system)
        for g in any_system.generators:
            assert algebra.is_reflection(any_system.simple(g))

    def test_identity_is_not(self, any_system):
        assert not ReflectionAlgebra(any_system).is_reflection(any_system.one())

    def test_rotation_is_not(self, a2):
        assert not ReflectionAlgebra(a2).is_reflection(a2.evaluate([0, 1]))

    def test_conjugates_are_reflections(self, any_system, rng):
        algebra = ReflectionAlgebra(any_system)
        for _ in range(10):
            w = any_system.evaluate(random_word(any_system, rng, 6))
            for g in any_system.generators:
                t = any_system.group.conjugate(w, any_system.simple(g))
                witness = algebra.find_witness(t)
                assert witness is not None
                assert witness.value == t
                assert algebra.make(witness.conjugator, witness.generator).value == t

    def test_central_involution_is_not_a_reflection(self, b3):
        # w0 = -1 is an involution of odd length 9
        algebra = ReflectionAlgebra(b3)
        w0 = GeometricElement(-np.eye(3), b3.config.round_decimals)
        assert algebra.is_involution(w0)
        assert b3.length(w0) % 2 == 1
        assert not algebra.is_reflection(w0)

    def test_transpositions_of_s4(self):
        system = CoxeterSystem.symmetric(4)
        algebra = ReflectionAlgebra(system)
        group = system.group
        for i in range(4):
            for j in range(i + 1, 4):
                assert algebra.is_reflection(group.transposition(i, j))
        assert not algebra.is_reflection((1, 0, 3, 2))
        assert not algebra.is_reflection((1, 2, 0, 3))

    def test_witness_passthrough(self, a2):
        algebra = ReflectionAlgebra(a2)
        t = algebra.simple_reflection(0)
        assert algebra.find_witness(t) is t

    def test_hand_built_record_is_checked(self, a2):
        algebra = ReflectionAlgebra(a2)
        one = a2.one()
        assert not algebra.is_reflection(Reflection(0, one, one))
        assert not algebra.is_reflection(Reflection(0, one, a2.evaluate([0, 1])))

    def test_wrong_witness_for_a_reflection(self, a2):
        algebra = ReflectionAlgebra(a2)
        s0 = a2.simple(0)
        mislabelled = Reflection(1, a2.one(), s0)
        witness = algebra.find_witness(mislabelled)
        assert witness is not mislabelled
        assert witness.value == s0
        assert witness.generator == 0
        assert algebra.is_reflection(Reflection("x", a2.one(), s0))


class TestInvolutionAndParity:
    def test_involution(self, any_system, rng):
        algebra = ReflectionAlgebra(any_system)
        for _ in range(10):
            t = algebra.make(any_system.evaluate(random_word(any_system, rng, 5)), any_system.generators[0])
            assert algebra.is_involution(t)
            assert algebra.inverse(t) == any_system.group.inv(t.value)

    def test_odd_length(self, any_system, rng):
        algebra = ReflectionAlgebra(any_system)
        for _ in range(10):
            t = algebra.make(any_system.evaluate(random_word(any_system, rng, 5)), any_system.generators[-1])
            assert algebra.has_odd_length(t)

    def test_length_changes_parity(self, any_system, rng):
        algebra = ReflectionAlgebra(any_system)
        for _ in range(10):
            w = any_system.evaluate(random_word(any_system, rng, 6))
            t = algebra.make(any_system.evaluate(random_word(any_system, rng, 4)), any_system.generators[0])
            assert algebra.length_changes_parity(w, t)

    def test_non_reflection_rejected(self, a2):
        algebra = ReflectionAlgebra(a2)
        with pytest.raises(CoxeterError):
            algebra.has_odd_length(a2.evaluate([0, 1]))
        with pytest.raises(CoxeterError):
            algebra.inverse(a2.one())


class TestInversions:
    def test_simple_right_inversion_is_descent(self, any_system, rng):
        algebra = ReflectionAlgebra(any_system)
        for _ in range(10):
            w = any_system.evaluate(random_word(any_system, rng, 6))
            for g in any_system.generators:
                assert (algebra.is_right_inversion(w, any_system.simple(g)) ==
                        any_system.is_right_descent(w, g))
                assert (algebra.is_left_inversion(w, any_system.simple(g)) ==
                        any_system.is_left_descent(w, g))

    def test_inverse_duality(self, any_system, rng):
        algebra = ReflectionAlgebra(any_system)
        for _ in range(10):
            w = any_system.evaluate(random_word(any_system, rng, 6))
            t = algebra.make(any_system.evaluate(random_word(any_system, rng, 3)), any_system.generators[0])
            assert algebra.is_right_inversion_of_inverse(w, t) == algebra.is_left_inversion(w, t)

    def test_non_reflection_is_never_an_inversion(self, a2):
        algebra = ReflectionAlgebra(a2)
        w0 = a2.evaluate([0, 1, 0])
        rotation = a2.evaluate([0, 1])
        assert a2.length(a2.group.mul(w0, rotation)) < a2.length(w0)
        assert not algebra.is_right_inversion(w0, rotation)
        assert not algebra.is_left_inversion(w0, rotation)
        forged = Reflection(0, a2.one(), rotation)
        assert not algebra.is_right_inversion(w0, forged)
        assert not algebra.is_left_inversion(w0, forged)

    def test_every_reflection_inverts_longest_element(self, a2):
        algebra = ReflectionAlgebra(a2)
        w0 = a2.evaluate([0, 1, 0])
        for conj, generator in (([], 0), ([], 1), ([0], 1)):
            t = algebra.make(a2.evaluate(conj), generator)
            assert algebra.is_right_inversion(w0, t)
            assert algebra.is_left_inversion(w0, t)

    def test_identity_has_no_inversions(self, any_system):
        algebra = ReflectionAlgebra(any_system)
        for g in any_system.generators:
            assert not algebra.is_right_inversion(any_system.one(), algebra.simple_reflection(g))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
