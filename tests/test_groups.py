"""
Tests for the group realisations and their length oracles
"""

import numpy as np
import pytest

from coxeter_core import (
    CoxeterMatrix,
    CoxeterError,
    EngineConfig,
    GeometricCoxeterGroup,
    GeometricElement,
    PermutationGroup,
    InvalidGenerator,
    INFINITY,
)

from conftest import random_word


class TestGeometricCoxeterGroup:
    def test_generators_are_involutions(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.H3())
        for g in group.generators:
            s = group.simple(g)
            assert group.mul(s, s) == group.one()

    def test_braid_relation_order(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.I2(5))
        r = group.mul(group.simple(0), group.simple(1))
        assert group.power(r, 5) == group.one()
        for k in range(1, 5):
            assert group.power(r, k) != group.one()

    def test_inverse(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.B(3))
        w = group.mul(group.mul(group.simple(0), group.simple(1)), group.simple(2))
        assert group.mul(w, group.inv(w)) == group.one()
        assert group.inv(group.inv(w)) == w

    def test_negative_power(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.A(2))
        r = group.mul(group.simple(0), group.simple(1))
        assert group.power(r, -1) == group.inv(r)

    def test_length_of_identity_and_generators(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.A(3))
        assert group.length(group.one()) == 0
        for g in group.generators:
            assert group.length(group.simple(g)) == 1

    def test_longest_element_b3(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.B(3))
        w0 = GeometricElement(-np.eye(3), group.config.round_decimals)
        assert group.length(w0) == 9

    def test_longest_element_h3(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.H3())
        w0 = GeometricElement(-np.eye(3), group.config.round_decimals)
        assert group.length(w0) == 15

    def test_infinite_dihedral_lengths(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.I2(INFINITY))
        w = group.one()
        for k in range(1, 12):
            w = group.mul(w, group.simple(k % 2))
            assert group.length(w) == k

    def test_right_descent_matches_length(self, rng):
        group = GeometricCoxeterGroup(CoxeterMatrix.B(3))
        for _ in range(20):
            w = group.one()
            for k in rng.integers(0, 3, size=6):
                w = group.mul(w, group.simple(int(k)))
            for g in group.generators:
                shorter = group.length(group.mul(w, group.simple(g))) < group.length(w)
                assert group.is_right_descent(w, g) == shorter

    def test_unknown_generator(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.A(2))
        with pytest.raises(InvalidGenerator):
            group.simple(2)

    def test_rounding_absorbs_float_noise(self):
        group = GeometricCoxeterGroup(CoxeterMatrix.H3())
        noisy = GeometricElement(np.eye(3) + 1e-12, group.config.round_decimals)
        assert noisy == group.one()
        assert hash(noisy) == hash(group.one())

    def test_max_length_guard(self):
        config = EngineConfig(max_length=3)
        group = GeometricCoxeterGroup(CoxeterMatrix.B(3), config)
        w0 = GeometricElement(-np.eye(3), config.round_decimals)
        with pytest.raises(CoxeterError):
            group.length(w0)


class TestPermutationGroup:
    def test_generators(self):
        group = PermutationGroup(4)
        assert group.generators == (0, 1, 2)
        assert group.simple(1) == (0, 2, 1, 3)

    def test_composition_order(self):
        group = PermutationGroup(3)
        assert group.mul(group.simple(0), group.simple(1)) == (1, 2, 0)

    def test_inverse(self):
        group = PermutationGroup(5)
        w = (3, 0, 4, 1, 2)
        assert group.mul(w, group.inv(w)) == group.one()

    def test_length_is_inversion_count(self):
        group = PermutationGroup(4)
        assert group.length((0, 1, 2, 3)) == 0
        assert group.length((3, 2, 1, 0)) == 6
        assert group.length((1, 0, 3, 2)) == 2

    def test_right_descent(self):
        group = PermutationGroup(4)
        w = (2, 0, 3, 1)
        assert group.is_right_descent(w, 0)
        assert not group.is_right_descent(w, 1)
        assert group.is_right_descent(w, 2)

    def test_right_descent_agrees_with_default(self, rng):
        group = PermutationGroup(4)
        for _ in range(20):
            w = tuple(int(x) for x in rng.permutation(4))
            for g in group.generators:
                shorter = group.length(group.mul(w, group.simple(g))) < group.length(w)
                assert group.is_right_descent(w, g) == shorter

    def test_left_descent(self):
        group = PermutationGroup(3)
        w = group.mul(group.simple(0), group.simple(1))
        assert group.is_left_descent(w, 0)
        assert not group.is_left_descent(w, 1)

    def test_transposition(self):
        group = PermutationGroup(4)
        assert group.transposition(0, 3) == (3, 1, 2, 0)
        with pytest.raises(ValueError):
            group.transposition(1, 1)

    def test_unknown_generator(self):
        group = PermutationGroup(3)
        with pytest.raises(InvalidGenerator):
            group.simple(2)
        with pytest.raises(InvalidGenerator):
            group.is_right_descent(group.one(), 5)

    def test_invalid_degree(self):
        with pytest.raises(ValueError):
            PermutationGroup(0)


class TestLengthOracleAxioms:
    def test_subadditivity(self, any_system, rng):
        g = any_system.group
        for _ in range(15):
            a = any_system.evaluate(random_word(any_system, rng, 5))
            b = any_system.evaluate(random_word(any_system, rng, 5))
            assert g.length(g.mul(a, b)) <= g.length(a) + g.length(b)

    def test_inverse_has_same_length(self, any_system, rng):
        g = any_system.group
        for _ in range(15):
            w = any_system.evaluate(random_word(any_system, rng, 6))
            assert g.length(g.inv(w)) == g.length(w)

    def test_generator_flips_parity(self, any_system, rng):
        g = any_system.group
        for _ in range(15):
            w = any_system.evaluate(random_word(any_system, rng, 6))
            for i in any_system.generators:
                assert (g.length(g.mul(w, g.simple(i))) - g.length(w)) % 2 == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
