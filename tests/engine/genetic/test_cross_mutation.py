import math

import numpy as np
import pytest

from swarmgen.engine.genetic import (
    BitwiseMutation,
    CrossBitwise,
    CrossMean,
    FloatCrossExp,
    GeneMutation,
    VecCrossAllGenes,
    VecMutation,
)
from swarmgen.engine.genetic.cross import cross_bits, integer_decode, integer_encode
from swarmgen.foundation.exceptions import ConfigurationError, InvalidParameterError


def _bits(value):
    return int(np.array(value, dtype=np.float64).view(np.uint64))


@pytest.mark.parametrize(
    "position, expected",
    [(0, 0b1111), (2, 0b1100), (4, 0b0000)],
)
def test_cross_bits_single_point(position, expected):
    assert cross_bits(0b1111, 0b0000, 4, position) == expected


@pytest.mark.parametrize("value", [1.0, -2.5, 420.9687, 1e-300, 0.0, -0.0])
def test_integer_decode_encode_identity(value):
    mantissa, exponent, sign = integer_decode(value)
    assert mantissa < 1 << 53
    restored = integer_encode(mantissa, exponent, sign)
    assert restored == value
    assert math.copysign(1.0, restored) == math.copysign(1.0, value)


def test_integer_encode_overflow_gives_infinity():
    assert integer_encode(1 << 52, 5000, -1) == -math.inf


def test_float_cross_exp_of_equal_parents_copies_parent():
    cross = FloatCrossExp(rng=np.random.default_rng(0))
    for _ in range(50):
        assert cross.cross([3.25, 3.25]) == [3.25]


def test_float_cross_exp_child_mixes_parent_bits():
    rng = np.random.default_rng(5)
    cross = FloatCrossExp(rng=rng)
    first, second = 1.5, 100.0
    m1, _, _ = integer_decode(first)
    m2, _, _ = integer_decode(second)
    for _ in range(100):
        (child,) = cross.cross([first, second])
        assert child > 0
        mantissa, _, _ = integer_decode(child)
        # every mantissa bit comes from one of the parents
        assert (mantissa & ~(m1 | m2)) == 0
        assert (~mantissa & m1 & m2 & ((1 << 53) - 1)) == 0


def test_float_cross_exp_non_finite_parent_copies_a_parent():
    cross = FloatCrossExp(rng=np.random.default_rng(1))
    for _ in range(20):
        (child,) = cross.cross([math.inf, 2.0])
        assert child in (math.inf, 2.0)


def test_float_cross_exp_needs_two_parents():
    with pytest.raises(ConfigurationError):
        FloatCrossExp().cross([1.0, 2.0, 3.0])


def test_cross_bitwise_child_bits_come_from_parents():
    cross = CrossBitwise(rng=np.random.default_rng(2))
    b1, b2 = _bits(-7.0), _bits(0.125)
    for _ in range(50):
        (child,) = cross.cross([-7.0, 0.125])
        bits = _bits(child)
        assert (bits & ~(b1 | b2)) == 0


def test_vec_cross_all_genes_applies_per_position():
    cross = VecCrossAllGenes(CrossMean())
    (child,) = cross.cross([np.array([0.0, 2.0, -4.0]), np.array([2.0, 4.0, 4.0])])
    np.testing.assert_allclose(child, [1.0, 3.0, 0.0])
    assert cross.cross([]) == []
    with pytest.raises(ConfigurationError):
        cross.cross([np.zeros(2), np.zeros(3)])


def test_bitwise_mutation_flips_exact_bit_count():
    mutation = BitwiseMutation(3, rng=np.random.default_rng(4))
    for value in [3.0, -33.5, 420.0]:
        mutated = mutation.mutation(value)
        assert bin(_bits(value) ^ _bits(mutated)).count("1") == 3


def test_bitwise_mutation_caps_at_float_width():
    assert BitwiseMutation(100).change_bits_count == 64
    assert BitwiseMutation(0).mutation(1.25) == 1.25


class AddOne(GeneMutation):
    def mutation(self, gene):
        return gene + 1.0


def test_vec_mutation_changes_one_gene_when_triggered():
    mutation = VecMutation(100.0, AddOne(), rng=np.random.default_rng(0))
    original = np.zeros(5)
    mutated = mutation.mutation(original)
    assert np.count_nonzero(mutated) == 1
    assert mutated.sum() == 1.0
    assert not original.any()


def test_vec_mutation_zero_probability_is_identity():
    mutation = VecMutation(0.0, AddOne(), rng=np.random.default_rng(0))
    x = np.ones(4)
    assert mutation.mutation(x) is x


def test_vec_mutation_rate_matches_percent():
    mutation = VecMutation(25.0, AddOne(), rng=np.random.default_rng(11))
    mutated = sum(mutation.mutation(np.zeros(3)).any() for _ in range(4000))
    assert 0.22 < mutated / 4000 < 0.28


def test_vec_mutation_rejects_percent_out_of_range():
    with pytest.raises(InvalidParameterError):
        VecMutation(120.0, AddOne())
