# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import numpy as np
import biosymbols.sequence as seq


@pytest.fixture
def distribution():
    return seq.UniformDiscreteDistribution(4, 0, 2)


def test_categories(distribution):
    assert distribution.get_number_of_categories() == 4
    assert distribution.get_categories().tolist() == [0.25, 0.75, 1.25, 1.75]


@pytest.mark.parametrize(
    "value, exp_category",
    [
        (0.1, 0.25),
        (1.1, 1.25),
        (1.99, 1.75),
        # Values outside the interval fall into the outer categories
        (-5, 0.25),
        (10, 1.75),
    ]
)
def test_value_category(distribution, value, exp_category):
    assert distribution.get_value_category(value) == exp_category


@pytest.mark.parametrize(
    "n, lower, upper",
    [(0, 0, 1), (3, 1, 1), (3, 2, 1)]
)
def test_invalid_distribution(n, lower, upper):
    with pytest.raises(seq.AlphabetConfigError):
        seq.UniformDiscreteDistribution(n, lower, upper)


def test_alphabet(distribution):
    alph = seq.NumericAlphabet(distribution)
    assert alph.get_alphabet_type() == "Numeric"
    assert alph.get_size() == 4
    assert alph.get_number_of_types() == 4
    assert alph.get_supported_chars() == ["0.25", "0.75", "1.25", "1.75"]
    assert alph.char_to_int("1.25") == 2
    assert alph.int_to_value(3) == 1.75
    assert alph.value_to_int(0.1) == 0
    assert alph.value_to_int(1.9) == 3
    assert alph.get_delta() == 0.5
    assert not alph.is_gap(-1)
    assert not alph.is_unresolved(2)


def test_generic(distribution):
    alph = seq.NumericAlphabet(distribution)
    assert alph.get_generic([2, 2]) == 2
    with pytest.raises(seq.CharStateNotSupportedError):
        alph.get_generic([1, 2])
    with pytest.raises(ValueError):
        alph.get_generic([])


def test_distribution_is_copied(distribution):
    alph = seq.NumericAlphabet(distribution)
    assert alph.get_distribution() is not distribution
    clone = alph.copy()
    assert clone.get_supported_chars() == alph.get_supported_chars()
    assert np.array_equal(
        clone.get_distribution().get_categories(),
        distribution.get_categories()
    )
