# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biosymbols.sequence as seq


def test_binary():
    binary = seq.BinaryAlphabet()
    assert binary.get_alphabet_type() == "Binary"
    assert binary.get_size() == 2
    assert binary.get_number_of_types() == 2
    assert binary.char_to_int("0") == 0
    assert binary.char_to_int("?") == 2
    assert binary.is_unresolved("?")
    assert binary.get_alias("?") == ["0", "1"]
    assert binary.is_resolved_in(2, 1)
    assert not binary.is_resolved_in(0, 1)
    assert binary.get_generic(["0", "1"]) == "?"
    assert binary.get_generic([1, 1]) == 1


def test_integer():
    alph = seq.IntegerAlphabet(5, 2)
    assert alph.get_alphabet_type() == "Integer"
    assert alph.get_size() == 4
    assert alph.get_min() == 2
    assert alph.get_max() == 5
    assert alph.char_to_int("3") == 3
    assert alph.char_to_int("X") == 6
    assert alph.get_unknown_code() == 6
    assert alph.get_alias(6) == [2, 3, 4, 5]
    assert alph.is_resolved_in(6, 4)
    assert not alph.is_resolved_in(3, 4)
    assert alph.get_generic([2, 5]) == 6
    with pytest.raises(seq.BadCharError):
        alph.char_to_int("1")


def test_integer_invalid_range():
    with pytest.raises(seq.AlphabetConfigError):
        seq.IntegerAlphabet(1, 3)


def test_integer_copy():
    alph = seq.IntegerAlphabet(9, 4)
    clone = alph.copy()
    assert clone.get_min() == 4
    assert clone.get_max() == 9


def test_default():
    alph = seq.DefaultAlphabet()
    assert alph.get_alphabet_type() == "Default"
    assert alph.get_size() == 26
    assert alph.char_to_int("a") == 0
    assert alph.char_to_int("Z") == 25
    assert alph.char_to_int("1") == 26
    assert alph.char_to_int(".") == 36
    assert alph.char_to_int("?") == 37
    assert alph.is_unresolved("?")
    assert not alph.is_unresolved("Q")
    assert alph.encode_multiple("Hi").tolist() == [7, 8]
