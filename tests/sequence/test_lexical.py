# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biosymbols.sequence as seq


@pytest.fixture
def lexicon():
    return seq.LexicalAlphabet(["AB", "CD", "EF"])


def test_codes(lexicon):
    assert lexicon.char_to_int("AB") == 0
    assert lexicon.char_to_int("EF") == 2
    assert lexicon.char_to_int("--") == -1
    assert lexicon.char_to_int("??") == 3
    assert lexicon.int_to_char(1) == "CD"


def test_properties(lexicon):
    assert lexicon.get_alphabet_type() == "Lexicon(AB,CD,EF)"
    assert lexicon.get_size() == 3
    assert lexicon.get_number_of_types() == 4
    assert lexicon.get_unknown_code() == 3
    assert lexicon.get_state_coding_size() == 2


def test_case_sensitive(lexicon):
    with pytest.raises(seq.BadCharError):
        lexicon.char_to_int("ab")


def test_resolution(lexicon):
    assert lexicon.get_alias("??") == ["AB", "CD", "EF"]
    assert lexicon.get_alias(1) == [1]
    assert lexicon.is_resolved_in(3, 2)
    assert not lexicon.is_resolved_in(0, 2)
    assert lexicon.get_generic(["AB", "CD"]) == "??"
    assert lexicon.get_generic(["CD"]) == "CD"


@pytest.mark.parametrize(
    "vocabulary",
    [
        ["AB", "CDE"],
        ["AB", "CD", "AB"],
    ]
)
def test_malformed_vocabulary(vocabulary):
    with pytest.raises(seq.MalformedStateError):
        seq.LexicalAlphabet(vocabulary)


def test_empty_vocabulary():
    with pytest.raises(seq.AlphabetConfigError):
        seq.LexicalAlphabet([])


def test_sequence(lexicon):
    sequence = seq.Sequence("words", "ABEF--CD", lexicon)
    assert sequence.code.tolist() == [0, 2, -1, 1]
    assert str(sequence) == "ABEF--CD"


def test_copy(lexicon):
    clone = lexicon.copy()
    assert clone == lexicon
    assert clone.get_supported_chars() == lexicon.get_supported_chars()
