# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biosymbols.sequence as seq


@pytest.fixture
def words():
    return seq.WordAlphabet(seq.DNA(), 2)


@pytest.fixture
def codons():
    return seq.CodonAlphabet(seq.DNA())


@pytest.mark.parametrize(
    "word, exp_code",
    [
        ("AA", 0), ("AC", 1), ("CG", 6), ("TT", 15),
        ("ac", 1),
        ("AN", 16), ("NN", 16), ("RA", 16),
        ("A-", -1), ("--", -1),
    ]
)
def test_word_codes(words, word, exp_code):
    assert words.char_to_int(word) == exp_code


def test_word_order(words):
    # Codes are mixed-radix numbers of the positions
    assert words.get_supported_chars()[1:6] == ["AA", "AC", "AG", "AT", "CA"]
    for code in range(16):
        assert words.char_to_int(words.int_to_char(code)) == code
        assert words.get_positions(code) == [code // 4, code % 4]


def test_word_properties(words):
    assert words.get_alphabet_type() == "Word alphabet: DNA DNA"
    assert words.get_size() == 16
    assert words.get_number_of_types() == 17
    assert words.get_unknown_code() == 16
    assert words.get_length() == 2
    assert words.has_unique_alphabet()
    assert words.int_to_char(16) == "NN"
    assert words.int_to_char(-1) == "--"
    assert words.get_state_coding_size() == 2


@pytest.mark.parametrize("word", ["ACG", "AZ", "A"])
def test_bad_word(words, word):
    with pytest.raises(seq.BadCharError):
        words.char_to_int(word)


def test_mixed_alphabets():
    words = seq.WordAlphabet([seq.DNA(), seq.RNA()])
    assert not words.has_unique_alphabet()
    assert words.get_alphabet_type() == "Word alphabet: DNA RNA"
    assert words.char_to_int("AU") == 3
    assert words.get_n_alphabet(1) == seq.RNA()
    with pytest.raises(IndexError):
        words.get_n_alphabet(2)
    with pytest.raises(seq.AlphabetMismatchError):
        words.translate(seq.Sequence("seq1", "ACGT", seq.DNA()))


@pytest.mark.parametrize(
    "alphabets, length",
    [
        (seq.DNA(), None),
        ([seq.DNA()], 2),
        ([], None),
    ]
)
def test_invalid_construction(alphabets, length):
    with pytest.raises(seq.AlphabetConfigError):
        seq.WordAlphabet(alphabets, length)


def test_positions(words):
    assert words.get_positions(6) == [1, 2]
    assert words.get_n_position(6, 0) == 1
    assert words.get_positions("CG") == ["C", "G"]
    assert words.get_positions(16) == [14, 14]
    assert words.get_positions(-1) == [-1, -1]


def test_get_word(words):
    assert words.get_word([0, 1, 2, 3], 1) == 6
    assert words.get_word(["A", "C", "G"], 1) == "CG"
    with pytest.raises(seq.BadIntError):
        words.get_word([0], 0)


def test_resolution(words):
    assert words.get_alias(16) == list(range(16))
    assert words.get_alias("AC") == ["AC"]
    assert words.is_resolved_in(16, 3)
    assert not words.is_resolved_in(1, 3)
    assert words.get_generic([1, 2]) == 16


def test_translate(words):
    sequence = seq.Sequence("seq1", "ACGT", seq.DNA())
    word_sequence = words.translate(sequence)
    assert word_sequence.alphabet == words
    assert word_sequence.code.tolist() == [1, 11]
    assert str(word_sequence) == "ACGT"
    assert words.reverse(word_sequence) == sequence


def test_translate_with_offset(words):
    sequence = seq.Sequence("seq1", "ACGTA", seq.DNA())
    assert words.translate(sequence, 1).code.tolist() == [6, 12]


def test_translate_incomplete_word(words):
    sequence = seq.Sequence("seq1", "ACGTA", seq.DNA())
    with pytest.warns(UserWarning):
        word_sequence = words.translate(sequence)
    assert len(word_sequence) == 2


def test_reverse_mismatch(words):
    with pytest.raises(seq.AlphabetMismatchError):
        words.reverse(seq.Sequence("seq1", "ACGT", seq.DNA()))


def test_word_copy(words):
    clone = words.copy()
    assert clone == words
    assert clone.char_to_int("CG") == 6


def test_codon_codes(codons):
    assert codons.get_alphabet_type() == "Codon(letter=DNA)"
    assert codons.get_size() == 64
    assert codons.get_unknown_code() == 64
    assert codons.char_to_int("ATG") == 14
    assert codons.char_to_int("atg") == 14
    assert codons.char_to_int("ANG") == 64
    assert codons.char_to_int("---") == -1
    assert codons.get_nucleic_alphabet() == seq.DNA()


@pytest.mark.parametrize(
    "positions, exp_codon",
    [
        ((0, 0, 0), 0),
        ((3, 3, 3), 63),
        ((0, 3, 2), 14),
        ((0, 14, 2), 64),
        ((0, -1, 2), -1),
        (("T", "A", "A"), "TAA"),
    ]
)
def test_get_codon(codons, positions, exp_codon):
    assert codons.get_codon(*positions) == exp_codon


def test_get_codon_invalid(codons):
    with pytest.raises(seq.BadIntError):
        codons.get_codon(0, 20, 1)
    with pytest.raises(seq.BadCharError):
        codons.get_codon("T", "Z", "A")


def test_codon_positions(codons):
    assert codons.get_first_position(63) == 3
    assert codons.get_second_position(14) == 3
    assert codons.get_third_position(14) == 2
    assert codons.get_positions(64) == [14, 14, 14]


@pytest.mark.parametrize(
    "codon, exp_gc",
    [("ATG", 1), ("GCC", 3), ("TAA", 0)]
)
def test_gc_in_codon(codons, codon, exp_gc):
    assert codons.get_gc_in_codon(codons.char_to_int(codon)) == exp_gc


def test_rna_codons():
    codons = seq.CodonAlphabet(seq.RNA())
    assert codons.get_alphabet_type() == "Codon(letter=RNA)"
    assert codons.char_to_int("AUG") == 14
    assert codons != seq.CodonAlphabet(seq.DNA())


def test_codons_require_nucleic():
    with pytest.raises(seq.AlphabetConfigError):
        seq.CodonAlphabet(seq.ProteicAlphabet())


def test_codon_translate(codons):
    sequence = seq.Sequence("seq1", "ATGNNN---", seq.DNA())
    assert codons.translate(sequence).code.tolist() == [14, 64, -1]
