# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import numpy as np
import biosymbols.sequence as seq


class ColorAlphabet(seq.AbstractAlphabet):
    """
    Minimal alphabet with multi-character letters.
    """

    def __init__(self):
        super().__init__()
        self.register_state(seq.AlphabetState(-1, "-", "Gap"))
        self.register_state(seq.AlphabetState(0, "red", "Red"))
        self.register_state(seq.AlphabetState(1, "blue", "Blue"))
        self.register_state(seq.AlphabetState(2, "?", "Unknown color"))

    def get_alphabet_type(self):
        return "Color"

    def get_size(self):
        return 2

    def get_number_of_types(self):
        return 3

    def get_unknown_code(self):
        return 2

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state == 2


@pytest.fixture
def colors():
    return ColorAlphabet()


def test_registry(colors):
    assert colors.get_number_of_chars() == 4
    assert colors.get_state_at(1).letter == "red"
    assert colors.get_state_index("blue") == 2
    assert colors.get_state_index(2) == 3
    assert colors.get_int_code_at(3) == 2
    assert colors.get_char_code_at(0) == "-"
    assert colors.get_name("blue") == "Blue"
    assert colors.get_supported_ints() == [-1, 0, 1, 2]
    assert colors.get_supported_chars() == ["-", "red", "blue", "?"]
    assert colors.get_resolved_chars() == ["red", "blue"]
    assert colors.get_state_coding_size() == 3


def test_duplicate_letter(colors):
    with pytest.raises(seq.AlphabetError):
        colors.register_state(seq.AlphabetState(5, "red", "Another red"))


def test_encoding(colors):
    assert colors.char_to_int("blue") == 1
    assert colors.int_to_char(0) == "red"
    assert colors.int_to_char(-1) == "-"
    assert colors.is_gap("-")
    assert not colors.is_gap(0)


def test_bad_char(colors):
    with pytest.raises(seq.BadCharError, match="Color") as error:
        colors.char_to_int("green")
    assert error.value.char == "green"
    assert error.value.alphabet_type == "Color"


def test_bad_int(colors):
    with pytest.raises(seq.BadIntError) as error:
        colors.int_to_char(5)
    assert error.value.code == 5


def test_wrong_types(colors):
    with pytest.raises(TypeError):
        colors.char_to_int(1)
    with pytest.raises(TypeError):
        colors.int_to_char("red")


def test_out_of_bounds(colors):
    with pytest.raises(seq.IndexOutOfBoundsError):
        colors.get_state_at(4)
    # Also usable as ordinary 'IndexError'
    with pytest.raises(IndexError):
        colors.get_state_at(-1)


def test_contains(colors):
    assert "red" in colors
    assert 1 in colors
    assert -1 in colors
    assert 7 not in colors
    assert "green" not in colors
    assert 1.0 not in colors


def test_generic(colors):
    assert colors.get_generic([0]) == 0
    assert colors.get_generic(["red", "blue"]) == "?"
    assert colors.get_generic([0, 1]) == 2
    with pytest.raises(ValueError):
        colors.get_generic([])


def test_resolution(colors):
    assert colors.get_alias("red") == ["red"]
    assert colors.get_alias(1) == [1]
    assert colors.is_resolved_in(0, 0)
    assert not colors.is_resolved_in(0, 1)
    with pytest.raises(seq.BadIntError):
        colors.is_resolved_in(-1, 0)
    with pytest.raises(seq.BadIntError):
        # The second state must be resolved
        colors.is_resolved_in(0, 2)


def test_resize_and_remap(colors):
    colors.resize(5)
    colors.set_state(4, seq.AlphabetState(3, "green", "Green"))
    colors.remap()
    assert colors.char_to_int("green") == 3
    assert colors.get_supported_chars()[-1] == "green"

    colors.set_state(3, seq.AlphabetState(5, "red", "Another red"))
    with pytest.raises(seq.AlphabetError):
        colors.remap()

    with pytest.raises(seq.IndexOutOfBoundsError):
        colors.set_state(10, seq.AlphabetState(6, "pink", "Pink"))


def test_equality(colors):
    assert colors == ColorAlphabet()
    assert hash(colors) == hash(ColorAlphabet())
    assert colors != seq.DNA()
    assert seq.DNA() == seq.DNA()
    assert seq.DNA() != seq.RNA()
    assert seq.DNA().equals(seq.DNA(exclamation_mark_counts_as_gap=True))
    assert str(seq.DNA()) == "DNA"


def test_copy(colors):
    clone = colors.copy()
    assert clone is not colors
    assert clone == colors
    assert clone.get_supported_chars() == colors.get_supported_chars()

    dna = seq.DNA(exclamation_mark_counts_as_gap=True)
    assert dna.copy().char_to_int("!") == -1


@pytest.mark.parametrize(
    "text, exp_code",
    [
        ("ACGT", [0, 1, 2, 3]),
        ("acgt", [0, 1, 2, 3]),
        ("AN-R", [0, 14, -1, 5]),
    ]
)
def test_encode_multiple(text, exp_code):
    dna = seq.DNA()
    assert dna.encode_multiple(text).tolist() == exp_code


def test_encode_multiple_error():
    dna = seq.DNA()
    with pytest.raises(seq.BadCharError):
        dna.encode_multiple("ACZ")


def test_decode_multiple():
    dna = seq.DNA()
    assert dna.decode_multiple(np.array([0, 1, 14, -1])) == "ACN-"


def test_letter_case():
    dna = seq.DNA()
    assert not dna.is_case_sensitive()
    assert dna.char_to_int("g") == 2
    assert dna.is_char_in_alphabet("t")


class SwitchAlphabet(seq.LetterAlphabet):
    """
    Letter alphabet of an on and an off state.
    """

    def __init__(self, case_sensitive=False):
        super().__init__(case_sensitive)
        self.register_state(seq.AlphabetState(-1, "-", "Gap"))
        self.register_state(seq.AlphabetState(0, "O", "Off"))
        self.register_state(seq.AlphabetState(1, "I", "On"))

    def get_alphabet_type(self):
        return "Switch"

    def get_size(self):
        return 2

    def get_number_of_types(self):
        return 2

    def get_unknown_code(self):
        return -1

    def is_unresolved(self, state):
        return False


def test_copy_keeps_letter_case():
    switch = SwitchAlphabet(case_sensitive=True)
    clone = switch.copy()
    assert clone.is_case_sensitive()
    assert clone.char_to_int("I") == 1
    with pytest.raises(seq.BadCharError):
        clone.char_to_int("i")
    insensitive = SwitchAlphabet().copy()
    assert not insensitive.is_case_sensitive()
    assert insensitive.char_to_int("i") == 1


def test_mapper():
    mapper = seq.AlphabetMapper(seq.DNA(), seq.RNA(), substitutions={"T": "U"})
    assert mapper[3] == 3
    assert mapper[-1] == -1
    assert mapper[np.array([0, 3, 14])].tolist() == [0, 3, 14]
    with pytest.raises(seq.BadIntError):
        mapper[99]


def test_mapper_missing_letter():
    # 'T' is not part of the RNA alphabet
    with pytest.raises(seq.BadCharError):
        seq.AlphabetMapper(seq.DNA(), seq.RNA())


def test_state():
    state = seq.AlphabetState(0, "A", "Adenine")
    assert str(state) == "A"
    assert state == seq.AlphabetState(0, "A", "Something else")
    assert state != seq.AlphabetState(1, "A", "Adenine")
    assert state.copy() == state
    assert repr(state) == "AlphabetState(0, 'A', 'Adenine')"


@pytest.mark.parametrize(
    "error_class, base_class",
    [
        (seq.BadCharError, seq.AlphabetError),
        (seq.BadIntError, seq.AlphabetError),
        (seq.IndexOutOfBoundsError, IndexError),
        (seq.AlphabetMismatchError, seq.AlphabetError),
        (seq.CharStateNotSupportedError, seq.AlphabetError),
        (seq.MalformedStateError, ValueError),
        (seq.AlphabetConfigError, ValueError),
        (seq.StopCodonError, seq.AlphabetError),
    ]
)
def test_error_hierarchy(error_class, base_class):
    assert issubclass(error_class, base_class)


def test_mismatch_message():
    error = seq.AlphabetMismatchError("No match", seq.DNA(), seq.RNA())
    assert error.alphabet_types == ("DNA", "RNA")
    assert "DNA" in str(error) and "RNA" in str(error)


def _chromosomes_with_composites():
    chromosomes = seq.ChromosomeAlphabet(1, 5)
    chromosomes.set_composite_state("3_5")
    chromosomes.set_composite_state("2=0.3_4=0.7")
    return chromosomes


@pytest.mark.parametrize(
    "alphabet",
    [
        ColorAlphabet(),
        seq.DNA(),
        seq.RNA(),
        seq.ProteicAlphabet(),
        seq.BinaryAlphabet(),
        seq.IntegerAlphabet(5),
        seq.DefaultAlphabet(),
        seq.LexicalAlphabet(["AB", "CD", "EF"]),
        _chromosomes_with_composites(),
        seq.NumericAlphabet(seq.UniformDiscreteDistribution(4, 0, 2)),
        seq.CaseMaskedAlphabet(seq.DNA()),
        seq.WordAlphabet(seq.DNA(), 2),
        seq.CodonAlphabet(seq.DNA()),
        seq.RNY(),
        seq.AllelicAlphabet(seq.DNA(), 4),
    ],
    ids=lambda alphabet: type(alphabet).__name__
)
def test_generic_of_single_state(alphabet):
    """
    A single state is its own most specific summary.
    """
    for code in alphabet.get_supported_ints():
        assert alphabet.get_generic([code]) == code
        assert alphabet.get_generic([code, code]) == code
