# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biosymbols.sequence as seq


@pytest.fixture
def rny():
    return seq.RNY()


@pytest.mark.parametrize(
    "triplet, exp_code",
    [
        ("RAA", 0), ("CCA", 18), ("TTY", 35), ("cca", 18),
        ("RA-", 50), ("R-G", 101), ("R--", 150),
        ("-TG", 210), ("-A-", 250), ("--Y", 302),
        ("---", -1), ("NNN", 350),
    ]
)
def test_codes(rny, triplet, exp_code):
    assert rny.char_to_int(triplet) == exp_code


def test_properties(rny):
    assert rny.get_alphabet_type() == "RNY(letter=DNA)"
    assert rny.get_size() == 36
    assert rny.get_number_of_types() == 80
    assert rny.get_unknown_code() == 350
    assert rny.get_number_of_chars() == 81
    assert rny.is_unresolved("R--")
    assert not rny.is_unresolved("CCA")


@pytest.mark.parametrize("triplet", ["RA", "AAA", "RAT"])
def test_bad_triplet(rny, triplet):
    with pytest.raises(seq.BadCharError):
        rny.char_to_int(triplet)


@pytest.mark.parametrize(
    "state, exp_alias",
    [
        (18, [18]),
        (50, [0, 1, 2]),
        (101, [1, 4, 7, 10]),
        (250, [0, 1, 2, 12, 13, 14, 24, 25, 26]),
        ("-TG", ["RTG", "CTG", "TTG"]),
        (350, list(range(36))),
        (-1, list(range(36))),
    ]
)
def test_alias(rny, state, exp_alias):
    assert rny.get_alias(state) == exp_alias


def test_resolution_consistency(rny):
    """
    A state resolves into exactly the states of its alias.
    """
    for state in rny.get_supported_ints():
        alias = rny.get_alias(state)
        for resolved in range(36):
            assert rny.is_resolved_in(state, resolved) == (resolved in alias)


def test_resolution_errors(rny):
    with pytest.raises(seq.BadIntError):
        rny.is_resolved_in(0, 50)
    with pytest.raises(seq.BadIntError):
        rny.is_resolved_in(0, -1)
    with pytest.raises(seq.BadIntError):
        rny.is_resolved_in(49, 0)


def test_generic(rny):
    assert rny.get_generic([18]) == 18
    assert rny.get_generic([0, 1]) == 350
    assert rny.get_generic([0, 1, 2]) == 50
    assert rny.get_generic([50]) == 50
    assert rny.get_generic([-1]) == -1


@pytest.mark.parametrize(
    "positions, exp_triplet",
    [
        (("G", "T", "C"), "RTY"),
        (("A", "A", "A"), "RAA"),
        (("C", "G", "G"), "CGG"),
        (("-", "A", "-"), "-A-"),
    ]
)
def test_get_rny_letters(rny, positions, exp_triplet):
    assert rny.get_rny(*positions) == exp_triplet


@pytest.mark.parametrize(
    "positions, exp_code",
    [
        ((2, 3, 1), 11),
        ((1, 1, 0), 18),
        ((-1, 0, 0), 200),
        ((0, 0, -1), 50),
        ((14, 3, 2), 210),
        ((-1, -1, 0), 300),
        ((-1, -1, -1), -1),
    ]
)
def test_get_rny_codes(rny, positions, exp_code):
    assert rny.get_rny(*positions, alphabet=seq.DNA()) == exp_code


def test_get_rny_errors(rny):
    with pytest.raises(seq.BadCharError):
        # Ambiguous nucleotide
        rny.get_rny(5, 0, 0, alphabet=seq.DNA())
    with pytest.raises(seq.AlphabetError):
        rny.get_rny(0, 0, 0)


def test_get_rny_unresolved_forms(rny):
    # The code form maps 'N' to the undefined band
    assert rny.get_rny(14, 0, 0, alphabet=seq.DNA()) == 200
    assert rny.get_rny("-", "A", "A") == "-AA"
    with pytest.raises(seq.BadCharError):
        rny.get_rny("N", "A", "A")


def test_rna():
    rny = seq.RNY(seq.RNA())
    assert rny.get_alphabet_type() == "RNY(letter=RNA)"
    assert rny.char_to_int("CUA") == 21
    assert rny != seq.RNY()


def test_requires_nucleic():
    with pytest.raises(seq.AlphabetConfigError):
        seq.RNY(seq.ProteicAlphabet())


def test_copy(rny):
    clone = rny.copy()
    assert clone == rny
    assert clone.get_supported_chars() == rny.get_supported_chars()
