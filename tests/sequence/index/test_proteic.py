# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import io
import pytest
import numpy as np
import biosymbols.sequence as seq
import biosymbols.sequence.index as index
from biosymbols.file import InvalidFileError


AA_ORDER = "ARNDCQEGHILKMFPSTWYV"


def _aaindex1_entry(values):
    head = "  ".join(
        f"{AA_ORDER[i]}/{AA_ORDER[i + 10]}" for i in range(10)
    )
    return "\n".join([
        "H TEST000001",
        "D Test property",
        "I    " + head,
        "  " + "  ".join(values[:10]),
        "  " + "  ".join(values[10:]),
        "//",
    ])


def _aaindex2_entry(rows):
    return "\n".join(
        [
            "H TEST000002",
            "D Test matrix",
            f"M rows = {AA_ORDER}, cols = {AA_ORDER}",
        ]
        + ["  " + "  ".join(row) for row in rows]
        + ["//"]
    )


def _lower_triangle():
    # Entry (i, j) is 100*i + j
    return [[str(100 * i + j) for j in range(i + 1)] for i in range(20)]


def test_list_db():
    names = index.ProteicAlphabetIndex1.list_db()
    assert "KD" in names
    assert "Mass" in names
    assert all(not name.endswith(".txt") for name in names)


@pytest.mark.parametrize("name", index.ProteicAlphabetIndex1.list_db())
def test_load_all(name):
    prop = index.ProteicAlphabetIndex1.load(name)
    assert prop.index_vector().shape == (20,)
    assert prop.alphabet == seq.ProteicAlphabet()


def test_load_hydropathy():
    hydropathy = index.ProteicAlphabetIndex1.load("KD")
    assert isinstance(hydropathy, index.AAIndex1Entry)
    assert hydropathy.accession == "KD"
    assert hydropathy.description.startswith("Hydropathy")
    assert hydropathy.get_index("I") == 4.5
    assert hydropathy.get_index("R") == -4.5
    assert hydropathy.get_index(12) == 1.9


def test_load_missing():
    with pytest.raises(ValueError):
        index.ProteicAlphabetIndex1.load("Nonexistent")


def test_proteic_index():
    prop = index.ProteicAlphabetIndex1(np.arange(20), "Position")
    assert prop.description == "Position"
    assert prop.get_index("V") == 19.0
    with pytest.raises(seq.BadIntError):
        prop.get_index("X")
    with pytest.raises(ValueError):
        index.ProteicAlphabetIndex1(np.arange(19))


def test_proteic_index_copy():
    hydropathy = index.ProteicAlphabetIndex1.load("KD")
    clone = hydropathy.copy()
    assert clone == hydropathy
    assert clone.accession == hydropathy.accession


def test_read_aaindex1():
    values = [str(i) for i in range(20)]
    entry = index.AAIndex1Entry.read(io.StringIO(_aaindex1_entry(values)))
    assert entry.accession == "TEST000001"
    assert entry.description == "Test property"
    assert entry.index_vector().tolist() == list(range(20))


def test_read_aaindex1_missing_values():
    values = ["NA"] + [str(i) for i in range(1, 20)]
    with pytest.warns(UserWarning):
        entry = index.AAIndex1Entry.read(io.StringIO(_aaindex1_entry(values)))
    assert np.isnan(entry.get_index("A"))
    assert entry.get_index("R") == 1.0


@pytest.mark.parametrize(
    "text",
    [
        # No 'I' block
        "H TEST\nD Test\n//",
        # Too few values
        _aaindex1_entry([str(i) for i in range(19)] + [""]),
        # Invalid value
        _aaindex1_entry(["abc"] + [str(i) for i in range(1, 20)]),
        # Incomplete block
        "H TEST\nI    A/L\n  1 2 3 4 5 6 7 8 9 10",
    ]
)
def test_read_aaindex1_invalid(text):
    with pytest.raises(InvalidFileError):
        index.AAIndex1Entry.read(io.StringIO(text))


def test_read_aaindex2_symmetric():
    entry = index.AAIndex2Entry.read(
        io.StringIO(_aaindex2_entry(_lower_triangle()))
    )
    assert entry.accession == "TEST000002"
    assert entry.is_symmetric()
    assert entry.get_index("R", "A") == 100.0
    assert entry.get_index("A", "R") == 100.0
    assert entry.get_index("R", "R") == 101.0
    matrix = entry.index_matrix()
    assert np.array_equal(matrix, matrix.T)


def test_read_aaindex2_antisymmetric():
    entry = index.AAIndex2Entry.read(
        io.StringIO(_aaindex2_entry(_lower_triangle())), sym=False
    )
    assert not entry.is_symmetric()
    assert entry.get_index("R", "A") == 100.0
    assert entry.get_index("A", "R") == -100.0
    assert entry.get_index("Y", "V") == -1918.0


def test_read_aaindex2_full_matrix():
    rows = [[str(20 * i + j) for j in range(20)] for i in range(20)]
    entry = index.AAIndex2Entry.read(io.StringIO(_aaindex2_entry(rows)))
    assert not entry.is_symmetric()
    assert entry.get_index("A", "R") == 1.0
    assert entry.get_index("R", "A") == 20.0


def test_read_aaindex2_invalid():
    rows = _lower_triangle()
    rows[5] = rows[5][:-1]
    with pytest.raises(InvalidFileError):
        index.AAIndex2Entry.read(io.StringIO(_aaindex2_entry(rows)))
    with pytest.raises(InvalidFileError):
        index.AAIndex2Entry.read(
            io.StringIO(_aaindex2_entry(_lower_triangle()[:10]))
        )
    with pytest.raises(InvalidFileError):
        index.AAIndex2Entry.read(io.StringIO("H TEST\nD Test\n//"))


def test_aaindex2_copy():
    entry = index.AAIndex2Entry(np.ones((20, 20)), True, "Ones", "TEST")
    clone = entry.copy()
    assert clone.is_symmetric()
    assert clone.accession == "TEST"
    assert np.array_equal(clone.index_matrix(), entry.index_matrix())


def test_list_pairwise_db():
    names = index.ProteicAlphabetIndex2.list_db()
    assert names == ["BLOSUM50", "Grantham"]
    # Pairwise indices are no property indices
    assert "BLOSUM50" not in index.ProteicAlphabetIndex1.list_db()


@pytest.mark.parametrize("name", index.ProteicAlphabetIndex2.list_db())
def test_load_all_pairwise(name):
    pairwise = index.ProteicAlphabetIndex2.load(name)
    assert isinstance(pairwise, index.AAIndex2Entry)
    assert pairwise.is_symmetric()
    assert pairwise.alphabet == seq.ProteicAlphabet()
    matrix = pairwise.index_matrix()
    assert matrix.shape == (20, 20)
    assert np.array_equal(matrix, matrix.T)
    assert not np.isnan(matrix).any()


@pytest.mark.parametrize(
    "state1, state2, exp_score",
    [
        ("W", "W", 15.0),
        ("A", "A", 5.0),
        ("C", "C", 13.0),
        ("A", "R", -2.0),
        ("R", "A", -2.0),
        ("F", "Y", 4.0),
        ("I", "V", 4.0),
        ("D", "W", -5.0),
    ]
)
def test_blosum50(state1, state2, exp_score):
    blosum = index.ProteicAlphabetIndex2.load("BLOSUM50")
    assert blosum.accession == "BLOSUM50"
    assert blosum.get_index(state1, state2) == exp_score


@pytest.mark.parametrize(
    "state1, state2, exp_distance",
    [
        ("L", "I", 5.0),
        ("C", "W", 215.0),
        ("R", "K", 26.0),
        ("K", "R", 26.0),
        ("S", "S", 0.0),
    ]
)
def test_grantham(state1, state2, exp_distance):
    grantham = index.ProteicAlphabetIndex2.load("Grantham")
    assert grantham.get_index(state1, state2) == exp_distance


def test_load_missing_pairwise():
    with pytest.raises(ValueError):
        index.ProteicAlphabetIndex2.load("KD")


def test_proteic_index2():
    pairwise = index.ProteicAlphabetIndex2(np.eye(20), True, "Identity")
    assert pairwise.description == "Identity"
    assert pairwise.get_index("V", "V") == 1.0
    assert pairwise.get_index("A", "V") == 0.0
    clone = pairwise.copy()
    assert type(clone) is index.ProteicAlphabetIndex2
    assert np.array_equal(clone.index_matrix(), np.eye(20))
    with pytest.raises(ValueError):
        index.ProteicAlphabetIndex2(np.eye(19), True)
