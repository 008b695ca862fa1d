# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import numpy as np
import biosymbols.sequence as seq


@pytest.mark.parametrize(
    "content",
    [
        "ACGTN-",
        ["A", "C", "G", "T", "N", "-"],
        [0, 1, 2, 3, 14, -1],
        np.array([0, 1, 2, 3, 14, -1]),
    ]
)
def test_creation(dna, content):
    sequence = seq.Sequence("seq1", content, dna)
    assert sequence.code.tolist() == [0, 1, 2, 3, 14, -1]
    assert str(sequence) == "ACGTN-"
    assert sequence.name == "seq1"
    assert sequence.alphabet == dna
    assert len(sequence) == 6


def test_missing_alphabet():
    with pytest.raises(TypeError):
        seq.Sequence("seq1", "ACGT")


def test_invalid_content(dna):
    with pytest.raises(seq.BadCharError):
        seq.Sequence("seq1", "ACGTZ", dna)
    with pytest.raises(seq.BadIntError):
        seq.Sequence("seq1", [0, 1, 99], dna)
    with pytest.raises(seq.MalformedStateError):
        seq.Sequence("seq1", np.zeros((2, 2), dtype=int), dna)


def test_coding_size():
    codons = seq.CodonAlphabet(seq.DNA())
    sequence = seq.Sequence("seq1", "ATGTAA", codons)
    assert sequence.code.tolist() == [14, 48]
    with pytest.raises(seq.MalformedStateError):
        seq.Sequence("seq1", "ATGTA", codons)


def test_indexing(dna):
    sequence = seq.Sequence("seq1", "ACGTA", dna)
    assert sequence[1] == "C"
    assert sequence[-1] == "A"
    sub_sequence = sequence[1:3]
    assert isinstance(sub_sequence, seq.Sequence)
    assert str(sub_sequence) == "CG"
    assert sub_sequence.name == "seq1"
    assert str(sequence[np.array([True, False, True, False, True])]) == "AGA"
    assert list(sequence) == ["A", "C", "G", "T", "A"]


def test_append_and_reverse(dna):
    sequence = seq.Sequence("seq1", "AC", dna)
    sequence.append("GT")
    sequence.append([14])
    assert str(sequence) == "ACGTN"
    assert str(sequence.reverse()) == "NTGCA"
    # The original sequence is not modified
    assert str(sequence) == "ACGTN"


def test_concatenation(dna):
    sequence = seq.Sequence("seq1", "AC", dna) + seq.Sequence("seq2", "GT", dna)
    assert str(sequence) == "ACGT"
    assert sequence.name == "seq1"
    with pytest.raises(seq.AlphabetMismatchError):
        seq.Sequence("seq1", "AC", dna) + seq.Sequence("seq2", "AC", seq.RNA())


def test_equality(dna):
    assert seq.Sequence("a", "ACGT", dna) == seq.Sequence("b", "ACGT", dna)
    assert seq.Sequence("a", "ACGT", dna) != seq.Sequence("a", "ACGA", dna)
    assert seq.Sequence("a", "ACG", dna) != seq.Sequence("a", "ACG", seq.RNA())
    assert seq.Sequence("a", "ACG", dna) != "ACG"


def test_copy(dna):
    sequence = seq.Sequence("seq1", "ACGT", dna)
    clone = sequence.copy()
    assert clone == sequence
    clone.code[0] = 3
    assert str(sequence) == "ACGT"
    assert str(sequence.copy(np.array([3, 3]))) == "TT"


def test_code_setter(dna):
    sequence = seq.Sequence("seq1", "ACGT", dna)
    sequence.code = [3, 2]
    assert str(sequence) == "TG"
    with pytest.raises(seq.BadIntError):
        sequence.code = [20]


def test_empty_sequence(dna):
    sequence = seq.Sequence("empty", alphabet=dna)
    assert len(sequence) == 0
    assert str(sequence) == ""


def test_probabilistic_sequence(dna):
    prob_seq = seq.ProbabilisticSequence(
        "seq1", [[0.5, 0.5, 0, 0], [0, 0, 0, 1], [1, 0, 0, 0]], dna
    )
    assert len(prob_seq) == 3
    assert prob_seq.name == "seq1"
    assert prob_seq[1].tolist() == [0, 0, 0, 1]
    sub_seq = prob_seq[1:]
    assert isinstance(sub_seq, seq.ProbabilisticSequence)
    assert len(sub_seq) == 2
    assert prob_seq.copy() == prob_seq


def test_probabilistic_sequence_shape(dna):
    with pytest.raises(seq.MalformedStateError):
        seq.ProbabilisticSequence("seq1", [[0.5, 0.5]], dna)
    with pytest.raises(seq.MalformedStateError):
        seq.ProbabilisticSequence("seq1", [0.5, 0.5, 0, 0], dna)
    empty = seq.ProbabilisticSequence("seq1", [], dna)
    assert empty.probabilities.shape == (0, 4)
