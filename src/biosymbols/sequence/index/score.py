# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Scores and distances between states, either fixed or derived from other
indices.
"""

__name__ = "biosymbols.sequence.index"
__author__ = "The biosymbols developers"
__all__ = [
    "SimpleScore",
    "DefaultNucleotideScore",
    "SimpleIndexDistance",
    "MiyataAAChemicalDistance",
    "CodonFromProteicAlphabetIndex1",
    "CodonFromProteicAlphabetIndex2",
]

import numpy as np
from biosymbols.sequence.alphabet import (
    AlphabetConfigError,
    AlphabetMismatchError,
    BadIntError,
)
from biosymbols.sequence.tools import AlphabetTools
from biosymbols.sequence.index.base import AlphabetIndex1, AlphabetIndex2
from biosymbols.sequence.index.proteic import ProteicAlphabetIndex1


class SimpleScore(AlphabetIndex2):
    """
    A score that only distinguishes matches and mismatches.

    Parameters
    ----------
    alphabet : Alphabet
        The alphabet of the states.
    match, mismatch : float
        The score of equal and of different states.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> score = SimpleScore(DNA(), 1, -1)
    >>> print(score.get_index("A", "A"), score.get_index("A", "C"))
    1.0 -1.0
    """

    def __init__(self, alphabet, match, mismatch):
        self._alphabet = alphabet
        self._match = match
        self._mismatch = mismatch
        size = alphabet.get_size()
        self._matrix = np.full((size, size), mismatch, dtype=float)
        np.fill_diagonal(self._matrix, match)

    def __copy_create__(self):
        return SimpleScore(self._alphabet, self._match, self._mismatch)

    @property
    def alphabet(self):
        return self._alphabet

    def index_matrix(self):
        return self._matrix.copy()

    def is_symmetric(self):
        return True


class DefaultNucleotideScore(AlphabetIndex2):
    """
    A nucleotide substitution score that also scores ambiguous
    nucleotides.

    The score of two resolved nucleotides is taken from the matrix

    ======  ====  ====  ====  ====
    \\       A     C     G     T
    ======  ====  ====  ====  ====
    A       10    -3    -1    -4
    C       -3     9    -5     0
    G       -1    -5     7    -3
    T       -4     0    -3     8
    ======  ====  ====  ====  ====

    If one of the nucleotides is unresolved, the best score of the
    nucleotides they stand for (at least -5) is divided by
    ``n1 + n2 - 1``, where *n1* and *n2* are the sizes of their aliases.

    Parameters
    ----------
    alphabet : NucleicAlphabet
        The alphabet of the nucleotides.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> score = DefaultNucleotideScore(DNA())
    >>> print(score.get_index("A", "G"))
    -1.0
    >>> print(score.get_index("A", "R"))
    5.0
    """

    _MATRIX = np.array([
        [10, -3, -1, -4],
        [-3,  9, -5,  0],
        [-1, -5,  7, -3],
        [-4,  0, -3,  8],
    ], dtype=float)

    def __init__(self, alphabet):
        if not AlphabetTools.is_nucleic_alphabet(alphabet):
            raise AlphabetConfigError(
                f"Expected a nucleic alphabet, "
                f"got '{alphabet.get_alphabet_type()}'"
            )
        self._alphabet = alphabet

    def __copy_create__(self):
        return DefaultNucleotideScore(self._alphabet)

    @property
    def alphabet(self):
        return self._alphabet

    def index_matrix(self):
        return DefaultNucleotideScore._MATRIX.copy()

    def is_symmetric(self):
        return True

    def get_index(self, state1, state2):
        alph = self._alphabet
        if isinstance(state1, str):
            state1 = alph.char_to_int(state1)
        if isinstance(state2, str):
            state2 = alph.char_to_int(state2)
        for state in (state1, state2):
            if not alph.is_int_in_alphabet(state):
                raise BadIntError(state, alph)
            if alph.is_gap(state):
                raise BadIntError(state, alph, "Gaps have no score")
        if not alph.is_unresolved(state1) and not alph.is_unresolved(state2):
            return float(DefaultNucleotideScore._MATRIX[state1, state2])
        alias1 = alph.get_alias(state1)
        alias2 = alph.get_alias(state2)
        score = -5.0
        for s1 in alias1:
            for s2 in alias2:
                score = max(score, DefaultNucleotideScore._MATRIX[s1, s2])
        return float(score / (len(alias1) + len(alias2) - 1))


class SimpleIndexDistance(AlphabetIndex2):
    """
    The distance of two states, given as the difference of their values
    in an :class:`AlphabetIndex1`.

    The distance from *state1* to *state2* is
    ``index(state2) - index(state1)``.

    Parameters
    ----------
    index : AlphabetIndex1
        The index the distances are computed from.
    sym : bool, optional
        If true, the absolute difference is taken.

    Examples
    --------

    >>> from biosymbols.sequence.index import ProteicAlphabetIndex1
    >>> distance = SimpleIndexDistance(ProteicAlphabetIndex1.load("KD"))
    >>> print(distance.get_index("R", "I"))
    9.0
    >>> print(distance.get_index("I", "R"))
    -9.0
    """

    def __init__(self, index, sym=False):
        self._index = index
        self.set_symmetric(sym)

    def __copy_create__(self):
        return SimpleIndexDistance(self._index, self._sym)

    @property
    def alphabet(self):
        return self._index.alphabet

    def get_alphabet_index1(self):
        return self._index

    def set_symmetric(self, sym):
        """
        Set whether the absolute difference is taken.

        Parameters
        ----------
        sym : bool
            If true, the distance is symmetric.
        """
        self._sym = sym
        vector = self._index.index_vector()
        self._matrix = vector[np.newaxis, :] - vector[:, np.newaxis]
        if sym:
            self._matrix = np.abs(self._matrix)

    def index_matrix(self):
        return self._matrix.copy()

    def is_symmetric(self):
        return self._sym


class MiyataAAChemicalDistance(AlphabetIndex2):
    """
    The chemical distance of two amino acids according to
    Miyata *et al.* (1979).

    The distance is the Euclidean distance of the amino acids in the
    plane of polarity and volume (Grantham, 1974), where each property
    is divided by its standard deviation over the 20 amino acids:

    .. math::

        d = \\sqrt{(\\Delta P / \\sigma_P)^2 + (\\Delta V / \\sigma_V)^2}

    Examples
    --------

    >>> distance = MiyataAAChemicalDistance()
    >>> print(distance.get_index("L", "L"))
    0.0
    >>> print(distance.get_index("L", "I") < distance.get_index("L", "D"))
    True
    """

    def __init__(self):
        polarity = ProteicAlphabetIndex1.load("GranthamPolarity").index_vector()
        volume = ProteicAlphabetIndex1.load("GranthamVolume").index_vector()
        polarity = polarity / np.std(polarity)
        volume = volume / np.std(volume)
        self._matrix = np.sqrt(
            (polarity[np.newaxis, :] - polarity[:, np.newaxis]) ** 2
            + (volume[np.newaxis, :] - volume[:, np.newaxis]) ** 2
        )

    def __copy_create__(self):
        return MiyataAAChemicalDistance()

    @property
    def alphabet(self):
        return AlphabetTools.protein()

    def index_matrix(self):
        return self._matrix.copy()

    def is_symmetric(self):
        return True


class CodonFromProteicAlphabetIndex1(AlphabetIndex1):
    """
    A codon index that takes the value of the amino acid each codon
    translates into.

    Stop codons have the value 0.

    Parameters
    ----------
    genetic_code : GeneticCode
        The genetic code translating the codons.
    protein_index : AlphabetIndex1
        An index over the protein alphabet.

    Examples
    --------

    >>> from biosymbols.sequence import GeneticCode
    >>> from biosymbols.sequence.index import ProteicAlphabetIndex1
    >>> index = CodonFromProteicAlphabetIndex1(
    ...     GeneticCode.standard(), ProteicAlphabetIndex1.load("KD")
    ... )
    >>> print(index.get_index("ATG"), index.get_index("TAA"))
    1.9 0.0
    """

    def __init__(self, genetic_code, protein_index):
        if not AlphabetTools.is_proteic_alphabet(protein_index.alphabet):
            raise AlphabetMismatchError(
                "The index must be an index over the protein alphabet",
                protein_index.alphabet, genetic_code.protein_alphabet
            )
        self._genetic_code = genetic_code
        self._protein_index = protein_index
        codons = genetic_code.codon_alphabet
        self._vector = np.array([
            0.0 if genetic_code.is_stop(codon)
            else protein_index.get_index(genetic_code.translate(codon))
            for codon in range(codons.get_size())
        ])

    def __copy_create__(self):
        return CodonFromProteicAlphabetIndex1(
            self._genetic_code, self._protein_index
        )

    @property
    def alphabet(self):
        return self._genetic_code.codon_alphabet

    def index_vector(self):
        return self._vector.copy()


class CodonFromProteicAlphabetIndex2(AlphabetIndex2):
    """
    A pairwise codon index that takes the value of the pair of amino
    acids the codons translate into.

    Pairs involving a stop codon have the value 0.

    Parameters
    ----------
    genetic_code : GeneticCode
        The genetic code translating the codons.
    protein_index : AlphabetIndex2
        A pairwise index over the protein alphabet.
    """

    def __init__(self, genetic_code, protein_index):
        if not AlphabetTools.is_proteic_alphabet(protein_index.alphabet):
            raise AlphabetMismatchError(
                "The index must be an index over the protein alphabet",
                protein_index.alphabet, genetic_code.protein_alphabet
            )
        self._genetic_code = genetic_code
        self._protein_index = protein_index
        size = genetic_code.codon_alphabet.get_size()
        self._matrix = np.zeros((size, size))
        for i in range(size):
            if genetic_code.is_stop(i):
                continue
            for j in range(size):
                if genetic_code.is_stop(j):
                    continue
                self._matrix[i, j] = protein_index.get_index(
                    genetic_code.translate(i), genetic_code.translate(j)
                )

    def __copy_create__(self):
        return CodonFromProteicAlphabetIndex2(
            self._genetic_code, self._protein_index
        )

    @property
    def alphabet(self):
        return self._genetic_code.codon_alphabet

    def index_matrix(self):
        return self._matrix.copy()

    def is_symmetric(self):
        return self._protein_index.is_symmetric()
