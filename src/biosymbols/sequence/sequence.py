# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The module contains the sequence containers, that store the state
codes of an :class:`Alphabet`.
"""

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["Sequence", "ProbabilisticSequence"]

from numbers import Integral
import numpy as np
from biosymbols.copyable import Copyable
from biosymbols.sequence.alphabet import (
    BadIntError,
    AlphabetMismatchError,
    MalformedStateError,
)


class Sequence(Copyable):
    """
    A named succession of states of an :class:`Alphabet`.

    Internally, a :class:`Sequence` stores the state codes of its
    elements in a *NumPy* :class:`ndarray`, the *sequence code*.
    The gap is stored as -1, hence a signed integer type is used.

    A :class:`Sequence` can be indexed by any 1-D index a
    :class:`ndarray` accepts.
    If the index is a single integer, the letter at that position is
    returned, otherwise a subsequence is returned.
    Concatenation of two sequences with the same alphabet is achieved
    with the ``+`` operator.

    Two :class:`Sequence` objects are equal if they have equal
    alphabets and equal sequence codes.
    The name is not considered.

    Parameters
    ----------
    name : str
        The name of the sequence.
    content : str or iterable object of str or iterable object of int, optional
        The content of the sequence.
        Either the letters of the states or the state codes.
        A :class:`str` is split into letters of the coding size of
        the alphabet, e.g. into codons for a codon alphabet.
        By default the sequence is empty.
    alphabet : Alphabet
        The alphabet of the sequence.

    Attributes
    ----------
    code : ndarray, dtype=int
        The sequence code.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> dna_seq = Sequence("seq1", "ACGTA", DNA())
    >>> print(dna_seq)
    ACGTA
    >>> print(dna_seq.code)
    [0 1 2 3 0]
    >>> print(dna_seq[1:3])
    CG
    >>> print(dna_seq.reverse())
    ATGCA
    >>> print(dna_seq + dna_seq)
    ACGTAACGTA
    """

    def __init__(self, name, content=(), alphabet=None):
        if alphabet is None:
            raise TypeError("A sequence requires an alphabet")
        self._name = name
        self._alphabet = alphabet
        self._code = _encode(content, alphabet)

    def __repr__(self):
        """Represent Sequence as a string for debugging."""
        return (
            f"Sequence({repr(self._name)}, {repr(self.to_letters())}, "
            f"{repr(self._alphabet)})"
        )

    def __copy_create__(self):
        return Sequence(self._name, alphabet=self._alphabet)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._code = self._code.copy()

    def copy(self, new_seq_code=None):
        """
        Copy the object.

        Parameters
        ----------
        new_seq_code : ndarray, optional
            If this parameter is set, the sequence code is set to this
            value, rather than the original sequence code.

        Returns
        -------
        copy
            A copy of this object.
        """
        if new_seq_code is None:
            return super().copy()
        clone = self.__copy_create__()
        clone.code = new_seq_code
        return clone

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, name):
        self._name = name

    @property
    def alphabet(self):
        return self._alphabet

    def get_alphabet(self):
        return self._alphabet

    @property
    def code(self):
        return self._code

    @code.setter
    def code(self, code):
        self._code = _encode_codes(code, self._alphabet)

    def to_letters(self):
        """
        Get the letters of the sequence.

        Returns
        -------
        letters : list of str
            The letter of each state.
        """
        return [self._alphabet.int_to_char(int(c)) for c in self._code]

    def append(self, content):
        """
        Append states to the end of the sequence.

        Parameters
        ----------
        content : str or iterable object of str or iterable object of int
            The letters or the state codes to be appended.
        """
        self._code = np.concatenate(
            [self._code, _encode(content, self._alphabet)]
        )

    def reverse(self):
        """
        Reverse the sequence.

        Returns
        -------
        reversed_sequence : Sequence
            The reversed sequence.
        """
        return self.copy(self._code[::-1].copy())

    def __getitem__(self, index):
        sub_code = self._code.__getitem__(index)
        if isinstance(sub_code, np.ndarray):
            return self.copy(sub_code)
        return self._alphabet.int_to_char(int(sub_code))

    def __len__(self):
        return len(self._code)

    def __iter__(self):
        for c in self._code:
            yield self._alphabet.int_to_char(int(c))

    def __eq__(self, item):
        if not isinstance(item, Sequence):
            return False
        if self._alphabet != item._alphabet:
            return False
        return np.array_equal(self._code, item._code)

    def __str__(self):
        return "".join(self.to_letters())

    def __add__(self, sequence):
        if self._alphabet != sequence.alphabet:
            raise AlphabetMismatchError(
                "Cannot concatenate sequences with different alphabets",
                self._alphabet, sequence.alphabet
            )
        return self.copy(np.concatenate([self._code, sequence.code]))


class ProbabilisticSequence(Copyable):
    """
    A named sequence, that assigns each resolved state of an
    :class:`Alphabet` a probability (or a count) at each site.

    Parameters
    ----------
    name : str
        The name of the sequence.
    probabilities : ndarray, shape=(n, size), dtype=float
        The probabilities of each of the resolved states (columns) at
        each of the *n* sites (rows).
    alphabet : Alphabet
        The alphabet of the sequence.

    Attributes
    ----------
    probabilities : ndarray, shape=(n, size), dtype=float
        The probabilities.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> prob_seq = ProbabilisticSequence(
    ...     "seq1", [[0.5, 0.5, 0, 0], [0, 0, 0, 1]], DNA()
    ... )
    >>> print(len(prob_seq))
    2
    >>> print(prob_seq[1])
    [0. 0. 0. 1.]
    """

    def __init__(self, name, probabilities, alphabet):
        self._name = name
        self._alphabet = alphabet
        self.probabilities = probabilities

    def __repr__(self):
        """Represent ProbabilisticSequence as a string for debugging."""
        return (
            f"ProbabilisticSequence({repr(self._name)}, "
            f"{repr(self._probabilities.tolist())}, {repr(self._alphabet)})"
        )

    def __copy_create__(self):
        return ProbabilisticSequence(
            self._name, self._probabilities.copy(), self._alphabet
        )

    @property
    def name(self):
        return self._name

    @property
    def alphabet(self):
        return self._alphabet

    def get_alphabet(self):
        return self._alphabet

    @property
    def probabilities(self):
        return self._probabilities

    @probabilities.setter
    def probabilities(self, probabilities):
        probabilities = np.asarray(probabilities, dtype=float)
        if probabilities.ndim == 1 and len(probabilities) == 0:
            probabilities = probabilities.reshape(
                0, self._alphabet.get_size()
            )
        if probabilities.ndim != 2:
            raise MalformedStateError(
                f"Expected a 2-D array, got {probabilities.ndim} dimensions",
                self._alphabet
            )
        if probabilities.shape[1] != self._alphabet.get_size():
            raise MalformedStateError(
                f"Expected {self._alphabet.get_size()} columns, "
                f"got {probabilities.shape[1]}",
                self._alphabet
            )
        self._probabilities = probabilities

    def __len__(self):
        return len(self._probabilities)

    def __getitem__(self, index):
        if isinstance(index, Integral):
            return self._probabilities[index].copy()
        return ProbabilisticSequence(
            self._name, self._probabilities[index], self._alphabet
        )

    def __eq__(self, item):
        if not isinstance(item, ProbabilisticSequence):
            return False
        if self._alphabet != item._alphabet:
            return False
        return np.array_equal(self._probabilities, item._probabilities)


def _encode(content, alphabet):
    if isinstance(content, str):
        width = alphabet.get_state_coding_size()
        if len(content) % width != 0:
            raise MalformedStateError(
                f"The length of the text ({len(content)}) is not a multiple "
                f"of the coding size {width}",
                alphabet
            )
        content = [content[i : i + width] for i in range(0, len(content), width)]
    elif isinstance(content, np.ndarray):
        return _encode_codes(content, alphabet)
    else:
        content = list(content)
    if len(content) == 0:
        return np.zeros(0, dtype=np.int64)
    if all(isinstance(element, str) for element in content):
        return np.array(
            [alphabet.char_to_int(letter) for letter in content], dtype=np.int64
        )
    return _encode_codes(content, alphabet)


def _encode_codes(codes, alphabet):
    codes = np.asarray(codes)
    if codes.ndim != 1:
        raise MalformedStateError(
            f"Expected a 1-D array of codes, got {codes.ndim} dimensions",
            alphabet
        )
    if len(codes) > 0 and not np.issubdtype(codes.dtype, np.integer):
        raise TypeError(f"Expected integer codes, got '{codes.dtype}'")
    codes = codes.astype(np.int64)
    for code in np.unique(codes):
        if not alphabet.is_int_in_alphabet(int(code)):
            raise BadIntError(int(code), alphabet)
    return codes
