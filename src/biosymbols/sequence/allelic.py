# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The allelic alphabet describes the genotype of a population sample at a
site by the count of alleles of each state of a base alphabet.
"""

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["AllelicAlphabet"]

import math
import numpy as np
from biosymbols.sequence.alphabet import (
    AbstractAlphabet,
    LetterAlphabet,
    BadCharError,
    BadIntError,
    AlphabetMismatchError,
    AlphabetConfigError,
    MalformedStateError,
)
from biosymbols.sequence.state import AlphabetState
from biosymbols.sequence.sequence import Sequence, ProbabilisticSequence


# Counts and likelihoods below this value are treated as zero
EPSILON = 1e-10


class AllelicAlphabet(AbstractAlphabet):
    """
    An alphabet of allele counts in a sample of *N* alleles drawn from
    the resolved states of a base alphabet.

    The states are

    - *monomorphic* states, where all *N* alleles are the same state
      *k* of the base alphabet.
      Their code is *k* and their letter is written as e.g. ``'A4-0'``
      for ``'A'`` and *N = 4*.
    - *polymorphic* states, where *N - n* alleles are the state *i*
      and *n* alleles are the state *j > i*, for ``1 <= n < N``.
      Their code is ``(i*S + j) * (N-1) + S + n - 1``, where *S* is
      the size of the base alphabet, and their letter is written as e.g.
      ``'A3C1'``.
      The counts are zero-padded to the number of digits of *N*.

    In addition there is a gap state (code -1) and an unknown state,
    whose code is ``S*S * (N-1)``.
    Hence, the codes are not contiguous.

    Parameters
    ----------
    alphabet : AbstractAlphabet
        The base alphabet.
    n_alleles : int
        The number of alleles *N*, at least 2.
    eps : float, optional
        Counts and likelihoods below this value are treated as zero.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> alph = AllelicAlphabet(DNA(), 4)
    >>> print(alph.get_number_of_chars(), alph.get_size())
    24 22
    >>> print(alph.get_unknown_code())
    48
    >>> print(alph.int_to_char(0), alph.int_to_char(8), alph.int_to_char(48))
    A4-0 A2C2 ?4-0
    """

    def __init__(self, alphabet, n_alleles, eps=EPSILON):
        super().__init__()
        if n_alleles <= 1:
            raise AlphabetConfigError(
                f"At least 2 alleles are required, got {n_alleles}"
            )
        self._alphabet = alphabet
        self._n_alleles = n_alleles
        self._eps = eps
        self._case_insensitive = (
            isinstance(alphabet, LetterAlphabet)
            and not alphabet.is_case_sensitive()
        )

        size = alphabet.get_size()
        digits = len(str(n_alleles))
        gap_letter = alphabet.int_to_char(alphabet.get_gap_code())
        gap_word = gap_letter + "0" * digits

        self.register_state(AlphabetState(
            -1, gap_letter + str(n_alleles) + gap_word, "Gap"
        ))
        for k in range(size):
            letter = alphabet.int_to_char(k) + str(n_alleles) + gap_word
            self.register_state(AlphabetState(k, letter, letter))
        # Allele indices (i, j, count of j) of the polymorphic states
        self._polymorphic = []
        for i in range(size - 1):
            for j in range(i + 1, size):
                offset = (i * size + j) * (n_alleles - 1) + size
                for n in range(1, n_alleles):
                    letter = (
                        alphabet.int_to_char(i)
                        + str(n_alleles - n).zfill(digits)
                        + alphabet.int_to_char(j)
                        + str(n).zfill(digits)
                    )
                    self.register_state(
                        AlphabetState(offset + n - 1, letter, letter)
                    )
                    self._polymorphic.append((i, j, n))
        self._unknown = size * size * (n_alleles - 1)
        letter = (
            "?" * alphabet.get_state_coding_size()
            + str(n_alleles) + gap_word
        )
        self.register_state(AlphabetState(self._unknown, letter, "Unknown"))

    def __repr__(self):
        """Represent AllelicAlphabet as a string for debugging."""
        return f"AllelicAlphabet({repr(self._alphabet)}, {self._n_alleles})"

    def __copy_create__(self):
        return AllelicAlphabet(self._alphabet, self._n_alleles, self._eps)

    def _normalize(self, letter):
        if self._case_insensitive:
            return letter.upper()
        return letter

    def get_state_alphabet(self):
        return self._alphabet

    def get_n_alleles(self):
        return self._n_alleles

    def get_alphabet_type(self):
        return (
            f"Allelic(alphabet={self._alphabet.get_alphabet_type()},"
            f"nbAlleles_={self._n_alleles})"
        )

    def get_size(self):
        return self.get_number_of_chars() - 2

    def get_number_of_types(self):
        return self.get_number_of_chars() - 1

    def get_unknown_code(self):
        return self._unknown

    def get_state_coding_size(self):
        return 2 * (
            self._alphabet.get_state_coding_size() + len(str(self._n_alleles))
        )

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state == self._unknown

    def char_to_int(self, letter):
        if isinstance(letter, str) and len(letter) != self.get_state_coding_size():
            raise BadCharError(
                letter, self,
                f"Letter {repr(letter)} has not the width "
                f"{self.get_state_coding_size()}"
            )
        return super().char_to_int(letter)

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        if state == self._unknown:
            return [
                code for code in self.get_supported_ints()
                if code != -1 and code != self._unknown
            ]
        return [state]

    def is_resolved_in(self, state1, state2):
        self._check_resolution_pair(state1, state2)
        if state1 == self._unknown:
            return True
        return state1 == state2

    def compute_likelihoods(self, counts):
        """
        Compute the likelihood of each allelic state given the observed
        counts of the states of the base alphabet.

        Under the monomorphic states, only the state with nonzero count
        can be observed.
        Under a polymorphic state with *N - n* alleles *i* and *n*
        alleles *j*, the counts *ci* and *cj* follow a binomial
        distribution with the probability *(N - n) / N* for *i*, if no
        third state is observed.

        Parameters
        ----------
        counts : ndarray, shape=(S,), dtype=float
            The counts (or weights) of each resolved state of the base
            alphabet.

        Returns
        -------
        likelihoods : ndarray, shape=(size,), dtype=float
            The likelihood of each state in registration order, i.e.
            the monomorphic states followed by the polymorphic states.
            Likelihoods below the tolerance are set to 0.

        Raises
        ------
        MalformedStateError
            If the number of counts does not match the base alphabet.

        Examples
        --------

        >>> from biosymbols.sequence import DNA
        >>> alph = AllelicAlphabet(DNA(), 4)
        >>> likelihoods = alph.compute_likelihoods([6, 0, 2, 0])
        >>> print(round(likelihoods[alph.get_state_index("A2G2") - 1], 6))
        0.109375
        """
        counts = np.asarray(counts, dtype=float)
        size = self._alphabet.get_size()
        if counts.shape != (size,):
            raise MalformedStateError(
                f"Expected {size} counts, got {counts.size}", self
            )
        present = counts > self._eps
        n_present = np.count_nonzero(present)
        likelihoods = np.zeros(self.get_size())

        for k in range(size):
            if present[k] and n_present == 1:
                likelihoods[k] = 1.0

        n_alleles = self._n_alleles
        for index, (i, j, n) in enumerate(self._polymorphic):
            others = n_present - int(present[i]) - int(present[j])
            if others > 0:
                continue
            ci = counts[i]
            cj = counts[j]
            log_likelihood = (
                math.lgamma(ci + cj + 1)
                - math.lgamma(ci + 1)
                - math.lgamma(cj + 1)
                + ci * math.log((n_alleles - n) / n_alleles)
                + cj * math.log(n / n_alleles)
            )
            likelihood = math.exp(log_likelihood)
            if likelihood >= self._eps:
                likelihoods[size + index] = likelihood
        return likelihoods

    def convert_from_state_alphabet(self, sequence):
        """
        Convert a sequence over the base alphabet into a probabilistic
        sequence of allelic state likelihoods.

        Parameters
        ----------
        sequence : Sequence or ProbabilisticSequence
            The sequence over the base alphabet.
            For a :class:`Sequence`, each site counts once for each
            state it can resolve into, the gap counts for each state.
            For a :class:`ProbabilisticSequence` its rows are taken as
            counts.

        Returns
        -------
        likelihoods : ProbabilisticSequence
            The likelihoods of the allelic states at each site.

        Raises
        ------
        AlphabetMismatchError
            If the alphabet of the sequence is not the base alphabet.
        TypeError
            If the sequence is neither a :class:`Sequence` nor a
            :class:`ProbabilisticSequence`.
        """
        if not isinstance(sequence, (Sequence, ProbabilisticSequence)):
            raise TypeError(
                f"Expected 'Sequence' or 'ProbabilisticSequence', "
                f"got '{type(sequence).__name__}'"
            )
        if sequence.alphabet != self._alphabet:
            raise AlphabetMismatchError(
                "Sequence alphabet does not match the allelic base alphabet",
                sequence.alphabet, self._alphabet
            )
        size = self._alphabet.get_size()
        if isinstance(sequence, ProbabilisticSequence):
            counts = sequence.probabilities
        else:
            counts = np.zeros((len(sequence), size))
            for site, code in enumerate(sequence.code):
                code = int(code)
                if self._alphabet.is_gap(code):
                    counts[site] = 1
                else:
                    counts[site, self._alphabet.get_alias(code)] = 1
        likelihoods = np.zeros((len(counts), self.get_size()))
        for site in range(len(counts)):
            likelihoods[site] = self.compute_likelihoods(counts[site])
        return ProbabilisticSequence(sequence.name, likelihoods, self)
