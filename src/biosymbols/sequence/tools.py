# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["AlphabetTools"]

import functools
from biosymbols.sequence.alphabet import AlphabetError
from biosymbols.sequence.nucleic import NucleicAlphabet, DNA, RNA
from biosymbols.sequence.protein import ProteicAlphabet
from biosymbols.sequence.basic import (
    BinaryAlphabet,
    IntegerAlphabet,
    DefaultAlphabet,
)
from biosymbols.sequence.chromosome import ChromosomeAlphabet
from biosymbols.sequence.numeric import NumericAlphabet
from biosymbols.sequence.word import WordAlphabet, CodonAlphabet
from biosymbols.sequence.rny import RNY
from biosymbols.sequence.allelic import AllelicAlphabet


# (DNA, RNA, protein) membership -> type of a character
_CHAR_TYPES = {
    (False, False, False): 0,
    (True, False, False): 1,
    (False, True, False): 2,
    (False, False, True): 3,
    (True, True, False): 4,
    (True, False, True): 5,
    (False, True, True): 6,
    (True, True, True): 7,
}


class AlphabetTools:
    """
    Shared alphabet instances and utility functions for alphabets.

    The standard alphabets are created on first access and shared
    afterwards.
    They must not be modified.

    Examples
    --------

    >>> dna = AlphabetTools.dna()
    >>> print(dna is AlphabetTools.dna())
    True
    >>> print(AlphabetTools.get_type("U"))
    2
    """

    @staticmethod
    @functools.cache
    def dna():
        return DNA()

    @staticmethod
    @functools.cache
    def rna():
        return RNA()

    @staticmethod
    @functools.cache
    def protein():
        return ProteicAlphabet()

    @staticmethod
    @functools.cache
    def default():
        return DefaultAlphabet()

    @staticmethod
    @functools.cache
    def dna_codon():
        return CodonAlphabet(AlphabetTools.dna())

    @staticmethod
    @functools.cache
    def rna_codon():
        return CodonAlphabet(AlphabetTools.rna())

    @staticmethod
    def get_type(char):
        """
        Classify a character by the standard alphabets it belongs to.

        Parameters
        ----------
        char : str
            The character.
            The lookup is case-insensitive.

        Returns
        -------
        char_type : int
            -1 for the gap ``'-'``, otherwise

            - 0: in no alphabet
            - 1: DNA only
            - 2: RNA only
            - 3: protein only
            - 4: DNA and RNA
            - 5: DNA and protein
            - 6: RNA and protein
            - 7: DNA, RNA and protein
        """
        if char == "-":
            return -1
        char = char.upper()
        return _CHAR_TYPES[(
            AlphabetTools.dna().is_char_in_alphabet(char),
            AlphabetTools.rna().is_char_in_alphabet(char),
            AlphabetTools.protein().is_char_in_alphabet(char),
        )]

    @staticmethod
    def is_nucleic_alphabet(alphabet):
        return isinstance(alphabet, NucleicAlphabet)

    @staticmethod
    def is_dna_alphabet(alphabet):
        return isinstance(alphabet, DNA)

    @staticmethod
    def is_rna_alphabet(alphabet):
        return isinstance(alphabet, RNA)

    @staticmethod
    def is_proteic_alphabet(alphabet):
        return isinstance(alphabet, ProteicAlphabet)

    @staticmethod
    def is_codon_alphabet(alphabet):
        return isinstance(alphabet, CodonAlphabet)

    @staticmethod
    def is_word_alphabet(alphabet):
        return isinstance(alphabet, WordAlphabet)

    @staticmethod
    def is_rny_alphabet(alphabet):
        return isinstance(alphabet, RNY)

    @staticmethod
    def is_binary_alphabet(alphabet):
        return isinstance(alphabet, BinaryAlphabet)

    @staticmethod
    def is_integer_alphabet(alphabet):
        return isinstance(alphabet, IntegerAlphabet)

    @staticmethod
    def is_default_alphabet(alphabet):
        return isinstance(alphabet, DefaultAlphabet)

    @staticmethod
    def is_allelic_alphabet(alphabet):
        return isinstance(alphabet, AllelicAlphabet)

    @staticmethod
    def is_chromosome_alphabet(alphabet):
        return isinstance(alphabet, ChromosomeAlphabet)

    @staticmethod
    def is_numeric_alphabet(alphabet):
        return isinstance(alphabet, NumericAlphabet)

    @staticmethod
    def check_alphabet_coding_size(alphabet):
        """
        Check whether all letters of an alphabet have the same length.

        Parameters
        ----------
        alphabet : AbstractAlphabet
            The alphabet to check.

        Returns
        -------
        uniform : bool
            True, if all letters have the same length.
        """
        lengths = {len(letter) for letter in alphabet.get_supported_chars()}
        return len(lengths) <= 1

    @staticmethod
    def get_alphabet_coding_size(alphabet):
        """
        Get the common length of the letters of an alphabet.

        Parameters
        ----------
        alphabet : AbstractAlphabet
            The alphabet.

        Returns
        -------
        coding_size : int
            The length of each letter.

        Raises
        ------
        AlphabetError
            If the letters have different lengths.
        """
        if not AlphabetTools.check_alphabet_coding_size(alphabet):
            raise AlphabetError(
                "The letters of the alphabet have different lengths", alphabet
            )
        return len(alphabet.get_supported_chars()[0])

    @staticmethod
    def match(alphabet, state1, state2):
        """
        Check whether two states can resolve into a common state.

        Parameters
        ----------
        alphabet : Alphabet
            The alphabet of the states.
        state1, state2 : int
            The codes of the states.

        Returns
        -------
        match : bool
            True, if the aliases of both states intersect.
        """
        return not set(alphabet.get_alias(state1)).isdisjoint(
            alphabet.get_alias(state2)
        )
