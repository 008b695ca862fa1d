# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Alphabets, whose states are words composed of the states of other
alphabets.
"""

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["WordAlphabet", "CodonAlphabet"]

import itertools
import warnings
import numpy as np
from biosymbols.sequence.alphabet import (
    Alphabet,
    AbstractAlphabet,
    LetterAlphabet,
    BadCharError,
    BadIntError,
    AlphabetMismatchError,
    AlphabetConfigError,
)
from biosymbols.sequence.state import AlphabetState
from biosymbols.sequence.nucleic import NucleicAlphabet
from biosymbols.sequence.sequence import Sequence


class WordAlphabet(AbstractAlphabet):
    """
    An alphabet of words, where each position of a word is a state of
    an underlying alphabet.

    The codes of the words are mixed radix numbers of the codes of
    their positions, where the last position varies fastest.
    For example the code of the word *(c1, c2)* is ``c1 * s2 + c2``,
    where *s2* is the size of the second alphabet.
    Only resolved states of the underlying alphabets form words:
    a word containing an unresolved state is read as unresolved word
    (``'N'`` at each position), a word containing a gap is read as gap.
    The letters of the words concatenate the first character of the
    letters of each position.

    If all underlying alphabets are case-insensitive letter alphabets,
    the lookup of words is case-insensitive as well.

    Parameters
    ----------
    alphabets : Alphabet or iterable object of Alphabet
        The alphabet of each position.
        If a single alphabet is given, `length` is required.
    length : int, optional
        The number of positions, if `alphabets` is a single alphabet.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> alph = WordAlphabet(DNA(), 2)
    >>> print(alph.get_size())
    16
    >>> print(alph.char_to_int("AC"))
    1
    >>> print(alph.char_to_int("AN"))
    16
    >>> print(alph.get_positions(6))
    [1, 2]
    >>> print(alph.get_alphabet_type())
    Word alphabet: DNA DNA
    """

    def __init__(self, alphabets, length=None):
        super().__init__()
        if isinstance(alphabets, Alphabet):
            if length is None:
                raise AlphabetConfigError(
                    "The word length is required for a single alphabet"
                )
            alphabets = [alphabets] * length
        elif length is not None:
            raise AlphabetConfigError(
                "The word length is only allowed for a single alphabet"
            )
        alphabets = list(alphabets)
        if len(alphabets) == 0:
            raise AlphabetConfigError("At least one alphabet is required")
        self._alphabets = alphabets
        self._case_insensitive = all(
            isinstance(alph, LetterAlphabet) and not alph.is_case_sensitive()
            for alph in alphabets
        )
        sizes = [alph.get_size() for alph in alphabets]
        # Weight of each position in the mixed radix code
        self._radices = [int(np.prod(sizes[i + 1 :])) for i in range(len(sizes))]
        size = int(np.prod(sizes))
        self._build(size)

    def _build(self, size):
        length = len(self._alphabets)
        self.resize(size + 2)
        self.set_state(0, AlphabetState(-1, "-" * length, "Gap"))
        # The last position changes fastest
        words = itertools.product(
            *[range(alph.get_size()) for alph in self._alphabets]
        )
        for code, word in enumerate(words):
            letter = "".join(
                [alph.int_to_char(c)[0] for alph, c in zip(self._alphabets, word)]
            )
            self.set_state(code + 1, AlphabetState(code, letter, letter))
        self.set_state(
            size + 1, AlphabetState(size, "N" * length, "Unresolved")
        )
        self.remap()

    def __repr__(self):
        """Represent WordAlphabet as a string for debugging."""
        return f"WordAlphabet({repr(self._alphabets)})"

    def __copy_create__(self):
        return WordAlphabet(self._alphabets)

    def _normalize(self, letter):
        if self._case_insensitive:
            return letter.upper()
        return letter

    def get_alphabet_type(self):
        return "Word alphabet: " + " ".join(
            [alph.get_alphabet_type() for alph in self._alphabets]
        )

    def get_size(self):
        return self.get_number_of_chars() - 2

    def get_number_of_types(self):
        return self.get_number_of_chars() - 1

    def get_unknown_code(self):
        return self.get_size()

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state == self.get_unknown_code()

    def get_length(self):
        return len(self._alphabets)

    def get_n_alphabet(self, n):
        """
        Get the alphabet of a position.

        Parameters
        ----------
        n : int
            The position.

        Returns
        -------
        alphabet : Alphabet
            The alphabet of the position.
        """
        if n < 0 or n >= len(self._alphabets):
            raise IndexError(
                f"Position {n} is out of range for words of length "
                f"{len(self._alphabets)}"
            )
        return self._alphabets[n]

    def has_unique_alphabet(self):
        """
        Check whether all positions have the same alphabet.

        Returns
        -------
        unique : bool
            True, if the alphabet types of all positions are equal.
        """
        first = self._alphabets[0]
        return all(alph == first for alph in self._alphabets[1:])

    def char_to_int(self, letter):
        if not isinstance(letter, str):
            raise TypeError(
                f"Expected a letter of type 'str', got '{type(letter).__name__}'"
            )
        if len(letter) != len(self._alphabets):
            raise BadCharError(
                letter, self,
                f"Word {repr(letter)} has not the length "
                f"{len(self._alphabets)}"
            )
        normalized = self._normalize(letter)
        if normalized == self.get_char_code_at(self.get_number_of_chars() - 1):
            return self.get_unknown_code()
        contains_gap = False
        for alph, position in zip(self._alphabets, normalized):
            if not alph.is_char_in_alphabet(position):
                raise BadCharError(letter, self)
            if alph.is_unresolved(position):
                return self.get_unknown_code()
            if alph.is_gap(position):
                contains_gap = True
        if contains_gap:
            return -1
        return super().char_to_int(normalized)

    def get_name(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return super().get_name(state)

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        if state == self.get_unknown_code():
            return list(range(self.get_size()))
        return [state]

    def is_resolved_in(self, state1, state2):
        self._check_resolution_pair(state1, state2)
        if state1 == self.get_unknown_code():
            return True
        return state1 == state2

    ### Words and positions ###

    def get_word(self, states, pos=0):
        """
        Get the word starting at a position of a list of states of the
        underlying alphabets.

        Parameters
        ----------
        states : list of int or list of str
            The codes or letters of the positions.
        pos : int, optional
            The position of the first state of the word.

        Returns
        -------
        word : int or str
            The code of the word if codes were given, or the letter of
            the word if letters were given.

        Raises
        ------
        BadIntError
            If the list is too short to contain a word at `pos`.
        """
        states = list(states)
        length = len(self._alphabets)
        if len(states) < pos + length:
            raise BadIntError(
                len(states), self,
                f"{len(states)} states are too few for a word at position {pos}"
            )
        if len(states) > 0 and isinstance(states[0], str):
            word = "".join(states[pos : pos + length])
            # Validate the word
            self.char_to_int(word)
            return word
        word = "".join([
            alph.int_to_char(int(states[pos + i]))
            for i, alph in enumerate(self._alphabets)
        ])
        return self.char_to_int(word)

    def get_n_position(self, word, n):
        """
        Get the state at a position of a word.

        Parameters
        ----------
        word : int or str
            The code or the letter of the word.
        n : int
            The position in the word.

        Returns
        -------
        state : int or str
            The code of the position in its alphabet, if a code was
            given, otherwise the letter.
            For the unresolved word, the unknown code of the position
            alphabet is returned.
        """
        alph = self.get_n_alphabet(n)
        if isinstance(word, str):
            if len(word) != len(self._alphabets):
                raise BadCharError(word, self)
            return word[n]
        if not self.is_int_in_alphabet(word):
            raise BadIntError(word, self)
        if word == -1:
            return -1
        if self.is_unresolved(word):
            return alph.get_unknown_code()
        return (word // self._radices[n]) % alph.get_size()

    def get_positions(self, word):
        """
        Get the states of all positions of a word.

        Parameters
        ----------
        word : int or str
            The code or the letter of the word.

        Returns
        -------
        states : list of int or list of str
            The codes or the letters of the positions.
        """
        return [self.get_n_position(word, n) for n in range(len(self._alphabets))]

    def translate(self, sequence, pos=0):
        """
        Convert a sequence over the position alphabet into a sequence
        of words.

        Parameters
        ----------
        sequence : Sequence
            The sequence.
            Its alphabet must be the alphabet of all positions.
        pos : int, optional
            The position in the sequence where the first word starts.

        Returns
        -------
        word_sequence : Sequence
            The sequence of words.
            Trailing positions that do not form a complete word are
            ignored.

        Raises
        ------
        AlphabetMismatchError
            If the positions of this alphabet have different
            alphabets or the alphabet of the sequence does not match.
        """
        if (
            not self.has_unique_alphabet()
            or sequence.alphabet != self._alphabets[0]
        ):
            raise AlphabetMismatchError(
                "No matching alphabets", sequence.alphabet, self._alphabets[0]
            )
        length = len(self._alphabets)
        code = sequence.code
        words = []
        i = pos
        while i + length <= len(code):
            words.append(self.get_word(code, i))
            i += length
        if i < len(code):
            warnings.warn(
                f"{len(code) - i} trailing positions do not form a complete "
                f"word and are ignored"
            )
        return Sequence(sequence.name, np.array(words, dtype=np.int64), self)

    def reverse(self, sequence):
        """
        Convert a sequence of words into a sequence over the position
        alphabet.

        Parameters
        ----------
        sequence : Sequence
            The sequence of words.

        Returns
        -------
        position_sequence : Sequence
            The sequence of the positions of each word.

        Raises
        ------
        AlphabetMismatchError
            If the positions of this alphabet have different
            alphabets or the alphabet of the sequence does not match.
        """
        if not self.has_unique_alphabet() or sequence.alphabet != self:
            raise AlphabetMismatchError(
                "No matching alphabets", sequence.alphabet, self
            )
        reversed_sequence = Sequence(
            sequence.name, alphabet=self._alphabets[0]
        )
        for word in sequence.code:
            reversed_sequence.append(self.get_positions(int(word)))
        return reversed_sequence


class CodonAlphabet(WordAlphabet):
    """
    The alphabet of the 64 codons of a nucleic alphabet.

    The code of a codon is ``16 * p1 + 4 * p2 + p3``, where *p1*, *p2*
    and *p3* are the nucleotide codes (A=0, C=1, G=2, T/U=3) of the
    three positions.
    ``'---'`` is the gap and ``'NNN'`` (code 64) the unresolved codon.

    Parameters
    ----------
    nucleic_alphabet : NucleicAlphabet
        The alphabet of the positions.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> codons = CodonAlphabet(DNA())
    >>> print(codons.char_to_int("ATG"))
    14
    >>> print(codons.get_codon(3, 3, 3))
    63
    >>> print(codons.get_codon("T", "A", "A"))
    TAA
    >>> print(codons.get_first_position(63))
    3
    """

    def __init__(self, nucleic_alphabet):
        if not isinstance(nucleic_alphabet, NucleicAlphabet):
            raise AlphabetConfigError(
                f"Expected a nucleic alphabet, "
                f"got '{nucleic_alphabet.get_alphabet_type()}'"
            )
        super().__init__(nucleic_alphabet, 3)
        self._nucleic_alphabet = nucleic_alphabet

    def __repr__(self):
        """Represent CodonAlphabet as a string for debugging."""
        return f"CodonAlphabet({repr(self._nucleic_alphabet)})"

    def __copy_create__(self):
        return CodonAlphabet(self._nucleic_alphabet)

    def get_alphabet_type(self):
        return f"Codon(letter={self._nucleic_alphabet.get_alphabet_type()})"

    def get_nucleic_alphabet(self):
        return self._nucleic_alphabet

    def get_state_coding_size(self):
        return 3

    def get_codon(self, pos1, pos2, pos3):
        """
        Get the codon composed of three nucleotides.

        Parameters
        ----------
        pos1, pos2, pos3 : int or str
            The codes or the letters of the three nucleotides.

        Returns
        -------
        codon : int or str
            The code of the codon, if codes were given.
            If any position is unresolved, the unresolved codon
            (64) is returned, if any position is a gap, the gap.
            If letters were given, the concatenated letters are
            returned.
        """
        nucleic = self._nucleic_alphabet
        if isinstance(pos1, str):
            codon = pos1 + pos2 + pos3
            self.char_to_int(codon)
            return codon
        positions = (pos1, pos2, pos3)
        for position in positions:
            if not nucleic.is_int_in_alphabet(position):
                raise BadIntError(position, nucleic)
        if any(nucleic.is_unresolved(p) for p in positions):
            return self.get_unknown_code()
        if any(nucleic.is_gap(p) for p in positions):
            return -1
        return pos3 + 4 * pos2 + 16 * pos1

    def get_first_position(self, codon):
        return self.get_n_position(codon, 0)

    def get_second_position(self, codon):
        return self.get_n_position(codon, 1)

    def get_third_position(self, codon):
        return self.get_n_position(codon, 2)

    def get_gc_in_codon(self, codon):
        """
        Count the G and C nucleotides in a codon.

        Parameters
        ----------
        codon : int
            The code of the codon.

        Returns
        -------
        count : int
            The number of positions with C or G.
        """
        return sum(
            1 for position in self.get_positions(codon) if position in (1, 2)
        )
