# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["RNY"]

from biosymbols.sequence.alphabet import (
    AbstractAlphabet,
    AlphabetError,
    AlphabetConfigError,
    BadCharError,
    BadIntError,
)
from biosymbols.sequence.state import AlphabetState
from biosymbols.sequence.nucleic import NucleicAlphabet, DNA


# Nucleotide letter -> index in the letters of each position
_FIRST_POSITION = {"A": 0, "G": 0, "C": 1, "T": 2, "U": 2}
_SECOND_POSITION = {"A": 0, "G": 1, "C": 2, "T": 3, "U": 3}
_THIRD_POSITION = {"A": 0, "G": 1, "C": 2, "T": 2, "U": 2}
_UNDEFINED = ("-", "N")

_UNKNOWN = 350


class RNY(AbstractAlphabet):
    """
    The alphabet of RNY triplets, i.e. triplets of a pyrimidine-reduced
    first position (``'R'``, ``'C'``, ``'T'``/``'U'``), a nucleotide
    (``'A'``, ``'G'``, ``'C'``, ``'T'``/``'U'``) and a purine-reduced
    third position (``'A'``, ``'G'``, ``'Y'``).

    The 36 complete triplets are the resolved states with the codes
    ``12*i + 3*j + k``, where *i*, *j* and *k* are the indices of the
    letters at the three positions.
    Triplets with gaps (``'-'``) at some positions are unresolved and
    are arranged in bands of 50 codes:

    ========  ==================  ==========
    Pattern   Code                Example
    ========  ==================  ==========
    ``NN-``   ``50 + 12i + 3j``   ``'RA-'``
    ``N-N``   ``100 + 12i + k``   ``'R-A'``
    ``N--``   ``150 + 12i``       ``'R--'``
    ``-NN``   ``200 + 3j + k``    ``'-AA'``
    ``-N-``   ``250 + 3j``        ``'-A-'``
    ``--N``   ``300 + k``         ``'--A'``
    ========  ==================  ==========

    The gap ``'---'`` has the code -1 and ``'NNN'`` (code 350) is the
    completely unresolved triplet.
    Both resolve into every complete triplet.

    Parameters
    ----------
    nucleic_alphabet : NucleicAlphabet, optional
        The nucleotide alphabet the triplets are derived from.
        By default :class:`DNA`.

    Examples
    --------

    >>> rny = RNY()
    >>> print(rny.char_to_int("CCA"))
    18
    >>> print(rny.char_to_int("R--"))
    150
    >>> print(rny.get_alias(250))
    [0, 1, 2, 12, 13, 14, 24, 25, 26]
    >>> print(rny.get_rny("G", "T", "C"))
    RTY
    """

    def __init__(self, nucleic_alphabet=None):
        super().__init__()
        if nucleic_alphabet is None:
            nucleic_alphabet = DNA()
        if not isinstance(nucleic_alphabet, NucleicAlphabet):
            raise AlphabetConfigError(
                f"Expected a nucleic alphabet, "
                f"got '{nucleic_alphabet.get_alphabet_type()}'"
            )
        self._nucleic_alphabet = nucleic_alphabet
        fourth = nucleic_alphabet.int_to_char(3)
        s1 = "RC" + fourth + "-"
        s2 = "AGC" + fourth + "-"
        s3 = "AGY-"

        states = {}
        for i in range(3):
            for j in range(4):
                for k in range(3):
                    states[12 * i + 3 * j + k] = s1[i] + s2[j] + s3[k]
                states[50 + 12 * i + 3 * j] = s1[i] + s2[j] + s3[3]
            for k in range(3):
                states[100 + 12 * i + k] = s1[i] + s2[4] + s3[k]
            states[150 + 12 * i] = s1[i] + s2[4] + s3[3]
        for j in range(4):
            for k in range(3):
                states[200 + 3 * j + k] = s1[3] + s2[j] + s3[k]
            states[250 + 3 * j] = s1[3] + s2[j] + s3[3]
        for k in range(3):
            states[300 + k] = s1[3] + s2[4] + s3[k]

        self.register_state(AlphabetState(-1, "---", "---"))
        for code in sorted(states):
            letter = states[code]
            self.register_state(AlphabetState(code, letter, letter))
        self.register_state(AlphabetState(_UNKNOWN, "NNN", "NNN"))

    def __repr__(self):
        """Represent RNY as a string for debugging."""
        return f"RNY({repr(self._nucleic_alphabet)})"

    def __copy_create__(self):
        return RNY(self._nucleic_alphabet)

    def _normalize(self, letter):
        return letter.upper()

    def get_nucleic_alphabet(self):
        return self._nucleic_alphabet

    def get_alphabet_type(self):
        return f"RNY(letter={self._nucleic_alphabet.get_alphabet_type()})"

    def get_size(self):
        return 36

    def get_number_of_types(self):
        return 80

    def get_unknown_code(self):
        return _UNKNOWN

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state >= 50

    def char_to_int(self, letter):
        if isinstance(letter, str) and len(letter) != 3:
            raise BadCharError(
                letter, self, f"Triplet {repr(letter)} has not the length 3"
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
        if state == -1 or state == _UNKNOWN:
            return list(range(36))
        band, offset = divmod(state, 50)
        if band == 0:
            return [offset]
        if band == 1:
            return [offset + k for k in range(3)]
        if band == 2:
            return [offset + 3 * j for j in range(4)]
        if band == 3:
            return [offset + 3 * j + k for j in range(4) for k in range(3)]
        if band == 4:
            return [offset + 12 * i for i in range(3)]
        if band == 5:
            return [offset + 12 * i + k for i in range(3) for k in range(3)]
        # band == 6
        return [offset + 12 * i + 3 * j for i in range(3) for j in range(4)]

    def is_resolved_in(self, state1, state2):
        if not self.is_int_in_alphabet(state1):
            raise BadIntError(state1, self)
        if not self.is_int_in_alphabet(state2):
            raise BadIntError(state2, self)
        if self.is_unresolved(state2) or state2 == -1:
            raise BadIntError(state2, self, f"Code {state2} is unresolved")
        if state1 == -1 or state1 == _UNKNOWN:
            return True
        band, offset = divmod(state1, 50)
        diff = state2 - offset
        if band == 0:
            return diff == 0
        if band == 1:
            return 0 <= diff < 3
        if band == 2:
            return 0 <= diff < 12 and diff % 3 == 0
        if band == 3:
            return 0 <= diff < 12
        if band == 4:
            return 0 <= diff < 36 and diff % 12 == 0
        if band == 5:
            return 0 <= diff < 27 and diff % 12 < 3
        # band == 6
        return 0 <= diff < 36 and diff % 3 == 0

    def get_rny(self, pos1, pos2, pos3, alphabet=None):
        """
        Get the RNY triplet of three nucleotides.

        Parameters
        ----------
        pos1, pos2, pos3 : str or int
            The letters or the codes of the three nucleotides.
        alphabet : NucleicAlphabet, optional
            The alphabet of the nucleotide codes.
            Required if codes are given.

        Returns
        -------
        triplet : str or int
            The letter of the triplet, if letters were given, otherwise
            its code.
            A purine at the first position becomes ``'R'``, a
            pyrimidine at the third position ``'Y'``.
            Gaps and unresolved nucleotides give gaps in the triplet.

        Raises
        ------
        BadCharError
            If a nucleotide is ambiguous.
        AlphabetError
            If `alphabet` is not a nucleic alphabet.

        Notes
        -----
        The two forms treat an unresolved nucleotide differently.
        Nucleotide codes of `alphabet`, including ``N``, are mapped to
        the undefined band of the position.
        Letters are joined into the triplet as they are and must form a
        registered RNY letter, so an ``'N'`` next to a nucleotide raises
        a :class:`BadCharError`, while ``'-'`` is accepted.
        """
        if isinstance(pos1, str):
            first = "R" if pos1.upper() in ("A", "G") else pos1
            third = "Y" if pos3.upper() in ("C", "T", "U") else pos3
            triplet = first + pos2 + third
            # Validate the triplet
            self.char_to_int(triplet)
            return triplet

        if not isinstance(alphabet, NucleicAlphabet):
            raise AlphabetError(
                "The nucleotides must be codes of a nucleic alphabet", alphabet
            )
        code = 0
        undefined = 0
        for state, positions, radix, undefined_radix in (
            (pos1, _FIRST_POSITION, 4, 2),
            (pos2, _SECOND_POSITION, 3, 2),
            (pos3, _THIRD_POSITION, 1, 1),
        ):
            letter = alphabet.int_to_char(state)[0].upper()
            if letter in _UNDEFINED:
                undefined += 1
            elif letter in positions:
                code += positions[letter]
            else:
                raise BadCharError(letter, self)
            code *= radix
            undefined *= undefined_radix
        code += 50 * undefined
        return -1 if code == _UNKNOWN else code
