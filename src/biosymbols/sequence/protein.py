# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["ProteicAlphabet"]

from biosymbols.sequence.alphabet import LetterAlphabet, BadIntError
from biosymbols.sequence.state import ProteicAlphabetState


_AMINO_ACIDS = [
    ("A", "ALA", "Alanine"),
    ("R", "ARG", "Arginine"),
    ("N", "ASN", "Asparagine"),
    ("D", "ASP", "Aspartic acid"),
    ("C", "CYS", "Cysteine"),
    ("Q", "GLN", "Glutamine"),
    ("E", "GLU", "Glutamic acid"),
    ("G", "GLY", "Glycine"),
    ("H", "HIS", "Histidine"),
    ("I", "ILE", "Isoleucine"),
    ("L", "LEU", "Leucine"),
    ("K", "LYS", "Lysine"),
    ("M", "MET", "Methionine"),
    ("F", "PHE", "Phenylalanine"),
    ("P", "PRO", "Proline"),
    ("S", "SER", "Serine"),
    ("T", "THR", "Threonine"),
    ("W", "TRP", "Tryptophan"),
    ("Y", "TYR", "Tyrosine"),
    ("V", "VAL", "Valine"),
]

# Two-way ambiguities: code -> resolved codes
_AMBIGUITIES = {
    20: [2, 3],
    21: [5, 6],
    22: [9, 10],
}


class ProteicAlphabet(LetterAlphabet):
    """
    The amino acid alphabet.

    The 20 proteinogenic amino acids have the codes 0 to 19, in the
    order ``ARNDCQEGHILKMFPSTWYV``.
    Three ambiguous states represent two amino acids each:
    ``'B'`` (N or D, code 20), ``'Z'`` (Q or E, code 21) and ``'J'``
    (I or L, code 22).
    The unresolved amino acid ``'X'`` (code 23, with the aliases
    ``'O'``, ``'0'`` and ``'?'``) resolves into any amino acid.
    The stop signal ``'*'`` has its own code -2, distinct from the gap.
    Letter lookup is case-insensitive.

    Examples
    --------

    >>> protein = ProteicAlphabet()
    >>> print(protein.char_to_int("W"))
    17
    >>> print(protein.get_alias(20))
    [2, 3]
    >>> print(protein.get_generic([2, 3]))
    20
    >>> print(protein.get_abbr("M"))
    MET
    """

    def __init__(self):
        super().__init__()
        self.register_state(ProteicAlphabetState(-1, "-", "GAP", "Gap"))
        for num, (letter, abbr, name) in enumerate(_AMINO_ACIDS):
            self.register_state(ProteicAlphabetState(num, letter, abbr, name))
        self.register_state(ProteicAlphabetState(20, "B", "B", "N or D"))
        self.register_state(ProteicAlphabetState(21, "Z", "Z", "Q or E"))
        self.register_state(ProteicAlphabetState(22, "J", "J", "I or L"))
        for letter in ("X", "O", "0", "?"):
            self.register_state(ProteicAlphabetState(
                23, letter, letter, "Unresolved amino acid"
            ))
        self.register_state(ProteicAlphabetState(-2, "*", "STOP", "Stop"))

    def get_alphabet_type(self):
        return "Proteic"

    def get_size(self):
        return 20

    def get_number_of_types(self):
        return 24

    def get_unknown_code(self):
        return 23

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state > 19

    def is_stop(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state == -2

    def get_resolved_chars(self):
        """
        Get the letters of the 20 amino acids.

        The stop signal ``'*'`` is neither a gap nor unresolved, but it
        is no amino acid either and is therefore excluded.

        Returns
        -------
        letters : list of str
            The letters in the order of their codes.
        """
        return [
            letter for letter in super().get_resolved_chars()
            if not self.is_stop(letter)
        ]

    def get_abbr(self, state):
        """
        Get the three-letter abbreviation of an amino acid.

        Parameters
        ----------
        state : str or int
            The letter or the code of the amino acid.

        Returns
        -------
        abbreviation : str
            The abbreviation, e.g. ``'ALA'``.
        """
        return self.get_state(state).abbreviation

    def is_resolved_in(self, state1, state2):
        self._check_resolution_pair(state1, state2)
        if state1 == 23:
            return True
        if state1 in _AMBIGUITIES:
            return state2 in _AMBIGUITIES[state1]
        return state1 == state2

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        if state == 23:
            return list(range(20))
        if state in _AMBIGUITIES:
            return list(_AMBIGUITIES[state])
        return [state]
