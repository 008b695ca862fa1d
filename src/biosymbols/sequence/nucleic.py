# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["NucleicAlphabet", "DNA", "RNA"]

from biosymbols.sequence.alphabet import LetterAlphabet, BadIntError
from biosymbols.sequence.state import NucleicAlphabetState


# (code, letter, binary code, name) of the resolved and ambiguous bases,
# the fourth base is added by the concrete alphabet
_AMBIGUOUS_STATES = [
    (4, "M", 3, "Adenine or Cytosine"),
    (5, "R", 5, "Purine (Adenine or Guanine)"),
    (6, "W", 9, "Adenine or {base}"),
    (7, "S", 6, "Cytosine or Guanine"),
    (8, "Y", 10, "Pyrimidine (Cytosine or {base})"),
    (9, "K", 12, "Guanine or {base}"),
    (10, "V", 7, "Adenine or Cytosine or Guanine"),
    (11, "H", 11, "Adenine or Cytosine or {base}"),
    (12, "D", 13, "Adenine or Guanine or {base}"),
    (13, "B", 14, "Cytosine or Guanine or {base}"),
]
_UNKNOWN_LETTERS = ["N", "X", "O", "0", "?"]


class NucleicAlphabet(LetterAlphabet):
    """
    Base class for nucleotide alphabets with IUPAC ambiguity codes.

    Each state carries a 4-bit binary code, where bit *i* is set if
    the state is compatible with the *i*-th resolved base.
    The four resolved bases have the codes 0 to 3, the ambiguous
    states the codes 4 to 13 and the unresolved base ``'N'``
    (with the aliases ``'X'``, ``'O'``, ``'0'`` and ``'?'``) the
    code 14.
    Ambiguity operations work on the binary codes:
    the generic state of a set of states is the state whose binary
    code is the union of the binary codes of the set.
    Letter lookup is case-insensitive.

    Parameters
    ----------
    exclamation_mark_counts_as_gap : bool, optional
        If true, ``'!'`` (frameshift) is read as gap, otherwise as
        unresolved base.
    """

    # Subclasses define the fourth base
    _fourth_base = None

    def __init__(self, exclamation_mark_counts_as_gap=False):
        super().__init__()
        self._exclamation_mark_counts_as_gap = exclamation_mark_counts_as_gap
        base_letter, base_name = self._fourth_base
        self.register_state(NucleicAlphabetState(-1, "-", 0, "Gap"))
        self.register_state(NucleicAlphabetState(0, "A", 1, "Adenine"))
        self.register_state(NucleicAlphabetState(1, "C", 2, "Cytosine"))
        self.register_state(NucleicAlphabetState(2, "G", 4, "Guanine"))
        self.register_state(NucleicAlphabetState(3, base_letter, 8, base_name))
        for num, letter, binary_code, name in _AMBIGUOUS_STATES:
            self.register_state(NucleicAlphabetState(
                num, letter, binary_code, name.format(base=base_name)
            ))
        for letter in _UNKNOWN_LETTERS:
            self.register_state(
                NucleicAlphabetState(14, letter, 15, "Unresolved base")
            )
        if exclamation_mark_counts_as_gap:
            self.register_state(NucleicAlphabetState(-1, "!", 0, "Frameshift"))
        else:
            self.register_state(
                NucleicAlphabetState(14, "!", 15, "Unresolved base")
            )
        # Binary code -> position of the first state with this code
        self._binary_codes = {}
        for position, state in enumerate(self._states):
            self._binary_codes.setdefault(state.binary_code, position)

    def __repr__(self):
        """Represent the nucleic alphabet as a string for debugging."""
        if self._exclamation_mark_counts_as_gap:
            return f"{type(self).__name__}(exclamation_mark_counts_as_gap=True)"
        return f"{type(self).__name__}()"

    def __copy_create__(self):
        return type(self)(self._exclamation_mark_counts_as_gap)

    def get_size(self):
        return 4

    def get_number_of_types(self):
        return 15

    def get_unknown_code(self):
        return 14

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state > 3

    def get_binary_code(self, state):
        """
        Get the 4-bit ambiguity code of a state.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.

        Returns
        -------
        binary_code : int
            The ambiguity code.
        """
        return self.get_state(state).binary_code

    def _state_for_binary_code(self, binary_code):
        try:
            return self._states[self._binary_codes[binary_code]].num
        except KeyError:
            raise BadIntError(
                binary_code, self,
                f"Binary code {binary_code} is not in the alphabet"
            )

    def is_resolved_in(self, state1, state2):
        """
        Check whether `state1` can resolve into the resolved
        `state2`.

        The gap only resolves into itself.
        Otherwise, the bit of `state2` must be set in the binary code
        of `state1`.

        Parameters
        ----------
        state1, state2 : int
            The potentially ambiguous state and the resolved state.

        Returns
        -------
        resolved : bool
            True, if `state1` can be resolved into `state2`.

        Examples
        --------

        >>> dna = DNA()
        >>> print(dna.is_resolved_in(dna.char_to_int("N"), 0))
        True
        >>> print(dna.is_resolved_in(dna.char_to_int("Y"), 0))
        False
        """
        if not self.is_int_in_alphabet(state1):
            raise BadIntError(state1, self)
        if not self.is_int_in_alphabet(state2):
            raise BadIntError(state2, self)
        if self.is_unresolved(state2):
            raise BadIntError(state2, self, f"Code {state2} is unresolved")
        if state2 == -1 or state1 == -1:
            return state1 == state2
        return self.get_binary_code(state1) & self.get_binary_code(state2) != 0

    def get_alias(self, state):
        if isinstance(state, str):
            return [self.int_to_char(code) for code in self.get_alias(self.char_to_int(state))]
        binary_code = self.get_binary_code(state)
        if binary_code == 0:
            return [-1]
        return [i for i in range(4) if binary_code & (1 << i)]

    def get_generic(self, states):
        """
        Get the state comprising all given states.

        Parameters
        ----------
        states : iterable object of str or iterable object of int
            The states to summarize.

        Returns
        -------
        generic : str or int
            The state whose binary code is the union of the binary
            codes of the given states.

        Examples
        --------

        >>> dna = DNA()
        >>> print(dna.get_generic(["A", "G"]))
        R
        >>> print(dna.get_generic([0, 1, 3]))
        11
        """
        states = list(states)
        if len(states) == 0:
            raise ValueError("At least one state is required")
        if isinstance(states[0], str):
            codes = [self.char_to_int(letter) for letter in states]
            return self.int_to_char(self.get_generic(codes))
        binary_code = 0
        for state in states:
            binary_code |= self.get_binary_code(state)
        return self._state_for_binary_code(binary_code)

    def subtract(self, state1, state2):
        """
        Remove the bases of `state2` from `state1`.

        Parameters
        ----------
        state1, state2 : str or int
            The states.

        Returns
        -------
        state : str or int
            The state comprising the bases of `state1`, that are not
            in `state2`.
            If no base remains, the gap is returned.
        """
        if isinstance(state1, str):
            return self.int_to_char(
                self.subtract(self.char_to_int(state1), self.char_to_int(state2))
            )
        binary_code = self.get_binary_code(state1) & ~self.get_binary_code(state2)
        return self._state_for_binary_code(binary_code)

    def get_overlap(self, state1, state2):
        """
        Get the bases shared by two states.

        Parameters
        ----------
        state1, state2 : str or int
            The states.

        Returns
        -------
        state : str or int
            The state comprising the bases in `state1` and `state2`.
            If there is no such base, the gap is returned.
        """
        if isinstance(state1, str):
            return self.int_to_char(
                self.get_overlap(self.char_to_int(state1), self.char_to_int(state2))
            )
        binary_code = self.get_binary_code(state1) & self.get_binary_code(state2)
        return self._state_for_binary_code(binary_code)


class DNA(NucleicAlphabet):
    """
    The DNA alphabet with IUPAC ambiguity codes.

    Parameters
    ----------
    exclamation_mark_counts_as_gap : bool, optional
        If true, ``'!'`` (frameshift) is read as gap, otherwise as
        unresolved base.

    Examples
    --------

    >>> dna = DNA()
    >>> print(dna.char_to_int("A"), dna.char_to_int("n"))
    0 14
    >>> print(dna.int_to_char(14))
    N
    >>> print(dna.get_alias("W"))
    ['A', 'T']
    """

    _fourth_base = ("T", "Thymine")

    def get_alphabet_type(self):
        return "DNA"


class RNA(NucleicAlphabet):
    """
    The RNA alphabet with IUPAC ambiguity codes.

    It is equal to the :class:`DNA` alphabet, except that the fourth
    base is uracil (``'U'``).

    Parameters
    ----------
    exclamation_mark_counts_as_gap : bool, optional
        If true, ``'!'`` (frameshift) is read as gap, otherwise as
        unresolved base.
    """

    _fourth_base = ("U", "Uracil")

    def get_alphabet_type(self):
        return "RNA"
