# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = [
    "AlphabetState",
    "NucleicAlphabetState",
    "ProteicAlphabetState",
    "AlphabetNumericState",
]


class AlphabetState(object):
    """
    A single state of an :class:`Alphabet`.

    A state combines the integer code used in sequence content with
    the letter used in text representations and a descriptive name.
    Several states of the same alphabet may share a code, e.g. the
    letters ``'N'``, ``'X'`` and ``'?'`` all denote the unresolved base
    in the DNA alphabet, but each letter belongs to exactly one state.

    Parameters
    ----------
    num : int
        The integer code of the state.
    letter : str
        The letter (or word) representing the state.
    name : str
        A human readable description.

    Examples
    --------

    >>> state = AlphabetState(0, "A", "Adenine")
    >>> print(state)
    A
    >>> print(state.num, state.name)
    0 Adenine
    """

    def __init__(self, num, letter, name):
        self.num = int(num)
        self.letter = letter
        self.name = name

    def __repr__(self):
        """Represent AlphabetState as a string for debugging."""
        return (
            f"{type(self).__name__}({self.num}, {repr(self.letter)}, "
            f"{repr(self.name)})"
        )

    def __str__(self):
        return self.letter

    def __eq__(self, item):
        if not isinstance(item, AlphabetState):
            return False
        return self.num == item.num and self.letter == item.letter

    def __hash__(self):
        return hash((self.num, self.letter))

    def copy(self):
        return AlphabetState(self.num, self.letter, self.name)


class NucleicAlphabetState(AlphabetState):
    """
    A nucleotide state carrying a 4-bit ambiguity code.

    Bit *i* of the binary code is set if the state is compatible with
    the *i*-th resolved base (A, C, G, T/U).
    Hence, the binary code of an ambiguous state is the bitwise union
    of the codes of the bases it can resolve to and the gap has the
    binary code 0.

    Parameters
    ----------
    num : int
        The integer code of the state.
    letter : str
        The one-letter representation.
    binary_code : int
        The ambiguity code.
    name : str
        A human readable description.
    """

    def __init__(self, num, letter, binary_code, name):
        super().__init__(num, letter, name)
        self.binary_code = int(binary_code)

    def __repr__(self):
        """Represent NucleicAlphabetState as a string for debugging."""
        return (
            f"NucleicAlphabetState({self.num}, {repr(self.letter)}, "
            f"{self.binary_code}, {repr(self.name)})"
        )

    def copy(self):
        return NucleicAlphabetState(
            self.num, self.letter, self.binary_code, self.name
        )


class ProteicAlphabetState(AlphabetState):
    """
    An amino acid state with its three-letter abbreviation.

    Parameters
    ----------
    num : int
        The integer code of the state.
    letter : str
        The one-letter representation.
    abbreviation : str
        The three-letter abbreviation, e.g. ``'ALA'``.
    name : str
        A human readable description.
    """

    def __init__(self, num, letter, abbreviation, name):
        super().__init__(num, letter, name)
        self.abbreviation = abbreviation

    def __repr__(self):
        """Represent ProteicAlphabetState as a string for debugging."""
        return (
            f"ProteicAlphabetState({self.num}, {repr(self.letter)}, "
            f"{repr(self.abbreviation)}, {repr(self.name)})"
        )

    def copy(self):
        return ProteicAlphabetState(
            self.num, self.letter, self.abbreviation, self.name
        )


class AlphabetNumericState(AlphabetState):
    """
    A state that represents a continuous value, e.g. the category of a
    discretized distribution.

    Parameters
    ----------
    num : int
        The integer code of the state.
    value : float
        The value represented by this state.
    letter : str
        The text representation.
    name : str
        A human readable description.
    """

    def __init__(self, num, value, letter, name):
        super().__init__(num, letter, name)
        self.value = float(value)

    def __repr__(self):
        """Represent AlphabetNumericState as a string for debugging."""
        return (
            f"AlphabetNumericState({self.num}, {self.value}, "
            f"{repr(self.letter)}, {repr(self.name)})"
        )

    def copy(self):
        return AlphabetNumericState(self.num, self.value, self.letter, self.name)
