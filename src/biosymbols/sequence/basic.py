# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Simple general-purpose alphabets.
"""

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["BinaryAlphabet", "IntegerAlphabet", "DefaultAlphabet"]

from biosymbols.sequence.alphabet import (
    AbstractAlphabet,
    LetterAlphabet,
    BadIntError,
    AlphabetConfigError,
)
from biosymbols.sequence.state import AlphabetState


class BinaryAlphabet(AbstractAlphabet):
    """
    An alphabet for presence/absence data.

    The states ``'0'`` and ``'1'`` are resolved, ``'?'`` (code 2)
    resolves into both.

    Examples
    --------

    >>> binary = BinaryAlphabet()
    >>> print(binary.char_to_int("1"))
    1
    >>> print(binary.get_alias(2))
    [0, 1]
    """

    def __init__(self):
        super().__init__()
        self.register_state(AlphabetState(-1, "-", "Gap"))
        for i in range(2):
            self.register_state(AlphabetState(i, str(i), ""))
        self.register_state(AlphabetState(2, "?", "Unresolved state"))

    def get_alphabet_type(self):
        return "Binary"

    def get_size(self):
        return 2

    def get_number_of_types(self):
        return 2

    def get_unknown_code(self):
        return 2

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state > 1

    def is_resolved_in(self, state1, state2):
        self._check_resolution_pair(state1, state2)
        return state1 == 2 or state1 == state2

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        if state == 2:
            return [0, 1]
        return [state]


class IntegerAlphabet(AbstractAlphabet):
    """
    An alphabet of consecutive integers.

    The letters are the decimal representations of the integers
    from `min` to `max`, the code of each state is the integer itself.
    ``'X'`` (code ``max + 1``) resolves into every integer.

    Parameters
    ----------
    max : int
        The largest integer.
    min : int, optional
        The smallest integer.

    Examples
    --------

    >>> alph = IntegerAlphabet(5, 2)
    >>> print(alph.get_size())
    4
    >>> print(alph.char_to_int("X"))
    6
    """

    def __init__(self, max, min=0):
        super().__init__()
        if min > max:
            raise AlphabetConfigError(
                f"The minimum {min} is larger than the maximum {max}"
            )
        self._min = min
        self._max = max
        self.register_state(AlphabetState(-1, "-", "Gap"))
        for i in range(min, max + 1):
            self.register_state(AlphabetState(i, str(i), ""))
        self.register_state(AlphabetState(max + 1, "X", "Unresolved state"))

    def __repr__(self):
        """Represent IntegerAlphabet as a string for debugging."""
        return f"IntegerAlphabet({self._max}, {self._min})"

    def __copy_create__(self):
        return IntegerAlphabet(self._max, self._min)

    def get_min(self):
        return self._min

    def get_max(self):
        return self._max

    def get_alphabet_type(self):
        return "Integer"

    def get_size(self):
        return self._max - self._min + 1

    def get_number_of_types(self):
        return self._max - self._min + 1

    def get_unknown_code(self):
        return self._max + 1

    def is_unresolved(self, state):
        if isinstance(state, str):
            return state == "X"
        return state == self._max + 1

    def is_resolved_in(self, state1, state2):
        self._check_resolution_pair(state1, state2)
        return state2 in self.get_alias(state1)

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        if state == self._max + 1:
            return list(range(self._min, self._max + 1))
        return [state]


class DefaultAlphabet(LetterAlphabet):
    """
    A permissive alphabet for text of unknown type.

    The 26 latin letters are the resolved states (codes 0 to 25),
    followed by the digits and ``'.'``.
    ``'?'`` (code 37) is the unresolved state.
    Letter lookup is case-insensitive.

    Examples
    --------

    >>> alph = DefaultAlphabet()
    >>> print(alph.char_to_int("z"), alph.char_to_int("?"))
    25 37
    """

    _CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890.?"

    def __init__(self):
        super().__init__()
        self.register_state(AlphabetState(-1, "-", "Gap"))
        for i, letter in enumerate(DefaultAlphabet._CHARS):
            self.register_state(AlphabetState(i, letter, ""))

    def get_alphabet_type(self):
        return "Default"

    def get_size(self):
        return 26

    def get_number_of_types(self):
        return 27

    def get_unknown_code(self):
        return 37

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state == 37
