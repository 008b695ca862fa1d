# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence.index"
__author__ = "The biosymbols developers"
__all__ = [
    "AlphabetIndex1",
    "AlphabetIndex2",
    "UserAlphabetIndex1",
    "UserAlphabetIndex2",
]

import abc
import numpy as np
from biosymbols.copyable import Copyable
from biosymbols.sequence.alphabet import BadIntError


class AlphabetIndex1(Copyable, metaclass=abc.ABCMeta):
    """
    A property value for each resolved state of an alphabet.

    The values are indexed by the state codes ``0`` to ``size - 1`` of
    the alphabet.
    Each state may be given either as code or as letter.
    """

    @property
    @abc.abstractmethod
    def alphabet(self):
        """
        The alphabet of the index.
        """
        pass

    @abc.abstractmethod
    def index_vector(self):
        """
        Get the values of all resolved states.

        Returns
        -------
        vector : ndarray, shape=(size,), dtype=float
            The value of each state, indexed by its code.
        """
        pass

    def get_index(self, state):
        """
        Get the value of a state.

        Parameters
        ----------
        state : int or str
            The code or the letter of the state.

        Returns
        -------
        value : float
            The value of the state.

        Raises
        ------
        BadIntError, BadCharError
            If the state is not a resolved state of the alphabet.
        """
        return float(self.index_vector()[_resolved_code(self.alphabet, state)])


class AlphabetIndex2(Copyable, metaclass=abc.ABCMeta):
    """
    A property value for each pair of resolved states of an alphabet,
    e.g. a distance or a score.

    The values are indexed by the state codes ``0`` to ``size - 1`` of
    the alphabet.
    """

    @property
    @abc.abstractmethod
    def alphabet(self):
        """
        The alphabet of the index.
        """
        pass

    @abc.abstractmethod
    def index_matrix(self):
        """
        Get the values of all pairs of resolved states.

        Returns
        -------
        matrix : ndarray, shape=(size, size), dtype=float
            The value of each pair of states, indexed by their codes.
        """
        pass

    @abc.abstractmethod
    def is_symmetric(self):
        """
        Check whether the value of a pair does not depend on the order
        of the states.

        Returns
        -------
        symmetric : bool
            True, if the index is symmetric.
        """
        pass

    def get_index(self, state1, state2):
        """
        Get the value of a pair of states.

        Parameters
        ----------
        state1, state2 : int or str
            The codes or the letters of the states.

        Returns
        -------
        value : float
            The value of the pair.

        Raises
        ------
        BadIntError, BadCharError
            If a state is not a resolved state of the alphabet.
        """
        return float(self.index_matrix()[
            _resolved_code(self.alphabet, state1),
            _resolved_code(self.alphabet, state2),
        ])


class UserAlphabetIndex1(AlphabetIndex1):
    """
    An :class:`AlphabetIndex1` with user-defined values.

    All values are initially 0.

    Parameters
    ----------
    alphabet : Alphabet
        The alphabet of the index.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> index = UserAlphabetIndex1(DNA())
    >>> index.set_index("G", 1.5)
    >>> print(index.get_index(2))
    1.5
    >>> print(index.index_vector())
    [0.0 0.0 1.5 0.0]
    """

    def __init__(self, alphabet):
        self._alphabet = alphabet
        self._vector = np.zeros(alphabet.get_size())

    def __copy_create__(self):
        return UserAlphabetIndex1(self._alphabet)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._vector = self._vector.copy()

    @property
    def alphabet(self):
        return self._alphabet

    def index_vector(self):
        return self._vector.copy()

    def set_index(self, state, value):
        """
        Set the value of a state.

        Parameters
        ----------
        state : int or str
            The code or the letter of the state.
        value : float
            The value.
        """
        self._vector[_resolved_code(self._alphabet, state)] = value


class UserAlphabetIndex2(AlphabetIndex2):
    """
    An :class:`AlphabetIndex2` with user-defined values.

    All values are initially 0.

    Parameters
    ----------
    alphabet : Alphabet
        The alphabet of the index.
    sym : bool, optional
        If true, setting the value of a pair also sets the value of the
        reversed pair.
    """

    def __init__(self, alphabet, sym=False):
        self._alphabet = alphabet
        self._sym = sym
        size = alphabet.get_size()
        self._matrix = np.zeros((size, size))

    def __copy_create__(self):
        return UserAlphabetIndex2(self._alphabet, self._sym)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._matrix = self._matrix.copy()

    @property
    def alphabet(self):
        return self._alphabet

    def index_matrix(self):
        return self._matrix.copy()

    def is_symmetric(self):
        return self._sym

    def set_index(self, state1, state2, value):
        """
        Set the value of a pair of states.

        Parameters
        ----------
        state1, state2 : int or str
            The codes or the letters of the states.
        value : float
            The value.
        """
        i = _resolved_code(self._alphabet, state1)
        j = _resolved_code(self._alphabet, state2)
        self._matrix[i, j] = value
        if self._sym:
            self._matrix[j, i] = value


def _resolved_code(alphabet, state):
    if isinstance(state, str):
        state = alphabet.char_to_int(state)
    if state < 0 or state >= alphabet.get_size():
        raise BadIntError(
            state, alphabet, f"Code {state} is not a resolved state"
        )
    return state
