# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = [
    "Alphabet",
    "AbstractAlphabet",
    "LetterAlphabet",
    "AlphabetMapper",
    "AlphabetError",
    "BadCharError",
    "BadIntError",
    "IndexOutOfBoundsError",
    "AlphabetMismatchError",
    "CharStateNotSupportedError",
    "MalformedStateError",
    "AlphabetConfigError",
]

import abc
from numbers import Integral
import numpy as np
from biosymbols.copyable import Copyable
from biosymbols.sequence.state import AlphabetState


class Alphabet(Copyable, metaclass=abc.ABCMeta):
    """
    The capability contract shared by all alphabets.

    An alphabet maps between letters (strings used in text
    representations of a sequence) and integer *state codes* (used in
    the content of a sequence).
    Beside the fully resolved states, an alphabet may define a gap
    state (code -1), ambiguous states that can resolve into several
    resolved states, and an unknown state that can resolve into any
    resolved state.

    Most methods accept either a letter or a code.
    The returned value is of the same kind as the input: a code gives
    codes, a letter gives letters.
    """

    @abc.abstractmethod
    def get_alphabet_type(self):
        """
        Get the descriptive type string of the alphabet, e.g. ``'DNA'``.

        Two alphabets are considered equal, if their type strings are
        equal.

        Returns
        -------
        alphabet_type : str
            The type string.
        """
        pass

    @abc.abstractmethod
    def get_size(self):
        """
        Get the number of resolved states.

        Returns
        -------
        size : int
            The number of resolved states.
        """
        pass

    @abc.abstractmethod
    def get_number_of_types(self):
        """
        Get the number of distinct codes, without the gap.

        Returns
        -------
        number_of_types : int
            The number of distinct codes.
        """
        pass

    @abc.abstractmethod
    def get_unknown_code(self):
        """
        Get the code of the unknown state.

        Returns
        -------
        code : int
            The code of the unknown state.
        """
        pass

    @abc.abstractmethod
    def is_unresolved(self, state):
        pass

    @abc.abstractmethod
    def char_to_int(self, letter):
        pass

    @abc.abstractmethod
    def int_to_char(self, code):
        pass

    @abc.abstractmethod
    def get_alias(self, state):
        pass

    @abc.abstractmethod
    def get_generic(self, states):
        pass

    @abc.abstractmethod
    def is_resolved_in(self, state1, state2):
        pass

    def get_gap_code(self):
        """
        Get the code of the gap state.

        Returns
        -------
        code : int
            Always -1.
        """
        return -1

    def equals(self, alphabet):
        """
        Check whether this alphabet and another alphabet are of the
        same type.

        Parameters
        ----------
        alphabet : Alphabet
            The alphabet to compare with.

        Returns
        -------
        equal : bool
            True, if both alphabets have the same type string.
        """
        return self.get_alphabet_type() == alphabet.get_alphabet_type()

    def __eq__(self, item):
        if item is self:
            return True
        if not isinstance(item, Alphabet):
            return False
        return self.equals(item)

    def __hash__(self):
        return hash(self.get_alphabet_type())

    def __str__(self):
        return self.get_alphabet_type()


class AbstractAlphabet(Alphabet):
    """
    Partial :class:`Alphabet` implementation based on a registry of
    :class:`AlphabetState` objects.

    The registry is an ordered list of states.
    The position of a state in this list is its registration order,
    starting at 0.
    Two indices accelerate the lookup:
    a letter index, mapping each letter to the position of its state
    (letters must be unique), and a code index mapping each code to
    the position of the *first* registered state with this code
    (codes may repeat, so that e.g. the letters ``'N'`` and ``'X'`` may
    both represent the unresolved nucleotide).
    Consequently :meth:`int_to_char()` returns the letter of the first
    registered state of a code.

    Subclasses register their states in the constructor.
    The registry must not be modified afterwards.

    The lists returned by :meth:`get_supported_ints()` and
    :meth:`get_supported_chars()` are built on first access and
    invalidated by any modification of the registry.
    These caches are not synchronized.
    """

    def __init__(self):
        self._states = []
        self._letters = {}
        self._nums = {}
        self._supported_ints = None
        self._supported_chars = None

    def __repr__(self):
        """Represent the alphabet as a string for debugging."""
        return f"{type(self).__name__}()"

    def __copy_create__(self):
        return type(self)()

    ### Registry ###

    def register_state(self, state):
        """
        Append a state to the registry.

        Parameters
        ----------
        state : AlphabetState
            The state to add.

        Raises
        ------
        AlphabetError
            If the letter of the state is already registered.
        """
        if state.letter in self._letters:
            raise AlphabetError(
                f"Letter {repr(state.letter)} is registered twice"
            )
        position = len(self._states)
        self._states.append(state)
        self._letters[state.letter] = position
        # Keep the first registered position for a code
        if state.num not in self._nums:
            self._nums[state.num] = position
        self._invalidate_cache()

    def set_state(self, position, state):
        """
        Replace the state at the given position.

        The indices are updated, but an already registered letter of
        another state is not checked for.
        Call :meth:`remap()` after a series of modifications.

        Parameters
        ----------
        position : int
            The position in the registry.
        state : AlphabetState
            The new state.
        """
        if position < 0 or position >= len(self._states):
            raise IndexOutOfBoundsError(position, 0, len(self._states) - 1)
        self._states[position] = state
        self._letters[state.letter] = position
        if self._nums.get(state.num, len(self._states)) > position:
            self._nums[state.num] = position
        self._invalidate_cache()

    def resize(self, size):
        """
        Resize the registry to the given number of states.

        New positions are filled with empty placeholder states, that
        must be replaced by :meth:`set_state()` before :meth:`remap()`
        is called.

        Parameters
        ----------
        size : int
            The new number of states.
        """
        if size < len(self._states):
            del self._states[size:]
        else:
            self._states.extend(
                [AlphabetState(0, "", "") for _ in range(size - len(self._states))]
            )
        self._invalidate_cache()

    def remap(self):
        """
        Rebuild the letter and code indices from the registry.

        Raises
        ------
        AlphabetError
            If a letter occurs in multiple states.
        """
        self._letters = {}
        self._nums = {}
        for position, state in enumerate(self._states):
            if state.letter in self._letters:
                raise AlphabetError(
                    f"Letter {repr(state.letter)} is registered twice"
                )
            self._letters[state.letter] = position
            if state.num not in self._nums:
                self._nums[state.num] = position
        self._invalidate_cache()

    def _invalidate_cache(self):
        self._supported_ints = None
        self._supported_chars = None

    def _normalize(self, letter):
        """
        Bring a letter into the form it is registered with.
        Alphabets with case-insensitive lookup override this method.
        """
        return letter

    ### Lookup ###

    def get_number_of_chars(self):
        """
        Get the number of registered states.

        Returns
        -------
        number_of_chars : int
            The number of registered states, including gap and
            unknown states and all letter aliases.
        """
        return len(self._states)

    def get_state_index(self, state):
        """
        Get the registry position of a state.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.
            For codes shared by multiple states, the position of the
            first registered state is returned.

        Returns
        -------
        position : int
            The position in the registry.

        Raises
        ------
        BadCharError
            If the letter is not in the alphabet.
        BadIntError
            If the code is not in the alphabet.
        """
        if isinstance(state, str):
            try:
                return self._letters[self._normalize(state)]
            except KeyError:
                raise BadCharError(state, self)
        _check_code(state)
        try:
            return self._nums[state]
        except KeyError:
            raise BadIntError(state, self)

    def get_state_at(self, position):
        """
        Get the state at a position of the registry.

        Parameters
        ----------
        position : int
            The position.

        Returns
        -------
        state : AlphabetState
            The state at the given position.

        Raises
        ------
        IndexOutOfBoundsError
            If the position exceeds the registry.
        """
        if position < 0 or position >= len(self._states):
            raise IndexOutOfBoundsError(
                position, 0, len(self._states) - 1, self
            )
        return self._states[position]

    def get_state(self, state):
        """
        Get the state object for a letter or code.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.

        Returns
        -------
        state : AlphabetState
            The registered state.
        """
        return self._states[self.get_state_index(state)]

    def get_int_code_at(self, position):
        return self.get_state_at(position).num

    def get_char_code_at(self, position):
        return self.get_state_at(position).letter

    def get_name(self, state):
        """
        Get the description of a state.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.

        Returns
        -------
        name : str
            The name of the state.
        """
        return self.get_state(state).name

    def char_to_int(self, letter):
        """
        Encode a letter into its state code.

        Parameters
        ----------
        letter : str
            The letter to encode.

        Returns
        -------
        code : int
            The state code.

        Raises
        ------
        BadCharError
            If the letter is not in the alphabet.
        """
        if not isinstance(letter, str):
            raise TypeError(
                f"Expected a letter of type 'str', got '{type(letter).__name__}'"
            )
        return self.get_state(letter).num

    def int_to_char(self, code):
        """
        Decode a state code into a letter.

        Parameters
        ----------
        code : int
            The state code to decode.

        Returns
        -------
        letter : str
            The letter of the first state registered with this code.

        Raises
        ------
        BadIntError
            If the code is not in the alphabet.
        """
        _check_code(code)
        return self.get_state(code).letter

    def is_int_in_alphabet(self, code):
        return code in self._nums

    def is_char_in_alphabet(self, letter):
        return self._normalize(letter) in self._letters

    def __contains__(self, state):
        if isinstance(state, str):
            return self.is_char_in_alphabet(state)
        elif isinstance(state, Integral):
            return self.is_int_in_alphabet(state)
        return False

    def get_state_coding_size(self):
        """
        Get the number of characters of a letter in this alphabet.

        Returns
        -------
        coding_size : int
            The length of the letter of the first non-gap state.
        """
        for state in self._states:
            if state.num >= 0:
                return len(state.letter)
        return 0

    ### State properties ###

    def is_gap(self, state):
        """
        Check whether a state is the gap state.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.

        Returns
        -------
        is_gap : bool
            True, if the state has the gap code.
        """
        if isinstance(state, str):
            return self.char_to_int(state) == self.get_gap_code()
        return state == self.get_gap_code()

    def is_resolved_in(self, state1, state2):
        """
        Check whether `state1` can resolve into the resolved
        `state2`.

        Parameters
        ----------
        state1 : int
            The potentially ambiguous state.
        state2 : int
            A resolved state.

        Returns
        -------
        resolved : bool
            True, if `state1` can be resolved into `state2`.

        Raises
        ------
        BadIntError
            If a state is negative, not in the alphabet or if
            `state2` is unresolved.
        """
        self._check_resolution_pair(state1, state2)
        return state1 == state2

    def _check_resolution_pair(self, state1, state2):
        if state1 < 0 or not self.is_int_in_alphabet(state1):
            raise BadIntError(state1, self)
        if state2 < 0 or not self.is_int_in_alphabet(state2):
            raise BadIntError(state2, self)
        if self.is_unresolved(state2):
            raise BadIntError(state2, self, f"Code {state2} is unresolved")

    def get_alias(self, state):
        """
        Get the resolved states a state can resolve into.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.

        Returns
        -------
        alias : list of str or list of int
            The resolved states, letters if a letter was given and
            codes otherwise.
        """
        if isinstance(state, str):
            if not self.is_char_in_alphabet(state):
                raise BadCharError(state, self)
            return [state]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        return [state]

    def get_generic(self, states):
        """
        Get the most specific state that comprises all given states.

        A single distinct state is returned as is.
        Otherwise each state is expanded into its alias set and the
        first registered state, whose alias set equals the union, is
        returned.
        If there is no such state, the unknown state is returned.

        Parameters
        ----------
        states : iterable object of str or iterable object of int
            The states to summarize.

        Returns
        -------
        generic : str or int
            The summarizing state, a letter if letters were given and a
            code otherwise.
        """
        states = list(states)
        if len(states) == 0:
            raise ValueError("At least one state is required")
        if isinstance(states[0], str):
            codes = [self.char_to_int(letter) for letter in states]
            return self.int_to_char(self._generic_code(codes))
        return self._generic_code(states)

    def _generic_code(self, codes):
        codes = set(codes)
        for code in codes:
            if not self.is_int_in_alphabet(code):
                raise BadIntError(code, self)
        if len(codes) == 1:
            return codes.pop()
        union = set()
        for code in codes:
            union.update(self.get_alias(code))
        if len(union) == 1:
            return union.pop()
        # First non-gap state that stands for exactly the union
        for code in dict.fromkeys(self.get_supported_ints()):
            if code >= 0 and set(self.get_alias(code)) == union:
                return code
        return self._generic_fallback()

    def _generic_fallback(self):
        return self.get_unknown_code()

    def get_supported_ints(self):
        """
        Get the codes of all registered states.

        Returns
        -------
        codes : list of int
            The code of each registered state in registration order.
            Codes shared by multiple letters appear multiple times.
        """
        if self._supported_ints is None:
            self._supported_ints = [state.num for state in self._states]
        return self._supported_ints

    def get_supported_chars(self):
        """
        Get the letters of all registered states.

        Returns
        -------
        letters : list of str
            The letter of each registered state in registration order.
        """
        if self._supported_chars is None:
            self._supported_chars = [state.letter for state in self._states]
        return self._supported_chars

    def get_resolved_chars(self):
        """
        Get the letters of all states, that are neither gaps nor
        unresolved.

        Returns
        -------
        letters : list of str
            The letters in registration order.
        """
        return [
            state.letter
            for state in self._states
            if not self.is_gap(state.num) and not self.is_unresolved(state.num)
        ]


class LetterAlphabet(AbstractAlphabet):
    """
    An :class:`AbstractAlphabet` whose states are single characters.

    The lookup of letters is case-insensitive, unless the alphabet is
    created as case-sensitive.
    In addition to the single-state methods, whole texts can be
    encoded and decoded with :meth:`encode_multiple()` and
    :meth:`decode_multiple()`.
    Both use *NumPy* lookup tables that are built after the states are
    registered.

    Parameters
    ----------
    case_sensitive : bool, optional
        If true, lower and upper case letters are distinct.
    """

    def __init__(self, case_sensitive=False):
        super().__init__()
        self._case_sensitive = case_sensitive
        self._encode_table = None

    def __copy_create__(self):
        clone = type(self)()
        clone._case_sensitive = self._case_sensitive
        clone._invalidate_cache()
        return clone

    def is_case_sensitive(self):
        return self._case_sensitive

    def _normalize(self, letter):
        if self._case_sensitive:
            return letter
        return letter.upper()

    def _invalidate_cache(self):
        super()._invalidate_cache()
        self._encode_table = None

    def _build_encode_table(self):
        # Codes may be negative -> lookup of validity in separate mask
        table = np.zeros(256, dtype=np.int64)
        valid = np.zeros(256, dtype=bool)
        for state in self._states:
            letters = [state.letter]
            if not self._case_sensitive:
                letters.append(state.letter.lower())
            for letter in letters:
                byte = ord(letter)
                if byte < 256 and not valid[byte]:
                    table[byte] = state.num
                    valid[byte] = True
        self._encode_table = (table, valid)

    def encode_multiple(self, letters):
        """
        Encode a text into state codes.

        Parameters
        ----------
        letters : str or iterable object of str
            The letters to encode.

        Returns
        -------
        code : ndarray, dtype=int
            The state codes.

        Raises
        ------
        BadCharError
            If any letter is not in the alphabet.
        """
        if not isinstance(letters, str):
            letters = "".join(letters)
        if self._encode_table is None:
            self._build_encode_table()
        table, valid = self._encode_table
        for letter in letters:
            if ord(letter) > 255:
                raise BadCharError(letter, self)
        symbols = np.frombuffer(letters.encode("latin-1"), dtype=np.ubyte)
        invalid = ~valid[symbols]
        if invalid.any():
            raise BadCharError(chr(symbols[np.argmax(invalid)]), self)
        return table[symbols]

    def decode_multiple(self, code):
        """
        Decode state codes into a text.

        Parameters
        ----------
        code : iterable object of int
            The state codes.

        Returns
        -------
        letters : str
            The decoded text.
        """
        return "".join([self.int_to_char(c) for c in code])


class AlphabetMapper(object):
    """
    Convert state codes from a source alphabet into the codes of the
    states with the same letter in a target alphabet.

    This class works for single codes or entire arrays of codes.

    Parameters
    ----------
    source_alphabet, target_alphabet : AbstractAlphabet
        The codes are converted from the source alphabet into the
        target alphabet.
        Each code of the source alphabet is converted via its
        canonical letter, which must be in the target alphabet.
        Letters that are missing in the target alphabet may be
        substituted via `substitutions`.
    substitutions : dict of (str -> str), optional
        Letter replacements applied before the lookup in the target
        alphabet.

    Examples
    --------

    >>> from biosymbols.sequence import DNA, RNA
    >>> mapper = AlphabetMapper(DNA(), RNA(), substitutions={"T": "U"})
    >>> print(mapper[3])
    3
    >>> print(mapper[[0, 3, -1]])
    [ 0  3 -1]
    """

    def __init__(self, source_alphabet, target_alphabet, substitutions=None):
        if substitutions is None:
            substitutions = {}
        self._mapping = {}
        for code in source_alphabet.get_supported_ints():
            if code in self._mapping:
                continue
            letter = source_alphabet.int_to_char(code)
            letter = substitutions.get(letter, letter)
            self._mapping[code] = target_alphabet.char_to_int(letter)

    def __getitem__(self, code):
        if isinstance(code, Integral):
            try:
                return self._mapping[code]
            except KeyError:
                raise BadIntError(code)
        return np.array([self[c] for c in code], dtype=np.int64)


def _check_code(code):
    if not isinstance(code, Integral):
        raise TypeError(
            f"Expected a code of type 'int', got '{type(code).__name__}'"
        )


def _alphabet_type(alphabet):
    if alphabet is None:
        return None
    return alphabet.get_alphabet_type()


class AlphabetError(Exception):
    """
    This exception is raised, when a letter, a code or an alphabet
    does not fit the requested operation.

    Parameters
    ----------
    message : str
        The error message.
    alphabet : Alphabet, optional
        The alphabet involved in the error.
        Its type string is appended to the message.

    Attributes
    ----------
    alphabet_type : str or None
        The type string of the involved alphabet.
    """

    def __init__(self, message, alphabet=None):
        self.alphabet_type = _alphabet_type(alphabet)
        if self.alphabet_type is not None:
            message = f"{message} (alphabet '{self.alphabet_type}')"
        super().__init__(message)


class BadCharError(AlphabetError):
    """
    Indicates that a letter is not in an alphabet.

    Attributes
    ----------
    char : str
        The offending letter.
    """

    def __init__(self, char, alphabet=None, message=None):
        self.char = char
        if message is None:
            message = f"Letter {repr(char)} is not in the alphabet"
        super().__init__(message, alphabet)


class BadIntError(AlphabetError):
    """
    Indicates that a state code is not in an alphabet or out of its
    bounds.

    Attributes
    ----------
    code : int
        The offending code.
    """

    def __init__(self, code, alphabet=None, message=None):
        self.code = code
        if message is None:
            message = f"Code {code} is not in the alphabet"
        super().__init__(message, alphabet)


class IndexOutOfBoundsError(AlphabetError, IndexError):
    """
    Indicates that a position exceeds the valid range.

    Attributes
    ----------
    index : int
        The offending position.
    lower, upper : int
        The valid range, both inclusive.
    """

    def __init__(self, index, lower, upper, alphabet=None):
        self.index = index
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Index {index} is out of bounds [{lower}, {upper}]", alphabet
        )


class AlphabetMismatchError(AlphabetError):
    """
    Indicates that two alphabets were expected to be of the same type,
    but are not.

    Attributes
    ----------
    alphabet_types : tuple of str
        The types of the two alphabets.
    """

    def __init__(self, message, alphabet1, alphabet2):
        self.alphabet_types = (
            _alphabet_type(alphabet1), _alphabet_type(alphabet2)
        )
        super().__init__(
            f"{message}: '{self.alphabet_types[0]}' "
            f"and '{self.alphabet_types[1]}'"
        )


class CharStateNotSupportedError(AlphabetError):
    """
    Indicates that an operation is not available for letters of an
    alphabet.
    """

    pass


class MalformedStateError(AlphabetError, ValueError):
    """
    Indicates an ill-formed state description, e.g. a duplicate word
    in a vocabulary or a count vector of wrong size.
    """

    pass


class AlphabetConfigError(AlphabetError, ValueError):
    """
    Indicates invalid parameters for the construction of an alphabet.
    """

    pass
