# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["CaseMaskedAlphabet"]

from biosymbols.sequence.alphabet import LetterAlphabet, BadIntError
from biosymbols.sequence.state import AlphabetState


# Offset between the code of a state and its masked equivalent
_MASK_OFFSET = 100


class CaseMaskedAlphabet(LetterAlphabet):
    """
    A case-sensitive variant of a letter alphabet, where lower case
    letters denote masked positions, e.g. soft-masked repeats.

    For each upper case letter of the wrapped alphabet a masked state
    is added, whose letter is the lower case letter and whose code is
    the original code plus 100.
    Resolution (:meth:`get_alias()`, :meth:`is_resolved_in()`,
    :meth:`get_generic()`) ignores the masking and returns unmasked
    codes.

    Parameters
    ----------
    alphabet : LetterAlphabet
        The case-insensitive alphabet to be wrapped.

    Examples
    --------

    >>> from biosymbols.sequence import DNA
    >>> alph = CaseMaskedAlphabet(DNA())
    >>> print(alph.char_to_int("A"), alph.char_to_int("a"))
    0 100
    >>> print(alph.is_masked("c"))
    True
    >>> print(alph.get_masked_equivalent_state("G"))
    g
    """

    def __init__(self, alphabet):
        super().__init__(case_sensitive=True)
        self._unmasked = alphabet
        for letter in alphabet.get_supported_chars():
            state = alphabet.get_state(letter)
            self.register_state(state.copy())
            if letter.isalpha() and letter.isupper():
                self.register_state(AlphabetState(
                    state.num + _MASK_OFFSET, letter.lower(),
                    "Masked " + state.name
                ))

    def __repr__(self):
        """Represent CaseMaskedAlphabet as a string for debugging."""
        return f"CaseMaskedAlphabet({repr(self._unmasked)})"

    def __copy_create__(self):
        return CaseMaskedAlphabet(self._unmasked)

    def get_unmasked_alphabet(self):
        return self._unmasked

    def get_alphabet_type(self):
        return "CaseMasked"

    def get_size(self):
        return self._unmasked.get_size()

    def get_number_of_types(self):
        return self._unmasked.get_number_of_types()

    def get_unknown_code(self):
        return self._unmasked.get_unknown_code()

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return self._unmasked.is_unresolved(_unmask(state))

    def is_masked(self, state):
        """
        Check whether a state is masked.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.

        Returns
        -------
        masked : bool
            True, if the state code is at least 100 or the letter is a
            lower case letter.
        """
        if isinstance(state, str):
            return state.isalpha() and state.islower()
        return state >= _MASK_OFFSET

    def get_masked_equivalent_state(self, state):
        """
        Get the masked state corresponding to a state.

        Parameters
        ----------
        state : str or int
            The letter or the code of the state.
            Masked states are returned unchanged.

        Returns
        -------
        masked : str or int
            The masked state.

        Raises
        ------
        BadIntError
            If the state has no masked equivalent, e.g. the gap.
        """
        if isinstance(state, str):
            code = self.char_to_int(state)
            return self.int_to_char(self.get_masked_equivalent_state(code))
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        if state >= _MASK_OFFSET:
            return state
        masked = state + _MASK_OFFSET
        if not self.is_int_in_alphabet(masked):
            raise BadIntError(
                state, self, f"Code {state} has no masked equivalent"
            )
        return masked

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if not self.is_int_in_alphabet(state):
            raise BadIntError(state, self)
        return self._unmasked.get_alias(_unmask(state))

    def get_generic(self, states):
        states = list(states)
        if len(states) > 0 and isinstance(states[0], str):
            codes = [self.char_to_int(letter) for letter in states]
            return self.int_to_char(self.get_generic(codes))
        for code in states:
            if not self.is_int_in_alphabet(code):
                raise BadIntError(code, self)
        if len(set(states)) == 1:
            # A single masked state keeps its mask
            return states[0]
        return self._unmasked.get_generic([_unmask(code) for code in states])

    def is_resolved_in(self, state1, state2):
        if not self.is_int_in_alphabet(state1):
            raise BadIntError(state1, self)
        if not self.is_int_in_alphabet(state2):
            raise BadIntError(state2, self)
        return self._unmasked.is_resolved_in(_unmask(state1), _unmask(state2))


def _unmask(code):
    if code >= _MASK_OFFSET:
        return code - _MASK_OFFSET
    return code
