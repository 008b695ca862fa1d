# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["LexicalAlphabet"]

from biosymbols.sequence.alphabet import (
    AbstractAlphabet,
    AlphabetConfigError,
    MalformedStateError,
)
from biosymbols.sequence.state import AlphabetState


class LexicalAlphabet(AbstractAlphabet):
    """
    An alphabet whose states are the words of a vocabulary.

    All words must have the same length *L*.
    The gap is written as *L* times ``'-'`` and the unresolved state
    as *L* times ``'?'``.
    Lookup is case-sensitive.

    Parameters
    ----------
    vocabulary : iterable object of str
        The words.
        The code of a word is its position in the vocabulary.

    Examples
    --------

    >>> alph = LexicalAlphabet(["AB", "CD", "EF"])
    >>> print(alph.char_to_int("CD"))
    1
    >>> print(alph.int_to_char(3))
    ??
    >>> print(alph.get_alphabet_type())
    Lexicon(AB,CD,EF)
    """

    def __init__(self, vocabulary):
        super().__init__()
        vocabulary = list(vocabulary)
        if len(vocabulary) == 0:
            raise AlphabetConfigError(
                "Cannot create a lexical alphabet from an empty vocabulary"
            )
        length = len(vocabulary[0])
        self._vocabulary = vocabulary
        self.register_state(AlphabetState(-1, "-" * length, "Gap"))
        for i, word in enumerate(vocabulary):
            if len(word) != length:
                raise MalformedStateError(
                    f"Word '{word}' has length {len(word)}, "
                    f"but {length} is expected"
                )
            if self.is_char_in_alphabet(word):
                raise MalformedStateError(
                    f"Word '{word}' occurs multiple times in the vocabulary"
                )
            self.register_state(AlphabetState(i, word, word))
        self.register_state(
            AlphabetState(len(vocabulary), "?" * length, "Unresolved word")
        )

    def __repr__(self):
        """Represent LexicalAlphabet as a string for debugging."""
        return f"LexicalAlphabet({self._vocabulary})"

    def __copy_create__(self):
        return LexicalAlphabet(self._vocabulary)

    def get_alphabet_type(self):
        return "Lexicon(" + ",".join(self._vocabulary) + ")"

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

    def get_alias(self, state):
        if isinstance(state, str):
            return [
                self.int_to_char(code)
                for code in self.get_alias(self.char_to_int(state))
            ]
        if self.is_unresolved(state):
            return list(range(self.get_size()))
        return super().get_alias(state)

    def is_resolved_in(self, state1, state2):
        self._check_resolution_pair(state1, state2)
        return self.is_unresolved(state1) or state1 == state2
