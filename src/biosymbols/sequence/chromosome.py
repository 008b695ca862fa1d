# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["ChromosomeAlphabet"]

import re
from biosymbols.sequence.alphabet import (
    AbstractAlphabet,
    BadIntError,
    AlphabetConfigError,
    MalformedStateError,
)
from biosymbols.sequence.state import AlphabetState


_PROBABILITY_PATTERN = re.compile(r"0(\.\d*)?")
_SUM_TOLERANCE = 1e-10


class ChromosomeAlphabet(AbstractAlphabet):
    """
    An alphabet for chromosome numbers.

    The letters ``str(i)`` for ``min <= i <= max`` are the resolved
    states with code *i*.
    ``'X'`` (code ``max + 1``) resolves into any chromosome number.

    In addition, *composite states* can be registered via
    :meth:`set_composite_state()`.
    A composite state is an uncertain chromosome number, written either
    as list of equally likely numbers separated by ``'_'``
    (e.g. ``'3_5'``) or as list of ``number=probability`` pairs whose
    probabilities sum up to 1 (e.g. ``'3=0.6_5=0.4'``).
    The *n*-th composite state gets the code ``max + 1 + n``.

    Parameters
    ----------
    min, max : int
        The range of chromosome numbers, both inclusive.

    Examples
    --------

    >>> alph = ChromosomeAlphabet(1, 5)
    >>> alph.set_composite_state("3_5")
    >>> print(alph.char_to_int("3_5"))
    7
    >>> print(alph.get_alias(7))
    [3, 5]
    >>> alph.set_composite_state("2=0.3_4=0.7")
    >>> print(alph.get_probability_of_char(8, 4))
    0.7
    >>> print(alph.get_probability_of_char(8, 3))
    0.0
    """

    def __init__(self, min, max):
        super().__init__()
        if min > max:
            raise AlphabetConfigError(
                f"The minimum {min} is larger than the maximum {max}"
            )
        self._min = min
        self._max = max
        self._composites = {}
        self.register_state(AlphabetState(-1, "-", "Gap"))
        for i in range(min, max + 1):
            self.register_state(AlphabetState(i, str(i), ""))
        self.register_state(AlphabetState(max + 1, "X", "Unresolved state"))

    def __repr__(self):
        """Represent ChromosomeAlphabet as a string for debugging."""
        return f"ChromosomeAlphabet({self._min}, {self._max})"

    def __copy_create__(self):
        return ChromosomeAlphabet(self._min, self._max)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        for code in sorted(self._composites):
            clone.set_composite_state(self.int_to_char(code))

    def get_min(self):
        return self._min

    def get_max(self):
        return self._max

    def get_number_of_composite_states(self):
        return len(self._composites)

    def get_alphabet_type(self):
        return "Chromosome"

    def get_size(self):
        return self._max - self._min + 1

    def get_number_of_types(self):
        return self._max - self._min + 2 + len(self._composites)

    def get_unknown_code(self):
        return self._max + 2 + len(self._composites)

    def is_unresolved(self, state):
        if isinstance(state, str):
            state = self.char_to_int(state)
        return state > self._max

    ### Composite states ###

    def is_composite(self, letter):
        """
        Check whether a letter describes a valid composite state.

        Parameters
        ----------
        letter : str
            The letter to check.

        Returns
        -------
        composite : bool
            True, if the letter consists of at least two parts
            separated by ``'_'``, each part is either a chromosome
            number in the range of the alphabet, or each part is a
            ``number=probability`` pair and the probabilities sum up
            to 1.
        """
        if "_" not in letter:
            return False
        parts = letter.split("_")
        if "=" not in letter:
            return all(self._is_chromosome_number(part) for part in parts)
        total = 0.0
        for part in parts:
            pair = part.split("=")
            if len(pair) != 2:
                return False
            number, probability = pair
            if not self._is_chromosome_number(number):
                return False
            if _PROBABILITY_PATTERN.fullmatch(probability) is None:
                return False
            total += float(probability)
            if total > 1 + _SUM_TOLERANCE:
                return False
        return total >= 1 - _SUM_TOLERANCE

    def _is_chromosome_number(self, text):
        if not text.isdigit():
            return False
        return self._min <= int(text) <= self._max

    def set_composite_state(self, letter):
        """
        Register a composite state.

        Nothing happens, if the letter is already registered.

        Parameters
        ----------
        letter : str
            The composite state, e.g. ``'3_5'`` or ``'3=0.6_5=0.4'``.

        Raises
        ------
        MalformedStateError
            If the letter is not a valid composite state.
        """
        if not self.is_composite(letter):
            raise MalformedStateError(
                f"'{letter}' is not a valid composite state", self
            )
        if self.is_char_in_alphabet(letter):
            return
        code = self._max + 1 + len(self._composites) + 1
        self.register_state(AlphabetState(code, letter, "Unresolved state"))
        probabilities = {}
        for part in letter.split("_"):
            if "=" in part:
                number, probability = part.split("=")
                probabilities[int(number)] = float(probability)
            else:
                probabilities[int(part)] = 1.0
        self._composites[code] = dict(sorted(probabilities.items()))

    def get_composite_states_and_probs(self, state):
        """
        Get the chromosome numbers and their probabilities for a
        composite state.

        Parameters
        ----------
        state : str or int
            The letter or the code of the composite state.

        Returns
        -------
        probabilities : dict of (int -> float)
            Maps each chromosome number to its probability.
            For composites without explicit probabilities, each number
            is mapped to 1.
        """
        if isinstance(state, str):
            state = self.char_to_int(state)
        try:
            return dict(self._composites[state])
        except KeyError:
            raise BadIntError(state, self, f"Code {state} is not a composite state")

    def get_set_of_states_for_composite(self, state):
        return list(self.get_composite_states_and_probs(state).keys())

    ### Resolution ###

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
        if state <= self._max:
            return [state]
        return self.get_set_of_states_for_composite(state)

    def _generic_fallback(self):
        # 'X' represents any chromosome number
        return self._max + 1

    def get_probability_of_char(self, state1, state2):
        """
        Get the probability of the resolved `state2` given the
        potentially uncertain `state1`.

        Parameters
        ----------
        state1 : int
            The potentially uncertain state.
        state2 : int
            A resolved chromosome number.

        Returns
        -------
        probability : float
            The probability assigned by a composite `state1`, 1 if
            `state2` is otherwise in the alias of `state1` and 0 if it
            is not.
        """
        self._check_resolution_pair(state1, state2)
        if state2 in self.get_alias(state1):
            if state1 > self._max + 1:
                return self._composites[state1][state2]
            return 1.0
        return 0.0

    def is_resolved_in(self, state1, state2):
        return self.get_probability_of_char(state1, state2) > 0
