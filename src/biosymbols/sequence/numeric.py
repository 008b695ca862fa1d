# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["UniformDiscreteDistribution", "NumericAlphabet"]

import numpy as np
from biosymbols.copyable import Copyable
from biosymbols.sequence.alphabet import (
    AbstractAlphabet,
    AlphabetConfigError,
    CharStateNotSupportedError,
)
from biosymbols.sequence.state import AlphabetNumericState


class UniformDiscreteDistribution(Copyable):
    """
    A uniform distribution on an interval, discretized into categories
    of equal width.

    Each category is represented by the midpoint of its interval.

    Parameters
    ----------
    n : int
        The number of categories.
    lower, upper : float, optional
        The bounds of the interval.

    Examples
    --------

    >>> distribution = UniformDiscreteDistribution(4, 0, 2)
    >>> print(distribution.get_categories())
    [0.25 0.75 1.25 1.75]
    >>> print(distribution.get_value_category(1.1))
    1.25
    """

    def __init__(self, n, lower=0.0, upper=1.0):
        if n < 1:
            raise AlphabetConfigError(
                f"At least one category is required, got {n}"
            )
        if lower >= upper:
            raise AlphabetConfigError(
                f"The lower bound {lower} is not below the upper bound {upper}"
            )
        self._n = n
        self._lower = float(lower)
        self._upper = float(upper)

    def __repr__(self):
        """Represent UniformDiscreteDistribution as a string for debugging."""
        return (
            f"UniformDiscreteDistribution({self._n}, "
            f"{self._lower}, {self._upper})"
        )

    def __copy_create__(self):
        return UniformDiscreteDistribution(self._n, self._lower, self._upper)

    def get_number_of_categories(self):
        return self._n

    def get_lower_bound(self):
        return self._lower

    def get_upper_bound(self):
        return self._upper

    def get_categories(self):
        delta = (self._upper - self._lower) / self._n
        return self._lower + (np.arange(self._n) + 0.5) * delta

    def get_value_category(self, value):
        """
        Get the category a value falls into.

        Values outside the interval are assigned to the first or last
        category, respectively.

        Parameters
        ----------
        value : float
            The value.

        Returns
        -------
        category : float
            The midpoint of the category.
        """
        delta = (self._upper - self._lower) / self._n
        index = int(np.floor((value - self._lower) / delta))
        index = min(max(index, 0), self._n - 1)
        return float(self.get_categories()[index])


class NumericAlphabet(AbstractAlphabet):
    """
    An alphabet of continuous values, discretized by a
    :class:`UniformDiscreteDistribution`.

    Each category of the distribution is a state, whose letter is the
    text representation of the category midpoint.
    The alphabet has neither a gap nor unresolved states.

    Parameters
    ----------
    distribution : UniformDiscreteDistribution
        The discretization of the value range.

    Examples
    --------

    >>> alph = NumericAlphabet(UniformDiscreteDistribution(4, 0, 2))
    >>> print(alph.get_size())
    4
    >>> print(alph.int_to_char(2))
    1.25
    >>> print(alph.value_to_int(0.1))
    0
    """

    def __init__(self, distribution):
        super().__init__()
        self._distribution = distribution.copy()
        categories = self._distribution.get_categories()
        self.resize(len(categories))
        for i, value in enumerate(categories):
            letter = str(float(value))
            self.set_state(
                i, AlphabetNumericState(i, float(value), letter, letter)
            )
        self.remap()

    def __repr__(self):
        """Represent NumericAlphabet as a string for debugging."""
        return f"NumericAlphabet({repr(self._distribution)})"

    def __copy_create__(self):
        return NumericAlphabet(self._distribution)

    def remap(self):
        super().remap()
        # Value -> first code with this value
        self._values = {}
        for state in self._states:
            self._values.setdefault(state.value, state.num)

    def get_distribution(self):
        return self._distribution

    def get_alphabet_type(self):
        return "Numeric"

    def get_size(self):
        return len(self._values)

    def get_number_of_types(self):
        return len(self._values)

    def get_unknown_code(self):
        return self.get_size()

    def is_gap(self, state):
        return False

    def is_unresolved(self, state):
        return False

    def get_delta(self):
        """
        Get the width of the categories.

        Returns
        -------
        delta : float
            The width of each category.
        """
        distribution = self._distribution
        return (
            distribution.get_upper_bound() - distribution.get_lower_bound()
        ) / distribution.get_number_of_categories()

    def int_to_value(self, state):
        return self.get_state(state).value

    def value_to_int(self, value):
        """
        Get the code of the category a value falls into.

        Parameters
        ----------
        value : float
            The value.

        Returns
        -------
        code : int
            The code of the category.
        """
        return self._values[self._distribution.get_value_category(value)]

    def get_generic(self, states):
        states = list(states)
        if len(states) == 0:
            raise ValueError("At least one state is required")
        if len(set(states)) > 1:
            raise CharStateNotSupportedError(
                "A numeric alphabet has no state summarizing multiple values",
                self
            )
        return states[0]
