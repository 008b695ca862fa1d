# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols"
__author__ = "The biosymbols developers"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for alphabets, sequences and index tables that can be
    duplicated with :meth:`copy()`.

    A copy is made in two steps:
    :meth:`__copy_create__()` calls the constructor with the arguments
    that define the object (e.g. the sub-alphabets of a word alphabet),
    afterwards :meth:`__copy_fill__()` transfers the state that was
    added after construction (e.g. composite states of a
    chromosome alphabet).
    The fill step walks the class hierarchy from the uppermost base
    class down to the class of the copied object, so each class only
    needs to care about its own attributes.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            A copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Override this method if the constructor takes arguments.
        Do not call the `super()` method here.

        Returns
        -------
        copy
            A freshly constructed object of the same class as *self*.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Transfer the attributes set after construction to `clone`.

        Always call the `super()` method first.

        Parameters
        ----------
        clone
            The freshly constructed copy of *self*.
        """
        pass
