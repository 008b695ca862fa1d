# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for property indices of alphabet states.

An :class:`AlphabetIndex1` assigns a value to each resolved state of an
alphabet, e.g. the hydropathy of each amino acid.
An :class:`AlphabetIndex2` assigns a value to each pair of resolved
states, e.g. a substitution score or a physicochemical distance.
The values are indexed by the state codes.

Builtin amino acid properties are loaded with
:func:`ProteicAlphabetIndex1.load()`, entries of the AAindex database
are read with :class:`AAIndex1Entry` and :class:`AAIndex2Entry`.
"""

__name__ = "biosymbols.sequence.index"
__author__ = "The biosymbols developers"

from .base import *
from .proteic import *
from .score import *
