# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for biological alphabets and the sequences built on them.

An :class:`Alphabet` maps the textual *letters* of the states, that can
occur in a sequence, to compact integer *state codes*.
For example, the :class:`DNA` alphabet encodes ``'A'``, ``'C'``,
``'G'`` and ``'T'`` into 0, 1, 2 and 3, respectively.
Each alphabet defines a gap state, that always has the code -1, and an
unknown state, whose code depends on the alphabet.
States that are not fully *resolved*, like the IUPAC ambiguity code
``'R'`` (``'A'`` or ``'G'``), have an *alias*, the list of resolved
states they stand for.
The reverse operation, finding the state that stands for a set of
states, gives the *generic* state.

Most alphabets are built on :class:`AbstractAlphabet`, a registry of
:class:`AlphabetState` objects.
Several letters may share a code, e.g. ``'N'``, ``'X'`` and ``'?'`` in
the :class:`DNA` alphabet, the first registered letter is the canonical
one.

Composite alphabets combine the states of other alphabets:
a :class:`WordAlphabet` forms words of fixed length, of which the
:class:`CodonAlphabet` is the special case of nucleotide triplets.
The :class:`RNY` alphabet reduces triplets to purine/pyrimidine
patterns and the :class:`AllelicAlphabet` describes allele counts in a
population sample.

A :class:`Sequence` stores the state codes of its elements as *NumPy*
:class:`ndarray`, a :class:`ProbabilisticSequence` stores a probability
for each resolved state at each site.
A :class:`GeneticCode` translates codon sequences into protein
sequences.

If a letter or a code does not fit an alphabet, an
:class:`AlphabetError` is raised.
The subclasses of :class:`AlphabetError` give the exact reason.
"""

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"

from .state import *
from .alphabet import *
from .nucleic import *
from .protein import *
from .basic import *
from .lexical import *
from .chromosome import *
from .numeric import *
from .casemasked import *
from .sequence import *
from .word import *
from .rny import *
from .allelic import *
from .tools import *
from .geneticcode import *
