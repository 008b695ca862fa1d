# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *biosymbols*.
It provides only the base classes shared by the subpackages, the
actual functionality is located in :mod:`biosymbols.sequence`.
"""

__version__ = "0.4.0"
__name__ = "biosymbols"
__author__ = "The biosymbols developers"

from .copyable import *
from .file import *
