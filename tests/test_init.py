# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import biosymbols


def test_version_number():
    assert hasattr(biosymbols, "__version__")
