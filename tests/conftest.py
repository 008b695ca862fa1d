# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biosymbols.sequence as seq


@pytest.fixture
def dna():
    return seq.DNA()


@pytest.fixture
def protein():
    return seq.ProteicAlphabet()


@pytest.fixture
def standard_code():
    return seq.GeneticCode.standard()
