# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Amino acid property indices and pairwise amino acid indices, either
from the builtin database or read from entries of the AAindex database.
"""

__name__ = "biosymbols.sequence.index"
__author__ = "The biosymbols developers"
__all__ = [
    "ProteicAlphabetIndex1",
    "AAIndex1Entry",
    "ProteicAlphabetIndex2",
    "AAIndex2Entry",
]

import os
import warnings
import numpy as np
from biosymbols.file import InvalidFileError, read_lines
from biosymbols.sequence.tools import AlphabetTools
from biosymbols.sequence.index.base import AlphabetIndex1, AlphabetIndex2


# Amino acid order of the AAindex database,
# equal to the order of the protein alphabet
_AAINDEX_ORDER = "ARNDCQEGHILKMFPSTWYV"
_N_AA = len(_AAINDEX_ORDER)


class ProteicAlphabetIndex1(AlphabetIndex1):
    """
    A property value for each of the 20 amino acids.

    The :func:`load()` method allows loading of the builtin property
    indices, :func:`list_db()` lists their names.

    Objects of this class are immutable.

    Parameters
    ----------
    values : array-like object of float, length=20
        The value of each amino acid, in the order of the
        :class:`ProteicAlphabet`.
    description : str, optional
        A description of the property.

    Examples
    --------

    >>> hydropathy = ProteicAlphabetIndex1.load("KD")
    >>> print(hydropathy.get_index("I"))
    4.5
    >>> print(hydropathy.get_index(1))
    -4.5
    """

    # Directory of the builtin property indices
    _db_dir = os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "index_data"
    )

    def __init__(self, values, description=None):
        values = np.array(values, dtype=float)
        if values.shape != (_N_AA,):
            raise ValueError(
                f"Expected {_N_AA} values, got an array of shape {values.shape}"
            )
        self._values = values
        self._description = description

    def __repr__(self):
        """Represent ProteicAlphabetIndex1 as a string for debugging."""
        return (
            f"{type(self).__name__}({self._values.tolist()}, "
            f"{repr(self._description)})"
        )

    def __copy_create__(self):
        return type(self)(self._values, self._description)

    def __eq__(self, item):
        if not isinstance(item, ProteicAlphabetIndex1):
            return False
        return np.array_equal(self._values, item._values, equal_nan=True)

    @property
    def alphabet(self):
        return AlphabetTools.protein()

    @property
    def description(self):
        return self._description

    def index_vector(self):
        return self._values.copy()

    @staticmethod
    def load(name):
        """
        Load a builtin amino acid property index.

        Parameters
        ----------
        name : str
            The name of the property index.
            Valid names are given by :func:`list_db()`.

        Returns
        -------
        index : AAIndex1Entry
            The property index.
        """
        filename = os.path.join(ProteicAlphabetIndex1._db_dir, name + ".txt")
        if not os.path.isfile(filename):
            raise ValueError(f"Property index '{name}' was not found")
        return AAIndex1Entry.read(filename)

    @staticmethod
    def list_db():
        """
        List all property index names in the builtin database.

        Returns
        -------
        db_list : list
            List of property index names in the builtin database.
        """
        files = os.listdir(ProteicAlphabetIndex1._db_dir)
        # Remove '.txt' from files
        return [file[:-4] for file in sorted(files) if file.endswith(".txt")]


class AAIndex1Entry(ProteicAlphabetIndex1):
    """
    A property index from an entry of the AAindex1 database.

    Parameters
    ----------
    values : array-like object of float, length=20
        The value of each amino acid, in the order of the
        :class:`ProteicAlphabet`.
    description : str, optional
        The description of the entry.
    accession : str, optional
        The accession number of the entry.
    """

    def __init__(self, values, description=None, accession=None):
        super().__init__(values, description)
        self._accession = accession

    def __copy_create__(self):
        return AAIndex1Entry(self._values, self._description, self._accession)

    @property
    def accession(self):
        return self._accession

    @classmethod
    def read(cls, file):
        """
        Parse the first entry of an AAindex1 file.

        The values of the entry are given in the ``I`` block, that
        consists of two lines with ten values each.
        Missing values (``NA``) are read as *NaN*.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        entry : AAIndex1Entry
            The parsed entry.

        Raises
        ------
        InvalidFileError
            If the file contains no valid ``I`` block.
        """
        lines = read_lines(file)
        accession, description = _parse_header(lines)
        for i, line in enumerate(lines):
            if line.startswith("I"):
                block = lines[i + 1 : i + 3]
                if len(block) != 2:
                    raise InvalidFileError("The 'I' block is incomplete")
                values = []
                for value_line in block:
                    tokens = value_line.split()
                    if len(tokens) != 10:
                        raise InvalidFileError(
                            f"Expected 10 values per line in the 'I' block, "
                            f"got {len(tokens)}"
                        )
                    values.extend(tokens)
                return cls(_parse_values(values, accession), description, accession)
        raise InvalidFileError("The entry contains no 'I' block")


class ProteicAlphabetIndex2(AlphabetIndex2):
    """
    A value for each pair of the 20 amino acids, e.g. a substitution
    matrix or a chemical distance.

    The :func:`load()` method allows loading of the builtin pairwise
    indices, :func:`list_db()` lists their names.

    Objects of this class are immutable.

    Parameters
    ----------
    matrix : array-like object of float, shape=(20, 20)
        The value of each pair of amino acids, in the order of the
        :class:`ProteicAlphabet`.
    sym : bool
        Whether the matrix is symmetric.
    description : str, optional
        A description of the index.

    Examples
    --------

    >>> blosum = ProteicAlphabetIndex2.load("BLOSUM50")
    >>> print(blosum.get_index("W", "W"))
    15.0
    >>> print(blosum.get_index("A", "R"))
    -2.0
    """

    # Directory of the builtin pairwise indices
    _db_dir = os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "index_data", "pairwise"
    )

    def __init__(self, matrix, sym, description=None):
        matrix = np.array(matrix, dtype=float)
        if matrix.shape != (_N_AA, _N_AA):
            raise ValueError(
                f"Expected a {_N_AA}x{_N_AA} matrix, "
                f"got an array of shape {matrix.shape}"
            )
        self._matrix = matrix
        self._sym = sym
        self._description = description

    def __repr__(self):
        """Represent ProteicAlphabetIndex2 as a string for debugging."""
        return (
            f"{type(self).__name__}({self._matrix.tolist()}, {self._sym}, "
            f"{repr(self._description)})"
        )

    def __copy_create__(self):
        return type(self)(self._matrix, self._sym, self._description)

    @property
    def alphabet(self):
        return AlphabetTools.protein()

    @property
    def description(self):
        return self._description

    def index_matrix(self):
        return self._matrix.copy()

    def is_symmetric(self):
        return self._sym

    @staticmethod
    def load(name):
        """
        Load a builtin pairwise amino acid index.

        Parameters
        ----------
        name : str
            The name of the pairwise index.
            Valid names are given by :func:`list_db()`.

        Returns
        -------
        index : AAIndex2Entry
            The pairwise index.
        """
        filename = os.path.join(ProteicAlphabetIndex2._db_dir, name + ".txt")
        if not os.path.isfile(filename):
            raise ValueError(f"Pairwise index '{name}' was not found")
        return AAIndex2Entry.read(filename, sym=True)

    @staticmethod
    def list_db():
        """
        List all pairwise index names in the builtin database.

        Returns
        -------
        db_list : list
            List of pairwise index names in the builtin database.
        """
        files = os.listdir(ProteicAlphabetIndex2._db_dir)
        return [file[:-4] for file in sorted(files) if file.endswith(".txt")]


class AAIndex2Entry(ProteicAlphabetIndex2):
    """
    A pairwise amino acid index from an entry of the AAindex2 or
    AAindex3 database, e.g. a substitution matrix.

    Parameters
    ----------
    matrix : array-like object of float, shape=(20, 20)
        The value of each pair of amino acids, in the order of the
        :class:`ProteicAlphabet`.
    sym : bool
        Whether the matrix is symmetric.
    description : str, optional
        The description of the entry.
    accession : str, optional
        The accession number of the entry.
    """

    def __init__(self, matrix, sym, description=None, accession=None):
        super().__init__(matrix, sym, description)
        self._accession = accession

    def __repr__(self):
        """Represent AAIndex2Entry as a string for debugging."""
        return (
            f"AAIndex2Entry({self._matrix.tolist()}, {self._sym}, "
            f"{repr(self._description)}, {repr(self._accession)})"
        )

    def __copy_create__(self):
        return AAIndex2Entry(
            self._matrix, self._sym, self._description, self._accession
        )

    @property
    def accession(self):
        return self._accession

    @classmethod
    def read(cls, file, sym=True):
        """
        Parse the first entry of an AAindex2 or AAindex3 file.

        The values of the entry are given in the ``M`` block, that
        consists of 20 rows, either of the full matrix or of its lower
        triangle.
        Missing values (``NA``) are read as *NaN*.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.
        sym : bool, optional
            Only used for a lower triangle:
            If true, the upper triangle is filled by symmetry, otherwise
            with the negated values of the lower triangle.
            A full matrix is never regarded as symmetric.

        Returns
        -------
        entry : AAIndex2Entry
            The parsed entry.

        Raises
        ------
        InvalidFileError
            If the file contains no valid ``M`` block.
        """
        lines = read_lines(file)
        accession, description = _parse_header(lines)
        for i, line in enumerate(lines):
            if not line.startswith("M"):
                continue
            if _AAINDEX_ORDER not in line.replace(" ", ""):
                raise InvalidFileError(
                    "The rows of the 'M' block are in an unsupported order"
                )
            rows = [row.split() for row in lines[i + 1 : i + 1 + _N_AA]]
            if len(rows) != _N_AA:
                raise InvalidFileError("The 'M' block is incomplete")
            triangular = len(rows[0]) == 1
            matrix = np.zeros((_N_AA, _N_AA))
            for j, row in enumerate(rows):
                expected = j + 1 if triangular else _N_AA
                if len(row) != expected:
                    raise InvalidFileError(
                        f"Expected {expected} values in row {j} "
                        f"of the 'M' block, got {len(row)}"
                    )
                matrix[j, :expected] = _parse_values(row, accession)
            if triangular:
                upper = np.triu_indices(_N_AA, k=1)
                if sym:
                    matrix[upper] = matrix.T[upper]
                else:
                    matrix[upper] = -matrix.T[upper]
            else:
                sym = False
            return cls(matrix, sym, description, accession)
        raise InvalidFileError("The entry contains no 'M' block")


def _parse_header(lines):
    accession = None
    description = None
    for line in lines:
        if line.startswith("H ") and accession is None:
            accession = line[2:].strip()
        elif line.startswith("D ") and description is None:
            description = line[2:].strip()
    return accession, description


def _parse_values(tokens, accession):
    values = []
    for token in tokens:
        if token == "NA":
            values.append(np.nan)
        else:
            try:
                values.append(float(token))
            except ValueError:
                raise InvalidFileError(f"'{token}' is not a valid value")
    if any(np.isnan(values)):
        warnings.warn(
            f"AAindex entry '{accession}' lacks data for some amino acids"
        )
    return values
