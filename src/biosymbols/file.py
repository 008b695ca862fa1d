# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biosymbols"
__author__ = "The biosymbols developers"
__all__ = ["InvalidFileError", "read_lines"]

import io
from os import PathLike


class InvalidFileError(Exception):
    """
    Indicates that the file is not suitable for the requested action,
    either because the file does not contain the required data or
    because the file is malformed.
    """

    pass


def read_lines(file):
    """
    Read the lines of a text file.

    Parameters
    ----------
    file : file-like object or str
        The file to be read.
        Alternatively a file path can be supplied.

    Returns
    -------
    lines : list of str
        The lines of the file without line break characters.
    """
    # File name
    if is_open_compatible(file):
        with open(file, "r") as f:
            return f.read().splitlines()
    # File object
    if not is_text(file):
        raise TypeError("A file opened in 'text' mode is required")
    return file.read().splitlines()


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
