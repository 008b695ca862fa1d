# This source code is part of the biosymbols package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Genetic codes translate codons into amino acids.
"""

__name__ = "biosymbols.sequence"
__author__ = "The biosymbols developers"
__all__ = ["GeneticCode", "StopCodonError"]

import functools
from os.path import join, dirname, realpath
import numpy as np
from biosymbols.sequence.alphabet import (
    AlphabetError,
    AlphabetConfigError,
    AlphabetMismatchError,
    BadIntError,
)
from biosymbols.sequence.word import CodonAlphabet
from biosymbols.sequence.sequence import Sequence
from biosymbols.sequence.tools import AlphabetTools


# Code of the stop symbol in the protein alphabet
_STOP = -2


class StopCodonError(AlphabetError):
    """
    Indicates that a stop codon was translated.

    Attributes
    ----------
    codon : str
        The letter of the stop codon.
    """

    def __init__(self, codon, alphabet=None):
        self.codon = codon
        super().__init__(f"Stop codon {repr(codon)} has no translation", alphabet)


class GeneticCode(object):
    """
    A :class:`GeneticCode` maps the codons of a :class:`CodonAlphabet`
    to the amino acids of a :class:`ProteicAlphabet`.
    It also defines start codons.

    Methods taking a codon or an amino acid accept either the code or
    the letter and return the same kind.

    The :func:`load()` method allows loading of NCBI genetic codes.

    Objects of this class are immutable.

    Parameters
    ----------
    codon_dict : dict of (str -> str)
        A dictionary that maps codons to amino acids.
        The keys are strings of length 3 (``'T'`` may be used for
        thymine and uracil), the values strings of length 1.
        Stop codons map to ``'*'``.
        The dictionary must provide entries for all 64 codons.
    starts : iterable object of str
        The start codons.
    nucleic_alphabet : NucleicAlphabet, optional
        The alphabet of the codon positions.
        By default :class:`DNA`.
    name : str, optional
        The name of the genetic code.

    Examples
    --------

    >>> code = GeneticCode.standard()
    >>> print(code.translate("ATG"))
    M
    >>> print(code.translate(14))
    12
    >>> print(code.stop_codons(code=False))
    ('TAA', 'TAG', 'TGA')
    >>> print(code.get_synonymous("W"))
    ['TGG']
    """

    # file for builtin genetic codes from NCBI
    _table_file = join(dirname(realpath(__file__)), "codon_tables.txt")

    def __init__(self, codon_dict, starts, nucleic_alphabet=None, name=None):
        if nucleic_alphabet is None:
            self._codon_alphabet = AlphabetTools.dna_codon()
        else:
            self._codon_alphabet = CodonAlphabet(nucleic_alphabet)
        self._protein_alphabet = AlphabetTools.protein()
        self._name = name
        size = self._codon_alphabet.get_size()
        # The array uses the codon code as index and stores the
        # amino acid code, -1 marks missing codons
        self._codons = np.full(size, -1, dtype=int)
        for codon, aa in codon_dict.items():
            self._codons[self._codon_code(codon)] = (
                self._protein_alphabet.char_to_int(aa)
            )
        if (self._codons == -1).any():
            missing = int(np.where(self._codons == -1)[0][0])
            raise AlphabetConfigError(
                f"Codon dictionary does not contain codon "
                f"'{self._codon_alphabet.int_to_char(missing)}'"
            )
        self._starts = frozenset(self._codon_code(start) for start in starts)
        self._start = self._codon_alphabet.get_codon(0, 3, 2)

    def _codon_code(self, codon):
        if not isinstance(codon, str) or len(codon) != 3:
            raise AlphabetConfigError(f"Invalid codon {repr(codon)}")
        fourth = self._codon_alphabet.get_nucleic_alphabet().int_to_char(3)
        code = self._codon_alphabet.char_to_int(
            codon.upper().replace("T", fourth).replace("U", fourth)
        )
        if code < 0 or code >= self._codon_alphabet.get_size():
            raise AlphabetConfigError(f"Invalid codon {repr(codon)}")
        return code

    def __repr__(self):
        """Represent GeneticCode as a string for debugging."""
        return (
            f"GeneticCode({self.codon_dict()}, {self.start_codons()}, "
            f"{repr(self._codon_alphabet.get_nucleic_alphabet())}, "
            f"{repr(self._name)})"
        )

    def __eq__(self, item):
        if not isinstance(item, GeneticCode):
            return False
        if self._codon_alphabet != item._codon_alphabet:
            return False
        if not np.array_equal(self._codons, item._codons):
            return False
        return self._starts == item._starts

    def __hash__(self):
        return hash((self._codon_alphabet, tuple(self._codons), self._starts))

    @property
    def codon_alphabet(self):
        return self._codon_alphabet

    @property
    def protein_alphabet(self):
        return self._protein_alphabet

    @property
    def name(self):
        return self._name

    def codon_dict(self, code=False):
        """
        Get the codon to amino acid mappings dictionary.

        Parameters
        ----------
        code : bool
            If true, the dictionary contains keys and values as code.
            Otherwise, the dictionary contains strings for codons and
            amino acid. (Default: False)

        Returns
        -------
        codon_dict : dict
            The dictionary mapping codons to amino acids.
        """
        if code:
            return {codon: int(aa) for codon, aa in enumerate(self._codons)}
        return {
            self._codon_alphabet.int_to_char(codon):
                self._protein_alphabet.int_to_char(aa)
            for codon, aa in self.codon_dict(code=True).items()
        }

    def translate(self, codon):
        """
        Translate a codon into an amino acid.

        Parameters
        ----------
        codon : int or str
            The code or the letter of the codon.

        Returns
        -------
        aa : int or str
            The code of the amino acid if a code was given, otherwise
            its letter.
            The unresolved codon translates into the unresolved amino
            acid.

        Raises
        ------
        StopCodonError
            If the codon is a stop codon.
        BadIntError
            If the codon has no translation, e.g. the gap.
        """
        if isinstance(codon, str):
            return self._protein_alphabet.int_to_char(
                self.translate(self._codon_alphabet.char_to_int(codon))
            )
        if self.is_stop(codon):
            raise StopCodonError(
                self._codon_alphabet.int_to_char(codon), self._codon_alphabet
            )
        if codon == self._codon_alphabet.get_unknown_code():
            return self._protein_alphabet.get_unknown_code()
        if codon < 0:
            raise BadIntError(
                codon, self._codon_alphabet,
                f"Codon {codon} has no translation"
            )
        return int(self._codons[codon])

    def translate_sequence(self, sequence):
        """
        Translate a codon or nucleotide sequence into a protein
        sequence.

        Parameters
        ----------
        sequence : Sequence
            The sequence.
            Its alphabet is either the codon alphabet or the nucleic
            alphabet of this genetic code.
            A nucleotide sequence is read in codons from its first
            position.

        Returns
        -------
        protein : Sequence
            The protein sequence.
            Gaps are kept.

        Raises
        ------
        AlphabetMismatchError
            If the alphabet of the sequence does not match.
        StopCodonError
            If the sequence contains a stop codon.
        """
        nucleic = self._codon_alphabet.get_nucleic_alphabet()
        if sequence.alphabet == nucleic:
            sequence = self._codon_alphabet.translate(sequence)
        elif sequence.alphabet != self._codon_alphabet:
            raise AlphabetMismatchError(
                "Cannot translate a sequence", sequence.alphabet,
                self._codon_alphabet
            )
        aa_codes = [
            -1 if codon == -1 else self.translate(int(codon))
            for codon in sequence.code
        ]
        return Sequence(
            sequence.name, np.array(aa_codes, dtype=np.int64),
            self._protein_alphabet
        )

    def is_stop(self, codon):
        """
        Check whether a codon is a stop codon.

        Parameters
        ----------
        codon : int or str
            The code or the letter of the codon.

        Returns
        -------
        stop : bool
            True, if the codon is a stop codon.

        Raises
        ------
        BadIntError, BadCharError
            If the codon is not in the codon alphabet.
        """
        if isinstance(codon, str):
            codon = self._codon_alphabet.char_to_int(codon)
        elif not self._codon_alphabet.is_int_in_alphabet(codon):
            raise BadIntError(codon, self._codon_alphabet)
        if codon < 0 or codon >= len(self._codons):
            return False
        return bool(self._codons[codon] == _STOP)

    def is_start(self, codon):
        """
        Check whether a codon is the canonical start codon ``'ATG'``.
        """
        if isinstance(codon, str):
            codon = self._codon_alphabet.char_to_int(codon)
        elif not self._codon_alphabet.is_int_in_alphabet(codon):
            raise BadIntError(codon, self._codon_alphabet)
        return codon == self._start

    def is_alt_start(self, codon):
        """
        Check whether a codon is an alternative start codon, i.e. a
        start codon of this genetic code other than ``'ATG'``.
        """
        if isinstance(codon, str):
            codon = self._codon_alphabet.char_to_int(codon)
        elif not self._codon_alphabet.is_int_in_alphabet(codon):
            raise BadIntError(codon, self._codon_alphabet)
        return codon != self._start and codon in self._starts

    def stop_codons(self, code=True):
        """
        Get the stop codons of the genetic code.

        Parameters
        ----------
        code : bool
            If true, the codes will be returned instead of strings.
            (Default: True)

        Returns
        -------
        stop_codons : tuple
            The stop codons, in ascending order of their codes.
        """
        codons = tuple(int(c) for c in np.where(self._codons == _STOP)[0])
        if code:
            return codons
        return tuple(self._codon_alphabet.int_to_char(c) for c in codons)

    def start_codons(self, code=False):
        """
        Get the start codons of the genetic code.

        Parameters
        ----------
        code : bool
            If true, the codes will be returned instead of strings.
            (Default: False)

        Returns
        -------
        start_codons : tuple
            The start codons, in ascending order of their codes.
        """
        codons = tuple(sorted(self._starts))
        if code:
            return codons
        return tuple(self._codon_alphabet.int_to_char(c) for c in codons)

    def get_synonymous(self, aa):
        """
        Get the codons translating into an amino acid.

        Parameters
        ----------
        aa : int or str
            The code or the letter of the amino acid.

        Returns
        -------
        codons : list of int or list of str
            The codes or letters of the codons.
        """
        if isinstance(aa, str):
            return [
                self._codon_alphabet.int_to_char(codon)
                for codon in self.get_synonymous(
                    self._protein_alphabet.char_to_int(aa)
                )
            ]
        # Raises an error for invalid codes
        self._protein_alphabet.int_to_char(aa)
        return [int(codon) for codon in np.where(self._codons == aa)[0]]

    def are_synonymous(self, codon1, codon2):
        """
        Check whether two codons translate into the same amino acid.

        Raises
        ------
        StopCodonError
            If one of the codons is a stop codon.
        """
        return self.translate(codon1) == self.translate(codon2)

    def is_four_fold_degenerated(self, codon):
        """
        Check whether each substitution at the third position of a codon
        is synonymous.

        Parameters
        ----------
        codon : int or str
            The code or the letter of the codon.

        Returns
        -------
        degenerated : bool
            True, if the codon is four-fold degenerated.
            Stop codons and codons whose third position leads to a stop
            codon are not.
        """
        if isinstance(codon, str):
            codon = self._codon_alphabet.char_to_int(codon)
        if self.is_stop(codon):
            return False
        aa = self.translate(codon)
        p1, p2, p3 = self._codon_alphabet.get_positions(codon)
        for substitute in range(4):
            if substitute == p3:
                continue
            mutant = self._codon_alphabet.get_codon(p1, p2, substitute)
            if self.is_stop(mutant) or self.translate(mutant) != aa:
                return False
        return True

    def get_coding_sequence(self, sequence, look_for_init_codon=False,
                            include_init_codon=False):
        """
        Get the coding part of a codon or nucleotide sequence, that
        ends before the first stop codon.

        Parameters
        ----------
        sequence : Sequence
            A sequence over a codon or a nucleic alphabet.
        look_for_init_codon : bool, optional
            If true, the coding sequence starts after the first
            ``'ATG'``.
            Otherwise, it starts at the beginning of the sequence.
        include_init_codon : bool, optional
            If true, the found ``'ATG'`` is part of the coding sequence.

        Returns
        -------
        coding_sequence : Sequence
            The coding subsequence.
            In a nucleotide sequence the stop codons are searched in the
            reading frame of the coding sequence.

        Raises
        ------
        AlphabetMismatchError
            If the sequence is neither a codon nor a nucleotide sequence.
        """
        code = sequence.code
        init_pos = 0
        stop_pos = len(code)
        if AlphabetTools.is_codon_alphabet(sequence.alphabet):
            if look_for_init_codon:
                for i, codon in enumerate(code):
                    if self._codon_alphabet.get_positions(int(codon)) == [0, 3, 2]:
                        init_pos = i if include_init_codon else i + 1
                        break
            for i in range(init_pos, len(code)):
                if self.is_stop(int(code[i])):
                    stop_pos = i
                    break
        elif AlphabetTools.is_nucleic_alphabet(sequence.alphabet):
            if look_for_init_codon:
                for i in range(len(code) - 2):
                    if code[i] == 0 and code[i + 1] == 3 and code[i + 2] == 2:
                        init_pos = i if include_init_codon else i + 3
                        break
            nucleic = sequence.alphabet
            for i in range(init_pos, len(code) - 2, 3):
                letters = "".join(
                    [nucleic.int_to_char(int(c)) for c in code[i : i + 3]]
                )
                if self.is_stop(letters):
                    stop_pos = i
                    break
        else:
            raise AlphabetMismatchError(
                "The sequence must be a codon or nucleotide sequence",
                sequence.alphabet, self._codon_alphabet
            )
        return sequence[init_pos:stop_pos]

    @staticmethod
    def load(table_name, nucleic_alphabet=None):
        """
        Load a NCBI genetic code.

        Parameters
        ----------
        table_name : str or int
            If a string is given, it is interpreted as official NCBI
            genetic code name (e.g. "Vertebrate Mitochondrial").
            An integer is interpreted as NCBI genetic code ID.
        nucleic_alphabet : NucleicAlphabet, optional
            The alphabet of the codon positions.
            By default :class:`DNA`.

        Returns
        -------
        genetic_code : GeneticCode
            The NCBI genetic code.

        Raises
        ------
        ValueError
            If no genetic code with the given name or ID exists.
        """
        for table_id, names, aa, init, base1, base2, base3 in _read_tables():
            if table_name == table_id or table_name in names:
                codon_dict = {}
                starts = []
                # aa, init and baseX all have the same length
                for i in range(len(aa)):
                    codon = base1[i] + base2[i] + base3[i]
                    if init[i] == "i":
                        starts.append(codon)
                    codon_dict[codon] = aa[i]
                return GeneticCode(codon_dict, starts, nucleic_alphabet, names[0])
        raise ValueError(f"Genetic code '{table_name}' was not found")

    @staticmethod
    def table_names():
        """
        The possible genetic code names for :func:`load()`.

        Returns
        -------
        names : list of str
            List of valid genetic code names.
        """
        names = []
        for table in _read_tables():
            names.extend(table[1])
        return names

    @staticmethod
    def standard():
        """
        The standard genetic code over the :class:`DNA` alphabet.

        Returns
        -------
        genetic_code : GeneticCode
            The NCBI "Standard" genetic code.
        """
        return _standard_code()


@functools.cache
def _read_tables():
    # Loads genetic codes from codon_tables.txt
    with open(GeneticCode._table_file, "r") as f:
        blocks = f.read().strip().split("\n\n")
    tables = []
    for block in blocks:
        fields = {}
        for line in block.split("\n"):
            if line.startswith("id"):
                fields["id"] = int(line[2:])
            elif line.startswith("name"):
                # Names are separated with ';'
                fields["names"] = tuple(
                    name.strip() for name in line[4:].split(";")
                )
            elif line.startswith("AA"):
                fields["aa"] = line[5:].strip()
            elif line.startswith("Init"):
                fields["init"] = line[5:].strip()
            elif line.startswith("Base"):
                fields[line[:5]] = line[5:].strip()
        tables.append((
            fields["id"], fields["names"], fields["aa"], fields["init"],
            fields["Base1"], fields["Base2"], fields["Base3"]
        ))
    return tuple(tables)


@functools.cache
def _standard_code():
    return GeneticCode.load(1)
