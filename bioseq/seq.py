"""
Sequence module for handling biological sequences.

This module provides classes and functions for working with DNA, RNA, and protein sequences.
Every sequence validates its symbols against a fixed alphabet on construction and on mutation.
"""

import logging
from typing import FrozenSet, List, Optional, Union

import numpy as np

from bioseq.codons import translate

logger = logging.getLogger(__name__)

DNA_SYMBOLS = frozenset("ATCG")
RNA_SYMBOLS = frozenset("AUCG")
PROTEIN_SYMBOLS = frozenset("ACDEFGHIKLMNPQRSTVWY")

_DNA_COMPLEMENT = str.maketrans("ATCG", "TAGC")
_RNA_COMPLEMENT = str.maketrans("AUCG", "UAGC")
# Template-strand convention: A->U, T->A, C->G, G->C
_DNA_TO_RNA = str.maketrans("ATCG", "UAGC")
_RNA_TO_DNA = str.maketrans("UAGC", "ATCG")


class SequenceError(Exception):
    """Exception raised for sequence-related errors."""
    pass


class InvalidSymbolError(SequenceError, ValueError):
    """A symbol is not part of the sequence's alphabet."""

    def __init__(self, symbol: str, alphabet: str, position: Optional[int] = None) -> None:
        self.symbol = symbol
        self.alphabet = alphabet
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid {alphabet} symbol {symbol!r}{where}")


class OutOfRangeError(SequenceError, IndexError):
    """A position falls outside the sequence."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(f"Position {position} out of range for sequence of length {length}")


class Sequence:
    """Base class for biological sequences."""

    #: Alphabet name reported in errors and by ``alphabet``.
    ALPHABET_NAME = "Generic"
    #: Permitted symbols; ``None`` accepts any character.
    VALID_SYMBOLS: Optional[FrozenSet[str]] = None

    def __init__(self, sequence: Union[str, bytes, "Sequence"] = "", id: str = "") -> None:
        """
        Initialize a sequence.

        Args:
            sequence: The sequence as a string, bytes, or another Sequence object
            id: Identifier for the sequence, used in the FASTA header

        Raises:
            InvalidSymbolError: If a symbol is outside the alphabet
        """
        if isinstance(sequence, Sequence):
            sequence = str(sequence)
        elif isinstance(sequence, bytes):
            sequence = sequence.decode("latin-1")
        elif not isinstance(sequence, str):
            raise TypeError(f"Sequence must be a string, bytes, or Sequence object, not {type(sequence)}")

        self._validate(sequence)
        self._id = id
        self._data: List[str] = list(sequence)

    @classmethod
    def _validate(cls, sequence: str) -> None:
        if cls.VALID_SYMBOLS is None:
            return
        for position, symbol in enumerate(sequence):
            if symbol not in cls.VALID_SYMBOLS:
                raise InvalidSymbolError(symbol, cls.ALPHABET_NAME, position)

    @property
    def id(self) -> str:
        """Get the sequence identifier."""
        return self._id

    @property
    def data(self) -> str:
        """Get the raw symbol string."""
        return "".join(self._data)

    @property
    def alphabet(self) -> str:
        """Get the alphabet name for this sequence."""
        return self.ALPHABET_NAME

    def __len__(self) -> int:
        return len(self._data)

    def length(self) -> int:
        """Get the number of symbols in the sequence."""
        return len(self._data)

    def __str__(self) -> str:
        return "".join(self._data)

    def __repr__(self) -> str:
        seq = str(self)
        if len(seq) > 20:
            seq = seq[:20] + "..."
        return f"{self.__class__.__name__}('{seq}' id='{self.id}' length={len(self)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or type(self) is not type(other):
            return NotImplemented
        return self._id == other._id and self._data == other._data

    __hash__ = None  # mutable

    def __getitem__(self, key: Union[int, slice]) -> Union[str, "Sequence"]:
        """
        Get a symbol or a subsequence.

        Args:
            key: An integer index or slice

        Returns:
            A single character (for integer index) or a subsequence of the
            same type and identifier (for slice)
        """
        if isinstance(key, int):
            if key < 0:
                key = len(self) + key
            if key < 0 or key >= len(self):
                raise IndexError(f"Index {key} out of range for sequence of length {len(self)}")
            return self._data[key]
        elif isinstance(key, slice):
            return self.__class__("".join(self._data[key]), id=self._id)
        else:
            raise TypeError(f"Invalid key type: {type(key)}")

    def to_string(self) -> str:
        """Get the sequence in two-line FASTA form."""
        return f">{self._id}\n{self}"

    def mutate(self, position: int, symbol: str) -> None:
        """
        Replace the symbol at ``position`` in place.

        Both arguments are checked before anything is written, so a failed
        mutation leaves the sequence unchanged.

        Raises:
            OutOfRangeError: If ``position`` is not in ``[0, len(self))``
            InvalidSymbolError: If ``symbol`` is not a single alphabet symbol
        """
        if position < 0 or position >= len(self._data):
            raise OutOfRangeError(position, len(self._data))
        if len(symbol) != 1 or (self.VALID_SYMBOLS is not None and symbol not in self.VALID_SYMBOLS):
            raise InvalidSymbolError(symbol, self.ALPHABET_NAME)
        logger.debug("Mutating %s at %d: %s -> %s", self._id, position, self._data[position], symbol)
        self._data[position] = symbol

    def find_motif(self, motif: str) -> int:
        """
        Find the first occurrence of a motif.

        Returns:
            The 0-based index of the first match, or -1 if absent. An empty
            motif matches at 0.
        """
        return str(self).find(motif)

    def count(self, pattern: str) -> int:
        """Count non-overlapping occurrences of a pattern."""
        return str(self).count(pattern)

    def find_all(self, pattern: str) -> List[int]:
        """
        Find all occurrences of a pattern in the sequence, overlaps included.

        Returns:
            List of starting positions (0-based)
        """
        if not pattern:
            return []
        seq = str(self)
        positions = []
        pos = seq.find(pattern)
        while pos != -1:
            positions.append(pos)
            pos = seq.find(pattern, pos + 1)
        return positions

    def to_bytes(self) -> bytes:
        """Get the raw bytes of the sequence."""
        return str(self).encode("latin-1")

    def to_numpy(self) -> np.ndarray:
        """Get the sequence as a NumPy array of bytes."""
        return np.frombuffer(self.to_bytes(), dtype=np.uint8)


class _NucleotideSequence(Sequence):
    """Shared helpers for DNA and RNA."""

    _COMPLEMENT: dict = {}

    def complement(self) -> str:
        """
        Get the complementary strand.

        Returns:
            A new symbol string; the identifier is not carried over
        """
        return str(self).translate(self._COMPLEMENT)

    def reverse_complement(self) -> str:
        """Get the reverse complementary strand."""
        return self.complement()[::-1]

    def gc_content(self) -> float:
        """
        Calculate the GC content of the sequence.

        Returns:
            The percentage of G and C bases in the sequence
        """
        if not self._data:
            return 0.0
        gc = sum(1 for base in self._data if base in "GC")
        return gc / len(self._data) * 100.0


class DNASequence(_NucleotideSequence):
    """DNA sequence over A, T, C, G."""

    ALPHABET_NAME = "DNA"
    VALID_SYMBOLS = DNA_SYMBOLS
    _COMPLEMENT = _DNA_COMPLEMENT

    def transcribe(self) -> "RNASequence":
        """
        Transcribe the DNA sequence to RNA.

        Each base maps one-to-one (A->U, T->A, C->G, G->C).

        Returns:
            An RNASequence identified as ``<id>_RNA``
        """
        rna = str(self).translate(_DNA_TO_RNA)
        logger.debug("Transcribed %s (%d nt) to RNA", self._id, len(rna))
        return RNASequence(rna, id=f"{self._id}_RNA")


class RNASequence(_NucleotideSequence):
    """RNA sequence over A, U, C, G."""

    ALPHABET_NAME = "RNA"
    VALID_SYMBOLS = RNA_SYMBOLS
    _COMPLEMENT = _RNA_COMPLEMENT

    def transcribe(self) -> "ProteinSequence":
        """
        Translate the RNA sequence to protein.

        Codons are read in frame from position 0 until the first stop codon;
        a trailing partial codon is dropped.

        Returns:
            A ProteinSequence identified as ``<id>_protein``
        """
        protein = translate(str(self))
        logger.debug("Translated %s (%d nt) to %d residues", self._id, len(self), len(protein))
        return ProteinSequence(protein, id=f"{self._id}_protein")

    def reverse_transcribe(self) -> DNASequence:
        """
        Reverse transcribe the RNA sequence to DNA.

        Returns:
            A DNASequence identified as ``<id>_DNA``
        """
        return DNASequence(str(self).translate(_RNA_TO_DNA), id=f"{self._id}_DNA")


class ProteinSequence(Sequence):
    """Protein sequence over the 20 standard amino acids."""

    ALPHABET_NAME = "Protein"
    VALID_SYMBOLS = PROTEIN_SYMBOLS


# Utility functions
def random_dna_sequence(length: int, id: str = "random", seed: Optional[int] = None) -> DNASequence:
    """
    Generate a random DNA sequence of the specified length.

    Args:
        length: The length of the sequence to generate
        id: Identifier for the new sequence
        seed: Optional seed for reproducible output

    Returns:
        A random DNASequence
    """
    if length <= 0:
        raise ValueError("Length must be positive")

    rng = np.random.default_rng(seed)
    bases = rng.choice(np.array(list("ACGT")), size=length)
    return DNASequence("".join(bases), id=id)
