"""
Standard genetic code for RNA codons.

This module provides the codon table used to translate RNA into protein.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

logger = logging.getLogger(__name__)


class Stop(Enum):
    """Marker returned for codons that terminate translation."""
    STOP = "*"


STOP = Stop.STOP

#: Residue emitted for a triplet missing from the table.
UNKNOWN_RESIDUE = "X"

CodonResult = Union[str, Stop]

CODON_TABLE: Mapping[str, CodonResult] = MappingProxyType({
    "UUU": "F", "UUC": "F", "UUA": "L", "UUG": "L",
    "CUU": "L", "CUC": "L", "CUA": "L", "CUG": "L",
    "AUU": "I", "AUC": "I", "AUA": "I", "AUG": "M",
    "GUU": "V", "GUC": "V", "GUA": "V", "GUG": "V",
    "UCU": "S", "UCC": "S", "UCA": "S", "UCG": "S",
    "CCU": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "ACU": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "GCU": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "UAU": "Y", "UAC": "Y", "UAA": STOP, "UAG": STOP,
    "CAU": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "AAU": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "GAU": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "UGU": "C", "UGC": "C", "UGA": STOP, "UGG": "W",
    "CGU": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "AGU": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GGU": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

STOP_CODONS = frozenset(codon for codon, aa in CODON_TABLE.items() if aa is STOP)


def translate_codon(codon: str) -> CodonResult:
    """
    Look up a single RNA codon.

    Args:
        codon: A three-letter RNA triplet

    Returns:
        The one-letter amino acid code, ``STOP`` for a stop codon, or
        ``UNKNOWN_RESIDUE`` when the triplet is not in the table
    """
    try:
        return CODON_TABLE[codon]
    except KeyError:
        logger.warning("Unknown codon %r, emitting %s", codon, UNKNOWN_RESIDUE)
        return UNKNOWN_RESIDUE


def translate(rna: str) -> str:
    """
    Translate an RNA string codon by codon until the first stop codon.

    A trailing partial codon is ignored.

    Example:
        >>> translate("AUGCCUUAAGGG")
        'MP'
    """
    protein = []
    for i in range(0, len(rna) - 2, 3):
        aa = translate_codon(rna[i:i + 3])
        if aa is STOP:
            break
        protein.append(aa)
    return "".join(protein)
