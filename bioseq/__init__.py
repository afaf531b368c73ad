"""
bioseq: Validated DNA, RNA and protein sequences.

This package provides alphabet-checked sequence types, the DNA -> RNA -> protein
transformation chain, FASTA I/O, and a small polynomial type.
"""

import logging

__version__ = "0.1.0"

# Import submodules
from bioseq import codons
from bioseq import seq
from bioseq import io

# Core functionality re-exported at the top level
from bioseq.seq import (
    Sequence, DNASequence, RNASequence, ProteinSequence,
    SequenceError, InvalidSymbolError, OutOfRangeError, random_dna_sequence,
)
from bioseq.io import read_fasta, write_fasta, FastaRecord
from bioseq.polynomial import Polynomial
from bioseq.config import BioseqConfig, get_config, set_config, setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "codons",
    "seq",
    "io",
    "Sequence",
    "DNASequence",
    "RNASequence",
    "ProteinSequence",
    "SequenceError",
    "InvalidSymbolError",
    "OutOfRangeError",
    "random_dna_sequence",
    "read_fasta",
    "write_fasta",
    "FastaRecord",
    "Polynomial",
    "BioseqConfig",
    "get_config",
    "set_config",
    "setup_logging",
]
