"""
I/O module for reading and writing sequence files.

This module provides functions for reading and writing FASTA files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from bioseq.config import get_config
from bioseq.seq import (
    DNA_SYMBOLS, RNA_SYMBOLS, PROTEIN_SYMBOLS,
    Sequence, DNASequence, RNASequence, ProteinSequence, SequenceError,
)

logger = logging.getLogger(__name__)


class FastaRecord:
    """A record from a FASTA file."""

    def __init__(self, id: str, sequence: Sequence, description: Optional[str] = None) -> None:
        """
        Initialize a FASTA record.

        Args:
            id: The sequence identifier (without the '>')
            sequence: The sequence
            description: Optional description
        """
        self.id = id
        self.sequence = sequence
        self.description = description

    def format(self, line_width: int = 60) -> str:
        """Render the record with sequence lines wrapped at ``line_width``."""
        if line_width <= 0:
            raise ValueError(f"line_width must be positive, got {line_width}")

        header = f">{self.id}"
        if self.description:
            header += f" {self.description}"

        seq_str = str(self.sequence)
        lines = [header]
        lines.extend(seq_str[i:i + line_width] for i in range(0, len(seq_str), line_width))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        desc_str = f", description='{self.description}'" if self.description else ""
        return f"FastaRecord(id='{self.id}'{desc_str}, sequence={repr(self.sequence)})"


def _detect_sequence(data: str, seq_id: str) -> Sequence:
    """Build the most specific sequence type whose alphabet covers ``data``."""
    symbols = set(data)
    if symbols <= DNA_SYMBOLS:
        return DNASequence(data, id=seq_id)
    if symbols <= RNA_SYMBOLS:
        return RNASequence(data, id=seq_id)
    if symbols <= PROTEIN_SYMBOLS:
        return ProteinSequence(data, id=seq_id)
    bad = sorted(symbols - DNA_SYMBOLS - RNA_SYMBOLS - PROTEIN_SYMBOLS)
    raise SequenceError(f"Record {seq_id!r} contains unsupported symbols: {''.join(bad)}")


def parse_fasta_string(content: str) -> List[FastaRecord]:
    """
    Parse FASTA records from a string.

    Args:
        content: FASTA formatted text

    Returns:
        List of FastaRecord objects

    Raises:
        SequenceError: If sequence data precedes the first header or a record
            holds symbols outside every alphabet
    """
    records = []
    header: Optional[str] = None
    chunks: List[str] = []

    def flush() -> None:
        parts = header.split(None, 1)
        seq_id = parts[0] if parts else ""
        description = parts[1] if len(parts) > 1 else None
        sequence = _detect_sequence("".join(chunks), seq_id)
        records.append(FastaRecord(seq_id, sequence, description))

    for lineno, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        if line.startswith(">"):
            if header is not None:
                flush()
            header = line[1:].strip()
            chunks = []
        elif header is None:
            raise SequenceError(f"Line {lineno}: sequence data before first FASTA header")
        else:
            chunks.append(line)

    if header is not None:
        flush()

    return records


def read_fasta(path: Union[str, Path]) -> List[FastaRecord]:
    """
    Read sequences from a FASTA file.

    Args:
        path: Path to the FASTA file

    Returns:
        List of FastaRecord objects

    Raises:
        SequenceError: If the file cannot be read or parsed
    """
    path = Path(path)

    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise SequenceError(f"Failed to read FASTA file: {e}") from e

    records = parse_fasta_string(content)
    logger.debug("Read %d records from %s", len(records), path)
    return records


def write_fasta(records: List[FastaRecord], path: Union[str, Path], line_width: Optional[int] = None) -> None:
    """
    Write sequences to a FASTA file.

    Args:
        records: List of FastaRecord objects
        path: Path to write the FASTA file
        line_width: Characters per sequence line (defaults to the configured width)

    Raises:
        SequenceError: If the file cannot be written
    """
    path = Path(path)
    if line_width is None:
        line_width = get_config().fasta_line_width
    if line_width <= 0:
        raise ValueError(f"line_width must be positive, got {line_width}")

    text = "".join(record.format(line_width) + "\n" for record in records)
    try:
        path.write_text(text)
    except OSError as e:
        raise SequenceError(f"Failed to write FASTA file: {e}") from e
    logger.debug("Wrote %d records to %s", len(records), path)


def detect_format(path: Union[str, Path]) -> str:
    """
    Detect the format of a sequence file.

    Args:
        path: Path to the sequence file

    Returns:
        The format name ("FASTA" or "FASTQ")

    Raises:
        SequenceError: If the format cannot be detected
    """
    path = Path(path)

    try:
        with path.open() as handle:
            for line in handle:
                line = line.strip()
                if not line:
                    continue
                if line.startswith(">"):
                    return "FASTA"
                if line.startswith("@"):
                    return "FASTQ"
                break
    except (OSError, UnicodeDecodeError) as e:
        raise SequenceError(f"Failed to detect file format: {e}") from e

    raise SequenceError(f"Failed to detect file format: {path}")
