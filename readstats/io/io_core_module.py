#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Core I/O module for ReadStats.

Record source for the statistics engine:
- gzip detection (magic bytes or file suffix)
- FASTQ/FASTA format sniffing
- Lazy, forward-only iteration over read sequences

Parsing is fail-fast: the first malformed record or stream failure aborts
iteration with MalformedRecordError or SourceIOError.
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from Bio import SeqIO

from ..errors import MalformedRecordError, SourceIOError

logger = logging.getLogger(__name__)

GZIP_MAGIC = b'\x1f\x8b\x08'

FORMAT_MARKERS = {
    '@': 'fastq',
    '>': 'fasta',
}


# =============================================================================
# SECTION 2: FILE UTILITIES
# =============================================================================
# Helper functions for file handling with automatic gzip detection

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Looks at the first three bytes, falling back to the file suffix.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)

    with open(filepath, 'rb') as handle:
        magic = handle.read(len(GZIP_MAGIC))

    return magic == GZIP_MAGIC or filepath.suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path]) -> TextIO:
    """
    Open file for reading with automatic gzip detection.

    Args:
        filepath: Path to file

    Returns:
        Text file handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        return gzip.open(filepath, 'rt')
    return open(filepath, 'r')


def detect_format(filepath: Union[str, Path]) -> Optional[str]:
    """
    Detect FASTQ or FASTA from the first non-blank character.

    Args:
        filepath: Path to reads file (can be gzipped)

    Returns:
        'fastq', 'fasta', or None for an empty file

    Raises:
        MalformedRecordError: If the file starts with anything else
        SourceIOError: If the file cannot be read
    """
    try:
        with open_file(filepath) as handle:
            for line in handle:
                stripped = line.strip()
                if not stripped:
                    continue
                fmt = FORMAT_MARKERS.get(stripped[0])
                if fmt is None:
                    raise MalformedRecordError(
                        f"Unrecognized record format in {filepath}: "
                        f"expected '@' (FASTQ) or '>' (FASTA), found {stripped[0]!r}"
                    )
                return fmt
    except (OSError, EOFError) as e:
        raise SourceIOError(f"Failed to read {filepath}: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"Input {filepath} is not a text sequence file: {e}") from e

    return None


# =============================================================================
# SECTION 3: SEQUENCE RECORD SOURCE
# =============================================================================

def read_sequences(filepath: Union[str, Path], fmt: str = 'auto') -> Iterator[str]:
    """
    Yield read sequences one at a time from a FASTQ/FASTA file.

    Args:
        filepath: Path to reads file (can be gzipped)
        fmt: 'auto', 'fastq' or 'fasta'

    Yields:
        Sequence strings, in file order

    Raises:
        MalformedRecordError: On the first record that cannot be parsed
        SourceIOError: If the file is missing, unreadable or truncated

    Examples:
        >>> for seq in read_sequences("reads.fq.gz"):
        ...     print(len(seq))
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise SourceIOError(f"Reads file not found: {filepath}")

    if fmt == 'auto':
        fmt = detect_format(filepath)
        if fmt is None:
            logger.warning(f"No records found in {filepath}")
            return
    elif fmt not in FORMAT_MARKERS.values():
        raise ValueError(f"Unsupported input format: {fmt}")

    logger.info(f"Reading {fmt.upper()} records from {filepath}")

    count = 0
    try:
        with open_file(filepath) as handle:
            for record in SeqIO.parse(handle, fmt):
                count += 1
                yield str(record.seq)
    except (OSError, EOFError) as e:
        raise SourceIOError(f"Failed reading {filepath} after {count:,} records: {e}") from e
    except ValueError as e:
        raise MalformedRecordError(
            f"Malformed {fmt.upper()} record #{count + 1} in {filepath}: {e}"
        ) from e

    logger.debug(f"Read {count:,} records from {filepath}")


def count_reads(filepath: Union[str, Path], fmt: str = 'auto') -> int:
    """
    Count number of records in a FASTQ/FASTA file.

    Args:
        filepath: Path to reads file

    Returns:
        Number of reads
    """
    count = 0
    for _ in read_sequences(filepath, fmt):
        count += 1
    return count
