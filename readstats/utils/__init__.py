"""
Utilities module for ReadStats.

- Sequence helpers (reverse complement, string-level k-mer encoding)
- Logging setup shared by the CLI
"""

from .sequence_utils import (
    reverse_complement,
    encode_kmer,
    decode_kmer,
    canonical_kmer,
    extract_valid_kmers,
)
from .logging_utils import setup_logging

__all__ = [
    "reverse_complement",
    "encode_kmer",
    "decode_kmer",
    "canonical_kmer",
    "extract_valid_kmers",
    "setup_logging",
]
