"""
ReadStats v0.1.0

Sequence utility functions for ReadStats.

String-level helpers mirroring the rolling 2-bit encoder, used for
decoding k-mers in logs and as a reference in tests.
"""

from typing import List, Optional

from ..stats.kmer_module import BASE_CODES, COMPLEMENT_MASK

DECODE_BASES = 'ACGT'


def reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of DNA sequence.

    Args:
        sequence: DNA sequence string

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
    """
    complement_map = {
        'A': 'T', 'T': 'A',
        'G': 'C', 'C': 'G',
        'N': 'N',
        'a': 't', 't': 'a',
        'g': 'c', 'c': 'g',
        'n': 'n'
    }

    return ''.join(complement_map.get(base, base) for base in reversed(sequence))


def encode_kmer(kmer: str) -> Optional[int]:
    """
    Pack a k-mer into 2 bits per base (first base in the high bits).

    Returns:
        Integer encoding, or None if the k-mer has an invalid base

    Example:
        >>> encode_kmer("ACGT")
        27
    """
    value = 0
    for base in kmer:
        code = BASE_CODES.get(base)
        if code is None:
            return None
        value = (value << 2) | code
    return value


def decode_kmer(value: int, k: int) -> str:
    """
    Unpack a 2-bit encoding back into a k-mer string.

    Example:
        >>> decode_kmer(27, 4)
        'ACGT'
    """
    bases = []
    for _ in range(k):
        bases.append(DECODE_BASES[value & COMPLEMENT_MASK])
        value >>= 2
    return ''.join(reversed(bases))


def canonical_kmer(kmer: str) -> Optional[int]:
    """
    Canonical encoding: smaller of the k-mer and its reverse complement.

    Returns:
        Canonical integer, or None if the k-mer has an invalid base
    """
    forward = encode_kmer(kmer)
    if forward is None:
        return None
    return min(forward, encode_kmer(reverse_complement(kmer)))


def extract_valid_kmers(sequence: str, k: int) -> List[str]:
    """
    Extract all k-mers that contain only A/C/G/T.

    Args:
        sequence: DNA sequence string
        k: K-mer size

    Returns:
        List of k-mer strings in sequence order

    Example:
        >>> extract_valid_kmers("ACGNACGT", 3)
        ['ACG', 'ACG', 'CGT']
    """
    if k > len(sequence):
        return []

    kmers = []
    for i in range(len(sequence) - k + 1):
        kmer = sequence[i:i + k]
        if all(base in BASE_CODES for base in kmer):
            kmers.append(kmer)

    return kmers


__all__ = [
    'reverse_complement',
    'encode_kmer',
    'decode_kmer',
    'canonical_kmer',
    'extract_valid_kmers',
]
