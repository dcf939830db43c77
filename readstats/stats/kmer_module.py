#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Canonical k-mer counting with a rolling 2-bit encoding.

Each base is packed into 2 bits (A=00, C=01, G=10, T=11). A forward and a
reverse-complement encoding of the current k-length window are updated
incrementally, and the numerically smaller of the two is counted so that a
k-mer and its reverse complement land in the same bucket.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections import defaultdict
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


DEFAULT_K = 21

# 2-bit base codes (case-insensitive); anything else is an invalid base
BASE_CODES = {
    'A': 0, 'C': 1, 'G': 2, 'T': 3,
    'a': 0, 'c': 1, 'g': 2, 't': 3,
}

COMPLEMENT_MASK = 0b11


def encode_base(base: str) -> Optional[int]:
    """Return the 2-bit code for a base, or None for N and other symbols."""
    return BASE_CODES.get(base)


class RollingWindow:
    """
    Forward and reverse-complement encodings of the last K valid bases.

    Both encodings are kept inside a 2*K bit field; masking is explicit so
    Python's unbounded ints never carry bits beyond the window.
    """

    __slots__ = ('k', 'mask', 'rev_shift', 'forward', 'reverse', 'valid_bases')

    def __init__(self, k: int = DEFAULT_K):
        if k <= 0:
            raise ValueError("K must be positive")
        self.k = k
        self.mask = (1 << (2 * k)) - 1
        self.rev_shift = 2 * (k - 1)
        self.forward = 0
        self.reverse = 0
        self.valid_bases = 0

    def push(self, code: int):
        """Shift a valid 2-bit base code into the window."""
        self.forward = ((self.forward << 2) | code) & self.mask
        comp = code ^ COMPLEMENT_MASK
        self.reverse = ((self.reverse >> 2) | (comp << self.rev_shift)) & self.mask
        self.valid_bases += 1

    def reset(self):
        """Clear the window after an invalid base."""
        self.forward = 0
        self.reverse = 0
        self.valid_bases = 0

    @property
    def is_full(self) -> bool:
        """True once K consecutive valid bases have been pushed."""
        return self.valid_bases >= self.k

    @property
    def canonical(self) -> int:
        """Smaller of the forward and reverse-complement encodings."""
        return self.forward if self.forward < self.reverse else self.reverse

    def __repr__(self) -> str:
        return (f"RollingWindow(k={self.k}, forward={self.forward:#x}, "
                f"reverse={self.reverse:#x}, valid={self.valid_bases})")


class CanonicalKmerCounter:
    """
    Strand-agnostic k-mer counts keyed by canonical 2-bit encoding.

    Attributes:
        k: K-mer size
        capacity_hint: Expected number of distinct k-mers. Python dicts grow
            on demand, so this is only logged; it never caps the table.
        counts: Mapping canonical encoding -> occurrence count
    """

    def __init__(self, k: int = DEFAULT_K, capacity_hint: int = 0):
        if k <= 0:
            raise ValueError("K must be positive")
        self.k = k
        self.capacity_hint = capacity_hint
        self.counts: Dict[int, int] = defaultdict(int)
        self.sequences_hashed = 0
        logger.debug(f"K-mer counter: K={k}, expected {capacity_hint:,} distinct k-mers")

    def count_sequence(self, sequence: Union[str, bytes]) -> int:
        """
        Count every canonical k-mer in a sequence.

        No k-mer spans an invalid base: the window restarts after it.

        Args:
            sequence: Read sequence (str, or bytes decoded as latin-1)

        Returns:
            Number of k-mers counted from this sequence
        """
        if isinstance(sequence, (bytes, bytearray)):
            sequence = sequence.decode('latin-1')

        window = RollingWindow(self.k)
        counts = self.counts
        added = 0

        for base in sequence:
            code = BASE_CODES.get(base)
            if code is None:
                window.reset()
                continue

            window.push(code)
            if window.is_full:
                counts[window.canonical] += 1
                added += 1

        self.sequences_hashed += 1
        return added

    def get_count(self, canonical: int) -> int:
        """Count for a canonical encoding (0 if never seen)."""
        return self.counts.get(canonical, 0)

    def unique_count(self) -> int:
        """Number of distinct canonical k-mers."""
        return len(self.counts)

    def total_count(self) -> int:
        """Sum of all k-mer occurrences."""
        return sum(self.counts.values())

    def __len__(self) -> int:
        return len(self.counts)

    def __str__(self) -> str:
        return (f"CanonicalKmerCounter {{ k: {self.k}, unique: {self.unique_count()}, "
                f"sequences: {self.sequences_hashed} }}")
