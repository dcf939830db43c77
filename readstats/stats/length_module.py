#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Read length accounting and the N50 contiguity metric.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from collections import defaultdict
from typing import Dict, Mapping


class LengthAccumulator:
    """
    Running read and base totals plus a length -> count histogram.

    Invariant: total_bases == sum(length * count) over the histogram.
    """

    def __init__(self):
        self.total_reads = 0
        self.total_bases = 0
        self.length_counts: Dict[int, int] = defaultdict(int)

    def ingest(self, sequence) -> int:
        """
        Account for one read. Any length, including 0, is accepted.

        Args:
            sequence: Read sequence (str or bytes)

        Returns:
            Length of the read
        """
        length = len(sequence)
        self.total_reads += 1
        self.total_bases += length
        self.length_counts[length] += 1
        return length

    @property
    def unique_lengths(self) -> int:
        """Number of distinct read lengths seen."""
        return len(self.length_counts)

    def __repr__(self) -> str:
        return (f"LengthAccumulator(reads={self.total_reads}, bases={self.total_bases}, "
                f"lengths={self.unique_lengths})")


def calculate_n50(length_counts: Mapping[int, int], total_bases: int) -> int:
    """
    Calculate N50 from a read length histogram.

    Lengths are walked from longest to shortest, accumulating length * count;
    the first length where the running sum reaches total_bases // 2 is the N50.

    Args:
        length_counts: Mapping of read length -> number of reads
        total_bases: Sum of length * count over the histogram

    Returns:
        N50 length, or 0 for an empty histogram

    Example:
        >>> calculate_n50({10: 1, 20: 1, 30: 1}, 60)
        30
    """
    half_bases = total_bases // 2
    cumulative = 0

    for length in sorted(length_counts, reverse=True):
        cumulative += length * length_counts[length]
        if cumulative >= half_bases:
            return length

    return 0
