#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Genome size estimation from a k-mer depth histogram.

Algorithm:
  1. Drop k-mers seen error_count_threshold times or fewer (likely errors)
  2. Build depth histogram (how many k-mers appear 6x, 7x, ...)
  3. Find the peak depth among depths >= min_valid_depth
  4. Genome size ~= sum of surviving k-mer counts // peak depth

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, MutableMapping, Mapping

from ..errors import InsufficientDataError

logger = logging.getLogger(__name__)


DEFAULT_ERROR_COUNT_THRESHOLD = 5
DEFAULT_MIN_VALID_DEPTH = 10


@dataclass
class GenomeSizeEstimate:
    """Result of a genome size estimation."""
    genome_size: int
    peak_depth: int
    total_kmers: int
    distinct_kmers: int


def filter_error_kmers(kmer_counts: MutableMapping[int, int],
                       error_count_threshold: int = DEFAULT_ERROR_COUNT_THRESHOLD) -> int:
    """
    Remove k-mers whose count is <= error_count_threshold, in place.

    Returns:
        Number of k-mers removed
    """
    errors = [kmer for kmer, count in kmer_counts.items() if count <= error_count_threshold]
    for kmer in errors:
        del kmer_counts[kmer]
    return len(errors)


def build_depth_histogram(kmer_counts: Mapping[int, int]) -> Dict[int, int]:
    """
    Map depth -> number of distinct k-mers at that depth (depth > 1 only).
    """
    depth_hist: Dict[int, int] = defaultdict(int)
    for count in kmer_counts.values():
        if count > 1:
            depth_hist[count] += 1
    return dict(depth_hist)


def find_peak_depth(depth_hist: Mapping[int, int],
                    min_valid_depth: int = DEFAULT_MIN_VALID_DEPTH) -> int:
    """
    Most frequent depth among depths >= min_valid_depth.

    Ties go to the smallest depth.

    Raises:
        InsufficientDataError: If no depth reaches min_valid_depth
    """
    candidates = [depth for depth in depth_hist if depth >= min_valid_depth]
    if not candidates:
        raise InsufficientDataError(
            f"No k-mer depth >= {min_valid_depth} found "
            f"({len(depth_hist)} depths observed); too few reads sampled"
        )

    return min(candidates, key=lambda depth: (-depth_hist[depth], depth))


def estimate_genome_size(kmer_counts: MutableMapping[int, int],
                         min_valid_depth: int = DEFAULT_MIN_VALID_DEPTH,
                         error_count_threshold: int = DEFAULT_ERROR_COUNT_THRESHOLD
                         ) -> GenomeSizeEstimate:
    """
    Estimate genome size from canonical k-mer counts.

    The table is filtered in place: low-count k-mers are removed before the
    histogram is built and stay removed afterwards.

    Args:
        kmer_counts: Canonical k-mer -> count (mutated)
        min_valid_depth: Smallest depth accepted as the coverage peak
        error_count_threshold: Counts at or below this are treated as errors

    Returns:
        GenomeSizeEstimate

    Raises:
        InsufficientDataError: If no depth reaches min_valid_depth
    """
    removed = filter_error_kmers(kmer_counts, error_count_threshold)
    logger.debug(f"Removed {removed:,} k-mers with count <= {error_count_threshold}")

    depth_hist = build_depth_histogram(kmer_counts)
    peak_depth = find_peak_depth(depth_hist, min_valid_depth)

    total_kmers = sum(kmer_counts.values())
    genome_size = total_kmers // peak_depth

    logger.info(
        f"Estimated genome size: {genome_size:,} bp "
        f"(peak depth {peak_depth}x, {len(kmer_counts):,} solid k-mers)"
    )

    return GenomeSizeEstimate(
        genome_size=genome_size,
        peak_depth=peak_depth,
        total_kmers=total_kmers,
        distinct_kmers=len(kmer_counts),
    )
