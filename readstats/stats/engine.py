#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Streaming read statistics engine.

Owns the length accumulator, the sampling policy and the canonical k-mer
counter. Reads are pulled one at a time from a record source; once the
source is exhausted the engine is finalized (N50 and, if requested, genome
size) and becomes read-only.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from ..config.schema import StatsConfig
from ..errors import EngineFinalizedError, InsufficientDataError
from .genome_size_module import estimate_genome_size
from .kmer_module import CanonicalKmerCounter
from .length_module import LengthAccumulator, calculate_n50
from .sampling import SamplingPolicy

logger = logging.getLogger(__name__)


class ReadStats:
    """
    Accumulated statistics over a stream of sequencing reads.

    Example:
        stats = ReadStats(genome_size=True)
        for seq in read_sequences('reads.fastq.gz'):
            stats.add_read(seq)
        stats.finalize()
        print(stats.n50, stats.genome_size)
    """

    def __init__(self, genome_size: bool = False, config: Optional[StatsConfig] = None):
        """
        Initialize an empty engine.

        Args:
            genome_size: Count k-mers and estimate genome size
            config: Heuristic parameters (defaults: K=21, depth>=10, every 5th read, errors<=5)
        """
        self.config = config or StatsConfig()
        self.genome_size_enabled = genome_size

        self.lengths = LengthAccumulator()
        self.sampling = SamplingPolicy(self.config.sampling_interval)
        self.kmers = CanonicalKmerCounter(
            k=self.config.kmer_length,
            capacity_hint=self.config.kmer_table_capacity,
        )

        self.peak_depth: Optional[int] = None
        self._n50: Optional[int] = None
        self._genome_size: Optional[int] = None
        self._finalized = False

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def add_read(self, sequence: Union[str, bytes]):
        """
        Ingest one read.

        Raises:
            EngineFinalizedError: If finalize() has already run
        """
        if self._finalized:
            raise EngineFinalizedError("Cannot add reads after statistics were finalized")

        self.lengths.ingest(sequence)

        if self.genome_size_enabled and self.sampling.should_sample(self.lengths.total_reads):
            self.kmers.count_sequence(sequence)

    def ingest(self, sequences: Iterable[Union[str, bytes]]) -> int:
        """
        Ingest every read from a record source.

        Returns:
            Number of reads ingested from this source
        """
        count = 0
        for sequence in sequences:
            self.add_read(sequence)
            count += 1
            if count % 1_000_000 == 0:
                logger.debug(f"Ingested {count:,} reads")
        return count

    # ------------------------------------------------------------------
    # Derived metrics
    # ------------------------------------------------------------------

    def calculate_n50(self) -> int:
        """Return N50, finalizing the engine first if it is still open."""
        if not self._finalized:
            self.finalize()
        return self._n50

    def calculate_genome_size(self) -> Optional[int]:
        """
        Return the genome size estimate, finalizing the engine first if it is
        still open.

        Returns:
            Estimated genome size, or None if estimation is disabled or
            there was not enough k-mer depth to find a peak
        """
        if not self._finalized:
            self.finalize()
        return self._genome_size

    def _estimate_genome_size(self) -> Optional[int]:
        logger.info(
            f"Estimating genome size from {self.kmers.sequences_hashed:,} sampled reads "
            f"(every {self.sampling.interval} reads; sampled estimate is approximate)"
        )
        try:
            estimate = estimate_genome_size(
                self.kmers.counts,
                min_valid_depth=self.config.min_valid_depth,
                error_count_threshold=self.config.error_count_threshold,
            )
        except InsufficientDataError as e:
            logger.warning(f"Genome size not estimated: {e}")
            return None

        self.peak_depth = estimate.peak_depth
        return estimate.genome_size

    def finalize(self) -> 'ReadStats':
        """
        Compute all derived metrics once and freeze the engine.

        Later calls, and later reads of the derived metrics, return the
        values computed here.
        """
        if self._finalized:
            return self
        self._finalized = True

        self._n50 = calculate_n50(self.lengths.length_counts, self.lengths.total_bases)
        if self.genome_size_enabled:
            self._genome_size = self._estimate_genome_size()

        logger.info(
            f"Processed {self.total_reads:,} reads, {self.total_bases:,} bases "
            f"(N50 {self._n50:,})"
        )
        return self

    # ------------------------------------------------------------------
    # Exposed fields
    # ------------------------------------------------------------------

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def total_reads(self) -> int:
        return self.lengths.total_reads

    @property
    def total_bases(self) -> int:
        return self.lengths.total_bases

    @property
    def n50(self) -> Optional[int]:
        """N50, or None before it is computed or when no reads were seen."""
        if self.lengths.unique_lengths == 0:
            return None
        return self._n50

    @property
    def genome_size(self) -> Optional[int]:
        return self._genome_size

    @property
    def unique_kmer_count(self) -> int:
        return self.kmers.unique_count()

    @property
    def unique_length_count(self) -> int:
        return self.lengths.unique_lengths

    def to_dict(self) -> Dict[str, Any]:
        """Exposed fields as a dictionary."""
        return {
            'total_reads': self.total_reads,
            'total_bases': self.total_bases,
            'n50': self.n50,
            'genome_size': self.genome_size,
            'unique_kmer_count': self.unique_kmer_count,
            'unique_length_count': self.unique_length_count,
        }

    def __repr__(self) -> str:
        return (f"ReadStats(reads={self.total_reads}, bases={self.total_bases}, "
                f"n50={self.n50}, genome_size={self.genome_size})")


def compute_read_stats(reads_file: Union[str, Path],
                       genome_size: bool = False,
                       config: Optional[StatsConfig] = None,
                       input_format: str = 'auto') -> ReadStats:
    """
    Convenience function to compute statistics for a reads file.

    Args:
        reads_file: Path to FASTQ/FASTA file (optionally gzipped)
        genome_size: Estimate genome size from k-mers
        config: Engine parameters
        input_format: 'auto', 'fastq' or 'fasta'

    Returns:
        Finalized ReadStats

    Raises:
        MalformedRecordError: If a record cannot be parsed
        SourceIOError: If the file cannot be read

    Example:
        stats = compute_read_stats('reads.fastq.gz', genome_size=True)
        print(f"N50: {stats.n50:,}")
    """
    from ..io import read_sequences

    stats = ReadStats(genome_size=genome_size, config=config)
    stats.ingest(read_sequences(reads_file, fmt=input_format))
    return stats.finalize()
