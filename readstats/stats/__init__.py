"""
Statistics engine for ReadStats.

Streaming read statistics:
- length_module.py: Read/base totals, length histogram, N50
- kmer_module.py: Rolling 2-bit canonical k-mer counter
- sampling.py: Every-Nth-read sampling for k-mer counting
- genome_size_module.py: K-mer depth histogram genome size estimate
- engine.py: ReadStats engine tying the pieces together
"""

from .engine import ReadStats, compute_read_stats
from .genome_size_module import (
    GenomeSizeEstimate,
    build_depth_histogram,
    estimate_genome_size,
    filter_error_kmers,
    find_peak_depth,
)
from .kmer_module import CanonicalKmerCounter, RollingWindow, encode_base
from .length_module import LengthAccumulator, calculate_n50
from .sampling import SamplingPolicy

__all__ = [
    "ReadStats",
    "compute_read_stats",
    "LengthAccumulator",
    "calculate_n50",
    "CanonicalKmerCounter",
    "RollingWindow",
    "encode_base",
    "SamplingPolicy",
    "GenomeSizeEstimate",
    "build_depth_histogram",
    "estimate_genome_size",
    "filter_error_kmers",
    "find_peak_depth",
]
