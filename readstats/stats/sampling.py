"""
ReadStats v0.1.0

Sampling policy deciding which reads feed the k-mer counter.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SamplingPolicy:
    """
    Select every Nth read by its 1-based ordinal.

    With interval=5 the reads at positions 5, 10, 15, ... are sampled, so
    floor(N / 5) of N reads reach the k-mer counter. Depth and total k-mer
    mass are both measured on the same sampled population, so no rescaling
    is applied to the genome size estimate.
    """
    interval: int = 5

    def __post_init__(self):
        if self.interval < 1:
            raise ValueError("Sampling interval must be >= 1")

    def should_sample(self, ordinal: int) -> bool:
        """Return True if the read at this 1-based position is sampled."""
        return ordinal > 0 and ordinal % self.interval == 0

    def expected_samples(self, total_reads: int) -> int:
        """Number of reads sampled out of total_reads."""
        return total_reads // self.interval
