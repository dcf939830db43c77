#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Pytest configuration and shared fixtures.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from readstats.config.schema import StatsConfig


def make_fastq(sequences):
    """Render sequences as FASTQ text with constant quality."""
    lines = []
    for i, seq in enumerate(sequences, start=1):
        lines.append(f"@read{i}\n{seq}\n+\n{'I' * len(seq)}\n")
    return "".join(lines)


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="readstats_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def simple_fasta():
    """Generate simple multi-line FASTA records for testing."""
    return ">contig1\nATCGATCGAT\nCGATCG\n>contig2\nGGCCAA\n"


@pytest.fixture
def simple_fastq():
    """Generate simple FASTQ reads for testing."""
    return """@read1
ATCGATCGATCG
+
IIIIIIIIIIII
@read2
GCTAGCTAGCTAGCTAGCTA
+
IIIIIIIIIIIIIIIIIIII
@read3
NNNNACGT
+
IIIIIIII
"""


@pytest.fixture
def small_config():
    """Engine parameters scaled down for hand-checkable k-mer tests."""
    return StatsConfig(
        kmer_length=3,
        min_valid_depth=10,
        sampling_interval=1,
        error_count_threshold=5,
        kmer_table_capacity=0,
    )


@pytest.fixture
def genome_reads():
    """
    Reads giving canonical 3-mer depths ACG=20, CCA=20, AAA=12, GAT=2.

    With error threshold 5 and min depth 10 the peak depth is 20 and the
    surviving k-mer mass is 52, so the genome size estimate is 52 // 20 = 2.
    """
    return ["ACG"] * 20 + ["CCA"] * 20 + ["AAA"] * 12 + ["GAT"] * 2


@pytest.fixture
def write_fastq(temp_output_dir):
    """Write a list of sequences to a FASTQ file in the temp directory."""
    def _write(sequences, name="reads.fastq"):
        path = temp_output_dir / name
        path.write_text(make_fastq(sequences))
        return path
    return _write
