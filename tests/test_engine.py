#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Tests for the ReadStats engine: sampling, lifecycle and exposed fields.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from readstats import compute_read_stats
from readstats.config.schema import StatsConfig
from readstats.errors import EngineFinalizedError
from readstats.stats import ReadStats, SamplingPolicy


class TestSamplingPolicy:
    """Test every-Nth-read sampling."""

    def test_every_fifth_read(self):
        """Test ordinals 5, 10, 15 are sampled."""
        policy = SamplingPolicy(5)
        sampled = [i for i in range(1, 21) if policy.should_sample(i)]

        assert sampled == [5, 10, 15, 20]

    def test_expected_samples(self):
        """Test floor(N / interval) reads are sampled."""
        assert SamplingPolicy(5).expected_samples(23) == 4
        assert SamplingPolicy(5).expected_samples(4) == 0

    def test_interval_one_samples_everything(self):
        """Test interval 1 samples every read."""
        policy = SamplingPolicy(1)

        assert all(policy.should_sample(i) for i in range(1, 10))

    def test_invalid_interval(self):
        """Test interval must be positive."""
        with pytest.raises(ValueError):
            SamplingPolicy(0)


class TestEngineSampling:
    """Test which reads reach the k-mer counter."""

    def test_sampling_determinism(self, monkeypatch):
        """Test exactly reads 5, 10, 15, 20 of 23 are hashed."""
        stats = ReadStats(genome_size=True, config=StatsConfig(kmer_length=3))
        hashed = []
        monkeypatch.setattr(stats.kmers, "count_sequence", lambda seq: hashed.append(len(seq)))

        # Read i has length i so the hashed lengths identify the ordinals
        stats.ingest("A" * i for i in range(1, 24))

        assert hashed == [5, 10, 15, 20]
        assert len(hashed) == 23 // 5

    def test_sampled_reads_fill_table(self):
        """Test k-mers come only from sampled reads."""
        stats = ReadStats(genome_size=True, config=StatsConfig(kmer_length=3))
        reads = ["AAAA"] * 4 + ["CCCC"]

        stats.ingest(reads)

        assert stats.kmers.sequences_hashed == 1
        # CCC and GGG share a bucket; AAA never sampled
        assert list(stats.kmers.counts.values()) == [2]


class TestEngineLifecycle:
    """Test ingestion, finalization and exposed fields."""

    def test_ingest_returns_count(self):
        """Test ingest reports reads consumed."""
        stats = ReadStats()

        assert stats.ingest(["ACGT", "AC", ""]) == 3
        assert stats.total_reads == 3
        assert stats.total_bases == 6

    def test_add_after_finalize_raises(self):
        """Test engine is read-only after finalization."""
        stats = ReadStats()
        stats.add_read("ACGT")
        stats.finalize()

        with pytest.raises(EngineFinalizedError):
            stats.add_read("ACGT")

    def test_n50_query_closes_engine(self):
        """Test asking for N50 finalizes, so later reads cannot make it stale."""
        stats = ReadStats()
        stats.add_read("A" * 10)

        assert stats.calculate_n50() == 10
        assert stats.finalized
        with pytest.raises(EngineFinalizedError):
            stats.add_read("A" * 1000)

        assert stats.n50 == 10
        assert stats.total_reads == 1

    def test_genome_size_query_closes_engine(self, small_config, genome_reads):
        """Test asking for genome size finalizes before the table is filtered."""
        stats = ReadStats(genome_size=True, config=small_config)
        stats.ingest(genome_reads)

        assert stats.calculate_genome_size() == 2
        with pytest.raises(EngineFinalizedError):
            stats.add_read("GAT")

        assert stats.unique_kmer_count == 3
        assert stats.calculate_n50() == 3

    def test_finalize_twice(self):
        """Test finalize is safe to call again."""
        stats = ReadStats()
        stats.add_read("ACGTACGT")

        assert stats.finalize() is stats.finalize()
        assert stats.finalized

    def test_to_dict_fields(self):
        """Test the exposed report fields."""
        stats = ReadStats()
        stats.ingest(["A" * 10, "A" * 20, "A" * 30])
        stats.finalize()

        assert stats.to_dict() == {
            'total_reads': 3,
            'total_bases': 60,
            'n50': 30,
            'genome_size': None,
            'unique_kmer_count': 0,
            'unique_length_count': 3,
        }

    def test_default_config(self):
        """Test defaults K=21, interval 5."""
        stats = ReadStats()

        assert stats.kmers.k == 21
        assert stats.sampling.interval == 5
        assert stats.kmers.capacity_hint == 10_000_000


class TestComputeReadStats:
    """Test the file-level convenience function."""

    def test_compute_from_fastq(self, temp_output_dir, simple_fastq):
        """Test statistics from a FASTQ file."""
        fastq_file = temp_output_dir / "reads.fastq"
        fastq_file.write_text(simple_fastq)

        stats = compute_read_stats(fastq_file)

        assert stats.finalized
        assert stats.total_reads == 3
        assert stats.total_bases == 12 + 20 + 8
        # half = 20, longest read alone reaches it
        assert stats.n50 == 20

    def test_compute_with_genome_size(self, write_fastq, small_config, genome_reads):
        """Test genome size from a FASTQ file."""
        fastq_file = write_fastq(genome_reads, name="genome.fq")

        stats = compute_read_stats(fastq_file, genome_size=True, config=small_config)

        assert stats.genome_size == 2
        assert stats.total_reads == len(genome_reads)
