#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Tests for the sequence record source and report builder.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip
import json
import random

import pytest
import yaml

from readstats.errors import MalformedRecordError, SourceIOError
from readstats.io import (
    build_report,
    count_reads,
    detect_format,
    format_report,
    is_gzipped,
    read_sequences,
    write_report,
)
from readstats.stats import ReadStats


class TestGzipDetection:
    """Test compressed input detection."""

    def test_plain_file(self, temp_output_dir, simple_fastq):
        """Test plain text is not gzipped."""
        path = temp_output_dir / "reads.fastq"
        path.write_text(simple_fastq)

        assert not is_gzipped(path)

    def test_magic_bytes_without_suffix(self, temp_output_dir, simple_fastq):
        """Test gzip content is detected regardless of file name."""
        path = temp_output_dir / "reads.fastq"
        path.write_bytes(gzip.compress(simple_fastq.encode()))

        assert is_gzipped(path)
        assert list(read_sequences(path)) == [
            "ATCGATCGATCG", "GCTAGCTAGCTAGCTAGCTA", "NNNNACGT"
        ]

    def test_gz_suffix(self, temp_output_dir, simple_fastq):
        """Test .gz files are read transparently."""
        path = temp_output_dir / "reads.fq.gz"
        with gzip.open(path, "wt") as f:
            f.write(simple_fastq)

        assert is_gzipped(path)
        assert count_reads(path) == 3


class TestFormatDetection:
    """Test FASTQ/FASTA sniffing."""

    def test_fastq(self, temp_output_dir, simple_fastq):
        path = temp_output_dir / "reads.txt"
        path.write_text(simple_fastq)

        assert detect_format(path) == "fastq"

    def test_fasta(self, temp_output_dir, simple_fasta):
        path = temp_output_dir / "reads.txt"
        path.write_text("\n" + simple_fasta)

        assert detect_format(path) == "fasta"

    def test_empty_file(self, temp_output_dir):
        path = temp_output_dir / "empty.fq"
        path.write_text("")

        assert detect_format(path) is None
        assert list(read_sequences(path)) == []

    def test_unknown_format(self, temp_output_dir):
        """Test a file that is neither FASTQ nor FASTA."""
        path = temp_output_dir / "table.tsv"
        path.write_text("id\tsequence\nr1\tACGT\n")

        with pytest.raises(MalformedRecordError):
            detect_format(path)


class TestReadSequences:
    """Test lazy sequence iteration."""

    def test_fastq_sequences_in_order(self, temp_output_dir, simple_fastq):
        path = temp_output_dir / "reads.fastq"
        path.write_text(simple_fastq)

        assert list(read_sequences(path)) == [
            "ATCGATCGATCG", "GCTAGCTAGCTAGCTAGCTA", "NNNNACGT"
        ]

    def test_multiline_fasta(self, temp_output_dir, simple_fasta):
        """Test wrapped FASTA records are joined."""
        path = temp_output_dir / "contigs.fa"
        path.write_text(simple_fasta)

        assert list(read_sequences(path)) == ["ATCGATCGATCGATCG", "GGCCAA"]

    def test_explicit_format(self, temp_output_dir, simple_fasta):
        path = temp_output_dir / "contigs.fa"
        path.write_text(simple_fasta)

        assert count_reads(path, fmt="fasta") == 2

    def test_unsupported_format(self, temp_output_dir, simple_fasta):
        path = temp_output_dir / "contigs.fa"
        path.write_text(simple_fasta)

        with pytest.raises(ValueError):
            list(read_sequences(path, fmt="sam"))

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(SourceIOError):
            list(read_sequences(temp_output_dir / "missing.fq"))

    def test_is_lazy(self, temp_output_dir, simple_fastq):
        """Test records are yielded one at a time."""
        path = temp_output_dir / "reads.fastq"
        path.write_text(simple_fastq)

        records = read_sequences(path)

        assert next(records) == "ATCGATCGATCG"
        records.close()


class TestSourceErrors:
    """Test fail-fast parsing."""

    def test_quality_length_mismatch(self, temp_output_dir):
        """Test a record whose quality is shorter than its sequence."""
        path = temp_output_dir / "bad.fastq"
        path.write_text("@r1\nACGT\n+\nII\n")

        with pytest.raises(MalformedRecordError):
            list(read_sequences(path))

    def test_missing_header_in_later_record(self, temp_output_dir):
        """Test the whole run fails on the second record."""
        path = temp_output_dir / "bad.fastq"
        path.write_text("@r1\nACGT\n+\nIIII\nr2\nACGT\n+\nIIII\n")

        with pytest.raises(MalformedRecordError):
            list(read_sequences(path))

    def test_truncated_gzip(self, temp_output_dir):
        """Test a gzip stream cut short raises SourceIOError."""
        rng = random.Random(5)
        records = []
        for i in range(5000):
            seq = "".join(rng.choice("ACGT") for _ in range(100))
            records.append(f"@r{i}\n{seq}\n+\n{'I' * 100}\n")
        data = gzip.compress("".join(records).encode())

        path = temp_output_dir / "truncated.fq.gz"
        path.write_bytes(data[:len(data) // 2])

        with pytest.raises(SourceIOError):
            list(read_sequences(path))


class TestReportBuilder:
    """Test report rendering."""

    def _stats(self):
        stats = ReadStats()
        stats.ingest(["A" * 10, "A" * 20, "A" * 30])
        return stats.finalize()

    def test_report_fields(self):
        """Test fixed field names and order."""
        report = build_report(self._stats())

        assert list(report) == ["FastqStats"]
        assert list(report["FastqStats"]) == [
            "total_reads", "total_bases", "n50", "genome_size",
            "unique_kmers", "unique_read_lengths",
        ]
        assert report["FastqStats"]["n50"] == 30
        assert report["FastqStats"]["genome_size"] is None

    def test_unfinalized_rejected(self):
        """Test reports need finalized statistics."""
        with pytest.raises(ValueError):
            build_report(ReadStats())

    def test_yaml_nulls(self):
        """Test absent fields serialize as null."""
        text = format_report(build_report(ReadStats().finalize()), "yaml")

        assert text.startswith("FastqStats:\n  total_reads: 0\n")
        assert "  n50: null\n" in text
        assert "  genome_size: null\n" in text

    def test_write_yaml(self, temp_output_dir):
        report = build_report(self._stats())
        path = write_report(report, temp_output_dir / "out" / "read_stats.yaml")

        with open(path) as f:
            assert yaml.safe_load(f) == report

    def test_write_json(self, temp_output_dir):
        report = build_report(self._stats())
        path = write_report(report, temp_output_dir / "read_stats.json", fmt="json")

        with open(path) as f:
            assert json.load(f) == report

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            format_report({"FastqStats": {}}, "xml")
