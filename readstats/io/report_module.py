#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Report builder: renders finalized statistics to YAML or JSON.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

REPORT_SECTION = 'FastqStats'
REPORT_FORMATS = ('yaml', 'json')


def build_report(stats) -> Dict[str, Dict[str, Any]]:
    """
    Build the report mapping from a finalized ReadStats engine.

    Args:
        stats: Finalized ReadStats

    Returns:
        {'FastqStats': {total_reads, total_bases, n50, genome_size,
                        unique_kmers, unique_read_lengths}}

    Raises:
        ValueError: If the engine has not been finalized
    """
    if not stats.finalized:
        raise ValueError("Statistics must be finalized before building a report")

    return {
        REPORT_SECTION: {
            'total_reads': stats.total_reads,
            'total_bases': stats.total_bases,
            'n50': stats.n50,
            'genome_size': stats.genome_size,
            'unique_kmers': stats.unique_kmer_count,
            'unique_read_lengths': stats.unique_length_count,
        }
    }


def format_report(report: Dict[str, Any], fmt: str = 'yaml') -> str:
    """Serialize a report mapping to text."""
    if fmt == 'yaml':
        return yaml.safe_dump(report, default_flow_style=False, sort_keys=False)
    if fmt == 'json':
        return json.dumps(report, indent=2) + "\n"
    raise ValueError(f"Unsupported report format: {fmt} (choose from {', '.join(REPORT_FORMATS)})")


def write_report(report: Dict[str, Any], output_path: Union[str, Path], fmt: str = 'yaml') -> Path:
    """
    Write a report to disk.

    Args:
        report: Mapping from build_report()
        output_path: Destination file
        fmt: 'yaml' or 'json'

    Returns:
        Path written
    """
    text = format_report(report, fmt)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        f.write(text)

    logger.info(f"Report written to {output_path}")
    return output_path
