"""
Read I/O module for ReadStats.

Handles reading sequencing reads and writing statistics reports.

MODULES:
- io_core_module.py: gzip detection, format sniffing, sequence record source
- report_module.py: YAML/JSON report builder
"""

from .io_core_module import (
    is_gzipped,
    open_file,
    detect_format,
    read_sequences,
    count_reads,
)

from .report_module import (
    build_report,
    format_report,
    write_report,
)

__all__ = [
    # Record source
    "is_gzipped",
    "open_file",
    "detect_format",
    "read_sequences",
    "count_reads",

    # Reports
    "build_report",
    "format_report",
    "write_report",
]
