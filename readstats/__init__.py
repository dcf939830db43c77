#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Package initialization and version metadata.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__
from .errors import (
    ReadStatsError,
    MalformedRecordError,
    SourceIOError,
    InsufficientDataError,
    EngineFinalizedError,
    ConfigValidationError,
)
from .config.schema import StatsConfig
from .stats.engine import ReadStats, compute_read_stats

__all__ = [
    "__version__",
    "ReadStats",
    "StatsConfig",
    "compute_read_stats",
    "ReadStatsError",
    "MalformedRecordError",
    "SourceIOError",
    "InsufficientDataError",
    "EngineFinalizedError",
    "ConfigValidationError",
]

# ReadStats v0.1.0
# Any usage is subject to this software's license.
