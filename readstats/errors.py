#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadStats v0.1.0

Exception hierarchy shared by the engine, the readers and the CLI.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""


class ReadStatsError(Exception):
    """Base class for all ReadStats errors."""
    pass


class MalformedRecordError(ReadStatsError):
    """Raised when the next record in the input cannot be parsed."""
    pass


class SourceIOError(ReadStatsError):
    """Raised when the underlying input stream fails (read error, truncation)."""
    pass


class InsufficientDataError(ReadStatsError):
    """Raised when no k-mer depth reaches the minimum valid depth."""
    pass


class EngineFinalizedError(ReadStatsError):
    """Raised when reads are added to an engine that was already finalized."""
    pass


class ConfigValidationError(ReadStatsError):
    """Raised when configuration validation fails."""
    pass


__all__ = [
    'ReadStatsError',
    'MalformedRecordError',
    'SourceIOError',
    'InsufficientDataError',
    'EngineFinalizedError',
    'ConfigValidationError',
]
