"""
ReadStats v0.1.0

Configuration management for ReadStats.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .schema import (
    DEFAULT_CONFIG,
    StatsConfig,
    load_config,
    merge_overrides,
    save_config_template,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "StatsConfig",
    "load_config",
    "merge_overrides",
    "save_config_template",
    "validate_config",
]
