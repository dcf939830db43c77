"""
ReadStats v0.1.0

Configuration schema for ReadStats.

Defines all available configuration parameters with defaults and validation.

Author: ReadStats Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from dataclasses import dataclass
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml

from ..errors import ConfigValidationError


# Largest k whose 2-bit encoding still fits a 64-bit word
MAX_KMER_LENGTH = 31

VALID_INPUT_FORMATS = ['auto', 'fastq', 'fasta']
VALID_REPORT_FORMATS = ['yaml', 'json']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Statistics Engine
    # ========================================================================
    'stats': {
        'genome_size': False,  # K-mer based genome size estimation (slower)
        'kmer_length': 21,  # 42 bits per k-mer
        'min_valid_depth': 10,  # Ignore depth peaks below this (ONT noise, heterozygosity)
        'sampling_interval': 5,  # Hash every Nth read
        'error_count_threshold': 5,  # K-mers seen this often or less are treated as errors
        'kmer_table_capacity': 10_000_000,  # Sizing hint only, table grows as needed
    },

    # ========================================================================
    # Input
    # ========================================================================
    'input': {
        'format': 'auto',  # 'auto', 'fastq', 'fasta'
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'report_file': 'read_stats.yaml',
        'format': 'yaml',  # 'yaml', 'json'

        # Logging
        'logging': {
            'level': 'INFO',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
            'log_file': None,
        },
    },
}


@dataclass
class StatsConfig:
    """
    Heuristic parameters of the statistics engine.

    Attributes:
        kmer_length: K-mer size K (2*K bits per encoded k-mer)
        min_valid_depth: Smallest depth allowed as the k-mer coverage peak
        sampling_interval: Every Nth read (1-based) is fed to the k-mer counter
        error_count_threshold: K-mers with count <= this are dropped before estimation
        kmer_table_capacity: Expected number of distinct k-mers (hint, not a limit)
    """
    kmer_length: int = 21
    min_valid_depth: int = 10
    sampling_interval: int = 5
    error_count_threshold: int = 5
    kmer_table_capacity: int = 10_000_000

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Check parameter ranges.

        Raises:
            ConfigValidationError: If any parameter is out of range
        """
        errors = _validate_stats_section(self.__dict__)
        if errors:
            raise ConfigValidationError("; ".join(errors))

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'StatsConfig':
        """
        Build engine parameters from a full configuration dictionary.

        Args:
            config: Configuration as returned by load_config()

        Returns:
            StatsConfig populated from the 'stats' section
        """
        section = config.get('stats', {})
        defaults = DEFAULT_CONFIG['stats']
        return cls(
            kmer_length=section.get('kmer_length', defaults['kmer_length']),
            min_valid_depth=section.get('min_valid_depth', defaults['min_valid_depth']),
            sampling_interval=section.get('sampling_interval', defaults['sampling_interval']),
            error_count_threshold=section.get('error_count_threshold', defaults['error_count_threshold']),
            kmer_table_capacity=section.get('kmer_table_capacity', defaults['kmer_table_capacity']),
        )


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigValidationError: If the file is not valid YAML
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path) as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {config_path}: {e}"
            )

        if user_config:
            if not isinstance(user_config, dict):
                raise ConfigValidationError(
                    f"Config file {config_path} must contain a mapping at top level"
                )
            # Deep merge user config into defaults
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def merge_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line overrides into configuration.

    Args:
        config: Configuration dictionary (modified in place)
        overrides: Override values keyed by dotted path (e.g. 'stats.kmer_length').
                   None values are skipped so unset CLI options keep config values.

    Returns:
        The updated configuration
    """
    for key, value in overrides.items():
        if value is None:
            continue

        keys = key.split('.')
        target = config
        for k in keys[:-1]:
            target = target.setdefault(k, {})
            if not isinstance(target, dict):
                # Left for validate_config to report
                break
        else:
            target[keys[-1]] = value

    return config


def save_config_template(output_path: Path):
    """
    Save the default configuration as a YAML template.

    Args:
        output_path: Output file path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        yaml.dump(copy.deepcopy(DEFAULT_CONFIG), f, default_flow_style=False, sort_keys=False)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_stats_section(stats: Dict[str, Any]) -> List[str]:
    errors = []

    k = stats.get('kmer_length')
    if not _is_int(k) or not 1 <= k <= MAX_KMER_LENGTH:
        errors.append(f"Invalid kmer_length: {k!r} (must be an integer in 1..{MAX_KMER_LENGTH})")

    interval = stats.get('sampling_interval')
    if not _is_int(interval) or interval < 1:
        errors.append(f"Invalid sampling_interval: {interval!r} (must be >= 1)")

    min_depth = stats.get('min_valid_depth')
    if not _is_int(min_depth) or min_depth < 1:
        errors.append(f"Invalid min_valid_depth: {min_depth!r} (must be >= 1)")

    threshold = stats.get('error_count_threshold')
    if not _is_int(threshold) or threshold < 0:
        errors.append(f"Invalid error_count_threshold: {threshold!r} (must be >= 0)")

    capacity = stats.get('kmer_table_capacity')
    if not _is_int(capacity) or capacity < 0:
        errors.append(f"Invalid kmer_table_capacity: {capacity!r} (must be >= 0)")

    return errors


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    stats = config.get('stats', {})
    if not isinstance(stats, dict):
        errors.append("Section 'stats' must be a mapping")
    else:
        errors.extend(_validate_stats_section({**DEFAULT_CONFIG['stats'], **stats}))
        if not isinstance(stats.get('genome_size', False), bool):
            errors.append(f"Invalid genome_size: {stats.get('genome_size')!r} (must be true/false)")

    input_section = config.get('input', {})
    if not isinstance(input_section, dict):
        errors.append("Section 'input' must be a mapping")
    else:
        input_format = input_section.get('format', 'auto')
        if input_format not in VALID_INPUT_FORMATS:
            errors.append(f"Invalid input format: {input_format}")

    output = config.get('output', {})
    if not isinstance(output, dict):
        errors.append("Section 'output' must be a mapping")
        return errors

    if output.get('format', 'yaml') not in VALID_REPORT_FORMATS:
        errors.append(f"Invalid report format: {output.get('format')}")

    logging_section = output.get('logging', {})
    if not isinstance(logging_section, dict):
        errors.append("Section 'output.logging' must be a mapping")
    else:
        level = logging_section.get('level', 'INFO')
        if str(level).upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid logging level: {level}")

    return errors
