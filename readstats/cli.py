#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ReadStats.

This module provides the main CLI entry point and all subcommands for
computing read statistics (totals, N50, genome size estimate).
"""

import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.schema import (
    DEFAULT_CONFIG,
    StatsConfig,
    load_config,
    merge_overrides,
    save_config_template,
    validate_config,
)
from .errors import ConfigValidationError, ReadStatsError
from .utils.logging_utils import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    ReadStats: streaming read statistics for FASTQ/FASTA files

    Reports total reads and bases, read length N50 and an optional k-mer
    based genome size estimate.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='readstats_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except ConfigValidationError as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))
    except ConfigValidationError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    errors = validate_config(config)
    if errors:
        click.echo("✗ Invalid configuration:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    stats = config['stats']
    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo(f"  Genome size estimation: {'ENABLED' if stats['genome_size'] else 'DISABLED'}")
    click.echo(f"  K-mer length: {stats['kmer_length']}")
    click.echo(f"  Sampling: every {stats['sampling_interval']} reads")
    click.echo(f"  Error count threshold: {stats['error_count_threshold']}")
    click.echo(f"  Minimum peak depth: {stats['min_valid_depth']}")
    click.echo(f"  Report: {config['output']['report_file']} ({config['output']['format']})")


# ============================================================================
# Statistics Command
# ============================================================================

@main.command()
@click.argument('input', type=click.Path(exists=True, dir_okay=False))
@click.option('--genome-size', '-g', is_flag=True, default=False,
              help='Estimate genome size from k-mer depth (slower)')
@click.option('--output', '-o', type=click.Path(dir_okay=False),
              help='Report file (default: read_stats.yaml, or read_stats.json with -f json)')
@click.option('--format', '-f', 'report_format', type=click.Choice(['yaml', 'json']),
              help='Report format (default: yaml)')
@click.option('--config', '-c', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--input-format', type=click.Choice(['auto', 'fastq', 'fasta']),
              help='Input format (default: auto-detect)')
@click.option('--kmer-size', '-k', type=int,
              help='K-mer size for genome size estimation (default: 21)')
@click.option('--min-valid-depth', type=int,
              help='Minimum k-mer depth accepted as coverage peak (default: 10)')
@click.option('--sampling-interval', type=int,
              help='Hash k-mers from every Nth read (default: 5)')
@click.option('--error-threshold', type=int,
              help='Drop k-mers seen this many times or fewer (default: 5)')
@click.option('--log-file', type=click.Path(dir_okay=False),
              help='Also write log messages to this file')
@click.pass_context
def run(ctx, input, genome_size, output, report_format, config, input_format,
        kmer_size, min_valid_depth, sampling_interval, error_threshold, log_file):
    """
    Compute read statistics for a FASTQ/FASTA file.

    Examples:
        # Read counts and N50
        readstats run reads.fastq.gz

        # Include genome size estimate, JSON report
        readstats run reads.fq -g -o stats.json -f json
    """
    from .io import build_report, read_sequences, write_report
    from .stats import ReadStats

    try:
        cfg = load_config(Path(config) if config else None)
    except ConfigValidationError as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)

    merge_overrides(cfg, {
        'stats.genome_size': True if genome_size else None,
        'stats.kmer_length': kmer_size,
        'stats.min_valid_depth': min_valid_depth,
        'stats.sampling_interval': sampling_interval,
        'stats.error_count_threshold': error_threshold,
        'input.format': input_format,
        'output.report_file': output,
        'output.format': report_format,
        'output.logging.log_file': log_file,
    })

    errors = validate_config(cfg)
    if errors:
        click.echo("✗ Invalid configuration:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    log_level = cfg['output']['logging']['level']
    if ctx.obj.get('VERBOSE'):
        log_level = 'DEBUG'
    elif ctx.obj.get('QUIET'):
        log_level = 'ERROR'
    setup_logging(log_level, cfg['output']['logging'].get('log_file'))

    quiet = ctx.obj.get('QUIET')
    estimate = cfg['stats']['genome_size']
    report_path = Path(cfg['output']['report_file'])
    if output is None and cfg['output']['report_file'] == DEFAULT_CONFIG['output']['report_file']:
        # Default name follows the report format
        report_path = report_path.with_suffix(f".{cfg['output']['format']}")

    if not quiet:
        click.echo(f"{'='*60}")
        click.echo("ReadStats")
        click.echo(f"{'='*60}")
        click.echo(f"Input: {input}")
        click.echo(f"Genome size estimation: {'yes' if estimate else 'no'}")
        click.echo(f"Report: {report_path}")
        click.echo(f"{'='*60}\n")

    try:
        stats = ReadStats(genome_size=estimate, config=StatsConfig.from_config(cfg))
        stats.ingest(read_sequences(input, fmt=cfg['input']['format']))
        stats.finalize()
    except ReadStatsError as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)

    try:
        write_report(build_report(stats), report_path, fmt=cfg['output']['format'])
    except OSError as e:
        click.echo(f"✗ Error writing report: {e}", err=True)
        sys.exit(1)

    if not quiet:
        click.echo(f"  Total reads: {stats.total_reads:,}")
        click.echo(f"  Total bases: {stats.total_bases:,}")
        click.echo(f"  N50: {stats.n50 if stats.n50 is not None else 'n/a'}")
        if estimate:
            size = f"{stats.genome_size:,} bp" if stats.genome_size is not None else "insufficient data"
            click.echo(f"  Genome size: {size}")
        click.echo(f"\n✓ Report saved to: {report_path}")


if __name__ == '__main__':
    main()
