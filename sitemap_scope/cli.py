# === FILE: sitemap_scope/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for inspecting a sitemap saved on disk.

Commands:
  detect    Build a sitemap from a local file and print its links as JSON
  config    Show the effective configuration

Global options:
  --config PATH       Path to a YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

detect options:
  --format FMT        auto (default), xml, rss or txt
  --json PATH         Save the JSON result to a file
  --pretty            Indent JSON output (indent 2)

Also:
  --version, -v       Show the SitemapScope version

Example:
  sitemap-scope detect https://example.com/sitemap.xml ./sitemap.xml --pretty
"""
import sys
import json
from pathlib import Path

import click

from sitemap_scope import __version__
from sitemap_scope.config import load_config
from sitemap_scope.errors import SitemapError
from sitemap_scope.logger import init_logging, logger
from sitemap_scope.models import SitemapFormat
from sitemap_scope.report.json_report import render_json, sitemap_to_dict
from sitemap_scope.sitemap import build_sitemap, detect_sitemap

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

_AUTO = 'auto'


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SitemapScope, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Path to a log file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SitemapScope command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('detect', context_settings=CONTEXT_SETTINGS)
@click.argument('location')
@click.argument(
    'source',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    '--format', '-f', 'fmt',
    default=_AUTO,
    show_default=True,
    type=click.Choice([_AUTO] + [f.value for f in SitemapFormat]),
    help='Sitemap format; auto detects it from the content'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON result to a file'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent JSON output (indent 2)'
)
@click.pass_context
def detect(ctx, location, source, fmt, json_output, pretty):
    """Build the sitemap LOCATION from the local file SOURCE."""
    cfg = ctx.obj['config']
    content = source.read_text(encoding='utf-8', errors='replace')
    logger.info('Reading sitemap %s from %s', location, source)
    try:
        if fmt == _AUTO:
            sitemap = detect_sitemap(location, content, config=cfg)
        else:
            sitemap = build_sitemap(location, content, fmt, config=cfg)
    except SitemapError as e:
        print_error(f'Failed to build sitemap: {e}')

    logger.info('%s sitemap with %d links', sitemap.format.value, len(sitemap.links))
    indent = 2 if pretty else None

    if json_output:
        try:
            saved = render_json(sitemap, json_output, indent=indent)
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')
        click.echo(f'JSON report: {saved}')
        return

    click.echo(json.dumps(sitemap_to_dict(sitemap), ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the current configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
