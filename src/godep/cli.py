from godep._version import __version__
import click
from godep.core import build_registry, generate_rules
from godep.stats import StatsCollector
from pathlib import Path
import sys
import traceback
import logging
from typing import Optional, Tuple
from godep.config import GodepConfig, load_config

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_config(config_path: Optional[str], **overrides) -> GodepConfig:
    path = Path(config_path) if config_path else Path("pyproject.toml")
    config = load_config(path if path.exists() else None)
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        # re-validate so bad command line values fail like bad config values
        config = GodepConfig(**{**config.model_dump(), **updates})
    return config


def _fail(error: Exception, verbose: bool) -> None:
    logger.error(f"❌ Error: {str(error)}")
    if verbose:
        logger.error(f"Stack trace:\n{traceback.format_exc()}")
    click.echo(f"Error: {str(error)}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(__version__)
def cli():
    """Generate make dependency rules for Go source trees"""
    pass


@cli.command()
@click.argument("files", nargs=-1, type=str)
@click.option("--need", "-n", is_flag=True,
              help="Display external dependencies (.EXTERNAL line and unresolved imports in rules)")
@click.option("--external-marker", is_flag=True,
              help="Emit the .EXTERNAL line without listing unresolved imports in rules")
@click.option("--execname", "-x", default=None,
              help="Executable name used when none can be derived from a root file")
@click.option("--root", "-r", default=".", type=click.Path(exists=True, file_okay=False),
              help="Directory scanned when no files are given")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="TOML file with a [tool.godep] table")
@click.option("--output", "-o", default="-", type=click.Path(dir_okay=False, allow_dash=True),
              help="Output file (default: stdout)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def deps(
    files: Tuple[str, ...],
    need: bool,
    external_marker: bool,
    execname: Optional[str],
    root: str,
    config_path: Optional[str],
    output: str,
    verbose: bool,
) -> None:
    """Construct and print a dependency tree for the given source files.

    With no FILES, every .go file below the root directory is used.
    """
    _setup_logging(verbose)
    try:
        # -n implies the marker line
        config = _resolve_config(
            config_path,
            show_needed=True if need else None,
            external_marker=True if (need or external_marker) else None,
            exec_name=execname,
        )
        lines = generate_rules(files, Path(root), config, verbose=verbose)
    except Exception as e:
        _fail(e, verbose)

    # write only once everything parsed, so a failure leaves no partial output
    with click.open_file(output, "w") as f:
        for line in lines:
            f.write(line + "\n")


@cli.command()
@click.argument("files", nargs=-1, type=str)
@click.option("--root", "-r", default=".", type=click.Path(exists=True, file_okay=False),
              help="Directory scanned when no files are given")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="TOML file with a [tool.godep] table")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def stats(files: Tuple[str, ...], root: str, config_path: Optional[str], verbose: bool) -> None:
    """Show per-package file, import and root counts."""
    _setup_logging(verbose)
    try:
        config = _resolve_config(config_path)
        registry = build_registry(files, Path(root), config, verbose=verbose)
        table = StatsCollector(registry, config.entry_package).display_stats()
    except Exception as e:
        _fail(e, verbose)

    click.echo("\n📊 Package Statistics:")
    click.echo(table)
