from pathlib import Path
from datetime import datetime
import logging
from typing import List, Optional, Sequence
from .config import GodepConfig
from .package_discovery import find_go_files
from .registry import PackageRegistry
from .roots import classify
from .rules import RuleWriter
from .source_analyzer import analyze_file

logger = logging.getLogger(__name__)


def collect_sources(
    files: Optional[Sequence[str]] = None,
    root: Path = Path("."),
    config: Optional[GodepConfig] = None,
) -> List[str]:
    """Explicit files as given, or every Go file found below ``root``."""
    config = config or GodepConfig()
    if files:
        return list(files)
    return find_go_files(root, config)


def build_registry(
    files: Optional[Sequence[str]] = None,
    root: Path = Path("."),
    config: Optional[GodepConfig] = None,
    verbose: bool = False,
) -> PackageRegistry:
    """
    Analyze Go sources and group them into packages.

    Args:
        files (Sequence[str], optional): Files to analyze. When empty, ``root``
            is scanned and the discovered paths are recorded relative to it.
        root (Path, optional): Directory scanned when no files are given.
        config (GodepConfig, optional): Generator configuration.
        verbose (bool, optional): Log per-file progress.

    Raises:
        ParseError: If any file cannot be analyzed. Nothing is registered
            past the failing file and no rules should be written.
    """
    config = config or GodepConfig()
    scanned = not files
    sources = collect_sources(files, root, config)

    registry = PackageRegistry()
    for source in sources:
        if verbose:
            logger.info(f"🔄 Analyzing: {source}")
        file_path = Path(root) / source if scanned else Path(source)
        unit = analyze_file(file_path, config.entry_function, display_path=source)
        registry.add_unit(unit)
    return registry


def generate_rules(
    files: Optional[Sequence[str]] = None,
    root: Path = Path("."),
    config: Optional[GodepConfig] = None,
    verbose: bool = False,
) -> List[str]:
    """Analyze sources and render the complete list of make rule lines."""
    config = config or GodepConfig()
    start = datetime.now()

    registry = build_registry(files, root, config, verbose=verbose)
    roots = classify(registry, config.entry_package, config.exec_name)
    lines = RuleWriter(registry, config).render(roots)

    if verbose:
        duration = datetime.now() - start
        logger.info(f"🏁 Rules generated in {duration.total_seconds():.3f}s")
        logger.info(f"📊 {len(registry)} packages, {len(roots)} executables")
    return lines
