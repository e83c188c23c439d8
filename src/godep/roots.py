# Entry-point classification for the executable package
import logging
import posixpath
from typing import List
from .constants import ENTRY_PACKAGE
from .registry import PackageRegistry
from .types import Root

logger = logging.getLogger(__name__)


def target_name(filename: str, fallback: str = ENTRY_PACKAGE) -> str:
    """Derive an executable name from a root file name.

    The last path component is cut at its first '.' (kept whole when it has
    none) and ``fallback`` replaces an empty stem. Directories are kept, so
    'cmd/app.go' gives 'cmd/app' while './server.go' gives 'server'.
    """
    head, tail = posixpath.split(posixpath.normpath(filename))
    stem = tail.split(".", 1)[0] or fallback
    return posixpath.join(head, stem) if head else stem


def classify(
    registry: PackageRegistry,
    entry_package: str = ENTRY_PACKAGE,
    exec_name: str = ENTRY_PACKAGE,
) -> List[Root]:
    """Find the files of ``entry_package`` that define the entry function.

    Files are visited in the package's discovery order. Files that are not
    roots are common to every root and are not returned.
    """
    package = registry.get(entry_package)
    if package is None:
        logger.info(f"No '{entry_package}' package found, skipping root rules")
        return []

    roots = []
    for path in package.files:
        unit = registry.unit(path)
        if unit is None or not unit.has_entry:
            continue
        root = Root(path, target_name(path, exec_name))
        logger.info(f"Root {path} -> {root.target}")
        roots.append(root)
    return roots


def common_files(registry: PackageRegistry, entry_package: str, roots: List[Root]) -> List[str]:
    """Files of the entry package that every root depends on."""
    package = registry.get(entry_package)
    if package is None:
        return []
    root_paths = {root.path for root in roots}
    return [path for path in package.files if path not in root_paths]
