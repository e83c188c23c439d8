from pathlib import Path
from typing import List
from .config import GodepConfig
from .constants import GO_SOURCE_SUFFIX
import fnmatch
import logging
import os

logger = logging.getLogger(__name__)


def find_go_files(root: Path, config: GodepConfig) -> List[str]:
    """Find Go source files below ``root`` in a stable, sorted order.

    Paths are returned relative to ``root`` using '/' separators, the same
    form a user would pass on the command line.
    """
    root = Path(root)
    files = []
    for dirpath, dirnames, filenames in os.walk(root):
        # prune excluded directories in place so os.walk skips them
        dirnames[:] = sorted(d for d in dirnames if not _is_excluded(d, config))
        for filename in sorted(filenames):
            if not filename.endswith(GO_SOURCE_SUFFIX) or _is_excluded(filename, config):
                continue
            relative = (Path(dirpath) / filename).relative_to(root)
            files.append(relative.as_posix())
    logger.info(f"Found {len(files)} Go files under {root}")
    return files


def _is_excluded(name: str, config: GodepConfig) -> bool:
    """Check if a file or directory name matches any exclude pattern"""
    return any(fnmatch.fnmatch(name, pattern) for pattern in config.exclude_patterns)
