"""
Configuration handling for the godep rule generator
"""

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from godep.constants import (
    DEFAULT_EXCLUSIONS,
    ENTRY_FUNCTION,
    ENTRY_PACKAGE,
    OBJECT_SUFFIX,
)
import logging
import tomllib

logger = logging.getLogger(__name__)


class GodepConfig(BaseModel):
    """Main configuration model for godep"""

    entry_package: str = Field(
        default=ENTRY_PACKAGE,
        min_length=1,
        description="Package whose files may define the program entry function",
    )
    entry_function: str = Field(
        default=ENTRY_FUNCTION,
        min_length=1,
        description="Top-level function that marks a file as an executable root",
    )
    exec_name: str = Field(
        default=ENTRY_PACKAGE,
        min_length=1,
        description="Executable name used when no name can be derived from a root file",
    )
    object_suffix: str = Field(
        default=OBJECT_SUFFIX,
        description="Suffix appended to package names to form compiled artifact names",
    )
    show_needed: bool = Field(
        default=False,
        description="List unresolved (external) imports in package and root rules",
    )
    external_marker: bool = Field(
        default=False,
        description="Emit the machine-readable .EXTERNAL line before the comment line",
    )
    exclude_patterns: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUSIONS),
        description="File and directory patterns skipped by the directory scan",
    )

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_toml(cls, path: Path) -> "GodepConfig":
        """Load config from TOML file"""
        with open(path, "rb") as f:
            config_data = tomllib.load(f)
        return cls(**config_data.get("tool", {}).get("godep", {}))


def load_config(path: Optional[Path] = None) -> GodepConfig:
    """Load configuration from file or return defaults"""
    if path and path.exists():
        logger.info(f"Loading configuration from {path}")
        return GodepConfig.from_toml(path)
    if path:
        logger.warning(f"Config file {path} not found, using defaults")
    return GodepConfig()
