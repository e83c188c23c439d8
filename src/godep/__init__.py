"""Make dependency rules for Go source trees."""

from godep._version import __version__
from godep.config import GodepConfig, load_config
from godep.core import build_registry, generate_rules
from godep.registry import PackageRegistry
from godep.rules import RuleWriter
from godep.source_analyzer import ParseError, analyze_file, analyze_source

__all__ = [
    "__version__",
    "GodepConfig",
    "load_config",
    "build_registry",
    "generate_rules",
    "PackageRegistry",
    "RuleWriter",
    "ParseError",
    "analyze_file",
    "analyze_source",
]
