# Makefile dependency rule generation
import logging
from typing import List, Optional
from .config import GodepConfig
from .constants import (
    ARTIFACT_TEMPLATE,
    EXTERNAL_COMMENT_PREFIX,
    EXTERNAL_MARKER_PREFIX,
    FILE_LIST_PREFIX,
    RULE_TEMPLATE,
)
from .registry import PackageRegistry
from .roots import classify, common_files
from .types import Package, Root

logger = logging.getLogger(__name__)


class RuleWriter:
    """Renders a PackageRegistry as make dependency lines.

    The passes are independent and always emitted in the same order:
    external packages, the file list, per-package rules and finally the
    root/common rules of the entry package.
    """

    def __init__(self, registry: PackageRegistry, config: Optional[GodepConfig] = None):
        self.registry = registry
        self.config = config or GodepConfig()

    def artifact(self, name: str) -> str:
        """Compiled artifact name for a package or executable"""
        if not self.config.object_suffix:
            return name
        return ARTIFACT_TEMPLATE.format(name=name, suffix=self.config.object_suffix)

    @staticmethod
    def _line(prefix: str, items: List[str]) -> str:
        return (prefix + " ".join(items)).rstrip()

    def _rule(self, target: str, prerequisites: List[str]) -> str:
        return RULE_TEMPLATE.format(
            target=target, prerequisites=" ".join(prerequisites)
        ).rstrip()

    def external_packages(self) -> List[str]:
        """Import targets with no registered package, each listed once."""
        seen = set()
        externals = []
        for package in self.registry:
            for target in package.sorted_imports():
                if target not in self.registry and target not in seen:
                    seen.add(target)
                    externals.append(target)
        return externals

    def external_line(self, prefix: str, item_suffix: str = "") -> str:
        return self._line(
            prefix, [f"{name}{item_suffix}" for name in self.external_packages()]
        )

    def file_list(self) -> str:
        seen = set()
        files = []
        for package in self.registry:
            for path in package.files:
                if path not in seen:
                    seen.add(path)
                    files.append(path)
        return self._line(FILE_LIST_PREFIX, files)

    def _dependencies(self, package: Package) -> List[str]:
        # imports are a set, so each target appears at most once per rule;
        # unresolved ones only in show-needed mode
        return [
            self.artifact(target)
            for target in package.sorted_imports()
            if target in self.registry or self.config.show_needed
        ]

    def package_rules(self) -> List[str]:
        lines = []
        for package in self.registry:
            if package.name == self.config.entry_package:
                continue
            lines.append(
                self._rule(
                    self.artifact(package.name),
                    package.files + self._dependencies(package),
                )
            )
        return lines

    def root_rules(self, roots: Optional[List[Root]] = None) -> List[str]:
        """Link and compile rules for every root of the entry package.

        Each root is compiled from its own file plus every common file of
        the entry package, and depends on the entry package's imports.
        """
        entry = self.registry.get(self.config.entry_package)
        if entry is None:
            return []
        if roots is None:
            roots = classify(
                self.registry, self.config.entry_package, self.config.exec_name
            )
        common = common_files(self.registry, entry.name, roots)

        lines = [self._rule(root.target, [self.artifact(root.target)]) for root in roots]
        for root in roots:
            lines.append(
                self._rule(
                    self.artifact(root.target),
                    [root.path] + common + self._dependencies(entry),
                )
            )
        return lines

    def render(self, roots: Optional[List[Root]] = None) -> List[str]:
        """All passes in output order."""
        lines = []
        if self.config.external_marker:
            suffix = self.config.object_suffix
            lines.append(
                self.external_line(EXTERNAL_MARKER_PREFIX, f".{suffix}" if suffix else "")
            )
        lines.append(self.external_line(EXTERNAL_COMMENT_PREFIX))
        lines.append(self.file_list())
        lines.extend(self.package_rules())
        lines.extend(self.root_rules(roots))
        logger.info(f"Rendered {len(lines)} rule lines for {len(self.registry)} packages")
        return lines
