"""
Package registry statistics collection and reporting
"""

import logging
from typing import List
from tabulate import tabulate
from .constants import ENTRY_PACKAGE, STATS_HEADERS
from .registry import PackageRegistry
from .roots import classify

logger = logging.getLogger(__name__)


class StatsCollector:
    def __init__(self, registry: PackageRegistry, entry_package: str = ENTRY_PACKAGE):
        self.registry = registry
        self.entry_package = entry_package
        self.rows: List[list] = []

    def collect(self) -> List[list]:
        """One row per package, in registry order"""
        roots = classify(self.registry, self.entry_package)
        self.rows = []
        for package in self.registry:
            external = [t for t in package.imports if t not in self.registry]
            self.rows.append(
                [
                    package.name,
                    len(package.files),
                    len(package.imports),
                    len(external),
                    len(roots) if package.name == self.entry_package else 0,
                ]
            )
        logger.debug(f"Collected stats for {len(self.rows)} packages")
        return self.rows

    def totals(self) -> list:
        if not self.rows:
            self.collect()
        return ["Total"] + [sum(row[i] for row in self.rows) for i in range(1, len(STATS_HEADERS))]

    def display_stats(self) -> str:
        """Formatted statistics table"""
        rows = self.collect() + [self.totals()]
        return tabulate(rows, headers=STATS_HEADERS, tablefmt="rounded_outline")
