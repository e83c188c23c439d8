# Package registry: groups analyzed source units by package
import logging
from typing import Dict, Iterable, Iterator, List, Optional
from .types import Package, SourceUnit

logger = logging.getLogger(__name__)


class PackageRegistry:
    """Accumulates packages, their member files and their import targets.

    Iteration is ordered by package name; files keep discovery order and
    imports are reported sorted, so every pass over the registry produces
    the same output for the same input.
    """

    def __init__(self):
        self._packages: Dict[str, Package] = {}
        self._units: Dict[str, SourceUnit] = {}
        self._owners: Dict[str, str] = {}

    def register(
        self, unit: str, package_name: str, import_targets: Iterable[str] = ()
    ) -> Package:
        """Add a file to a package, creating the package on first use.

        Raises:
            ValueError: If the file already belongs to another package
        """
        owner = self._owners.setdefault(unit, package_name)
        if owner != package_name:
            raise ValueError(f"{unit} registered as package {owner} and {package_name}")
        package = self._packages.get(package_name)
        if package is None:
            logger.debug(f"New package: {package_name}")
            package = self._packages[package_name] = Package(package_name)
        if unit not in package.files:
            package.files.append(unit)
        package.imports.update(
            target for target in import_targets if target != package_name
        )
        return package

    def add_unit(self, unit: SourceUnit) -> Package:
        """Register an analyzed source unit and remember it for classification."""
        package = self.register(unit.path, unit.package, unit.imports)
        self._units[unit.path] = unit
        return package

    def unit(self, path: str) -> Optional[SourceUnit]:
        return self._units.get(path)

    def get(self, name: str) -> Optional[Package]:
        return self._packages.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._packages

    def __iter__(self) -> Iterator[Package]:
        for name in sorted(self._packages):
            yield self._packages[name]

    def __len__(self) -> int:
        return len(self._packages)

    def names(self) -> List[str]:
        return sorted(self._packages)

    def __repr__(self) -> str:
        return f"PackageRegistry(packages={self.names()})"
