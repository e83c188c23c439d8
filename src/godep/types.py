from typing import Iterable, List, Optional, Set


class SourceUnit:
    """
    Represents a single analyzed Go source file.

    Attributes:
        path (str): The file identifier as it was given or discovered
        package (str): The declared package name
        imports (Set[str]): Distinct, cleaned import paths
        has_entry (bool): Whether the file defines the top-level entry function
    """
    def __init__(
        self,
        path: str,
        package: str,
        imports: Optional[Iterable[str]] = None,
        has_entry: bool = False,
    ):
        self.path = path
        self.package = package
        self.imports = frozenset(imports or ())
        self.has_entry = has_entry

    def __repr__(self) -> str:
        return f"SourceUnit(path={self.path}, package={self.package})"


class Package:
    """
    A named group of source units.

    Attributes:
        name (str): The package name
        files (List[str]): Member files in discovery order
        imports (Set[str]): Import targets referenced by any member
    """
    def __init__(self, name: str):
        self.name = name
        self.files: List[str] = []
        self.imports: Set[str] = set()

    def sorted_imports(self) -> List[str]:
        return sorted(self.imports)

    def __repr__(self) -> str:
        return f"Package(name={self.name}, files={len(self.files)})"


class Root:
    """An entry-package file that defines the entry function and gets its own executable."""

    def __init__(self, path: str, target: str):
        self.path = path
        self.target = target

    def __eq__(self, other) -> bool:
        if not isinstance(other, Root):
            return NotImplemented
        return (self.path, self.target) == (other.path, other.target)

    def __repr__(self) -> str:
        return f"Root(path={self.path}, target={self.target})"
