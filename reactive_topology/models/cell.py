from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


Symbol = str


@dataclass(frozen=True)
class Cell:
    """A unit of reactive code. Identity is the id; code is display-only."""
    id: str
    code: str = field(default="", compare=False, repr=False)


def _symbols(values: Iterable[Symbol]) -> FrozenSet[Symbol]:
    return values if isinstance(values, frozenset) else frozenset(values)


@dataclass(frozen=True)
class DependencyNode:
    """Symbols read and written by one cell."""
    definitions: FrozenSet[Symbol] = frozenset()
    soft_definitions: FrozenSet[Symbol] = frozenset()  # writes inside closures
    funcdefs_without_signatures: FrozenSet[Symbol] = frozenset()
    funcdefs_with_signatures: FrozenSet[Symbol] = frozenset()
    references: FrozenSet[Symbol] = frozenset()

    def __post_init__(self):
        # Accept any iterable of symbols (lists, sets) from the caller
        for name in (
            "definitions",
            "soft_definitions",
            "funcdefs_without_signatures",
            "funcdefs_with_signatures",
            "references",
        ):
            object.__setattr__(self, name, _symbols(getattr(self, name)))

    @property
    def hard_definitions(self) -> FrozenSet[Symbol]:
        """Writes that must happen before any top-level read."""
        return self.definitions | self.funcdefs_without_signatures

    @property
    def all_definitions(self) -> FrozenSet[Symbol]:
        """Every symbol this cell writes that another cell could depend on."""
        return self.definitions | self.soft_definitions | self.funcdefs_without_signatures
