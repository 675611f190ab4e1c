"""Front matter detection for host site generators.

Site generators decide whether a file has a metadata header before
reading it as a page. Notebooks keep their header inside the first cell,
so the usual ``---`` check misses them. Instead of patching the host's
check, each document type registers a predicate here, and the host asks
the registry.

Thread Safety:
FrontMatterRegistry is immutable after creation. Safe to share.
Use FrontMatterRegistryBuilder for mutable construction.

Example:
    >>> builder = FrontMatterRegistryBuilder()
    >>> builder.register("notebook", converter.has_front_matter)
    >>> registry = builder.build()
    >>> registry.has_front_matter("posts/intro.ipynb")
    True
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

PathPredicate = Callable[[Path], bool]

YAML_HEADER_PREFIX = b"---"


def has_yaml_header(path: Path) -> bool:
    """Default check: file starts with a ``---`` line."""
    try:
        with path.open("rb") as f:
            first = f.readline()
    except OSError:
        return False
    return first.rstrip() == YAML_HEADER_PREFIX


class FrontMatterRegistry:
    """Immutable set of front matter predicates.

    Predicates are consulted in registration order; the first that
    accepts a path wins. Paths no predicate accepts go to the fallback.
    """

    __slots__ = ("_predicates", "_fallback")

    def __init__(
        self,
        predicates: tuple[tuple[str, PathPredicate], ...],
        fallback: PathPredicate,
    ) -> None:
        """Initialize registry.

        Use FrontMatterRegistryBuilder to create instances.
        """
        self._predicates = predicates
        self._fallback = fallback

    def has_front_matter(self, path: str | Path) -> bool:
        """Whether the file at path carries a metadata header."""
        path = Path(path)
        for _, predicate in self._predicates:
            if predicate(path):
                return True
        return self._fallback(path)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered predicate names, in consultation order."""
        return tuple(name for name, _ in self._predicates)

    def __contains__(self, name: str) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self._predicates)


class FrontMatterRegistryBuilder:
    """Mutable builder for FrontMatterRegistry.

    Example:
        >>> builder = FrontMatterRegistryBuilder()
        >>> builder.register("notebook", converter.has_front_matter)
        >>> registry = builder.build()
    """

    __slots__ = ("_predicates", "_fallback")

    def __init__(self, fallback: PathPredicate = has_yaml_header) -> None:
        self._predicates: dict[str, PathPredicate] = {}
        self._fallback = fallback

    def register(self, name: str, predicate: PathPredicate) -> FrontMatterRegistryBuilder:
        """Register a predicate for one document type.

        Args:
            name: Document type name (e.g., "notebook")
            predicate: Callable taking a Path and returning bool

        Returns:
            Self for chaining

        Raises:
            ValueError: If name is already registered
        """
        if name in self._predicates:
            msg = f"Front matter predicate '{name}' already registered"
            raise ValueError(msg)
        self._predicates[name] = predicate
        return self

    def build(self) -> FrontMatterRegistry:
        """Build an immutable registry."""
        return FrontMatterRegistry(tuple(self._predicates.items()), self._fallback)


__all__ = [
    "FrontMatterRegistry",
    "FrontMatterRegistryBuilder",
    "PathPredicate",
    "has_yaml_header",
]
