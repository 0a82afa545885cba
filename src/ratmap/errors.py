from typing import Iterable, Optional, Tuple


class AdjacencyError(Exception):
    """Base class for errors raised while building an adjacency structure."""


class GeometryError(AdjacencyError):
    """A region has a missing or malformed boundary geometry."""

    def __init__(self, identifier: Optional[str], reason: str):
        self.identifier = identifier
        self.reason = reason
        where = f"region {identifier!r}" if identifier is not None else "region"
        super().__init__(f"Bad geometry for {where}: {reason}")


class UnknownIdentifierError(AdjacencyError):
    """An identifier is referenced that is not part of the region set."""

    def __init__(self, identifier, label: Optional[str] = None):
        self.identifier = identifier
        self.label = label
        msg = f"Unknown region identifier {identifier!r}"
        if label:
            msg += f" in manual link {label!r}"
        super().__init__(msg)


class DuplicateIdentifierError(AdjacencyError):
    """The same region identifier appears more than once in the input."""

    def __init__(self, identifiers: Iterable[str]):
        self.identifiers = tuple(sorted(identifiers))
        super().__init__(f"Duplicate region identifiers: {', '.join(self.identifiers)}")


class EmptyNeighborSetWarning(UserWarning):
    """
    Regions that ended up with no neighbors.

    Collected and handed back to the caller, never raised: an isolated region
    gets an all-zero row in the matrix and no smoothing from its neighbors.
    """

    def __init__(self, identifiers: Iterable[str]):
        self.identifiers: Tuple[str, ...] = tuple(sorted(identifiers))
        super().__init__(
            f"{len(self.identifiers)} region(s) have no neighbors: {', '.join(self.identifiers)}"
        )
