from collections.abc import Mapping
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

from ..errors import UnknownIdentifierError


class NeighborSet(Mapping):
    """
    Immutable neighbor relation: identifier -> frozenset of neighbor identifiers.

    Every region of the input has a key, isolated ones map to an empty set.
    Neighbors must be known identifiers and a region is never its own neighbor.
    """

    def __init__(self, neighbors: Dict[str, Iterable[str]]):
        data = {str(k): frozenset(str(n) for n in v) for k, v in neighbors.items()}
        for rid, nbrs in data.items():
            if rid in nbrs:
                raise ValueError(f"Region {rid!r} lists itself as a neighbor")
            for nb in nbrs:
                if nb not in data:
                    raise UnknownIdentifierError(nb)
        self._data: Dict[str, FrozenSet[str]] = data

    @classmethod
    def empty(cls, identifiers: Iterable[str]) -> "NeighborSet":
        return cls({rid: () for rid in identifiers})

    def __getitem__(self, identifier: str) -> FrozenSet[str]:
        return self._data[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"NeighborSet(regions={len(self)}, edges={self.num_edges()})"

    def with_link(self, a: str, b: str) -> "NeighborSet":
        """Return a new NeighborSet where a and b are neighbors."""
        if a not in self._data:
            raise UnknownIdentifierError(a)
        if b not in self._data:
            raise UnknownIdentifierError(b)
        if b in self._data[a]:
            return self
        data = dict(self._data)
        data[a] = data[a] | {b}
        data[b] = data[b] | {a}
        return NeighborSet(data)

    def edges(self) -> List[Tuple[str, str]]:
        """Undirected edges as sorted (a, b) pairs with a < b."""
        return sorted((a, b) for a, nbrs in self._data.items() for b in nbrs if a < b)

    def num_edges(self) -> int:
        return sum(len(v) for v in self._data.values()) // 2

    def isolated(self) -> List[str]:
        return sorted(rid for rid, nbrs in self._data.items() if not nbrs)

    def is_symmetric(self) -> bool:
        return all(a in self._data[b] for a, nbrs in self._data.items() for b in nbrs)

    def to_dict(self) -> Dict[str, List[str]]:
        """Plain dict of sorted neighbor lists, suitable for JSON."""
        return {rid: sorted(self._data[rid]) for rid in sorted(self._data)}
