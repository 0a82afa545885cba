"""
Manual edges for regions that are connected by something other than a shared
boundary: bridges, tunnels, ferries.
"""

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Sequence

from ..errors import UnknownIdentifierError
from .neighbors import NeighborSet
from .regions import IndexMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ManualLink:
    label: str
    a: str
    b: str

    def __post_init__(self):
        object.__setattr__(self, 'a', str(self.a).strip())
        object.__setattr__(self, 'b', str(self.b).strip())
        if self.a == self.b:
            raise ValueError(f"Manual link {self.label!r} connects {self.a!r} to itself")

    @property
    def pair(self) -> frozenset:
        return frozenset((self.a, self.b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ManualLink):
            return NotImplemented
        return self.label == other.label and self.pair == other.pair

    def __hash__(self) -> int:
        return hash((self.label, self.pair))


def validate_links(links: Iterable[ManualLink], index_map: IndexMap) -> None:
    """Raise UnknownIdentifierError for the first link endpoint not in index_map."""
    for link in links:
        for identifier in (link.a, link.b):
            if identifier not in index_map:
                raise UnknownIdentifierError(identifier, link.label)


def apply_link(neighbors: NeighborSet, link: ManualLink) -> NeighborSet:
    logger.debug("Applying manual link %s: %s <-> %s", link.label, link.a, link.b)
    return neighbors.with_link(link.a, link.b)


def augment_neighbors(neighbors: NeighborSet, links: Sequence[ManualLink],
                      index_map: IndexMap) -> NeighborSet:
    """
    Fold the manual links into the neighbor relation.

    Every link is checked before any is applied, so a bad configuration never
    yields a partially edited graph. The result does not depend on link order
    and re-applying a link is a no-op.
    """
    links = list(links)
    validate_links(links, index_map)

    result = reduce(apply_link, links, neighbors)
    added = result.num_edges() - neighbors.num_edges()
    logger.info("Applied %d manual link(s), %d new edge(s)", len(links), added)
    return result
