import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pandas as pd
from scipy.sparse import csr_matrix

from ..errors import AdjacencyError, EmptyNeighborSetWarning
from ..spatial.neighbors import NeighborSet
from ..spatial.regions import IndexMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AdjacencyMatrix:
    """
    Binary N x N adjacency matrix with the IndexMap that orders its rows.

    Row/column ``index_map.position_of(identifier)`` belongs to ``identifier``.
    """
    values: np.ndarray
    index_map: IndexMap

    @property
    def size(self) -> int:
        return self.values.shape[0]

    def to_frame(self) -> pd.DataFrame:
        """Matrix labeled with region identifiers on both axes."""
        ids = list(self.index_map.identifiers)
        return pd.DataFrame(self.values, index=pd.Index(ids, name='identifier'), columns=ids)

    def to_sparse(self) -> csr_matrix:
        return csr_matrix(self.values)

    def edge_list(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        1-based (node1, node2) arrays with node1 < node2, one entry per edge,
        the layout ICAR / BYM model code expects.
        """
        rows, cols = np.nonzero(np.triu(self.values, k=1))
        return rows + 1, cols + 1

    def neighbors_of(self, identifier: str) -> List[str]:
        row = self.values[self.index_map.position_of(identifier)]
        return [self.index_map.identifier_of(int(p) + 1) for p in np.flatnonzero(row)]

    def tobytes(self) -> bytes:
        return self.values.tobytes()


def encode_matrix(neighbors: NeighborSet, index_map: IndexMap,
                  dtype=np.int8) -> Tuple[AdjacencyMatrix, List[EmptyNeighborSetWarning]]:
    """
    Encode the neighbor relation as a symmetric binary matrix with zero diagonal.

    Regions without neighbors get an all-zero row and column and are reported in
    the returned warnings list.
    """
    if set(neighbors) != set(index_map.identifiers):
        raise AdjacencyError("Neighbor set and index map cover different regions")
    if not neighbors.is_symmetric():
        raise AdjacencyError("Neighbor relation is not symmetric")

    n = len(index_map)
    values = np.zeros((n, n), dtype=dtype)
    for a, b in neighbors.edges():
        i, j = index_map.position_of(a), index_map.position_of(b)
        values[i, j] = 1
        values[j, i] = 1

    warnings = []
    isolated = neighbors.isolated()
    if isolated:
        logger.warning("%d region(s) have no neighbors: %s", len(isolated), ', '.join(isolated))
        warnings.append(EmptyNeighborSetWarning(isolated))

    return AdjacencyMatrix(values, index_map), warnings
