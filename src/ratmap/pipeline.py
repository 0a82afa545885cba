"""
Extract -> augment -> encode.

The resulting matrix and IndexMap are what an areal smoothing model (BYM and
friends) consumes together with a region-indexed count table.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .config import NYC_MANUAL_LINKS, AdjacencyConfig
from .errors import EmptyNeighborSetWarning, UnknownIdentifierError
from .graph.encoder import AdjacencyMatrix, encode_matrix
from .graph.evaluation import get_graph_stats, group_edge_summary
from .graph.graph_loader import to_networkx
from .spatial.contiguity import extract_neighbors, nearest_links
from .spatial.data_loader import load_regions
from .spatial.links import ManualLink, augment_neighbors
from .spatial.neighbors import NeighborSet
from .spatial.regions import IndexMap, Region

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class AdjacencyResult:
    regions: List[Region]
    index_map: IndexMap
    geometric_neighbors: NeighborSet
    neighbors: NeighborSet
    links: List[ManualLink]
    matrix: AdjacencyMatrix
    warnings: List[EmptyNeighborSetWarning] = field(default_factory=list)

    @property
    def isolated(self) -> List[str]:
        return self.neighbors.isolated()

    def stats(self) -> Dict[str, Any]:
        stats = get_graph_stats(to_networkx(self.neighbors, self.index_map))
        stats['geometric_edges'] = self.geometric_neighbors.num_edges()
        stats['manual_links'] = len(self.links)
        stats['group_edges'] = {' / '.join(k): v
                                for k, v in group_edge_summary(self.neighbors, self.regions).items()}
        return stats


def build_adjacency(regions: Sequence[Region], index_map: IndexMap,
                    links: Sequence[ManualLink] = NYC_MANUAL_LINKS,
                    config: Optional[AdjacencyConfig] = None) -> AdjacencyResult:
    """
    Build the adjacency matrix for a set of regions.

    Raises UnknownIdentifierError before any matrix is built when a link names
    a region that is not in index_map. Isolated regions are not an error; they
    come back in ``result.warnings``.
    """
    config = config or AdjacencyConfig()
    regions = list(regions)

    geometric = extract_neighbors(regions, method=config.contiguity)
    all_links = list(links)
    neighbors = augment_neighbors(geometric, all_links, index_map)

    if config.connect_islands:
        island_links = nearest_links(regions, neighbors)
        neighbors = augment_neighbors(neighbors, island_links, index_map)
        all_links.extend(island_links)

    matrix, warnings = encode_matrix(neighbors, index_map)
    logger.info("Built %dx%d adjacency matrix with %d edge(s)",
                matrix.size, matrix.size, neighbors.num_edges())

    return AdjacencyResult(
        regions=regions,
        index_map=index_map,
        geometric_neighbors=geometric,
        neighbors=neighbors,
        links=all_links,
        matrix=matrix,
        warnings=warnings,
    )


def build_adjacency_from_file(shapefile_path: str,
                              links: Sequence[ManualLink] = NYC_MANUAL_LINKS,
                              config: Optional[AdjacencyConfig] = None) -> AdjacencyResult:
    config = config or AdjacencyConfig()
    regions, index_map = load_regions(shapefile_path, id_field=config.id_field,
                                      group_field=config.group_field, dissolve=config.dissolve)
    return build_adjacency(regions, index_map, links, config)


def align_covariates(table: pd.DataFrame, index_map: IndexMap, id_column: str,
                     index_column: str = 'region_index') -> pd.DataFrame:
    """
    Attach the 1-based matrix index to a region-indexed table (e.g. counts
    per ZIP) and sort the rows by it.

    Rows naming a region outside index_map raise UnknownIdentifierError.
    """
    if id_column not in table.columns:
        raise ValueError(f"Missing identifier column '{id_column}'")

    out = table.copy()
    ids = out[id_column].astype(str).str.strip()
    unknown = sorted(set(ids) - set(index_map.identifiers))
    if unknown:
        raise UnknownIdentifierError(unknown[0])

    out[id_column] = ids
    out[index_column] = [index_map.index_of(rid) for rid in ids]
    return out.sort_values(index_column, kind='mergesort').reset_index(drop=True)
