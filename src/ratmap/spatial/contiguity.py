import logging
from typing import List, Sequence

import numpy as np
from libpysal.weights import Queen, Rook

from .links import ManualLink
from .neighbors import NeighborSet
from .regions import Region, regions_to_frame

logger = logging.getLogger(__name__)

CONTIGUITY_METHODS = ('intersects', 'queen', 'rook')


def extract_neighbors(regions: Sequence[Region], method: str = 'intersects') -> NeighborSet:
    """
    Derive the neighbor relation from region boundaries.

    ``intersects`` treats two regions as neighbors when their polygons share at
    least one point. ``queen`` and ``rook`` use libpysal contiguity weights
    (shared vertex / shared edge). Regions with no neighbors are kept with an
    empty set.
    """
    if method not in CONTIGUITY_METHODS:
        raise ValueError(f"Unknown contiguity method '{method}', expected one of {CONTIGUITY_METHODS}")

    gdf = regions_to_frame(regions)
    ids = gdf.index.tolist()

    if not ids:
        return NeighborSet({})

    if method == 'intersects':
        adj = {rid: set() for rid in ids}
        left, right = gdf.sindex.query(gdf.geometry, predicate='intersects')
        for i, j in zip(left, right):
            if i != j:
                adj[ids[i]].add(ids[j])
                adj[ids[j]].add(ids[i])
    else:
        weights_cls = Queen if method == 'queen' else Rook
        w = weights_cls.from_dataframe(gdf, use_index=True, silence_warnings=True)
        adj = {rid: set(w.neighbors[rid]) for rid in ids}

    neighbors = NeighborSet(adj)
    logger.info("Extracted %d edge(s) between %d region(s) using %s contiguity",
                neighbors.num_edges(), len(neighbors), method)
    return neighbors


def nearest_links(regions: Sequence[Region], neighbors: NeighborSet) -> List[ManualLink]:
    """
    Link every isolated region to the region with the closest centroid.
    """
    islands = neighbors.isolated()
    if not islands or len(regions) < 2:
        return []

    gdf = regions_to_frame(regions)
    centroids = gdf.geometry.centroid
    links = []
    for island in islands:
        distances = centroids.drop(island).distance(centroids.loc[island])
        # argmin keeps the first (lowest identifier) on ties
        closest = distances.index[int(np.argmin(distances.to_numpy()))]
        links.append(ManualLink(f"nearest centroid {island}-{closest}", island, closest))

    logger.info("Linking %d island(s) to their nearest neighbors", len(links))
    return links
