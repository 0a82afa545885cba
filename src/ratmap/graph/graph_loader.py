import logging
import os
from typing import Dict, List

import networkx as nx

from ..spatial.neighbors import NeighborSet
from ..spatial.regions import IndexMap

logger = logging.getLogger(__name__)


def to_networkx(neighbors: NeighborSet, index_map: IndexMap) -> nx.Graph:
    """
    Undirected graph with one node per region, labeled by identifier and
    carrying its 1-based matrix index as the ``index`` attribute.
    """
    G = nx.Graph()
    for rid in index_map.identifiers:
        G.add_node(rid, index=index_map.index_of(rid))
    G.add_edges_from(neighbors.edges())
    return G


def write_graph(neighbors: NeighborSet, index_map: IndexMap, graph_file: str) -> None:
    """
    Write the neighbor relation in adjacency-list format.
    First line: <num_nodes> <num_edges>
    Following lines: the 1-based neighbor indices of region 1, 2, ... N
    """
    parent = os.path.dirname(graph_file)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(graph_file, 'w') as f:
        f.write(f"{len(index_map)} {neighbors.num_edges()}\n")
        for rid in index_map.identifiers:
            idx = sorted(index_map.index_of(nb) for nb in neighbors[rid])
            f.write(' '.join(map(str, idx)) + '\n')

    logger.info("Wrote graph with %d nodes to %s", len(index_map), graph_file)


def load_graph(graph_file: str, index_map: IndexMap) -> NeighborSet:
    """
    Read a graph written by ``write_graph`` back into a NeighborSet.
    Node numbers are translated to identifiers through index_map.
    """
    with open(graph_file, 'r') as f:
        lines = f.read().splitlines()

    n, m = map(int, lines[0].split())
    if n != len(index_map):
        raise ValueError(f"Graph file has {n} nodes, index map has {len(index_map)}")

    adj: Dict[str, List[str]] = {}
    for node in range(1, n + 1):
        line = lines[node] if node < len(lines) else ''
        rid = index_map.identifier_of(node)
        adj[rid] = [index_map.identifier_of(int(tok)) for tok in line.split()]

    neighbors = NeighborSet(adj)
    if neighbors.num_edges() != m:
        logger.warning("Header specifies %d edges, file contains %d", m, neighbors.num_edges())
    return neighbors
