import networkx as nx
import numpy as np
from typing import Any, Dict, List, Sequence, Tuple

from ..spatial.neighbors import NeighborSet
from ..spatial.regions import Region


def get_graph_stats(G: nx.Graph) -> Dict[str, Any]:
    """
    Compute basic statistics of the region graph.

    A smoothing model sees each connected component (and each island) as a
    separate block, so the component sizes are reported along with degrees.
    """
    n = G.number_of_nodes()
    if n == 0:
        return {'num_nodes': 0, 'num_edges': 0, 'density': 0.0, 'is_connected': False,
                'num_components': 0, 'component_sizes': [], 'isolated': [],
                'avg_degree': 0.0, 'min_degree': 0, 'max_degree': 0}

    degrees = [d for _, d in G.degree()]
    components = sorted(nx.connected_components(G), key=lambda c: (-len(c), min(c)))

    return {
        'num_nodes': n,
        'num_edges': G.number_of_edges(),
        'density': nx.density(G),
        'is_connected': len(components) == 1,
        'num_components': len(components),
        'component_sizes': [len(c) for c in components],
        'isolated': sorted(nx.isolates(G)),
        'avg_degree': float(np.mean(degrees)),
        'min_degree': min(degrees),
        'max_degree': max(degrees),
    }


def group_edge_summary(neighbors: NeighborSet, regions: Sequence[Region]) -> Dict[Tuple[str, str], int]:
    """
    Count edges per pair of group labels (e.g. boroughs).

    Keys are sorted label pairs, ``(g, g)`` for edges inside one group.
    Regions without a group count under an empty label.
    """
    group = {r.identifier: r.group or '' for r in regions}
    counts: Dict[Tuple[str, str], int] = {}
    for a, b in neighbors.edges():
        key = tuple(sorted((group[a], group[b])))
        counts[key] = counts.get(key, 0) + 1
    return dict(sorted(counts.items()))


def cross_group_edges(neighbors: NeighborSet, regions: Sequence[Region]) -> List[Tuple[str, str]]:
    """Edges whose endpoints carry different group labels."""
    group = {r.identifier: r.group for r in regions}
    return [(a, b) for a, b in neighbors.edges() if group[a] != group[b]]
