"""
Matrix encoding, graph file I/O and diagnostics for the region graph.
"""

from .encoder import AdjacencyMatrix, encode_matrix
from .graph_loader import to_networkx, write_graph, load_graph
from .evaluation import get_graph_stats, group_edge_summary, cross_group_edges

__all__ = [
    'AdjacencyMatrix',
    'encode_matrix',
    'to_networkx',
    'write_graph',
    'load_graph',
    'get_graph_stats',
    'group_edge_summary',
    'cross_group_edges'
]
