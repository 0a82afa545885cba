"""
Build ZIP-code adjacency structures for areal spatial smoothing models.
"""

from .config import NYC_MANUAL_LINKS, AdjacencyConfig, load_manual_links
from .errors import (
    AdjacencyError,
    DuplicateIdentifierError,
    EmptyNeighborSetWarning,
    GeometryError,
    UnknownIdentifierError,
)
from .graph.encoder import AdjacencyMatrix, encode_matrix
from .pipeline import AdjacencyResult, align_covariates, build_adjacency, build_adjacency_from_file
from .spatial.contiguity import extract_neighbors, nearest_links
from .spatial.links import ManualLink, augment_neighbors
from .spatial.neighbors import NeighborSet
from .spatial.regions import IndexMap, Region, build_regions

__all__ = [
    'NYC_MANUAL_LINKS',
    'AdjacencyConfig',
    'load_manual_links',
    'AdjacencyError',
    'DuplicateIdentifierError',
    'EmptyNeighborSetWarning',
    'GeometryError',
    'UnknownIdentifierError',
    'AdjacencyMatrix',
    'encode_matrix',
    'AdjacencyResult',
    'align_covariates',
    'build_adjacency',
    'build_adjacency_from_file',
    'extract_neighbors',
    'nearest_links',
    'ManualLink',
    'augment_neighbors',
    'NeighborSet',
    'IndexMap',
    'Region',
    'build_regions',
]
