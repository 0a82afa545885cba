"""
Region geometry, contiguity extraction and manual edge augmentation.
"""

from .regions import Region, IndexMap, build_regions, regions_from_frame, parse_geometry, normalize_identifier
from .neighbors import NeighborSet
from .links import ManualLink, augment_neighbors, validate_links
from .contiguity import extract_neighbors, nearest_links
from .data_loader import load_regions, get_group_counts

__all__ = [
    'Region',
    'IndexMap',
    'build_regions',
    'regions_from_frame',
    'parse_geometry',
    'normalize_identifier',
    'NeighborSet',
    'ManualLink',
    'augment_neighbors',
    'validate_links',
    'extract_neighbors',
    'nearest_links',
    'load_regions',
    'get_group_counts'
]
