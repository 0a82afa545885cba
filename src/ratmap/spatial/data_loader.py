import logging
import os
from typing import Dict, List, Optional, Tuple

import geopandas as gpd

from ..errors import DuplicateIdentifierError, GeometryError
from .regions import IndexMap, Region, normalize_identifier, regions_from_frame

logger = logging.getLogger(__name__)


def load_regions(shapefile_path: str, id_field: str = 'ZIPCODE',
                 group_field: Optional[str] = None,
                 dissolve: bool = True) -> Tuple[List[Region], IndexMap]:
    """
    Load a boundary file (shapefile, GeoJSON, ...) into Regions.

    Several rows may share one identifier (multi-part ZIP codes); with
    ``dissolve`` they are merged into a single geometry, otherwise they are
    reported as DuplicateIdentifierError.
    """
    if not os.path.exists(shapefile_path):
        raise FileNotFoundError(f"Shapefile not found: {shapefile_path}")

    gdf = gpd.read_file(str(shapefile_path))
    logger.info("Read %d feature(s) from %s", len(gdf), shapefile_path)

    if id_field not in gdf.columns:
        raise ValueError(f"Missing identifier column '{id_field}'. "
                         f"Available columns: {[c for c in gdf.columns if c != 'geometry']}")

    missing = gdf.geometry.isna()
    if missing.any():
        raise GeometryError(str(gdf.loc[missing, id_field].iloc[0]), "geometry is missing")

    gdf = gdf.copy()
    gdf[id_field] = [normalize_identifier(v) for v in gdf[id_field]]

    dupes = gdf[id_field][gdf[id_field].duplicated()].unique().tolist()
    if dupes:
        if not dissolve:
            raise DuplicateIdentifierError(dupes)
        logger.info("Dissolving %d identifier(s) with multiple features", len(dupes))
        cols = [id_field] + ([group_field] if group_field in gdf.columns else []) + [gdf.geometry.name]
        gdf = gdf[cols].dissolve(by=id_field, aggfunc='first', as_index=False)

    return regions_from_frame(gdf, id_field, group_field)


def get_group_counts(regions: List[Region]) -> Dict[str, int]:
    """
    Number of regions per group label; regions without a group are counted
    under an empty string.
    """
    counts: Dict[str, int] = {}
    for region in regions:
        key = region.group or ''
        counts[key] = counts.get(key, 0) + 1
    return dict(sorted(counts.items()))
