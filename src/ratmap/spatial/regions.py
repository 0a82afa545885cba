from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import geopandas as gpd
import numpy as np
import pandas as pd
from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon, shape
from shapely.geometry.base import BaseGeometry

from ..errors import DuplicateIdentifierError, GeometryError, UnknownIdentifierError


@dataclass(frozen=True)
class Region:
    """One areal unit (a ZIP code) with its boundary and matrix index."""
    identifier: str
    geometry: BaseGeometry
    group: Optional[str]
    index: int


class IndexMap:
    """
    Bidirectional identifier <-> index mapping.

    Indices are 1-based and follow the sorted order of the identifiers, so the
    same identifier set always produces the same assignment. Matrix rows use
    the 0-based ``position_of``.
    """

    def __init__(self, identifiers: Iterable[str]):
        ids = [str(i) for i in identifiers]
        dupes = [i for i, c in Counter(ids).items() if c > 1]
        if dupes:
            raise DuplicateIdentifierError(dupes)
        self._identifiers: Tuple[str, ...] = tuple(sorted(ids))
        self._index: Dict[str, int] = {rid: i + 1 for i, rid in enumerate(self._identifiers)}

    @property
    def identifiers(self) -> Tuple[str, ...]:
        return self._identifiers

    def index_of(self, identifier: str) -> int:
        try:
            return self._index[identifier]
        except KeyError:
            raise UnknownIdentifierError(identifier) from None

    def position_of(self, identifier: str) -> int:
        return self.index_of(identifier) - 1

    def identifier_of(self, index: int) -> str:
        if not 1 <= index <= len(self._identifiers):
            raise UnknownIdentifierError(index)
        return self._identifiers[index - 1]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({'identifier': list(self._identifiers),
                             'index': list(range(1, len(self._identifiers) + 1))})

    def __contains__(self, identifier) -> bool:
        return identifier in self._index

    def __len__(self) -> int:
        return len(self._identifiers)

    def __iter__(self):
        return iter(self._identifiers)

    def __eq__(self, other) -> bool:
        return isinstance(other, IndexMap) and self._identifiers == other._identifiers

    def __repr__(self) -> str:
        return f"IndexMap(n={len(self)})"


def parse_geometry(value: Any, identifier: Optional[str] = None) -> BaseGeometry:
    """
    Turn a shapely geometry, WKT string or GeoJSON-like mapping into a
    valid, non-empty Polygon or MultiPolygon.
    """
    if value is None:
        raise GeometryError(identifier, "geometry is missing")
    try:
        if isinstance(value, BaseGeometry):
            geom = value
        elif isinstance(value, str):
            geom = wkt.loads(value)
        elif isinstance(value, Mapping):
            geom = shape(value)
        else:
            raise GeometryError(identifier, f"unsupported geometry type {type(value).__name__}")
    except (ShapelyError, ValueError, TypeError, AttributeError, KeyError) as e:
        raise GeometryError(identifier, f"could not parse geometry ({e})") from e

    if geom.is_empty:
        raise GeometryError(identifier, "geometry is empty")
    if not isinstance(geom, (Polygon, MultiPolygon)):
        raise GeometryError(identifier, f"expected a polygon, got {geom.geom_type}")
    if not geom.is_valid:
        raise GeometryError(identifier, "geometry is not valid")
    return geom


def normalize_identifier(value: Any) -> str:
    """
    Region identifier as a string. Whole floats (ZIP columns read as float
    because of a null somewhere) lose their trailing ``.0``.
    """
    if pd.isna(value):
        raise ValueError("Region identifier is missing")
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        value = int(value)
    return str(value).strip()


def build_regions(identifiers: Sequence[Any], geometries: Sequence[Any],
                  groups: Optional[Sequence[Any]] = None) -> Tuple[List[Region], IndexMap]:
    """
    Build Regions sorted by identifier together with their IndexMap.

    Any malformed geometry aborts the whole batch with GeometryError.
    """
    if len(identifiers) != len(geometries):
        raise ValueError("identifiers and geometries must have the same length")
    if groups is not None and len(groups) != len(identifiers):
        raise ValueError("groups must have the same length as identifiers")

    ids = [normalize_identifier(i) for i in identifiers]
    index_map = IndexMap(ids)

    regions = []
    for pos, rid in enumerate(ids):
        geom = parse_geometry(geometries[pos], rid)
        group = None
        if groups is not None and not pd.isna(groups[pos]):
            group = str(groups[pos])
        regions.append(Region(rid, geom, group, index_map.index_of(rid)))

    regions.sort(key=lambda r: r.index)
    return regions, index_map


def regions_from_frame(gdf: gpd.GeoDataFrame, id_field: str,
                       group_field: Optional[str] = None) -> Tuple[List[Region], IndexMap]:
    """Build Regions from the rows of a GeoDataFrame."""
    if id_field not in gdf.columns:
        raise ValueError(f"Missing identifier column '{id_field}'. "
                         f"Available columns: {[c for c in gdf.columns if c != gdf.geometry.name]}")
    if group_field is not None and group_field not in gdf.columns:
        raise ValueError(f"Missing group column '{group_field}'")

    groups = gdf[group_field].tolist() if group_field else None
    return build_regions(gdf[id_field].tolist(), gdf.geometry.tolist(), groups)


def regions_to_frame(regions: Sequence[Region]) -> gpd.GeoDataFrame:
    """GeoDataFrame indexed by identifier, rows in the given order."""
    return gpd.GeoDataFrame(
        {'group': [r.group for r in regions], 'index': [r.index for r in regions]},
        geometry=[r.geometry for r in regions],
        index=pd.Index([r.identifier for r in regions], name='identifier'),
    )
