"""Shared fixtures: small box layouts standing in for ZIP code polygons."""

import geopandas as gpd
import pytest
from shapely.geometry import box

from ratmap.spatial.links import ManualLink
from ratmap.spatial.regions import build_regions

FIVE_IDS = ["10001", "10002", "10003", "10004", "10005"]
FIVE_GROUPS = ["A", "A", "B", "B", "C"]


def five_geometries():
    # {10001, 10002} touch, {10003, 10004} touch, 10005 is far away
    return [
        box(0, 0, 1, 1),
        box(1, 0, 2, 1),
        box(5, 0, 6, 1),
        box(6, 0, 7, 1),
        box(10, 10, 11, 11),
    ]


@pytest.fixture
def five_regions():
    return build_regions(FIVE_IDS, five_geometries(), FIVE_GROUPS)


@pytest.fixture
def bridge():
    return ManualLink("Test Bridge", "10002", "10003")


@pytest.fixture
def five_frame():
    return gpd.GeoDataFrame({"ZIPCODE": FIVE_IDS, "BOROUGH": FIVE_GROUPS},
                            geometry=five_geometries())


@pytest.fixture
def five_geojson(tmp_path, five_frame):
    path = tmp_path / "zips.geojson"
    five_frame.to_file(path, driver="GeoJSON")
    return str(path)
