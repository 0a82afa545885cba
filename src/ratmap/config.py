"""Configuration settings for building the NYC ZIP adjacency structure."""

import json
import os
from dataclasses import dataclass
from typing import List, Optional

from .spatial.contiguity import CONTIGUITY_METHODS
from .spatial.links import ManualLink


@dataclass(frozen=True)
class AdjacencyConfig:
    contiguity: str = 'intersects'      # intersects, queen or rook
    id_field: str = 'ZIPCODE'
    group_field: Optional[str] = None   # e.g. BOROUGH or COUNTY
    dissolve: bool = True               # merge multi-part ZIP codes
    connect_islands: bool = False       # link isolated ZIPs to the nearest centroid

    def __post_init__(self):
        if self.contiguity not in CONTIGUITY_METHODS:
            raise ValueError(f"Unknown contiguity method '{self.contiguity}', "
                             f"expected one of {CONTIGUITY_METHODS}")


# Crossings between ZIP codes whose polygons do not touch
NYC_MANUAL_LINKS = (
    ManualLink("Verrazzano-Narrows Bridge", "10305", "11209"),
    ManualLink("Brooklyn Bridge", "10038", "11201"),
    ManualLink("Manhattan Bridge", "10002", "11201"),
    ManualLink("Williamsburg Bridge", "10002", "11211"),
    ManualLink("Hugh L. Carey Tunnel", "10004", "11231"),
    ManualLink("Queensboro Bridge", "10065", "11101"),
    ManualLink("Queens-Midtown Tunnel", "10016", "11101"),
    ManualLink("RFK Bridge (Queens)", "10035", "11102"),
    ManualLink("RFK Bridge (Bronx)", "10035", "10454"),
    ManualLink("Throgs Neck Bridge", "10465", "11360"),
    ManualLink("Bronx-Whitestone Bridge", "10465", "11357"),
    ManualLink("Roosevelt Island Bridge", "10044", "11101"),
    ManualLink("Roosevelt Island Tramway", "10044", "10065"),
    ManualLink("Staten Island Ferry", "10301", "10004"),
    ManualLink("Cross Bay Bridge", "11693", "11414"),
    ManualLink("Marine Parkway Bridge", "11697", "11234"),
)


def load_manual_links(path: str) -> List[ManualLink]:
    """
    Read manual links from a JSON file holding a list of
    ``{"label": ..., "a": ..., "b": ...}`` objects.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Manual link file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Expected a list of links in {path}")

    links = []
    for i, rec in enumerate(records):
        try:
            links.append(ManualLink(str(rec['label']), rec['a'], rec['b']))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed manual link #{i} in {path}: {rec!r}") from e
    return links
