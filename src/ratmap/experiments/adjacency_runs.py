import os
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from ..config import NYC_MANUAL_LINKS, AdjacencyConfig
from ..graph.graph_loader import write_graph
from ..pipeline import build_adjacency_from_file
from ..spatial.links import ManualLink


def run_adjacency_builds(
        data_files: List[str],
        links: Sequence[ManualLink] = NYC_MANUAL_LINKS,
        config: Optional[AdjacencyConfig] = None,
        output_dir: str = "results/adjacency",
        save_graph: bool = False
) -> Dict[str, Any]:
    """
    Build the adjacency matrix for every boundary file and write, per file,
    the labeled matrix CSV (and optionally the graph file) plus a results.json
    summary for all of them.
    """
    results = {}

    for data_file in tqdm(data_files, desc="Building adjacency"):
        name = Path(data_file).stem
        print(f"\nProcessing {name}")

        result = build_adjacency_from_file(data_file, links=links, config=config)
        stats = result.stats()

        os.makedirs(os.path.join(output_dir, name), exist_ok=True)
        matrix_path = os.path.join(output_dir, name, "adjacency.csv")
        result.matrix.to_frame().to_csv(matrix_path)

        if save_graph:
            write_graph(result.neighbors, result.index_map,
                        os.path.join(output_dir, name, "adjacency.graph"))

        results[name] = {
            'matrix': matrix_path,
            'stats': stats,
            'links': [{'label': link.label, 'a': link.a, 'b': link.b} for link in result.links],
            'warnings': [list(w.identifiers) for w in result.warnings],
        }

        if result.isolated:
            print(f"Isolated regions: {', '.join(result.isolated)}")

    os.makedirs(output_dir, exist_ok=True)
    with open(os.path.join(output_dir, "results.json"), "w") as f:
        json.dump(results, f, indent=2)

    return results


if __name__ == "__main__":
    # Example usage
    data_files = ["data/nyc/ZIP_CODE_040114.shp"]
    results = run_adjacency_builds(data_files, config=AdjacencyConfig(group_field="COUNTY"),
                                   save_graph=True)

    # Print summary
    for name, file_results in results.items():
        stats = file_results['stats']
        print(f"\nResults for {name}:")
        print(f"Regions: {stats['num_nodes']}")
        print(f"Edges: {stats['num_edges']} ({stats['geometric_edges']} geometric)")
        print(f"Components: {stats['num_components']}")
        print(f"Isolated: {len(stats['isolated'])}")
