"""Tests for graph diagnostics and graph file I/O."""

import networkx as nx

from ratmap.graph.evaluation import cross_group_edges, get_graph_stats, group_edge_summary
from ratmap.graph.graph_loader import load_graph, to_networkx, write_graph
from ratmap.spatial.contiguity import extract_neighbors
from ratmap.spatial.links import augment_neighbors


def _augmented(five_regions, bridge):
    regions, index_map = five_regions
    return regions, index_map, augment_neighbors(extract_neighbors(regions), [bridge], index_map)


class TestGraphStats:
    """Test statistics of the region graph."""

    def test_stats(self, five_regions, bridge):
        _, index_map, neighbors = _augmented(five_regions, bridge)
        stats = get_graph_stats(to_networkx(neighbors, index_map))

        assert stats['num_nodes'] == 5
        assert stats['num_edges'] == 3
        assert not stats['is_connected']
        assert stats['num_components'] == 2
        assert stats['component_sizes'] == [4, 1]
        assert stats['isolated'] == ["10005"]
        assert stats['min_degree'] == 0
        assert stats['max_degree'] == 2

    def test_networkx_node_index(self, five_regions, bridge):
        _, index_map, neighbors = _augmented(five_regions, bridge)
        G = to_networkx(neighbors, index_map)
        assert G.nodes["10003"]["index"] == 3

    def test_empty_graph(self):
        stats = get_graph_stats(nx.Graph())
        assert stats['num_nodes'] == 0


class TestGroupEdges:
    """Test edge counts across group labels."""

    def test_summary(self, five_regions, bridge):
        regions, _, neighbors = _augmented(five_regions, bridge)
        assert group_edge_summary(neighbors, regions) == {("A", "A"): 1, ("A", "B"): 1, ("B", "B"): 1}

    def test_cross_group_edges(self, five_regions, bridge):
        regions, _, neighbors = _augmented(five_regions, bridge)
        assert cross_group_edges(neighbors, regions) == [("10002", "10003")]


class TestGraphFile:
    """Test writing and reading the adjacency-list file."""

    def test_file_layout(self, tmp_path, five_regions, bridge):
        _, index_map, neighbors = _augmented(five_regions, bridge)
        path = tmp_path / "zips.graph"
        write_graph(neighbors, index_map, str(path))

        assert path.read_text().splitlines() == ["5 3", "2", "1 3", "2 4", "3", ""]

    def test_read_back(self, tmp_path, five_regions, bridge):
        _, index_map, neighbors = _augmented(five_regions, bridge)
        path = tmp_path / "out" / "zips.graph"
        write_graph(neighbors, index_map, str(path))

        assert load_graph(str(path), index_map) == neighbors
