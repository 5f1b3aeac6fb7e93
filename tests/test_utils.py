"""
Dashboard metrics and the small math helpers.
"""
import math

import networkx as nx
import pytest

from catalog import build_catalog
from utils import as_point, calculate_metric, clamp, distance, satellite_nodes


class TestCalculateMetric:
    @pytest.fixture
    def G(self):
        return build_catalog()

    def test_counts(self, G):
        assert calculate_metric(G, "Areas") == 6
        assert calculate_metric(G, "Connections") == 12

    def test_averages(self, G):
        assert calculate_metric(G, "Avg Energy") == "0.71"
        assert calculate_metric(G, "Avg Score") == "4.03"

    def test_most_connected(self, G):
        assert calculate_metric(G, "Most Connected") == "Work & Purpose"

    def test_empty_graph(self):
        G = nx.Graph()
        assert calculate_metric(G, "Areas") == 0
        assert calculate_metric(G, "Avg Energy") == "0"

    def test_unknown_metric(self, G):
        assert calculate_metric(G, "PageRank") == ""

    def test_error_returns_err(self):
        assert calculate_metric(None, "Areas") == "Err"


class TestHelpers:
    def test_distance(self):
        assert distance((0, 0), (3, 4)) == 5

    def test_clamp(self):
        assert clamp(5, 0, 1, 0.5) == 1
        assert clamp(-5, 0, 1, 0.5) == 0
        assert clamp("0.25", 0, 1, 0.5) == 0.25
        assert clamp(None, 0, 1, 0.5) == 0.5
        assert clamp(float("nan"), 0, 1, 0.5) == 0.5

    def test_as_point(self):
        assert as_point((1, "2")) == (1.0, 2.0)
        assert as_point([3.5, -1]) == (3.5, -1.0)
        assert as_point(None) is None
        assert as_point((1,)) is None
        assert as_point((math.inf, 0)) is None

    def test_satellite_order(self):
        G = build_catalog()
        assert satellite_nodes(G, "work") == ["work:0", "work:1", "work:2"]
