"""Tests for roundabout component discovery."""
import threading

from checks.roundabout import collect
from core.context import ProcessedMarkers
from graph.model import RoadGraph, UnresolvedEdgeError
from test_utils import make_edge, ring, ring_edges


class TestCollect:
    """Test collect() on rings and chains."""

    def test_ring_returns_every_edge_but_the_seed(self):
        graph = ring([1, 2, 3, 4])
        processed = ProcessedMarkers()

        component, parent_ids = collect(graph.edge(1), graph.connected_edges, processed)

        assert {e.id for e in component} == {2, 3, 4}
        assert sorted(parent_ids) == [2, 3, 4]

    def test_seed_and_component_are_marked_processed(self):
        graph = ring([1, 2, 3, 4])
        processed = ProcessedMarkers()

        collect(graph.edge(1), graph.connected_edges, processed)

        assert list(processed) == [1, 2, 3, 4]

    def test_isolated_edge_has_empty_component(self):
        graph = RoadGraph([make_edge(10, 0, 1)])
        processed = ProcessedMarkers()

        component, parent_ids = collect(graph.edge(10), graph.connected_edges, processed)

        assert component == set()
        assert parent_ids == []
        assert 10 in processed

    def test_non_roundabout_neighbours_are_skipped(self):
        graph = RoadGraph(
            [
                make_edge(1, 0, 1),
                make_edge(2, 1, 2, junction=None, highway="primary"),
                make_edge(3, 2, 3),
            ]
        )
        processed = ProcessedMarkers()

        component, _ = collect(graph.edge(1), graph.connected_edges, processed)

        assert component == set()
        assert 2 not in processed
        assert 3 not in processed

    def test_traversal_passes_through_roundabout_edges_only(self):
        graph = RoadGraph(
            [
                make_edge(1, 0, 1),
                make_edge(2, 1, 2),
                make_edge(3, 2, 3, junction="circular"),
                make_edge(4, 3, 4),
            ]
        )
        processed = ProcessedMarkers()

        component, _ = collect(graph.edge(1), graph.connected_edges, processed)

        assert {e.id for e in component} == {2}

    def test_parent_ids_follow_discovery_with_duplicates(self):
        graph = ring([11, 12, 13], parent_ids=[7, 7, 7])
        processed = ProcessedMarkers()

        _, parent_ids = collect(graph.edge(11), graph.connected_edges, processed)

        assert parent_ids == [7, 7]

    def test_long_ring_does_not_recurse(self):
        ids = list(range(1, 5001))
        graph = ring(ids)
        processed = ProcessedMarkers()

        component, _ = collect(graph.edge(1), graph.connected_edges, processed)

        assert len(component) == 4999


class TestCollectProcessedMarkers:
    """Test interaction with the run-scoped processed-marker set."""

    def test_already_processed_seed_yields_empty_and_no_mutation(self):
        graph = ring([1, 2, 3, 4])
        processed = ProcessedMarkers()
        collect(graph.edge(1), graph.connected_edges, processed)
        size = len(processed)

        component, parent_ids = collect(graph.edge(1), graph.connected_edges, processed)

        assert component == set()
        assert parent_ids == []
        assert len(processed) == size

    def test_second_seed_in_same_cluster_is_consumed(self):
        graph = RoadGraph([make_edge(1, 0, 1), make_edge(2, 1, 2), make_edge(3, 2, 3)])
        processed = ProcessedMarkers()

        first, _ = collect(graph.edge(1), graph.connected_edges, processed)
        second, _ = collect(graph.edge(3), graph.connected_edges, processed)

        assert {e.id for e in first} == {2, 3}
        assert second == set()

    def test_edge_claimed_earlier_is_excluded(self):
        # 2 is shared by the chains through 1 and through 3
        graph = RoadGraph([make_edge(1, 0, 1), make_edge(2, 1, 2), make_edge(3, 2, 3), make_edge(4, 3, 4)])
        processed = ProcessedMarkers()
        processed.mark_processed(2)

        from_one, _ = collect(graph.edge(1), graph.connected_edges, processed)
        from_three, _ = collect(graph.edge(3), graph.connected_edges, processed)

        assert from_one == set()
        assert {e.id for e in from_three} == {4}

    def test_components_never_share_edges(self):
        edges = ring_edges([1, 2, 3, 4]) + ring_edges([5, 6, 7], first_node=100)
        graph = RoadGraph(edges)
        processed = ProcessedMarkers()

        seen = set()
        for edge in graph.edges():
            component, _ = collect(edge, graph.connected_edges, processed)
            ids = {e.id for e in component}
            assert not ids & seen
            seen |= ids

        assert seen == {2, 3, 4, 6, 7}


class TestCollectUnresolvedAdjacency:
    """Test graceful handling of edges the graph cannot resolve."""

    def test_unresolved_edge_stops_growth(self):
        graph = RoadGraph([make_edge(1, 0, 1), make_edge(2, 1, 2), make_edge(3, 2, 3)])

        def connected_edges(edge):
            if edge.id == 2:
                raise UnresolvedEdgeError("node index missing")
            return graph.connected_edges(edge)

        component, _ = collect(graph.edge(1), connected_edges, ProcessedMarkers())

        assert {e.id for e in component} == {2}

    def test_seed_outside_graph_has_empty_component(self):
        graph = RoadGraph([make_edge(1, 0, 1)])
        stranger = make_edge(99, 0, 1)

        component, parent_ids = collect(stranger, graph.connected_edges, ProcessedMarkers())

        assert component == set()
        assert parent_ids == []


class TestProcessedMarkers:
    """Test the processed-marker set itself."""

    def test_claim_is_insert_if_absent(self):
        processed = ProcessedMarkers()
        assert processed.claim(5) is True
        assert processed.claim(5) is False
        assert processed.is_processed(5)

    def test_concurrent_claims_succeed_once_per_id(self):
        processed = ProcessedMarkers()
        wins = []
        lock = threading.Lock()

        def worker():
            for identifier in range(200):
                if processed.claim(identifier):
                    with lock:
                        wins.append(identifier)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(wins) == list(range(200))
        assert len(processed) == 200
