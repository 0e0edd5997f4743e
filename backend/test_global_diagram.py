from diagram_service.builder.global_diagram import build_global_diagram
from diagram_service.ir.graph import NodeCategory


def _links(graph):
    return [(link.source, link.target) for link in graph.links]


class TestGlobalDiagram:

    def test_empty_snapshot(self):
        graph = build_global_diagram([])

        assert graph.nodes == []
        assert graph.links == []
        assert graph.metadata.subject is None
        assert graph.metadata.middleware_used == []

    def test_every_endpoint_becomes_a_node(self, record, flow):
        records = [
            record("A", [flow("B"), flow("C", "PRODUCER")]),
            record("B", [flow("D")], name="Ledger"),
        ]

        graph = build_global_diagram(records)
        nodes = graph.node_by_id()

        assert set(nodes) == {"A-P", "B-C", "C-P", "A-C", "B-P", "D-C"}
        assert nodes["A-P"].type == NodeCategory.FOUND
        assert nodes["B-C"].name == "Ledger"
        assert nodes["C-P"].type == NodeCategory.EXTERNAL
        assert nodes["D-C"].name == "D"
        assert _links(graph) == [("A-P", "B-C"), ("C-P", "A-C"), ("B-P", "D-C")]

    def test_no_focal_category(self, record, flow):
        graph = build_global_diagram([record("A", [flow("B")]), record("B", [flow("A")])])

        assert all(node.type != NodeCategory.FOCAL for node in graph.nodes)

    def test_shared_middleware_is_one_node(self, record, flow):
        records = [
            record("A", [flow("B", middleware="GW")]),
            record("C", [flow("B", pattern="SOAP", middleware="GW")]),
            record("E", [flow("B", "PRODUCER", middleware="GW")]),
        ]

        graph = build_global_diagram(records)

        ids = graph.node_ids()
        assert ids.count("GW-C") == 1
        assert "GW-P" not in ids
        assert graph.metadata.middleware_used == ["GW-C"]
        assert _links(graph) == [
            ("A-P", "GW-C"), ("GW-C", "B-C"),
            ("C-P", "GW-C"), ("GW-C", "B-C"),
            ("B-P", "GW-C"), ("GW-C", "E-C"),
        ]

    def test_mirrored_flow_shares_middleware_node(self, record, flow):
        records = [
            record("A", [flow("B", "CONSUMER", middleware="GW")]),
            record("B", [flow("A", "PRODUCER", middleware="GW")]),
        ]

        graph = build_global_diagram(records)

        assert graph.node_ids() == ["A-P", "B-C", "GW-C"]
        assert graph.metadata.middleware_used == ["GW-C"]
        assert _links(graph) == [
            ("A-P", "GW-C"), ("GW-C", "B-C"),
            ("A-P", "GW-C"), ("GW-C", "B-C"),
        ]

    def test_node_ids_are_unique(self, record, flow):
        records = [
            record("A", [flow("B"), flow("B"), flow("C", middleware="MQ"), flow("B", "PRODUCER")]),
            record("B", [flow("A", "PRODUCER"), flow("C", middleware="MQ")]),
            record("C", [flow("A", "CONSUMER", middleware="NONE"), flow("Z", "INVALID")]),
        ]

        ids = build_global_diagram(records).node_ids()

        assert len(ids) == len(set(ids))
        assert "Z-C" not in ids and "Z-P" not in ids

    def test_records_without_flows_contribute_nothing(self, record):
        graph = build_global_diagram([record("A"), record("B", [])])

        assert graph.nodes == []
