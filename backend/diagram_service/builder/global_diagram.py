from typing import List

from diagram_service.builder.rules import DiagramComponents, apply_flow
from diagram_service.ir.graph import DiagramMetadata, Graph
from diagram_service.ir.records import SystemRecord, index_records


def build_global_diagram(records: List[SystemRecord]) -> Graph:
    """One diagram over every flow of every record, with no focal node."""
    components = DiagramComponents(records=index_records(records))

    for record in records:
        for flow in record.integration_flows:
            apply_flow(components, record.code, flow)

    return components.to_graph(DiagramMetadata())
