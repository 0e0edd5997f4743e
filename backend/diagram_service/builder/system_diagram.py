from typing import List, Optional

from diagram_service.builder.rules import DiagramComponents, apply_flow
from diagram_service.ir.errors import InvalidArgumentError, SystemNotFoundError
from diagram_service.ir.graph import DiagramMetadata, Graph, Node, NodeCategory
from diagram_service.ir.records import SystemRecord, index_records


def require_system_code(code: Optional[str]) -> None:
    if code is None or not code.strip():
        raise InvalidArgumentError("System code must not be null or blank")


def build_system_diagram(focal_code: str, records: List[SystemRecord]) -> Graph:
    """
    Build the dependency diagram centred on one system.

    The focal system keeps its bare code as node id. Each flow the focal
    record owns contributes its counterpart (and middleware, if any) with
    role-suffixed ids.
    """
    require_system_code(focal_code)

    index = index_records(records)
    focal = index.get(focal_code)
    if focal is None:
        raise SystemNotFoundError(f"System not found: {focal_code}", focal_code)

    components = DiagramComponents(records=index)
    components.add_node(
        Node(
            id=focal_code,
            name=focal.solution_name,
            type=NodeCategory.FOCAL,
        )
    )

    for flow in focal.integration_flows:
        apply_flow(components, focal_code, flow, focal=True)

    metadata = DiagramMetadata(
        subject=focal_code,
        review_code=focal.review_code,
    )
    return components.to_graph(metadata)
