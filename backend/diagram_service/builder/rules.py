"""
Node and link construction rules shared by every diagram builder.

Id conventions:
- the sending side of a relationship is suffixed "-P", the receiving side "-C"
- the focal system of a single-system diagram keeps its bare code
- a middleware node in a single-system diagram takes the suffix of the
  counterpart it faces; elsewhere it takes the receiving side's suffix
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from diagram_service.ir.graph import (
    DiagramMetadata,
    Graph,
    Link,
    Node,
    NodeCategory,
    STANDARD_CRITICALITY,
)
from diagram_service.ir.records import FlowRole, IntegrationFlow, SystemRecord

logger = logging.getLogger(__name__)


class Side(Enum):
    PRODUCER = "-P"
    CONSUMER = "-C"


def node_id(code: str, side: Side) -> str:
    return f"{code}{side.value}"


def middleware_id(name: str, side: Side) -> str:
    return f"{name}{side.value}"


def counterpart_side(role: FlowRole) -> Side:
    if role is FlowRole.CONSUMER:
        return Side.CONSUMER
    if role is FlowRole.PRODUCER:
        return Side.PRODUCER
    raise ValueError(f"no side for role {role}")


def owner_side(role: FlowRole) -> Side:
    if counterpart_side(role) is Side.CONSUMER:
        return Side.PRODUCER
    return Side.CONSUMER


def flow_direction(owner_code: str, flow: IntegrationFlow) -> Optional[tuple]:
    """
    Return (sender, receiver) system codes for a flow, or None when the
    counterpart role is invalid.
    """
    role = flow.role
    if role is FlowRole.CONSUMER:
        return owner_code, flow.counterpart_code
    if role is FlowRole.PRODUCER:
        return flow.counterpart_code, owner_code
    return None


def flow_link(source: str, target: str, flow: IntegrationFlow, role: Optional[str]) -> Link:
    return Link(
        source=source,
        target=target,
        pattern=flow.pattern,
        frequency=flow.frequency,
        role=role,
        middleware=flow.middleware_name,
    )


def system_node(node_id_: str, code: str, records: Dict[str, SystemRecord]) -> Node:
    record = records.get(code)
    if record is None:
        return Node(id=node_id_, name=code, type=NodeCategory.EXTERNAL)
    return Node(id=node_id_, name=record.solution_name, type=NodeCategory.FOUND)


def middleware_node(node_id_: str, name: str) -> Node:
    return Node(
        id=node_id_,
        name=name,
        type=NodeCategory.MIDDLEWARE,
        criticality=STANDARD_CRITICALITY,
    )


@dataclass
class DiagramComponents:
    """Running node/link collections for one diagram under construction."""
    records: Dict[str, SystemRecord]
    nodes: Dict[str, Node] = field(default_factory=dict)
    links: List[Link] = field(default_factory=list)

    def has_node(self, node_id_: str) -> bool:
        return node_id_ in self.nodes

    def add_node(self, node: Node) -> Node:
        self.nodes.setdefault(node.id, node)
        return self.nodes[node.id]

    def add_system_node(self, node_id_: str, code: str) -> None:
        if self.has_node(node_id_):
            return
        self.add_node(system_node(node_id_, code, self.records))

    def add_middleware_node(self, node_id_: str, name: str) -> None:
        if self.has_node(node_id_):
            return
        self.add_node(middleware_node(node_id_, name))

    def middleware_used(self) -> List[str]:
        return [
            node.id for node in self.nodes.values()
            if node.type == NodeCategory.MIDDLEWARE
        ]

    def to_graph(self, metadata: DiagramMetadata) -> Graph:
        metadata.middleware_used = self.middleware_used()
        return Graph(
            nodes=list(self.nodes.values()),
            links=list(self.links),
            metadata=metadata,
        )


def apply_flow(
    components: DiagramComponents,
    owner_code: str,
    flow: IntegrationFlow,
    focal: bool = False,
) -> bool:
    """
    Add the nodes and links for one integration flow owned by *owner_code*.

    With ``focal=True`` the owner is the focal node, which must already be
    present under its bare code. Returns False when the flow was skipped
    because of an invalid counterpart role.
    """
    role = flow.role
    if role is FlowRole.INVALID:
        logger.debug(
            "Skipping flow %s -> %s with invalid role %r",
            owner_code, flow.counterpart_code, flow.counterpart_role,
        )
        return False

    if focal:
        owner_node_id = owner_code
    else:
        owner_node_id = node_id(owner_code, owner_side(role))
        components.add_system_node(owner_node_id, owner_code)

    counterpart_node_id = node_id(flow.counterpart_code, counterpart_side(role))
    components.add_system_node(counterpart_node_id, flow.counterpart_code)

    if role is FlowRole.CONSUMER:
        source, target = owner_node_id, counterpart_node_id
    else:
        source, target = counterpart_node_id, owner_node_id

    middleware = flow.middleware_name
    if middleware is None:
        components.links.append(flow_link(source, target, flow, flow.counterpart_role))
        return True

    # Focal hubs face the counterpart; elsewhere they face the receiver.
    hub_side = counterpart_side(role) if focal else Side.CONSUMER
    hub = middleware_id(middleware, hub_side)
    components.add_middleware_node(hub, middleware)
    components.links.append(flow_link(source, hub, flow, FlowRole.PRODUCER.value))
    components.links.append(flow_link(hub, target, flow, FlowRole.CONSUMER.value))
    return True
