"""
All-paths search between two systems.

The integration graph uses bare system codes and bare middleware names as
node ids. A flow routed through middleware becomes two hops that share the
middleware node, so one middleware name is one node no matter how many
flows cross it. Paths are node sequences: two flows between the same pair
of nodes give one hop, so they never count as two paths.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from diagram_service.builder.rules import (
    DiagramComponents,
    flow_direction,
    flow_link,
)
from diagram_service.ir.errors import InvalidArgumentError, SystemNotFoundError
from diagram_service.ir.graph import DiagramMetadata, Graph
from diagram_service.ir.records import (
    FlowRole,
    IntegrationFlow,
    SystemRecord,
    index_records,
)

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " → "
NO_PATHS_MESSAGE = "No paths found"


@dataclass(frozen=True, eq=False)
class Hop:
    source: str
    target: str
    flow: IntegrationFlow
    role: Optional[str]
    source_is_middleware: bool = False
    target_is_middleware: bool = False


Path = Tuple[Hop, ...]


@dataclass
class IntegrationGraph:
    adjacency: Dict[str, List[Hop]] = field(default_factory=dict)
    _pairs: Set[Tuple[str, str]] = field(default_factory=set, repr=False)

    def add_hop(self, hop: Hop) -> None:
        # One hop per (source, target); the first flow stating it is kept
        if (hop.source, hop.target) in self._pairs:
            return
        self._pairs.add((hop.source, hop.target))
        self.adjacency.setdefault(hop.source, []).append(hop)

    def neighbours(self, node: str) -> List[Hop]:
        return self.adjacency.get(node, [])


# ------------------------------------------------------------------ #
# Validation
# ------------------------------------------------------------------ #

def _require(code: Optional[str], field_name: str) -> None:
    if code is None or not code.strip():
        raise InvalidArgumentError(f"{field_name} cannot be null or empty")


def validate_path_request(start: Optional[str], end: Optional[str]) -> None:
    _require(start, "Start system")
    _require(end, "End system")
    if start == end:
        raise InvalidArgumentError("Start and end systems cannot be the same")


def _require_known(code: str, records: Dict[str, SystemRecord], label: str) -> None:
    if code not in records:
        raise SystemNotFoundError(f"{label} '{code}' not found", code)


# ------------------------------------------------------------------ #
# Graph construction
# ------------------------------------------------------------------ #

def build_integration_graph(records: List[SystemRecord]) -> IntegrationGraph:
    graph = IntegrationGraph()

    for record in records:
        for flow in record.integration_flows:
            direction = flow_direction(record.code, flow)
            if direction is None:
                continue
            sender, receiver = direction

            middleware = flow.middleware_name
            if middleware is None:
                graph.add_hop(Hop(sender, receiver, flow, flow.counterpart_role))
                continue

            graph.add_hop(
                Hop(sender, middleware, flow, FlowRole.PRODUCER.value,
                    target_is_middleware=True)
            )
            graph.add_hop(
                Hop(middleware, receiver, flow, FlowRole.CONSUMER.value,
                    source_is_middleware=True)
            )

    return graph


# ------------------------------------------------------------------ #
# Search
# ------------------------------------------------------------------ #

def enumerate_paths(graph: IntegrationGraph, start: str, end: str) -> List[Path]:
    """
    Return every simple path from *start* to *end*, in depth-first order.

    Each stack frame holds the path so far and the set of nodes on it, so a
    node can appear in several discovered paths but never twice in one.
    """
    if start == end:
        return [()]

    found: List[Path] = []
    stack = [((), frozenset([start]), iter(graph.neighbours(start)))]

    while stack:
        path, on_path, pending = stack[-1]
        hop = next(pending, None)
        if hop is None:
            stack.pop()
            continue
        if hop.target in on_path:
            continue

        extended = path + (hop,)
        if hop.target == end:
            found.append(extended)
            continue

        stack.append(
            (extended, on_path | {hop.target}, iter(graph.neighbours(hop.target)))
        )

    return found


def format_path_count(count: int) -> str:
    if count == 0:
        return NO_PATHS_MESSAGE
    if count == 1:
        return "1 path found"
    return f"{count} paths found"


def fold_paths(paths: List[Path], records: Dict[str, SystemRecord]) -> DiagramComponents:
    """Union the nodes of every path; each hop of each path becomes a link."""
    components = DiagramComponents(records=records)

    for path in paths:
        for hop in path:
            for name, is_middleware in (
                (hop.source, hop.source_is_middleware),
                (hop.target, hop.target_is_middleware),
            ):
                if is_middleware:
                    components.add_middleware_node(name, name)
                else:
                    components.add_system_node(name, name)

            components.links.append(flow_link(hop.source, hop.target, hop.flow, hop.role))

    return components


def find_all_paths(start: Optional[str], end: Optional[str], records: List[SystemRecord]) -> Graph:
    validate_path_request(start, end)

    index = index_records(records)
    _require_known(start, index, "Start system")
    _require_known(end, index, "End system")

    graph = build_integration_graph(records)
    paths = enumerate_paths(graph, start, end)

    if not paths:
        logger.warning("No paths found from %s to %s", start, end)

    metadata = DiagramMetadata(
        subject=format_path_count(len(paths)),
        route=f"{start}{PATH_SEPARATOR}{end}",
    )
    return fold_paths(paths, index).to_graph(metadata)
