import logging
import time
from typing import List, Optional

from diagram_service.builder.global_diagram import build_global_diagram
from diagram_service.builder.paths import find_all_paths, validate_path_request
from diagram_service.builder.system_diagram import (
    build_system_diagram,
    require_system_code,
)
from diagram_service.catalog.base import RecordSource
from diagram_service.ir.graph import Graph
from diagram_service.ir.records import SystemRecord

logger = logging.getLogger(__name__)


class DiagramService:
    """
    The four operations exposed to the request layer.

    Every call fetches a fresh snapshot from the record source and builds
    from scratch. Input checks that need no data run before the fetch.
    """

    def __init__(self, source: RecordSource):
        self.source = source

    def get_all_records(self) -> List[SystemRecord]:
        return self.source.fetch_all_system_records()

    def build_single_system_diagram(self, code: Optional[str]) -> Graph:
        require_system_code(code)
        logger.info("Generating system dependencies diagram for system: %s", code)

        graph = build_system_diagram(code, self.get_all_records())

        logger.info(
            "Generated diagram with %d nodes and %d links for system %s",
            len(graph.nodes), len(graph.links), code,
        )
        return graph

    def build_global_diagram(self) -> Graph:
        logger.info("Generating dependency diagram for all systems")

        graph = build_global_diagram(self.get_all_records())

        logger.info(
            "Generated overall diagram with %d nodes and %d links",
            len(graph.nodes), len(graph.links),
        )
        return graph

    def find_all_paths(self, start: Optional[str], end: Optional[str]) -> Graph:
        started = time.monotonic()
        validate_path_request(start, end)
        logger.info("Finding all paths from %s to %s", start, end)

        graph = find_all_paths(start, end, self.get_all_records())

        logger.info(
            "%s from %s to %s in %dms",
            graph.metadata.subject, start, end,
            (time.monotonic() - started) * 1000,
        )
        return graph
