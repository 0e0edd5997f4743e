# Diagram builders
# Turn a snapshot of system records into dependency graphs

from diagram_service.builder.system_diagram import build_system_diagram
from diagram_service.builder.global_diagram import build_global_diagram
from diagram_service.builder.paths import find_all_paths

__all__ = [
    "build_system_diagram",
    "build_global_diagram",
    "find_all_paths",
]
