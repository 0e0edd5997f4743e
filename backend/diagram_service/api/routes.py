import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from diagram_service.catalog import get_record_source
from diagram_service.service import DiagramService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/diagram",
    tags=["diagram"],
)

health_router = APIRouter(tags=["health"])


def get_diagram_service() -> DiagramService:
    return DiagramService(get_record_source())


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


@health_router.get("/health")
def health():
    return {"status": "UP"}


@router.get("/system-dependencies")
def get_system_dependencies(service: DiagramService = Depends(get_diagram_service)) -> List[Dict[str, Any]]:
    logger.info("Received request for system dependencies")
    return [_dump(record) for record in service.get_all_records()]


# Registered before "/{system_code}" so "all" and "path" are not read as codes
@router.get("/system-dependencies/all")
def get_all_system_dependencies_diagram(service: DiagramService = Depends(get_diagram_service)):
    logger.info("Received request for the overall system dependencies diagram")
    return _dump(service.build_global_diagram())


@router.get("/system-dependencies/path")
def find_paths_between_systems(
    start: Optional[str] = None,
    end: Optional[str] = None,
    service: DiagramService = Depends(get_diagram_service),
):
    logger.info("Received request to find paths from %s to %s", start, end)
    return _dump(service.find_all_paths(start, end))


@router.get("/system-dependencies/{system_code}")
def get_system_dependencies_diagram(
    system_code: str,
    service: DiagramService = Depends(get_diagram_service),
):
    logger.info("Received request for system dependencies diagram for system: %s", system_code)
    return _dump(service.build_single_system_diagram(system_code))
